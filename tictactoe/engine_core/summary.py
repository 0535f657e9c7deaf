"""
Summaries - Read-only views derived from game values.

Nothing here feeds back into decisions; these exist for the surrounding
service (stats screens, history views, debugging).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .board import Board, Cell
from .state import GameState, Player


@dataclass
class GameStats:
    """Summary of a game, typically read once it is over."""
    total_moves: int
    user_moves: int
    ai_moves: int
    winner: Player | None
    result: str
    difficulty: str
    winning_line: tuple[int, int, int] | None
    is_completed: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMoves": self.total_moves,
            "userMoves": self.user_moves,
            "aiMoves": self.ai_moves,
            "winner": self.winner.value if self.winner else None,
            "result": self.result,
            "difficulty": self.difficulty,
            "winningLine": list(self.winning_line) if self.winning_line else None,
            "isCompleted": self.is_completed,
        }


def get_game_stats(state: GameState) -> GameStats:
    # The user always moves first, so the user owns the odd move.
    return GameStats(
        total_moves=state.moves,
        user_moves=(state.moves + 1) // 2,
        ai_moves=state.moves // 2,
        winner=state.winner,
        result=state.result.value,
        difficulty=state.difficulty.value,
        winning_line=state.winning_line,
        is_completed=state.is_over,
    )


_SYMBOLS = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}


def get_board_display(board: Board) -> str:
    """Render the board as text. Debug only."""
    display = "\n"
    for i in range(0, 9, 3):
        row = " | ".join(_SYMBOLS[cell] for cell in board.cells[i:i + 3])
        display += f" {row} \n"
        if i < 6:
            display += "---|---|---\n"
    return display


# ============================================================================
# Move history
# ============================================================================

# Keyed by the player's stored value ("user" / "ai")
_PLAYERS_BY_VALUE = {player.value: player for player in Player}


@dataclass(frozen=True)
class MoveRecord:
    """
    One stored move.

    The persistence layer owns storing and fetching these; the engine
    only summarizes them. A player value other than "user" or "ai" is
    kept as the raw string.
    """
    player: Player | str
    position: int
    move_number: int
    timestamp: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MoveRecord:
        """Accepts both camelCase and storage column names."""
        move_number = data.get("moveNumber", data.get("move_number"))
        raw = data["player"]
        return cls(
            player=_PLAYERS_BY_VALUE.get(getattr(raw, "value", raw), raw),
            position=data["position"],
            move_number=move_number,
            timestamp=data.get("timestamp"),
        )


@dataclass
class MoveHistoryAnalysis:
    """Aggregated view of a game's move list."""
    total_moves: int = 0
    player_moves: list[dict[str, Any]] = field(default_factory=list)
    ai_moves: list[dict[str, Any]] = field(default_factory=list)
    game_flow: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMoves": self.total_moves,
            "playerMoves": self.player_moves,
            "aiMoves": self.ai_moves,
            "gameFlow": self.game_flow,
        }


def analyze_move_history(
    moves: Iterable[MoveRecord | Mapping[str, Any]] | None,
) -> MoveHistoryAnalysis:
    """
    Summarize an ordered list of moves.

    Records keep their input order; nothing is re-sorted.
    """
    if not moves:
        return MoveHistoryAnalysis()

    records = [
        m if isinstance(m, MoveRecord) else MoveRecord.from_mapping(m)
        for m in moves
    ]

    def side_entry(record: MoveRecord) -> dict[str, Any]:
        return {
            "position": record.position,
            "moveNumber": record.move_number,
            "timestamp": record.timestamp,
        }

    return MoveHistoryAnalysis(
        total_moves=len(records),
        player_moves=[side_entry(r) for r in records if r.player is Player.USER],
        ai_moves=[side_entry(r) for r in records if r.player is Player.AI],
        game_flow=[
            {
                "player": getattr(r.player, "value", r.player),
                "position": r.position,
                "moveNumber": r.move_number,
            }
            for r in records
        ],
    )
