"""
Game State - The value passed into and returned from every engine call.

Design principles:
- Immutable: every accepted move produces a new GameState
- Closed record: all fields always present (None for "not set")
- Self-contained: no references to shared mutable data
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .board import Board, Cell
from .errors import UnknownDifficultyError


class Player(str, Enum):
    """The two sides of a game. The user always moves first."""
    USER = "user"
    AI = "ai"

    @property
    def opponent(self) -> Player:
        return Player.AI if self is Player.USER else Player.USER

    @property
    def mark(self) -> Cell:
        return Cell.X if self is Player.USER else Cell.O


class Difficulty(str, Enum):
    """AI difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Any) -> Difficulty:
        """Coerce a raw value to a Difficulty, raising UnknownDifficultyError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownDifficultyError(value) from None


class GameResult(str, Enum):
    """Outcome of a game so far."""
    IN_PROGRESS = "in_progress"
    USER_WIN = "user_win"
    AI_WIN = "ai_win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    The engine never retains a GameState across calls; the caller owns it
    and persists it between turns.
    """
    board: Board
    current_player: Player
    moves: int
    difficulty: Difficulty
    result: GameResult = GameResult.IN_PROGRESS
    winner: Player | None = None
    winning_line: tuple[int, int, int] | None = None
    last_ai_move: int | None = None

    @property
    def is_over(self) -> bool:
        return self.result.is_terminal

    @property
    def is_user_turn(self) -> bool:
        return not self.is_over and self.current_player is Player.USER

    @property
    def is_ai_turn(self) -> bool:
        return not self.is_over and self.current_player is Player.AI

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


def create_initial_game_state(difficulty: Difficulty | str = Difficulty.MEDIUM) -> GameState:
    """Create the starting state of a new game: empty board, user to move."""
    return GameState(
        board=Board.empty(),
        current_player=Player.USER,
        moves=0,
        difficulty=Difficulty.parse(difficulty),
        result=GameResult.IN_PROGRESS,
        winner=None,
        winning_line=None,
        last_ai_move=None,
    )
