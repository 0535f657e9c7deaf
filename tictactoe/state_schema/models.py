"""
Pydantic Schemas for stored game values.

These models define the wire shape of a game as the surrounding service
stores it (e.g. a JSON column) and reads it back:

    {
        "board": ["X", null, "O", ...],   # exactly 9 cells
        "currentPlayer": "user" | "ai",
        "moves": 0-9,
        "difficulty": "easy" | "medium" | "hard",
        "result": "in_progress" | "user_win" | "ai_win" | "draw",
        "winner": "user" | "ai" | null,
        "winningLine": [a, b, c] | null,
        "lastAiMove": 0-8 | null
    }

snake_case field names are accepted as well.
"""

from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel

from ..engine_core.board import BOARD_SIZE
from ..engine_core.state import Difficulty, GameResult, Player
from ..engine_core.summary import MoveRecord


class GameStateModel(BaseModel):
    """Structural schema of a stored GameState."""
    board: list[Optional[Literal["X", "O"]]] = Field(
        min_length=BOARD_SIZE,
        max_length=BOARD_SIZE,
        description="Row-major cells: 'X' (user), 'O' (ai) or null",
    )
    current_player: Player
    moves: StrictInt = Field(ge=0, le=BOARD_SIZE)
    difficulty: Difficulty
    result: GameResult
    winner: Optional[Player] = None
    winning_line: Optional[tuple[int, int, int]] = None
    last_ai_move: Optional[StrictInt] = Field(
        None,
        ge=0,
        le=BOARD_SIZE - 1,
        validation_alias=AliasChoices("lastAiMove", "lastAIMove", "last_ai_move"),
        serialization_alias="lastAiMove",
    )

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class MoveRecordModel(BaseModel):
    """One stored move, as fetched from the persistence layer."""
    player: Player
    position: StrictInt = Field(ge=0, le=BOARD_SIZE - 1)
    move_number: int = Field(
        ge=1,
        le=BOARD_SIZE,
        validation_alias=AliasChoices("moveNumber", "move_number"),
        serialization_alias="moveNumber",
    )
    timestamp: Optional[Any] = None

    def to_record(self) -> MoveRecord:
        return MoveRecord(
            player=self.player,
            position=self.position,
            move_number=self.move_number,
            timestamp=self.timestamp,
        )
