"""
State Schema - Validation and (de)serialization of stored game values.

Exports:
- GameStateModel / MoveRecordModel: Pydantic wire schemas
- validate_game_state: Structural check that never raises
- check_invariants: Semantic check against legal play
- state_from_dict / state_to_dict: Round-trip to the stored form
"""

from .models import GameStateModel, MoveRecordModel
from .validation import (
    GameStateValidationError,
    ValidationResult,
    validate_game_state,
    check_invariants,
    state_from_dict,
    state_to_dict,
    parse_move_history,
)

__all__ = [
    "GameStateModel",
    "MoveRecordModel",
    "GameStateValidationError",
    "ValidationResult",
    "validate_game_state",
    "check_invariants",
    "state_from_dict",
    "state_to_dict",
    "parse_move_history",
]
