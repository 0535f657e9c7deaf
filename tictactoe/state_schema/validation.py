"""
State Validation - Checks for game values arriving from storage or transport.

Two levels:
1. Structure: required fields present, 9 legal cells, enums in range
   (validate_game_state)
2. Semantics: the state could have been reached by legal play
   (check_invariants)

state_from_dict applies both and builds a GameState.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from ..engine_core.board import Board, Cell
from ..engine_core.rules import WIN_LINES, get_game_result
from ..engine_core.state import GameResult, GameState, Player
from ..engine_core.summary import MoveRecord
from .models import GameStateModel, MoveRecordModel


class GameStateValidationError(Exception):
    """Raised when a stored game value is malformed or unreachable."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Game state validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def _parse(candidate: Any) -> GameStateModel:
    if isinstance(candidate, GameState):
        return GameStateModel.model_validate(state_to_dict(candidate))
    if isinstance(candidate, (str, bytes)):
        return GameStateModel.model_validate_json(candidate)
    return GameStateModel.model_validate(candidate)


def validate_game_state(candidate: Any) -> bool:
    """
    Structural well-formedness check.

    Accepts a mapping, a JSON string or a GameState. Never raises.
    """
    try:
        _parse(candidate)
    except ValidationError:
        return False
    return True


def check_invariants(state: GameState) -> ValidationResult:
    """
    Check that a state is consistent with legal play.

    Returns ValidationResult with every violated invariant listed.
    """
    errors: list[str] = []
    warnings: list[str] = []
    board = state.board

    filled = board.filled_count
    if state.moves != filled:
        errors.append(f"moves is {state.moves} but board has {filled} marks")

    x_count = sum(1 for cell in board if cell is Cell.X)
    o_count = sum(1 for cell in board if cell is Cell.O)
    if x_count not in (o_count, o_count + 1):
        errors.append(f"mark counts impossible with user moving first (X={x_count}, O={o_count})")

    derived = get_game_result(board)
    if state.result is not derived:
        errors.append(f"result is {state.result.value} but board shows {derived.value}")

    if state.result is GameResult.IN_PROGRESS:
        if state.winner is not None:
            errors.append("winner set while game is in progress")
        if state.winning_line is not None:
            errors.append("winningLine set while game is in progress")
        expected_player = Player.USER if x_count == o_count else Player.AI
        if state.current_player is not expected_player:
            errors.append(f"it should be {expected_player.value}'s turn")
    else:
        expected_winner = {
            GameResult.USER_WIN: Player.USER,
            GameResult.AI_WIN: Player.AI,
            GameResult.DRAW: None,
        }[state.result]
        if state.winner is not expected_winner:
            errors.append(f"winner does not match result {state.result.value}")

        if expected_winner is None:
            if state.winning_line is not None:
                errors.append("winningLine set on a drawn game")
        elif tuple(state.winning_line or ()) not in WIN_LINES:
            errors.append(f"winningLine {state.winning_line} is not a winning line")
        elif any(board[i] is not expected_winner.mark for i in state.winning_line):
            errors.append(f"winningLine {state.winning_line} is not held by {expected_winner.value}")

        # The side that made the final move keeps the turn
        last_mover = Player.USER if filled % 2 == 1 else Player.AI
        if filled and state.current_player is not last_mover:
            errors.append(f"current player should stay {last_mover.value} after the final move")

    if state.last_ai_move is not None and board[state.last_ai_move] is not Cell.O:
        errors.append(f"lastAiMove {state.last_ai_move} does not hold an AI mark")
    elif state.last_ai_move is None and o_count:
        warnings.append("lastAiMove missing although the AI has moved")

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def state_from_dict(data: Mapping[str, Any] | str | bytes) -> GameState:
    """
    Build a GameState from its stored form.

    Raises GameStateValidationError if the value is malformed or could not
    have been reached by legal play.
    """
    try:
        model = _parse(data)
    except ValidationError as e:
        raise GameStateValidationError(_format_errors(e)) from e

    state = GameState(
        board=Board.from_values(model.board),
        current_player=model.current_player,
        moves=model.moves,
        difficulty=model.difficulty,
        result=model.result,
        winner=model.winner,
        winning_line=model.winning_line,
        last_ai_move=model.last_ai_move,
    )

    result = check_invariants(state)
    if not result.valid:
        raise GameStateValidationError(result.errors)
    return state


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Stored (camelCase, JSON-ready) form of a GameState."""
    return {
        "board": state.board.to_values(),
        "currentPlayer": state.current_player.value,
        "moves": state.moves,
        "difficulty": state.difficulty.value,
        "result": state.result.value,
        "winner": state.winner.value if state.winner else None,
        "winningLine": list(state.winning_line) if state.winning_line else None,
        "lastAiMove": state.last_ai_move,
    }


def parse_move_history(records: Iterable[Mapping[str, Any]]) -> list[MoveRecord]:
    """Validate stored move records, raising GameStateValidationError."""
    parsed = []
    for index, record in enumerate(records):
        try:
            parsed.append(MoveRecordModel.model_validate(record).to_record())
        except ValidationError as e:
            raise GameStateValidationError(
                [f"moves[{index}].{message}" for message in _format_errors(e)]
            ) from e
    return parsed
