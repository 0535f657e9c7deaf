"""
Turn Orchestrator - Sequences user and AI moves.

States:
    user_turn  (in_progress, current_player = user)
    ai_turn    (in_progress, current_player = ai)
    user_win / ai_win / draw  (terminal)

Every operation is a pure function: (state, input) -> new state.
On failure an error is raised and no state is returned.
"""

from __future__ import annotations
import random

from ..bots.policy import policy_for
from ..engine_core.board import is_valid_move, make_move
from ..engine_core.errors import GameAlreadyEndedError, InvalidMoveError, WrongTurnError
from ..engine_core.rules import check_winner, get_game_result
from ..engine_core.state import GameState, Player


def _check_can_move(state: GameState, player: Player) -> None:
    if state.is_over:
        raise GameAlreadyEndedError(state.result)
    if state.current_player is not player:
        raise WrongTurnError(expected=player, actual=state.current_player)


def _apply_move(state: GameState, position: int, player: Player) -> GameState:
    """Place the mark and recompute everything that derives from the board."""
    new_board = make_move(state.board, position, player)
    result = get_game_result(new_board)
    win = check_winner(new_board)

    return state._copy_with(
        board=new_board,
        # Frozen at the last mover once the game is over
        current_player=player if result.is_terminal else player.opponent,
        moves=state.moves + 1,
        result=result,
        winner=win.winner if win else None,
        winning_line=win.winning_line if win else None,
    )


def process_user_move(state: GameState, position: int) -> GameState:
    """
    Apply the user's move.

    Raises:
        GameAlreadyEndedError: state is terminal
        WrongTurnError: it is the AI's turn
        InvalidMoveError: position out of range or occupied
    """
    _check_can_move(state, Player.USER)
    if not is_valid_move(state.board, position):
        raise InvalidMoveError(position)
    return _apply_move(state, position, Player.USER)


def process_ai_move(state: GameState, rng: random.Random | None = None) -> GameState:
    """
    Let the AI choose and apply its move.

    The move comes from the policy for state.difficulty. Without an rng a
    private generator is created for this call only.
    """
    _check_can_move(state, Player.AI)
    if rng is None:
        rng = random.Random()

    decision = policy_for(state.difficulty).select_move(state.board, rng)
    new_state = _apply_move(state, decision.position, Player.AI)
    return new_state._copy_with(last_ai_move=decision.position)


def complete_turn(state: GameState, position: int, rng: random.Random | None = None) -> GameState:
    """User move, then the AI's reply if the game is still going."""
    updated = process_user_move(state, position)
    if not updated.is_over:
        updated = process_ai_move(updated, rng)
    return updated
