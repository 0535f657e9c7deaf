"""
Pytest fixtures for engine tests.
"""

import random

import pytest

from ..engine_core.board import Board, Cell
from ..engine_core.rules import check_winner, get_game_result
from ..engine_core.state import Difficulty, GameState, Player, create_initial_game_state


X, O, _ = "X", "O", None


class ScriptedRandom(random.Random):
    """
    Random source whose random() calls return scripted values first.

    choice() draws through getrandbits, so it stays seeded and is not
    affected by the script.
    """

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._values = list(values)

    def random(self):
        if self._values:
            return self._values.pop(0)
        return super().random()


def build_state(values, current_player=None, difficulty=Difficulty.HARD, last_ai_move=None) -> GameState:
    """Build a consistent GameState for a board."""
    board = Board.from_values(values)
    result = get_game_result(board)
    win = check_winner(board)
    x_count = sum(1 for cell in board if cell is Cell.X)
    o_count = sum(1 for cell in board if cell is Cell.O)

    if current_player is None:
        if result.is_terminal:
            current_player = Player.USER if board.filled_count % 2 == 1 else Player.AI
        else:
            current_player = Player.USER if x_count == o_count else Player.AI

    return GameState(
        board=board,
        current_player=current_player,
        moves=board.filled_count,
        difficulty=Difficulty.parse(difficulty),
        result=result,
        winner=win.winner if win else None,
        winning_line=win.winning_line if win else None,
        last_ai_move=last_ai_move,
    )


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def hard_state() -> GameState:
    """Fresh game against the hard AI."""
    return create_initial_game_state(Difficulty.HARD)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_state():
    """Factory for states built from raw board values."""
    return build_state


@pytest.fixture
def scripted_rng():
    """Factory for random sources with scripted random() values."""
    return ScriptedRandom


@pytest.fixture
def draw_board() -> Board:
    """Full board with no line.

    X | O | X
    X | O | O
    O | X | X
    """
    return Board.from_values([X, O, X, X, O, O, O, X, X])


@pytest.fixture
def user_threat_board() -> Board:
    """User threatens position 2, AI to move.

    X | X | .
    . | O | .
    . | . | .
    """
    return Board.from_values([X, X, _, _, O, _, _, _, _])


@pytest.fixture
def ai_can_win_board() -> Board:
    """AI completes the top row at position 2, AI to move.

    O | O | .
    X | X | .
    X | . | .
    """
    return Board.from_values([O, O, _, X, X, _, X, _, _])
