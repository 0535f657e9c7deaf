"""
Tests for the turn orchestrator (state transitions).

Tests:
- Initial state
- User and AI moves
- Terminal detection and frozen turn
- Error handling
- Invariants over whole games
"""

import random

import pytest

from ..engine_core.board import Cell
from ..engine_core.errors import (
    GameAlreadyEndedError,
    InvalidMoveError,
    UnknownDifficultyError,
    WrongTurnError,
)
from ..engine_core.rules import is_draw, get_game_result
from ..engine_core.state import Difficulty, GameResult, Player, create_initial_game_state
from ..session import complete_turn, process_ai_move, process_user_move
from ..state_schema import check_invariants


X, O, _ = "X", "O", None


class TestInitialState:
    """Tests for create_initial_game_state."""

    def test_hard_initial_state(self):
        """A new game has an empty board and the user to move."""
        state = create_initial_game_state("hard")
        assert all(cell is Cell.EMPTY for cell in state.board)
        assert state.current_player is Player.USER
        assert state.result is GameResult.IN_PROGRESS
        assert state.moves == 0
        assert state.difficulty is Difficulty.HARD
        assert state.winner is None
        assert state.winning_line is None
        assert state.last_ai_move is None

    def test_default_difficulty(self):
        """Medium is the default tier."""
        assert create_initial_game_state().difficulty is Difficulty.MEDIUM

    def test_unknown_difficulty(self):
        """Unknown tiers are rejected up front."""
        with pytest.raises(UnknownDifficultyError):
            create_initial_game_state("nightmare")


class TestUserMove:
    """Tests for process_user_move."""

    def test_user_move_passes_turn(self, hard_state):
        """A non-final user move hands the turn to the AI."""
        state = process_user_move(hard_state, 4)
        assert state.board[4] is Cell.X
        assert state.moves == 1
        assert state.current_player is Player.AI
        assert state.result is GameResult.IN_PROGRESS

    def test_user_completes_row(self, make_state):
        """Completing a row ends the game with the user as winner."""
        state = make_state([X, X, _, O, O, _, _, _, _])
        assert state.current_player is Player.USER

        state = process_user_move(state, 2)
        assert state.result is GameResult.USER_WIN
        assert state.winner is Player.USER
        assert state.winning_line == (0, 1, 2)
        assert state.moves == 5
        # Turn is frozen once the game is over
        assert state.current_player is Player.USER

    def test_user_final_move_draws(self, make_state):
        """Filling the last cell without a line is a draw."""
        state = make_state([X, O, X, X, O, O, O, X, _])
        state = process_user_move(state, 8)
        assert state.result is GameResult.DRAW
        assert state.winner is None
        assert state.winning_line is None
        assert state.moves == 9
        assert state.current_player is Player.USER

    @pytest.mark.parametrize("position", [-1, 9, 4])
    def test_invalid_position(self, make_state, position):
        """Out-of-range or occupied cells raise InvalidMoveError."""
        state = make_state([_, _, _, _, X, _, _, _, O])
        with pytest.raises(InvalidMoveError):
            process_user_move(state, position)

    def test_failed_move_leaves_state_untouched(self, make_state):
        """A rejected move returns nothing and changes nothing."""
        state = make_state([_, _, _, _, X, _, _, _, O])
        snapshot = state._copy_with()
        with pytest.raises(InvalidMoveError):
            process_user_move(state, 8)
        assert state == snapshot

    def test_wrong_turn(self, hard_state):
        """The user cannot move twice in a row."""
        state = process_user_move(hard_state, 0)
        with pytest.raises(WrongTurnError) as exc_info:
            process_user_move(state, 1)
        assert exc_info.value.expected is Player.USER
        assert exc_info.value.actual is Player.AI

    def test_move_after_draw(self, make_state, draw_board):
        """A drawn game accepts no more moves."""
        state = make_state(draw_board.to_values())
        assert state.result is GameResult.DRAW
        with pytest.raises(GameAlreadyEndedError):
            process_user_move(state, 0)

    def test_ended_checked_before_turn(self, make_state):
        """A finished game reports that it ended, whoever's turn it was."""
        state = make_state([O, O, O, X, X, _, X, _, _])
        assert state.current_player is Player.AI
        with pytest.raises(GameAlreadyEndedError):
            process_user_move(state, 5)


class TestAIMove:
    """Tests for process_ai_move."""

    def test_ai_must_wait_for_user(self, hard_state):
        """The AI cannot open the game."""
        with pytest.raises(WrongTurnError):
            process_ai_move(hard_state)

    def test_ai_records_last_move(self, hard_state):
        """The AI's position is recorded on the new state."""
        state = process_ai_move(process_user_move(hard_state, 0))
        assert state.last_ai_move == 4
        assert state.board[4] is Cell.O
        assert state.current_player is Player.USER

    def test_ai_wins(self, make_state):
        """The AI completing a line ends the game in its favour."""
        state = make_state([O, O, _, X, X, _, X, _, _])
        state = process_ai_move(state)
        assert state.result is GameResult.AI_WIN
        assert state.winner is Player.AI
        assert state.winning_line == (0, 1, 2)
        assert state.last_ai_move == 2
        assert state.current_player is Player.AI

    def test_ai_move_after_game_over(self, make_state, draw_board):
        """A finished game rejects AI moves too."""
        state = make_state(draw_board.to_values())
        with pytest.raises(GameAlreadyEndedError):
            process_ai_move(state, random.Random(0))

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_ai_plays_legal_move(self, difficulty, rng):
        """Every tier plays an empty cell."""
        state = process_user_move(create_initial_game_state(difficulty), 4)
        new_state = process_ai_move(state, rng)
        assert new_state.last_ai_move != 4
        assert state.board[new_state.last_ai_move] is Cell.EMPTY
        assert new_state.moves == 2

    def test_seeded_games_reproducible(self):
        """Easy games with the same seed play out identically."""
        def play(seed):
            state = process_user_move(create_initial_game_state("easy"), 0)
            return process_ai_move(state, random.Random(seed)).last_ai_move

        assert play(11) == play(11)


class TestCompleteTurn:
    """Tests for complete_turn."""

    def test_user_then_hard_ai(self, hard_state):
        """One turn places both marks and returns the turn to the user."""
        state = complete_turn(hard_state, 0)
        assert state.moves == 2
        assert state.current_player is Player.USER
        assert state.result is GameResult.IN_PROGRESS
        assert state.board[0] is Cell.X
        assert state.board[state.last_ai_move] is Cell.O

    def test_winning_user_move_skips_ai(self, make_state):
        """If the user's move ends the game the AI does not move."""
        state = make_state([X, X, _, O, O, _, _, _, _])
        state = complete_turn(state, 2)
        assert state.result is GameResult.USER_WIN
        assert state.winning_line == (0, 1, 2)
        assert state.winner is Player.USER
        assert state.last_ai_move is None
        assert state.moves == 5

    def test_original_state_unchanged(self, hard_state):
        """Earlier states stay valid after later moves."""
        complete_turn(hard_state, 4)
        assert hard_state == create_initial_game_state("hard")

    def test_independent_games(self, hard_state):
        """Two games branching from one state do not affect each other."""
        a = complete_turn(hard_state, 0)
        b = complete_turn(hard_state, 8)
        assert a.board[0] is Cell.X and b.board[0] is not Cell.X
        assert b.board[8] is Cell.X and a.board[8] is not Cell.X


class TestWholeGames:
    """Invariants over complete games."""

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    @pytest.mark.parametrize("seed", range(10))
    def test_invariants_hold(self, difficulty, seed):
        """Every intermediate state is consistent and the turn alternates."""
        rng = random.Random(seed)
        state = create_initial_game_state(difficulty)

        while not state.is_over:
            previous_player = state.current_player
            state = complete_turn(state, rng.choice(state.board.available_moves()), rng)

            check = check_invariants(state)
            assert check.valid, check.errors
            assert check.warnings == []
            assert state.moves <= 9
            assert state.result is get_game_result(state.board)
            if not state.is_over:
                assert state.current_player is previous_player

        assert state.result is not GameResult.IN_PROGRESS
        if state.result is GameResult.DRAW:
            assert is_draw(state.board)
        if state.moves == 9:
            assert state.result is not GameResult.IN_PROGRESS
        if difficulty is Difficulty.HARD:
            assert state.result is not GameResult.USER_WIN
