"""
Engine Core - Board, rules and game state.

The engine core is the pure layer that:
1. Represents the board as an immutable value
2. Validates and applies single moves
3. Detects wins and draws
4. Summarizes states and move histories
"""

from .errors import (
    GameEngineError,
    InvalidMoveError,
    GameAlreadyEndedError,
    WrongTurnError,
    UnknownDifficultyError,
    NoAvailableMovesError,
)
from .board import Board, Cell, is_valid_move, make_move, get_available_moves
from .state import GameState, Player, Difficulty, GameResult, create_initial_game_state
from .rules import WIN_LINES, WinInfo, check_winner, is_draw, get_game_result
from .summary import (
    GameStats,
    MoveRecord,
    MoveHistoryAnalysis,
    get_game_stats,
    get_board_display,
    analyze_move_history,
)

__all__ = [
    "GameEngineError",
    "InvalidMoveError",
    "GameAlreadyEndedError",
    "WrongTurnError",
    "UnknownDifficultyError",
    "NoAvailableMovesError",
    "Board",
    "Cell",
    "is_valid_move",
    "make_move",
    "get_available_moves",
    "GameState",
    "Player",
    "Difficulty",
    "GameResult",
    "create_initial_game_state",
    "WIN_LINES",
    "WinInfo",
    "check_winner",
    "is_draw",
    "get_game_result",
    "GameStats",
    "MoveRecord",
    "MoveHistoryAnalysis",
    "get_game_stats",
    "get_board_display",
    "analyze_move_history",
]
