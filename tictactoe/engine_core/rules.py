"""
Rules Engine - Win-line and draw detection.

All queries are pure: they read the board and never modify it.
"""

from __future__ import annotations
from dataclasses import dataclass

from .board import Board, Cell
from .state import GameResult, Player


# Scan order is fixed; when several lines are complete the first one wins.
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

_MARK_OWNERS: dict[Cell, Player] = {Cell.X: Player.USER, Cell.O: Player.AI}


@dataclass(frozen=True)
class WinInfo:
    """The winning player and the line they completed."""
    winner: Player
    winning_line: tuple[int, int, int]


def check_winner(board: Board) -> WinInfo | None:
    """Return the first complete line in WIN_LINES order, or None."""
    for line in WIN_LINES:
        a, b, c = line
        if not board[a].is_empty and board[a] == board[b] == board[c]:
            return WinInfo(winner=_MARK_OWNERS[board[a]], winning_line=line)
    return None


def is_draw(board: Board) -> bool:
    """True iff every cell is filled and nobody has a line."""
    return board.is_full and check_winner(board) is None


def get_game_result(board: Board) -> GameResult:
    """Derive the result from the board alone."""
    win = check_winner(board)
    if win:
        return GameResult.USER_WIN if win.winner is Player.USER else GameResult.AI_WIN
    if is_draw(board):
        return GameResult.DRAW
    return GameResult.IN_PROGRESS
