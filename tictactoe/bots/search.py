"""
Search - Minimax with alpha-beta pruning.

Scores are from the AI's point of view:
- AI win:   +(10 - plies_played)  (faster wins score higher)
- user win: -(10 - plies_played)  (slower losses score higher)
- draw, or depth exhausted: 0

where plies_played = 9 - depth_remaining.

Every child is searched on its own board copy; sibling branches never
share a buffer.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from ..engine_core.board import Board, make_move
from ..engine_core.rules import check_winner
from ..engine_core.state import Player


# Deep enough to reach every terminal position from the empty board
FULL_DEPTH = 9

WIN_SCORE = 10


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search.

    position is None when the node was a leaf (terminal or depth cutoff).
    nodes counts every position visited, this one included.
    """
    position: int | None
    score: int | float
    nodes: int = 1


def _terminal_score(board: Board, depth: int) -> int | None:
    win = check_winner(board)
    if win:
        plies_played = FULL_DEPTH - depth
        score = WIN_SCORE - plies_played
        return score if win.winner is Player.AI else -score
    if board.is_full or depth == 0:
        return 0
    return None


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float = -math.inf,
    beta: float = math.inf,
) -> SearchResult:
    """
    Search the game tree below board.

    Args:
        board: Position to search from
        depth: Remaining plies to look ahead
        maximizing: True when the AI is to move at this ply
        alpha: Best score the maximizer is already assured of
        beta: Best score the minimizer is already assured of

    Returns:
        SearchResult with the best move and its score. Among equally
        scored moves the lowest position wins.
    """
    leaf = _terminal_score(board, depth)
    if leaf is not None:
        return SearchResult(position=None, score=leaf)

    mover = Player.AI if maximizing else Player.USER
    moves = board.available_moves()
    best_position = moves[0]
    best_score = -math.inf if maximizing else math.inf
    nodes = 1

    for position in moves:
        child = minimax(make_move(board, position, mover), depth - 1, not maximizing, alpha, beta)
        nodes += child.nodes

        if maximizing:
            if child.score > best_score:
                best_position, best_score = position, child.score
            alpha = max(alpha, child.score)
        else:
            if child.score < best_score:
                best_position, best_score = position, child.score
            beta = min(beta, child.score)

        if beta <= alpha:
            break

    return SearchResult(position=best_position, score=best_score, nodes=nodes)


def best_move(board: Board, depth: int = FULL_DEPTH, player: Player = Player.AI) -> SearchResult:
    """Search from the root for the given side (the AI maximizes, the user minimizes)."""
    return minimax(board, depth, maximizing=player is Player.AI)
