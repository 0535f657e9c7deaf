"""
AI Policy - Move selection for each difficulty tier.

A policy takes a board and an explicit random source and returns a
decision. Policies hold no game state; the random source is always
passed in so that seeded tests can force every branch and concurrent
games never share a generator.
"""

from __future__ import annotations
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..engine_core.board import Board, make_move
from ..engine_core.errors import NoAvailableMovesError
from ..engine_core.rules import check_winner
from ..engine_core.state import Difficulty, Player
from .profiles import DifficultyProfile, EASY, MEDIUM, HARD, get_profile
from .search import minimax


@dataclass
class AIDecision:
    """
    A move chosen by the AI.

    Contains:
    - The position to play
    - Explanation (for UI/debugging)
    - Search details when a search was run
    """
    position: int
    explanation: str = ""
    score: int | float | None = None
    evaluated_nodes: int = 0
    details: dict[str, Any] = field(default_factory=dict)


class AIPolicy(ABC):
    """
    Abstract base class for AI policies.

    Subclasses decide how the AI picks among the legal moves.
    """

    def __init__(self, profile: DifficultyProfile):
        self.profile = profile

    @abstractmethod
    def select_move(self, board: Board, rng: random.Random | None = None) -> AIDecision:
        """
        Select a move for the AI.

        Args:
            board: Current board (AI to move)
            rng: Random source for any randomized branch

        Returns:
            AIDecision with the selected position

        Raises:
            NoAvailableMovesError: if the board is full
        """
        pass

    def get_name(self) -> str:
        return self.__class__.__name__

    def _legal_moves(self, board: Board) -> list[int]:
        moves = board.available_moves()
        if not moves:
            raise NoAvailableMovesError()
        return moves

    def _search(self, board: Board, explanation: str) -> AIDecision:
        result = minimax(board, self.profile.search_depth, maximizing=True)
        if result.position is None:
            # Root was already decided; there is no move left to make
            raise NoAvailableMovesError()
        return AIDecision(
            position=result.position,
            explanation=explanation,
            score=result.score,
            evaluated_nodes=result.nodes,
            details={"depth": self.profile.search_depth},
        )


def _require_rng(rng: random.Random | None) -> random.Random:
    if rng is None:
        raise ValueError("A random source is required for this difficulty")
    return rng


def find_blocking_move(board: Board, moves: list[int] | None = None) -> int | None:
    """First position (ascending) where the user would complete a line."""
    for position in moves if moves is not None else board.available_moves():
        win = check_winner(make_move(board, position, Player.USER))
        if win and win.winner is Player.USER:
            return position
    return None


class EasyPolicy(AIPolicy):
    """
    Mostly random play.

    With probability defend_chance the policy first looks for a user
    threat and blocks it; otherwise it plays a uniformly random legal move.
    """

    def __init__(self, profile: DifficultyProfile = EASY):
        super().__init__(profile)

    def select_move(self, board: Board, rng: random.Random | None = None) -> AIDecision:
        moves = self._legal_moves(board)
        rng = _require_rng(rng)

        if rng.random() < self.profile.defend_chance:
            block = find_blocking_move(board, moves)
            if block is not None:
                return AIDecision(
                    position=block,
                    explanation="Blocked the user's winning line",
                    evaluated_nodes=len(moves),
                )

        return AIDecision(
            position=rng.choice(moves),
            explanation="Selected randomly",
            evaluated_nodes=len(moves),
        )


class MediumPolicy(AIPolicy):
    """Shallow search with an occasional deliberate random move."""

    def __init__(self, profile: DifficultyProfile = MEDIUM):
        super().__init__(profile)

    def select_move(self, board: Board, rng: random.Random | None = None) -> AIDecision:
        moves = self._legal_moves(board)
        rng = _require_rng(rng)

        if rng.random() < self.profile.blunder_chance:
            return AIDecision(
                position=rng.choice(moves),
                explanation="Random move",
                evaluated_nodes=len(moves),
            )

        return self._search(board, f"Searched {self.profile.search_depth} plies ahead")


class HardPolicy(AIPolicy):
    """
    Full-depth search.

    Never selects a move that allows a forced loss when a non-losing
    move exists. Deterministic; the random source is ignored.
    """

    def __init__(self, profile: DifficultyProfile = HARD):
        super().__init__(profile)

    def select_move(self, board: Board, rng: random.Random | None = None) -> AIDecision:
        self._legal_moves(board)
        return self._search(board, "Full-depth search")


_POLICY_CLASSES: dict[Difficulty, type[AIPolicy]] = {
    Difficulty.EASY: EasyPolicy,
    Difficulty.MEDIUM: MediumPolicy,
    Difficulty.HARD: HardPolicy,
}


def policy_for(difficulty: Difficulty | str) -> AIPolicy:
    """Build the policy for a difficulty, raising UnknownDifficultyError."""
    profile = get_profile(difficulty)
    return _POLICY_CLASSES[profile.difficulty](profile)


def get_ai_move(board: Board, difficulty: Difficulty | str, rng: random.Random | None = None) -> int:
    """Select the AI's position for a board at the given difficulty."""
    return policy_for(difficulty).select_move(board, rng).position
