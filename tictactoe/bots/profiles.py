"""
Difficulty Profiles - Tunable parameters behind each AI tier.

Profiles adjust:
- How often the AI looks for a block before playing randomly
- How often the AI deliberately blunders
- How far ahead the AI searches
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import Difficulty
from .search import FULL_DEPTH


@dataclass(frozen=True)
class DifficultyProfile:
    """Parameters for one difficulty tier."""
    difficulty: Difficulty
    description: str = ""

    defend_chance: float = 0.0  # Probability of checking for a block first
    blunder_chance: float = 0.0  # Probability of a uniformly random move
    search_depth: int = 0  # 0 = no search


EASY = DifficultyProfile(
    difficulty=Difficulty.EASY,
    description="Mostly random, occasionally blocks an immediate threat",
    defend_chance=0.2,
)


MEDIUM = DifficultyProfile(
    difficulty=Difficulty.MEDIUM,
    description="Three-ply search with occasional random blunders",
    blunder_chance=0.15,
    search_depth=3,
)


HARD = DifficultyProfile(
    difficulty=Difficulty.HARD,
    description="Full-depth search, never loses",
    search_depth=FULL_DEPTH,
)


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: EASY,
    Difficulty.MEDIUM: MEDIUM,
    Difficulty.HARD: HARD,
}


def get_profile(difficulty: Difficulty | str) -> DifficultyProfile:
    """Look up the profile for a difficulty, raising UnknownDifficultyError."""
    return DIFFICULTY_PROFILES[Difficulty.parse(difficulty)]
