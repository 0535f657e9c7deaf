"""
Bots module - AI opponent implementations.

Provides:
- minimax: Alpha-beta game-tree search
- DifficultyProfile: Parameters behind each tier
- AIPolicy: Interface for AI move selection
- EasyPolicy / MediumPolicy / HardPolicy: The three tiers
"""

from .search import SearchResult, minimax, best_move, FULL_DEPTH
from .profiles import DifficultyProfile, DIFFICULTY_PROFILES, get_profile
from .policy import (
    AIDecision,
    AIPolicy,
    EasyPolicy,
    MediumPolicy,
    HardPolicy,
    find_blocking_move,
    policy_for,
    get_ai_move,
)

__all__ = [
    "SearchResult",
    "minimax",
    "best_move",
    "FULL_DEPTH",
    "DifficultyProfile",
    "DIFFICULTY_PROFILES",
    "get_profile",
    "AIDecision",
    "AIPolicy",
    "EasyPolicy",
    "MediumPolicy",
    "HardPolicy",
    "find_blocking_move",
    "policy_for",
    "get_ai_move",
]
