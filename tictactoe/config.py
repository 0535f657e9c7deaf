"""
Configuration - Environment-driven defaults for the command-line front end.

The engine itself takes everything as arguments; these only seed the
CLI's choices. Unrecognized values fall back to the defaults.
"""

import logging
import os

from .engine_core.state import Difficulty

DEFAULT_DIFFICULTY = Difficulty.MEDIUM.value
DEFAULT_LOG_LEVEL = "WARNING"


def difficulty_from_env() -> str:
    value = (os.getenv("TICTACTOE_DEFAULT_DIFFICULTY") or DEFAULT_DIFFICULTY).strip().lower()
    return value if value in {d.value for d in Difficulty} else DEFAULT_DIFFICULTY


def log_level_from_env() -> str:
    value = (os.getenv("TICTACTOE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to their number
    return value if isinstance(logging.getLevelName(value), int) else DEFAULT_LOG_LEVEL


def seed_from_env():
    value = os.getenv("TICTACTOE_SEED", "").strip()
    return int(value) if value.lstrip("-").isdigit() else None


TICTACTOE_DEFAULT_DIFFICULTY = difficulty_from_env()
TICTACTOE_LOG_LEVEL = log_level_from_env()
TICTACTOE_SEED = seed_from_env()
