"""
Session module - Turn sequencing around the engine.

Provides:
- create_initial_game_state: Start a game
- process_user_move / process_ai_move: One move each
- complete_turn: User move plus the AI's reply
"""

from ..engine_core.state import create_initial_game_state
from .orchestrator import process_user_move, process_ai_move, complete_turn

__all__ = [
    "create_initial_game_state",
    "process_user_move",
    "process_ai_move",
    "complete_turn",
]
