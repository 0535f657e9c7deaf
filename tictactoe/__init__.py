"""
tictactoe - Game-state and decision engine for tic-tac-toe.

A pure, synchronous engine that the surrounding service calls with plain
state values. It provides:
- Board model and move validation
- Win/draw detection
- An AI opponent in three tiers (randomized heuristic, shallow search,
  full minimax with alpha-beta pruning)
- Turn sequencing for one user move plus the AI's reply
"""

__version__ = "0.1.0"
