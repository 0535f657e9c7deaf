"""
Engine Errors - Typed failures raised by the game engine.

Every violated precondition surfaces immediately as one of these.
The engine never retries or recovers; the caller maps them to
whatever response it needs.
"""

from __future__ import annotations
from typing import Any


class GameEngineError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(GameEngineError, ValueError):
    """Position out of range or cell already occupied."""

    def __init__(self, position: Any):
        self.position = position
        super().__init__(f"Invalid move: position {position!r} is not available")


class GameAlreadyEndedError(GameEngineError):
    """Move attempted on a terminal state."""

    def __init__(self, result: Any):
        self.result = result
        super().__init__(f"Game has already ended ({getattr(result, 'value', result)})")


class WrongTurnError(GameEngineError):
    """Move attempted by a player whose turn it is not."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Not {getattr(expected, 'value', expected)}'s turn "
            f"(current player: {getattr(actual, 'value', actual)})"
        )


class UnknownDifficultyError(GameEngineError, ValueError):
    """Difficulty outside easy/medium/hard."""

    def __init__(self, difficulty: Any):
        self.difficulty = difficulty
        super().__init__(f"Unknown difficulty level: {difficulty!r}")


class NoAvailableMovesError(GameEngineError):
    """AI move requested on a full board."""

    def __init__(self):
        super().__init__("No available moves for AI")
