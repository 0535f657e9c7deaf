"""
Board Model - Fixed 3x3 grid of cells.

Cells are indexed 0-8 in row-major order:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8

A Board is a pure value: every mutation returns a new Board, so readers
holding an earlier board are never affected by a later move.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from .errors import InvalidMoveError

if TYPE_CHECKING:
    from .state import Player


BOARD_SIZE = 9


class Cell(Enum):
    """Value of a single cell. The value is the stored/wire form."""
    EMPTY = None
    X = "X"  # user
    O = "O"  # ai

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY


# Keyed by the player's stored value ("user" / "ai")
_PLAYER_MARKS: dict[str, Cell] = {"user": Cell.X, "ai": Cell.O}


def mark_for(player: Player | str) -> Cell:
    """Get the mark a player places on the board."""
    try:
        return _PLAYER_MARKS[getattr(player, "value", player)]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown player: {player!r}") from None


@dataclass(frozen=True)
class Board:
    """An ordered, immutable sequence of exactly 9 cells."""
    cells: tuple[Cell, ...]

    def __post_init__(self):
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(self.cells)}")
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Illegal cell value: {cell!r}")

    @classmethod
    def empty(cls) -> Board:
        return cls(cells=(Cell.EMPTY,) * BOARD_SIZE)

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Board:
        """
        Build a board from raw cell values.

        Accepts Cell members or their stored forms (None, "X", "O").
        """
        cells = []
        for value in values:
            if isinstance(value, Cell):
                cells.append(value)
                continue
            try:
                cells.append(Cell(value))
            except ValueError:
                raise ValueError(f"Illegal cell value: {value!r}") from None
        return cls(cells=tuple(cells))

    def to_values(self) -> list[str | None]:
        """Stored form of the cells: "X", "O" or None."""
        return [cell.value for cell in self.cells]

    def __getitem__(self, position: int) -> Cell:
        return self.cells[position]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if not cell.is_empty)

    @property
    def is_full(self) -> bool:
        return all(not cell.is_empty for cell in self.cells)

    def available_moves(self) -> list[int]:
        """Empty positions in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell.is_empty]

    def with_cell(self, position: int, cell: Cell) -> Board:
        """Return new board with one cell replaced."""
        new_cells = list(self.cells)
        new_cells[position] = cell
        return Board(cells=tuple(new_cells))


def is_valid_move(board: Board, position: Any) -> bool:
    """A move is valid iff position is an int in 0-8 and that cell is empty."""
    if isinstance(position, bool) or not isinstance(position, int):
        return False
    return 0 <= position < BOARD_SIZE and board[position].is_empty


def make_move(board: Board, position: int, player: Player | str) -> Board:
    """
    Place a player's mark and return the new board.

    Raises InvalidMoveError if the position is out of range or occupied.
    The input board is never modified.
    """
    if not is_valid_move(board, position):
        raise InvalidMoveError(position)
    return board.with_cell(position, mark_for(player))


def get_available_moves(board: Board) -> list[int]:
    """Legal positions in ascending order."""
    return board.available_moves()
