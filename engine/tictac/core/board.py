"""
Board representation for tic-tac-toe.

A board is two 32-bit occupancy masks, one per mark, each the OR of the
square patterns that mark holds. Boards are frozen; moves return new boards.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

import numpy as np

from .bitboard import (
    ROWS, COLS, Square, Triple,
    first_triple, iter_squares, mask_of, rowcol_to_square
)

logger = logging.getLogger(__name__)


class Mark(Enum):
    """A player's mark."""

    Cross = "X"
    Naught = "O"

    def other(self) -> Mark:
        return Mark.Naught if self is Mark.Cross else Mark.Cross

    @property
    def symbol(self) -> str:
        """Single-character display symbol."""
        return self.value

    def __str__(self) -> str:
        return self.value


class OccupiedSquareError(ValueError):
    """Raised when a move targets a square either mark already holds."""

    def __init__(self, square: Square):
        self.square = square
        super().__init__(f"{square.name} is currently occupied")


@dataclass(frozen=True)
class Board:
    """
    Occupancy of both marks.

    Attributes:
        xboard: Mask of squares held by Cross
        oboard: Mask of squares held by Naught
    """
    xboard: int = 0x0
    oboard: int = 0x0

    @classmethod
    def new(cls) -> Board:
        """Create an empty board."""
        return cls()

    @property
    def occupied(self) -> int:
        """Mask of all occupied squares."""
        return self.xboard | self.oboard

    def mask_for(self, mark: Mark) -> int:
        return self.xboard if mark is Mark.Cross else self.oboard

    def calculate_winner(self) -> Optional[tuple[Mark, Triple]]:
        """
        Return the winning mark and line, or None.

        Cross is checked first. If a mask somehow holds several complete
        lines only the highest-order one is reported.
        """
        triple = first_triple(self.xboard)
        if triple is not None:
            return Mark.Cross, triple
        triple = first_triple(self.oboard)
        if triple is not None:
            return Mark.Naught, triple
        return None

    def check_index(self, square: Square) -> None:
        """Raise OccupiedSquareError if ``square`` is taken."""
        if square.value & self.occupied:
            raise OccupiedSquareError(square)

    def make_move(self, mark: Mark, square: Square) -> Board:
        """Return a new board with ``square`` added to ``mark``'s mask."""
        self.check_index(square)
        if mark is Mark.Cross:
            return Board(xboard=self.xboard | square.value, oboard=self.oboard)
        return Board(xboard=self.xboard, oboard=self.oboard | square.value)

    def mark_at(self, square: Square) -> Optional[Mark]:
        """Mark holding ``square``, or None if it is free."""
        if square.value & self.xboard:
            return Mark.Cross
        if square.value & self.oboard:
            return Mark.Naught
        return None

    def empty_squares(self) -> list[Square]:
        """Free squares in A1..C3 order."""
        occupied = self.occupied
        return [sq for sq in Square if not sq.value & occupied]

    def num_moves(self) -> int:
        """Number of occupied squares."""
        return len(list(iter_squares(self.occupied)))

    def is_valid(self) -> bool:
        """Check exclusivity and that every set bit belongs to a held square."""
        if self.xboard & self.oboard:
            return False
        for bb in (self.xboard, self.oboard):
            if mask_of(iter_squares(bb)) != bb:
                return False
        return True

    def to_array(self) -> np.ndarray:
        """
        Convert board to occupancy planes.

        Returns (2, 3, 3) float32 array:
          - Plane 0: Cross
          - Plane 1: Naught
        """
        planes = np.zeros((2, ROWS, COLS), dtype=np.float32)
        for sq in iter_squares(self.xboard):
            planes[0, sq.row, sq.col] = 1.0
        for sq in iter_squares(self.oboard):
            planes[1, sq.row, sq.col] = 1.0
        return planes

    def __str__(self) -> str:
        lines = []
        for row in range(ROWS):
            cells = []
            for col in range(COLS):
                mark = self.mark_at(rowcol_to_square(row, col))
                cells.append(mark.symbol if mark else " ")
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(xboard=0x{self.xboard:08x}, oboard=0x{self.oboard:08x})"
