"""
Game state for tic-tac-toe.

Wraps a board with the mark to move. Like the board, a game is a frozen
value and every move produces a new one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import logging

import numpy as np

from .bitboard import ROWS, COLS, Square, Triple, iter_squares
from .board import Board, Mark, OccupiedSquareError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Game:
    """
    A board plus whose turn it is.

    There is no finished state: after a winning move the remaining free
    squares can still be played. Callers that want to stop at a win check
    calculate_winner() after each move.
    """
    current_mark: Mark = Mark.Cross
    board: Board = field(default_factory=Board.new)

    @classmethod
    def new(cls, starting_mark: Mark) -> Game:
        """Create a game with ``starting_mark`` to move on an empty board."""
        return cls(current_mark=starting_mark, board=Board.new())

    @classmethod
    def default(cls) -> Game:
        """Cross to move on an empty board."""
        return cls.new(Mark.Cross)

    def make_move(self, square: Square) -> Game:
        """
        Play ``square`` for the side to move.

        Raises OccupiedSquareError if the square is taken; the turn does not
        advance in that case.
        """
        try:
            board = self.board.make_move(self.current_mark, square)
        except OccupiedSquareError:
            logger.debug(f"{self.current_mark.name} rejected on {square.name}")
            raise
        logger.debug(f"{self.current_mark.name} plays {square.name}")
        return Game(current_mark=self.current_mark.other(), board=board)

    def calculate_winner(self) -> Optional[tuple[Mark, Triple]]:
        return self.board.calculate_winner()

    def to_array(self) -> np.ndarray:
        """
        Convert state to planes from the side to move's perspective.

        Returns (3, 3, 3) float32 array:
          - Plane 0: Current mark's squares
          - Plane 1: Opponent's squares
          - Plane 2: Side indicator (all 1s if Cross to move, all 0s otherwise)
        """
        planes = np.zeros((3, ROWS, COLS), dtype=np.float32)

        own = self.board.mask_for(self.current_mark)
        opp = self.board.mask_for(self.current_mark.other())

        for sq in iter_squares(own):
            planes[0, sq.row, sq.col] = 1.0

        for sq in iter_squares(opp):
            planes[1, sq.row, sq.col] = 1.0

        if self.current_mark is Mark.Cross:
            planes[2, :, :] = 1.0

        return planes

    def __str__(self) -> str:
        return f"{self.board}\n\n{self.current_mark.symbol} to move"
