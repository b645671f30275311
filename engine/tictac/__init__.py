"""
tictac - tic-tac-toe rules on a bit-packed board.

Boards and games are immutable values; win detection is a constant-time
bitwise check over all eight lines at once.
"""

from .core import Board, Game, Mark, OccupiedSquareError, Square, Triple

__version__ = "0.1.0"
__all__ = [
    "Board",
    "Game",
    "Mark",
    "OccupiedSquareError",
    "Square",
    "Triple",
]
