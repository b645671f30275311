"""Core game logic: bitboards, board, game state and notation."""

from .bitboard import Square, Triple
from .board import Board, Mark, OccupiedSquareError
from .state import Game
