"""
Text notation for tic-tac-toe.

Squares are named by row letter and column digit ("A1" .. "C3"). A move
list is a sequence of square names, optionally numbered like chess:

```
1. B2 A2 2. B1 B3 3. C1 C3 4. A3
```

Boards are drawn one row per line:

```
| |O|X|
|X|X|O|
|X| |O|
```
"""

from __future__ import annotations
import re
from typing import Iterable, Union

from .bitboard import ROWS, COLS, Square, rowcol_to_square
from .board import Board, Mark
from .state import Game

_MOVE_NUMBER = re.compile(r'^\d+\.$')


def square_to_name(square: Square) -> str:
    """Convert square to its name (e.g., 'B2')."""
    return square.name


def name_to_square(s: str) -> Square:
    """Parse a square name, case-insensitive."""
    try:
        return Square[s.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid square: {s!r}") from None


def parse_moves(text: str) -> list[Square]:
    """Parse a move list, skipping move numbers."""
    squares = []
    for token in re.split(r'[\s,]+', text.strip()):
        if not token or _MOVE_NUMBER.match(token):
            continue
        squares.append(name_to_square(token))
    return squares


def format_moves(squares: Iterable[Square]) -> str:
    """Format squares as a numbered move list."""
    parts = []
    for i, sq in enumerate(squares):
        if i % 2 == 0:
            parts.append(f"{i // 2 + 1}. {sq.name}")
        else:
            parts.append(sq.name)
    return ' '.join(parts)


def replay(moves: Union[str, Iterable[Square]], starting_mark: Mark = Mark.Cross) -> Game:
    """Play a move list from an empty board and return the final game.

    Raises OccupiedSquareError on the first move onto a taken square.
    """
    if isinstance(moves, str):
        moves = parse_moves(moves)
    game = Game.new(starting_mark)
    for sq in moves:
        game = game.make_move(sq)
    return game


def format_board(board: Board) -> str:
    """Draw a board as three '|X|O| |' rows."""
    return str(board)


def parse_board(text: str) -> Board:
    """Read a board drawn by format_board."""
    rows = [line.strip() for line in text.strip('\n').splitlines() if line.strip()]
    if len(rows) != ROWS:
        raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

    xboard = 0
    oboard = 0
    for row, line in enumerate(rows):
        if not (line.startswith('|') and line.endswith('|')):
            raise ValueError(f"Malformed row: {line!r}")
        cells = line[1:-1].split('|')
        if len(cells) != COLS:
            raise ValueError(f"Expected {COLS} cells, got {len(cells)} in {line!r}")
        for col, cell in enumerate(cells):
            symbol = cell.strip().upper()
            sq = rowcol_to_square(row, col)
            if symbol == Mark.Cross.symbol:
                xboard |= sq.value
            elif symbol == Mark.Naught.symbol:
                oboard |= sq.value
            elif symbol:
                raise ValueError(f"Unknown symbol {cell!r} at {sq.name}")
    return Board(xboard=xboard, oboard=oboard)
