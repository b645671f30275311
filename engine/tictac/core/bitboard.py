"""
Bitboard layout for tic-tac-toe.

Each square is a 32-bit pattern. The word is split into eight 4-bit groups,
one per winning triple, most significant group first:

    group  bits    triple
      0    31-28   row A   (A1 A2 A3)
      1    27-24   row B   (B1 B2 B3)
      2    23-20   row C   (C1 C2 C3)
      3    19-16   col 1   (A1 B1 C1)
      4    15-12   col 2   (A2 B2 C2)
      5    11-8    col 3   (A3 B3 C3)
      6     7-4    diag 1  (A1 B2 C3)
      7     3-0    diag 2  (A3 B2 C1)

Within a group the three member squares own bits 3, 2 and 1; bit 0 is always
clear so that runs never bleed into the neighbouring group. A triple is
complete when its three bits are set, which is detected for all triples at
once with ``b & (b << 1) & (b >> 1)``.

  A | A1 A2 A3
  B | B1 B2 B3
  C | C1 C2 C3
    +---------
      1  2  3
"""

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Iterator

ROWS = 3
COLS = 3
NUM_SQUARES = ROWS * COLS  # 9
NUM_TRIPLES = 8

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

# Bit position -> group index (4 bits per group)
GROUP_SHIFT = 2


class Square(IntEnum):
    """Board squares. Values encode triple membership and must not change."""

    A1 = 0x80080080
    A2 = 0x40008000
    A3 = 0x20000808
    B1 = 0x08040000
    B2 = 0x04004044
    B3 = 0x02000400
    C1 = 0x00820002
    C2 = 0x00402000
    C3 = 0x00200220

    @property
    def row(self) -> int:
        return ord(self.name[0]) - ord('A')

    @property
    def col(self) -> int:
        return int(self.name[1]) - 1


class Triple(Enum):
    """Winning lines, valued by their group index in the bit layout."""

    RowA = 0
    RowB = 1
    RowC = 2
    Col1 = 3
    Col2 = 4
    Col3 = 5
    Diag1 = 6
    Diag2 = 7

    @classmethod
    def from_index(cls, index: int) -> Triple:
        """Map a group index to its triple.

        Any index outside 0-7 means a board was built around the layout and
        is treated as fatal.
        """
        if not 0 <= index < NUM_TRIPLES:
            raise AssertionError(f"Triple index {index} outside bit layout")
        return cls(index)

    @property
    def squares(self) -> tuple[Square, Square, Square]:
        """Member squares, in bit order within the group."""
        return TRIPLE_SQUARES[self]


def _init_triple_squares() -> dict[Triple, tuple[Square, ...]]:
    """Recover each triple's members from the square patterns."""
    table = {}
    for triple in Triple:
        base = WORD_BITS - 4 * (triple.value + 1)
        members = []
        for offset in (3, 2, 1):
            group_bit = 1 << (base + offset)
            members.append(next(sq for sq in Square if sq.value & group_bit))
        table[triple] = tuple(members)
    return table


TRIPLE_SQUARES = _init_triple_squares()


def triple_candidates(bb: int) -> int:
    """Bits marking the middle of every complete triple in ``bb``."""
    return bb & ((bb << 1) & WORD_MASK) & (bb >> 1)


def leading_zeros(bb: int) -> int:
    """Count leading zero bits of a 32-bit word."""
    return WORD_BITS - (int(bb) & WORD_MASK).bit_length()


def first_triple(bb: int) -> Triple | None:
    """Highest-order complete triple in ``bb``, or None."""
    candidates = triple_candidates(bb)
    if not candidates:
        return None
    return Triple.from_index((leading_zeros(candidates) - 1) >> GROUP_SHIFT)


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(bb).count('1')


def iter_squares(bb: int) -> Iterator[Square]:
    """Iterate over squares fully present in ``bb``, in A1..C3 order."""
    for sq in Square:
        if bb & sq.value == sq.value:
            yield sq


def mask_of(squares) -> int:
    """OR together the patterns of ``squares``."""
    bb = 0
    for sq in squares:
        bb |= sq.value
    return bb


def rowcol_to_square(row: int, col: int) -> Square:
    """Convert (row, col) to square, row 0 = A, col 0 = 1."""
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise ValueError(f"Square ({row}, {col}) is off the board")
    return Square[f"{chr(ord('A') + row)}{col + 1}"]


# All bits any square may contribute
SQUARE_BITS = mask_of(Square)
