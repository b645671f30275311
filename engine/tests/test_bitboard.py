"""Tests for the bitboard layout."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tictac.core.bitboard import (
    NUM_SQUARES, NUM_TRIPLES, SQUARE_BITS, TRIPLE_SQUARES,
    Square, Triple,
    first_triple, iter_squares, leading_zeros, mask_of, popcount,
    rowcol_to_square, triple_candidates
)


class TestSquareValues:
    def test_values_are_fixed(self):
        assert Square.A1 == 0x80080080
        assert Square.A2 == 0x40008000
        assert Square.A3 == 0x20000808
        assert Square.B1 == 0x08040000
        assert Square.B2 == 0x04004044
        assert Square.B3 == 0x02000400
        assert Square.C1 == 0x00820002
        assert Square.C2 == 0x00402000
        assert Square.C3 == 0x00200220

    def test_nine_squares(self):
        assert len(Square) == NUM_SQUARES

    def test_patterns_disjoint(self):
        seen = 0
        for sq in Square:
            assert seen & sq.value == 0
            seen |= sq.value

    def test_bits_per_square(self):
        # One bit per line through the square
        assert popcount(Square.B2) == 4
        for sq in (Square.A1, Square.A3, Square.C1, Square.C3):
            assert popcount(sq) == 3
        for sq in (Square.A2, Square.B1, Square.B3, Square.C2):
            assert popcount(sq) == 2

    def test_group_low_bit_clear(self):
        for group in range(NUM_TRIPLES):
            assert SQUARE_BITS & (1 << (4 * group)) == 0

    def test_rowcol(self):
        assert (Square.A1.row, Square.A1.col) == (0, 0)
        assert (Square.B3.row, Square.B3.col) == (1, 2)
        assert (Square.C2.row, Square.C2.col) == (2, 1)

    def test_rowcol_roundtrip(self):
        for sq in Square:
            assert rowcol_to_square(sq.row, sq.col) is sq

    def test_rowcol_off_board(self):
        with pytest.raises(ValueError):
            rowcol_to_square(3, 0)


class TestTriples:
    def test_members(self):
        S = Square
        assert TRIPLE_SQUARES == {
            Triple.RowA: (S.A1, S.A2, S.A3),
            Triple.RowB: (S.B1, S.B2, S.B3),
            Triple.RowC: (S.C1, S.C2, S.C3),
            Triple.Col1: (S.A1, S.B1, S.C1),
            Triple.Col2: (S.A2, S.B2, S.C2),
            Triple.Col3: (S.A3, S.B3, S.C3),
            Triple.Diag1: (S.A1, S.B2, S.C3),
            Triple.Diag2: (S.A3, S.B2, S.C1),
        }

    def test_from_index(self):
        assert Triple.from_index(0) is Triple.RowA
        assert Triple.from_index(7) is Triple.Diag2

    @pytest.mark.parametrize("index", [-1, 8, 31])
    def test_from_index_outside_layout_is_fatal(self, index):
        with pytest.raises(AssertionError):
            Triple.from_index(index)


class TestBitOperations:
    def test_leading_zeros(self):
        assert leading_zeros(0) == 32
        assert leading_zeros(1) == 31
        assert leading_zeros(0x80000000) == 0
        assert leading_zeros(0x40000000) == 1

    def test_candidates_need_three_in_a_row(self):
        assert triple_candidates(0b1110) == 0b0100
        assert triple_candidates(0b0110) == 0
        assert triple_candidates(0b1010) == 0

    def test_top_bit_does_not_wrap(self):
        assert triple_candidates(0xC0000001) == 0

    @pytest.mark.parametrize("triple", list(Triple))
    def test_first_triple(self, triple):
        assert first_triple(mask_of(triple.squares)) is triple

    def test_two_squares_not_a_triple(self):
        for triple in Triple:
            a, b, _ = triple.squares
            assert first_triple(a | b) is None

    def test_highest_order_reported(self):
        bb = mask_of(Triple.RowC.squares) | mask_of(Triple.RowA.squares)
        assert first_triple(bb) is Triple.RowA

    def test_iter_squares(self):
        bb = Square.C3 | Square.A1
        assert list(iter_squares(bb)) == [Square.A1, Square.C3]

    def test_iter_squares_ignores_partial_patterns(self):
        assert list(iter_squares(0x80000000)) == []
