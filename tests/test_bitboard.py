import pytest

from sphrax.bitboard import (
    ALL,
    CENTER_SQUARES,
    DARK_SQUARES,
    DOWN,
    DOWN_LEFT,
    FILE_A,
    FILE_E,
    FILE_H,
    FILES,
    LIGHT_SQUARES,
    RANK_1,
    RANK_8,
    RANKS,
    UP,
    UP_LEFT,
    UP_RIGHT,
    Bitboard,
    down,
    down_left,
    pdep,
    pext,
    promotion_rank,
    relative_rank_board,
    up,
    up_left,
    up_right,
)
from sphrax.core import Color, Square


def sq(square):
    return Bitboard.from_square(square)


def test_source_constants():
    first_rank = Bitboard()
    for square in [s for s in Square if s != Square.NONE][:8]:
        first_rank |= Bitboard.from_square(square)
    assert first_rank == RANK_1
    assert first_rank == 0x00000000000000FF
    assert promotion_rank(Color.WHITE) == 0xFF00000000000000
    assert sq(Square.A1).fill_up() == 0x0101010101010101
    assert sq(Square.A1).fill_up() == FILE_A
    assert DARK_SQUARES == 0xAA55AA55AA55AA55
    assert DARK_SQUARES[Square.A1]
    assert LIGHT_SQUARES[Square.B1]
    assert (DARK_SQUARES | LIGHT_SQUARES) == ALL
    assert (DARK_SQUARES & LIGHT_SQUARES).empty()


def test_ranks_and_files_partition_board():
    union = Bitboard()
    for rank in RANKS:
        assert rank.popcount() == 8
        union |= rank
    assert union == ALL
    for file, rank in zip(FILES, RANKS):
        assert (file & rank).one()


def test_center_squares():
    assert set(CENTER_SQUARES.squares()) == {Square.D4, Square.E4, Square.D5, Square.E5}


def test_from_square_and_checked():
    assert sq(Square.E4)[Square.E4]
    assert not sq(Square.E4)[Square.E5]
    assert Bitboard.from_square_checked(Square.NONE).empty()
    with pytest.raises(ValueError):
        Bitboard.from_square(Square.NONE)


def test_counts_and_lowest():
    board = sq(Square.C3) | sq(Square.H8)
    assert board.popcount() == 2
    assert board.multiple()
    assert not board.one()
    assert board.lowest_square() == Square.C3
    assert board.lowest_bit() == sq(Square.C3)
    assert board.without_lowest() == sq(Square.H8)
    assert list(board.squares()) == [Square.C3, Square.H8]
    assert Bitboard().empty()
    with pytest.raises(ValueError):
        Bitboard().lowest_square()


def test_with_square_round_trip():
    board = Bitboard().with_square(Square.G7, True)
    assert board == sq(Square.G7)
    assert board.with_square(Square.G7, False).empty()


def test_invert_stays_in_64_bits():
    assert ~Bitboard() == ALL
    assert ~ALL == 0


def test_shifts_do_not_wrap():
    assert FILE_A.shift_left().empty()
    assert FILE_H.shift_right().empty()
    assert RANK_8.shift_up().empty()
    assert RANK_1.shift_down().empty()
    assert FILE_A.shift_up_left().empty()
    assert FILE_H.shift_down_right().empty()


def test_single_step_shifts():
    d4 = sq(Square.D4)
    assert d4.shift_up() == sq(Square.D5)
    assert d4.shift_down() == sq(Square.D3)
    assert d4.shift_left() == sq(Square.C4)
    assert d4.shift_right() == sq(Square.E4)
    assert d4.shift_up_left() == sq(Square.C5)
    assert d4.shift_up_right() == sq(Square.E5)
    assert d4.shift_down_left() == sq(Square.C3)
    assert d4.shift_down_right() == sq(Square.E3)


def test_knight_shifts():
    d4 = sq(Square.D4)
    assert d4.shift_up_up_left() == sq(Square.C6)
    assert d4.shift_up_up_right() == sq(Square.E6)
    assert d4.shift_up_left_left() == sq(Square.B5)
    assert d4.shift_up_right_right() == sq(Square.F5)
    assert d4.shift_down_left_left() == sq(Square.B3)
    assert d4.shift_down_right_right() == sq(Square.F3)
    assert d4.shift_down_down_left() == sq(Square.C2)
    assert d4.shift_down_down_right() == sq(Square.E2)
    assert sq(Square.B1).shift_up_left_left().empty()


def test_relative_shifts():
    e4 = sq(Square.E4)
    assert e4.shift_up_relative(Color.WHITE) == e4.shift_up()
    assert e4.shift_up_relative(Color.BLACK) == e4.shift_down()
    assert e4.shift_up_left_relative(Color.BLACK) == e4.shift_down_left()
    assert e4.shift_up_right_relative(Color.BLACK) == e4.shift_down_right()
    assert e4.shift_down_relative(Color.BLACK) == e4.shift_up()
    assert e4.shift_down_left_relative(Color.WHITE) == e4.shift_down_left()
    assert e4.shift_down_right_relative(Color.BLACK) == e4.shift_up_right()


def test_fills():
    e4 = sq(Square.E4)
    assert e4.fill_file() == FILE_E
    assert (e4.fill_up() | e4.fill_down()) == FILE_E
    assert (e4.fill_up() & e4.fill_down()) == e4
    assert e4.fill_up()[Square.E8]
    assert not e4.fill_up()[Square.E3]
    assert e4.fill_up_relative(Color.BLACK) == e4.fill_down()
    assert e4.fill_down_relative(Color.BLACK) == e4.fill_up()


def test_offsets():
    assert up(Color.WHITE) == UP
    assert up(Color.BLACK) == DOWN
    assert down(Color.BLACK) == UP
    assert up_left(Color.WHITE) == UP_LEFT
    assert up_right(Color.WHITE) == UP_RIGHT
    assert down_left(Color.WHITE) == DOWN_LEFT
    assert down_left(Color.BLACK) == UP_LEFT


def test_promotion_and_relative_rank():
    assert promotion_rank(Color.WHITE) == RANK_8
    assert promotion_rank(Color.BLACK) == RANK_1
    assert relative_rank_board(Color.BLACK, 0) == RANK_8
    assert relative_rank_board(Color.WHITE, 0) == RANK_1
    with pytest.raises(ValueError):
        relative_rank_board(Color.WHITE, 8)


def test_render():
    lines = sq(Square.A1).render().splitlines()
    assert len(lines) == 8
    assert lines[-1] == "1 " + " ".join(["."] * 7)
    assert all(line == " ".join(["."] * 8) for line in lines[:-1])
    assert sq(Square.A1).render().endswith("\n")


@pytest.mark.parametrize("mask", [int(FILE_E), int(DARK_SQUARES), int(RANK_1 | FILE_H), 0])
def test_pdep_pext_round_trip(mask):
    bits = bin(mask).count("1")
    for value in (0, 1, 0b1011, (1 << bits) - 1):
        expected = value & ((1 << bits) - 1)
        deposited = pdep(value, mask)
        assert deposited & ~mask == 0
        assert pext(deposited, mask) == expected


def test_pext_of_full_mask_is_identity():
    board = int(sq(Square.C3) | sq(Square.H8))
    assert pext(board, ALL) == board
    assert pdep(board, ALL) == board