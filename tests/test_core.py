import pytest

from sphrax.core import (
    CastlingRooks,
    Color,
    KingPair,
    Piece,
    PieceType,
    RookPair,
    Square,
    color_piece,
    copy_piece_color,
    flip_piece_color,
    flip_square_file,
    flip_square_rank,
    is_major,
    is_minor,
    is_valid_promotion,
    opp_color,
    piece_char,
    piece_color,
    piece_from_char,
    piece_type,
    piece_type_char,
    piece_type_from_char,
    piece_type_or_none,
    relative_rank,
    square_bit,
    square_bit_checked,
    square_file,
    square_name,
    square_rank,
    to_square,
)

REAL_PIECES = [p for p in Piece if p != Piece.NONE]
REAL_TYPES = [t for t in PieceType if t != PieceType.NONE]
REAL_SQUARES = [s for s in Square if s != Square.NONE]


def test_opp_color():
    assert opp_color(Color.WHITE) == Color.BLACK
    assert opp_color(Color.BLACK) == Color.WHITE
    with pytest.raises(ValueError):
        opp_color(Color.NONE)


@pytest.mark.parametrize("pt", REAL_TYPES)
@pytest.mark.parametrize("c", [Color.BLACK, Color.WHITE])
def test_color_piece_round_trip(pt, c):
    piece = color_piece(pt, c)
    assert piece_type(piece) == pt
    assert piece_color(piece) == c
    assert piece_type_or_none(piece) == pt


def test_color_piece_values():
    assert color_piece(PieceType.KNIGHT, Color.WHITE) == Piece.WHITE_KNIGHT
    assert color_piece(PieceType.KING, Color.BLACK) == Piece.BLACK_KING


def test_piece_type_none_handling():
    assert piece_type_or_none(Piece.NONE) == PieceType.NONE
    with pytest.raises(ValueError):
        piece_type(Piece.NONE)
    with pytest.raises(ValueError):
        color_piece(PieceType.NONE, Color.WHITE)


@pytest.mark.parametrize("piece", REAL_PIECES)
def test_flip_piece_color(piece):
    flipped = flip_piece_color(piece)
    assert piece_type(flipped) == piece_type(piece)
    assert piece_color(flipped) == opp_color(piece_color(piece))
    assert flip_piece_color(flipped) == piece


def test_copy_piece_color():
    assert copy_piece_color(Piece.BLACK_PAWN, PieceType.QUEEN) == Piece.BLACK_QUEEN
    assert copy_piece_color(Piece.WHITE_PAWN, PieceType.ROOK) == Piece.WHITE_ROOK


def test_major_minor():
    assert is_major(PieceType.ROOK) and is_major(Piece.BLACK_QUEEN)
    assert not is_major(PieceType.KNIGHT)
    assert is_minor(Piece.WHITE_BISHOP) and is_minor(PieceType.KNIGHT)
    assert not is_minor(PieceType.KING)
    with pytest.raises(ValueError):
        is_major(Piece.NONE)


def test_valid_promotion():
    valid = [t for t in PieceType if is_valid_promotion(t)]
    assert valid == [PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN]


@pytest.mark.parametrize("piece", REAL_PIECES)
def test_piece_char_round_trip(piece):
    assert piece_from_char(piece_char(piece)) == piece


def test_piece_chars_from_table():
    assert piece_char(Piece.WHITE_KNIGHT) == "N"
    assert piece_char(Piece.BLACK_QUEEN) == "q"
    assert piece_char(Piece.NONE) == " "
    assert piece_char(13) == "?"
    assert piece_from_char("x") == Piece.NONE


@pytest.mark.parametrize("pt", REAL_TYPES)
def test_piece_type_char_round_trip(pt):
    assert piece_type_from_char(piece_type_char(pt)) == pt


def test_piece_type_chars():
    assert piece_type_char(PieceType.NONE) == " "
    assert piece_type_char(7) == "?"
    assert piece_type_from_char("K") == PieceType.NONE


@pytest.mark.parametrize("square", REAL_SQUARES)
def test_square_round_trips(square):
    assert to_square(square_rank(square), square_file(square)) == square
    assert flip_square_rank(flip_square_rank(square)) == square
    assert flip_square_file(flip_square_file(square)) == square
    assert square_rank(flip_square_rank(square)) == 7 - square_rank(square)
    assert square_file(flip_square_file(square)) == 7 - square_file(square)
    assert square_bit(square) == 1 << int(square)
    assert square_name(square) == square.name.lower()


def test_square_names():
    assert square_name(Square.E4) == "e4"
    assert square_name(Square.NONE) == "??"


def test_square_errors():
    with pytest.raises(ValueError):
        to_square(8, 0)
    with pytest.raises(ValueError):
        square_rank(Square.NONE)
    with pytest.raises(ValueError):
        square_bit(Square.NONE)
    assert square_bit_checked(Square.NONE) == 0
    assert square_bit_checked(Square.H8) == square_bit(Square.H8)


def test_relative_rank():
    assert relative_rank(Color.WHITE, 1) == 1
    assert relative_rank(Color.BLACK, 1) == 6
    with pytest.raises(ValueError):
        relative_rank(Color.WHITE, 8)


def test_king_pair():
    kings = KingPair()
    assert not kings.is_valid()
    kings.set(Color.WHITE, Square.E1)
    kings.set(Color.BLACK, Square.E8)
    assert kings.white == Square.E1
    assert kings.color(Color.BLACK) == Square.E8
    assert kings.is_valid()
    assert kings == KingPair([Square.E8, Square.E1])
    kings.set(Color.BLACK, Square.NONE)
    assert not kings.is_valid()


def test_rook_pair():
    pair = RookPair(Square.H1, Square.A1)
    pair.unset(Square.H1)
    assert pair == RookPair(Square.NONE, Square.A1)
    pair.unset(Square.B2)
    assert pair.queenside == Square.A1
    pair.clear()
    assert pair == RookPair()


def test_castling_rooks():
    rooks = CastlingRooks()
    assert rooks == CastlingRooks()
    rooks.color(Color.WHITE).kingside = Square.H1
    assert rooks.white.kingside == Square.H1
    assert rooks.black == RookPair()
    assert rooks != CastlingRooks()
    with pytest.raises(ValueError):
        rooks.color(Color.NONE)