"""Attack sets for every piece type."""

from __future__ import annotations

from . import magic
from .bitboard import Bitboard
from .core import Color, PieceType, Square, square_bit

__all__ = [
    "KNIGHT_ATTACKS",
    "KING_ATTACKS",
    "BLACK_PAWN_ATTACKS",
    "WHITE_PAWN_ATTACKS",
    "knight_attacks",
    "king_attacks",
    "pawn_attacks",
    "rook_attacks",
    "bishop_attacks",
    "queen_attacks",
    "non_pawn_piece_attacks",
]


def _knight(bit: Bitboard) -> Bitboard:
    return (
        bit.shift_up_up_left()
        | bit.shift_up_up_right()
        | bit.shift_up_left_left()
        | bit.shift_up_right_right()
        | bit.shift_down_left_left()
        | bit.shift_down_right_right()
        | bit.shift_down_down_left()
        | bit.shift_down_down_right()
    )


def _king(bit: Bitboard) -> Bitboard:
    return (
        bit.shift_up()
        | bit.shift_down()
        | bit.shift_left()
        | bit.shift_right()
        | bit.shift_up_left()
        | bit.shift_up_right()
        | bit.shift_down_left()
        | bit.shift_down_right()
    )


def _pawn(bit: Bitboard, color: Color) -> Bitboard:
    return bit.shift_up_left_relative(color) | bit.shift_up_right_relative(color)


_BITS = tuple(Bitboard.from_square(Square(i)) for i in range(64))

KNIGHT_ATTACKS = tuple(_knight(bit) for bit in _BITS)
KING_ATTACKS = tuple(_king(bit) for bit in _BITS)
BLACK_PAWN_ATTACKS = tuple(_pawn(bit, Color.BLACK) for bit in _BITS)
WHITE_PAWN_ATTACKS = tuple(_pawn(bit, Color.WHITE) for bit in _BITS)


def _index(src: Square) -> int:
    square_bit(src)
    return int(src)


def knight_attacks(src: Square) -> Bitboard:
    """Squares a knight on ``src`` attacks."""
    return KNIGHT_ATTACKS[_index(src)]


def king_attacks(src: Square) -> Bitboard:
    """Squares a king on ``src`` attacks."""
    return KING_ATTACKS[_index(src)]


def pawn_attacks(src: Square, color: Color) -> Bitboard:
    """Squares a pawn of ``color`` on ``src`` attacks."""
    table = WHITE_PAWN_ATTACKS if color == Color.WHITE else BLACK_PAWN_ATTACKS
    return table[_index(src)]


def rook_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Squares a rook on ``src`` attacks given ``occupancy``."""
    return magic.rook_attacks(src, occupancy)


def bishop_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Squares a bishop on ``src`` attacks given ``occupancy``."""
    return magic.bishop_attacks(src, occupancy)


def queen_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Squares a queen on ``src`` attacks given ``occupancy``."""
    return rook_attacks(src, occupancy) | bishop_attacks(src, occupancy)


def non_pawn_piece_attacks(
    piece_type: PieceType, src: Square, occupancy: Bitboard | int = 0
) -> Bitboard:
    """Attacks of any piece type except pawns; pawns and NONE are errors."""
    if piece_type == PieceType.KNIGHT:
        return knight_attacks(src)
    if piece_type == PieceType.BISHOP:
        return bishop_attacks(src, occupancy)
    if piece_type == PieceType.ROOK:
        return rook_attacks(src, occupancy)
    if piece_type == PieceType.QUEEN:
        return queen_attacks(src, occupancy)
    if piece_type == PieceType.KING:
        return king_attacks(src)
    raise ValueError(f"not a non-pawn piece type: {piece_type!r}")