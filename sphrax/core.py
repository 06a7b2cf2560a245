"""Core chess types: pieces, colours, squares and castling bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "Piece",
    "PieceType",
    "Color",
    "Square",
    "KingPair",
    "RookPair",
    "CastlingRooks",
    "SCORE_INF",
    "SCORE_MATE",
    "SCORE_TB_WIN",
    "SCORE_WIN",
    "SCORE_NONE",
    "MAX_DEPTH",
    "SCORE_MAX_MATE",
    "opp_color",
    "color_piece",
    "piece_type",
    "piece_type_or_none",
    "piece_color",
    "flip_piece_color",
    "copy_piece_color",
    "is_major",
    "is_minor",
    "is_valid_promotion",
    "piece_from_char",
    "piece_type_from_char",
    "piece_char",
    "piece_type_char",
    "square_name",
    "to_square",
    "square_rank",
    "square_file",
    "flip_square_rank",
    "flip_square_file",
    "square_bit",
    "square_bit_checked",
    "relative_rank",
]


class Piece(IntEnum):
    """A coloured piece; the low bit is the colour, the rest the piece type."""

    BLACK_PAWN = 0
    WHITE_PAWN = 1
    BLACK_KNIGHT = 2
    WHITE_KNIGHT = 3
    BLACK_BISHOP = 4
    WHITE_BISHOP = 5
    BLACK_ROOK = 6
    WHITE_ROOK = 7
    BLACK_QUEEN = 8
    WHITE_QUEEN = 9
    BLACK_KING = 10
    WHITE_KING = 11
    NONE = 12


class PieceType(IntEnum):
    """A piece without colour."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


class Color(IntEnum):
    """Side to move or piece colour."""

    BLACK = 0
    WHITE = 1
    NONE = 2


_FILES = "abcdefgh"

Square = IntEnum(
    "Square",
    [(f"{f.upper()}{rank + 1}", rank * 8 + idx) for rank in range(8) for idx, f in enumerate(_FILES)]
    + [("NONE", 64)],
    module=__name__,
    qualname="Square",
)
Square.__doc__ = "A board square, numbered from a1 (0) to h8 (63), rank by rank."

SCORE_INF = 32767
SCORE_MATE = 32766
SCORE_TB_WIN = 30000
SCORE_WIN = 25000
SCORE_NONE = -SCORE_INF
MAX_DEPTH = 255
SCORE_MAX_MATE = SCORE_MATE - MAX_DEPTH

_PIECE_CHARS = "pPnNbBrRqQkK "
_PIECE_TYPE_CHARS = "pnbrqk "


def _require_color(color: Color) -> None:
    if color == Color.NONE:
        raise ValueError("colour must not be NONE")


def _require_piece(piece: Piece) -> None:
    if piece == Piece.NONE:
        raise ValueError("piece must not be NONE")


def _require_piece_type(piece: PieceType) -> None:
    if piece == PieceType.NONE:
        raise ValueError("piece type must not be NONE")


def _require_square(square: Square) -> None:
    if square == Square.NONE:
        raise ValueError("square must not be NONE")


def opp_color(color: Color) -> Color:
    """Return the other colour."""
    _require_color(color)
    return Color(1 - int(color))


def color_piece(piece_type: PieceType, color: Color) -> Piece:
    """Combine a piece type and a colour into a piece."""
    _require_piece_type(piece_type)
    _require_color(color)
    return Piece((int(piece_type) << 1) + int(color))


def piece_type(piece: Piece) -> PieceType:
    """Return the type of a piece."""
    _require_piece(piece)
    return PieceType(int(piece) >> 1)


def piece_type_or_none(piece: Piece) -> PieceType:
    """Return the type of a piece, or PieceType.NONE for no piece."""
    if piece == Piece.NONE:
        return PieceType.NONE
    return PieceType(int(piece) >> 1)


def piece_color(piece: Piece) -> Color:
    """Return the colour of a piece."""
    _require_piece(piece)
    return Color(int(piece) & 1)


def flip_piece_color(piece: Piece) -> Piece:
    """Return the same piece type in the other colour."""
    _require_piece(piece)
    return Piece(int(piece) ^ 1)


def copy_piece_color(piece: Piece, target: PieceType) -> Piece:
    """Return a piece of type ``target`` in the colour of ``piece``."""
    _require_piece(piece)
    _require_piece_type(target)
    return color_piece(target, piece_color(piece))


def _as_type(piece: Piece | PieceType) -> PieceType:
    if isinstance(piece, Piece):
        return piece_type(piece)
    _require_piece_type(piece)
    return PieceType(piece)


def is_major(piece: Piece | PieceType) -> bool:
    """Whether the piece is a rook or a queen."""
    return _as_type(piece) in (PieceType.ROOK, PieceType.QUEEN)


def is_minor(piece: Piece | PieceType) -> bool:
    """Whether the piece is a knight or a bishop."""
    return _as_type(piece) in (PieceType.KNIGHT, PieceType.BISHOP)


def is_valid_promotion(piece_type: PieceType) -> bool:
    """Whether a pawn may promote to this piece type."""
    return piece_type in (PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)


def piece_from_char(c: str) -> Piece:
    """Parse a FEN piece letter; anything else gives Piece.NONE."""
    if len(c) == 1 and c != " ":
        idx = _PIECE_CHARS.find(c)
        if idx >= 0:
            return Piece(idx)
    return Piece.NONE


def piece_type_from_char(c: str) -> PieceType:
    """Parse a lower-case piece letter; anything else gives PieceType.NONE."""
    if len(c) == 1 and c != " ":
        idx = _PIECE_TYPE_CHARS.find(c)
        if idx >= 0:
            return PieceType(idx)
    return PieceType.NONE


def piece_char(piece: int) -> str:
    """FEN letter of a piece, a space for none, '?' for an invalid value."""
    value = int(piece)
    return _PIECE_CHARS[value] if 0 <= value < len(_PIECE_CHARS) else "?"


def piece_type_char(piece_type: int) -> str:
    """Lower-case letter of a piece type, a space for none, '?' for an invalid value."""
    value = int(piece_type)
    return _PIECE_TYPE_CHARS[value] if 0 <= value < len(_PIECE_TYPE_CHARS) else "?"


def square_name(square: Square) -> str:
    """Algebraic name of a square, or '??' for no square."""
    if square == Square.NONE:
        return "??"
    return f"{_FILES[square_file(square)]}{square_rank(square) + 1}"


def to_square(rank: int, file: int) -> Square:
    """Square at the given zero-based rank and file."""
    if not 0 <= rank < 8:
        raise ValueError(f"rank out of range: {rank}")
    if not 0 <= file < 8:
        raise ValueError(f"file out of range: {file}")
    return Square((rank << 3) | file)


def square_rank(square: Square) -> int:
    """Zero-based rank of a square."""
    _require_square(square)
    return int(square) >> 3


def square_file(square: Square) -> int:
    """Zero-based file of a square."""
    _require_square(square)
    return int(square) & 7


def flip_square_rank(square: Square) -> Square:
    """Mirror a square vertically."""
    _require_square(square)
    return Square(int(square) ^ 0b111000)


def flip_square_file(square: Square) -> Square:
    """Mirror a square horizontally."""
    _require_square(square)
    return Square(int(square) ^ 0b000111)


def square_bit(square: Square) -> int:
    """Single-bit mask of a square."""
    _require_square(square)
    return 1 << int(square)


def square_bit_checked(square: Square) -> int:
    """Single-bit mask of a square, or 0 for no square."""
    if square == Square.NONE:
        return 0
    return 1 << int(square)


def relative_rank(color: Color, rank: int) -> int:
    """Rank as seen from the given side."""
    if not 0 <= rank < 8:
        raise ValueError(f"rank out of range: {rank}")
    return 7 - rank if color == Color.BLACK else rank


@dataclass
class KingPair:
    """King squares of both sides, indexed by colour."""

    kings: list = field(default_factory=lambda: [Square.A1, Square.A1])

    @property
    def black(self) -> Square:
        return self.kings[Color.BLACK]

    @property
    def white(self) -> Square:
        return self.kings[Color.WHITE]

    def color(self, c: Color) -> Square:
        """King square of the given side."""
        _require_color(c)
        return self.kings[int(c)]

    def set(self, c: Color, square: Square) -> None:
        """Place the given side's king."""
        _require_color(c)
        self.kings[int(c)] = square

    def is_valid(self) -> bool:
        """Whether both kings are placed on distinct squares."""
        return Square.NONE not in (self.black, self.white) and self.black != self.white


@dataclass
class RookPair:
    """Castling rook squares of one side."""

    kingside: Square = Square.NONE
    queenside: Square = Square.NONE

    def clear(self) -> None:
        """Remove both castling rights."""
        self.kingside = Square.NONE
        self.queenside = Square.NONE

    def unset(self, square: Square) -> None:
        """Remove the castling right tied to the rook on ``square``, if any."""
        _require_square(square)
        if square == self.kingside:
            self.kingside = Square.NONE
        elif square == self.queenside:
            self.queenside = Square.NONE


@dataclass
class CastlingRooks:
    """Castling rook squares of both sides, indexed by colour."""

    rooks: list = field(default_factory=lambda: [RookPair(), RookPair()])

    @property
    def black(self) -> RookPair:
        return self.rooks[Color.BLACK]

    @property
    def white(self) -> RookPair:
        return self.rooks[Color.WHITE]

    def color(self, c: Color) -> RookPair:
        """Castling rooks of the given side."""
        _require_color(c)
        return self.rooks[int(c)]