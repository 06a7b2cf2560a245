"""64-bit square sets with shifts, fills and bit tricks."""

from __future__ import annotations

from typing import Iterator

from .core import Color, Square, relative_rank, square_bit, square_bit_checked, to_square

__all__ = [
    "Bitboard",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "UP_LEFT",
    "UP_RIGHT",
    "DOWN_LEFT",
    "DOWN_RIGHT",
    "RANK_1",
    "RANK_2",
    "RANK_3",
    "RANK_4",
    "RANK_5",
    "RANK_6",
    "RANK_7",
    "RANK_8",
    "FILE_A",
    "FILE_B",
    "FILE_C",
    "FILE_D",
    "FILE_E",
    "FILE_F",
    "FILE_G",
    "FILE_H",
    "RANKS",
    "FILES",
    "DARK_SQUARES",
    "LIGHT_SQUARES",
    "CENTER_SQUARES",
    "ALL",
    "up",
    "up_left",
    "up_right",
    "down",
    "down_left",
    "down_right",
    "promotion_rank",
    "relative_rank_board",
    "pdep",
    "pext",
]

_MASK = (1 << 64) - 1

UP = 8
DOWN = -8
LEFT = -1
RIGHT = 1
UP_LEFT = UP + LEFT
UP_RIGHT = UP + RIGHT
DOWN_LEFT = DOWN + LEFT
DOWN_RIGHT = DOWN + RIGHT

_VERTICAL = 8
_HORIZONTAL = 1
_DIAGONAL_LR = _VERTICAL - _HORIZONTAL
_DIAGONAL_RL = _VERTICAL + _HORIZONTAL
_DIAGONAL_12_LR = _VERTICAL + _VERTICAL - _HORIZONTAL
_DIAGONAL_12_RL = _VERTICAL + _VERTICAL + _HORIZONTAL
_DIAGONAL_21_LR = _VERTICAL - _HORIZONTAL - _HORIZONTAL
_DIAGONAL_21_RL = _VERTICAL + _HORIZONTAL + _HORIZONTAL

_FILE_A = 0x0101010101010101
_FILE_B = 0x0202020202020202
_FILE_G = 0x4040404040404040
_FILE_H = 0x8080808080808080


def _value(other: Bitboard | int) -> int:
    return other.value if isinstance(other, Bitboard) else int(other) & _MASK


class Bitboard:
    """An immutable set of squares stored as a 64-bit integer, bit n for square n."""

    __slots__ = ("_board",)

    def __init__(self, board: int | Bitboard = 0) -> None:
        self._board = _value(board)

    @property
    def value(self) -> int:
        """The raw 64-bit value."""
        return self._board

    @classmethod
    def from_square(cls, square: Square) -> Bitboard:
        """Board holding only ``square``; NONE is an error."""
        return cls(square_bit(square))

    @classmethod
    def from_square_checked(cls, square: Square) -> Bitboard:
        """Board holding only ``square``, or an empty board for NONE."""
        return cls(square_bit_checked(square))

    def __int__(self) -> int:
        return self._board

    def __index__(self) -> int:
        return self._board

    def __bool__(self) -> bool:
        return self._board != 0

    def __hash__(self) -> int:
        return hash(self._board)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bitboard):
            return self._board == other._board
        if isinstance(other, int):
            return self._board == (other & _MASK)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Bitboard(0x{self._board:016X})"

    def __str__(self) -> str:
        return self.render()

    def __and__(self, other: Bitboard | int) -> Bitboard:
        return Bitboard(self._board & _value(other))

    __rand__ = __and__

    def __or__(self, other: Bitboard | int) -> Bitboard:
        return Bitboard(self._board | _value(other))

    __ror__ = __or__

    def __xor__(self, other: Bitboard | int) -> Bitboard:
        return Bitboard(self._board ^ _value(other))

    __rxor__ = __xor__

    def __invert__(self) -> Bitboard:
        return Bitboard(~self._board & _MASK)

    def __lshift__(self, amount: int) -> Bitboard:
        return Bitboard((self._board << amount) & _MASK)

    def __rshift__(self, amount: int) -> Bitboard:
        return Bitboard(self._board >> amount)

    def __getitem__(self, square: Square) -> bool:
        return bool(self._board & square_bit(square))

    def __contains__(self, square: Square) -> bool:
        return self[square]

    def __iter__(self) -> Iterator[Square]:
        return self.squares()

    def __len__(self) -> int:
        return self.popcount()

    def popcount(self) -> int:
        """Number of squares in the set."""
        return bin(self._board).count("1")

    def empty(self) -> bool:
        """Whether no square is set."""
        return self._board == 0

    def multiple(self) -> bool:
        """Whether more than one square is set."""
        return (self._board & (self._board - 1)) != 0

    def one(self) -> bool:
        """Whether exactly one square is set."""
        return not self.empty() and not self.multiple()

    def lowest_square(self) -> Square:
        """The lowest set square; an empty board is an error."""
        if self._board == 0:
            raise ValueError("empty bitboard has no lowest square")
        return Square((self._board & -self._board).bit_length() - 1)

    def lowest_bit(self) -> Bitboard:
        """Board holding only the lowest set square."""
        return Bitboard(self._board & -self._board)

    def without_lowest(self) -> Bitboard:
        """This board with its lowest set square removed."""
        return Bitboard(self._board & (self._board - 1))

    def squares(self) -> Iterator[Square]:
        """Yield the set squares from lowest to highest."""
        board = self._board
        while board:
            low = board & -board
            yield Square(low.bit_length() - 1)
            board ^= low

    def with_square(self, square: Square, value: bool) -> Bitboard:
        """Copy of this board with ``square`` set or cleared."""
        bit = square_bit(square)
        return Bitboard(self._board | bit if value else self._board & ~bit)

    def shift_up(self) -> Bitboard:
        return self << _VERTICAL

    def shift_down(self) -> Bitboard:
        return self >> _VERTICAL

    def shift_left(self) -> Bitboard:
        return (self >> _HORIZONTAL) & ~_FILE_H

    def shift_left_unchecked(self) -> Bitboard:
        return self >> _HORIZONTAL

    def shift_right(self) -> Bitboard:
        return (self << _HORIZONTAL) & ~_FILE_A

    def shift_right_unchecked(self) -> Bitboard:
        return self << _HORIZONTAL

    def shift_up_left(self) -> Bitboard:
        return (self << _DIAGONAL_LR) & ~_FILE_H

    def shift_up_right(self) -> Bitboard:
        return (self << _DIAGONAL_RL) & ~_FILE_A

    def shift_down_left(self) -> Bitboard:
        return (self >> _DIAGONAL_RL) & ~_FILE_H

    def shift_down_right(self) -> Bitboard:
        return (self >> _DIAGONAL_LR) & ~_FILE_A

    def shift_up_up_left(self) -> Bitboard:
        return (self << _DIAGONAL_12_LR) & ~_FILE_H

    def shift_up_up_right(self) -> Bitboard:
        return (self << _DIAGONAL_12_RL) & ~_FILE_A

    def shift_up_left_left(self) -> Bitboard:
        return (self << _DIAGONAL_21_LR) & ~(_FILE_G | _FILE_H)

    def shift_up_right_right(self) -> Bitboard:
        return (self << _DIAGONAL_21_RL) & ~(_FILE_A | _FILE_B)

    def shift_down_left_left(self) -> Bitboard:
        return (self >> _DIAGONAL_21_RL) & ~(_FILE_G | _FILE_H)

    def shift_down_right_right(self) -> Bitboard:
        return (self >> _DIAGONAL_21_LR) & ~(_FILE_A | _FILE_B)

    def shift_down_down_left(self) -> Bitboard:
        return (self >> _DIAGONAL_12_RL) & ~_FILE_H

    def shift_down_down_right(self) -> Bitboard:
        return (self >> _DIAGONAL_12_LR) & ~_FILE_A

    def shift_up_relative(self, color: Color) -> Bitboard:
        return self.shift_down() if color == Color.BLACK else self.shift_up()

    def shift_up_left_relative(self, color: Color) -> Bitboard:
        return self.shift_down_left() if color == Color.BLACK else self.shift_up_left()

    def shift_up_right_relative(self, color: Color) -> Bitboard:
        return self.shift_down_right() if color == Color.BLACK else self.shift_up_right()

    def shift_down_relative(self, color: Color) -> Bitboard:
        return self.shift_up() if color == Color.BLACK else self.shift_down()

    def shift_down_left_relative(self, color: Color) -> Bitboard:
        return self.shift_up_left() if color == Color.BLACK else self.shift_down_left()

    def shift_down_right_relative(self, color: Color) -> Bitboard:
        return self.shift_up_right() if color == Color.BLACK else self.shift_down_right()

    def fill_up(self) -> Bitboard:
        """Every square on or above a set square in its file."""
        b = self._board
        b |= (b << 8) & _MASK
        b |= (b << 16) & _MASK
        b |= (b << 32) & _MASK
        return Bitboard(b)

    def fill_down(self) -> Bitboard:
        """Every square on or below a set square in its file."""
        b = self._board
        b |= b >> 8
        b |= b >> 16
        b |= b >> 32
        return Bitboard(b)

    def fill_up_relative(self, color: Color) -> Bitboard:
        return self.fill_down() if color == Color.BLACK else self.fill_up()

    def fill_down_relative(self, color: Color) -> Bitboard:
        return self.fill_up() if color == Color.BLACK else self.fill_down()

    def fill_file(self) -> Bitboard:
        """Every file that holds a set square."""
        return self.fill_up() | self.fill_down()

    def render(self) -> str:
        """Eight lines, rank 8 first, with '1' for set squares and '.' otherwise."""
        return "".join(
            " ".join("1" if self[to_square(rank, file)] else "." for file in range(8)) + "\n"
            for rank in range(7, -1, -1)
        )


RANK_1 = Bitboard(0x00000000000000FF)
RANK_2 = Bitboard(0x000000000000FF00)
RANK_3 = Bitboard(0x0000000000FF0000)
RANK_4 = Bitboard(0x00000000FF000000)
RANK_5 = Bitboard(0x000000FF00000000)
RANK_6 = Bitboard(0x0000FF0000000000)
RANK_7 = Bitboard(0x00FF000000000000)
RANK_8 = Bitboard(0xFF00000000000000)

FILE_A = Bitboard(_FILE_A)
FILE_B = Bitboard(_FILE_B)
FILE_C = Bitboard(0x0404040404040404)
FILE_D = Bitboard(0x0808080808080808)
FILE_E = Bitboard(0x1010101010101010)
FILE_F = Bitboard(0x2020202020202020)
FILE_G = Bitboard(_FILE_G)
FILE_H = Bitboard(_FILE_H)

RANKS = (RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8)
FILES = (FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H)

DARK_SQUARES = Bitboard(0xAA55AA55AA55AA55)
LIGHT_SQUARES = Bitboard(0x55AA55AA55AA55AA)

CENTER_SQUARES = (
    Bitboard.from_square(Square.D4)
    | Bitboard.from_square(Square.E4)
    | Bitboard.from_square(Square.D5)
    | Bitboard.from_square(Square.E5)
)

ALL = Bitboard(_MASK)


def up(color: Color) -> int:
    """Square offset of one step forward for ``color``."""
    return DOWN if color == Color.BLACK else UP


def up_left(color: Color) -> int:
    return DOWN_LEFT if color == Color.BLACK else UP_LEFT


def up_right(color: Color) -> int:
    return DOWN_RIGHT if color == Color.BLACK else UP_RIGHT


def down(color: Color) -> int:
    """Square offset of one step backward for ``color``."""
    return UP if color == Color.BLACK else DOWN


def down_left(color: Color) -> int:
    return UP_LEFT if color == Color.BLACK else DOWN_LEFT


def down_right(color: Color) -> int:
    return UP_RIGHT if color == Color.BLACK else DOWN_RIGHT


def promotion_rank(color: Color) -> Bitboard:
    """The rank on which ``color``'s pawns promote."""
    return RANK_1 if color == Color.BLACK else RANK_8


def relative_rank_board(color: Color, idx: int) -> Bitboard:
    """The rank ``idx`` as seen from ``color``'s side."""
    return RANKS[relative_rank(color, idx)]


def pdep(value: int | Bitboard, mask: int | Bitboard) -> int:
    """Scatter the low bits of ``value`` into the set bits of ``mask``, lowest first."""
    src = int(value)
    remaining = int(mask) & _MASK
    result = 0
    shift = 0
    while remaining:
        low = remaining & -remaining
        if (src >> shift) & 1:
            result |= low
        remaining ^= low
        shift += 1
    return result


def pext(value: int | Bitboard, mask: int | Bitboard) -> int:
    """Gather the bits of ``value`` at the set bits of ``mask`` into the low bits."""
    src = int(value) & _MASK
    remaining = int(mask) & _MASK
    result = 0
    shift = 0
    while remaining:
        low = remaining & -remaining
        if src & low:
            result |= 1 << shift
        remaining ^= low
        shift += 1
    return result