"""Slow, loop-based sliding piece attack generation used to build lookup tables."""

from __future__ import annotations

from typing import Iterable

from .bitboard import (
    DOWN,
    DOWN_LEFT,
    DOWN_RIGHT,
    FILE_A,
    FILE_H,
    LEFT,
    RANK_1,
    RANK_8,
    RIGHT,
    UP,
    UP_LEFT,
    UP_RIGHT,
    Bitboard,
)
from .core import Square, square_bit

__all__ = [
    "ROOK_DIRECTIONS",
    "BISHOP_DIRECTIONS",
    "EMPTY_BOARD_ROOKS",
    "EMPTY_BOARD_BISHOPS",
    "edges",
    "generate_sliding_attacks",
    "generate_empty_board_attacks",
    "gen_rook_attacks",
    "gen_bishop_attacks",
]

_MASK = (1 << 64) - 1

ROOK_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
BISHOP_DIRECTIONS = (UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)

_EDGES = {
    UP: int(RANK_8),
    DOWN: int(RANK_1),
    LEFT: int(FILE_A),
    RIGHT: int(FILE_H),
    UP_LEFT: int(FILE_A | RANK_8),
    UP_RIGHT: int(FILE_H | RANK_8),
    DOWN_LEFT: int(FILE_A | RANK_1),
    DOWN_RIGHT: int(FILE_H | RANK_1),
}


def _edge_mask(direction: int) -> int:
    try:
        return _EDGES[direction]
    except KeyError:
        raise ValueError(f"not a sliding direction: {direction}") from None


def _slide(src: int, direction: int, occupancy: int) -> int:
    """Integer form of a single-direction ray from square index ``src``."""
    blockers = _edge_mask(direction)
    bit = 1 << src
    if blockers & bit:
        return 0
    blockers |= occupancy
    shift = abs(direction)
    dst = 0
    while True:
        bit = bit >> shift if direction < 0 else (bit << shift) & _MASK
        dst |= bit
        if bit & blockers:
            return dst


def edges(direction: int) -> Bitboard:
    """The board edge a ray in ``direction`` stops at."""
    return Bitboard(_edge_mask(direction))


def generate_sliding_attacks(src: Square, direction: int, occupancy: Bitboard | int) -> Bitboard:
    """Squares reached from ``src`` along ``direction``, stopping at the first blocker."""
    square_bit(src)
    return Bitboard(_slide(int(src), direction, int(occupancy) & _MASK))


def generate_empty_board_attacks(directions: Iterable[int]) -> tuple[Bitboard, ...]:
    """Per-square union of rays in ``directions`` on an empty board."""
    dirs = tuple(directions)
    result = []
    for square in range(64):
        attacks = 0
        for direction in dirs:
            attacks |= _slide(square, direction, 0)
        result.append(Bitboard(attacks))
    return tuple(result)


def _all_sliding(src: Square, occupancy: Bitboard | int, directions: tuple[int, ...]) -> Bitboard:
    square_bit(src)
    occ = int(occupancy) & _MASK
    attacks = 0
    for direction in directions:
        attacks |= _slide(int(src), direction, occ)
    return Bitboard(attacks)


def gen_rook_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Rook attacks from ``src`` given ``occupancy``, computed by stepping."""
    return _all_sliding(src, occupancy, ROOK_DIRECTIONS)


def gen_bishop_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Bishop attacks from ``src`` given ``occupancy``, computed by stepping."""
    return _all_sliding(src, occupancy, BISHOP_DIRECTIONS)


EMPTY_BOARD_ROOKS = generate_empty_board_attacks(ROOK_DIRECTIONS)
EMPTY_BOARD_BISHOPS = generate_empty_board_attacks(BISHOP_DIRECTIONS)