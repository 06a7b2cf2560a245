"""Rays between and through pairs of aligned squares."""

from __future__ import annotations

from functools import cache

from .bitboard import Bitboard
from .core import Square, square_bit
from .sliding import EMPTY_BOARD_BISHOPS, EMPTY_BOARD_ROOKS, gen_bishop_attacks, gen_rook_attacks

__all__ = ["ray_between", "ray_intersecting"]


@cache
def _tables() -> tuple[tuple[tuple[Bitboard, ...], ...], tuple[tuple[Bitboard, ...], ...]]:
    empty = Bitboard()
    between = []
    intersecting = []
    for src in range(64):
        src_sq = Square(src)
        src_mask = square_bit(src_sq)
        rook_empty = EMPTY_BOARD_ROOKS[src]
        bishop_empty = EMPTY_BOARD_BISHOPS[src]
        between_row = []
        intersect_row = []
        for dst in range(64):
            dst_sq = Square(dst)
            dst_mask = square_bit(dst_sq)
            if src != dst and rook_empty[dst_sq]:
                gen = gen_rook_attacks
            elif src != dst and bishop_empty[dst_sq]:
                gen = gen_bishop_attacks
            else:
                between_row.append(empty)
                intersect_row.append(empty)
                continue
            between_row.append(gen(src_sq, dst_mask) & gen(dst_sq, src_mask))
            intersect_row.append((gen(src_sq, 0) | src_mask) & (gen(dst_sq, 0) | dst_mask))
        between.append(tuple(between_row))
        intersecting.append(tuple(intersect_row))
    return tuple(between), tuple(intersecting)


def ray_between(src: Square, dst: Square) -> Bitboard:
    """Squares strictly between two aligned squares; empty if they are not aligned."""
    square_bit(src)
    square_bit(dst)
    return _tables()[0][int(src)][int(dst)]


def ray_intersecting(src: Square, dst: Square) -> Bitboard:
    """The whole line through two aligned squares; empty if they are not aligned."""
    square_bit(src)
    square_bit(dst)
    return _tables()[1][int(src)][int(dst)]