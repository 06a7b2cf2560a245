"""Sliding attack lookup indexed by bit extraction over the relevant occupancy."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from .bitboard import Bitboard, pdep, pext
from .core import Square, square_bit
from .sliding import BISHOP_DIRECTIONS, ROOK_DIRECTIONS, _edge_mask, _slide

__all__ = [
    "RookSquareData",
    "BishopSquareData",
    "rook_data",
    "bishop_data",
    "rook_attacks",
    "bishop_attacks",
]

_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class RookSquareData:
    """Per-square rook data: relevant occupancy, reachable squares and table offset."""

    src_mask: Bitboard
    dst_mask: Bitboard
    offset: int


@dataclass(frozen=True)
class BishopSquareData:
    """Per-square bishop data: relevant occupancy and table offset."""

    mask: Bitboard
    offset: int


@cache
def rook_data() -> tuple[RookSquareData, ...]:
    """Rook lookup data for all 64 squares."""
    entries = []
    offset = 0
    for square in range(64):
        src_mask = 0
        dst_mask = 0
        for direction in ROOK_DIRECTIONS:
            attacks = _slide(square, direction, 0)
            src_mask |= attacks & ~_edge_mask(direction) & _MASK
            dst_mask |= attacks
        entries.append(RookSquareData(Bitboard(src_mask), Bitboard(dst_mask), offset))
        offset += 1 << bin(src_mask).count("1")
    return tuple(entries)


@cache
def bishop_data() -> tuple[BishopSquareData, ...]:
    """Bishop lookup data for all 64 squares."""
    entries = []
    offset = 0
    for square in range(64):
        mask = 0
        for direction in BISHOP_DIRECTIONS:
            mask |= _slide(square, direction, 0) & ~_edge_mask(direction) & _MASK
        entries.append(BishopSquareData(Bitboard(mask), offset))
        offset += 1 << bin(mask).count("1")
    return tuple(entries)


@cache
def _rook_table() -> list[int]:
    data = rook_data()
    last = data[-1]
    table = [0] * (last.offset + (1 << last.src_mask.popcount()))
    for square, entry in enumerate(data):
        src_mask = int(entry.src_mask)
        dst_mask = int(entry.dst_mask)
        for i in range(1 << entry.src_mask.popcount()):
            occupancy = pdep(i, src_mask)
            attacks = 0
            for direction in ROOK_DIRECTIONS:
                attacks |= _slide(square, direction, occupancy)
            table[entry.offset + i] = pext(attacks, dst_mask) & 0xFFFF
    return table


@cache
def _bishop_table() -> list[int]:
    data = bishop_data()
    last = data[-1]
    table = [0] * (last.offset + (1 << last.mask.popcount()))
    for square, entry in enumerate(data):
        mask = int(entry.mask)
        for i in range(1 << entry.mask.popcount()):
            occupancy = pdep(i, mask)
            attacks = 0
            for direction in BISHOP_DIRECTIONS:
                attacks |= _slide(square, direction, occupancy)
            table[entry.offset + i] = attacks
    return table


def _square_index(src: Square) -> int:
    square_bit(src)
    return int(src)


def rook_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Rook attacks from ``src`` given ``occupancy``."""
    entry = rook_data()[_square_index(src)]
    idx = pext(int(occupancy) & _MASK, entry.src_mask)
    return Bitboard(pdep(_rook_table()[entry.offset + idx], entry.dst_mask))


def bishop_attacks(src: Square, occupancy: Bitboard | int) -> Bitboard:
    """Bishop attacks from ``src`` given ``occupancy``."""
    entry = bishop_data()[_square_index(src)]
    idx = pext(int(occupancy) & _MASK, entry.mask)
    return Bitboard(_bishop_table()[entry.offset + idx])