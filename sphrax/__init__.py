"""Chess board primitives: pieces, squares, bitboards and attack tables."""

__version__ = "0.1.0"
__all__ = ["core", "bitboard", "sliding", "magic", "pext", "attacks", "rays"]