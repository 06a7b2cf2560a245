# sphrax

Chess board primitives for Python. It covers pieces, colours and squares,
64-bit bitboards, and precomputed attack tables for every piece type.

## Installation

```
pip install .
```

## What is inside

- `sphrax.core` holds the following:
  - the `Piece`, `PieceType`, `Color` and `Square` enums. `Square` runs from `A1` = 0 to `H8` = 63, followed by `NONE`.
  - helpers that convert between them: `color_piece`, `piece_type`, `piece_color`, `opp_color`, `flip_piece_color`, `to_square`, `square_rank`, `square_file`, `flip_square_rank`, `flip_square_file`, `square_bit`, `square_name`, `piece_from_char`, `piece_char` and more.
  - the `KingPair`, `RookPair` and `CastlingRooks` records.
  - score constants such as `SCORE_MATE` and `MAX_DEPTH`.

  Helpers that need a real piece, colour or square raise `ValueError` when they are given `NONE`.
- `sphrax.bitboard` provides `Bitboard`, an immutable 64-bit set of squares. It supports:
  - the bitwise operators;
  - shifts in every direction, including colour-relative ones;
  - file fills;
  - iteration over its squares;
  - `popcount`, `lowest_square` and `without_lowest`;
  - an ASCII rendering with `render`.

  The module also defines rank and file constants (`RANK_1` … `FILE_H`), direction offsets, and the `pdep`/`pext` bit-scatter and bit-gather helpers.
- `sphrax.sliding` contains the ray-walking generator that the slider tables are built from: `generate_sliding_attacks`, `gen_rook_attacks` and `gen_bishop_attacks`. It also holds the empty-board tables `EMPTY_BOARD_ROOKS` and `EMPTY_BOARD_BISHOPS`.
- `sphrax.magic` and `sphrax.pext` are two lookup-table schemes for rook and bishop attacks. The first uses magic multiplication and the second uses bit extraction. Both give the same results. `sphrax.attacks` uses the magic tables.
- `sphrax.attacks` provides `knight_attacks`, `king_attacks`, `pawn_attacks`, `rook_attacks`, `bishop_attacks`, `queen_attacks` and `non_pawn_piece_attacks`.
- `sphrax.rays` provides two functions:
  - `ray_between` gives the squares strictly between two aligned squares.
  - `ray_intersecting` gives the whole line through them.

  Both return an empty board when the squares are not aligned.

## Example

```python
from sphrax.core import Square, PieceType
from sphrax.bitboard import Bitboard
from sphrax.attacks import knight_attacks, rook_attacks, non_pawn_piece_attacks
from sphrax.rays import ray_between

print(knight_attacks(Square.A1).render())

blockers = Bitboard.from_square(Square.D4) | Bitboard.from_square(Square.A6)
for sq in rook_attacks(Square.A4, blockers).squares():
    print(sq.name)

print(non_pawn_piece_attacks(PieceType.QUEEN, Square.E4, Bitboard(0)).popcount())
print(ray_between(Square.A1, Square.H8).popcount())  # 6
```

The first slider lookup builds the attack tables, so it takes a moment.
Later lookups are cheap.

## What this package does not do

This package has only board primitives. It has no position or FEN handling,
no move generation or move representation, and no evaluation or search. It
also provides no command-line program and no engine protocol.

## Running the tests

```
pip install .[test]
pytest
```