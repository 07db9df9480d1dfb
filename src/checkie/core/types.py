"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

White men advance toward row 0, black men toward row 7.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63


def row_of(sq: Square) -> int:
    """Row index 0–7 (0 is rank 8)."""
    return sq >> 3


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq & 7


def is_valid_coord(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    if not is_valid_coord(row, col):
        raise ValueError(f"Coordinates out of range: ({row}, {col})")
    return row * 8 + col


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 56 → 'a1', 7 → 'h8'."""
    return chr(ord("a") + col_of(sq)) + str(8 - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c3' → 42."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(8 - int(name[1]), ord(name[0]) - ord("a"))


def is_dark_square(sq: Square) -> bool:
    """Playing squares; a1 is dark."""
    return (row_of(sq) + col_of(sq)) % 2 == 1
