"""Plain-text board diagrams.

A diagram is eight lines of eight cells, row 0 (rank 8) first. Cells use
``.`` for empty, ``w``/``b`` for men and ``W``/``B`` for kings; spaces inside
a line are ignored so both ``".b.b.b.b"`` and ``". b . b . b . b"`` parse.
"""

from __future__ import annotations

from checkie.core.piece import piece_char, piece_from_char
from checkie.core.position import Position

STARTING_TEXT = "\n".join(
    [
        ".b.b.b.b",
        "b.b.b.b.",
        ".b.b.b.b",
        "........",
        "........",
        "w.w.w.w.",
        ".w.w.w.w",
        "w.w.w.w.",
    ]
)


def position_from_text(text: str) -> Position:
    """Parse a board diagram into a :class:`Position`."""
    lines = [line.replace(" ", "") for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if len(lines) != 8:
        raise ValueError(f"Board diagram must have 8 rows, got {len(lines)}")

    cells: list[int] = []
    for row, line in enumerate(lines):
        if len(line) != 8:
            raise ValueError(f"Row {row} must have 8 cells: {line!r}")
        cells.extend(piece_from_char(ch) for ch in line)
    return Position(cells)


def position_to_text(position: Position) -> str:
    """Render *position* in the compact diagram format."""
    squares = position.squares
    return "\n".join(
        "".join(piece_char(code) for code in squares[row * 8 : row * 8 + 8])
        for row in range(8)
    )
