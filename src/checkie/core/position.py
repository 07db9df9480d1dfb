"""Immutable board snapshot and move application."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from checkie.core.enums import Color, Piece
from checkie.core.move import Move
from checkie.core.piece import (
    belongs_to,
    color_of,
    piece_char,
    promoted,
    promotion_row,
)
from checkie.core.types import Square, is_dark_square, make_square, row_of


class Position:
    """8x8 grid of piece codes.

    Instances never change after construction: :meth:`apply` returns a new
    position, so sibling branches of a search can share an ancestor safely.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[int] | None = None) -> None:
        if squares is None:
            cells: tuple[int, ...] = (Piece.EMPTY,) * 64
        else:
            cells = tuple(int(code) for code in squares)
            if len(cells) != 64:
                raise ValueError(f"Position needs 64 squares, got {len(cells)}")
        self._squares = cells

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Position:
        """Build from a ``rows[row][col]`` grid as handed out by a board holder."""
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board snapshot must be an 8x8 grid")
        return cls(code for row in rows for code in row)

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position: 12 men per side on the dark squares."""
        cells = [Piece.EMPTY] * 64
        for sq in range(64):
            if not is_dark_square(sq):
                continue
            if row_of(sq) < 3:
                cells[sq] = Piece.BLACK_MAN
            elif row_of(sq) > 4:
                cells[sq] = Piece.WHITE_MAN
        return cls(cells)

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> int:
        return self._squares[sq]

    @property
    def squares(self) -> tuple[int, ...]:
        return self._squares

    def to_rows(self) -> list[list[int]]:
        return [list(self._squares[r * 8 : r * 8 + 8]) for r in range(8)]

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [sq for sq, code in enumerate(self._squares) if belongs_to(code, color)]

    def count(self, code: int) -> int:
        return self._squares.count(code)

    def material(self, color: Color) -> int:
        return len(self.pieces(color))

    # ── Move application ─────────────────────────────────────────────────

    def apply(self, move: Move) -> Position:
        """Return the position after *move*; legality is the caller's concern."""
        cells = list(self._squares)
        piece = cells[move.from_sq]
        if not piece:
            raise ValueError(f"No piece on {move.from_sq}")

        if move.captured_sq is not None:
            cells[move.captured_sq] = Piece.EMPTY

        color = color_of(piece)
        assert color is not None
        if row_of(move.to_sq) == promotion_row(color):
            piece = promoted(piece)

        cells[move.to_sq] = piece
        cells[move.from_sq] = Piece.EMPTY
        return Position(cells)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [piece_char(self._squares[make_square(row, col)]) for col in range(8)]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
