"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color.

    The value doubles as the parity test for piece codes: a piece belongs to
    *color* when ``code % 2 != color``.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Piece codes stored on the board.

    Odd codes are white, even non-zero codes are black, a king is its man + 2.
    """

    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
