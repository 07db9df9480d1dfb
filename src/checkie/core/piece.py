"""Piece-code predicates.

Every color or type test goes through the parity encoding of
:class:`~checkie.core.enums.Piece`, so plain ``int`` codes coming from a
board snapshot work the same as enum members.
"""

from __future__ import annotations

from checkie.core.enums import Color, Piece

_CHAR_MAP: dict[str, Piece] = {
    ".": Piece.EMPTY,
    "w": Piece.WHITE_MAN,
    "b": Piece.BLACK_MAN,
    "W": Piece.WHITE_KING,
    "B": Piece.BLACK_KING,
}

_CHARS: dict[int, str] = {int(v): k for k, v in _CHAR_MAP.items()}


def color_of(code: int) -> Color | None:
    """Color of the piece, ``None`` for an empty square."""
    if not code:
        return None
    return Color.WHITE if code % 2 else Color.BLACK


def belongs_to(code: int, color: Color) -> bool:
    return bool(code) and code % 2 != color


def same_color(a: int, b: int) -> bool:
    """Whether two non-empty codes share a color."""
    return a % 2 == b % 2


def is_king(code: int) -> bool:
    return code > Piece.BLACK_MAN


def is_man(code: int) -> bool:
    return Piece.EMPTY < code <= Piece.BLACK_MAN


def promoted(code: int) -> Piece:
    """King code for a man; kings are returned unchanged."""
    if is_man(code):
        return Piece(code + 2)
    return Piece(code)


def promotion_row(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def forward_step(color: Color) -> int:
    """Row delta of a man's plain move."""
    return -1 if color == Color.WHITE else 1


def piece_char(code: int) -> str:
    return _CHARS[code]


def piece_from_char(char: str) -> Piece:
    try:
        return _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
