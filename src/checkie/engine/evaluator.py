"""Static evaluation used at the search horizon."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color, Piece
from checkie.engine.settings import ScoringMode

if TYPE_CHECKING:
    from checkie.core.position import Position

INF = 1e9

_ADVANCE_WEIGHT = 0.05
_KING_WEIGHT = 4
_KING_WEIGHT_WITH_POTENTIAL = 5


class Evaluator:
    """Material ratio evaluator.

    ``score(position, side)`` is the strength of *side* divided by the
    strength of its opponent: ``INF`` when the opponent has no material left,
    ``0`` when *side* has none. With :attr:`ScoringMode.NUMBER_AND_POTENTIAL`
    every man also earns ``0.05`` per row advanced and kings weigh 5 instead
    of 4.
    """

    __slots__ = ("_mode", "_potential", "_king_weight")

    def __init__(self, mode: ScoringMode = ScoringMode.NUMBER) -> None:
        self._mode = mode
        self._potential = mode is ScoringMode.NUMBER_AND_POTENTIAL
        self._king_weight = (
            _KING_WEIGHT_WITH_POTENTIAL if self._potential else _KING_WEIGHT
        )

    @property
    def mode(self) -> ScoringMode:
        return self._mode

    def score(self, position: Position, side: Color) -> float:
        white = white_kings = black = black_kings = 0.0
        for sq, code in enumerate(position.squares):
            if code == Piece.WHITE_MAN:
                white += 1
                if self._potential:
                    white += _ADVANCE_WEIGHT * (7 - (sq >> 3))
            elif code == Piece.BLACK_MAN:
                black += 1
                if self._potential:
                    black += _ADVANCE_WEIGHT * (sq >> 3)
            elif code == Piece.WHITE_KING:
                white_kings += 1
            elif code == Piece.BLACK_KING:
                black_kings += 1

        # Tallies are laid out for black; flip them for white.
        if side == Color.WHITE:
            white, black = black, white
            white_kings, black_kings = black_kings, white_kings

        if white + white_kings == 0:
            return INF
        if black + black_kings == 0:
            return 0.0
        k = self._king_weight
        return (black + black_kings * k) / (white + white_kings * k)
