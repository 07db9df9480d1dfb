"""High-level draughts rules: game over detection and chain continuation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color, GameResult
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.position import Position
    from checkie.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    A side with no legal moves (no pieces, or every piece blocked) loses.
    """

    @staticmethod
    def has_moves(position: Position, color: Color) -> bool:
        return bool(MoveGenerator.collect(position, color).moves)

    @staticmethod
    def has_forced_capture(position: Position, color: Color) -> bool:
        return MoveGenerator.collect(position, color).forced_capture

    @staticmethod
    def can_continue_chain(position: Position, sq: Square) -> bool:
        """Whether the piece that just captured onto *sq* must capture again."""
        return MoveGenerator.legal_moves_for(position, sq).forced_capture

    @staticmethod
    def game_result(position: Position, side_to_move: Color) -> GameResult:
        """Determine the current game result."""
        if Rules.has_moves(position, side_to_move):
            return GameResult.IN_PROGRESS
        return (
            GameResult.BLACK_WINS
            if side_to_move == Color.WHITE
            else GameResult.WHITE_WINS
        )
