"""Core domain layer: pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Color, MoveGenerator, Position

    pos = Position.initial()
    moves, forced = MoveGenerator().legal_moves(pos, Color.WHITE)
    for move in moves:
        print(move)
"""

from checkie.core.enums import Color, GameResult, Piece
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator, MoveList
from checkie.core.notation import STARTING_TEXT, position_from_text, position_to_text
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "Piece",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Move",
    "MoveGenerator",
    "MoveList",
    "Position",
    "Rules",
    # Notation
    "STARTING_TEXT",
    "position_from_text",
    "position_to_text",
]
