"""Game state: the board holder that replays moves and tracks chains."""

from __future__ import annotations

import random
from dataclasses import InitVar, dataclass, field

from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator, MoveList
from checkie.core.piece import is_king
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import Square


@dataclass
class MoveRecord:
    """A single jump or step in the game history."""

    move: Move
    color: Color
    position_after: Position
    promoted: bool = False


@dataclass
class GameState:
    """Tracks the current position, whose turn it is and pending chains.

    This is a pure data/logic class without threading or UI. A capture that can
    be followed by another capture with the same piece keeps the turn; the
    next move must then start from :attr:`chain_square`. Pass *rng* to make
    the order of :meth:`legal_moves` reproducible.
    """

    position: Position = field(default_factory=Position.initial)
    side_to_move: Color = Color.WHITE
    chain_square: Square | None = None
    result: GameResult = GameResult.IN_PROGRESS
    history: list[MoveRecord] = field(default_factory=list)
    rng: InitVar[random.Random | None] = None
    _generator: MoveGenerator = field(init=False, repr=False, compare=False)

    def __post_init__(self, rng: random.Random | None) -> None:
        self._generator = MoveGenerator(rng)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        position: Position | None = None,
        side_to_move: Color = Color.WHITE,
        rng: random.Random | None = None,
    ) -> None:
        """Initialise (or reset) the game; *rng* replaces the move-order source."""
        if rng is not None:
            self._generator = MoveGenerator(rng)
        self.position = position if position is not None else Position.initial()
        self.side_to_move = side_to_move
        self.chain_square = None
        self.history.clear()
        self.result = Rules.game_result(self.position, side_to_move)

    def snapshot(self) -> Position:
        """Current board; positions are immutable so no copy is needed."""
        return self.position

    @property
    def is_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    # ── Moves ────────────────────────────────────────────────────────────

    def legal_moves(self) -> MoveList:
        """Moves available now, limited to the chaining piece mid-chain."""
        if self.chain_square is not None:
            return self._generator.legal_moves_for(self.position, self.chain_square)
        return self._generator.legal_moves(self.position, self.side_to_move)

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        was_king = is_king(self.position[move.from_sq])
        self.position = self.position.apply(move)

        record = MoveRecord(
            move=move,
            color=self.side_to_move,
            position_after=self.position,
            promoted=not was_king and is_king(self.position[move.to_sq]),
        )
        self.history.append(record)

        if move.is_capture and Rules.can_continue_chain(self.position, move.to_sq):
            self.chain_square = move.to_sq
        else:
            self.chain_square = None
            self.side_to_move = self.side_to_move.opposite
            self.result = Rules.game_result(self.position, self.side_to_move)
        return record
