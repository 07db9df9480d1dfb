"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.enums import Color
    from checkie.core.move import Move
    from checkie.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``moves`` is the chosen chain in play order; it is empty when the side
    has no legal move.
    """

    moves: tuple[Move, ...]
    score: float
    depth: int
    nodes: int

    @property
    def best_move(self) -> Move | None:
        return self.moves[0] if self.moves else None


class IEngine(Protocol):
    """Protocol for draughts engines used by the game layer."""

    def search(
        self,
        position: Position,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult: ...
