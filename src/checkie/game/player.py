"""Game participants: humans pick moves interactively, bots search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.engine.search import SearchLimits

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.core.position import Position
    from checkie.engine.search import IEngine
    from checkie.game.state import GameState


class IPlayer(ABC):
    """Interface for a game participant (human or bot)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the UI."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True


class BotPlayer(IPlayer):
    """A bot that searches with *engine* to *level* plies.

    Args:
        color: Side the bot plays.
        engine: Search engine producing full turns.
        level: Maximum search depth.
        name: Display name.
    """

    __slots__ = ("_color", "_engine", "_level", "_name")

    def __init__(
        self,
        color: Color,
        engine: IEngine,
        level: int = 3,
        name: str = "Bot",
    ) -> None:
        if level < 1:
            raise ValueError(f"Bot level must be >= 1, got {level}")
        self._color = color
        self._engine = engine
        self._level = level
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def level(self) -> int:
        return self._level

    def find_best_turns(self, position: Position) -> list[Move]:
        """The chosen turn: a single step, or every jump of a capture chain."""
        result = self._engine.search(position, self._color, SearchLimits(self._level))
        return list(result.moves)

    def play(self, state: GameState) -> list[Move]:
        """Search from *state* and replay the chosen turn one jump at a time."""
        if state.side_to_move != self._color:
            raise ValueError(f"It is not {self._color}'s turn")

        turns = self.find_best_turns(state.snapshot())
        for move in turns:
            legal = state.legal_moves().moves
            # Move equality ignores the captured square; replay the generated one.
            matching = [m for m in legal if m == move]
            if not matching:
                raise ValueError(f"Bot move {move} is not legal in the current state")
            state.apply_move(matching[0])
        return turns
