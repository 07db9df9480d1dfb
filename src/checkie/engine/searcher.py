"""Bot search: capture-chain root builder over a depth-bounded alpha-beta."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.position import Position
from checkie.core.types import Square
from checkie.engine.evaluator import INF, Evaluator
from checkie.engine.search import IEngine, SearchLimits, SearchResult
from checkie.engine.settings import BotSettings

_LOGGER = logging.getLogger(__name__)

_NO_VALUE = -1.0


@dataclass(slots=True)
class _SearchNode:
    """Best move found at one root-level step and the node continuing it."""

    best_move: Move | None = None
    next_index: int | None = None


class SearchEngine(IEngine):
    """Chooses the full move (a step or a whole capture chain) for a bot.

    The root builder treats a capture chain of the side to move as a single
    ply and records every step in an index-linked node list; below the root a
    minimax with alpha-beta pruning alternates sides. Depth grows only when
    the mover changes, so a chain is searched at constant depth.

    Even depths minimize and odd depths maximize. Horizon scores come from
    :class:`Evaluator` with the perspective chosen by depth parity and the
    side to move.
    """

    __slots__ = (
        "_settings",
        "_generator",
        "_evaluator",
        "_pruning",
        "_max_depth",
        "_nodes",
        "_tree",
    )

    def __init__(
        self,
        settings: BotSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings if settings is not None else BotSettings()
        self._generator = MoveGenerator(rng if rng is not None else self._settings.make_rng())
        self._evaluator = Evaluator(self._settings.scoring_mode)
        self._pruning = self._settings.optimization.prunes
        self._max_depth = 0
        self._nodes = 0
        self._tree: list[_SearchNode] = []

    @property
    def settings(self) -> BotSettings:
        return self._settings

    def search(
        self,
        position: Position,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._max_depth = limits.max_depth
        self._nodes = 0
        self._tree = []
        _LOGGER.debug("Searching %s to depth %d", color, limits.max_depth)

        score = self._search_root(position, color, None, 0, _NO_VALUE)
        moves = tuple(self._principal_chain())
        self._tree = []

        _LOGGER.debug(
            "Search for %s done: %s (score %.3f, %d nodes)",
            color,
            " ".join(str(m) for m in moves) or "no move",
            score,
            self._nodes,
        )
        return SearchResult(moves, score, limits.max_depth, self._nodes)

    def best_sequence(self, position: Position, color: Color, max_depth: int) -> list[Move]:
        """Ordered moves the bot should play, one jump per entry for chains."""
        return list(self.search(position, color, SearchLimits(max_depth)).moves)

    # -- Root builder -------------------------------------------------------

    def _search_root(
        self,
        position: Position,
        color: Color,
        chain_sq: Square | None,
        node_index: int,
        alpha: float,
    ) -> float:
        self._nodes += 1
        self._tree.append(_SearchNode())
        best_value = _NO_VALUE

        if node_index != 0:
            assert chain_sq is not None
            moves, captures = self._generator.legal_moves_for(position, chain_sq)
        else:
            moves, captures = self._generator.legal_moves(position, color)

        if not captures and node_index != 0:
            # The chain is over; the turn passes to the opponent.
            return self._minimax(position, color.opposite, 0, alpha)

        for move in moves:
            next_index = len(self._tree)
            if captures:
                value = self._search_root(
                    position.apply(move), color, move.to_sq, next_index, best_value
                )
            else:
                value = self._minimax(position.apply(move), color.opposite, 0, best_value)

            if value > best_value:
                best_value = value
                node = self._tree[node_index]
                node.best_move = move
                node.next_index = next_index if captures else None

        return best_value

    def _principal_chain(self) -> list[Move]:
        chain: list[Move] = []
        index: int | None = 0
        while index is not None and index < len(self._tree):
            node = self._tree[index]
            if node.best_move is None:
                break
            chain.append(node.best_move)
            index = node.next_index
        return chain

    # -- Minimax ------------------------------------------------------------

    def _minimax(
        self,
        position: Position,
        color: Color,
        depth: int,
        alpha: float,
        beta: float = INF + 1,
        chain_sq: Square | None = None,
    ) -> float:
        self._nodes += 1
        if depth == self._max_depth:
            side = Color.BLACK if depth % 2 == color else Color.WHITE
            return self._evaluator.score(position, side)

        if chain_sq is not None:
            moves, captures = self._generator.legal_moves_for(position, chain_sq)
        else:
            moves, captures = self._generator.legal_moves(position, color)

        if not captures and chain_sq is not None:
            return self._minimax(position, color.opposite, depth + 1, alpha, beta)

        if not moves:
            # The side to move is stuck and loses.
            return 0.0 if depth % 2 else INF

        maximizing = depth % 2 == 1
        min_eval = INF + 1
        max_eval = _NO_VALUE
        for move in moves:
            child = position.apply(move)
            if captures:
                value = self._minimax(child, color, depth, alpha, beta, move.to_sq)
            else:
                value = self._minimax(child, color.opposite, depth + 1, alpha, beta)

            min_eval = min(min_eval, value)
            max_eval = max(max_eval, value)
            if maximizing:
                alpha = max(alpha, max_eval)
            else:
                beta = min(beta, min_eval)
            if self._pruning and alpha >= beta:
                # Offset so a cut branch never ties with a fully searched one.
                return max_eval + 1 if maximizing else min_eval - 1

        return max_eval if maximizing else min_eval
