"""Tests for the bot search engine."""

import random

import pytest

from checkie.core.enums import Color, Piece
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.position import Position
from checkie.core.types import make_square as sq
from checkie.engine import (
    INF,
    BotSettings,
    Optimization,
    ScoringMode,
    SearchEngine,
    SearchLimits,
)


def _settings(**overrides) -> BotSettings:
    return BotSettings(no_random=True, **overrides)


class _DepthTrackingEngine(SearchEngine):
    """Records ``(parent_depth, depth, chained)`` for every minimax call."""

    def __init__(self, settings: BotSettings) -> None:
        super().__init__(settings)
        self.calls: list[tuple[int | None, int, bool]] = []
        self._depth_stack: list[int] = []

    def _minimax(self, position, color, depth, alpha, beta=INF + 1, chain_sq=None):
        parent = self._depth_stack[-1] if self._depth_stack else None
        self.calls.append((parent, depth, chain_sq is not None))
        self._depth_stack.append(depth)
        try:
            return super()._minimax(position, color, depth, alpha, beta, chain_sq)
        finally:
            self._depth_stack.pop()


# Three black men lined up so that the lone white man has exactly one
# capture chain: a1 x c3 x e5 x g7.
def _triple_jump(make_position) -> Position:
    return make_position(
        {
            (7, 0): Piece.WHITE_MAN,
            (6, 1): Piece.BLACK_MAN,
            (4, 3): Piece.BLACK_MAN,
            (2, 5): Piece.BLACK_MAN,
        }
    )


class TestSearchEngine:
    def test_returns_legal_move_from_start(self) -> None:
        pos = Position.initial()
        engine = SearchEngine(_settings())

        result = engine.search(pos, Color.WHITE, SearchLimits(max_depth=3))
        legal = MoveGenerator().legal_moves(pos, Color.WHITE).moves

        assert len(result.moves) == 1
        assert result.best_move in legal
        assert result.depth == 3
        assert result.nodes > 0

    def test_three_jump_chain_is_one_sequence(self, make_position) -> None:
        engine = SearchEngine(_settings())

        moves = engine.best_sequence(_triple_jump(make_position), Color.WHITE, 3)

        assert moves == [
            Move(sq(7, 0), sq(5, 2)),
            Move(sq(5, 2), sq(3, 4)),
            Move(sq(3, 4), sq(1, 6)),
        ]
        assert [m.captured_sq for m in moves] == [sq(6, 1), sq(4, 3), sq(2, 5)]

    def test_chain_below_root_hands_over_at_depth_zero(self, make_position) -> None:
        engine = _DepthTrackingEngine(_settings())

        result = engine.search(_triple_jump(make_position), Color.WHITE, SearchLimits(3))

        # The whole chain is one root ply; black then has nothing left to move.
        assert engine.calls == [(None, 0, False)]
        assert result.score == INF

    def test_chains_inside_minimax_keep_depth(self, make_position) -> None:
        # Once (5, 4) steps to (4, 5), black (2, 1) can take (3, 2).
        pos = make_position(
            {
                (1, 0): Piece.BLACK_MAN,
                (2, 1): Piece.BLACK_MAN,
                (3, 2): Piece.WHITE_MAN,
                (5, 4): Piece.WHITE_MAN,
            }
        )
        engine = _DepthTrackingEngine(_settings(optimization=Optimization.O0))

        engine.search(pos, Color.WHITE, SearchLimits(3))

        assert any(chained for _, _, chained in engine.calls)
        for parent, depth, chained in engine.calls:
            assert depth <= 3
            if parent is None:
                assert depth == 0
            elif chained:
                assert depth == parent
            else:
                assert depth == parent + 1

    def test_forced_capture_at_root(self, make_position) -> None:
        pos = make_position(
            {
                (5, 2): Piece.WHITE_MAN,
                (7, 6): Piece.WHITE_MAN,
                (4, 3): Piece.BLACK_MAN,
                (0, 1): Piece.BLACK_MAN,
            }
        )
        moves = SearchEngine(_settings()).best_sequence(pos, Color.WHITE, 2)
        assert moves == [Move(sq(5, 2), sq(3, 4))]
        assert moves[0].captured_sq == sq(4, 3)

    def test_avoids_hanging_a_man(self, make_position) -> None:
        # Stepping to (4, 3) lets black capture the only white man.
        pos = make_position({(5, 2): Piece.WHITE_MAN, (3, 4): Piece.BLACK_MAN})
        moves = SearchEngine(_settings()).best_sequence(pos, Color.WHITE, 2)
        assert moves == [Move(sq(5, 2), sq(4, 1))]

    def test_no_moves_returns_empty_sequence(self, make_position) -> None:
        pos = make_position({(4, 3): Piece.WHITE_MAN})
        result = SearchEngine(_settings()).search(pos, Color.BLACK, SearchLimits(2))
        assert result.moves == ()
        assert result.best_move is None
        assert result.score == -1

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ValueError):
            SearchEngine(_settings()).search(Position.initial(), Color.WHITE, SearchLimits(0))

    def test_fixed_seed_is_reproducible(self) -> None:
        pos = Position.initial()
        first = SearchEngine(_settings()).search(pos, Color.BLACK, SearchLimits(3))
        second = SearchEngine(_settings()).search(pos, Color.BLACK, SearchLimits(3))
        assert first == second

    def test_injected_rng_drives_move_order(self) -> None:
        pos = Position.initial()
        first = SearchEngine(rng=random.Random(7)).search(pos, Color.WHITE, SearchLimits(2))
        second = SearchEngine(rng=random.Random(7)).search(pos, Color.WHITE, SearchLimits(2))
        assert first.moves == second.moves


class TestPruning:
    def test_pruning_keeps_score_and_saves_nodes(self) -> None:
        pos = Position.initial()
        limits = SearchLimits(max_depth=2)

        pruned = SearchEngine(_settings(optimization=Optimization.O1)).search(
            pos, Color.WHITE, limits
        )
        full = SearchEngine(_settings(optimization=Optimization.O0)).search(
            pos, Color.WHITE, limits
        )

        assert pruned.score == full.score
        assert pruned.nodes < full.nodes

    def test_pruning_keeps_score_in_tactical_position(self, make_position) -> None:
        pos = make_position(
            {
                (5, 0): Piece.WHITE_MAN,
                (5, 2): Piece.WHITE_MAN,
                (6, 5): Piece.WHITE_MAN,
                (2, 3): Piece.BLACK_MAN,
                (2, 5): Piece.BLACK_MAN,
                (1, 6): Piece.BLACK_MAN,
            }
        )
        limits = SearchLimits(max_depth=2)
        pruned = SearchEngine(_settings(optimization=Optimization.O2)).search(
            pos, Color.BLACK, limits
        )
        full = SearchEngine(_settings(optimization=Optimization.O0)).search(
            pos, Color.BLACK, limits
        )
        assert pruned.score == full.score


class TestMinimaxSentinels:
    def test_stuck_side_scores_by_depth_parity(self, make_position) -> None:
        pos = make_position({(4, 3): Piece.BLACK_MAN})
        engine = SearchEngine(_settings())
        engine._max_depth = 3

        assert engine._minimax(pos, Color.WHITE, 0, -1.0) == INF
        assert engine._minimax(pos, Color.WHITE, 1, -1.0) == 0

    def test_horizon_uses_evaluator(self, make_position) -> None:
        pos = make_position(
            {(5, 0): Piece.WHITE_MAN, (5, 2): Piece.WHITE_MAN, (2, 1): Piece.BLACK_MAN}
        )
        engine = SearchEngine(_settings(scoring_mode=ScoringMode.NUMBER))
        engine._max_depth = 1

        # Odd depth with white to move scores for white.
        assert engine._minimax(pos, Color.WHITE, 1, -1.0) == pytest.approx(2.0)
        # With black to move the perspective flips to black.
        assert engine._minimax(pos, Color.BLACK, 1, -1.0) == pytest.approx(0.5)
