"""Legal move generation with mandatory-capture precedence."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, NamedTuple

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import color_of, forward_step, is_king, same_color
from checkie.core.types import Square, make_square

if TYPE_CHECKING:
    from checkie.core.position import Position


DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_jumps() -> tuple[tuple[tuple[Square, Square], ...], ...]:
    """Per square: ``(jumped, landing)`` pairs for a man's capture."""
    jumps: list[tuple[tuple[Square, Square], ...]] = []
    for sq in range(64):
        row, col = sq >> 3, sq & 7
        pairs: list[tuple[Square, Square]] = []
        for dr, dc in DIAGONAL_DIRS:
            lr, lc = row + 2 * dr, col + 2 * dc
            if 0 <= lr < 8 and 0 <= lc < 8:
                pairs.append((make_square(row + dr, col + dc), make_square(lr, lc)))
        jumps.append(tuple(pairs))
    return tuple(jumps)


def _build_rays() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        row, col = sq >> 3, sq & 7
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in DIAGONAL_DIRS:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while 0 <= r < 8 and 0 <= c < 8:
                ray.append(make_square(r, c))
                r += dr
                c += dc
            if ray:
                square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_steps(color: Color) -> tuple[tuple[Square, ...], ...]:
    steps: list[tuple[Square, ...]] = []
    dr = forward_step(color)
    for sq in range(64):
        row, col = sq >> 3, sq & 7
        targets: list[Square] = []
        for dc in (-1, 1):
            if 0 <= row + dr < 8 and 0 <= col + dc < 8:
                targets.append(make_square(row + dr, col + dc))
        steps.append(tuple(targets))
    return tuple(steps)


_JUMPS = _build_jumps()
_RAYS = _build_rays()
_STEPS = (_build_steps(Color.WHITE), _build_steps(Color.BLACK))


class MoveList(NamedTuple):
    """Generated moves plus whether they are mandatory captures."""

    moves: list[Move]
    forced_capture: bool


class MoveGenerator:
    """Generates legal moves for a side or a single piece.

    The side-wide move list is shuffled with the injected random source so
    that equal-valued choices are picked in a reproducible random order.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, position: Position, color: Color) -> MoveList:
        """All legal moves for *color*, captures only if any capture exists."""
        moves, forced = self.collect(position, color)
        self._rng.shuffle(moves)
        return MoveList(moves, forced)

    @staticmethod
    def collect(position: Position, color: Color) -> MoveList:
        """Same moves as :meth:`legal_moves` in board scan order."""
        moves: list[Move] = []
        forced = False

        for sq in position.pieces(color):
            piece_moves, captures = MoveGenerator._piece_moves(position, sq)
            if captures and not forced:
                forced = True
                moves.clear()
            if captures or not forced:
                moves.extend(piece_moves)

        return MoveList(moves, forced)

    @staticmethod
    def legal_moves_for(position: Position, sq: Square) -> MoveList:
        """Moves of the piece on *sq*; captures take precedence over steps."""
        if not position[sq]:
            raise ValueError(f"No piece on square {sq}")
        moves, captures = MoveGenerator._piece_moves(position, sq)
        return MoveList(moves, captures)

    # -- Per-piece generation -----------------------------------------------

    @staticmethod
    def _piece_moves(position: Position, sq: Square) -> tuple[list[Move], bool]:
        piece = position[sq]
        moves: list[Move] = []

        if is_king(piece):
            MoveGenerator._gen_king_captures(position, sq, piece, moves)
        else:
            MoveGenerator._gen_man_captures(position, sq, piece, moves)
        if moves:
            return moves, True

        if is_king(piece):
            MoveGenerator._gen_king_slides(position, sq, moves)
        else:
            color = color_of(piece)
            assert color is not None
            for to_sq in _STEPS[color][sq]:
                if not position[to_sq]:
                    moves.append(Move(sq, to_sq))
        return moves, False

    @staticmethod
    def _gen_man_captures(
        position: Position, sq: Square, piece: int, moves: list[Move]
    ) -> None:
        for over, land in _JUMPS[sq]:
            target = position[over]
            if position[land] or not target or same_color(target, piece):
                continue
            moves.append(Move(sq, land, over))

    @staticmethod
    def _gen_king_captures(
        position: Position, sq: Square, piece: int, moves: list[Move]
    ) -> None:
        for ray in _RAYS[sq]:
            captured: Square | None = None
            for to_sq in ray:
                target = position[to_sq]
                if target:
                    # Only the first piece on a ray can be taken.
                    if same_color(target, piece) or captured is not None:
                        break
                    captured = to_sq
                elif captured is not None:
                    moves.append(Move(sq, to_sq, captured))

    @staticmethod
    def _gen_king_slides(position: Position, sq: Square, moves: list[Move]) -> None:
        for ray in _RAYS[sq]:
            for to_sq in ray:
                if position[to_sq]:
                    break
                moves.append(Move(sq, to_sq))
