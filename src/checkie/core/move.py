"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single step or jump.

    Identity is ``(from_sq, to_sq)``; the captured square is metadata and
    takes no part in equality or hashing.
    """

    from_sq: Square
    to_sq: Square
    captured_sq: Square | None = field(default=None, compare=False)

    @property
    def is_capture(self) -> bool:
        return self.captured_sq is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = ":" if self.is_capture else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
