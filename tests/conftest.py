"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from checkie.core.enums import Piece
from checkie.core.position import Position
from checkie.core.types import make_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def build_position(pieces: dict[tuple[int, int], Piece]) -> Position:
    """Position with *pieces* placed by ``(row, col)`` on an empty board."""
    cells = [Piece.EMPTY] * 64
    for (row, col), piece in pieces.items():
        cells[make_square(row, col)] = piece
    return Position(cells)


@pytest.fixture
def make_position() -> Callable[[dict[tuple[int, int], Piece]], Position]:
    """Factory placing pieces by ``(row, col)`` on an empty board."""
    return build_position


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for worker tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
