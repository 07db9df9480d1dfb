"""Qt bridge to run bot searches in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.enums import Color
from checkie.core.position import Position
from checkie.engine.search import SearchLimits
from checkie.engine.searcher import SearchEngine
from checkie.engine.settings import BotSettings

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes bot turns on demand.

    The search itself cannot be interrupted; :meth:`cancel` makes the worker
    drop the result of the search in flight instead of emitting it.
    """

    turns_ready = pyqtSignal(int, object, float, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_settings")

    def __init__(self, settings: BotSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else BotSettings()
        self._engine = SearchEngine(self._settings)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int, int)
    def request_turns(self, position_obj: object, color_value: int, request_id: int) -> None:
        """Search the full turn of *color_value* in *position_obj* and emit it."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        color = Color(color_value)
        limits = SearchLimits(max_depth=self._settings.level_for(color))
        try:
            result = self._engine.search(position_obj, color, limits)
        except Exception as exc:
            _LOGGER.exception("Search request %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if not result.moves:
            self.search_no_move.emit(request_id, result.score, result.nodes)
            return

        self.turns_ready.emit(request_id, list(result.moves), result.score, result.nodes)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(object)
    def set_settings(self, settings: object) -> None:
        """Replace bot settings (takes effect on the next search).

        Anything other than :class:`BotSettings` is logged and ignored.
        """
        if not isinstance(settings, BotSettings):
            _LOGGER.warning("Ignoring settings of type %s", type(settings).__name__)
            return
        self._settings = settings
        self._engine = SearchEngine(settings)
