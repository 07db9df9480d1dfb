"""Draughts bot package: evaluation, search and bot settings.

The Qt worker lives in :mod:`checkie.engine.qt_bridge` and is imported
explicitly so that the search can be used without PyQt6 loaded.
"""

from checkie.engine.evaluator import INF, Evaluator
from checkie.engine.search import IEngine, SearchLimits, SearchResult
from checkie.engine.searcher import SearchEngine
from checkie.engine.settings import BotSettings, Optimization, ScoringMode, load_settings

__all__ = [
    "INF",
    "BotSettings",
    "Evaluator",
    "IEngine",
    "Optimization",
    "ScoringMode",
    "SearchEngine",
    "SearchLimits",
    "SearchResult",
    "load_settings",
]
