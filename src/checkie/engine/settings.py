"""Bot configuration: scoring mode, pruning level, randomness and depth."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any

from checkie.core.enums import Color

_LOGGER = logging.getLogger(__name__)

ConfigGetter = Callable[[str, str], Any]

_SECTION = "Bot"
_FIXED_SEED = 0


class ScoringMode(Enum):
    """How the evaluator weighs material."""

    NUMBER = "Number"
    NUMBER_AND_POTENTIAL = "NumberAndPotential"


class Optimization(Enum):
    """Search optimization level; ``O0`` turns alpha-beta pruning off."""

    O0 = "O0"
    O1 = "O1"
    O2 = "O2"

    @property
    def prunes(self) -> bool:
        return self is not Optimization.O0


@dataclass(slots=True, frozen=True)
class BotSettings:
    """All bot-related settings, parsed once into closed enumerations."""

    no_random: bool = False
    scoring_mode: ScoringMode = ScoringMode.NUMBER_AND_POTENTIAL
    optimization: Optimization = Optimization.O1
    white_bot: bool = False
    black_bot: bool = True
    white_level: int = 3
    black_level: int = 3

    def __post_init__(self) -> None:
        if self.white_level < 1 or self.black_level < 1:
            raise ValueError(
                f"Bot level must be >= 1, got {self.white_level}/{self.black_level}"
            )

    def level_for(self, color: Color) -> int:
        """Maximum search depth of the bot playing *color*."""
        return self.white_level if color == Color.WHITE else self.black_level

    def is_bot(self, color: Color) -> bool:
        return self.white_bot if color == Color.WHITE else self.black_bot

    def make_rng(self) -> random.Random:
        """Shuffle source: fixed seed without randomness, OS-seeded otherwise."""
        if self.no_random:
            return random.Random(_FIXED_SEED)
        return random.Random()

    # ── Loading ──────────────────────────────────────────────────────────

    @classmethod
    def from_config(cls, get_config: ConfigGetter) -> BotSettings:
        """Build settings from a ``get_config(section, key)`` accessor.

        Keys the accessor does not know (``KeyError``) keep their defaults.
        """
        overrides: dict[str, Any] = {}
        for key, field_name, convert in _CONFIG_KEYS:
            try:
                value = get_config(_SECTION, key)
            except KeyError:
                continue
            if value is not None:
                overrides[field_name] = convert(value)
        return replace(cls(), **overrides)


def _parse_scoring_mode(value: Any) -> ScoringMode:
    try:
        return ScoringMode(value)
    except ValueError:
        _LOGGER.warning("Unknown scoring mode %r, using %s", value, ScoringMode.NUMBER.value)
        return ScoringMode.NUMBER


def _parse_optimization(value: Any) -> Optimization:
    try:
        return Optimization(value)
    except ValueError:
        _LOGGER.warning(
            "Unknown optimization level %r, using %s", value, Optimization.O1.value
        )
        return Optimization.O1


def _parse_flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected true or false, got {value!r}")
    return value


def load_settings(path: str | Path) -> BotSettings:
    """Read bot settings from a JSON file with a ``"Bot"`` section."""
    settings_path = Path(path)
    if not settings_path.is_file():
        _LOGGER.info("Settings file not found, using defaults: %s", settings_path)
        return BotSettings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed settings file {settings_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {settings_path} must hold a JSON object")
    if not isinstance(raw.get(_SECTION, {}), dict):
        raise ValueError(f"Settings file {settings_path}: '{_SECTION}' must be an object")

    def get_config(section: str, key: str) -> Any:
        return raw.get(section, {})[key]

    return BotSettings.from_config(get_config)


# (settings.json key, BotSettings field, converter)
_CONFIG_KEYS: tuple[tuple[str, str, Callable[[Any], Any]], ...] = (
    ("NoRandom", "no_random", _parse_flag),
    ("BotScoringType", "scoring_mode", _parse_scoring_mode),
    ("Optimization", "optimization", _parse_optimization),
    ("IsWhiteBot", "white_bot", _parse_flag),
    ("IsBlackBot", "black_bot", _parse_flag),
    ("WhiteBotLevel", "white_level", int),
    ("BlackBotLevel", "black_level", int),
)
