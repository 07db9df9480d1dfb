"""Game layer: board holder and players."""

from checkie.game.player import BotPlayer, HumanPlayer, IPlayer
from checkie.game.state import GameState, MoveRecord

__all__ = [
    "BotPlayer",
    "GameState",
    "HumanPlayer",
    "IPlayer",
    "MoveRecord",
]
