"""Game layer: the capability contract consumers implement, plus self-play.

Quick start::

    from gametree.game import IGameLogic

    class Nim(IGameLogic[tuple[int, bool], int]):
        ...
"""

from gametree.game.interfaces import IGameLogic
from gametree.game.selfplay import GameRecord, play_game

__all__ = [
    "GameRecord",
    "IGameLogic",
    "play_game",
]
