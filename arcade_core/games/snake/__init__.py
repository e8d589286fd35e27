"""Grid-snake: steer a growing snake toward food without hitting
the border (classic mode) or its own body."""

from .config import SnakeConfig, SnakeMode
from .state import State, new_game
from .step import RULES, step

__all__ = ["RULES", "SnakeConfig", "SnakeMode", "State", "new_game", "step"]
