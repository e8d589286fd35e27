"""Maze-chase: collect every dot while four agents with distinct
behaviors hunt the player; power pellets turn the hunt around."""

from .config import MazeConfig
from .state import State, new_game
from .step import RULES, step

__all__ = ["MazeConfig", "RULES", "State", "new_game", "step"]
