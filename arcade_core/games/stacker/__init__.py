"""Block-stacking: steer falling tetrominoes and clear full rows."""

from .config import StackerConfig
from .pieces import TETROMINOES
from .state import State, new_game
from .step import RULES, step

__all__ = ["RULES", "StackerConfig", "State", "TETROMINOES", "new_game", "step"]
