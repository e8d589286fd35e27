"""Space-shooter: hold off a marching alien formation from a sliding ship."""

from .config import ShooterConfig
from .state import Alien, Bullet, State, new_game
from .step import RULES, step

__all__ = ["Alien", "Bullet", "RULES", "ShooterConfig", "State", "new_game", "step"]
