"""Common type aliases and enumerations.

``Direction`` carries the canonical enumeration order used for every
deterministic tie-break (``DIRECTIONS``). ``PolicyFn`` is the extension point
for agent behaviors (see :mod:`arcade_core.policies`).
"""

from enum import StrEnum, auto
from typing import Callable, Dict, Optional, Tuple, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from arcade_core.components import Ghost
    from arcade_core.policies import AgentView


class Direction(StrEnum):
    """Cardinal movement directions (screen coordinates, y grows downward)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]

    def opposite(self) -> "Direction":
        return OPPOSITE_DIRECTION[self]


DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE_DIRECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class RunMode(StrEnum):
    """Session run modes. ``GAME_OVER`` is terminal until an explicit reset."""

    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class WrapPolicy(StrEnum):
    """Per-axis handling of a candidate coordinate that leaves the board."""

    CLAMP = auto()
    WRAP = auto()
    REJECT = auto()


class CellTag(StrEnum):
    """What a board cell holds."""

    WALL = auto()
    EMPTY = auto()
    PICKUP = auto()
    POWER_PICKUP = auto()
    FILLED = auto()


class AgentRole(StrEnum):
    """Behavior selector stored on each maze agent at spawn."""

    PURSUER = auto()
    AMBUSHER = auto()
    MIXED = auto()
    THRESHOLD_FLEE = auto()


WrapRule = Tuple[WrapPolicy, WrapPolicy]

PolicyFn = Callable[["Ghost", "AgentView"], Optional[Direction]]
