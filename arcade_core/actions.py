"""Input actions.

The simulation core never sees raw key codes; an input adapter translates
them into :class:`Action` members. ``DIRECTION_ACTIONS`` is the canonical
mapping of movement actions to :class:`Direction`; checks like
``if action in DIRECTION_ACTIONS`` are preferred over name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict

from arcade_core.types import Direction


class Action(StrEnum):
    """String enum of input events.

    Members:
        UP, DOWN, LEFT, RIGHT: Direction intents.
        ROTATE: Rotate the falling piece (block-stacking only).
        FIRE: Shoot (space-shooter only).
        PAUSE: Toggle between playing and paused.
        WAIT: No input.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ROTATE = auto()
    FIRE = auto()
    PAUSE = auto()
    WAIT = auto()


DIRECTION_ACTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}
