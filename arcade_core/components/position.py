"""Position component.

Immutable integer grid coordinates, the unit of all grid movement. The
space-shooter uses :class:`arcade_core.components.rect.Rect` instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
