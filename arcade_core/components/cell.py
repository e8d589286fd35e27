"""Board cell component.

A cell is a tag plus an optional colour (only ``FILLED`` cells carry one).
The module-level constants are shared instances; cells are compared by value.
"""

from dataclasses import dataclass
from typing import Optional

from arcade_core.types import CellTag


@dataclass(frozen=True)
class Cell:
    """Contents of one board cell.

    Attributes:
        tag: What the cell holds.
        color: Colour of settled material for ``FILLED`` cells, else ``None``.
    """

    tag: CellTag
    color: Optional[str] = None

    @property
    def is_solid(self) -> bool:
        return self.tag in (CellTag.WALL, CellTag.FILLED)


WALL = Cell(CellTag.WALL)
EMPTY = Cell(CellTag.EMPTY)
PICKUP = Cell(CellTag.PICKUP)
POWER_PICKUP = Cell(CellTag.POWER_PICKUP)


def filled(color: str) -> Cell:
    """Return a ``FILLED`` cell of the given colour."""
    return Cell(CellTag.FILLED, color)
