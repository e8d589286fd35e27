"""Axis-aligned rectangle in continuous (sub-cell) coordinates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Rectangle anchored at its top-left corner.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
