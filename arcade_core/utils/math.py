"""Grid math helpers used by movement and agent heuristics."""

from arcade_core.components import Position
from arcade_core.types import Direction


def manhattan_distance(a: Position, b: Position) -> int:
    """Return ``|a.x - b.x| + |a.y - b.y|`` (no wraparound shortcut)."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def step_position(pos: Position, direction: Direction, distance: int = 1) -> Position:
    """Return the cell ``distance`` steps from ``pos`` along ``direction``.

    The result is not bounds-checked; callers apply wrap / reject rules.
    """
    dx, dy = direction.delta
    return Position(pos.x + dx * distance, pos.y + dy * distance)


def clamp(value: float, low: float, high: float) -> float:
    """Return ``value`` limited to ``[low, high]``."""
    return max(low, min(high, value))
