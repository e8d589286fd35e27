"""Grid-snake tuning."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Tuple

from arcade_core.components import Position
from arcade_core.types import Direction


class SnakeMode(StrEnum):
    """``CLASSIC`` ends the game at the border; ``WALL_PASS`` wraps both axes."""

    CLASSIC = auto()
    WALL_PASS = auto()


MODE_MOVE_POLICIES = {
    SnakeMode.CLASSIC: "bounded",
    SnakeMode.WALL_PASS: "torus",
}


@dataclass(frozen=True)
class SnakeConfig:
    """Grid-snake settings.

    Attributes:
        width: Grid width.
        height: Grid height.
        body: Initial segments, head first.
        heading: Initial heading.
        mode: Border behavior.
        food_points: Score per food.
        interval_ms: Tick interval.
        buffer_size: Maximum pending direction intents.
    """

    width: int = 20
    height: int = 20
    body: Tuple[Position, ...] = (Position(10, 10), Position(10, 11), Position(10, 12))
    heading: Direction = Direction.UP
    mode: SnakeMode = SnakeMode.CLASSIC
    food_points: int = 10
    interval_ms: float = 100.0
    buffer_size: int = 2

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Grid too small: {self.width}x{self.height}")
        if not self.body:
            raise ValueError("Snake needs at least one segment")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake segments must be distinct")
        for pos in self.body:
            if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
                raise ValueError(f"Segment outside the grid: {pos}")
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive: {self.interval_ms}")
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1: {self.buffer_size}")
