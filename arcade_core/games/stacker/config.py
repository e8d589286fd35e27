"""Block-stacking tuning."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StackerConfig:
    """Block-stacking settings.

    Attributes:
        width: Board width.
        height: Board height.
        base_interval_ms: Gravity interval on level 1; level ``n`` uses
            ``base_interval_ms / n``.
        line_points: Base score indexed by rows cleared in one settle,
            multiplied by the level.
        lines_per_level: Cleared rows needed per level.
    """

    width: int = 10
    height: int = 20
    base_interval_ms: float = 1000.0
    line_points: Tuple[int, ...] = (0, 100, 300, 500, 800)
    lines_per_level: int = 10

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError(f"Board too small: {self.width}x{self.height}")
        if self.base_interval_ms <= 0:
            raise ValueError(f"base_interval_ms must be positive: {self.base_interval_ms}")
        if len(self.line_points) < 5:
            raise ValueError("line_points needs an entry for 0..4 cleared rows")
        if self.lines_per_level < 1:
            raise ValueError(f"lines_per_level must be at least 1: {self.lines_per_level}")
