"""Space-shooter tuning.

Coordinates are continuous pixels on an 800x600 field, origin top-left.
Speeds are per tick (16 ms); cooldowns and fire rates are milliseconds of
game clock.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShooterConfig:
    """Space-shooter settings.

    Attributes:
        width: Field width.
        height: Field height.
        player_x: Ship left edge at spawn.
        player_y: Ship top edge (fixed).
        player_width: Ship width.
        player_height: Ship height.
        player_speed: Horizontal ship speed while a direction is held.
        lives: Lives at the start of a session.
        alien_rows: Formation rows.
        alien_cols: Formation columns.
        alien_width: Alien width.
        alien_height: Alien height.
        alien_origin: Top-left of the formation's first alien.
        alien_spacing: Horizontal and vertical distance between aliens.
        alien_points: Score by alien type (``row // 2``).
        alien_speed: March speed on level 1.
        alien_speed_step: March speed gained per level.
        alien_drop: Vertical drop when the formation reverses.
        edge_margin: Distance from a side edge that triggers a reversal.
        invasion_margin: Game ends when an alien's bottom reaches
            ``player_y - invasion_margin``.
        bullet_width: Bullet width.
        bullet_height: Bullet height.
        player_bullet_speed: Upward speed of ship bullets.
        alien_bullet_speed: Downward speed of alien bullets.
        fire_cooldown_ms: Minimum time between two ship shots (exclusive).
        alien_fire_base_ms: Alien fire interval before the level discount.
        alien_fire_step_ms: Interval discount per level.
        alien_fire_min_ms: Fastest alien fire interval.
        interval_ms: Tick interval.
    """

    width: float = 800.0
    height: float = 600.0
    player_x: float = 400.0
    player_y: float = 550.0
    player_width: float = 50.0
    player_height: float = 30.0
    player_speed: float = 5.0
    lives: int = 3
    alien_rows: int = 5
    alien_cols: int = 11
    alien_width: float = 40.0
    alien_height: float = 30.0
    alien_origin: Tuple[float, float] = (100.0, 50.0)
    alien_spacing: Tuple[float, float] = (60.0, 50.0)
    alien_points: Tuple[int, ...] = (30, 20, 10)
    alien_speed: float = 0.1
    alien_speed_step: float = 0.02
    alien_drop: float = 5.0
    edge_margin: float = 5.0
    invasion_margin: float = 30.0
    bullet_width: float = 4.0
    bullet_height: float = 10.0
    player_bullet_speed: float = 8.0
    alien_bullet_speed: float = 3.0
    fire_cooldown_ms: float = 300.0
    alien_fire_base_ms: float = 4000.0
    alien_fire_step_ms: float = 300.0
    alien_fire_min_ms: float = 1500.0
    interval_ms: float = 16.0

    def __post_init__(self) -> None:
        if self.lives < 1:
            raise ValueError(f"lives must be at least 1: {self.lives}")
        if self.alien_rows < 1 or self.alien_cols < 1:
            raise ValueError("Formation needs at least one alien")
        if len(self.alien_points) <= (self.alien_rows - 1) // 2:
            raise ValueError("alien_points needs a value for every alien type")
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive: {self.interval_ms}")
        if not 0 <= self.player_x <= self.width - self.player_width:
            raise ValueError(f"Ship starts outside the field: {self.player_x}")
