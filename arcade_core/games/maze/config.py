"""Maze-chase tuning.

Defaults reproduce the classic cabinet feel: three lives, 10/50/200 points
for dots, power pellets and defeated agents, a ten second evade-mode and a
150 ms movement tick that tightens by 5 ms per level.
"""

from dataclasses import dataclass
from typing import Tuple

from arcade_core.components import Position
from arcade_core.games.maze.layout import MAZE_LAYOUT
from arcade_core.moves import MOVE_POLICY_REGISTRY
from arcade_core.types import AgentRole, Direction


GhostSpawn = Tuple[AgentRole, Position, Direction]

DEFAULT_GHOST_SPAWNS: Tuple[GhostSpawn, ...] = (
    (AgentRole.PURSUER, Position(13, 11), Direction.LEFT),
    (AgentRole.AMBUSHER, Position(14, 11), Direction.UP),
    (AgentRole.MIXED, Position(15, 11), Direction.RIGHT),
    (AgentRole.THRESHOLD_FLEE, Position(16, 11), Direction.DOWN),
)


@dataclass(frozen=True)
class MazeConfig:
    """Maze-chase settings.

    Attributes:
        layout: Legend rows (see :mod:`arcade_core.games.maze.layout`).
        player_spawn: Player start cell.
        player_direction: Player facing at spawn.
        ghost_spawns: ``(role, cell, facing)`` per agent.
        lives: Lives at the start of a session.
        dot_points: Score for a dot.
        power_points: Score for a power pellet.
        ghost_points: Score for defeating an agent in evade-mode.
        evade_seconds: Evade-mode duration.
        base_interval_ms: Tick interval on level 1.
        interval_step_ms: Interval reduction per level.
        min_interval_ms: Fastest allowed tick.
        move_policy: Name in ``MOVE_POLICY_REGISTRY``.
    """

    layout: Tuple[str, ...] = MAZE_LAYOUT
    player_spawn: Position = Position(14, 23)
    player_direction: Direction = Direction.LEFT
    ghost_spawns: Tuple[GhostSpawn, ...] = DEFAULT_GHOST_SPAWNS
    lives: int = 3
    dot_points: int = 10
    power_points: int = 50
    ghost_points: int = 200
    evade_seconds: int = 10
    base_interval_ms: float = 150.0
    interval_step_ms: float = 5.0
    min_interval_ms: float = 80.0
    move_policy: str = "tunnel"

    def __post_init__(self) -> None:
        if self.lives < 1:
            raise ValueError(f"lives must be at least 1: {self.lives}")
        if self.evade_seconds < 0:
            raise ValueError(f"evade_seconds must be >= 0: {self.evade_seconds}")
        if not 0 < self.min_interval_ms <= self.base_interval_ms:
            raise ValueError("Need 0 < min_interval_ms <= base_interval_ms")
        if self.move_policy not in MOVE_POLICY_REGISTRY:
            raise ValueError(f"Unknown move policy: {self.move_policy}")
