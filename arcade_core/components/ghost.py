"""Maze agent component.

Spawn cells live on the game config, not on the agent: defeated agents are
removed from the game's agent vector, so there is no liveness flag to keep in
sync and respawning rebuilds the whole vector from the config.
"""

from dataclasses import dataclass

from arcade_core.components.position import Position
from arcade_core.types import AgentRole, Direction


@dataclass(frozen=True)
class Ghost:
    """Non-player pursuit agent.

    Attributes:
        role: Behavior used outside evade-mode.
        position: Current cell.
        direction: Current facing (last move taken).
    """

    role: AgentRole
    position: Position
    direction: Direction
