"""Maze-chase ``State`` snapshot.

One frozen value per tick. The board holds walls and the remaining dots;
the player and the agents are kept beside it rather than in it, so moving an
entity never rewrites the board. Defeated agents are simply absent from
``ghosts`` until the next life or level reset recreates all of them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from arcade_core.components import Board, Ghost, Position, Session
from arcade_core.games.maze.config import MazeConfig
from arcade_core.games.maze.layout import parse_layout
from arcade_core.games.rules import new_seed
from arcade_core.moves import MOVE_POLICY_REGISTRY
from arcade_core.scheduler import Countdown
from arcade_core.types import Direction, WrapRule
from arcade_core.utils.board import count_pickups


@dataclass(frozen=True)
class State:
    """Immutable maze-chase snapshot.

    Attributes:
        config: Game settings.
        board: Walls, dots and power pellets.
        player: Player cell.
        direction: Player facing (direction of the last move).
        ghosts: Active agents.
        session: Score, lives, level, dots remaining and run mode.
        next_direction: Buffered turn, taken as soon as it is walkable.
        evade: Evade-mode countdown (seconds).
        turn: Ticks applied so far.
        seed: Base RNG seed.
    """

    config: MazeConfig
    board: Board
    player: Position
    direction: Direction
    ghosts: PVector[Ghost]
    session: Session
    next_direction: Optional[Direction] = None
    evade: Countdown = Countdown()
    turn: int = 0
    seed: int = 0

    @property
    def wrap(self) -> WrapRule:
        return MOVE_POLICY_REGISTRY[self.config.move_policy]


def spawn_ghosts(config: MazeConfig) -> PVector[Ghost]:
    """All agents at their canonical spawn cells."""
    return pvector(
        Ghost(role=role, position=pos, direction=direction)
        for role, pos, direction in config.ghost_spawns
    )


def new_game(config: Optional[MazeConfig] = None, seed: Optional[int] = None) -> State:
    """Fresh session on the canonical board."""
    config = config or MazeConfig()
    board = parse_layout(config.layout)
    return State(
        config=config,
        board=board,
        player=config.player_spawn,
        direction=config.player_direction,
        ghosts=spawn_ghosts(config),
        session=Session(lives=config.lives, remaining=count_pickups(board)),
        seed=new_seed(seed),
    )


def snapshot(state: State) -> PMap[str, Any]:
    """Frame data for a renderer."""
    evade = state.evade.active
    return pmap(
        {
            "game": "maze",
            "board": state.board,
            "player": pmap({"position": state.player, "direction": state.direction}),
            "ghosts": pvector(
                pmap(
                    {
                        "role": ghost.role,
                        "position": ghost.position,
                        "direction": ghost.direction,
                        "mode": "evade" if evade else "pursuit",
                    }
                )
                for ghost in state.ghosts
            ),
            "evade_seconds": state.evade.remaining,
            "session": state.session,
        }
    )


def leaderboard_meta(state: State) -> Dict[str, Any]:
    return {"level": state.session.level}
