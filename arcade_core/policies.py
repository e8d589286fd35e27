"""Agent controller: per-role direction choice for maze agents.

Every agent picks one direction per tick from the directions that lead to a
walkable cell without reversing 180 degrees (a reversal is only offered when
it is the only way out). The choice among those is delegated to a
:data:`arcade_core.types.PolicyFn` selected by the agent's role:

* ``PURSUER`` - minimize Manhattan distance to the player.
* ``AMBUSHER`` - minimize distance to a point ``AMBUSH_LOOKAHEAD`` cells ahead
  of the player along its facing.
* ``MIXED`` - pursue with probability ``MIXED_PURSUIT_PROBABILITY``, else pick
  a random valid direction.
* ``THRESHOLD_FLEE`` - pursue while farther than ``FLEE_THRESHOLD`` cells,
  flee once closer.

While evade-mode is active every role is overridden by :func:`flee_policy`.
Ties in min/max selection go to the first direction in
:data:`arcade_core.types.DIRECTIONS`, so decisions are reproducible; the only
randomness comes from ``AgentView.rng``.

New behaviors are added by registering a function in ``POLICY_REGISTRY``.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from arcade_core.components import Board, Ghost, Position
from arcade_core.moves import MOVE_POLICY_REGISTRY, candidate_position
from arcade_core.types import AgentRole, DIRECTIONS, Direction, PolicyFn, WrapRule
from arcade_core.utils.board import is_walkable
from arcade_core.utils.math import manhattan_distance, step_position


AMBUSH_LOOKAHEAD = 4
MIXED_PURSUIT_PROBABILITY = 0.7
FLEE_THRESHOLD = 8


@dataclass(frozen=True)
class AgentView:
    """What an agent may observe when deciding.

    Attributes:
        board: Current board.
        player_position: Player position at the start of the tick.
        player_direction: Player facing at the start of the tick.
        evade: True while evade-mode is active.
        rng: Random source for stochastic roles.
        wrap: Wrap rule agents move under (the maze tunnel by default).
    """

    board: Board
    player_position: Position
    player_direction: Direction
    evade: bool = False
    rng: random.Random = field(default_factory=random.Random, compare=False)
    wrap: WrapRule = MOVE_POLICY_REGISTRY["tunnel"]


Option = Tuple[Direction, Position]


def candidate_moves(ghost: Ghost, view: AgentView) -> List[Option]:
    """Walkable ``(direction, destination)`` pairs in enumeration order.

    The reversal of the agent's facing is dropped unless nothing else is
    available.
    """
    options: List[Option] = []
    for direction in DIRECTIONS:
        pos = candidate_position(view.board, ghost.position, direction, view.wrap)
        if pos is not None and is_walkable(view.board, pos):
            options.append((direction, pos))
    reverse = ghost.direction.opposite()
    forward = [option for option in options if option[0] != reverse]
    return forward or options


def valid_directions(ghost: Ghost, view: AgentView) -> List[Direction]:
    return [direction for direction, _ in candidate_moves(ghost, view)]


def closest_to(options: List[Option], target: Position) -> Optional[Direction]:
    """Direction whose destination minimizes distance to ``target`` (first wins ties)."""
    if not options:
        return None
    return min(options, key=lambda option: manhattan_distance(option[1], target))[0]


def farthest_from(options: List[Option], target: Position) -> Optional[Direction]:
    """Direction whose destination maximizes distance from ``target`` (first wins ties)."""
    if not options:
        return None
    return max(options, key=lambda option: manhattan_distance(option[1], target))[0]


def pursuer_policy(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    return closest_to(candidate_moves(ghost, view), view.player_position)


def ambusher_policy(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    target = step_position(
        view.player_position, view.player_direction, AMBUSH_LOOKAHEAD
    )
    return closest_to(candidate_moves(ghost, view), target)


def mixed_policy(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    options = candidate_moves(ghost, view)
    if not options:
        return None
    if view.rng.random() < MIXED_PURSUIT_PROBABILITY:
        return closest_to(options, view.player_position)
    return view.rng.choice(options)[0]


def threshold_flee_policy(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    options = candidate_moves(ghost, view)
    if manhattan_distance(ghost.position, view.player_position) > FLEE_THRESHOLD:
        return closest_to(options, view.player_position)
    return farthest_from(options, view.player_position)


def flee_policy(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    """Evade-mode override: maximize distance from the player."""
    return farthest_from(candidate_moves(ghost, view), view.player_position)


POLICY_REGISTRY: Dict[AgentRole, PolicyFn] = {
    AgentRole.PURSUER: pursuer_policy,
    AgentRole.AMBUSHER: ambusher_policy,
    AgentRole.MIXED: mixed_policy,
    AgentRole.THRESHOLD_FLEE: threshold_flee_policy,
}
"""Role -> policy mapping consulted by :func:`decide`."""


def decide(ghost: Ghost, view: AgentView) -> Optional[Direction]:
    """Return the direction ``ghost`` takes this tick, or ``None`` if boxed in."""
    if view.evade:
        return flee_policy(ghost, view)
    return POLICY_REGISTRY[ghost.role](ghost, view)
