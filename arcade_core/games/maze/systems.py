"""Maze-chase systems.

Each system is a pure ``State -> State`` transformation; :mod:`.step` runs
them in order. Agent decisions are computed from the start-of-tick snapshot
before anything moves, then applied after the player's move.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from arcade_core.components import Ghost, Position
from arcade_core.games.maze.layout import parse_layout
from arcade_core.games.maze.state import State, spawn_ghosts
from arcade_core.games.rules import turn_rng
from arcade_core.moves import Blocked, Consumed, outcome_position, resolve_move
from arcade_core.policies import AgentView, decide
from arcade_core.scheduler import (
    Countdown,
    add_score,
    is_running,
    lose_life,
    start_countdown,
    tick_countdown,
)
from arcade_core.types import CellTag, Direction, RunMode
from arcade_core.utils.board import consume, count_pickups

logger = logging.getLogger(__name__)


def point_table(state: State) -> Dict[CellTag, int]:
    return {
        CellTag.PICKUP: state.config.dot_points,
        CellTag.POWER_PICKUP: state.config.power_points,
    }


def agent_view(state: State) -> AgentView:
    return AgentView(
        board=state.board,
        player_position=state.player,
        player_direction=state.direction,
        evade=state.evade.active,
        rng=turn_rng(state.seed, state.turn),
        wrap=state.wrap,
    )


def decide_agents(state: State) -> List[Optional[Direction]]:
    """One decision per active agent, in agent order."""
    view = agent_view(state)
    return [decide(ghost, view) for ghost in state.ghosts]


def player_movement_system(state: State) -> State:
    """Move the player one cell.

    The buffered turn is tried first; if it is blocked the player keeps
    moving along its facing and the turn stays buffered. A blocked facing
    leaves the player in place.
    """
    for direction in (state.next_direction, state.direction):
        if direction is None:
            continue
        outcome = resolve_move(
            state.board, state.player, direction, state.wrap, points=point_table(state)
        )
        if isinstance(outcome, Blocked):
            continue
        next_direction = None if direction == state.next_direction else state.next_direction
        state = replace(
            state,
            player=outcome_position(outcome, state.player),
            direction=direction,
            next_direction=next_direction,
        )
        if isinstance(outcome, Consumed):
            state = pickup_system(state)
        return state
    return state


def pickup_system(state: State) -> State:
    """Consume the pickup under the player, scoring it and arming evade-mode."""
    board, points, power = consume(state.board, state.player, point_table(state))
    if board is state.board:
        return state
    session = add_score(state.session, points)
    session = replace(session, remaining=max(0, session.remaining - 1))
    evade = state.evade
    if power:
        evade = start_countdown(state.config.evade_seconds)
        logger.debug("Evade-mode armed for %ds", state.config.evade_seconds)
    return replace(state, board=board, session=session, evade=evade)


def agent_movement_system(
    state: State, decisions: List[Optional[Direction]]
) -> State:
    """Apply precomputed decisions; agents never consume pickups."""
    ghosts = state.ghosts
    for index, (ghost, direction) in enumerate(zip(state.ghosts, decisions)):
        outcome = resolve_move(state.board, ghost.position, direction, state.wrap)
        if isinstance(outcome, Blocked):
            continue
        assert direction is not None
        ghosts = ghosts.set(
            index,
            replace(
                ghost,
                position=outcome_position(outcome, ghost.position),
                direction=direction,
            ),
        )
    return replace(state, ghosts=ghosts)


def colliding_agents(
    state: State, prev_player: Position, prev_ghosts: PVector[Ghost]
) -> List[int]:
    """Indices of agents sharing the player's cell or swapping cells with it."""
    hits = []
    for index, ghost in enumerate(state.ghosts):
        if ghost.position == state.player:
            hits.append(index)
        elif (
            index < len(prev_ghosts)
            and ghost.position == prev_player
            and prev_ghosts[index].position == state.player
        ):
            hits.append(index)
    return hits


def collision_system(
    state: State, prev_player: Position, prev_ghosts: PVector[Ghost]
) -> State:
    """Resolve player/agent contact.

    In evade-mode every touching agent is defeated for a fixed bonus.
    Otherwise the player loses exactly one life; if any remain the player and
    all agents respawn while the board keeps its contents.
    """
    hits = colliding_agents(state, prev_player, prev_ghosts)
    if not hits:
        return state
    if state.evade.active:
        survivors = pvector(
            ghost for index, ghost in enumerate(state.ghosts) if index not in hits
        )
        session = add_score(state.session, state.config.ghost_points * len(hits))
        return replace(state, ghosts=survivors, session=session)
    session = lose_life(state.session)
    if session.run_mode == RunMode.GAME_OVER:
        logger.info("Maze-chase over with score %d", session.score)
        return replace(state, session=session)
    logger.debug("Life lost, %d left", session.lives)
    return respawn(replace(state, session=session))


def respawn(state: State) -> State:
    """Player and all agents back to their spawn cells."""
    return replace(
        state,
        player=state.config.player_spawn,
        direction=state.config.player_direction,
        next_direction=None,
        ghosts=spawn_ghosts(state.config),
    )


def level_system(state: State) -> State:
    """Advance the level once no pickups remain."""
    if not is_running(state.session) or state.session.remaining > 0:
        return state
    board = parse_layout(state.config.layout)
    session = replace(
        state.session,
        level=state.session.level + 1,
        remaining=count_pickups(board),
    )
    logger.info("Maze-chase level %d", session.level)
    return respawn(replace(state, board=board, session=session, evade=Countdown()))


def evade_timer_system(state: State, elapsed_ms: float) -> State:
    """Advance the evade-mode countdown; expiry clears evade-mode only."""
    if not state.evade.active:
        return state
    return replace(state, evade=tick_countdown(state.evade, elapsed_ms))
