"""Maze-chase reducer.

Tick pipeline:

1. Agents decide from the start-of-tick snapshot.
2. The player moves and consumes any pickup.
3. Agents apply their decisions.
4. Contact between player and agents is resolved.
5. A cleared board advances the level.

The evade countdown is not part of the tick; the runner advances it with
:func:`advance_timers` before running the tick of the same frame.
"""

from dataclasses import replace

from arcade_core.actions import Action, DIRECTION_ACTIONS
from arcade_core.games.maze.state import State, leaderboard_meta, new_game, snapshot
from arcade_core.games.maze.systems import (
    agent_movement_system,
    collision_system,
    decide_agents,
    evade_timer_system,
    level_system,
    player_movement_system,
)
from arcade_core.games.rules import GameRules
from arcade_core.scheduler import is_running


def step(state: State) -> State:
    """Advance one tick; a paused or finished session is returned unchanged."""
    if not is_running(state.session):
        return state
    decisions = decide_agents(state)
    prev_player, prev_ghosts = state.player, state.ghosts
    state = player_movement_system(state)
    state = agent_movement_system(state, decisions)
    state = collision_system(state, prev_player, prev_ghosts)
    state = level_system(state)
    return replace(state, turn=state.turn + 1)


def handle_input(state: State, action: Action, pressed: bool = True) -> State:
    """Buffer a direction intent; other actions do nothing here."""
    if not pressed or action not in DIRECTION_ACTIONS:
        return state
    return replace(state, next_direction=DIRECTION_ACTIONS[action])


def advance_timers(state: State, elapsed_ms: float) -> State:
    if not is_running(state.session):
        return state
    return evade_timer_system(state, elapsed_ms)


def tick_interval_ms(state: State) -> float:
    """Tick cadence; agents speed up by a fixed step per level."""
    config = state.config
    interval = config.base_interval_ms - config.interval_step_ms * (state.session.level - 1)
    return max(config.min_interval_ms, interval)


RULES = GameRules(
    name="maze",
    storage_key="maze-chase-scores",
    new_game=new_game,
    step=step,
    handle_input=handle_input,
    advance_timers=advance_timers,
    tick_interval_ms=tick_interval_ms,
    snapshot=snapshot,
    leaderboard_meta=leaderboard_meta,
)
