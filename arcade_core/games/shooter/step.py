"""Space-shooter reducer.

Tick pipeline: ship moves, bullets advance, the formation marches, aliens
fire, hits are resolved, then the invasion line and a cleared wave are
checked. Ship shots are event driven (FIRE) and gated by ``clock_ms``.
"""

from dataclasses import replace

from arcade_core.actions import Action
from arcade_core.games.rules import GameRules
from arcade_core.games.shooter.state import State, leaderboard_meta, new_game, snapshot
from arcade_core.games.shooter.systems import (
    alien_fire_system,
    alien_movement_system,
    bullet_movement_system,
    collision_system,
    fire_system,
    invasion_system,
    player_movement_system,
    wave_system,
)
from arcade_core.scheduler import is_running


def step(state: State) -> State:
    if not is_running(state.session):
        return state
    state = player_movement_system(state)
    state = bullet_movement_system(state)
    state = alien_movement_system(state)
    state = alien_fire_system(state)
    state = collision_system(state)
    state = invasion_system(state)
    if is_running(state.session):
        state = wave_system(state)
    return replace(state, turn=state.turn + 1)


def handle_input(state: State, action: Action, pressed: bool = True) -> State:
    """Track held directions and fire on a FIRE press."""
    if action in (Action.LEFT, Action.RIGHT):
        held = state.held.add(action) if pressed else state.held.discard(action)
        return replace(state, held=held)
    if action == Action.FIRE and pressed and is_running(state.session):
        return fire_system(state)
    return state


def advance_timers(state: State, elapsed_ms: float) -> State:
    """Run the game clock while playing."""
    if not is_running(state.session):
        return state
    return replace(state, clock_ms=state.clock_ms + max(0.0, elapsed_ms))


def tick_interval_ms(state: State) -> float:
    return state.config.interval_ms


RULES = GameRules(
    name="shooter",
    storage_key="space-shooter-scores",
    new_game=new_game,
    step=step,
    handle_input=handle_input,
    advance_timers=advance_timers,
    tick_interval_ms=tick_interval_ms,
    snapshot=snapshot,
    leaderboard_meta=leaderboard_meta,
)
