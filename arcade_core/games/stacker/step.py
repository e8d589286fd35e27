"""Block-stacking reducer.

A tick is one gravity step. Player inputs act immediately between ticks:
LEFT/RIGHT shift, DOWN is a soft drop and ROTATE (or UP) turns the piece.
"""

from dataclasses import replace

from arcade_core.actions import Action
from arcade_core.games.rules import GameRules, no_timers
from arcade_core.games.stacker.state import State, leaderboard_meta, new_game, snapshot
from arcade_core.games.stacker.systems import drop_system, rotate_system, shift_system
from arcade_core.scheduler import is_running


def step(state: State) -> State:
    if not is_running(state.session):
        return state
    state = drop_system(state)
    return replace(state, turn=state.turn + 1)


def handle_input(state: State, action: Action, pressed: bool = True) -> State:
    if not pressed or not is_running(state.session):
        return state
    if action == Action.LEFT:
        return shift_system(state, -1)
    if action == Action.RIGHT:
        return shift_system(state, 1)
    if action == Action.DOWN:
        return drop_system(state)
    if action in (Action.ROTATE, Action.UP):
        return rotate_system(state)
    return state


def tick_interval_ms(state: State) -> float:
    return state.config.base_interval_ms / state.session.level


RULES = GameRules(
    name="stacker",
    storage_key="block-stacking-scores",
    new_game=new_game,
    step=step,
    handle_input=handle_input,
    advance_timers=no_timers,
    tick_interval_ms=tick_interval_ms,
    snapshot=snapshot,
    leaderboard_meta=leaderboard_meta,
)
