"""Grid-snake reducer: steer, then move (growing or advancing)."""

from dataclasses import replace

from arcade_core.actions import Action, DIRECTION_ACTIONS
from arcade_core.games.rules import GameRules, no_timers
from arcade_core.games.snake.state import State, leaderboard_meta, new_game, snapshot
from arcade_core.games.snake.systems import accepts_turn, movement_system, steering_system
from arcade_core.scheduler import is_running


def step(state: State) -> State:
    if not is_running(state.session):
        return state
    state = steering_system(state)
    state = movement_system(state)
    return replace(state, turn=state.turn + 1)


def handle_input(state: State, action: Action, pressed: bool = True) -> State:
    """Queue a direction intent.

    Intents that repeat or reverse the current heading are dropped, as are
    intents arriving while the buffer is full.
    """
    if not pressed or action not in DIRECTION_ACTIONS:
        return state
    direction = DIRECTION_ACTIONS[action]
    if not accepts_turn(state.heading, direction):
        return state
    if len(state.pending) >= state.config.buffer_size:
        return state
    return replace(state, pending=state.pending.append(direction))


def tick_interval_ms(state: State) -> float:
    return state.config.interval_ms


RULES = GameRules(
    name="snake",
    storage_key="grid-snake-scores",
    new_game=new_game,
    step=step,
    handle_input=handle_input,
    advance_timers=no_timers,
    tick_interval_ms=tick_interval_ms,
    snapshot=snapshot,
    leaderboard_meta=leaderboard_meta,
)
