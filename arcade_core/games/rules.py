"""The contract every game implements.

A game is a bundle of pure functions over its own frozen ``State``. The
:class:`arcade_core.runner.GameRunner` only talks to a game through a
:class:`GameRules` record, so the four games share the runner, the scheduler
and the ledger without sharing any runtime state.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pyrsistent.typing import PMap

from arcade_core.actions import Action


NewGameFn = Callable[[Optional[Any], Optional[int]], Any]
StepFn = Callable[[Any], Any]
InputFn = Callable[[Any, Action, bool], Any]
TimerFn = Callable[[Any, float], Any]
IntervalFn = Callable[[Any], float]
SnapshotFn = Callable[[Any], PMap[str, Any]]
MetaFn = Callable[[Any], Dict[str, Any]]


@dataclass(frozen=True)
class GameRules:
    """Entry points of one game.

    Attributes:
        name: Registry name.
        storage_key: Leaderboard namespace in the key-value store.
        new_game: ``(config, seed) -> State`` for a fresh session.
        step: One simulation tick.
        handle_input: Apply an input event ``(state, action, pressed)``.
        advance_timers: Advance wall-clock timers by the frame's elapsed ms.
        tick_interval_ms: Current tick cadence.
        snapshot: Everything a renderer needs to draw one frame.
        leaderboard_meta: Game-specific fields stored with a score.
    """

    name: str
    storage_key: str
    new_game: NewGameFn
    step: StepFn
    handle_input: InputFn
    advance_timers: TimerFn
    tick_interval_ms: IntervalFn
    snapshot: SnapshotFn
    leaderboard_meta: MetaFn


def no_timers(state: Any, elapsed_ms: float) -> Any:
    """``advance_timers`` for games without wall-clock timers."""
    return state


def new_seed(seed: Optional[int]) -> int:
    """Use ``seed`` or draw a fresh one so every state carries a concrete seed."""
    return seed if seed is not None else random.randrange(2**32)


def turn_rng(seed: int, turn: int, *salt: int) -> random.Random:
    """Deterministic RNG for one turn (and optional sub-stream)."""
    return random.Random(hash((seed, turn, *salt)))
