"""Tick scheduling and the run-mode state machine.

Two clocks drive a game, both advanced by the same per-frame callback on a
single thread:

* :class:`TickClock` gates the update pipeline. Elapsed time accumulates until
  it reaches the interval; then exactly one tick is due and the accumulator
  restarts from zero. Missed intervals are absorbed, never replayed.
* :class:`Countdown` is a coarse (1 s by default) timer used for evade-mode.
  It only changes when its own granularity elapses, independent of ticks.

Run modes move ``PLAYING <-> PAUSED`` on a toggle and ``PLAYING ->
GAME_OVER`` on a terminal condition. ``GAME_OVER`` is left only by starting
a fresh session.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from arcade_core.components import Session
from arcade_core.types import RunMode


@dataclass(frozen=True)
class TickClock:
    """Fixed-cadence tick gate.

    Attributes:
        interval_ms: Minimum elapsed time between two ticks.
        accumulated_ms: Time elapsed since the last tick.
    """

    interval_ms: float
    accumulated_ms: float = 0.0

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive: {self.interval_ms}")


def advance_clock(clock: TickClock, elapsed_ms: float) -> Tuple[TickClock, bool]:
    """Accumulate ``elapsed_ms`` and report whether a tick is due.

    At most one tick is reported per call regardless of how much time passed.
    Negative elapsed time (a clock going backwards) counts as zero.
    """
    accumulated = clock.accumulated_ms + max(0.0, elapsed_ms)
    if accumulated >= clock.interval_ms:
        return replace(clock, accumulated_ms=0.0), True
    return replace(clock, accumulated_ms=accumulated), False


def retime(clock: TickClock, interval_ms: float) -> TickClock:
    """Change the interval, keeping the time already accumulated."""
    if interval_ms == clock.interval_ms:
        return clock
    return replace(clock, interval_ms=interval_ms)


@dataclass(frozen=True)
class Countdown:
    """Whole-unit countdown (seconds by default).

    Attributes:
        remaining: Units left; the countdown is active while positive.
        accumulated_ms: Time elapsed toward the next unit.
        granularity_ms: Length of one unit.
    """

    remaining: int = 0
    accumulated_ms: float = 0.0
    granularity_ms: float = 1000.0

    @property
    def active(self) -> bool:
        return self.remaining > 0


def start_countdown(units: int, granularity_ms: float = 1000.0) -> Countdown:
    """Return a fresh countdown of ``units`` whole units."""
    return Countdown(remaining=units, granularity_ms=granularity_ms)


def tick_countdown(countdown: Countdown, elapsed_ms: float) -> Countdown:
    """Advance ``countdown`` by ``elapsed_ms``, dropping one unit per granule."""
    if not countdown.active:
        return countdown
    accumulated = countdown.accumulated_ms + max(0.0, elapsed_ms)
    remaining = countdown.remaining
    while remaining > 0 and accumulated >= countdown.granularity_ms:
        accumulated -= countdown.granularity_ms
        remaining -= 1
    if remaining == 0:
        accumulated = 0.0
    return replace(countdown, remaining=remaining, accumulated_ms=accumulated)


def is_running(session: Session) -> bool:
    """True only while ``PLAYING``; no update happens otherwise."""
    return session.run_mode == RunMode.PLAYING


def toggle_pause(session: Session) -> Session:
    """Flip ``PLAYING`` and ``PAUSED``; a finished game stays finished."""
    if session.run_mode == RunMode.PLAYING:
        return replace(session, run_mode=RunMode.PAUSED)
    if session.run_mode == RunMode.PAUSED:
        return replace(session, run_mode=RunMode.PLAYING)
    return session


def end_game(session: Session) -> Session:
    """Terminal transition to ``GAME_OVER``."""
    return replace(session, run_mode=RunMode.GAME_OVER)


def add_score(session: Session, points: int) -> Session:
    """Add a non-negative score increment."""
    if points < 0:
        raise ValueError(f"Score increments are never negative: {points}")
    if points == 0:
        return session
    return replace(session, score=session.score + points)


def lose_life(session: Session) -> Session:
    """Take one life; the session ends when none are left."""
    lives = max(0, session.lives - 1)
    session = replace(session, lives=lives)
    return end_game(session) if lives == 0 else session
