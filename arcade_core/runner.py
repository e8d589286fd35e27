"""Game runner.

:class:`GameRunner` is the only stateful object in the package. It holds the
current snapshot of one game, feeds it input events, and on every frame
advances the game's wall-clock timers and, when the tick clock says so,
runs exactly one simulation tick. It also owns the game's
:class:`~arcade_core.ledger.ScoreLedger` and the "enter your name" prompt
raised when a session ends with a positive score.

Everything runs on the caller's thread; the runner never sleeps or spawns
timers, so a render loop (or a test) drives it by calling :meth:`frame` with
a monotonic timestamp.
"""

import logging
from dataclasses import replace
from typing import Any, Optional

from pyrsistent.typing import PMap

from arcade_core.actions import Action
from arcade_core.components import Session
from arcade_core.games.rules import GameRules
from arcade_core.ledger import KeyValueStore, Leaderboard, ScoreLedger, clean_name
from arcade_core.scheduler import TickClock, advance_clock, is_running, retime, toggle_pause
from arcade_core.types import RunMode

logger = logging.getLogger(__name__)


class GameRunner:
    """Drive one game session after another.

    Args:
        rules: The game's entry points (see :func:`arcade_core.games.get_game`).
        store: Blob store backing the game's leaderboard.
        config: Game config passed to ``rules.new_game``; defaults apply if None.
        seed: Seed for every session; ``None`` draws a new one per session.
    """

    def __init__(
        self,
        rules: GameRules,
        store: KeyValueStore,
        config: Optional[Any] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.rules = rules
        self.config = config
        self.seed = seed
        self.ledger = ScoreLedger(store, rules.storage_key)
        self._awaiting_name = False
        self._last_ms: Optional[float] = None
        self._state = self._new_state()
        self._clock = TickClock(rules.tick_interval_ms(self._state))

    def _new_state(self) -> Any:
        state = self.rules.new_game(self.config, self.seed)
        if not isinstance(getattr(state, "session", None), Session):
            raise ValueError(f"{self.rules.name} state has no session")
        return state

    @property
    def state(self) -> Any:
        return self._state

    @property
    def session(self) -> Session:
        return self._state.session

    @property
    def awaiting_name(self) -> bool:
        """True between a scoring game over and a submitted or dismissed name."""
        return self._awaiting_name

    @property
    def high_score(self) -> int:
        return self.ledger.high_score

    @property
    def leaderboard(self) -> Leaderboard:
        return self.ledger.entries

    def send(self, action: Action, pressed: bool = True) -> None:
        """Deliver one input event.

        PAUSE toggles between playing and paused; resuming restarts the time
        base so the paused interval never reaches the timers. Other presses
        are ignored unless the game is playing; releases always go through so
        held keys cannot get stuck across a pause.
        """
        if action == Action.PAUSE:
            if pressed:
                self._set_state(replace(self._state, session=toggle_pause(self.session)))
                if is_running(self.session):
                    self._last_ms = None
            return
        if pressed and not is_running(self.session):
            return
        self._set_state(self.rules.handle_input(self._state, action, pressed))

    def frame(self, now_ms: float) -> bool:
        """Advance to ``now_ms``.

        Timers see the elapsed time first, then at most one tick runs. The
        first frame only establishes the time base.

        Returns:
            bool: True if a simulation tick ran.
        """
        elapsed = 0.0 if self._last_ms is None else now_ms - self._last_ms
        self._last_ms = now_ms
        if not is_running(self.session):
            return False
        state = self.rules.advance_timers(self._state, elapsed)
        self._clock = retime(self._clock, self.rules.tick_interval_ms(state))
        self._clock, due = advance_clock(self._clock, elapsed)
        if due:
            state = self.rules.step(state)
        self._set_state(state)
        return due

    def reset(self) -> None:
        """Start a fresh session, discarding any pending name prompt."""
        self._state = self._new_state()
        self._clock = TickClock(self.rules.tick_interval_ms(self._state))
        self._last_ms = None
        self._awaiting_name = False
        logger.info("New %s session", self.rules.name)

    def submit_name(self, name: str) -> bool:
        """Record the finished session under ``name``.

        An empty name keeps the prompt open. Any other name closes it, even
        if the write fails.

        Returns:
            bool: True if the entry was persisted.
        """
        if not self._awaiting_name or clean_name(name) is None:
            return False
        self._awaiting_name = False
        entry = self.ledger.record(
            self.session.score, name, self.rules.leaderboard_meta(self._state)
        )
        return entry is not None

    def dismiss_name(self) -> None:
        self._awaiting_name = False

    def clear_scores(self) -> None:
        self.ledger.clear()

    def snapshot(self) -> PMap[str, Any]:
        """The game's frame data plus leaderboard status."""
        return self.rules.snapshot(self._state).update(
            {"high_score": self.high_score, "awaiting_name": self._awaiting_name}
        )

    def _set_state(self, state: Any) -> None:
        before = self.session.run_mode
        self._state = state
        after = state.session.run_mode
        if before == after:
            return
        logger.info("%s: %s -> %s", self.rules.name, before, after)
        if after == RunMode.GAME_OVER and state.session.score > 0:
            self._awaiting_name = True
