"""Score ledger: the persisted leaderboard of one game.

The ledger is the boundary where persistence failures stop. Reading a
missing, unreadable or corrupt blob yields an empty leaderboard; a failed
write is logged and leaves the previous leaderboard in place. Neither case
raises to the caller, so gameplay is never interrupted.

Every write re-reads the stored list and merges the new entry into that
complete list, so the displayed high score always reflects what was
persisted. If that re-read fails the entry is merged into the list loaded
earlier instead.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from pyrsistent import pmap, pvector

from arcade_core.ledger.leaderboard import (
    Leaderboard,
    LeaderboardEntry,
    clean_name,
    decode,
    encode,
    high_score,
    insert_entry,
)
from arcade_core.ledger.store import KeyValueStore

logger = logging.getLogger(__name__)


class ScoreLedger:
    """Leaderboard persisted under ``key`` in ``store``.

    Args:
        store: Blob store.
        key: Game-specific namespace (e.g. ``"maze-chase-scores"``).
        clock: Source of the current time, injectable for tests.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.key = key
        self._clock = clock
        self._entries: Leaderboard = self.load()

    @property
    def entries(self) -> Leaderboard:
        return self._entries

    @property
    def high_score(self) -> int:
        return high_score(self._entries)

    def load(self) -> Leaderboard:
        """Read the stored leaderboard, degrading to empty on any failure."""
        try:
            return self._read()
        except OSError as e:
            logger.warning("Failed to read high scores %s: %s", self.key, e)
            return pvector()

    def _read(self) -> Leaderboard:
        """Stored leaderboard; corrupt blobs read as empty, ``OSError`` propagates."""
        blob = self.store.get(self.key)
        if blob is None:
            return pvector()
        try:
            return decode(blob)
        except ValueError as e:
            logger.warning("Ignoring corrupt high scores %s: %s", self.key, e)
            return pvector()

    def record(
        self, score: int, name: str, meta: Optional[Mapping[str, Any]] = None
    ) -> Optional[LeaderboardEntry]:
        """Persist a new entry.

        Returns:
            LeaderboardEntry | None: The written entry, or ``None`` when the
            name is empty after trimming or the write failed.
        """
        if score < 0:
            raise ValueError(f"Scores are never negative: {score}")
        player_name = clean_name(name)
        if player_name is None:
            return None
        now = self._clock()
        entry = LeaderboardEntry(
            score=score,
            player_name=player_name,
            timestamp_ms=int(now.timestamp() * 1000),
            date=now.strftime("%Y-%m-%d"),
            meta=pmap(meta or {}),
        )
        try:
            current = self._read()
        except OSError as e:
            # The write must not replace the stored list with a shorter one.
            logger.warning(
                "Failed to read high scores %s, merging into cached list: %s",
                self.key,
                e,
            )
            current = self._entries
        updated = insert_entry(current, entry)
        try:
            self.store.set(self.key, encode(updated))
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save high score to %s: %s", self.key, e)
            self._entries = current
            return None
        self._entries = updated
        logger.info("Saved score %d for %s under %s", score, player_name, self.key)
        return entry

    def clear(self) -> None:
        """Delete every stored entry for this game."""
        try:
            self.store.delete(self.key)
        except OSError as e:
            logger.error("Failed to clear high scores %s: %s", self.key, e)
            return
        self._entries = pvector()
