"""Leaderboard entries and the capped, score-sorted leaderboard.

A leaderboard is a persistent vector of at most ``MAX_ENTRIES`` immutable
entries, sorted by score descending. Insertion re-sorts the complete list
(existing entries plus the new one) with a stable sort and truncates, so an
entry tying an existing score ranks below it.

Serialized form (one JSON array per game)::

    [{"score": 1200, "date": "2026-10-19", "timestamp": 1792396800000,
      "playerName": "ada", "level": 3}, ...]

Fields other than the four standard ones are game-specific metadata
(``level``, ``lines``, ``mode``) and round-trip through ``meta``.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector


MAX_ENTRIES = 10
MAX_NAME_LENGTH = 20

_STANDARD_FIELDS = ("score", "date", "timestamp", "playerName")


@dataclass(frozen=True)
class LeaderboardEntry:
    """One named score.

    Attributes:
        score: Final session score.
        player_name: Trimmed display name, at most ``MAX_NAME_LENGTH`` chars.
        timestamp_ms: Epoch milliseconds when the entry was written.
        date: Human-readable date of the entry.
        meta: Game-specific extra fields.
    """

    score: int
    player_name: str
    timestamp_ms: int
    date: str
    meta: PMap[str, Any] = pmap()

    def to_json(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "score": self.score,
            "date": self.date,
            "timestamp": self.timestamp_ms,
            "playerName": self.player_name,
        }
        record.update({k: v for k, v in self.meta.items() if k not in record})
        return record

    @classmethod
    def from_json(cls, record: Any) -> "LeaderboardEntry":
        """Parse one stored record; raises ``ValueError`` if it is malformed."""
        if not isinstance(record, dict):
            raise ValueError(f"Leaderboard record must be an object: {record!r}")
        score = record.get("score")
        timestamp = record.get("timestamp", 0)
        name = record.get("playerName", "")
        date = record.get("date", "")
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError(f"Leaderboard score must be an integer: {score!r}")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise ValueError(f"Leaderboard timestamp must be an integer: {timestamp!r}")
        if not isinstance(name, str) or not isinstance(date, str):
            raise ValueError("Leaderboard name and date must be strings")
        meta = {k: v for k, v in record.items() if k not in _STANDARD_FIELDS}
        return cls(
            score=score,
            player_name=name,
            timestamp_ms=timestamp,
            date=date,
            meta=pmap(meta),
        )


Leaderboard = PVector[LeaderboardEntry]


def rank(entries: Iterable[LeaderboardEntry], limit: int = MAX_ENTRIES) -> Leaderboard:
    """Stable sort by score descending, truncated to ``limit`` entries."""
    return pvector(sorted(entries, key=lambda entry: -entry.score)[:limit])


def insert_entry(
    entries: Iterable[LeaderboardEntry],
    entry: LeaderboardEntry,
    limit: int = MAX_ENTRIES,
) -> Leaderboard:
    """Merge ``entry`` into the complete existing list and keep the top ``limit``."""
    return rank([*entries, entry], limit)


def high_score(entries: Iterable[LeaderboardEntry]) -> int:
    """Maximum score on the leaderboard, 0 when it is empty."""
    return max((entry.score for entry in entries), default=0)


def clean_name(name: str) -> Optional[str]:
    """Trim ``name`` and cut it to ``MAX_NAME_LENGTH``; ``None`` if nothing is left."""
    trimmed = name.strip()[:MAX_NAME_LENGTH].strip()
    return trimmed or None


def encode(entries: Iterable[LeaderboardEntry]) -> str:
    return json.dumps([entry.to_json() for entry in entries])


def decode(blob: str) -> Leaderboard:
    """Parse a stored blob.

    Raises:
        ValueError: If the blob is not valid JSON or not a list of records
            (``json.JSONDecodeError`` is a ``ValueError``).
    """
    records = json.loads(blob)
    if not isinstance(records, list):
        raise ValueError("Leaderboard blob must be a JSON array")
    return rank(LeaderboardEntry.from_json(record) for record in records)
