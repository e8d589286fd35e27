"""Score ledger package: leaderboard model, blob stores and the ledger."""

from .leaderboard import (
    MAX_ENTRIES,
    MAX_NAME_LENGTH,
    Leaderboard,
    LeaderboardEntry,
    clean_name,
    decode,
    encode,
    high_score,
    insert_entry,
)
from .ledger import ScoreLedger
from .store import FileStore, KeyValueStore, MemoryStore

__all__ = [
    "FileStore",
    "KeyValueStore",
    "Leaderboard",
    "LeaderboardEntry",
    "MAX_ENTRIES",
    "MAX_NAME_LENGTH",
    "MemoryStore",
    "ScoreLedger",
    "clean_name",
    "decode",
    "encode",
    "high_score",
    "insert_entry",
]
