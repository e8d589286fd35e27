import json
import logging
from datetime import datetime
from pathlib import Path

import pytest
from pyrsistent import pmap

from arcade_core.ledger import (
    MAX_ENTRIES,
    FileStore,
    LeaderboardEntry,
    MemoryStore,
    ScoreLedger,
    clean_name,
    decode,
    encode,
    high_score,
    insert_entry,
)
from tests.test_utils import fixed_clock


KEY = "maze-chase-scores"


def make_entry(score: int, name: str = "ada", timestamp: int = 0) -> LeaderboardEntry:
    return LeaderboardEntry(
        score=score, player_name=name, timestamp_ms=timestamp, date="2026-10-19"
    )


def test_insert_keeps_top_ten_sorted() -> None:
    entries = [make_entry(score) for score in range(10, 120, 10)]
    board = []
    for entry in entries:
        board = insert_entry(board, entry)
    assert len(board) == MAX_ENTRIES
    scores = [entry.score for entry in board]
    assert scores == sorted(scores, reverse=True)
    assert scores[-1] == 20
    assert high_score(board) == 110


def test_tied_score_ranks_below_existing() -> None:
    board = insert_entry([make_entry(50, "first")], make_entry(50, "second"))
    assert [entry.player_name for entry in board] == ["first", "second"]


def test_high_score_of_empty_board() -> None:
    assert high_score([]) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  ada  ", "ada"),
        ("", None),
        ("   ", None),
        ("x" * 30, "x" * 20),
    ],
)
def test_clean_name(raw: str, expected) -> None:
    assert clean_name(raw) == expected


def test_entry_json_keeps_meta_fields() -> None:
    entry = LeaderboardEntry(
        score=300,
        player_name="ada",
        timestamp_ms=1,
        date="2026-10-19",
        meta=pmap({"level": 3, "lines": 12}),
    )
    record = entry.to_json()
    assert record == {
        "score": 300,
        "date": "2026-10-19",
        "timestamp": 1,
        "playerName": "ada",
        "level": 3,
        "lines": 12,
    }
    assert LeaderboardEntry.from_json(record) == entry


def test_decode_sorts_and_caps_stored_list() -> None:
    blob = json.dumps(
        [make_entry(score).to_json() for score in range(1, 13)]
    )
    board = decode(blob)
    assert len(board) == MAX_ENTRIES
    assert board[0].score == 12


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        '{"score": 1}',
        '[{"score": "high"}]',
        '[{"score": 1, "timestamp": "now"}]',
        "[1, 2]",
    ],
)
def test_decode_rejects_malformed(blob: str) -> None:
    with pytest.raises(ValueError):
        decode(blob)


def test_ledger_record_persists_and_reloads() -> None:
    store = MemoryStore()
    ledger = ScoreLedger(store, KEY, clock=fixed_clock())
    entry = ledger.record(120, "  ada ", {"level": 2})
    assert entry is not None
    assert entry.player_name == "ada"
    assert entry.date == "2026-10-19"
    assert entry.timestamp_ms == int(datetime(2026, 10, 19, 12).timestamp() * 1000)
    assert ledger.high_score == 120

    reloaded = ScoreLedger(store, KEY)
    assert reloaded.entries == ledger.entries
    assert reloaded.entries[0].meta["level"] == 2


def test_ledger_rejects_empty_name() -> None:
    store = MemoryStore()
    ledger = ScoreLedger(store, KEY)
    assert ledger.record(100, "   ") is None
    assert KEY not in store


def test_ledger_merges_with_stored_list() -> None:
    store = MemoryStore()
    first = ScoreLedger(store, KEY)
    second = ScoreLedger(store, KEY)
    first.record(100, "ada")
    second.record(50, "bob")
    assert [entry.player_name for entry in second.entries] == ["ada", "bob"]


def test_corrupt_blob_reads_as_empty(caplog: pytest.LogCaptureFixture) -> None:
    store = MemoryStore({KEY: "{{{"})
    with caplog.at_level(logging.WARNING):
        ledger = ScoreLedger(store, KEY)
    assert len(ledger.entries) == 0
    assert ledger.high_score == 0
    assert "corrupt" in caplog.text


class FailingStore(MemoryStore):
    def set(self, key: str, blob: str) -> None:
        raise OSError("disk full")


def test_failed_write_keeps_previous_entries(caplog: pytest.LogCaptureFixture) -> None:
    store = FailingStore({KEY: encode([make_entry(40)])})
    ledger = ScoreLedger(store, KEY)
    with caplog.at_level(logging.ERROR):
        assert ledger.record(90, "ada") is None
    assert [entry.score for entry in ledger.entries] == [40]
    assert "disk full" in caplog.text


class FlakyReadStore(MemoryStore):
    """Raises ``OSError`` on the next ``failures`` reads."""

    def __init__(self, initial=None) -> None:
        super().__init__(initial)
        self.failures = 0

    def get(self, key: str):
        if self.failures:
            self.failures -= 1
            raise OSError("device busy")
        return super().get(key)


def test_failed_reread_merges_into_loaded_entries(
    caplog: pytest.LogCaptureFixture,
) -> None:
    stored = [make_entry(score, timestamp=score) for score in range(100, 1100, 100)]
    store = FlakyReadStore({KEY: encode(stored)})
    ledger = ScoreLedger(store, KEY)
    store.failures = 1
    with caplog.at_level(logging.WARNING):
        assert ledger.record(5, "new") is not None
    assert len(ledger.entries) == MAX_ENTRIES
    assert len(decode(store.get(KEY))) == MAX_ENTRIES
    assert "device busy" in caplog.text

    store.failures = 1
    ledger.record(550, "mid")
    scores = [entry.score for entry in decode(store.get(KEY))]
    assert len(scores) == MAX_ENTRIES
    assert 550 in scores
    assert 100 not in scores


def test_clear_removes_entries() -> None:
    store = MemoryStore()
    ledger = ScoreLedger(store, KEY)
    ledger.record(10, "ada")
    ledger.clear()
    assert len(ledger.entries) == 0
    assert store.get(KEY) is None


def test_file_store_round_trip(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "scores")
    assert store.get(KEY) is None
    store.set(KEY, "[]")
    store.set(KEY, '[{"score": 1}]')
    assert store.get(KEY) == '[{"score": 1}]'
    assert sorted(p.name for p in (tmp_path / "scores").iterdir()) == [f"{KEY}.json"]
    store.delete(KEY)
    store.delete(KEY)
    assert store.get(KEY) is None


@pytest.mark.parametrize("key", ["", "../escape", ".hidden", "a/b"])
def test_file_store_rejects_bad_keys(tmp_path: Path, key: str) -> None:
    with pytest.raises(ValueError):
        FileStore(tmp_path).get(key)


def test_ledger_over_file_store(tmp_path: Path) -> None:
    ledger = ScoreLedger(FileStore(tmp_path), KEY, clock=fixed_clock())
    ledger.record(70, "ada", {"mode": "CLASSIC"})
    stored = json.loads((tmp_path / f"{KEY}.json").read_text(encoding="utf-8"))
    assert stored == [
        {
            "score": 70,
            "date": "2026-10-19",
            "timestamp": int(datetime(2026, 10, 19, 12).timestamp() * 1000),
            "playerName": "ada",
            "mode": "CLASSIC",
        }
    ]
