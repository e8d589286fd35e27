"""Key-value blob stores backing the leaderboards.

The ledger only needs ``get`` / ``set`` / ``delete`` of opaque string blobs,
so any backend satisfying :class:`KeyValueStore` can be swapped in without
touching the ledger. Two are provided:

* :class:`MemoryStore` - process-local dict, used by tests and ephemeral runs.
* :class:`FileStore` - one JSON file per key under a directory. Writes go to a
  temporary sibling file that is then renamed over the target, so readers
  see either the old or the new blob.

Stores raise ``OSError`` on I/O failure; catching it is the ledger's job.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key`` or ``None`` when absent."""
        ...

    def set(self, key: str, blob: str) -> None:
        """Replace the blob stored under ``key``."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``; removing an absent key is a no-op."""
        ...


class MemoryStore:
    """Dict-backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = blob

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class FileStore:
    """Directory of ``<key>.json`` files.

    Args:
        root: Directory holding the blobs; created on first write.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, blob: str) -> None:
        path = self.path_for(key)
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(blob)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)
