"""
JSON-based persistence adapter.

Each collection (accounts, universities, applications) lives in its own JSON
file and is always read and written as a whole. Services mutate a collection
only through ``CollectionStore.transaction()``, which serializes writers inside
the process; cross-process access is not coordinated.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar
import json
import logging
import os
import tempfile
import threading
import time

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionStore(Generic[T]):
    """Durable list of records of one type, backed by a single JSON file.

    ``envelope`` names the top-level key the list is stored under
    (``{"users": [...]}``); when omitted the file holds a bare JSON array.
    A missing, unreadable or malformed file loads as an empty collection.
    """

    def __init__(
        self,
        path: Path | str,
        decode: Callable[[dict], T],
        encode: Callable[[T], dict],
        *,
        envelope: Optional[str] = None,
    ) -> None:
        self.path = Path(path)
        self._decode = decode
        self._encode = encode
        self._envelope = envelope
        self._lock = threading.RLock()
        self._last_id = 0

    # -------------------------------------- leitura --------------------------------------
    def load(self) -> list[T]:
        records, _ = self._load_entries()
        return records

    def _load_entries(self) -> tuple[list[T], list[Any]]:
        """Decoded records plus the raw entries that could not be decoded."""
        raw = self._read_raw()
        if raw is None:
            return [], []
        records: list[T] = []
        leftovers: list[Any] = []
        for position, entry in enumerate(raw):
            if not isinstance(entry, dict):
                logger.warning("Ignoring non-object entry %d in %s (kept on disk)", position, self.path)
                leftovers.append(entry)
                continue
            try:
                records.append(self._decode(entry))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Ignoring undecodable entry %d in %s (kept on disk): %s", position, self.path, exc)
                leftovers.append(entry)
        return records, leftovers

    def _read_raw(self) -> Optional[list]:
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s, treating collection as empty: %s", self.path, exc)
            return None
        if not text.strip():
            return None
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Corrupt JSON in %s, treating collection as empty: %s", self.path, exc)
            return None
        if self._envelope is not None:
            data = data.get(self._envelope) if isinstance(data, dict) else None
        if not isinstance(data, list):
            logger.warning("Unexpected structure in %s, treating collection as empty", self.path)
            return None
        return data

    # -------------------------------------- escrita --------------------------------------
    def save(self, records: Iterable[T], *, passthrough: Iterable[Any] = ()) -> None:
        """Replace the whole file with ``records`` (temp file + rename).

        ``passthrough`` entries are written after the records exactly as given.
        """
        payload: Any = [self._encode(record) for record in records]
        payload.extend(passthrough)
        if self._envelope is not None:
            payload = {self._envelope: payload}
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def ensure_exists(self) -> None:
        with self._lock:
            if not self.path.exists():
                self.save([])

    @contextmanager
    def transaction(self) -> Iterator[list[T]]:
        """Hold the collection gate, yield the loaded records, save them on success.

        Entries the decoder rejected are written back untouched.
        """
        with self._lock:
            records, leftovers = self._load_entries()
            yield records
            self.save(records, passthrough=leftovers)

    def next_id(self, records: Iterable[T], *, key: Callable[[T], Any] = lambda r: r.id) -> int:
        """Time-derived id, bumped past every existing and previously issued id.

        Must be called inside ``transaction()``.
        """
        highest = self._last_id
        for record in records:
            try:
                highest = max(highest, int(key(record)))
            except (TypeError, ValueError):
                continue
        candidate = max(int(time.time() * 1000), highest + 1)
        self._last_id = candidate
        return candidate
