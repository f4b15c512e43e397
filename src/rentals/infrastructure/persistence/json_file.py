"""A list of JSON records kept in one file.

Every write goes to a temporary file in the same directory which then
replaces the original, so readers only ever see a complete file. Writers
in one process are serialised per file: ``locked()`` must wrap every
load-modify-persist cycle.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

_registry_guard = threading.Lock()
_file_locks: dict[Path, threading.RLock] = {}


def _lock_for(path: Path) -> threading.RLock:
    with _registry_guard:
        lock = _file_locks.get(path)
        if lock is None:
            lock = _file_locks[path] = threading.RLock()
        return lock


class JsonRecordFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path.resolve())
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold this file's write lock, shared by every instance on the same path."""
        with self._lock:
            yield

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def next_id(self, records: list[dict]) -> int:
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def upsert(self, records: list[dict], record: dict) -> None:
        """Replace the record with the same id, or append it."""
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                return
        records.append(record)

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self.persist([])
