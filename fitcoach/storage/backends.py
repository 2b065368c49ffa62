"""Key-value text storage backing the workout store.

A backend holds plain text values under string keys. The workout store keeps
its whole document under a single key and always rewrites it in full.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class CorruptStoreError(ValueError):
    """Stored data exists but cannot be decoded."""


class KeyValueStore(Protocol):
    # read returns None for an absent key and raises ValueError for stored
    # data that cannot be decoded.
    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """All keys in one JSON object on disk.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers never see a half-written file.

    ``read`` returns None only when the file or key is absent. A file that
    cannot be decoded, or a non-string value under the key, raises
    ``CorruptStoreError``; a later ``write`` replaces the undecodable file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _decode(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise CorruptStoreError(f"Unreadable store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise CorruptStoreError(f"Store file {self.path} is not a JSON object")
        return data

    def read(self, key: str) -> str | None:
        if not self.path.exists():
            return None
        data = self._decode()
        if key not in data:
            return None
        value = data[key]
        if not isinstance(value, str):
            raise CorruptStoreError(f"Value for {key!r} in {self.path} is not a string")
        return value

    def write(self, key: str, value: str) -> None:
        data = {}
        if self.path.exists():
            try:
                data = self._decode()
            except CorruptStoreError:
                logger.warning("Replacing unreadable store file %s", self.path, exc_info=True)
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            tmp = os.fdopen(fd, "w", encoding="utf-8")
        except BaseException:
            os.close(fd)
            os.unlink(tmp_path)
            raise
        try:
            with tmp:
                json.dump(data, tmp, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise
