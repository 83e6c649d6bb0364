"""CacheStore adapters: JSON file on disk and in-process memory."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from tabsaver.domain.collection.port.cache_store import CacheStore


class FileCacheStore(CacheStore):
    """Stores the value as one JSON file, replaced atomically on every set."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def get(self) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._read)

    async def set(self, value: dict[str, Any]) -> None:
        await asyncio.to_thread(self._write, value)

    def _read(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text())
        except (OSError, ValueError):
            return None
        return data if isinstance(data, dict) else None

    def _write(self, value: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".collections-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(value, f, indent=2)
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


class MemoryCacheStore(CacheStore):
    """Process-local store, used in tests and when no cache file is wanted."""

    def __init__(self, value: dict[str, Any] | None = None) -> None:
        self._value = value

    async def get(self) -> dict[str, Any] | None:
        return self._value

    async def set(self, value: dict[str, Any]) -> None:
        self._value = dict(value)
