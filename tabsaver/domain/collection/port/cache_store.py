"""Port for the single-slot collection cache storage."""

from abc import abstractmethod
from typing import Any, Protocol

from tabsaver.domain.shared.port import Port


class CacheStore(Port, Protocol):
    """Holds one structured value.

    ``set`` must replace the whole value atomically; readers never observe a
    partially written value.
    """

    @abstractmethod
    async def get(self) -> dict[str, Any] | None: ...

    @abstractmethod
    async def set(self, value: dict[str, Any]) -> None: ...
