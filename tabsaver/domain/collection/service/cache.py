import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import ValidationError

from tabsaver.domain.collection.model.value import (
    Collection,
    CollectionCacheEntry,
    fingerprint,
)
from tabsaver.domain.collection.port.cache_store import CacheStore
from tabsaver.domain.shared.service import Service

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class CollectionCache(Service):
    """Credential-scoped cache of the discovery result.

    Freshness is decided by the caller (see ``CollectionCacheEntry.is_fresh``)
    because it depends on the caller's current credential.
    """

    store: CacheStore
    clock: Callable[[], datetime] = utc_now

    async def read(self) -> CollectionCacheEntry | None:
        """Return the cached entry, or None if absent or unreadable. Never raises."""
        try:
            raw = await self.store.get()
        except Exception as e:
            logger.debug("Collection cache unreadable: %r", e)
            return None
        if not isinstance(raw, dict):
            return None
        try:
            return CollectionCacheEntry.model_validate(raw)
        except ValidationError as e:
            logger.debug("Ignoring malformed collection cache: %s", e)
            return None

    async def write(self, credential: str, collections: list[Collection]) -> CollectionCacheEntry:
        """Replace the cached entry with ``collections`` fetched now."""
        entry = CollectionCacheEntry(
            credential_fingerprint=fingerprint(credential),
            fetched_at=self.clock(),
            collections=collections,
        )
        await self.store.set(entry.model_dump(mode="json"))
        return entry
