import logging
from datetime import timedelta
from typing import Any

from tabsaver.domain.collection.model.value import (
    UNTITLED_COLLECTION,
    Collection,
    CollectionListing,
)
from tabsaver.domain.collection.service.cache import CollectionCache
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.domain.shared.service import Service

logger = logging.getLogger(__name__)

# Known cap: discovery reads a single page, so only the 100 most recently
# edited collections are ever listed. There is no pagination.
DISCOVERY_PAGE_SIZE = 100

DEFAULT_CACHE_TTL = timedelta(hours=6)


def collection_from_search_result(obj: dict[str, Any]) -> Collection:
    title = "".join(run.get("plain_text") or "" for run in obj.get("title") or []).strip()
    return Collection(
        id=obj["id"],
        title=title or UNTITLED_COLLECTION,
        url=obj.get("url"),
    )


class CollectionService(Service):
    remote: RemoteStore
    cache: CollectionCache
    ttl: timedelta = DEFAULT_CACHE_TTL
    deadline: float | None = None

    async def list_collections(
        self, credential: str, force_refresh: bool = False
    ) -> CollectionListing:
        """List writable collections, serving a fresh cache entry when allowed."""
        if not force_refresh:
            entry = await self.cache.read()
            if entry is not None and entry.is_fresh(credential, self.cache.clock(), self.ttl):
                logger.debug("Serving %d collections from cache", len(entry.collections))
                return CollectionListing(collections=entry.collections, cached=True)

        collections = await self.fetch_collections(credential)
        await self.cache.write(credential, collections)
        return CollectionListing(collections=collections, cached=False)

    async def fetch_collections(self, credential: str) -> list[Collection]:
        data = await self.remote.request(
            "/search",
            method="POST",
            credential=credential,
            body={
                "filter": {"property": "object", "value": "database"},
                "sort": {"direction": "descending", "timestamp": "last_edited_time"},
                "page_size": DISCOVERY_PAGE_SIZE,
            },
            deadline=self.deadline,
        )
        results = data.get("results") or []
        if data.get("has_more"):
            logger.info(
                "Discovery returned more than %d collections; only the first page is listed",
                DISCOVERY_PAGE_SIZE,
            )
        return [collection_from_search_result(obj) for obj in results]
