from datetime import timedelta

from dishka import provide

from tabsaver.config import Config
from tabsaver.domain.collection.command.list_collections import ListCollectionsHandler
from tabsaver.domain.collection.port.cache_store import CacheStore
from tabsaver.domain.collection.service.cache import CollectionCache
from tabsaver.domain.collection.service.discovery import CollectionService
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.util.di.base import Provider
from tabsaver.util.di.scope import Scope


class CollectionProvider(Provider):
    # Services
    @provide(scope=Scope.UOW)
    def get_collection_cache(self, store: CacheStore) -> CollectionCache:
        return CollectionCache(store=store)

    @provide(scope=Scope.UOW)
    def get_collection_service(
        self, remote: RemoteStore, cache: CollectionCache, config: Config
    ) -> CollectionService:
        return CollectionService(
            remote=remote,
            cache=cache,
            ttl=timedelta(hours=config.cache.ttl_hours),
            deadline=config.notion.timeout,
        )

    # Command Handlers
    list_collections_handler = provide(ListCollectionsHandler, scope=Scope.UOW)
