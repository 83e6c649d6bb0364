"""DI provider for the collection cache store."""

from dishka import provide

from tabsaver.cli.util.paths import TabSaverPaths
from tabsaver.config import Config
from tabsaver.domain.collection.port.cache_store import CacheStore
from tabsaver.infrastructure.cache.store import FileCacheStore
from tabsaver.util.di.base import Provider
from tabsaver.util.di.scope import Scope


class CacheProvider(Provider):
    @provide(scope=Scope.APP, provides=CacheStore)
    def get_cache_store(self, config: Config, paths: TabSaverPaths) -> FileCacheStore:
        return FileCacheStore(config.cache.resolve_file(paths))
