from dishka import AsyncContainer, make_async_container

from tabsaver.cli.util.paths import TabSaverPaths
from tabsaver.config import Config
from tabsaver.domain.collection.util.di import CollectionProvider
from tabsaver.domain.record.util.di import RecordProvider
from tabsaver.infrastructure.cache.di import CacheProvider
from tabsaver.infrastructure.notion.di import NotionProvider
from tabsaver.util.di.base import ContextProvider
from tabsaver.util.di.scope import Scope


def create_container(
    config: Config | None = None, paths: TabSaverPaths | None = None
) -> AsyncContainer:
    # Pydantic Settings populates from env vars and the YAML file at runtime
    config = config or Config()  # type: ignore[call-arg]
    paths = paths or TabSaverPaths()

    return make_async_container(
        ContextProvider(),
        NotionProvider(),
        CacheProvider(),
        CollectionProvider(),
        RecordProvider(),
        context={Config: config, TabSaverPaths: paths},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
