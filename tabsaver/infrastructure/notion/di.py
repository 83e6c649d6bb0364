"""DI provider for the remote store adapter."""

from typing import AsyncIterable

import httpx
from dishka import provide

from tabsaver.config import Config
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.infrastructure.notion.client import CONNECT_TIMEOUT, HttpRemoteStore
from tabsaver.util.di.base import Provider
from tabsaver.util.di.scope import Scope

class NotionProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_http_client(self, config: Config) -> AsyncIterable[httpx.AsyncClient]:
        timeout = httpx.Timeout(config.notion.timeout, connect=CONNECT_TIMEOUT)
        async with httpx.AsyncClient(timeout=timeout) as client:
            yield client

    @provide(scope=Scope.APP, provides=RemoteStore)
    def get_remote_store(self, client: httpx.AsyncClient, config: Config) -> HttpRemoteStore:
        return HttpRemoteStore(client=client, config=config.notion)
