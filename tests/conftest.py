"""Global test fixtures."""

from typing import Any

import pytest
from dishka import AsyncContainer, make_async_container, provide

from tabsaver.cli.util.paths import TabSaverPaths
from tabsaver.config import Config
from tabsaver.domain.collection.port.cache_store import CacheStore
from tabsaver.domain.collection.util.di import CollectionProvider
from tabsaver.domain.record.util.di import RecordProvider
from tabsaver.domain.shared.error import ConfigError, RemoteError
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.infrastructure.cache.di import CacheProvider
from tabsaver.infrastructure.cache.store import MemoryCacheStore
from tabsaver.infrastructure.notion.di import NotionProvider
from tabsaver.util.di.base import ContextProvider, Provider
from tabsaver.util.di.scope import Scope


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real config, cache and credential."""
    monkeypatch.setenv("TABSAVER_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("TABSAVER_CONFIG_FILE", raising=False)
    monkeypatch.delenv("TABSAVER_LOG_FILE", raising=False)
    for name in (
        "TABSAVER_NOTION__API_KEY",
        "TABSAVER_NOTION__TIMEOUT",
        "TABSAVER_PREFERENCES__SELECTED_COLLECTION_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def _plain_title(value: dict[str, Any] | None) -> str:
    runs = (value or {}).get("title") or []
    return "".join(r.get("plain_text") or r.get("text", {}).get("content", "") for r in runs)


class FakeNotion:
    """In-memory stand-in for the RemoteStore port.

    Databases are registered with ``add_database``; created pages and
    appended blocks are recorded for assertions.
    """

    def __init__(self) -> None:
        self.databases: dict[str, dict[str, Any]] = {}
        self.titles: dict[str, str] = {}
        self.pages: dict[str, dict[str, Any]] = {}
        self.children: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[dict[str, Any]] = []
        self.search_has_more = False

    def add_database(
        self, db_id: str, properties: dict[str, str], *, title: str = "Reading list"
    ) -> None:
        self.databases[db_id] = {
            "object": "database",
            "id": db_id,
            "url": f"https://notion.test/{db_id}",
            "properties": {name: {"id": name, "type": kind} for name, kind in properties.items()},
        }
        self.titles[db_id] = title

    def add_page(self, db_id: str, title_field: str, title: str) -> str:
        page_id = f"page-{len(self.pages) + 1}"
        self.pages[page_id] = {
            "object": "page",
            "id": page_id,
            "url": f"https://notion.test/{page_id}",
            "parent": {"database_id": db_id},
            "properties": {title_field: {"title": [{"plain_text": title}]}},
        }
        self.children[page_id] = []
        return page_id

    def calls_to(self, method: str, prefix: str) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"].startswith(prefix)]

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        credential: str,
        body: dict[str, Any] | None = None,
        deadline: float | None = None,
    ) -> dict[str, Any]:
        if not credential:
            raise ConfigError("Missing Notion API key. Set it in the configuration.")
        self.calls.append({"path": path, "method": method, "body": body, "deadline": deadline})
        parts = path.strip("/").split("/")

        if method == "POST" and parts == ["search"]:
            results = [
                {**db, "title": [{"plain_text": self.titles[db_id]}]}
                for db_id, db in self.databases.items()
            ]
            return {"results": results, "has_more": self.search_has_more}

        if parts[0] == "databases" and parts[1] not in self.databases:
            raise RemoteError(f"Notion API error 404: Could not find database {parts[1]}", 404)

        if method == "GET" and parts[0] == "databases" and len(parts) == 2:
            return self.databases[parts[1]]

        if method == "POST" and parts[0] == "databases" and parts[2:] == ["query"]:
            prop = body["filter"]["property"]
            wanted = body["filter"]["title"]["equals"]
            matches = [
                page
                for page in self.pages.values()
                if page["parent"]["database_id"] == parts[1]
                and _plain_title(page["properties"].get(prop)) == wanted
            ]
            return {"results": matches[: body.get("page_size", 100)]}

        if method == "POST" and parts == ["pages"]:
            page_id = f"page-{len(self.pages) + 1}"
            page = {
                "object": "page",
                "id": page_id,
                "url": f"https://notion.test/{page_id}",
                "parent": body["parent"],
                "properties": body["properties"],
            }
            self.pages[page_id] = page
            self.children[page_id] = list(body.get("children", []))
            return page

        if method == "PATCH" and parts[0] == "blocks" and parts[2:] == ["children"]:
            self.children[parts[1]].extend(body["children"])
            return {"results": body["children"]}

        raise RemoteError(f"Notion API error 400: unsupported {method} {path}", 400)


@pytest.fixture
def fake_notion() -> FakeNotion:
    return FakeNotion()


class FakeAdapters(Provider):
    """Replaces the remote store and cache file with in-memory fakes."""

    def __init__(self, remote: FakeNotion, store: MemoryCacheStore) -> None:
        super().__init__()
        self.remote = remote
        self.store = store

    @provide(scope=Scope.APP)
    def get_remote_store(self) -> RemoteStore:
        return self.remote

    @provide(scope=Scope.APP)
    def get_cache_store(self) -> CacheStore:
        return self.store


@pytest.fixture
def cache_store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def make_container(fake_notion, cache_store):
    """Container factory wiring the real providers to the fakes."""

    def factory(config: Config | None = None) -> AsyncContainer:
        return make_async_container(
            ContextProvider(),
            NotionProvider(),
            CacheProvider(),
            CollectionProvider(),
            RecordProvider(),
            FakeAdapters(fake_notion, cache_store),
            context={Config: config or Config(), TabSaverPaths: TabSaverPaths()},
            scopes=Scope,  # type: ignore[arg-type]
        )

    return factory
