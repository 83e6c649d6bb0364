"""Tests for the save and timestamp command handlers."""

import pytest

from tabsaver.config import AutoOpen, Config, NotionConfig, Preferences
from tabsaver.domain.collection.command.list_collections import (
    ListCollections,
    ListCollectionsHandler,
)
from tabsaver.domain.record.command.add_timestamp import AddTimestamp, AddTimestampHandler
from tabsaver.domain.record.command.auto_open import open_url_for
from tabsaver.domain.record.command.save_page import SavePage, SavePageHandler
from tabsaver.domain.shared.error import ConfigError, ValidationError

CREDENTIAL = "secret_abcdefgh12345678"


def _config(**preferences) -> Config:
    return Config(
        notion=NotionConfig(api_key=CREDENTIAL),
        preferences=Preferences(**preferences),
    )


class TestOpenUrlFor:
    def test_preferences(self):
        assert open_url_for(AutoOpen.PAGE, "p", "d") == "p"
        assert open_url_for(AutoOpen.DATABASE, "p", "d") == "d"
        assert open_url_for(AutoOpen.NONE, "p", "d") is None


class TestSavePageHandler:
    @pytest.mark.asyncio
    async def test_saves_to_selected_collection(self, fake_notion, make_container):
        fake_notion.add_database("db1", {"Name": "title", "URL": "url"})
        container = make_container(_config(selected_collection_id="db1"))
        try:
            async with container() as uow:
                handler = await uow.get(SavePageHandler)
                result = await handler.run(SavePage(title="Example", url="https://x.test"))
        finally:
            await container.close()

        assert result.url == f"https://notion.test/{result.record_id}"
        assert result.collection_url == "https://notion.test/db1"
        assert result.degraded_fields == []
        assert result.open_url is None

    @pytest.mark.asyncio
    async def test_command_collection_overrides_selection(self, fake_notion, make_container):
        fake_notion.add_database("db2", {"Name": "title"})
        container = make_container(
            _config(selected_collection_id="db1", auto_open_after_save="database")
        )
        try:
            async with container() as uow:
                handler = await uow.get(SavePageHandler)
                result = await handler.run(
                    SavePage(collection_id="db2", title="Example", url="https://x.test")
                )
        finally:
            await container.close()

        assert result.degraded_fields == ["url"]
        assert result.open_url == "https://notion.test/db2"

    @pytest.mark.asyncio
    async def test_no_collection_selected(self, fake_notion, make_container):
        container = make_container(_config())
        try:
            async with container() as uow:
                handler = await uow.get(SavePageHandler)
                with pytest.raises(ConfigError, match="No database selected"):
                    await handler.run(SavePage(title="Example", url="https://x.test"))
        finally:
            await container.close()
        assert fake_notion.calls == []

    @pytest.mark.asyncio
    async def test_missing_url(self, fake_notion, make_container):
        container = make_container(_config(selected_collection_id="db1"))
        try:
            async with container() as uow:
                handler = await uow.get(SavePageHandler)
                with pytest.raises(ValidationError, match="Missing page URL"):
                    await handler.run(SavePage(title="Example", url="  "))
        finally:
            await container.close()
        assert fake_notion.calls == []

    @pytest.mark.asyncio
    async def test_configured_field_names_are_used(self, fake_notion, make_container):
        fake_notion.add_database("db1", {"Title": "title", "Link": "url"})
        container = make_container(
            _config(
                selected_collection_id="db1",
                title_property_name="Title",
                url_property_name="Link",
            )
        )
        try:
            async with container() as uow:
                handler = await uow.get(SavePageHandler)
                result = await handler.run(SavePage(title="Example", url="https://x.test"))
        finally:
            await container.close()

        properties = fake_notion.pages[result.record_id]["properties"]
        assert properties["Link"] == {"url": "https://x.test"}
        assert "Title" in properties


class TestAddTimestampHandler:
    @pytest.mark.asyncio
    async def test_appends_then_reports_page(self, fake_notion, make_container):
        fake_notion.add_database("db1", {"Name": "title", "URL": "url"})
        page_id = fake_notion.add_page("db1", "Name", "Talk")
        container = make_container(
            _config(selected_collection_id="db1", auto_open_after_save="page")
        )
        try:
            async with container() as uow:
                handler = await uow.get(AddTimestampHandler)
                result = await handler.run(
                    AddTimestamp(
                        title="Talk",
                        url="https://youtu.be/abc",
                        label="1:15",
                        source_url="https://youtu.be/abc?t=75s",
                    )
                )
        finally:
            await container.close()

        assert result.created is False
        assert result.url == f"https://notion.test/{page_id}"
        assert result.open_url == result.url
        assert len(fake_notion.children[page_id]) == 1

    @pytest.mark.asyncio
    async def test_missing_credential_is_reported(self, fake_notion, make_container):
        config = Config(preferences=Preferences(selected_collection_id="db1"))
        container = make_container(config)
        try:
            async with container() as uow:
                handler = await uow.get(AddTimestampHandler)
                with pytest.raises(ConfigError, match="API key"):
                    await handler.run(
                        AddTimestamp(title="Talk", url="https://youtu.be/abc", label="0:01")
                    )
        finally:
            await container.close()


class TestListCollectionsHandler:
    @pytest.mark.asyncio
    async def test_lists_then_serves_from_cache(self, fake_notion, make_container):
        fake_notion.add_database("db1", {"Name": "title"}, title="Reading list")
        container = make_container(_config())
        try:
            async with container() as uow:
                handler = await uow.get(ListCollectionsHandler)
                first = await handler.run(ListCollections())
            async with container() as uow:
                handler = await uow.get(ListCollectionsHandler)
                second = await handler.run(ListCollections())
                refreshed = await handler.run(ListCollections(force_refresh=True))
        finally:
            await container.close()

        assert [c.title for c in first.collections] == ["Reading list"]
        assert (first.cached, second.cached, refreshed.cached) == (False, True, False)
        assert len(fake_notion.calls_to("POST", "/search")) == 2
