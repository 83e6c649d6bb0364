"""Tests for container wiring."""

import pytest

from tabsaver.application.di import create_container
from tabsaver.config import CacheConfig, Config
from tabsaver.domain.collection.command.list_collections import ListCollectionsHandler
from tabsaver.domain.collection.port.cache_store import CacheStore
from tabsaver.domain.record.command.add_timestamp import AddTimestampHandler
from tabsaver.domain.record.command.save_page import SavePageHandler
from tabsaver.domain.record.service.writer import RecordWriter
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.infrastructure.cache.store import FileCacheStore
from tabsaver.infrastructure.notion.client import HttpRemoteStore


class TestCreateContainer:
    @pytest.mark.asyncio
    async def test_resolves_handlers(self):
        container = create_container(Config())
        try:
            async with container() as uow:
                assert isinstance(await uow.get(ListCollectionsHandler), ListCollectionsHandler)
                assert isinstance(await uow.get(SavePageHandler), SavePageHandler)
                assert isinstance(await uow.get(AddTimestampHandler), AddTimestampHandler)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_default_adapters(self, tmp_path):
        config = Config(cache=CacheConfig(file=str(tmp_path / "c.json")))
        container = create_container(config)
        try:
            assert isinstance(await container.get(RemoteStore), HttpRemoteStore)
            store = await container.get(CacheStore)
            assert isinstance(store, FileCacheStore)
            assert store.path == tmp_path / "c.json"
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_services_carry_credential_and_deadline(self):
        config = Config(notion={"api_key": " secret_abc ", "timeout": 4.0})
        container = create_container(config)
        try:
            async with container() as uow:
                writer = await uow.get(RecordWriter)
                assert writer.credential == "secret_abc"
                assert writer.deadline == 4.0
        finally:
            await container.close()
