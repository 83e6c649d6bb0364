from dishka import provide

from tabsaver.config import Config
from tabsaver.domain.record.command.add_timestamp import AddTimestampHandler
from tabsaver.domain.record.command.save_page import SavePageHandler
from tabsaver.domain.record.service.lookup import RecordLookup
from tabsaver.domain.record.service.schema import SchemaResolver
from tabsaver.domain.record.service.writer import RecordWriter
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.util.di.base import Provider
from tabsaver.util.di.scope import Scope


class RecordProvider(Provider):
    # Services
    @provide(scope=Scope.UOW)
    def get_schema_resolver(self, remote: RemoteStore, config: Config) -> SchemaResolver:
        return SchemaResolver(
            remote=remote,
            credential=config.notion.api_key,
            deadline=config.notion.timeout,
        )

    @provide(scope=Scope.UOW)
    def get_record_lookup(
        self, remote: RemoteStore, schemas: SchemaResolver, config: Config
    ) -> RecordLookup:
        return RecordLookup(
            remote=remote,
            schemas=schemas,
            credential=config.notion.api_key,
            deadline=config.notion.timeout,
        )

    @provide(scope=Scope.UOW)
    def get_record_writer(
        self,
        remote: RemoteStore,
        schemas: SchemaResolver,
        lookup: RecordLookup,
        config: Config,
    ) -> RecordWriter:
        return RecordWriter(
            remote=remote,
            schemas=schemas,
            lookup=lookup,
            credential=config.notion.api_key,
            deadline=config.notion.timeout,
        )

    # Command Handlers
    save_page_handler = provide(SavePageHandler, scope=Scope.UOW)
    add_timestamp_handler = provide(AddTimestampHandler, scope=Scope.UOW)
