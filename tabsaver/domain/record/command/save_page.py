"""Save a page (title + url) as a new record."""

import logfire

from tabsaver.config import AutoOpen, Config
from tabsaver.domain.record.command.auto_open import open_url_for
from tabsaver.domain.record.service.writer import RecordWriter
from tabsaver.domain.shared.command import Command, CommandHandler, Result
from tabsaver.domain.shared.error import ConfigError, ValidationError

NO_COLLECTION = "No database selected. Choose one first."


def selected_collection(cmd_collection_id: str | None, config: Config) -> str:
    collection_id = (cmd_collection_id or config.preferences.selected_collection_id or "").strip()
    if not collection_id:
        raise ConfigError(NO_COLLECTION, code="no_collection")
    return collection_id


class SavePage(Command):
    collection_id: str | None = None
    title: str = ""
    url: str = ""


class PageSaved(Result):
    record_id: str
    url: str | None
    collection_url: str | None
    degraded_fields: list[str]
    auto_open_after_save: AutoOpen
    open_url: str | None


class SavePageHandler(CommandHandler[SavePage, PageSaved]):
    config: Config
    writer: RecordWriter

    async def run(self, cmd: SavePage) -> PageSaved:
        collection_id = selected_collection(cmd.collection_id, self.config)
        url = cmd.url.strip()
        if not url:
            raise ValidationError("Missing page URL.", field="url")

        prefs = self.config.preferences
        with logfire.span("SavePage", collection_id=collection_id):
            created = await self.writer.create_record(
                collection_id,
                cmd.title,
                url,
                prefs.title_property_name,
                prefs.url_property_name,
            )
            logfire.info(
                "Record created",
                record_id=created.record.id,
                degraded=created.degraded_fields,
            )
            return PageSaved(
                record_id=created.record.id,
                url=created.record.url,
                collection_url=created.collection_url,
                degraded_fields=created.degraded_fields,
                auto_open_after_save=prefs.auto_open_after_save,
                open_url=open_url_for(
                    prefs.auto_open_after_save, created.record.url, created.collection_url
                ),
            )
