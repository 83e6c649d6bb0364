"""Append a video timestamp to the record with a matching title."""

import logfire

from tabsaver.config import AutoOpen, Config
from tabsaver.domain.record.command.auto_open import open_url_for
from tabsaver.domain.record.command.save_page import selected_collection
from tabsaver.domain.record.model.value import TimestampNote
from tabsaver.domain.record.service.writer import RecordWriter
from tabsaver.domain.shared.command import Command, CommandHandler, Result


class AddTimestamp(Command):
    collection_id: str | None = None
    title: str = ""
    url: str = ""
    label: str = ""  # "<minutes>:<seconds>"
    source_url: str = ""  # Position-stamped url the bullet links to


class TimestampAdded(Result):
    url: str | None
    collection_url: str | None
    created: bool
    auto_open_after_save: AutoOpen
    open_url: str | None


class AddTimestampHandler(CommandHandler[AddTimestamp, TimestampAdded]):
    config: Config
    writer: RecordWriter

    async def run(self, cmd: AddTimestamp) -> TimestampAdded:
        collection_id = selected_collection(cmd.collection_id, self.config)
        prefs = self.config.preferences

        with logfire.span("AddTimestamp", collection_id=collection_id, label=cmd.label):
            saved = await self.writer.upsert_timestamp(
                collection_id,
                cmd.title,
                cmd.url,
                TimestampNote(formatted_label=cmd.label, source_url=cmd.source_url),
                prefs.title_property_name,
                prefs.url_property_name,
            )
            logfire.info("Timestamp saved", created=saved.created)
            return TimestampAdded(
                url=saved.record_url,
                collection_url=saved.collection_url,
                created=saved.created,
                auto_open_after_save=prefs.auto_open_after_save,
                open_url=open_url_for(
                    prefs.auto_open_after_save, saved.record_url, saved.collection_url
                ),
            )
