import logging
from collections.abc import Sequence
from typing import Any

from tabsaver.domain.record.model.blocks import (
    degrade_note,
    timestamp_bullet,
    title_value,
    url_value,
)
from tabsaver.domain.record.model.value import (
    CollectionSchema,
    CreatedRecord,
    Record,
    SavedRecord,
    TimestampNote,
)
from tabsaver.domain.record.service.lookup import RecordLookup
from tabsaver.domain.record.service.schema import (
    SchemaResolver,
    resolve_url_field,
    title_field_for,
)
from tabsaver.domain.shared.error import ValidationError
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RecordWriter(Service):
    """Creates records and appends timestamp notes, reconciling against the
    collection schema on every write.

    A missing url field never blocks a save: the value is written into the
    record body under a degrade note instead.
    """

    remote: RemoteStore
    schemas: SchemaResolver
    lookup: RecordLookup
    credential: str
    deadline: float | None = None

    async def create_record(
        self,
        collection_id: str,
        title: str | None,
        url: str | None,
        title_field_hint: str | None = None,
        url_field_hint: str | None = None,
    ) -> CreatedRecord:
        schema = await self.schemas.fetch_schema(collection_id)
        return await self._create_in(schema, title, url, title_field_hint, url_field_hint, ())

    async def upsert_timestamp(
        self,
        collection_id: str,
        title: str | None,
        url: str | None,
        note: TimestampNote,
        title_field_hint: str | None = None,
        url_field_hint: str | None = None,
    ) -> SavedRecord:
        """Append ``note`` to the record titled ``title``, creating it if absent."""
        title = (title or "").strip()
        if not title:
            raise ValidationError("Missing page title.", field="title")
        if not note.formatted_label.strip():
            raise ValidationError("Missing timestamp.", field="formatted_label")

        block = timestamp_bullet(note.formatted_label, note.source_url)
        schema = await self.schemas.fetch_schema(collection_id)

        existing = await self.lookup.query_by_title(schema, title)
        if existing is not None:
            await self.remote.request(
                f"/blocks/{existing.id}/children",
                method="PATCH",
                credential=self.credential,
                body={"children": [block]},
                deadline=self.deadline,
            )
            logger.info("Appended timestamp %s to record %s", note.formatted_label, existing.id)
            return SavedRecord(record_url=existing.url, collection_url=schema.url, created=False)

        created = await self._create_in(
            schema, title, url, title_field_hint, url_field_hint, [block]
        )
        return SavedRecord(
            record_url=created.record.url,
            collection_url=created.collection_url,
            created=True,
        )

    async def _create_in(
        self,
        schema: CollectionSchema,
        title: str | None,
        url: str | None,
        title_field_hint: str | None,
        url_field_hint: str | None,
        leading_blocks: Sequence[dict[str, Any]],
    ) -> CreatedRecord:
        title_field = title_field_for(schema, title_field_hint)
        url_field = resolve_url_field(schema, url_field_hint)

        properties: dict[str, Any] = {title_field: title_value(title)}
        missing_lines: list[str] = []
        degraded: list[str] = []

        if url_field is not None:
            properties[url_field] = url_value(url)
        else:
            missing_lines.append(f"URL: {url or ''}")
            degraded.append("url")
            logger.info(
                "Collection %s has no url field named %r; saving url in the record body",
                schema.id,
                url_field_hint,
            )

        children = [*leading_blocks, *degrade_note(missing_lines)]
        body: dict[str, Any] = {
            "parent": {"database_id": schema.id},
            "properties": properties,
        }
        if children:
            body["children"] = children

        data = await self.remote.request(
            "/pages",
            method="POST",
            credential=self.credential,
            body=body,
            deadline=self.deadline,
        )
        return CreatedRecord(
            record=Record.from_api(data),
            collection_url=schema.url,
            degraded_fields=degraded,
        )
