from enum import StrEnum
from typing import Any

from pydantic import Field

from tabsaver.domain.shared.model.value import ValueObject


class FieldType(StrEnum):
    """Property types the writer cares about.

    Schemas may declare other types; those are kept as plain strings.
    """

    TITLE = "title"
    URL = "url"
    RICH_TEXT = "rich_text"


class FieldDescriptor(ValueObject):
    type: str


class CollectionSchema(ValueObject):
    """Field-name to descriptor mapping of one collection, in server order."""

    id: str
    url: str | None = None
    properties: dict[str, FieldDescriptor] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CollectionSchema":
        properties = {
            name: FieldDescriptor(type=str(prop.get("type") or ""))
            for name, prop in (data.get("properties") or {}).items()
            if isinstance(prop, dict)
        }
        return cls(id=data.get("id", ""), url=data.get("url"), properties=properties)


class Record(ValueObject):
    """A row of a collection."""

    id: str
    url: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Record":
        return cls(id=data["id"], url=data.get("url"), properties=data.get("properties") or {})


class TimestampNote(ValueObject):
    """A playback position to record as a bullet inside a record."""

    formatted_label: str
    source_url: str = ""


class CreatedRecord(ValueObject):
    record: Record
    collection_url: str | None = None
    degraded_fields: list[str] = Field(default_factory=list)


class SavedRecord(ValueObject):
    record_url: str | None = None
    collection_url: str | None = None
    created: bool
