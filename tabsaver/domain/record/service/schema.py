from tabsaver.domain.record.model.value import CollectionSchema, FieldType
from tabsaver.domain.shared.error import SchemaError, ValidationError
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.domain.shared.service import Service

NO_TITLE_FIELD = (
    "This database has no Title property. Notion databases must have a Title column."
)


def resolve_title_field(schema: CollectionSchema) -> str | None:
    """First title-typed field in schema order, or None."""
    for name, descriptor in schema.properties.items():
        if descriptor.type == FieldType.TITLE:
            return name
    return None


def has_field_of_type(schema: CollectionSchema, name: str | None, field_type: str) -> bool:
    if not name:
        return False
    descriptor = schema.properties.get(name)
    return descriptor is not None and descriptor.type == field_type


def resolve_url_field(schema: CollectionSchema, desired_name: str | None) -> str | None:
    """``desired_name`` if the schema declares it as a url field, else None."""
    if has_field_of_type(schema, desired_name, FieldType.URL):
        return desired_name
    return None


def title_field_for(schema: CollectionSchema, hint: str | None) -> str:
    """The hinted title field if valid, else the schema's own title field.

    Raises:
        SchemaError: the schema has no title-typed field.
    """
    if hint and has_field_of_type(schema, hint, FieldType.TITLE):
        return hint
    resolved = resolve_title_field(schema)
    if resolved is None:
        raise SchemaError(NO_TITLE_FIELD, code="no_title_field")
    return resolved


class SchemaResolver(Service):
    """Fetches collection schemas. Schemas are never cached."""

    remote: RemoteStore
    credential: str
    deadline: float | None = None

    async def fetch_schema(self, collection_id: str) -> CollectionSchema:
        collection_id = (collection_id or "").strip()
        if not collection_id:
            raise ValidationError("Missing database id.", field="collection_id")
        data = await self.remote.request(
            f"/databases/{collection_id}",
            credential=self.credential,
            deadline=self.deadline,
        )
        schema = CollectionSchema.from_api(data)
        if not schema.id:
            schema = schema.model_copy(update={"id": collection_id})
        return schema
