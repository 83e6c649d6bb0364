from tabsaver.domain.record.model.value import CollectionSchema, Record
from tabsaver.domain.record.service.schema import SchemaResolver, resolve_title_field
from tabsaver.domain.shared.port.remote_store import RemoteStore
from tabsaver.domain.shared.service import Service


class RecordLookup(Service):
    """Finds existing records by exact title.

    When several records share a title, the first one in server order is
    returned.
    """

    remote: RemoteStore
    schemas: SchemaResolver
    credential: str
    deadline: float | None = None

    async def find_by_title(self, collection_id: str, title: str) -> Record | None:
        schema = await self.schemas.fetch_schema(collection_id)
        return await self.query_by_title(schema, title)

    async def query_by_title(self, schema: CollectionSchema, title: str) -> Record | None:
        title_field = resolve_title_field(schema)
        if title_field is None:
            return None

        data = await self.remote.request(
            f"/databases/{schema.id}/query",
            method="POST",
            credential=self.credential,
            body={
                "filter": {"property": title_field, "title": {"equals": title}},
                "page_size": 1,
            },
            deadline=self.deadline,
        )
        results = data.get("results") or []
        if not results:
            return None
        return Record.from_api(results[0])
