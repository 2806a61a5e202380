from typing import Any
from uuid import UUID

from record_url_resolution.entity_types.entity_metadata import EntityMetadata
from record_url_resolution.resolver.errors import CatalogError


class InMemoryCatalog:
    """Metadata catalog and record store backed by plain dicts and lists.

    Metadata rows live in a list so two entities may share a type code,
    the way a misconfigured catalog can.
    """

    def __init__(self) -> None:
        self.metadata: list[EntityMetadata] = []
        self.records: dict[tuple[str, UUID], dict[str, Any]] = {}

    def register_entity(self, type_code: int, type_name: str) -> EntityMetadata:
        row = EntityMetadata(type_code=type_code, type_name=type_name)
        self.metadata.append(row)
        return row

    def put_record(self, type_name: str, record_id: UUID, **fields: Any) -> None:
        self.records[(type_name.lower(), record_id)] = dict(fields)

    # --- MetadataCatalog -------------------------------------------------------
    def query_entity_metadata(
        self, type_code: int, properties: tuple[str, ...]
    ) -> list[EntityMetadata]:
        unknown = set(properties) - {"type_code", "type_name"}
        if unknown:
            raise CatalogError(f"Unknown metadata properties: {sorted(unknown)}")
        return [row for row in self.metadata if row.type_code == type_code]

    # --- RecordStore -----------------------------------------------------------
    def retrieve(
        self, type_name: str, record_id: UUID, fields: set[str]
    ) -> dict[str, Any]:
        record = self.records.get((type_name.lower(), record_id))
        if record is None:
            raise CatalogError(f"{type_name} with id {record_id} does not exist")
        return {field: record.get(field) for field in fields}
