from typing import Any, Protocol
from uuid import UUID

from record_url_resolution.entity_types.entity_metadata import EntityMetadata


class MetadataCatalog(Protocol):
    def query_entity_metadata(
        self, type_code: int, properties: tuple[str, ...]
    ) -> list[EntityMetadata]:
        """Return every entity whose numeric type code equals ``type_code``."""
        ...


class RecordStore(Protocol):
    def retrieve(
        self, type_name: str, record_id: UUID, fields: set[str]
    ) -> dict[str, Any]:
        """Return the requested fields of one record."""
        ...
