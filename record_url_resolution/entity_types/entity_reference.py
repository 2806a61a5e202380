from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class EntityReference:
    type_name: str
    record_id: UUID

    def to_dict(self) -> dict[str, str]:
        return {"type_name": self.type_name, "record_id": str(self.record_id)}
