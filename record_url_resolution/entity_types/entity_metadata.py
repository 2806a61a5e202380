from dataclasses import dataclass


@dataclass(frozen=True)
class EntityMetadata:
    type_code: int
    type_name: str
