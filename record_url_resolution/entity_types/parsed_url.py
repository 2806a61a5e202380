from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ParsedUrl:
    raw_url: str
    type_code: int
    record_id: UUID
