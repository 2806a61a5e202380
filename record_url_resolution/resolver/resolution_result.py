from dataclasses import dataclass, field
from typing import Any, Optional

from record_url_resolution.entity_types.entity_reference import EntityReference
from record_url_resolution.entity_types.output_slot import OutputSlot


@dataclass(frozen=True)
class ResolutionResult:
    record_id: str                                  # always emitted
    resolved_type_name: Optional[str]               # None when the type code is unknown
    slots: dict[OutputSlot, EntityReference] = field(default_factory=dict)

    def slot(self, slot: OutputSlot) -> Optional[EntityReference]:
        return self.slots.get(slot)

    def populated_slots(self) -> list[OutputSlot]:
        return [slot for slot in OutputSlot if slot in self.slots]

    def to_dict(self) -> dict[str, Any]:
        return {
            "record_id": self.record_id,
            "resolved_type_name": self.resolved_type_name,
            "slots": {
                slot.value: self.slots[slot].to_dict()
                for slot in self.populated_slots()
            },
        }
