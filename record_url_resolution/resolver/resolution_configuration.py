from dataclasses import dataclass, field
from typing import Optional

from record_url_resolution.entity_types.output_slot import OutputSlot

DEFAULT_SLOT_TABLE: dict[str, OutputSlot] = {
    "quote": OutputSlot.QUOTE,
    "account": OutputSlot.ACCOUNT,
    "fsip_buildinglocation": OutputSlot.BUILDING_LOCATION,
    "salesorder": OutputSlot.WORK_ORDER,
    "fsip_maintenancecontract": OutputSlot.MAINTENANCE_CONTRACT,
    "new_project": OutputSlot.PROJECT,
    "new_servloc": OutputSlot.DEVICE,
    "serviceappointment": OutputSlot.SERVICE_ACTIVITY,
    "invoice": OutputSlot.INVOICE,
    "email": OutputSlot.EMAIL,
}


@dataclass(frozen=True)
class ResolutionConfiguration:
    slot_table: dict[str, OutputSlot] = field(
        default_factory=lambda: dict(DEFAULT_SLOT_TABLE)
    )
    regarding_field: str = "regardingobjectid"
    regarding_type_name: str = "invoice"
    regarding_slot: OutputSlot = OutputSlot.INVOICE

    def slot_for(self, type_name: Optional[str]) -> Optional[OutputSlot]:
        if not type_name:
            return None
        return self.slot_table.get(type_name.lower())


DEFAULT_CONFIGURATION = ResolutionConfiguration()

# Deployed workflows route devices into the maintenance contract output.
LEGACY_DEVICE_CONFIGURATION = ResolutionConfiguration(
    slot_table={**DEFAULT_SLOT_TABLE, "new_servloc": OutputSlot.MAINTENANCE_CONTRACT}
)
