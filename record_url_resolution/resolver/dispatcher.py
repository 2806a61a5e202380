from typing import Optional
from uuid import UUID

import structlog

from record_url_resolution.catalog.protocols import RecordStore
from record_url_resolution.entity_types.entity_reference import EntityReference
from record_url_resolution.entity_types.output_slot import OutputSlot
from record_url_resolution.resolver.regarding import resolve_regarding_invoice
from record_url_resolution.resolver.resolution_configuration import (
    DEFAULT_CONFIGURATION,
    ResolutionConfiguration,
)
from record_url_resolution.resolver.resolution_result import ResolutionResult

log = structlog.get_logger(__name__)


def dispatch(
    store: RecordStore,
    type_name: Optional[str],
    record_id: UUID,
    cfg: ResolutionConfiguration = DEFAULT_CONFIGURATION,
) -> ResolutionResult:
    """Route a resolved reference into its output slot.

    The record id and type name are always emitted. An absent or
    unrecognized type name populates no slot at all; that is a normal
    outcome, not an error.
    """
    slots: dict[OutputSlot, EntityReference] = {}
    slot = cfg.slot_for(type_name)

    if slot is None:
        log.info("no output slot for type", type_name=type_name, record_id=str(record_id))
    else:
        slots[slot] = EntityReference(type_name=type_name, record_id=record_id)
        if slot is OutputSlot.EMAIL:
            slots[cfg.regarding_slot] = resolve_regarding_invoice(
                store, type_name, record_id, cfg
            )
        log.debug("dispatched", type_name=type_name, slots=[s.value for s in slots])

    return ResolutionResult(
        record_id=str(record_id),
        resolved_type_name=type_name,
        slots=slots,
    )
