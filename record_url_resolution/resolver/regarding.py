from uuid import UUID

from record_url_resolution.catalog.protocols import RecordStore
from record_url_resolution.entity_types.entity_reference import EntityReference
from record_url_resolution.resolver.errors import ValidationError
from record_url_resolution.resolver.resolution_configuration import (
    DEFAULT_CONFIGURATION,
    ResolutionConfiguration,
)


def resolve_regarding_invoice(
    store: RecordStore,
    email_type_name: str,
    email_id: UUID,
    cfg: ResolutionConfiguration = DEFAULT_CONFIGURATION,
) -> EntityReference:
    email = store.retrieve(email_type_name, email_id, {cfg.regarding_field})
    regarding = email.get(cfg.regarding_field)
    if (
        not isinstance(regarding, EntityReference)
        or regarding.type_name != cfg.regarding_type_name
    ):
        raise ValidationError(
            f"Email's regarding field is not set to {cfg.regarding_type_name}"
        )
    return regarding
