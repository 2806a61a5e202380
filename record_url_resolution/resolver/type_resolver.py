from typing import Optional

import structlog

from record_url_resolution.catalog.protocols import MetadataCatalog

log = structlog.get_logger(__name__)


def resolve_type_name(catalog: MetadataCatalog, type_code: int) -> Optional[str]:
    """Translate a numeric type code into its entity type name.

    Zero or several matching metadata rows both mean "unknown type" and
    come back as None rather than an error.
    """
    matches = catalog.query_entity_metadata(type_code, properties=("type_name",))
    if len(matches) == 1:
        return matches[0].type_name
    log.debug("type code not resolved", type_code=type_code, matches=len(matches))
    return None
