import structlog

from record_url_resolution.catalog.protocols import MetadataCatalog, RecordStore
from record_url_resolution.resolver.dispatcher import dispatch
from record_url_resolution.resolver.errors import CatalogError
from record_url_resolution.resolver.resolution_configuration import (
    DEFAULT_CONFIGURATION,
    ResolutionConfiguration,
)
from record_url_resolution.resolver.resolution_result import ResolutionResult
from record_url_resolution.resolver.type_resolver import resolve_type_name
from record_url_resolution.resolver.url_parser import parse_url

log = structlog.get_logger(__name__)


def resolve(
    url: str,
    catalog: MetadataCatalog,
    store: RecordStore,
    cfg: ResolutionConfiguration = DEFAULT_CONFIGURATION,
) -> ResolutionResult:
    # 1) pull type code + record id out of the query string
    parsed = parse_url(url)

    try:
        # 2) type code -> type name via the metadata catalog
        type_name = resolve_type_name(catalog, parsed.type_code)

        # 3) route into an output slot, following the email's regarding link
        return dispatch(store, type_name, parsed.record_id, cfg)
    except CatalogError as exc:
        log.error("catalog call failed", url=url, error=str(exc))
        raise
