import re
from typing import Optional
from urllib.parse import unquote, urlsplit
from uuid import UUID

import structlog

from record_url_resolution.entity_types.parsed_url import ParsedUrl
from record_url_resolution.resolver.errors import MalformedUrlError

log = structlog.get_logger(__name__)

TYPE_CODE_PARAM = "etc"
RECORD_ID_PARAM = "id"

_TYPE_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")

# type codes are stored as 32-bit signed integers
_TYPE_CODE_MIN = -(2**31)
_TYPE_CODE_MAX = 2**31 - 1


def _to_type_code(value: str) -> int:
    value = value.strip()
    if not _TYPE_CODE_PATTERN.fullmatch(value):
        raise ValueError(f"type code is not a base-10 integer: {value!r}")
    type_code = int(value, 10)
    if not _TYPE_CODE_MIN <= type_code <= _TYPE_CODE_MAX:
        raise ValueError(f"type code out of range: {value!r}")
    return type_code


def parse_url(url: str) -> ParsedUrl:
    """Pull the entity type code and record id out of a dynamic record url.

    The query is scanned token by token. The first ``etc`` and the first
    ``id`` win; repeats of a key that is already assigned are skipped
    without being looked at, and the scan stops once both are assigned.
    """
    if not isinstance(url, str):
        raise MalformedUrlError(url)

    type_code: Optional[int] = None
    record_id: Optional[UUID] = None
    try:
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise ValueError("url is not absolute")

        for token in parts.query.split("&"):
            name, *values = token.split("=")
            if name == TYPE_CODE_PARAM and type_code is None:
                type_code = _to_type_code(unquote(values[0]))
            elif name == RECORD_ID_PARAM and record_id is None:
                record_id = UUID(unquote(values[0]).strip())
            if type_code is not None and record_id is not None:
                break
    except (ValueError, IndexError) as exc:
        raise MalformedUrlError(url) from exc

    # one key without the other can't be resolved to a record
    if type_code is None or record_id is None:
        raise MalformedUrlError(url)

    log.debug("parsed record url", type_code=type_code, record_id=str(record_id))
    return ParsedUrl(raw_url=url, type_code=type_code, record_id=record_id)
