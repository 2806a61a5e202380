from typing import Optional
from uuid import UUID

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from record_url_resolution.catalog.in_memory import InMemoryCatalog
from record_url_resolution.config.logging import configure_logging
from record_url_resolution.config.settings import Settings
from record_url_resolution.entity_types.entity_reference import EntityReference
from record_url_resolution.resolver.errors import (
    CatalogError,
    MalformedUrlError,
    ValidationError,
)
from record_url_resolution.resolver.resolver import resolve

app = FastAPI(title="Record‑URL Resolution API", version="0.1.0")

log = structlog.get_logger(__name__)

# --- In‑memory singleton catalog -----------------------------------------------
SETTINGS = Settings()
configure_logging(verbose=SETTINGS.verbose, log_json=SETTINGS.log_json)
CONFIG = SETTINGS.build_configuration()
CATALOG = InMemoryCatalog()

# --- Pydantic DTOs -------------------------------------------------------------
class ResolveRequest(BaseModel):
    url: str = Field(..., description="Dynamic record url")

class ReferenceDTO(BaseModel):
    type_name: str
    record_id: UUID

class ResolveResponse(BaseModel):
    record_id: str
    resolved_type_name: Optional[str] = None
    slots: dict[str, ReferenceDTO]

class MetadataDTO(BaseModel):
    type_code: int
    type_name: str = Field(..., min_length=1)

class RecordDTO(BaseModel):
    type_name: str = Field(..., min_length=1)
    record_id: UUID
    regarding: Optional[ReferenceDTO] = None

# --- Routes --------------------------------------------------------------------
@app.post("/resolve", response_model=ResolveResponse)
def resolve_url(dto: ResolveRequest):
    try:
        result = resolve(dto.url, CATALOG, CATALOG, CONFIG)
    except MalformedUrlError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except CatalogError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return result.to_dict()


@app.post("/metadata", response_model=MetadataDTO)
def register_metadata(dto: MetadataDTO):
    row = CATALOG.register_entity(dto.type_code, dto.type_name)
    log.debug("registered entity metadata", type_code=row.type_code, type_name=row.type_name)
    return {"type_code": row.type_code, "type_name": row.type_name}


@app.post("/records", response_model=RecordDTO)
def put_record(dto: RecordDTO):
    regarding = None
    if dto.regarding is not None:
        regarding = EntityReference(dto.regarding.type_name, dto.regarding.record_id)
    CATALOG.put_record(dto.type_name, dto.record_id, regardingobjectid=regarding)
    return dto


@app.get("/slots")
def slots():
    return {name: slot.value for name, slot in CONFIG.slot_table.items()}


@app.get("/stats")
def stats():
    return {
        "metadata": len(CATALOG.metadata),
        "records": len(CATALOG.records),
    }

# To run:
#   uvicorn record_url_resolution.app:app --reload
