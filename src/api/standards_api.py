# src/api/standards_api.py
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.schemas.base import SUPPORTED_SUBJECTS, StandardLayer
from src.standards.admin import StandardsAdmin
from src.standards.engine import StandardsResolutionEngine, filter_standards
from src.standards.errors import StandardsValidationError, StoreUnavailableError
from src.standards.frameworks import list_jurisdictions
from src.store import OverrideStore, build_override_store

router = APIRouter(prefix="/api/standards")


@lru_cache
def get_store() -> OverrideStore:
    return build_override_store()


def get_engine(store: OverrideStore = Depends(get_store)) -> StandardsResolutionEngine:
    return StandardsResolutionEngine(store)


def get_admin(store: OverrideStore = Depends(get_store)) -> StandardsAdmin:
    return StandardsAdmin(store)


class DistrictStandardBody(BaseModel):
    district_id: str
    subject: str
    grade: int
    description: str


class SchoolOverrideBody(BaseModel):
    school_id: str
    standard_id: str
    custom_description: str


@router.get("/resolve")
async def resolve(
    jurisdiction: str,
    subject: str,
    grade: int = Query(ge=0),
    district_id: str | None = None,
    school_id: str | None = None,
    search: str | None = None,
    resolved_from: StandardLayer | None = None,
    engine: StandardsResolutionEngine = Depends(get_engine),
):
    standards = await engine.resolve_standards(jurisdiction, subject, grade, district_id, school_id)
    standards = filter_standards(standards, search=search, resolved_from=resolved_from)
    return {"standards": [s.model_dump(mode="json") for s in standards]}


@router.get("/lesson")
async def lesson(
    jurisdiction: str,
    subject: str,
    grade: int = Query(ge=0),
    district_id: str | None = None,
    school_id: str | None = None,
    engine: StandardsResolutionEngine = Depends(get_engine),
):
    lines = await engine.standards_for_lesson(subject, grade, jurisdiction, district_id, school_id)
    return {"standards": lines}


@router.get("/subjects")
def subjects():
    return {"subjects": SUPPORTED_SUBJECTS}


@router.get("/jurisdictions")
def jurisdictions():
    return {
        "jurisdictions": [
            {
                "code": j.code,
                "name": j.name,
                "frameworks": [f.value for f in j.default_frameworks],
            }
            for j in list_jurisdictions()
        ]
    }


@router.post("/districts", status_code=201)
async def add_district_standard(body: DistrictStandardBody, admin: StandardsAdmin = Depends(get_admin)):
    try:
        record = await admin.add_district_standard(body.district_id, body.subject, body.grade, body.description)
    except StandardsValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return record.model_dump(mode="json")


@router.get("/districts/{district_id}")
async def list_district_standards(district_id: str, admin: StandardsAdmin = Depends(get_admin)):
    try:
        records = await admin.list_district_standards(district_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"standards": [r.model_dump(mode="json") for r in records]}


@router.delete("/districts/standards/{record_id}")
async def delete_district_standard(record_id: str, admin: StandardsAdmin = Depends(get_admin)):
    try:
        await admin.delete_district_standard(record_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"ok": True}


@router.post("/schools", status_code=201)
async def add_school_override(body: SchoolOverrideBody, admin: StandardsAdmin = Depends(get_admin)):
    try:
        record = await admin.add_school_override(body.school_id, body.standard_id, body.custom_description)
    except StandardsValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return record.model_dump(mode="json")


@router.get("/schools/{school_id}")
async def list_school_overrides(school_id: str, admin: StandardsAdmin = Depends(get_admin)):
    try:
        records = await admin.list_school_overrides(school_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"overrides": [r.model_dump(mode="json") for r in records]}


@router.delete("/schools/overrides/{record_id}")
async def delete_school_override(record_id: str, admin: StandardsAdmin = Depends(get_admin)):
    try:
        await admin.delete_school_override(record_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"ok": True}
