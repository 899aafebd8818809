"""
Standards Admin API

Create/delete operations for district custom standards and school
overrides. Each call is one write against the override store.

Validation is limited to required fields being present and non-empty.
There is no check that an overridden standard ID exists:
that is settled at resolution time, where a dangling override is a no-op.
"""

import logging

from pydantic import BaseModel, ValidationError

from src.schemas.standards import (
    DistrictStandard,
    DistrictStandardCreate,
    SchoolOverride,
    SchoolOverrideCreate,
)
from src.standards.errors import StandardsValidationError
from src.store.base import OverrideStore

logger = logging.getLogger(__name__)


def _validated(operation: str, model: type[BaseModel], **fields) -> BaseModel:
    try:
        return model(**fields)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise StandardsValidationError(operation, errors) from e


def _require_id(operation: str, record_id: str | None) -> str:
    if record_id is None or not str(record_id).strip():
        raise StandardsValidationError(operation, ["id: must not be empty"])
    return str(record_id).strip()


class StandardsAdmin:
    """Write surface over the override store."""

    def __init__(self, store: OverrideStore) -> None:
        self._store = store

    async def add_district_standard(
        self, district_id: str, subject: str, grade: int, description: str
    ) -> DistrictStandard:
        """
        Append a custom standard for a district.

        Raises:
            StandardsValidationError: A required field is empty or grade < 0
            StoreUnavailableError: The store rejected the write
        """
        draft = _validated(
            "add_district_standard",
            DistrictStandardCreate,
            district_id=district_id,
            subject=subject,
            grade=grade,
            description=description,
        )
        record = await self._store.insert_district_standard(draft)
        logger.info(f"Added district standard {record.id} for {record.district_id} ({record.subject}, grade {record.grade})")
        return record

    async def add_school_override(
        self, school_id: str, standard_id: str, custom_description: str
    ) -> SchoolOverride:
        """
        Override the description of a standard for one school.

        Raises:
            StandardsValidationError: A required field is empty
            StoreUnavailableError: The store rejected the write
        """
        draft = _validated(
            "add_school_override",
            SchoolOverrideCreate,
            school_id=school_id,
            overrides_standard_id=standard_id,
            custom_description=custom_description,
        )
        record = await self._store.insert_school_override(draft)
        logger.info(f"Added school override {record.id} for {record.school_id} on {record.overrides_standard_id}")
        return record

    async def delete_district_standard(self, record_id: str) -> None:
        record_id = _require_id("delete_district_standard", record_id)
        await self._store.delete_district_standard(record_id)
        logger.info(f"Deleted district standard {record_id}")

    async def delete_school_override(self, record_id: str) -> None:
        record_id = _require_id("delete_school_override", record_id)
        await self._store.delete_school_override(record_id)
        logger.info(f"Deleted school override {record_id}")

    async def list_district_standards(self, district_id: str) -> list[DistrictStandard]:
        district_id = _require_id("list_district_standards", district_id)
        return await self._store.list_district_standards(district_id)

    async def list_school_overrides(self, school_id: str) -> list[SchoolOverride]:
        school_id = _require_id("list_school_overrides", school_id)
        return await self._store.query_school_overrides(school_id)
