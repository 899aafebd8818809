"""
In-memory override store.

Used for local development and tests. Records live in insertion-ordered
dicts keyed by ID; deletes of unknown IDs are no-ops.
"""

from datetime import datetime, timezone
from uuid import uuid4

from src.schemas.standards import (
    DistrictStandard,
    DistrictStandardCreate,
    SchoolOverride,
    SchoolOverrideCreate,
    StateOverride,
    StateOverrideCreate,
)


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(record) -> tuple:
    created = record.created_at or _EPOCH
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return (created, record.id)


class InMemoryOverrideStore:
    """Dict-backed OverrideStore."""

    def __init__(
        self,
        state_overrides: list[StateOverride] | None = None,
        district_standards: list[DistrictStandard] | None = None,
        school_overrides: list[SchoolOverride] | None = None,
    ) -> None:
        self._state: dict[str, StateOverride] = {r.id: r for r in state_overrides or []}
        self._district: dict[str, DistrictStandard] = {r.id: r for r in district_standards or []}
        self._school: dict[str, SchoolOverride] = {r.id: r for r in school_overrides or []}

    @staticmethod
    def _new_id() -> str:
        return uuid4().hex

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    async def query_state_overrides(self, state: str, subject: str) -> list[StateOverride]:
        rows = [r for r in self._state.values() if r.state == state and r.subject == subject]
        return sorted(rows, key=_sort_key)

    async def query_district_standards(
        self, district_id: str, subject: str, grade: int
    ) -> list[DistrictStandard]:
        rows = [
            r for r in self._district.values()
            if r.district_id == district_id and r.subject == subject and r.grade == grade
        ]
        return sorted(rows, key=_sort_key)

    async def query_school_overrides(self, school_id: str) -> list[SchoolOverride]:
        rows = [r for r in self._school.values() if r.school_id == school_id]
        return sorted(rows, key=_sort_key)

    async def list_district_standards(self, district_id: str) -> list[DistrictStandard]:
        rows = [r for r in self._district.values() if r.district_id == district_id]
        return sorted(rows, key=_sort_key)

    async def insert_state_override(self, draft: StateOverrideCreate) -> StateOverride:
        record = StateOverride(id=self._new_id(), created_at=self._now(), **draft.model_dump())
        self._state[record.id] = record
        return record

    async def insert_district_standard(self, draft: DistrictStandardCreate) -> DistrictStandard:
        record = DistrictStandard(id=self._new_id(), created_at=self._now(), **draft.model_dump())
        self._district[record.id] = record
        return record

    async def insert_school_override(self, draft: SchoolOverrideCreate) -> SchoolOverride:
        record = SchoolOverride(id=self._new_id(), created_at=self._now(), **draft.model_dump())
        self._school[record.id] = record
        return record

    async def delete_district_standard(self, record_id: str) -> None:
        self._district.pop(record_id, None)

    async def delete_school_override(self, record_id: str) -> None:
        self._school.pop(record_id, None)
