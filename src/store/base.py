"""
Override Store Contract

The resolution engine and the admin API talk to persisted overrides only
through this protocol. Implementations filter by equality on the scope
fields and return results ordered by (created_at, id).
"""

from typing import Protocol

from src.schemas.standards import (
    DistrictStandard,
    DistrictStandardCreate,
    SchoolOverride,
    SchoolOverrideCreate,
    StateOverride,
    StateOverrideCreate,
)


class OverrideStore(Protocol):
    """Async document store for state overrides, district standards and school overrides."""

    # Reads used by resolution
    async def query_state_overrides(self, state: str, subject: str) -> list[StateOverride]: ...

    async def query_district_standards(
        self, district_id: str, subject: str, grade: int
    ) -> list[DistrictStandard]: ...

    async def query_school_overrides(self, school_id: str) -> list[SchoolOverride]: ...

    # Listing for management screens
    async def list_district_standards(self, district_id: str) -> list[DistrictStandard]: ...

    # Writes; IDs are generated by the store
    async def insert_state_override(self, draft: StateOverrideCreate) -> StateOverride: ...

    async def insert_district_standard(self, draft: DistrictStandardCreate) -> DistrictStandard: ...

    async def insert_school_override(self, draft: SchoolOverrideCreate) -> SchoolOverride: ...

    async def delete_district_standard(self, record_id: str) -> None: ...

    async def delete_school_override(self, record_id: str) -> None: ...
