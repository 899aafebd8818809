"""
Shared fixtures for the standards test suite.

Stores are seeded synchronously through the InMemoryOverrideStore
constructor so no fixture needs an event loop.
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.schemas.standards import DistrictStandard, SchoolOverride, StateOverride
from src.standards.admin import StandardsAdmin
from src.standards.engine import StandardsResolutionEngine
from src.store.memory import InMemoryOverrideStore

T0 = datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic created_at values for ordering assertions."""
    return T0 + timedelta(minutes=minutes)


@pytest.fixture
def ca_state_override():
    return StateOverride(
        id="so-1",
        state="CA",
        subject="Math",
        replaces_standard_id="CCSS.MATH.4.OA.1",
        new_standard_id="CA.MATH.4.OA.1",
        description="California: represent and solve multi-step word problems.",
        created_at=at(0),
    )


@pytest.fixture
def d1_math_standard():
    return DistrictStandard(
        id="ds-1",
        district_id="d1",
        subject="Math",
        grade=4,
        description="Local numeracy benchmark",
        created_at=at(1),
    )


@pytest.fixture
def s1_school_override():
    return SchoolOverride(
        id="sch-1",
        school_id="s1",
        overrides_standard_id="CCSS.MATH.4.NBT.1",
        custom_description="Simplified for our curriculum",
        created_at=at(2),
    )


@pytest.fixture
def empty_store():
    return InMemoryOverrideStore()


@pytest.fixture
def seeded_store(ca_state_override, d1_math_standard, s1_school_override):
    return InMemoryOverrideStore(
        state_overrides=[ca_state_override],
        district_standards=[d1_math_standard],
        school_overrides=[s1_school_override],
    )


@pytest.fixture
def engine(seeded_store):
    return StandardsResolutionEngine(seeded_store, read_timeout=1.0)


@pytest.fixture
def admin(empty_store):
    return StandardsAdmin(empty_store)
