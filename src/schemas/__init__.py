"""
Standards Schemas Package

Pydantic models shared by the catalog, the override store, the
resolution engine and the HTTP layer.
"""

from src.schemas.base import (
    DEFAULT_JURISDICTION,
    SUPPORTED_SUBJECTS,
    StandardFramework,
    StandardLayer,
    Subject,
)
from src.schemas.standards import (
    DistrictStandard,
    DistrictStandardCreate,
    ResolvedStandard,
    SchoolOverride,
    SchoolOverrideCreate,
    StateOverride,
    StateOverrideCreate,
)

__all__ = [
    "DEFAULT_JURISDICTION",
    "SUPPORTED_SUBJECTS",
    "StandardFramework",
    "StandardLayer",
    "Subject",
    "ResolvedStandard",
    "StateOverride",
    "StateOverrideCreate",
    "DistrictStandard",
    "DistrictStandardCreate",
    "SchoolOverride",
    "SchoolOverrideCreate",
]
