"""
Standards Data Model

ResolvedStandard is the unit the resolution engine returns. The three
record types below it are what the override store persists:

- StateOverride: replaces a standard (new ID + description) for a state
- DistrictStandard: purely additive custom standard for a district
- SchoolOverride: replaces only the description of a standard for a school
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from src.schemas.base import GradeLevel, NonEmptyStr, StandardLayer


class ResolvedStandard(BaseModel):
    """
    A standard after all layers have been merged.

    `id` always mirrors `standard_id`; it is kept for callers that read
    either field.
    """
    model_config = ConfigDict(frozen=True)

    standard_id: NonEmptyStr = Field(description="Stable identifier, unique within one result")
    framework: NonEmptyStr = Field(description="Adopting framework label, e.g. 'CCSS' or 'District'")
    subject: str = Field(description="Subject the standard was resolved for")
    grade: int = Field(description="Grade the standard was resolved for")
    description: NonEmptyStr = Field(description="Human-readable standard text")
    source: NonEmptyStr = Field(description="Display name of the origin")
    resolved_from: StandardLayer = Field(description="Layer that produced this entry")
    is_overridden: bool = Field(
        default=False,
        description="True if this entry replaced a lower-layer entry"
    )

    @computed_field
    @property
    def id(self) -> str:
        return self.standard_id

    def lesson_line(self) -> str:
        """Plain-text form handed to lesson generators."""
        return f"{self.standard_id} — {self.description}"


class StateOverride(BaseModel):
    """State-defined replacement of a baseline standard. Not editable by schools."""
    id: NonEmptyStr
    state: NonEmptyStr
    subject: NonEmptyStr
    replaces_standard_id: NonEmptyStr
    new_standard_id: NonEmptyStr
    description: NonEmptyStr
    editable: bool = False
    created_at: datetime | None = None


class DistrictStandard(BaseModel):
    """Custom standard a district appends to the resolved set."""
    id: NonEmptyStr
    district_id: NonEmptyStr
    subject: NonEmptyStr
    grade: GradeLevel
    description: NonEmptyStr
    editable: bool = True
    created_at: datetime | None = None


class SchoolOverride(BaseModel):
    """School-level rewrite of one standard's description."""
    id: NonEmptyStr
    school_id: NonEmptyStr
    overrides_standard_id: NonEmptyStr
    custom_description: NonEmptyStr
    editable: bool = True
    created_at: datetime | None = None


# =============================================================================
# CREATE PAYLOADS (validated before anything is written)
# =============================================================================

class StateOverrideCreate(BaseModel):
    state: NonEmptyStr
    subject: NonEmptyStr
    replaces_standard_id: NonEmptyStr
    new_standard_id: NonEmptyStr
    description: NonEmptyStr


class DistrictStandardCreate(BaseModel):
    district_id: NonEmptyStr
    subject: NonEmptyStr
    grade: GradeLevel
    description: NonEmptyStr

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "district_id": "d1",
                    "subject": "Math",
                    "grade": 4,
                    "description": "Local numeracy benchmark"
                }
            ]
        }
    }


class SchoolOverrideCreate(BaseModel):
    school_id: NonEmptyStr
    overrides_standard_id: NonEmptyStr
    custom_description: NonEmptyStr

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "school_id": "s1",
                    "overrides_standard_id": "CCSS.MATH.4.NBT.1",
                    "custom_description": "Simplified for our curriculum"
                }
            ]
        }
    }
