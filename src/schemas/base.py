"""
Base types and constants used across all schemas.

This module defines the shared enums, annotated types and constants
that keep the catalog, the override store and the resolution engine
speaking the same vocabulary.
"""

from enum import Enum
from typing import Annotated

from pydantic import Field, StringConstraints


# =============================================================================
# CONSTANTS
# =============================================================================

# Jurisdiction code meaning "national baseline only"
DEFAULT_JURISDICTION = "DEFAULT"


# =============================================================================
# ENUMS
# =============================================================================

class StandardLayer(str, Enum):
    """Layer that ultimately produced a resolved standard."""
    NATIONAL = "national"
    STATE = "state"
    DISTRICT = "district"
    SCHOOL = "school"


class Subject(str, Enum):
    """
    Subjects with a hand-curated catalog.

    Any other subject string is still valid input; it resolves through
    the generic fallback set instead of a curated one.
    """
    MATH = "Math"
    ELA = "ELA"
    SCIENCE = "Science"
    SOCIAL_STUDIES = "Social Studies"
    PE = "PE"
    HEALTH = "Health"
    COMPUTER_SCIENCE = "Computer Science"

    @classmethod
    def parse(cls, raw: str) -> "Subject | None":
        """Case-sensitive lookup, honoring the ELA aliases."""
        if raw in SUBJECT_ALIASES:
            return SUBJECT_ALIASES[raw]
        try:
            return cls(raw)
        except ValueError:
            return None


SUBJECT_ALIASES: dict[str, Subject] = {
    "Reading": Subject.ELA,
    "Writing": Subject.ELA,
}

# Every subject the product offers; Art and Music use the fallback set
SUPPORTED_SUBJECTS: list[str] = [
    "Math", "ELA", "Reading", "Writing", "Science",
    "Social Studies", "PE", "Health", "Computer Science",
    "Art", "Music",
]


class StandardFramework(str, Enum):
    """Named standard families. The value doubles as the ID prefix."""
    CCSS = "CCSS"
    NGSS = "NGSS"
    TEKS = "TEKS"
    BEST = "B.E.S.T."
    CA_CCSS = "CA-CCSS"
    NY_NEXT_GEN = "NY-NextGen"
    IL_STANDARDS = "IL-Standards"
    VA_SOL = "VA-SOL"
    GA_EXCELLENCE = "GA-Excellence"
    SHAPE_AMERICA = "SHAPE-America"
    HEALTH_ED = "Health-Ed"
    CSTA = "CSTA"
    ISTE = "ISTE"
    IDEA = "IDEA"
    C3_FRAMEWORK = "C3-Framework"
    # Labels used only by the generic fallback set
    TWENTY_FIRST_CENTURY = "21st-Century"
    SEL = "SEL"

    @property
    def display_name(self) -> str:
        return FRAMEWORK_DISPLAY_NAMES[self]


FRAMEWORK_DISPLAY_NAMES: dict[StandardFramework, str] = {
    StandardFramework.CCSS: "Common Core (CCSS)",
    StandardFramework.NGSS: "Next Generation Science (NGSS)",
    StandardFramework.TEKS: "Texas TEKS",
    StandardFramework.BEST: "Florida B.E.S.T.",
    StandardFramework.CA_CCSS: "California CCSS",
    StandardFramework.NY_NEXT_GEN: "New York Next Gen",
    StandardFramework.IL_STANDARDS: "Illinois Standards",
    StandardFramework.VA_SOL: "Virginia SOL",
    StandardFramework.GA_EXCELLENCE: "Georgia Standards of Excellence",
    StandardFramework.SHAPE_AMERICA: "SHAPE America (PE)",
    StandardFramework.HEALTH_ED: "National Health Education",
    StandardFramework.CSTA: "CSTA Computer Science",
    StandardFramework.ISTE: "ISTE Digital Citizenship",
    StandardFramework.IDEA: "IDEA Special Education",
    StandardFramework.C3_FRAMEWORK: "C3 Social Studies Framework",
    StandardFramework.TWENTY_FIRST_CENTURY: "21st Century Learning",
    StandardFramework.SEL: "Social-Emotional Learning",
}


# =============================================================================
# ANNOTATED TYPES
# =============================================================================

# Non-empty string (whitespace-only counts as empty)
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Grade number: 0 = Pre-K, 1 = Kindergarten, 2 = 1st grade ... no upper bound
GradeLevel = Annotated[int, Field(ge=0)]
