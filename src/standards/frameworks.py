"""
Framework Mapper

Maps a jurisdiction code + subject to the standard framework that
jurisdiction has adopted. The framework decides the ID prefix and the
source display name the catalog stamps on baseline standards.

Rules:
- Unknown jurisdiction codes resolve through the DEFAULT record
- Subjects a jurisdiction does not map fall back to CCSS
- Lookup is by the exact subject string, so the ELA aliases (Reading,
  Writing) are unmapped here even though they share the ELA catalog
"""

from dataclasses import dataclass, field

from src.schemas.base import DEFAULT_JURISDICTION, StandardFramework, Subject

FALLBACK_FRAMEWORK = StandardFramework.CCSS


@dataclass(frozen=True)
class JurisdictionMapping:
    """Frameworks a single jurisdiction has adopted."""
    code: str
    name: str
    default_frameworks: tuple[StandardFramework, ...]
    subject_mappings: dict[str, StandardFramework] = field(default_factory=dict)


_F = StandardFramework

JURISDICTIONS: dict[str, JurisdictionMapping] = {
    mapping.code: mapping
    for mapping in (
        JurisdictionMapping(
            code=DEFAULT_JURISDICTION,
            name="National Default",
            default_frameworks=(_F.CCSS, _F.NGSS, _F.C3_FRAMEWORK, _F.SHAPE_AMERICA,
                                _F.HEALTH_ED, _F.CSTA, _F.ISTE, _F.IDEA),
            subject_mappings={
                Subject.MATH.value: _F.CCSS,
                Subject.ELA.value: _F.CCSS,
                Subject.SCIENCE.value: _F.NGSS,
                Subject.SOCIAL_STUDIES.value: _F.C3_FRAMEWORK,
                Subject.PE.value: _F.SHAPE_AMERICA,
                Subject.HEALTH.value: _F.HEALTH_ED,
                Subject.COMPUTER_SCIENCE.value: _F.CSTA,
                "Digital Citizenship": _F.ISTE,
            },
        ),
        JurisdictionMapping(
            code="TX",
            name="Texas",
            default_frameworks=(_F.TEKS,),
            subject_mappings={
                Subject.MATH.value: _F.TEKS,
                Subject.ELA.value: _F.TEKS,
                Subject.SCIENCE.value: _F.TEKS,
                Subject.SOCIAL_STUDIES.value: _F.TEKS,
            },
        ),
        JurisdictionMapping(
            code="FL",
            name="Florida",
            default_frameworks=(_F.BEST,),
            subject_mappings={Subject.MATH.value: _F.BEST, Subject.ELA.value: _F.BEST, Subject.SCIENCE.value: _F.NGSS},
        ),
        JurisdictionMapping(
            code="CA",
            name="California",
            default_frameworks=(_F.CA_CCSS, _F.NGSS),
            subject_mappings={Subject.MATH.value: _F.CA_CCSS, Subject.ELA.value: _F.CA_CCSS, Subject.SCIENCE.value: _F.NGSS},
        ),
        JurisdictionMapping(
            code="NY",
            name="New York",
            default_frameworks=(_F.NY_NEXT_GEN, _F.NGSS),
            subject_mappings={Subject.MATH.value: _F.NY_NEXT_GEN, Subject.ELA.value: _F.NY_NEXT_GEN, Subject.SCIENCE.value: _F.NGSS},
        ),
        JurisdictionMapping(
            code="IL",
            name="Illinois",
            default_frameworks=(_F.IL_STANDARDS, _F.NGSS),
            subject_mappings={Subject.MATH.value: _F.IL_STANDARDS, Subject.ELA.value: _F.IL_STANDARDS, Subject.SCIENCE.value: _F.NGSS},
        ),
        JurisdictionMapping(
            code="VA",
            name="Virginia",
            default_frameworks=(_F.VA_SOL,),
            subject_mappings={Subject.MATH.value: _F.VA_SOL, Subject.ELA.value: _F.VA_SOL, Subject.SCIENCE.value: _F.VA_SOL},
        ),
        JurisdictionMapping(
            code="GA",
            name="Georgia",
            default_frameworks=(_F.GA_EXCELLENCE, _F.NGSS),
            subject_mappings={Subject.MATH.value: _F.GA_EXCELLENCE, Subject.ELA.value: _F.GA_EXCELLENCE, Subject.SCIENCE.value: _F.NGSS},
        ),
    )
}


def mapping_for(jurisdiction: str) -> JurisdictionMapping:
    """Jurisdiction record, or the DEFAULT record for unknown codes."""
    return JURISDICTIONS.get(jurisdiction, JURISDICTIONS[DEFAULT_JURISDICTION])


def framework_for(jurisdiction: str, subject: str | Subject) -> StandardFramework:
    """
    Framework a jurisdiction uses for a subject.

    Args:
        jurisdiction: Jurisdiction code, e.g. "TX" or DEFAULT_JURISDICTION
        subject: Raw subject string or a Subject member

    Returns:
        The adopted framework, CCSS when nothing more specific applies
    """
    key = subject.value if isinstance(subject, Subject) else subject
    return mapping_for(jurisdiction).subject_mappings.get(key, FALLBACK_FRAMEWORK)


def list_jurisdictions() -> list[JurisdictionMapping]:
    """All known jurisdictions, DEFAULT first."""
    return list(JURISDICTIONS.values())
