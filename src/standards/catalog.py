"""
Catalog Provider

Built-in national/state baseline standards, shipped with the service.
Pure and deterministic: no I/O and no error cases. Subjects without a
curated catalog get a three-entry generic fallback, so every
(subject, grade) pair resolves to at least one standard.

IDs are built by interpolating `{prefix}` (the framework value) and
`{grade}` into each entry's template.
"""

from dataclasses import dataclass

from src.schemas.base import DEFAULT_JURISDICTION, StandardFramework, StandardLayer, Subject
from src.schemas.standards import ResolvedStandard
from src.standards.frameworks import framework_for
from src.utils.grades import grade_label


@dataclass(frozen=True)
class CatalogEntry:
    """
    One baseline standard template.

    `framework` pins the entry to a fixed framework; None means the
    jurisdiction's framework for the subject applies.
    `source` replaces the framework display name where a family is
    cited under its own title.
    """
    template: str
    description: str
    framework: StandardFramework | None = None
    source: str | None = None


_F = StandardFramework

CATALOG: dict[Subject, tuple[CatalogEntry, ...]] = {
    Subject.MATH: (
        CatalogEntry("{prefix}.MATH.{grade}.OA.1", "Operations & Algebraic Thinking — Represent and solve problems involving addition, subtraction, multiplication, and division."),
        CatalogEntry("{prefix}.MATH.{grade}.NBT.1", "Number & Operations in Base Ten — Understand place value system and perform multi-digit arithmetic."),
        CatalogEntry("{prefix}.MATH.{grade}.NF.1", "Number & Operations — Fractions: Develop understanding of fractions as numbers and equivalent fractions."),
        CatalogEntry("{prefix}.MATH.{grade}.MD.1", "Measurement & Data — Solve problems involving measurement, data representation, and geometric measurement."),
        CatalogEntry("{prefix}.MATH.{grade}.G.1", "Geometry — Reason with shapes and their attributes; classify two-dimensional figures."),
        CatalogEntry("{prefix}.MATH.PRACTICE.MP1", "Make sense of problems and persevere in solving them."),
        CatalogEntry("{prefix}.MATH.PRACTICE.MP4", "Model with mathematics."),
        CatalogEntry("{prefix}.MATH.PRACTICE.MP6", "Attend to precision."),
    ),
    Subject.ELA: (
        CatalogEntry("{prefix}.ELA.RL.{grade}.1", "Read closely and cite textual evidence to support analysis of what the text says explicitly and by inference."),
        CatalogEntry("{prefix}.ELA.RL.{grade}.2", "Determine central ideas or themes of a text and analyze their development; summarize key details."),
        CatalogEntry("{prefix}.ELA.RL.{grade}.4", "Interpret words and phrases as they are used in a text, including figurative and connotative meanings."),
        CatalogEntry("{prefix}.ELA.W.{grade}.1", "Write arguments / opinion pieces to support claims with clear reasons and relevant evidence."),
        CatalogEntry("{prefix}.ELA.W.{grade}.4", "Produce clear and coherent writing appropriate to task, purpose, and audience."),
        CatalogEntry("{prefix}.ELA.SL.{grade}.1", "Prepare for and participate effectively in collaborative discussions."),
    ),
    Subject.SCIENCE: (
        CatalogEntry("{prefix}.SCI.{grade}.PS.1", "Physical Science — Matter and Its Interactions: Develop models to describe the atomic composition of simple molecules."),
        CatalogEntry("{prefix}.SCI.{grade}.LS.1", "Life Science — From Molecules to Organisms: Use evidence to support explanations of how organisms grow, develop, and reproduce."),
        CatalogEntry("{prefix}.SCI.{grade}.ESS.1", "Earth & Space Science — Earth's Place in the Universe: Develop and use models of the Earth-sun-moon system."),
        CatalogEntry("{prefix}.SCI.{grade}.ETS.1", "Engineering & Technology — Define criteria and constraints of a design problem and evaluate competing solutions."),
    ),
    Subject.SOCIAL_STUDIES: (
        CatalogEntry("C3.D2.His.{grade}.1", "History — Evaluate sources and use evidence to construct historical arguments.", _F.C3_FRAMEWORK),
        CatalogEntry("C3.D2.Geo.{grade}.1", "Geography — Create and use geographic representations to analyze spatial patterns.", _F.C3_FRAMEWORK),
        CatalogEntry("C3.D2.Civ.{grade}.1", "Civics — Analyze the origins, purposes, and impact of constitutions, laws, and key documents.", _F.C3_FRAMEWORK),
        CatalogEntry("C3.D4.{grade}.1", "Communicating Conclusions — Construct arguments using claims and evidence from multiple sources.", _F.C3_FRAMEWORK),
    ),
    Subject.PE: (
        CatalogEntry("SHAPE.{grade}.S1", "Motor Competence — Demonstrate competency in a variety of motor skills and movement patterns.", _F.SHAPE_AMERICA, "SHAPE America"),
        CatalogEntry("SHAPE.{grade}.S3", "Physical Activity — Demonstrate the knowledge and skills to achieve and maintain a health-enhancing level of physical activity.", _F.SHAPE_AMERICA, "SHAPE America"),
        CatalogEntry("SHAPE.{grade}.S5", "Value of Physical Activity — Recognize the value of physical activity for health, enjoyment, challenge, and social interaction.", _F.SHAPE_AMERICA, "SHAPE America"),
    ),
    Subject.HEALTH: (
        CatalogEntry("NHES.{grade}.1", "Comprehend concepts related to health promotion and disease prevention to enhance health.", _F.HEALTH_ED, "National Health Education Standards"),
        CatalogEntry("NHES.{grade}.5", "Demonstrate the ability to use decision-making skills to enhance health.", _F.HEALTH_ED, "National Health Education Standards"),
    ),
    Subject.COMPUTER_SCIENCE: (
        CatalogEntry("CSTA.{grade}.AP.1", "Algorithms & Programming — Design and iteratively develop programs that combine control structures.", _F.CSTA),
        CatalogEntry("CSTA.{grade}.DA.1", "Data & Analysis — Collect, create, and transform data to identify patterns and make predictions.", _F.CSTA),
        CatalogEntry("ISTE.{grade}.CC.1", "Digital Citizenship — Cultivate and manage digital identity and reputation with an awareness of permanence.", _F.ISTE, "ISTE Standards"),
    ),
}


def _fallback_entries(subject: str, grade: int) -> tuple[CatalogEntry, ...]:
    return (
        CatalogEntry("GEN.{subject}.{grade}.1", f"Aligned to {subject} {grade_label(grade)} State Standards"),
        CatalogEntry("21C.{grade}.CT", "21st Century Skills — Critical Thinking and Collaboration", _F.TWENTY_FIRST_CENTURY),
        CatalogEntry("SEL.{grade}.SM", "SEL Competency — Self-Management and Responsible Decision-Making", _F.SEL),
    )


class CatalogProvider:
    """Supplies the immutable baseline standard set for a (subject, grade, jurisdiction) key."""

    def base_standards(
        self,
        subject: str,
        grade: int,
        jurisdiction: str = DEFAULT_JURISDICTION,
    ) -> list[ResolvedStandard]:
        """
        Baseline standards for a subject and grade under a jurisdiction's framework.

        Every entry is tagged `national` and not overridden; the layer a
        caller merges it into does not change that tag.
        """
        key = Subject.parse(subject)
        entries = CATALOG[key] if key is not None else _fallback_entries(subject, grade)
        jurisdiction_framework = framework_for(jurisdiction, subject)

        standards: list[ResolvedStandard] = []
        for entry in entries:
            framework = entry.framework or jurisdiction_framework
            standard_id = entry.template.format(prefix=framework.value, grade=grade, subject=subject)
            standards.append(
                ResolvedStandard(
                    standard_id=standard_id,
                    framework=framework.value,
                    subject=subject,
                    grade=grade,
                    description=entry.description,
                    source=entry.source or framework.display_name,
                    resolved_from=StandardLayer.NATIONAL,
                    is_overridden=False,
                )
            )
        return standards
