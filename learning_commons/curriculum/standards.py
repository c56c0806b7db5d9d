"""
Math intervention standards catalog.

Standards are the coarse curriculum units teachers plan against. The full
scope-and-sequence tables live in the planning app; this module holds the
record type, a lookup catalog and a small grade 3-4 sample used by default.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class CRATools:
    """Concrete-Representational-Abstract manipulatives and models."""
    concrete: tuple[str, ...] = ()
    representational: tuple[str, ...] = ()
    abstract: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "concrete": list(self.concrete),
            "representational": list(self.representational),
            "abstract": list(self.abstract),
        }


@dataclass(frozen=True)
class MathStandard:
    standard: str  # e.g. 3.NBT.2
    description: str
    grade: int
    domain_name: str
    skills: tuple[str, ...] = ()
    prerequisite_skills: tuple[str, ...] = ()
    common_errors: tuple[str, ...] = ()
    cra_tools: CRATools = field(default_factory=CRATools)

    @property
    def domain_code(self) -> str:
        """Domain segment of the code: "NBT" for "3.NBT.2"."""
        parts = self.standard.split(".")
        return parts[1] if len(parts) > 1 else ""

    @property
    def search_query(self) -> str:
        return f"{self.description} {' '.join(self.skills)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "standard": self.standard,
            "description": self.description,
            "grade": self.grade,
            "domainName": self.domain_name,
            "skills": list(self.skills),
            "prerequisite_skills": list(self.prerequisite_skills),
            "common_errors": list(self.common_errors),
            "cra_tools": self.cra_tools.to_dict(),
        }


class StandardsCatalog:
    """Lookup of standards by code and grade."""

    def __init__(self, standards: Iterable[MathStandard]):
        self._standards: dict[str, MathStandard] = {s.standard: s for s in standards}

    def __len__(self) -> int:
        return len(self._standards)

    def get_standard(self, code: str) -> Optional[MathStandard]:
        return self._standards.get(code)

    def get_standards_for_grade(self, grade: int) -> list[MathStandard]:
        return [s for s in self._standards.values() if s.grade == grade]

    def standard_label(self, code: str) -> str:
        standard = self.get_standard(code)
        return f"{code}: {standard.description}" if standard else code


NBT_NAME = "Number & Operations in Base Ten"
NF_NAME = "Number & Operations-Fractions"

SAMPLE_STANDARDS: tuple[MathStandard, ...] = (
    MathStandard(
        standard="3.NBT.1",
        description="Round whole numbers to nearest 10 or 100",
        grade=3,
        domain_name=NBT_NAME,
        skills=("Place value understanding", "Number line placement", "Rounding rules"),
        prerequisite_skills=("Place value to 1000", "Number comparison"),
        common_errors=("Rounding up when should round down", "Not identifying rounding digit"),
        cra_tools=CRATools(
            concrete=("Number line floor mat", "Base-10 blocks"),
            representational=("Open number lines", "Rounding charts"),
            abstract=("Rounding rules", "Mental math"),
        ),
    ),
    MathStandard(
        standard="3.NBT.2",
        description="Add/subtract within 1000 using strategies and algorithms",
        grade=3,
        domain_name=NBT_NAME,
        skills=("Regrouping in addition", "Regrouping in subtraction", "Multiple strategies"),
        prerequisite_skills=("Place value", "Basic addition/subtraction facts"),
        common_errors=(
            "Forgetting to regroup",
            "Regrouping errors",
            "Subtracting smaller from larger regardless of position",
        ),
        cra_tools=CRATools(
            concrete=("Base-10 blocks", "Place value mats"),
            representational=("Place value charts", "Expanded form"),
            abstract=("Standard algorithm",),
        ),
    ),
    MathStandard(
        standard="3.NF.1",
        description="Understand fractions as parts of a whole",
        grade=3,
        domain_name=NF_NAME,
        skills=("Unit fractions", "Numerator/denominator meaning", "Fraction notation"),
        prerequisite_skills=("Equal parts", "Part-whole relationship"),
        common_errors=("Confusing numerator and denominator", "Not making equal parts"),
        cra_tools=CRATools(
            concrete=("Fraction tiles", "Fraction circles", "Pattern blocks"),
            representational=("Area models", "Number lines"),
            abstract=("Fraction notation",),
        ),
    ),
    MathStandard(
        standard="4.NBT.5",
        description="Multiply up to 4-digit by 1-digit, and 2-digit by 2-digit",
        grade=4,
        domain_name=NBT_NAME,
        skills=("Partial products", "Area model", "Standard algorithm"),
        prerequisite_skills=("Multiplication facts", "Place value"),
        common_errors=("Place value errors in partial products", "Forgetting to add partial products"),
        cra_tools=CRATools(
            concrete=("Base-10 blocks", "Arrays"),
            representational=("Area model", "Partial products"),
            abstract=("Standard algorithm",),
        ),
    ),
)
