"""
Standard-level skill analysis for intervention planning.

Connects curriculum standards to the knowledge graph: the standard's
description and skills are keyword-mapped onto learning components, whose
prerequisites, next skills and progression tell the teacher where to start
remediation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from learning_commons.curriculum.standards import SAMPLE_STANDARDS, MathStandard, StandardsCatalog
from learning_commons.graph.models import LearningComponent, LearningProgression, MathSkillMapping
from learning_commons.graph.progression import ProgressionBuilder
from learning_commons.graph.resolver import PrerequisiteResolver
from learning_commons.graph.skill_mapper import SkillMapper

# Standard domain code -> graph clusters that cover it
DOMAIN_CLUSTERS = {
    "NBT": ("Place Value", "Addition", "Subtraction", "Multiplication"),
    "NF": ("Fractions",),
    "OA": ("Addition", "Subtraction", "Multiplication", "Division"),
}


@dataclass
class StandardSkillAnalysis:
    standard: MathStandard
    learning_components: list[LearningComponent] = field(default_factory=list)
    prerequisites: list[LearningComponent] = field(default_factory=list)
    next_skills: list[LearningComponent] = field(default_factory=list)
    related_components: list[LearningComponent] = field(default_factory=list)
    remediation_components: list[LearningComponent] = field(default_factory=list)
    progression: Optional[LearningProgression] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "standard": self.standard.to_dict(),
            "learningComponents": [c.to_dict() for c in self.learning_components],
            "prerequisites": [c.to_dict() for c in self.prerequisites],
            "nextSkills": [c.to_dict() for c in self.next_skills],
            "relatedComponents": [c.to_dict() for c in self.related_components],
            "remediationComponents": [c.to_dict() for c in self.remediation_components],
            "progression": self.progression.to_dict() if self.progression else None,
        }


class SkillAnalysisService:
    """Skill analysis lookup: standard code in, graph neighbourhood out."""

    def __init__(
        self,
        resolver: PrerequisiteResolver,
        catalog: Optional[StandardsCatalog] = None,
        mapper: Optional[SkillMapper] = None,
        progressions: Optional[ProgressionBuilder] = None,
        progression_depth: int = 5,
    ):
        self.resolver = resolver
        self.catalog = catalog or StandardsCatalog(SAMPLE_STANDARDS)
        self.mapper = mapper or SkillMapper(resolver)
        self.progressions = progressions or ProgressionBuilder(resolver)
        self.progression_depth = progression_depth

    def map_standard_to_components(self, standard_code: str) -> Optional[MathSkillMapping]:
        standard = self.catalog.get_standard(standard_code)
        if standard is None:
            return None
        return self.mapper.map_skill_to_components(standard.search_query, str(standard.grade))

    def get_standard_progression(self, standard_code: str) -> Optional[LearningProgression]:
        """Progression anchored at the best-matching component of the standard."""
        mapping = self.map_standard_to_components(standard_code)
        if mapping is None or not mapping.learning_components:
            return None
        primary = mapping.learning_components[0]
        return self.progressions.build_progression(primary.uuid, self.progression_depth)

    def identify_skill_gaps(self, standard_code: str) -> list[LearningComponent]:
        mapping = self.map_standard_to_components(standard_code)
        return mapping.prerequisites if mapping else []

    def get_related_components_by_cluster(self, standard_code: str) -> list[LearningComponent]:
        standard = self.catalog.get_standard(standard_code)
        if standard is None:
            return []

        components = []
        for cluster in DOMAIN_CLUSTERS.get(standard.domain_code, ()):
            components.extend(self.resolver.get_components_by_cluster(cluster))
        return components

    def find_remediation_components(self, standard_code: str) -> list[LearningComponent]:
        """Components whose text matches one of the standard's common errors."""
        standard = self.catalog.get_standard(standard_code)
        if standard is None:
            return []

        seen: set[str] = set()
        results = []
        for error in standard.common_errors:
            for component in self.resolver.search_components(error):
                if component.uuid not in seen:
                    seen.add(component.uuid)
                    results.append(component)
        return results

    def analyze_standard_skills(self, standard_code: str) -> Optional[StandardSkillAnalysis]:
        """
        Comprehensive analysis of one standard.

        Returns:
            StandardSkillAnalysis, or None if the code is not in the catalog
        """
        standard = self.catalog.get_standard(standard_code)
        if standard is None:
            logger.debug(f"Standard not found: {standard_code}")
            return None

        mapping = self.map_standard_to_components(standard_code)

        return StandardSkillAnalysis(
            standard=standard,
            learning_components=mapping.learning_components if mapping else [],
            prerequisites=mapping.prerequisites if mapping else [],
            next_skills=mapping.next_skills if mapping else [],
            related_components=self.get_related_components_by_cluster(standard_code),
            remediation_components=self.find_remediation_components(standard_code),
            progression=self.get_standard_progression(standard_code),
        )
