"""
Keyword mapping from curriculum skill descriptions to learning components.

Plain token overlap, not semantic search: each whitespace token of the
description that appears inside a component's label, description, domain or
cluster adds one point.
"""
from __future__ import annotations

from typing import Optional

from loguru import logger

from learning_commons.graph.models import LearningComponent, MathSkillMapping
from learning_commons.graph.resolver import PrerequisiteResolver


def keyword_score(keywords: list[str], component: LearningComponent) -> int:
    text = component.search_text
    return sum(1 for keyword in keywords if keyword in text)


def _union(groups: list[list[LearningComponent]]) -> list[LearningComponent]:
    seen: set[str] = set()
    merged = []
    for group in groups:
        for component in group:
            if component.uuid not in seen:
                seen.add(component.uuid)
                merged.append(component)
    return merged


class SkillMapper:
    """Map free-text skills onto the graph plus their immediate neighbourhood."""

    def __init__(self, resolver: PrerequisiteResolver, top_k: int = 3):
        self.resolver = resolver
        self.top_k = top_k

    def map_skill_to_components(
        self,
        skill_description: str,
        grade_level: Optional[str] = None,
    ) -> MathSkillMapping:
        keywords = skill_description.lower().split()

        candidates = (
            self.resolver.get_components_by_grade(grade_level)
            if grade_level
            else self.resolver.get_all_components()
        )

        scored = [(keyword_score(keywords, c), c) for c in candidates]
        # Stable sort: ties keep load order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        top = [c for score, c in scored if score > 0][: self.top_k]

        prerequisites = _union([self.resolver.get_prerequisites(c.uuid) for c in top])
        next_skills = _union([self.resolver.get_dependents(c.uuid) for c in top])

        logger.debug(
            f"Mapped '{skill_description[:60]}' to {[c.uuid for c in top]} "
            f"(grade={grade_level or 'any'})"
        )

        return MathSkillMapping(
            curriculum_skill=skill_description,
            learning_components=top,
            prerequisites=prerequisites,
            next_skills=next_skills,
            common_errors=[],  # filled from the error bank by callers
        )
