"""
Prerequisite resolution and lookup queries over a loaded graph.

Unknown ids are not errors: they resolve to ``None`` or an empty list.
"""
from __future__ import annotations

from typing import Optional

from loguru import logger

from learning_commons.graph.models import LearningComponent, RelationshipType
from learning_commons.graph.store import GraphStore


class PrerequisiteResolver:
    """Direct-neighbour queries: what comes before a skill and what builds on it."""

    def __init__(self, store: GraphStore):
        self.store = store

    def get_component(self, uuid: str) -> Optional[LearningComponent]:
        self.store.ensure_loaded()
        return self.store.get_component(uuid)

    def get_prerequisites(self, uuid: str) -> list[LearningComponent]:
        """Components listed as prerequisites of ``uuid``, in list order."""
        self.store.ensure_loaded()
        component = self.store.get_component(uuid)
        if component is None or not component.prerequisites:
            return []

        prereqs = []
        for prereq_uuid in component.prerequisites:
            prereq = self.store.get_component(prereq_uuid)
            if prereq is None:
                logger.debug(f"Skipping dangling prerequisite {prereq_uuid} of {uuid}")
                continue
            prereqs.append(prereq)
        return prereqs

    def get_dependents(self, uuid: str) -> list[LearningComponent]:
        """Components that list ``uuid`` as a prerequisite (next skills)."""
        self.store.ensure_loaded()
        dependents = []
        for rel in self.store.iter_relationships(RelationshipType.PRECEDES):
            if rel.source_uuid != uuid:
                continue
            target = self.store.get_component(rel.target_uuid)
            if target is not None:
                dependents.append(target)
        return dependents

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_all_components(self) -> list[LearningComponent]:
        self.store.ensure_loaded()
        return list(self.store.iter_components())

    def get_components_by_grade(self, grade_level: str) -> list[LearningComponent]:
        return [c for c in self.get_all_components() if grade_level in c.grade_levels]

    def get_components_by_domain(self, domain: str) -> list[LearningComponent]:
        return [c for c in self.get_all_components() if c.domain == domain]

    def get_components_by_cluster(self, cluster: str) -> list[LearningComponent]:
        return [c for c in self.get_all_components() if c.cluster == cluster]

    def search_components(self, query: str) -> list[LearningComponent]:
        """Components whose label, description, domain or cluster contain ``query``."""
        needle = query.lower()
        return [
            c for c in self.get_all_components()
            if needle in c.label.lower()
            or needle in c.description.lower()
            or needle in c.domain.lower()
            or needle in c.cluster.lower()
        ]
