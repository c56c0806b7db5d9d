"""
Knowledge graph loader.

Populates a ``GraphStore`` exactly once per process. Prerequisite lists are
turned into ``precedes`` relationships (prerequisite -> component) during the
load, so dependents can be found by scanning edges.
"""
from __future__ import annotations

from typing import Iterable, Optional

from loguru import logger

from learning_commons.graph.models import (
    LearningComponent,
    Relationship,
    StandardsFramework,
)
from learning_commons.graph.sample_data import CCSS_MATH_FRAMEWORK, SAMPLE_MATH_COMPONENTS
from learning_commons.graph.store import GraphLoadError, GraphStore, get_default_store


class GraphLoader:
    """
    Populate a store from component and framework records.

    Usage:
        store = GraphStore()
        GraphLoader(store).load()
    """

    def __init__(
        self,
        store: GraphStore,
        components: Optional[Iterable[LearningComponent]] = None,
        frameworks: Optional[Iterable[StandardsFramework]] = None,
    ):
        self.store = store
        self._components = components if components is not None else SAMPLE_MATH_COMPONENTS
        self._frameworks = frameworks if frameworks is not None else (CCSS_MATH_FRAMEWORK,)

    def load(self) -> bool:
        """
        Populate the store.

        Returns:
            True if this call populated the store, False if it was already loaded.

        Raises:
            GraphLoadError: if population fails. The store keeps whatever was
                added before the failure and stays marked as not loaded.
        """
        with self.store.lock:
            if self.store.loaded:
                return False

            try:
                self._populate()
            except Exception as e:
                logger.error(f"Error loading knowledge graph: {e}")
                raise GraphLoadError(f"Failed to load knowledge graph: {e}") from e

            self.store.loaded = True

        logger.info(
            f"Knowledge graph loaded: {len(self.store.components)} components, "
            f"{len(self.store.relationships)} relationships"
        )
        return True

    def _populate(self) -> None:
        for framework in self._frameworks:
            self.store.add_framework(framework)

        components = list(self._components)
        for component in components:
            if not isinstance(component, LearningComponent):
                raise TypeError(f"Expected LearningComponent, got {type(component).__name__}")
            self.store.add_component(component)

        for component in components:
            for prereq_uuid in component.prerequisites:
                self.store.add_relationship(Relationship.precedes(prereq_uuid, component.uuid))

        logger.debug(f"Derived prerequisite edges for {len(components)} components")


def load_knowledge_graph(store: Optional[GraphStore] = None) -> GraphStore:
    """Load the sample graph into ``store`` (default: the process-wide store)."""
    store = store if store is not None else get_default_store()
    GraphLoader(store).load()
    return store
