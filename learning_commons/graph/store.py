"""
In-memory store for the knowledge graph.

The store is an explicit object owned by the application. It is populated
once by ``GraphLoader`` and read by the resolver, progression builder and
skill mapper. Nothing is loaded as a side effect of importing this module.
"""
from __future__ import annotations

import threading
from typing import Iterator, Optional

from learning_commons.graph.models import (
    LearningComponent,
    Relationship,
    RelationshipType,
    StandardsFramework,
)


class KnowledgeGraphError(Exception):
    """Base class for knowledge graph failures."""
    pass


class GraphLoadError(KnowledgeGraphError):
    """Raised when populating the store fails."""
    pass


class GraphNotLoadedError(KnowledgeGraphError):
    """Raised when a graph query runs against a store that was never loaded."""
    pass


class GraphStore:
    """
    Components, frameworks and relationships keyed by uuid.

    Insertion order is preserved, so iteration order is load order.
    """

    def __init__(self):
        self.frameworks: dict[str, StandardsFramework] = {}
        self.components: dict[str, LearningComponent] = {}
        self.relationships: dict[str, Relationship] = {}
        self.loaded = False
        self.lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.components)

    def __contains__(self, uuid: object) -> bool:
        return uuid in self.components

    def ensure_loaded(self) -> None:
        if not self.loaded:
            raise GraphNotLoadedError(
                "Knowledge graph is not loaded; call load_knowledge_graph() at startup"
            )

    def add_framework(self, framework: StandardsFramework) -> None:
        self.frameworks[framework.uuid] = framework

    def add_component(self, component: LearningComponent) -> None:
        self.components[component.uuid] = component

    def add_relationship(self, relationship: Relationship) -> None:
        self.relationships[relationship.uuid] = relationship

    def get_component(self, uuid: str) -> Optional[LearningComponent]:
        return self.components.get(uuid)

    def iter_components(self) -> Iterator[LearningComponent]:
        return iter(self.components.values())

    def iter_relationships(
        self,
        relationship_type: Optional[RelationshipType] = None,
    ) -> Iterator[Relationship]:
        for rel in self.relationships.values():
            if relationship_type is None or rel.relationship_type == relationship_type:
                yield rel

    def clear(self) -> None:
        """Drop all data and reset the loaded flag."""
        with self.lock:
            self.frameworks.clear()
            self.components.clear()
            self.relationships.clear()
            self.loaded = False


_default_store: Optional[GraphStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> GraphStore:
    """Get the process-wide store (created empty on first use)."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = GraphStore()
        return _default_store


def reset_default_store() -> None:
    """Discard the process-wide store. Used by tests."""
    global _default_store
    with _default_store_lock:
        _default_store = None
