"""
Learning Commons knowledge graph.

Provides:
- GraphStore / GraphLoader: in-memory snapshot populated once at startup
- PrerequisiteResolver: prerequisite and dependent lookups
- ProgressionBuilder: ordered learning progressions
- SkillMapper: keyword mapping of curriculum skills onto components
"""

from learning_commons.graph.loader import GraphLoader, load_knowledge_graph
from learning_commons.graph.models import (
    LearningComponent,
    LearningProgression,
    MathSkillMapping,
    Relationship,
    RelationshipType,
    SkillType,
    StandardsFramework,
    Subject,
)
from learning_commons.graph.progression import ProgressionBuilder
from learning_commons.graph.resolver import PrerequisiteResolver
from learning_commons.graph.skill_mapper import SkillMapper
from learning_commons.graph.store import (
    GraphLoadError,
    GraphNotLoadedError,
    GraphStore,
    KnowledgeGraphError,
    get_default_store,
    reset_default_store,
)

__all__ = [
    "GraphLoadError",
    "GraphLoader",
    "GraphNotLoadedError",
    "GraphStore",
    "KnowledgeGraphError",
    "LearningComponent",
    "LearningProgression",
    "MathSkillMapping",
    "PrerequisiteResolver",
    "ProgressionBuilder",
    "Relationship",
    "RelationshipType",
    "SkillMapper",
    "SkillType",
    "StandardsFramework",
    "Subject",
    "get_default_store",
    "load_knowledge_graph",
    "reset_default_store",
]
