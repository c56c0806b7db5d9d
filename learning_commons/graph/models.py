"""
Data models for the Learning Commons knowledge graph.

Learning components are granular skills that sit below curriculum standards.
They are linked by directed relationships; a ``precedes`` edge points from a
prerequisite to the skill that builds on it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Subject(str, Enum):
    """Subjects covered by the graph."""
    MATH = "Math"
    ELA = "ELA"
    SCIENCE = "Science"
    SOCIAL_STUDIES = "Social Studies"


class SkillType(str, Enum):
    """Kind of knowledge a component represents."""
    CONCEPTUAL = "Conceptual"
    PROCEDURAL = "Procedural"
    APPLICATION = "Application"


class RelationshipType(str, Enum):
    """Edge types stored in the graph. Only PRECEDES is walked."""
    IS_CHILD_OF = "isChildOf"
    PRECEDES = "precedes"
    IS_RELATED_TO = "isRelatedTo"
    ALIGNS_TO = "alignsTo"
    IS_PART_OF = "isPartOf"
    EQUIVALENT_TO = "equivalentTo"


@dataclass(frozen=True)
class StandardsFramework:
    """A standards document such as Common Core."""
    uuid: str
    identifier: str
    title: str
    description: str = ""
    subject: Optional[Subject] = None
    publisher: str = ""
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "identifier": self.identifier,
            "title": self.title,
            "description": self.description,
            "subject": self.subject.value if self.subject else None,
            "publisher": self.publisher,
            "version": self.version,
        }


@dataclass(frozen=True)
class LearningComponent:
    """A granular skill or concept. Immutable once loaded."""
    uuid: str
    identifier: str
    label: str
    description: str
    subject: Subject
    grade_levels: tuple[str, ...] = ()
    domain: str = ""
    cluster: str = ""
    skill_type: Optional[SkillType] = None
    prerequisites: tuple[str, ...] = ()  # uuids of prerequisite components
    related_standards: tuple[str, ...] = ()

    @property
    def search_text(self) -> str:
        """Lower-cased text used for keyword matching."""
        return f"{self.label} {self.description} {self.domain} {self.cluster}".lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "identifier": self.identifier,
            "label": self.label,
            "description": self.description,
            "subject": self.subject.value,
            "gradeLevel": list(self.grade_levels),
            "domain": self.domain,
            "cluster": self.cluster,
            "skillType": self.skill_type.value if self.skill_type else None,
            "prerequisites": list(self.prerequisites),
            "relatedStandards": list(self.related_standards),
        }


@dataclass(frozen=True)
class Relationship:
    """A directed edge between two graph entities."""
    uuid: str
    source_uuid: str
    target_uuid: str
    relationship_type: RelationshipType
    weight: float = 1.0

    @classmethod
    def precedes(cls, prerequisite_uuid: str, component_uuid: str) -> Relationship:
        """Edge stating that ``prerequisite_uuid`` is learned before ``component_uuid``."""
        return cls(
            uuid=f"rel-{prerequisite_uuid}-{component_uuid}",
            source_uuid=prerequisite_uuid,
            target_uuid=component_uuid,
            relationship_type=RelationshipType.PRECEDES,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "sourceUuid": self.source_uuid,
            "targetUuid": self.target_uuid,
            "relationshipType": self.relationship_type.value,
            "weight": self.weight,
        }


@dataclass
class LearningProgression:
    """Ordered run of components anchored at one skill, earliest-learned first."""
    uuid: str
    name: str
    description: str
    subject: Subject
    grade_span: list[str] = field(default_factory=list)
    components: list[LearningComponent] = field(default_factory=list)
    pathway: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "description": self.description,
            "subject": self.subject.value,
            "gradeSpan": list(self.grade_span),
            "components": [c.to_dict() for c in self.components],
            "pathway": list(self.pathway),
        }


@dataclass
class MathSkillMapping:
    """Result of mapping a free-text curriculum skill onto the graph."""
    curriculum_skill: str
    learning_components: list[LearningComponent] = field(default_factory=list)
    prerequisites: list[LearningComponent] = field(default_factory=list)
    next_skills: list[LearningComponent] = field(default_factory=list)
    common_errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "curriculumSkill": self.curriculum_skill,
            "learningComponents": [c.to_dict() for c in self.learning_components],
            "prerequisites": [c.to_dict() for c in self.prerequisites],
            "nextSkills": [c.to_dict() for c in self.next_skills],
            "commonErrors": list(self.common_errors),
        }
