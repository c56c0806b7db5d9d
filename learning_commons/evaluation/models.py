"""
Result types for content evaluation.

All results are recomputed on every call and never persisted. ``to_dict``
produces the camelCase shape consumed by the planning app.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ComplexityLevel(str, Enum):
    """SCASS rubric levels, most complex first."""
    EXCEEDINGLY_COMPLEX = "exceedinglyComplex"
    VERY_COMPLEX = "veryComplex"
    MODERATELY_COMPLEX = "moderatelyComplex"
    SLIGHTLY_COMPLEX = "slightlyComplex"
    ACCESSIBLE = "accessible"

    @property
    def rank(self) -> int:
        """Ordinal position: 0 for accessible up to 4 for exceedingly complex."""
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {
    ComplexityLevel.ACCESSIBLE: 0,
    ComplexityLevel.SLIGHTLY_COMPLEX: 1,
    ComplexityLevel.MODERATELY_COMPLEX: 2,
    ComplexityLevel.VERY_COMPLEX: 3,
    ComplexityLevel.EXCEEDINGLY_COMPLEX: 4,
}


class TextComplexityDimension(str, Enum):
    STRUCTURE = "structure"
    LANGUAGE_FEATURES = "languageFeatures"
    KNOWLEDGE_DEMANDS = "knowledgeDemands"
    MEANING_PURPOSE = "meaningPurpose"


@dataclass(frozen=True)
class VocabularyCounts:
    tier1: int = 0
    tier2: int = 0
    tier3: int = 0

    @property
    def total(self) -> int:
        return self.tier1 + self.tier2 + self.tier3


@dataclass(frozen=True)
class SentenceStats:
    avg_length: float = 0.0
    subordinate_ratio: float = 0.0
    complexity_score: float = 0.0


@dataclass(frozen=True)
class DimensionScores:
    """Raw [0, 1] scores for the four rubric dimensions."""
    structure: float
    language_features: float
    knowledge_demands: float
    meaning_purpose: float

    @property
    def overall(self) -> float:
        return (
            self.structure + self.language_features + self.knowledge_demands + self.meaning_purpose
        ) / 4


@dataclass
class DimensionLevels:
    structure: ComplexityLevel
    language_features: ComplexityLevel
    knowledge_demands: ComplexityLevel
    meaning_purpose: ComplexityLevel

    def to_dict(self) -> dict[str, str]:
        return {
            "structure": self.structure.value,
            "languageFeatures": self.language_features.value,
            "knowledgeDemands": self.knowledge_demands.value,
            "meaningPurpose": self.meaning_purpose.value,
        }


@dataclass
class TextComplexityEvaluation:
    overall_level: ComplexityLevel
    dimensions: DimensionLevels
    grade_level: str
    confidence: float
    rationale: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallLevel": self.overall_level.value,
            "dimensions": self.dimensions.to_dict(),
            "gradeLevel": self.grade_level,
            "confidence": self.confidence,
            "rationale": self.rationale,
        }


@dataclass
class VocabularyLevel:
    tier1_words: int
    tier2_words: int
    tier3_words: int
    appropriateness_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "tier1Words": self.tier1_words,
            "tier2Words": self.tier2_words,
            "tier3Words": self.tier3_words,
            "appropriatenessScore": self.appropriateness_score,
        }


@dataclass
class SentenceComplexity:
    average_length: float
    subordinate_clause_ratio: float
    complexity_score: float

    def to_dict(self) -> dict[str, float]:
        return {
            "averageLength": self.average_length,
            "subordinateClauseRatio": self.subordinate_clause_ratio,
            "complexityScore": self.complexity_score,
        }


@dataclass
class LiteracyEvaluation:
    text_complexity: TextComplexityEvaluation
    vocabulary_level: VocabularyLevel
    sentence_complexity: SentenceComplexity
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "textComplexity": self.text_complexity.to_dict(),
            "vocabularyLevel": self.vocabulary_level.to_dict(),
            "sentenceComplexity": self.sentence_complexity.to_dict(),
            "recommendations": list(self.recommendations),
        }


@dataclass
class MotivationEvaluation:
    growth_mindset_support: float
    autonomy_support: float
    relevance_clarity: float
    achievability_cues: float
    overall_score: float
    feedback: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "growthMindsetSupport": self.growth_mindset_support,
            "autonomySupport": self.autonomy_support,
            "relevanceClarity": self.relevance_clarity,
            "achievabilityCues": self.achievability_cues,
            "overallScore": self.overall_score,
            "feedback": list(self.feedback),
        }


@dataclass
class StandardsAlignment:
    aligned_standards: list[str] = field(default_factory=list)
    alignment_score: float = 0.0
    gaps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "alignedStandards": list(self.aligned_standards),
            "alignmentScore": self.alignment_score,
            "gaps": list(self.gaps),
        }


@dataclass
class ContentEvaluation:
    """Combined literacy, motivation and standards evaluation."""
    timestamp: str
    evaluator_version: str
    literacy: Optional[LiteracyEvaluation] = None
    motivation: Optional[MotivationEvaluation] = None
    standards_alignment: Optional[StandardsAlignment] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "timestamp": self.timestamp,
            "evaluatorVersion": self.evaluator_version,
        }
        if self.literacy is not None:
            result["literacy"] = self.literacy.to_dict()
        if self.motivation is not None:
            result["motivation"] = self.motivation.to_dict()
        if self.standards_alignment is not None:
            result["standardsAlignment"] = self.standards_alignment.to_dict()
        return result
