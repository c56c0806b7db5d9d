"""
SCASS text complexity rubric.

Maps continuous [0, 1] dimension scores onto five ordinal complexity levels and
combines them into literacy evaluations with teacher-facing recommendations.

Dimension scores come from a ``DimensionScorer``. The default is the keyword
and formula heuristic in ``HeuristicDimensionScorer``; any object with a
``score(text) -> DimensionScores`` method can replace it without changing the
bucketing or the literacy report.
"""
from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Optional, Protocol

from config import get_settings
from learning_commons.evaluation.models import (
    ComplexityLevel,
    DimensionLevels,
    DimensionScores,
    LiteracyEvaluation,
    SentenceComplexity,
    TextComplexityDimension,
    TextComplexityEvaluation,
    VocabularyLevel,
)
from learning_commons.evaluation.text_metrics import (
    analyze_sentence_complexity,
    analyze_vocabulary,
    flesch_kincaid_grade,
)

# =============================================================================
# SCASS Rubric Criteria
# =============================================================================

STRUCTURE_CRITERIA = {
    ComplexityLevel.EXCEEDINGLY_COMPLEX: [
        "Organization is intricate or discipline-specific",
        "Connections between ideas are implicit or subtle",
        "Multiple text structures or genre features",
    ],
    ComplexityLevel.VERY_COMPLEX: [
        "Organization includes multiple pathways",
        "Connections require some inference",
        "Complex text structure",
    ],
    ComplexityLevel.MODERATELY_COMPLEX: [
        "Organization is clear but varies from simple chronological or sequential",
        "Connections are explicit but not always stated directly",
        "Some complexity in text structure",
    ],
    ComplexityLevel.SLIGHTLY_COMPLEX: [
        "Organization is clear and chronological or sequential",
        "Connections are explicit and clear",
        "Simple, well-marked text structure",
    ],
    ComplexityLevel.ACCESSIBLE: [
        "Organization is simple and straightforward",
        "All connections are explicit",
        "Very simple text structure",
    ],
}

LANGUAGE_CRITERIA = {
    ComplexityLevel.EXCEEDINGLY_COMPLEX: [
        "Abstract, ironic, figurative language predominates",
        "Complex sentence structures throughout",
        "Vocabulary generally unfamiliar, archaic, or domain-specific",
    ],
    ComplexityLevel.VERY_COMPLEX: [
        "Figurative or literary language used significantly",
        "Many complex sentences with subordinate clauses",
        "Much vocabulary is domain-specific or academic",
    ],
    ComplexityLevel.MODERATELY_COMPLEX: [
        "Some figurative or literary language",
        "Some complex sentence structures",
        "Some academic vocabulary or domain-specific words",
    ],
    ComplexityLevel.SLIGHTLY_COMPLEX: [
        "Mostly literal, clear language",
        "Mainly simple and compound sentences",
        "Mostly familiar vocabulary with some academic words",
    ],
    ComplexityLevel.ACCESSIBLE: [
        "Language is simple, concrete, literal",
        "Simple sentences predominate",
        "Vocabulary is familiar, everyday words",
    ],
}

KNOWLEDGE_CRITERIA = {
    ComplexityLevel.EXCEEDINGLY_COMPLEX: [
        "Relies on extensive discipline-specific content knowledge",
        "Requires understanding of multiple theoretical perspectives",
        "Many cultural or literary allusions",
    ],
    ComplexityLevel.VERY_COMPLEX: [
        "Requires discipline-specific content knowledge",
        "Some theoretical background helpful",
        "Some cultural references or allusions",
    ],
    ComplexityLevel.MODERATELY_COMPLEX: [
        "Requires some subject-specific knowledge",
        "General knowledge of topic helpful",
        "Few cultural references",
    ],
    ComplexityLevel.SLIGHTLY_COMPLEX: [
        "Relies on common practical knowledge",
        "Basic background on topic sufficient",
        "References are explained when used",
    ],
    ComplexityLevel.ACCESSIBLE: [
        "Relies only on everyday knowledge",
        "No prior knowledge of topic needed",
        "No unexplained references",
    ],
}

MEANING_CRITERIA = {
    ComplexityLevel.EXCEEDINGLY_COMPLEX: [
        "Multiple levels of meaning",
        "Purpose is implicit or ambiguous",
        "Theme or central idea is subtle",
    ],
    ComplexityLevel.VERY_COMPLEX: [
        "Multiple purposes or perspectives",
        "Purpose must be inferred",
        "Theme requires interpretation",
    ],
    ComplexityLevel.MODERATELY_COMPLEX: [
        "Purpose is implied but fairly clear",
        "May have secondary meanings",
        "Theme is accessible but requires thought",
    ],
    ComplexityLevel.SLIGHTLY_COMPLEX: [
        "Purpose is easily identified",
        "Single clear meaning",
        "Theme is straightforward",
    ],
    ComplexityLevel.ACCESSIBLE: [
        "Purpose is stated explicitly",
        "Meaning is simple and clear",
        "Theme is obvious",
    ],
}

RUBRIC_CRITERIA = {
    TextComplexityDimension.STRUCTURE: STRUCTURE_CRITERIA,
    TextComplexityDimension.LANGUAGE_FEATURES: LANGUAGE_CRITERIA,
    TextComplexityDimension.KNOWLEDGE_DEMANDS: KNOWLEDGE_CRITERIA,
    TextComplexityDimension.MEANING_PURPOSE: MEANING_CRITERIA,
}

# Lower bounds, most complex first
LEVEL_THRESHOLDS = (
    (0.8, ComplexityLevel.EXCEEDINGLY_COMPLEX),
    (0.6, ComplexityLevel.VERY_COMPLEX),
    (0.4, ComplexityLevel.MODERATELY_COMPLEX),
    (0.2, ComplexityLevel.SLIGHTLY_COMPLEX),
)

LONG_SENTENCE_WORDS = 20
DOMAIN_TERM_SHARE = 0.1
ACADEMIC_WORD_SHARE = 0.05

RECOMMEND_SHORTER_SENTENCES = "Consider breaking long sentences into shorter ones for clarity."
RECOMMEND_DEFINE_TERMS = (
    "High use of domain-specific vocabulary. Ensure terms are introduced with definitions."
)
RECOMMEND_ACADEMIC_VOCABULARY = (
    "Consider incorporating more academic vocabulary to build language skills."
)

_LEADING_INT = re.compile(r"^\s*(-?\d+)")


def score_to_level(score: float) -> ComplexityLevel:
    """Bucket a [0, 1] score. Monotonic: a higher score never gives a lower level."""
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return ComplexityLevel.ACCESSIBLE


def describe_level(dimension: TextComplexityDimension, level: ComplexityLevel) -> list[str]:
    """Rubric criteria describing ``level`` on ``dimension``."""
    return list(RUBRIC_CRITERIA[dimension][level])


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_grade(grade: Optional[str]) -> Optional[int]:
    """Leading integer of a grade label ("3", "4th"); "K" is grade 0."""
    if grade is None:
        return None
    if grade.strip().upper() == "K":
        return 0
    match = _LEADING_INT.match(grade)
    return int(match.group(1)) if match else None


class DimensionScorer(Protocol):
    def score(self, text: str) -> DimensionScores:
        ...


class HeuristicDimensionScorer:
    """
    Formula-based dimension scores.

    structure         = sentence complexity
    language features = mean(vocabulary complexity, sentence complexity)
    knowledge demands = tier 3 share of words
    meaning/purpose   = subordinate ratio / 2
    """

    def score(self, text: str) -> DimensionScores:
        vocab = analyze_vocabulary(text)
        sentences = analyze_sentence_complexity(text)
        total = vocab.total

        vocab_complexity = (vocab.tier2 + vocab.tier3 * 2) / total if total else 0.0
        knowledge = vocab.tier3 / total if total else 0.0

        return DimensionScores(
            structure=sentences.complexity_score,
            language_features=(vocab_complexity + sentences.complexity_score) / 2,
            knowledge_demands=knowledge,
            meaning_purpose=sentences.subordinate_ratio / 2,
        )


class RubricScorer:
    """Text complexity and literacy evaluation against the SCASS rubric."""

    def __init__(self, scorer: Optional[DimensionScorer] = None, confidence: float = 0.7):
        self.scorer = scorer or HeuristicDimensionScorer()
        self.confidence = confidence

    def evaluate_text_complexity(self, text: str) -> TextComplexityEvaluation:
        fk_grade = flesch_kincaid_grade(text)
        vocab = analyze_vocabulary(text)
        sentences = analyze_sentence_complexity(text)
        scores = self.scorer.score(text)

        overall = score_to_level(scores.overall)
        rationale = (
            f"Text analyzed at grade level {fk_grade:.1f}. "
            f"Vocabulary: {vocab.tier2 + vocab.tier3} academic/technical words out of {vocab.total}. "
            f"Average sentence length: {sentences.avg_length:.1f} words. "
            f"{describe_level(TextComplexityDimension.STRUCTURE, overall)[0]}."
        )

        return TextComplexityEvaluation(
            overall_level=overall,
            dimensions=DimensionLevels(
                structure=score_to_level(scores.structure),
                language_features=score_to_level(scores.language_features),
                knowledge_demands=score_to_level(scores.knowledge_demands),
                meaning_purpose=score_to_level(scores.meaning_purpose),
            ),
            grade_level=str(round_half_up(fk_grade)),
            confidence=self.confidence,
            rationale=rationale,
        )

    def evaluate_literacy(
        self,
        text: str,
        target_grade_level: Optional[str] = None,
    ) -> LiteracyEvaluation:
        """
        Full literacy evaluation.

        Args:
            text: Instructional text to evaluate
            target_grade_level: Grade the text is written for, e.g. "3"

        Returns:
            LiteracyEvaluation with tier counts, sentence stats and recommendations
        """
        complexity = self.evaluate_text_complexity(text)
        vocab = analyze_vocabulary(text)
        sentences = analyze_sentence_complexity(text)
        total = vocab.total

        appropriateness = 1.0
        target = parse_grade(target_grade_level)
        if target is not None:
            actual = int(complexity.grade_level)
            appropriateness = max(0.0, 1 - abs(target - actual) * 0.2)

        recommendations = []
        if sentences.avg_length > LONG_SENTENCE_WORDS:
            recommendations.append(RECOMMEND_SHORTER_SENTENCES)
        if vocab.tier3 > total * DOMAIN_TERM_SHARE:
            recommendations.append(RECOMMEND_DEFINE_TERMS)
        if vocab.tier2 < total * ACADEMIC_WORD_SHARE:
            recommendations.append(RECOMMEND_ACADEMIC_VOCABULARY)

        return LiteracyEvaluation(
            text_complexity=complexity,
            vocabulary_level=VocabularyLevel(
                tier1_words=vocab.tier1,
                tier2_words=vocab.tier2,
                tier3_words=vocab.tier3,
                appropriateness_score=appropriateness,
            ),
            sentence_complexity=SentenceComplexity(
                average_length=sentences.avg_length,
                subordinate_clause_ratio=sentences.subordinate_ratio,
                complexity_score=sentences.complexity_score,
            ),
            recommendations=recommendations,
        )


@lru_cache(maxsize=1)
def default_scorer() -> RubricScorer:
    """Heuristic scorer reporting the configured evaluator confidence."""
    return RubricScorer(confidence=get_settings().evaluator_confidence)


def evaluate_text_complexity(text: str) -> TextComplexityEvaluation:
    return default_scorer().evaluate_text_complexity(text)


def evaluate_literacy(text: str, target_grade_level: Optional[str] = None) -> LiteracyEvaluation:
    return default_scorer().evaluate_literacy(text, target_grade_level)
