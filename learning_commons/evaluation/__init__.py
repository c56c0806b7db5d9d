"""
Content evaluators for AI-generated instructional text.

Provides:
- Text metrics (syllables, Flesch-Kincaid, vocabulary tiers, sentence stats)
- SCASS rubric scoring and literacy recommendations
- Motivation support analysis
- Combined content evaluation with improvement suggestions
"""

from learning_commons.evaluation.models import (
    ComplexityLevel,
    ContentEvaluation,
    LiteracyEvaluation,
    MotivationEvaluation,
    StandardsAlignment,
    TextComplexityDimension,
    TextComplexityEvaluation,
)
from learning_commons.evaluation.motivation import MotivationAnalyzer, evaluate_motivation
from learning_commons.evaluation.orchestrator import (
    EvaluationOptions,
    EvaluationOrchestrator,
    EvaluationType,
    evaluate_content,
    generate_improvement_suggestions,
)
from learning_commons.evaluation.rubric import (
    DimensionScorer,
    HeuristicDimensionScorer,
    RubricScorer,
    evaluate_literacy,
    evaluate_text_complexity,
    score_to_level,
)

__all__ = [
    "ComplexityLevel",
    "ContentEvaluation",
    "DimensionScorer",
    "EvaluationOptions",
    "EvaluationOrchestrator",
    "EvaluationType",
    "HeuristicDimensionScorer",
    "LiteracyEvaluation",
    "MotivationAnalyzer",
    "MotivationEvaluation",
    "RubricScorer",
    "StandardsAlignment",
    "TextComplexityDimension",
    "TextComplexityEvaluation",
    "evaluate_content",
    "evaluate_literacy",
    "evaluate_motivation",
    "evaluate_text_complexity",
    "generate_improvement_suggestions",
    "score_to_level",
]
