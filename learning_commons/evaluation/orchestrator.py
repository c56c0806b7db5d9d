"""
Content evaluation orchestrator.

Runs the literacy and motivation evaluators over one text, attaches the
standards alignment placeholder when asked, and flattens every piece of
feedback into a single suggestion list.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from loguru import logger

from config import get_settings
from learning_commons.evaluation.models import ContentEvaluation, StandardsAlignment
from learning_commons.evaluation.motivation import MotivationAnalyzer
from learning_commons.evaluation.rubric import RubricScorer

STANDARDS_ALIGNMENT_GAP = "Standards alignment requires Knowledge Graph integration"


class EvaluationType(str, Enum):
    FULL = "full"
    LITERACY = "literacy"
    MOTIVATION = "motivation"
    COMPLEXITY = "complexity"


@dataclass
class EvaluationOptions:
    target_grade_level: Optional[str] = None
    check_literacy: bool = True
    check_motivation: bool = True
    check_standards_alignment: bool = False


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EvaluationOrchestrator:
    """Compose literacy, motivation and standards checks into one report."""

    def __init__(
        self,
        rubric: Optional[RubricScorer] = None,
        motivation: Optional[MotivationAnalyzer] = None,
        evaluator_version: Optional[str] = None,
    ):
        settings = get_settings()
        self.rubric = rubric or RubricScorer(confidence=settings.evaluator_confidence)
        self.motivation = motivation or MotivationAnalyzer()
        self.evaluator_version = evaluator_version or settings.evaluator_version

    def evaluate_content(
        self,
        text: str,
        options: Optional[EvaluationOptions] = None,
    ) -> ContentEvaluation:
        options = options or EvaluationOptions()
        result = ContentEvaluation(
            timestamp=_utc_timestamp(),
            evaluator_version=self.evaluator_version,
        )

        if options.check_literacy:
            result.literacy = self.rubric.evaluate_literacy(text, options.target_grade_level)

        if options.check_motivation:
            result.motivation = self.motivation.evaluate(text)

        if options.check_standards_alignment:
            result.standards_alignment = StandardsAlignment(
                aligned_standards=[],
                alignment_score=0.0,
                gaps=[STANDARDS_ALIGNMENT_GAP],
            )

        logger.debug(
            f"Evaluated {len(text)} chars (literacy={options.check_literacy}, "
            f"motivation={options.check_motivation}, standards={options.check_standards_alignment})"
        )
        return result

    @staticmethod
    def generate_improvement_suggestions(evaluation: ContentEvaluation) -> list[str]:
        """Literacy recommendations, then motivation feedback, then standards gaps."""
        suggestions: list[str] = []
        if evaluation.literacy is not None:
            suggestions.extend(evaluation.literacy.recommendations)
        if evaluation.motivation is not None:
            suggestions.extend(evaluation.motivation.feedback)
        if evaluation.standards_alignment is not None:
            suggestions.extend(f"Standards gap: {gap}" for gap in evaluation.standards_alignment.gaps)
        return suggestions

    def evaluate_request(
        self,
        text: str,
        target_grade_level: Optional[str] = None,
        evaluation_type: EvaluationType | str = EvaluationType.FULL,
    ) -> dict[str, Any]:
        """
        Content evaluation lookup used by the HTTP layer.

        Unknown evaluation types fall back to a full evaluation.
        """
        try:
            evaluation_type = EvaluationType(evaluation_type)
        except ValueError:
            evaluation_type = EvaluationType.FULL

        if evaluation_type == EvaluationType.COMPLEXITY:
            evaluation = self.rubric.evaluate_text_complexity(text)
            return {"type": evaluation_type.value, "evaluation": evaluation.to_dict()}

        if evaluation_type == EvaluationType.LITERACY:
            evaluation = self.rubric.evaluate_literacy(text, target_grade_level)
            return {"type": evaluation_type.value, "evaluation": evaluation.to_dict()}

        if evaluation_type == EvaluationType.MOTIVATION:
            evaluation = self.motivation.evaluate(text)
            return {"type": evaluation_type.value, "evaluation": evaluation.to_dict()}

        full = self.evaluate_content(
            text,
            EvaluationOptions(target_grade_level=target_grade_level),
        )
        return {
            "type": EvaluationType.FULL.value,
            "evaluation": full.to_dict(),
            "suggestions": self.generate_improvement_suggestions(full),
        }


def evaluate_content(text: str, options: Optional[EvaluationOptions] = None) -> ContentEvaluation:
    return EvaluationOrchestrator().evaluate_content(text, options)


def generate_improvement_suggestions(evaluation: ContentEvaluation) -> list[str]:
    return EvaluationOrchestrator.generate_improvement_suggestions(evaluation)
