"""
Motivation support analysis.

Scores instructional text on four dimensions drawn from growth mindset and
self-determination research. Each dimension counts how many distinct cue
phrases occur in the text and saturates at a fixed cap.
"""
from __future__ import annotations

from dataclasses import dataclass

from learning_commons.evaluation.models import MotivationEvaluation


@dataclass(frozen=True)
class MotivationDimension:
    """Cue phrases, saturation cap and feedback threshold for one dimension."""
    name: str
    phrases: tuple[str, ...]
    cap: int
    threshold: float
    feedback: str

    def score(self, lower_text: str) -> float:
        matches = sum(1 for phrase in self.phrases if phrase in lower_text)
        return min(matches / self.cap, 1.0)


GROWTH_MINDSET = MotivationDimension(
    name="growth_mindset_support",
    phrases=(
        "yet", "learning", "improve", "practice", "effort", "strategy", "try again",
        "mistake is", "mistakes help", "challenge", "grow", "develop", "progress",
    ),
    cap=5,
    threshold=0.4,
    feedback=(
        'Consider adding language that emphasizes effort and growth '
        '(e.g., "not yet", "keep practicing").'
    ),
)

AUTONOMY = MotivationDimension(
    name="autonomy_support",
    phrases=(
        "choose", "option", "decide", "your choice", "you can", "you might", "would you like",
    ),
    cap=3,
    threshold=0.3,
    feedback="Consider offering choices or options to support student autonomy.",
)

RELEVANCE = MotivationDimension(
    name="relevance_clarity",
    phrases=(
        "because", "helps you", "use this", "real life", "example", "when you", "important for",
    ),
    cap=3,
    threshold=0.3,
    feedback="Consider explaining why this skill is important or how it connects to real life.",
)

ACHIEVABILITY = MotivationDimension(
    name="achievability_cues",
    phrases=(
        "step", "first", "start", "begin", "simple", "easy", "you know", "already",
        "break down", "one at a time",
    ),
    cap=4,
    threshold=0.3,
    feedback="Consider breaking the task into smaller steps to make it feel more achievable.",
)

DIMENSIONS = (GROWTH_MINDSET, AUTONOMY, RELEVANCE, ACHIEVABILITY)


class MotivationAnalyzer:
    """Phrase-presence scoring across the four motivation dimensions."""

    dimensions = DIMENSIONS

    def score_dimensions(self, text: str) -> dict[str, float]:
        lower_text = text.lower()
        return {d.name: d.score(lower_text) for d in self.dimensions}

    def evaluate(self, text: str) -> MotivationEvaluation:
        scores = self.score_dimensions(text)
        feedback = [d.feedback for d in self.dimensions if scores[d.name] < d.threshold]

        return MotivationEvaluation(
            growth_mindset_support=scores[GROWTH_MINDSET.name],
            autonomy_support=scores[AUTONOMY.name],
            relevance_clarity=scores[RELEVANCE.name],
            achievability_cues=scores[ACHIEVABILITY.name],
            overall_score=sum(scores.values()) / len(scores),
            feedback=feedback,
        )


def evaluate_motivation(text: str) -> MotivationEvaluation:
    return MotivationAnalyzer().evaluate(text)
