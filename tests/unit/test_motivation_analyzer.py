"""Unit tests for the motivation analyzer."""
import pytest

from learning_commons.evaluation.motivation import (
    ACHIEVABILITY,
    AUTONOMY,
    DIMENSIONS,
    GROWTH_MINDSET,
    RELEVANCE,
    MotivationAnalyzer,
    evaluate_motivation,
)


class TestDimensionScores:
    def test_growth_mindset_saturates(self):
        result = evaluate_motivation(
            "Keep learning and practice with effort; every challenge helps you grow, "
            "and you will improve."
        )

        assert result.growth_mindset_support == 1.0
        assert result.relevance_clarity == pytest.approx(1 / 3)
        assert result.autonomy_support == 0.0

    def test_autonomy_phrases(self):
        assert evaluate_motivation("You can choose an option.").autonomy_support == 1.0

    def test_achievability_phrases(self):
        result = evaluate_motivation("First, start with one step.")
        assert result.achievability_cues == pytest.approx(0.75)

    def test_phrases_are_case_insensitive(self):
        assert evaluate_motivation("YOU CAN DECIDE.").autonomy_support == pytest.approx(2 / 3)

    def test_repeated_phrase_counts_once(self):
        assert evaluate_motivation("step step step step").achievability_cues == pytest.approx(0.25)

    def test_overall_is_mean_of_dimensions(self):
        result = evaluate_motivation("You can choose an option. First, start with one step.")
        expected = (
            result.growth_mindset_support
            + result.autonomy_support
            + result.relevance_clarity
            + result.achievability_cues
        ) / 4
        assert result.overall_score == pytest.approx(expected)


class TestFeedback:
    def test_empty_text_gets_all_feedback(self):
        result = evaluate_motivation("")

        assert result.overall_score == 0.0
        assert result.feedback == [d.feedback for d in DIMENSIONS]

    def test_strong_dimensions_get_no_feedback(self):
        result = evaluate_motivation("You can choose an option.")

        assert AUTONOMY.feedback not in result.feedback
        assert GROWTH_MINDSET.feedback in result.feedback
        assert RELEVANCE.feedback in result.feedback
        assert ACHIEVABILITY.feedback in result.feedback

    def test_feedback_threshold_is_strict(self):
        # one relevance cue scores 1/3, above the 0.3 threshold
        result = evaluate_motivation("Here is an example.")
        assert RELEVANCE.feedback not in result.feedback


class TestAnalyzer:
    def test_score_dimensions_keys(self):
        scores = MotivationAnalyzer().score_dimensions("try again")
        assert set(scores) == {d.name for d in DIMENSIONS}
        assert scores[GROWTH_MINDSET.name] == pytest.approx(0.2)

    def test_to_dict_uses_camel_case(self):
        payload = evaluate_motivation("Practice every day.").to_dict()
        assert set(payload) == {
            "growthMindsetSupport", "autonomySupport", "relevanceClarity",
            "achievabilityCues", "overallScore", "feedback",
        }
