"""
Unit tests for FuzzyMatchScoringService.

These tests verify pure assertion-matching logic with no I/O dependencies.
"""

import pytest

from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.services import FuzzyMatchScoringService
from hebo_eval.domain.value_objects import FuzzyMatchAssertion, MatchPosition


@pytest.fixture
def service():
    return FuzzyMatchScoringService()


def assertion(text, threshold=0.8):
    return FuzzyMatchAssertion.from_text(text, threshold)


class TestDirectMatch:
    """Single-token expectations are first looked up directly."""

    def test_exact_token_ignoring_punctuation(self, service):
        [result] = service.evaluate_assertions([assertion("42")], "The answer is 42.")

        assert result.passed is True
        assert result.final_score == 1.0
        assert result.best_match == "42."
        assert result.match_position == MatchPosition(start=3, end=4)
        assert result.rouge_scores.best == 1.0

    def test_case_insensitive(self, service):
        [result] = service.evaluate_assertions([assertion("Paris")], "it is paris")
        assert result.passed is True
        assert result.best_match == "paris"

    def test_number_word_equivalence(self, service):
        [result] = service.evaluate_assertions([assertion("4")], "I have four apples")
        assert result.passed is True
        assert result.best_match == "four"

    def test_decimal_does_not_match_digits_without_point(self, service):
        [result] = service.evaluate_assertions([assertion("3.5", 0.9)], "The total is 35 dollars")

        assert result.passed is False
        assert result.final_score == 0.0

    def test_decimal_matches_same_decimal(self, service):
        [result] = service.evaluate_assertions([assertion("3.5", 0.9)], "The total is 3.5 dollars.")

        assert result.passed is True
        assert result.final_score == 1.0
        assert result.best_match == "3.5"

    def test_integer_matches_decimal_form(self, service):
        [result] = service.evaluate_assertions([assertion("4", 0.9)], "It costs 4.0 euros")

        assert result.passed is True
        assert result.best_match == "4.0"

    def test_threshold_above_one_never_passes(self, service):
        [result] = service.evaluate_assertions([assertion("42", 1.5)], "42")
        assert result.final_score == 1.0
        assert result.passed is False


class TestSlidingWindow:
    """Multi-token expectations use the best ROUGE window."""

    def test_finds_phrase_inside_response(self, service):
        [result] = service.evaluate_assertions(
            [assertion("New York")], "I live in new york city"
        )

        assert result.passed is True
        assert result.final_score == 1.0
        assert result.best_match == "new york"
        assert result.match_position == MatchPosition(start=3, end=5)

    def test_partial_match_below_threshold(self, service):
        [result] = service.evaluate_assertions(
            [assertion("the quick brown fox", 0.9)], "a quick red dog"
        )

        assert result.final_score == 0.25
        assert result.passed is False

    def test_ties_keep_earliest_shortest_window(self, service):
        [result] = service.evaluate_assertions([assertion("big cat", 0.4)], "cat dog cat")

        assert result.final_score == 0.5
        assert result.passed is True
        assert result.best_match == "cat"
        assert result.match_position == MatchPosition(start=0, end=1)

    def test_window_is_capped_at_ten_tokens(self, service):
        [result] = service.evaluate_assertions(
            [assertion("alpha beta gamma delta", 1.0)],
            "alpha x x x x beta x x x x gamma delta",
        )

        assert result.final_score == 0.75
        assert result.passed is False
        assert result.best_match == "beta x x x x gamma delta"
        assert result.match_position == MatchPosition(start=5, end=12)

    def test_no_match(self, service):
        [result] = service.evaluate_assertions([assertion("Paris", 0.5)], "London is big")

        assert result.passed is False
        assert result.final_score == 0.0
        assert result.best_match == ""

    def test_empty_response(self, service):
        [result] = service.evaluate_assertions([assertion("anything")], "")
        assert result.passed is False
        assert result.final_score == 0.0


class TestEvaluateAssertions:
    """Tests for evaluate_assertions() as a whole."""

    def test_preserves_order(self, service):
        results = service.evaluate_assertions(
            [assertion("Paris"), assertion("France")], "Paris is in France"
        )
        assert [r.assertion.expected_text for r in results] == ["Paris", "France"]

    def test_no_assertions(self, service):
        assert service.evaluate_assertions([], "anything") == []

    def test_oversized_response_rejected(self):
        service = FuzzyMatchScoringService(max_tokens=3)
        with pytest.raises(InvalidArgumentError):
            service.evaluate_assertions([assertion("a")], "a b c d")

    def test_none_response_raises(self, service):
        with pytest.raises(InvalidArgumentError):
            service.evaluate_assertions([assertion("a")], None)


class TestAggregation:
    """Tests for calculate_overall_score() and all_assertions_passed()."""

    def test_overall_score_is_mean(self, service):
        results = service.evaluate_assertions(
            [assertion("Paris", 0.5), assertion("Rome", 0.5)], "Paris only"
        )
        assert FuzzyMatchScoringService.calculate_overall_score(results) == 0.5
        assert FuzzyMatchScoringService.all_assertions_passed(results) is False

    def test_empty_results(self):
        assert FuzzyMatchScoringService.calculate_overall_score([]) == 1.0
        assert FuzzyMatchScoringService.all_assertions_passed([]) is True
