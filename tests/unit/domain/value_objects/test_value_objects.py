"""
Unit tests for evaluation value objects.

Value objects validate their invariants on construction and are immutable.
"""

import dataclasses

import pytest

from conftest import make_test_case
from hebo_eval.domain.value_objects import (
    FuzzyMatchAssertion,
    FuzzyMatchResult,
    MatchPosition,
    RougeScores,
    SimilarityScores,
    TestCaseEvaluation,
    TestCaseResult,
)


class TestFuzzyMatchAssertion:
    """Tests for FuzzyMatchAssertion."""

    def test_from_text_mirrors_description(self):
        assertion = FuzzyMatchAssertion.from_text("Paris", 0.8)
        assert assertion.description == "Paris"

    def test_threshold_above_one_allowed(self):
        assert FuzzyMatchAssertion.from_text("x", 1.5).threshold == 1.5

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            FuzzyMatchAssertion.from_text("x", -0.1)


class TestRougeScores:
    """Tests for RougeScores."""

    def test_best(self):
        assert RougeScores(rouge1=0.2, rouge2=0.7, rouge_l=0.5).best == 0.7

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            RougeScores(rouge1=1.2)

    def test_perfect(self):
        assert RougeScores.perfect().to_dict() == {"rouge1": 1.0, "rouge2": 1.0, "rougeL": 1.0}


class TestMatchPosition:
    """Tests for MatchPosition."""

    def test_invalid_span_rejected(self):
        with pytest.raises(ValueError):
            MatchPosition(start=3, end=1)
        with pytest.raises(ValueError):
            MatchPosition(start=-1, end=0)


class TestFuzzyMatchResult:
    """Tests for FuzzyMatchResult."""

    def test_to_dict(self):
        result = FuzzyMatchResult(
            assertion=FuzzyMatchAssertion.from_text("Paris", 0.8),
            passed=True,
            best_match="Paris",
            rouge_scores=RougeScores.perfect(),
            final_score=1.0,
            match_position=MatchPosition(start=2, end=3),
        )

        data = result.to_dict()
        assert data["expected_text"] == "Paris"
        assert data["passed"] is True
        assert data["match_position"] == {"start": 2, "end": 3}

    def test_final_score_range(self):
        with pytest.raises(ValueError):
            FuzzyMatchResult(
                assertion=FuzzyMatchAssertion.from_text("x", 0.5),
                passed=False,
                best_match="",
                final_score=1.5,
            )


class TestSimilarityScores:
    """Tests for SimilarityScores."""

    @pytest.mark.parametrize("field", ["ngram_score", "lcs_score", "combined"])
    def test_each_score_validated(self, field):
        values = {"ngram_score": 0.5, "lcs_score": 0.5, "combined": 0.5}
        values[field] = -0.1
        with pytest.raises(ValueError):
            SimilarityScores(**values)


class TestTestCaseResult:
    """Tests for TestCaseResult."""

    def test_valid(self):
        result = TestCaseResult(success=True, score=0.9, execution_time=10.0)
        assert result.error is None

    def test_score_range(self):
        with pytest.raises(ValueError):
            TestCaseResult(success=True, score=1.01, execution_time=0.0)

    def test_negative_time(self):
        with pytest.raises(ValueError):
            TestCaseResult(success=True, score=1.0, execution_time=-1.0)


class TestTestCaseEvaluation:
    """Tests for TestCaseEvaluation."""

    def test_result_subset(self):
        test_case = make_test_case("ok")
        evaluation = TestCaseEvaluation(
            test_case_id=test_case.id,
            test_case=test_case,
            success=False,
            score=0.4,
            execution_time=5.0,
            error="boom",
        )

        assert evaluation.result == TestCaseResult(
            success=False, score=0.4, execution_time=5.0, error="boom"
        )

    def test_id_must_match_test_case(self):
        test_case = make_test_case("ok", test_case_id="a")
        with pytest.raises(ValueError):
            TestCaseEvaluation(
                test_case_id="b",
                test_case=test_case,
                success=True,
                score=1.0,
                execution_time=0.0,
            )

    def test_immutable(self):
        test_case = make_test_case("ok")
        evaluation = TestCaseEvaluation(
            test_case_id=test_case.id,
            test_case=test_case,
            success=True,
            score=1.0,
            execution_time=0.0,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            evaluation.score = 0.0

    def test_to_dict(self):
        test_case = make_test_case("ok", test_case_id="greeting")
        evaluation = TestCaseEvaluation(
            test_case_id="greeting",
            test_case=test_case,
            success=True,
            score=1.0,
            execution_time=2.0,
            response="ok",
            similarity=SimilarityScores(ngram_score=1.0, lcs_score=1.0, combined=1.0),
        )

        data = evaluation.to_dict()
        assert data["test_case_id"] == "greeting"
        assert data["test_case_name"] == "greeting"
        assert data["similarity"]["combined"] == 1.0
        assert data["assertions"] == []
