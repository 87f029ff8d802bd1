"""
Fuzzy Match Scoring Service

Decides whether each fuzzy-match assertion is satisfied by an agent
response. Pure logic, no I/O.
"""

from typing import List, Optional

from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.value_objects import (
    FuzzyMatchAssertion,
    FuzzyMatchResult,
    MatchPosition,
    RougeScores,
)
from .tokenizer import tokenize, normalize_text, is_number_match
from .rouge_calculator import compute_rouge


class FuzzyMatchScoringService:
    """
    Evaluates fuzzy-match assertions with a sliding-window ROUGE search.

    For a single-token expectation the response is first scanned for a
    direct hit (same normalized token, or the same number written as digits
    or as a word), which scores 1.0. Otherwise every window of 1 up to
    min(3 x len(expected tokens), 10) response tokens is scored and the best
    max(ROUGE-1, ROUGE-2, ROUGE-L) wins; ties keep the earliest, shortest
    window.
    """

    WINDOW_FACTOR = 3
    MAX_WINDOW_SIZE = 10

    def __init__(self, max_tokens: Optional[int] = None):
        """
        Args:
            max_tokens: Largest response, in tokens, that will be searched.
                Larger responses are rejected rather than truncated.
        """
        self._max_tokens = max_tokens

    def evaluate_assertions(
        self,
        assertions: List[FuzzyMatchAssertion],
        actual_response: str,
    ) -> List[FuzzyMatchResult]:
        """
        Evaluate every assertion against the response, preserving order.

        Raises:
            InvalidArgumentError: If the response is None or exceeds max_tokens
        """
        tokens = tokenize(actual_response)
        if self._max_tokens is not None and len(tokens) > self._max_tokens:
            raise InvalidArgumentError(
                f"Response has {len(tokens)} tokens, limit is {self._max_tokens}"
            )

        return [self._evaluate_single(assertion, tokens) for assertion in assertions]

    def _evaluate_single(
        self,
        assertion: FuzzyMatchAssertion,
        tokens: List[str],
    ) -> FuzzyMatchResult:
        expected_tokens = tokenize(assertion.expected_text)

        if len(expected_tokens) == 1:
            direct = self._find_direct_match(assertion, expected_tokens[0], tokens)
            if direct is not None:
                return direct

        best_score = 0.0
        best_match = ""
        best_position = MatchPosition()
        best_scores = RougeScores()

        max_window = min(
            len(tokens),
            len(expected_tokens) * self.WINDOW_FACTOR,
            self.MAX_WINDOW_SIZE,
        )
        for window_size in range(1, max_window + 1):
            for start in range(len(tokens) - window_size + 1):
                window = " ".join(tokens[start:start + window_size])
                scores = compute_rouge(assertion.expected_text, window)
                if scores.best > best_score:
                    best_score = scores.best
                    best_match = window
                    best_position = MatchPosition(start=start, end=start + window_size)
                    best_scores = scores

        return FuzzyMatchResult(
            assertion=assertion,
            passed=best_score >= assertion.threshold,
            best_match=best_match,
            rouge_scores=best_scores,
            final_score=best_score,
            match_position=best_position,
        )

    @staticmethod
    def _find_direct_match(
        assertion: FuzzyMatchAssertion,
        expected_token: str,
        tokens: List[str],
    ) -> Optional[FuzzyMatchResult]:
        expected = normalize_text(expected_token)
        if not expected:
            return None
        for i, token in enumerate(tokens):
            candidate = normalize_text(token)
            if candidate == expected or is_number_match(expected, candidate):
                return FuzzyMatchResult(
                    assertion=assertion,
                    passed=1.0 >= assertion.threshold,
                    best_match=token,
                    rouge_scores=RougeScores.perfect(),
                    final_score=1.0,
                    match_position=MatchPosition(start=i, end=i + 1),
                )
        return None

    @staticmethod
    def calculate_overall_score(results: List[FuzzyMatchResult]) -> float:
        """Mean final score; 1.0 when there are no results."""
        if not results:
            return 1.0
        return sum(result.final_score for result in results) / len(results)

    @staticmethod
    def all_assertions_passed(results: List[FuzzyMatchResult]) -> bool:
        return all(result.passed for result in results)
