"""
Scoring Service

Turns an agent response and the test case it answers into a
TestCaseEvaluation. Pure logic, no I/O.

Scoring rules:
  - Expected text is the final message block with assertion grammar removed.
  - Both texts are tokenized with the same strict tokenizer.
  - ngram_score: mean over the configured n of
        count_overlap(actual n-grams, expected n-grams) / len(expected n-grams)
    skipping any n for which the expected text has no n-grams.
  - lcs_score: token LCS length / expected token count.
  - combined = ngram_weight * ngram_score + lcs_weight * lcs_score
    (weights normalised to sum to 1).
  - Without assertions: score = combined, success = combined >= threshold.
  - With assertions: score = assertion_weight * mean assertion score
    + (1 - assertion_weight) * combined, success = every assertion passed.
  - Empty expected text against empty response scores 1.0; empty expected
    text against a non-empty response scores 0.0.
"""

import copy
from typing import List, Optional, Sequence

from hebo_eval.domain.entities import TestCase
from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.value_objects import SimilarityScores, TestCaseEvaluation
from .assertion_parser import AssertionParser
from .fuzzy_match_scoring_service import FuzzyMatchScoringService
from .ngram_engine import get_ngrams, count_overlap
from .sequence_similarity import compute_lcs_length
from .tokenizer import tokenize


class ScoringService:
    """Combines n-gram, LCS and assertion signals into a score and a verdict."""

    def __init__(
        self,
        threshold: float = 0.8,
        ngram_sizes: Sequence[int] = (1, 2),
        ngram_weight: float = 0.5,
        lcs_weight: float = 0.5,
        assertion_weight: float = 0.7,
        max_tokens: Optional[int] = 4096,
        fuzzy_match_service: Optional[FuzzyMatchScoringService] = None,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise InvalidArgumentError(f"threshold must be in [0.0, 1.0], got {threshold}")
        if not 0.0 <= assertion_weight <= 1.0:
            raise InvalidArgumentError(
                f"assertion_weight must be in [0.0, 1.0], got {assertion_weight}"
            )
        if ngram_weight < 0 or lcs_weight < 0 or ngram_weight + lcs_weight == 0:
            raise InvalidArgumentError("ngram_weight and lcs_weight must be non-negative and not both zero")
        if not ngram_sizes:
            raise InvalidArgumentError("ngram_sizes cannot be empty")
        for n in ngram_sizes:
            if isinstance(n, bool) or not isinstance(n, int) or n < 1:
                raise InvalidArgumentError(f"n-gram size must be a positive integer, got {n!r}")
        if max_tokens is not None and max_tokens < 1:
            raise InvalidArgumentError(f"max_tokens must be positive, got {max_tokens}")

        total = ngram_weight + lcs_weight
        self.threshold = threshold
        self.ngram_sizes = tuple(ngram_sizes)
        self.ngram_weight = ngram_weight / total
        self.lcs_weight = lcs_weight / total
        self.assertion_weight = assertion_weight
        self.max_tokens = max_tokens
        self._parser = AssertionParser()
        self._fuzzy_match = fuzzy_match_service or FuzzyMatchScoringService(max_tokens=max_tokens)

    def with_threshold(self, threshold: float) -> "ScoringService":
        """Copy of this service with a different pass threshold."""
        if not 0.0 <= threshold <= 1.0:
            raise InvalidArgumentError(f"threshold must be in [0.0, 1.0], got {threshold}")
        scoring = copy.copy(self)
        scoring.threshold = threshold
        return scoring

    def _check_size(self, tokens: List[str], label: str) -> None:
        if self.max_tokens is not None and len(tokens) > self.max_tokens:
            raise InvalidArgumentError(
                f"{label} has {len(tokens)} tokens, limit is {self.max_tokens}"
            )

    def ngram_score(self, actual_tokens: List[str], expected_tokens: List[str]) -> float:
        ratios = []
        for n in self.ngram_sizes:
            expected_ngrams = get_ngrams(expected_tokens, n)
            if not expected_ngrams:
                continue
            overlap = count_overlap(get_ngrams(actual_tokens, n), expected_ngrams)
            ratios.append(overlap / len(expected_ngrams))

        if not ratios:
            return 1.0 if not actual_tokens and not expected_tokens else 0.0
        return sum(ratios) / len(ratios)

    @staticmethod
    def lcs_score(actual_tokens: List[str], expected_tokens: List[str]) -> float:
        if not expected_tokens:
            return 0.0 if actual_tokens else 1.0
        return compute_lcs_length(actual_tokens, expected_tokens) / len(expected_tokens)

    def compute_similarity(self, expected_text: str, actual_text: str) -> SimilarityScores:
        """
        Similarity of actual_text to expected_text (already cleaned).

        Raises:
            InvalidArgumentError: If a text is None or exceeds max_tokens
        """
        expected_tokens = tokenize(expected_text)
        actual_tokens = tokenize(actual_text)
        self._check_size(expected_tokens, "Expected text")
        self._check_size(actual_tokens, "Response")

        ngram = self.ngram_score(actual_tokens, expected_tokens)
        lcs = self.lcs_score(actual_tokens, expected_tokens)
        combined = min(1.0, self.ngram_weight * ngram + self.lcs_weight * lcs)
        return SimilarityScores(ngram_score=ngram, lcs_score=lcs, combined=combined)

    def evaluate(
        self,
        test_case: TestCase,
        response: str,
        execution_time: float,
    ) -> TestCaseEvaluation:
        """
        Score a response against the final message block of a test case.

        Oversized or missing input produces a failed evaluation carrying the
        error message.
        """
        content = test_case.expected_block.content
        assertions = self._parser.parse_assertions(content)
        expected_text = self._parser.clean_content(content)

        try:
            similarity = self.compute_similarity(expected_text, response)
            assertion_results = self._fuzzy_match.evaluate_assertions(assertions, response)
        except InvalidArgumentError as e:
            return self.evaluate_failure(test_case, str(e), execution_time, response=response)

        if assertion_results:
            assertion_score = self._fuzzy_match.calculate_overall_score(assertion_results)
            score = (
                self.assertion_weight * assertion_score
                + (1.0 - self.assertion_weight) * similarity.combined
            )
            success = self._fuzzy_match.all_assertions_passed(assertion_results)
        else:
            score = similarity.combined
            success = score >= self.threshold

        return TestCaseEvaluation(
            test_case_id=test_case.id,
            test_case=test_case,
            success=success,
            score=max(0.0, min(1.0, score)),
            execution_time=execution_time,
            response=response,
            similarity=similarity,
            assertion_results=tuple(assertion_results),
        )

    @staticmethod
    def evaluate_failure(
        test_case: TestCase,
        error: str,
        execution_time: float,
        response: Optional[str] = None,
    ) -> TestCaseEvaluation:
        """Failed evaluation with score 0.0, used when no usable response exists."""
        return TestCaseEvaluation(
            test_case_id=test_case.id,
            test_case=test_case,
            success=False,
            score=0.0,
            execution_time=execution_time,
            error=error,
            response=response,
        )
