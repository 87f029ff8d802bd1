"""Value objects for the evaluation domain."""

from .fuzzy_match_assertion import FuzzyMatchAssertion
from .fuzzy_match_result import FuzzyMatchResult, RougeScores, MatchPosition
from .similarity_scores import SimilarityScores
from .test_case_result import TestCaseResult, TestCaseEvaluation

__all__ = [
    "FuzzyMatchAssertion",
    "FuzzyMatchResult",
    "RougeScores",
    "MatchPosition",
    "SimilarityScores",
    "TestCaseResult",
    "TestCaseEvaluation",
]
