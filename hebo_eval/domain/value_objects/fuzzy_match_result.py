"""
Value objects describing how an assertion matched an agent response.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .fuzzy_match_assertion import FuzzyMatchAssertion


@dataclass(frozen=True)
class RougeScores:
    """ROUGE-1, ROUGE-2 and ROUGE-L recall, each in [0, 1]."""
    rouge1: float = 0.0
    rouge2: float = 0.0
    rouge_l: float = 0.0

    def __post_init__(self):
        for name, value in [
            ("rouge1", self.rouge1),
            ("rouge2", self.rouge2),
            ("rouge_l", self.rouge_l),
        ]:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")

    @property
    def best(self) -> float:
        return max(self.rouge1, self.rouge2, self.rouge_l)

    @classmethod
    def perfect(cls) -> "RougeScores":
        return cls(rouge1=1.0, rouge2=1.0, rouge_l=1.0)

    def to_dict(self) -> Dict[str, float]:
        return {"rouge1": self.rouge1, "rouge2": self.rouge2, "rougeL": self.rouge_l}


@dataclass(frozen=True)
class MatchPosition:
    """Token span [start, end) of the best match in the response."""
    start: int = 0
    end: int = 0

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid match span [{self.start}, {self.end})")


@dataclass(frozen=True)
class FuzzyMatchResult:
    """
    Result of evaluating one FuzzyMatchAssertion against a response.

    Attributes:
        assertion: The assertion that was tested
        passed: Whether final_score reached the assertion threshold
        best_match: Response text of the best scoring window
        rouge_scores: ROUGE scores of the best window
        final_score: max of the ROUGE scores (1.0 for a direct token hit)
        match_position: Token span of the best window
    """
    assertion: FuzzyMatchAssertion
    passed: bool
    best_match: str
    rouge_scores: RougeScores = field(default_factory=RougeScores)
    final_score: float = 0.0
    match_position: MatchPosition = field(default_factory=MatchPosition)

    def __post_init__(self):
        if not 0.0 <= self.final_score <= 1.0:
            raise ValueError(f"final_score must be in [0.0, 1.0], got {self.final_score}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expected_text": self.assertion.expected_text,
            "threshold": self.assertion.threshold,
            "passed": self.passed,
            "best_match": self.best_match,
            "rouge_scores": self.rouge_scores.to_dict(),
            "final_score": self.final_score,
            "match_position": {
                "start": self.match_position.start,
                "end": self.match_position.end,
            },
        }
