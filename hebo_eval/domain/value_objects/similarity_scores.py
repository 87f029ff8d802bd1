"""
Value object holding the text-similarity signals computed by the scorer.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SimilarityScores:
    """
    Similarity between the cleaned expected text and the actual response.

    Attributes:
        ngram_score: Mean n-gram overlap ratio against the expected n-grams
        lcs_score: Token LCS length divided by the expected token count
        combined: Weighted combination of the two
    """
    ngram_score: float
    lcs_score: float
    combined: float

    def __post_init__(self):
        """Validate invariants."""
        for name, value in [
            ("ngram_score", self.ngram_score),
            ("lcs_score", self.lcs_score),
            ("combined", self.combined),
        ]:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")

    def to_dict(self) -> Dict[str, float]:
        return {
            "ngram_score": self.ngram_score,
            "lcs_score": self.lcs_score,
            "combined": self.combined,
        }
