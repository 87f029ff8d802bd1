"""
Value object for an inline fuzzy-match assertion.

This is a pure data structure with no I/O dependencies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FuzzyMatchAssertion:
    """
    Expectation extracted from ``[expected_text|threshold]`` in message content.

    Attributes:
        expected_text: Trimmed text the response must contain (approximately)
        threshold: Minimum similarity score in [0, 1]; values above 1 are
            accepted and can never be satisfied
        description: Human-readable label, equal to expected_text when parsed
    """
    expected_text: str
    threshold: float
    description: str

    def __post_init__(self):
        """Validate invariants."""
        if self.threshold < 0:
            raise ValueError(f"threshold cannot be negative, got {self.threshold}")

    @classmethod
    def from_text(cls, expected_text: str, threshold: float) -> "FuzzyMatchAssertion":
        """Build an assertion whose description mirrors its expected text."""
        return cls(expected_text=expected_text, threshold=threshold, description=expected_text)
