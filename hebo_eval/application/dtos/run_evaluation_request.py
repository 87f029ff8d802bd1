"""
RunEvaluationRequest DTO

Encapsulates what to evaluate and how.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from hebo_eval.domain.entities import TestCase

VALID_OUTPUT_FORMATS = ('text', 'markdown', 'json')


@dataclass
class RunEvaluationRequest:
    """
    Request to run an evaluation.

    Attributes:
        directory: Directory of .txt transcripts to load
        test_cases: Test cases to run instead of loading from a directory
        threshold: Pass threshold for cases without inline assertions
        max_concurrency: Maximum number of test cases in flight at once
        output_format: Report format ('text', 'markdown', 'json')
        stop_on_error: Stop loading at the first transcript that fails to parse

    Design Notes:
        - The agent is NOT part of the request; it is injected into the use case
    """
    directory: Optional[str] = None
    test_cases: Optional[Sequence[TestCase]] = None
    threshold: float = 0.8
    max_concurrency: int = 5
    output_format: str = 'text'
    stop_on_error: bool = False

    def __post_init__(self):
        """Validate request parameters"""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(
                f"threshold must be between 0.0 and 1.0, got {self.threshold}"
            )

        if self.max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be at least 1, got {self.max_concurrency}"
            )

        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.output_format}'. Must be one of: {list(VALID_OUTPUT_FORMATS)}"
            )

        if self.test_cases is None and not self.directory:
            raise ValueError("Either directory or test_cases must be provided")
