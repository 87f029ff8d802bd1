"""
RunEvaluationResponse DTO

Encapsulates results from an evaluation run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from hebo_eval.domain.value_objects import TestCaseEvaluation


@dataclass
class RunEvaluationResponse:
    """
    Response from running an evaluation.

    Attributes:
        run_id: Unique identifier for this run
        agent_id: Identifier of the evaluated agent
        total: Number of test cases executed
        passed: Number of successful test cases
        failed: Number of failed test cases
        mean_score: Mean score over all test cases (0.0 to 1.0)
        mean_execution_time: Mean per-case execution time in milliseconds
        p95_execution_time: 95th percentile execution time in milliseconds
        duration: Wall time of the whole run in seconds
        evaluations: Per-case evaluations, in input order
        load_errors: (file_path, message) for transcripts that failed to load
        error: Optional error message if the run itself failed
    """
    run_id: str
    agent_id: str
    total: int
    passed: int
    failed: int
    mean_score: float
    mean_execution_time: float
    p95_execution_time: float
    duration: float
    evaluations: List[TestCaseEvaluation] = field(default_factory=list)
    load_errors: List[Tuple[str, str]] = field(default_factory=list)
    error: Optional[str] = None

    def __post_init__(self):
        """Validate response values"""
        if self.passed + self.failed != self.total:
            raise ValueError(
                f"passed ({self.passed}) + failed ({self.failed}) must equal total ({self.total})"
            )

        if not 0.0 <= self.mean_score <= 1.0:
            raise ValueError(f"mean_score must be between 0.0 and 1.0, got {self.mean_score}")

        for name, value in [
            ('mean_execution_time', self.mean_execution_time),
            ('p95_execution_time', self.p95_execution_time),
            ('duration', self.duration),
        ]:
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")

    @property
    def succeeded(self) -> bool:
        """True when the run completed, nothing failed to load and every case passed"""
        return self.error is None and not self.load_errors and self.failed == 0

    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.passed / self.total

    @property
    def failures(self) -> List[TestCaseEvaluation]:
        return [evaluation for evaluation in self.evaluations if not evaluation.success]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'run_id': self.run_id,
            'agent_id': self.agent_id,
            'summary': {
                'total': self.total,
                'passed': self.passed,
                'failed': self.failed,
                'pass_rate': self.pass_rate,
                'mean_score': self.mean_score,
                'mean_execution_time_ms': self.mean_execution_time,
                'p95_execution_time_ms': self.p95_execution_time,
                'duration_seconds': self.duration,
            },
            'results': [evaluation.to_dict() for evaluation in self.evaluations],
            'load_errors': [
                {'file_path': file_path, 'error': message}
                for file_path, message in self.load_errors
            ],
            'error': self.error,
        }
