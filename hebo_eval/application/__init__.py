"""
Evaluation Application Layer

Use cases and DTOs that orchestrate evaluation runs.
"""

from .dtos import RunEvaluationRequest, RunEvaluationResponse
from .use_cases import RunEvaluationUseCase

__all__ = [
    'RunEvaluationRequest',
    'RunEvaluationResponse',
    'RunEvaluationUseCase',
]
