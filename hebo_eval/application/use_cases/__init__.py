"""
Application Use Cases
"""

from .run_evaluation_use_case import RunEvaluationUseCase

__all__ = [
    'RunEvaluationUseCase',
]
