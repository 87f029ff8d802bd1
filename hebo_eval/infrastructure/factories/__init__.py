"""
Evaluation Factories

Factory classes for creating fully-wired evaluation components.
"""

from .evaluation_factory import EvaluationFactory

__all__ = [
    'EvaluationFactory',
]
