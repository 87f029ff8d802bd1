"""
Application DTOs
"""

from .run_evaluation_request import RunEvaluationRequest, VALID_OUTPUT_FORMATS
from .run_evaluation_response import RunEvaluationResponse

__all__ = [
    'RunEvaluationRequest',
    'RunEvaluationResponse',
    'VALID_OUTPUT_FORMATS',
]
