"""
Evaluation Infrastructure

Infrastructure implementations (agents, loaders, reporting, factories).
"""

from .agents import OpenAICompatibleAgent
from .loaders import TestCaseLoader

__all__ = [
    'OpenAICompatibleAgent',
    'TestCaseLoader',
]
