"""
Evaluation Domain Layer

Entities, value objects, interfaces and exceptions for agent evaluation.
"""

from .entities import MessageBlock, MessageRole, ToolUsage, ToolResponse, TestCase
from .exceptions import InvalidArgumentError, ParseError, AgentError, ConfigurationError
from .interfaces import IAgent, AgentOutput
from .value_objects import (
    FuzzyMatchAssertion,
    FuzzyMatchResult,
    RougeScores,
    MatchPosition,
    SimilarityScores,
    TestCaseResult,
    TestCaseEvaluation,
)

__all__ = [
    # Entities
    'MessageBlock',
    'MessageRole',
    'ToolUsage',
    'ToolResponse',
    'TestCase',

    # Exceptions
    'InvalidArgumentError',
    'ParseError',
    'AgentError',
    'ConfigurationError',

    # Interfaces
    'IAgent',
    'AgentOutput',

    # Value Objects
    'FuzzyMatchAssertion',
    'FuzzyMatchResult',
    'RougeScores',
    'MatchPosition',
    'SimilarityScores',
    'TestCaseResult',
    'TestCaseEvaluation',
]
