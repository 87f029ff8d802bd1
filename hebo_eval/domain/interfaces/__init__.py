"""
Evaluation Domain Interfaces

Contracts for collaborators outside the scoring core.
"""

from .agent import IAgent, AgentOutput

__all__ = [
    'IAgent',
    'AgentOutput',
]
