"""
Agent Interface

This interface defines how the evaluation runner talks to the agent under
test: given the conversation so far, produce a response string.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from hebo_eval.domain.entities import MessageBlock


@dataclass
class AgentOutput:
    """
    Response received from an agent.

    Attributes:
        response: The agent's reply text
        metadata: Provider-specific details (model, usage, ids)
        error: Error message if the provider reported a failure
    """
    response: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class IAgent(ABC):
    """
    Interface for an agent under evaluation.

    Implementations:
    - OpenAICompatibleAgent: chat-completions style HTTP endpoints
    - Test doubles in tests/

    Requirements:
    1. **No hidden state between test cases**: every send_input() call
       receives the full history it should answer.
    2. **Errors**: provider failures raise AgentError (or return an
       AgentOutput with error set); the runner records either as a failed
       evaluation.
    """

    @property
    @abstractmethod
    def agent_id(self) -> str:
        """Stable identifier used in reports (e.g. 'openai:gpt-4o')."""
        pass

    @abstractmethod
    async def send_input(self, messages: Sequence[MessageBlock]) -> AgentOutput:
        """
        Send the conversation history and return the agent's reply.

        Args:
            messages: Message blocks in turn order

        Returns:
            AgentOutput with the response text

        Raises:
            AgentError: If the provider cannot produce a response
        """
        pass

    async def cleanup(self) -> None:
        """Release resources held by the agent."""
        return None
