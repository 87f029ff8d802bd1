"""
Agent Implementations

Concrete implementations of the IAgent interface.

Available Agents:
- OpenAICompatibleAgent: chat-completions endpoints (OpenAI, Hebo)
"""

from .openai_agent import (
    OpenAICompatibleAgent,
    get_provider_from_model,
    to_openai_messages,
    extract_response_text,
)

__all__ = [
    'OpenAICompatibleAgent',
    'get_provider_from_model',
    'to_openai_messages',
    'extract_response_text',
]
