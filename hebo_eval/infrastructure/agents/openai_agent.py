"""
OpenAI-Compatible Agent

Talks to any chat-completions style endpoint (OpenAI, Hebo) over HTTP.
Each call sends the full conversation history, so one agent instance can be
shared by concurrently running test cases.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import aiohttp

from hebo_eval.domain.entities import MessageBlock, MessageRole
from hebo_eval.domain.exceptions import AgentError, ConfigurationError
from hebo_eval.domain.interfaces import AgentOutput, IAgent
from hebo_eval.logging_utils import StructuredLogger
from hebo_eval.models import ComponentType, EventType

ROLE_TO_OPENAI = {
    MessageRole.USER: "user",
    MessageRole.ASSISTANT: "assistant",
    MessageRole.HUMAN_AGENT: "assistant",
    MessageRole.SYSTEM: "system",
    MessageRole.DEVELOPER: "developer",
    MessageRole.TOOL: "function",
    MessageRole.FUNCTION: "function",
}

MODEL_PREFIXES = (
    ("gpt-", "openai", False),
    ("hebo-", "hebo", True),
    ("claude-", "anthropic", False),
)


def get_provider_from_model(model_name: str) -> Tuple[str, str]:
    """
    Work out which provider serves a model.

    Args:
        model_name: Agent name given on the command line (e.g. 'gpt-4o')

    Returns:
        (provider, model) where model has the 'hebo-' prefix removed

    Raises:
        ConfigurationError: If no provider matches the name
    """
    for prefix, provider, strip_prefix in MODEL_PREFIXES:
        if model_name.startswith(prefix):
            model = model_name[len(prefix):] if strip_prefix else model_name
            if not model:
                raise ConfigurationError(f"Missing model name after '{prefix}'")
            return provider, model

    raise ConfigurationError(
        f"Unknown model '{model_name}'. Model names must start with gpt-, hebo- or claude-"
    )


def to_openai_messages(messages: Sequence[MessageBlock]) -> List[Dict[str, str]]:
    """Convert message blocks to chat-completions messages (tool traffic is not sent)."""
    return [
        {"role": ROLE_TO_OPENAI.get(block.role, "user"), "content": block.content}
        for block in messages
    ]


def extract_response_text(data: Dict[str, Any]) -> str:
    """
    Pull the reply text out of a provider response body.

    Accepts chat-completions bodies (choices[0].message.content) and
    Responses-API bodies (output list of output_text parts).

    Raises:
        AgentError: If the body holds an error or no reply text
    """
    if not isinstance(data, dict):
        raise AgentError("Malformed response body")

    error = data.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise AgentError(f"Provider error: {message}")

    choices = data.get("choices")
    if choices:
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise AgentError("Malformed response body")
        message = choices[0].get("message") or {}
        if not isinstance(message, dict):
            raise AgentError("Malformed response body")
        content = message.get("content")
        if isinstance(content, str):
            return content
        raise AgentError("Response choice has no text content")

    output = data.get("output")
    if output:
        if not isinstance(output, list):
            raise AgentError("Malformed response body")
        parts = []
        for item in output:
            if not isinstance(item, dict):
                raise AgentError("Malformed response body")
            for part in item.get("content") or []:
                if isinstance(part, dict) and part.get("type") == "output_text":
                    parts.append(part.get("text", ""))
        if parts:
            return "".join(parts)

    raise AgentError("No response content found in provider output")


class OpenAICompatibleAgent(IAgent):
    """
    Agent backed by an OpenAI-compatible HTTP API.

    Key points:
    - POSTs {"model", "messages"} to {base_url}/chat/completions
    - The auth header is rendered from a format string such as 'Bearer {api_key}'
    - HTTP errors, timeouts and unreadable bodies raise AgentError
    """

    def __init__(
        self,
        model: str,
        base_url: str,
        api_key: str,
        provider: str = "openai",
        timeout: float = 30.0,
        auth_header_name: str = "Authorization",
        auth_header_format: str = "Bearer {api_key}",
    ):
        if not model:
            raise ConfigurationError("Model is required")
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key is required and cannot be empty")

        self._model = model
        self._endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self._provider = provider
        self._timeout = timeout
        self._headers = {
            "Content-Type": "application/json",
            auth_header_name: auth_header_format.format(api_key=api_key),
        }
        self.logger = StructuredLogger(ComponentType.AGENT)

    @property
    def agent_id(self) -> str:
        return f"{self._provider}:{self._model}"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def send_input(self, messages: Sequence[MessageBlock]) -> AgentOutput:
        payload = {
            "model": self._model,
            "messages": to_openai_messages(messages),
        }

        self.logger.log_event(
            self.agent_id,
            EventType.AGENT_REQUEST,
            {"endpoint": self._endpoint, "message_count": len(messages)},
            level=logging.DEBUG,
        )

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self._endpoint,
                    json=payload,
                    headers=self._headers,
                    timeout=aiohttp.ClientTimeout(total=self._timeout),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise AgentError(f"HTTP {response.status}: {error_text[:200]}")

                    try:
                        data = await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as e:
                        raise AgentError(f"Malformed response body: {e}") from e

        except asyncio.TimeoutError as e:
            raise AgentError(f"Timeout after {self._timeout}s") from e
        except aiohttp.ClientError as e:
            raise AgentError(f"HTTP Client Error: {e}") from e

        text = extract_response_text(data)
        metadata = self._metadata(data)

        self.logger.log_event(
            self.agent_id,
            EventType.AGENT_RESPONSE,
            {"response_hash": self.logger.hash_payload(text)},
            metrics=metadata.get("usage"),
            level=logging.DEBUG,
        )

        return AgentOutput(response=text, metadata=metadata)

    def _metadata(self, data: Dict[str, Any]) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {"model": data.get("model", self._model), "provider": self._provider}
        if data.get("id"):
            metadata["id"] = data["id"]
        usage: Optional[Dict[str, Any]] = data.get("usage")
        if isinstance(usage, dict):
            metadata["usage"] = usage
        return metadata
