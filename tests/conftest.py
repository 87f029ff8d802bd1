"""
Shared test fixtures and utilities for hebo-eval tests
"""

from typing import List, Optional, Sequence

import pytest
from unittest.mock import AsyncMock, MagicMock

from hebo_eval.config import clear_config_cache
from hebo_eval.domain.entities import MessageBlock, MessageRole, TestCase
from hebo_eval.domain.interfaces import AgentOutput, IAgent


def create_mock_aiohttp_response(status=200, json_data=None, text_data=""):
    """
    Helper to create a properly mocked aiohttp response with async context managers.

    Args:
        status: HTTP status code
        json_data: Dictionary to return from response.json()
        text_data: String to return from response.text()

    Returns:
        Tuple of (mock_session_context, mock_session, mock_response) ready to use with patch
    """
    mock_response = MagicMock()
    mock_response.status = status

    if json_data is not None:
        mock_response.json = AsyncMock(return_value=json_data)
    mock_response.text = AsyncMock(return_value=text_data)

    # Mock async context manager for session.post()
    mock_post_context = AsyncMock()
    mock_post_context.__aenter__.return_value = mock_response
    mock_post_context.__aexit__.return_value = None

    mock_session = MagicMock()
    mock_session.post.return_value = mock_post_context

    # Mock ClientSession as async context manager
    mock_session_context = AsyncMock()
    mock_session_context.__aenter__.return_value = mock_session
    mock_session_context.__aexit__.return_value = None

    return mock_session_context, mock_session, mock_response


def create_mock_aiohttp_error(exception):
    """
    Helper to create a mock session whose post() raises an exception.

    Returns:
        mock_session_context ready to use with patch
    """
    mock_session = MagicMock()
    mock_session.post.side_effect = exception

    mock_session_context = AsyncMock()
    mock_session_context.__aenter__.return_value = mock_session
    mock_session_context.__aexit__.return_value = None

    return mock_session_context


def make_test_case(expected: str, user: str = "Hello", test_case_id: str = "case") -> TestCase:
    """Two-block test case: one user message, one expected assistant message."""
    return TestCase(
        id=test_case_id,
        name=test_case_id,
        message_blocks=(
            MessageBlock(role=MessageRole.USER, content=user),
            MessageBlock(role=MessageRole.ASSISTANT, content=expected),
        ),
    )


class FakeAgent(IAgent):
    """
    In-memory agent for tests.

    Replies with a fixed response, or with responses[user message] when a
    mapping is given. Records every conversation it receives.
    """

    def __init__(
        self,
        response: str = "",
        responses: Optional[dict] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.response = response
        self.responses = responses or {}
        self.error = error
        self.delay = delay
        self.calls: List[Sequence[MessageBlock]] = []
        self.cleaned_up = False

    @property
    def agent_id(self) -> str:
        return "fake:agent"

    async def send_input(self, messages: Sequence[MessageBlock]) -> AgentOutput:
        import asyncio

        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        last_content = messages[-1].content if messages else ""
        return AgentOutput(response=self.responses.get(last_content, self.response))

    async def cleanup(self) -> None:
        self.cleaned_up = True


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Every test starts from an empty config cache."""
    clear_config_cache()
    yield
    clear_config_cache()
