"""Domain entities for test case transcripts."""

from .message_block import MessageBlock, MessageRole, ToolUsage, ToolResponse
from .test_case import TestCase

__all__ = [
    "MessageBlock",
    "MessageRole",
    "ToolUsage",
    "ToolResponse",
    "TestCase",
]
