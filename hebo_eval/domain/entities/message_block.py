"""
Domain Entity: MessageBlock

One turn of a conversational transcript.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class MessageRole(str, Enum):
    """Role of the author of a message block."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    HUMAN_AGENT = "human_agent"
    TOOL = "tool"
    FUNCTION = "function"
    DEVELOPER = "developer"

    @classmethod
    def from_label(cls, label: str) -> "MessageRole":
        """
        Resolve a role label as written in transcripts ("human agent", "User").

        Raises:
            ValueError: If the label names no known role
        """
        normalized = label.strip().lower().replace(" ", "_")
        return cls(normalized)

    @property
    def label(self) -> str:
        """Role as it appears in transcript files."""
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class ToolUsage:
    name: str
    args: str  # raw JSON text


@dataclass(frozen=True)
class ToolResponse:
    content: str


@dataclass(frozen=True)
class MessageBlock:
    """
    A single message in a test case.

    Content may embed fuzzy-match assertions (``[text|threshold]``).
    Immutable once constructed.
    """

    role: MessageRole
    content: str
    tool_usages: Tuple[ToolUsage, ...] = field(default_factory=tuple)
    tool_responses: Tuple[ToolResponse, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate invariants."""
        if not isinstance(self.role, MessageRole):
            raise ValueError(f"role must be a MessageRole, got {self.role!r}")
        if self.content is None:
            raise ValueError("content cannot be None")
        # Accept lists from callers but store tuples
        object.__setattr__(self, "tool_usages", tuple(self.tool_usages))
        object.__setattr__(self, "tool_responses", tuple(self.tool_responses))
