"""
Domain Exceptions

Errors raised by the evaluation core. Malformed assertion grammar is never
an error; it is simply not an assertion.
"""

from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised for input the core refuses to coerce (None text, n < 1, oversize input)."""
    pass


class ParseError(Exception):
    """Raised when a transcript file does not follow the test case format."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class AgentError(Exception):
    """Raised when an agent provider fails to produce a response."""
    pass


class ConfigurationError(Exception):
    """Raised for invalid configuration, unknown providers, or missing credentials."""
    pass
