"""
Assertion Parser

Extracts fuzzy-match assertions written inline in expected message content:

    The weather in [New York, NY|0.8] is [59°F|0.95].

A match is ``[`` + text + ``|`` + decimal + ``]`` where text is one or more
characters up to the first ``|`` (brackets allowed, the grammar is not
recursive) and decimal is an optional integer part, an optional dot, and at
least one digit after it (``5``, ``.5``, ``1.5``; not ``5.``). Anything that
fails the grammar is ordinary text.

Parsing, cleaning and detection share one scanner, so parse_assertions()
returns exactly one assertion per replacement made by clean_content().
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.value_objects import FuzzyMatchAssertion


@dataclass(frozen=True)
class AssertionMatch:
    """A grammar match: content[start:end] is the whole bracketed span."""
    start: int
    end: int
    text: str       # left-hand text, verbatim
    threshold: str  # right-hand decimal literal


def _scan_digits(content: str, pos: int) -> int:
    while pos < len(content) and content[pos].isascii() and content[pos].isdigit():
        pos += 1
    return pos


def _match_at(content: str, start: int) -> Optional[AssertionMatch]:
    """Try to match the grammar at content[start], which must be '['."""
    separator = content.find("|", start + 1)
    if separator == -1 or separator == start + 1:
        return None

    number_start = separator + 1
    pos = _scan_digits(content, number_start)
    if pos < len(content) and content[pos] == ".":
        fraction_end = _scan_digits(content, pos + 1)
        if fraction_end == pos + 1:
            return None
        pos = fraction_end
    elif pos == number_start:
        return None

    if pos >= len(content) or content[pos] != "]":
        return None

    return AssertionMatch(
        start=start,
        end=pos + 1,
        text=content[start + 1:separator],
        threshold=content[number_start:pos],
    )


def iter_matches(content: str) -> Iterator[AssertionMatch]:
    """
    Yield grammar matches left to right, non-overlapping.

    After a failed attempt at a '[' scanning resumes at the next '[';
    after a match it resumes right after the closing ']'.
    """
    if content is None:
        raise InvalidArgumentError("content is required")

    pos = content.find("[")
    while pos != -1:
        match = _match_at(content, pos)
        if match is not None:
            yield match
            pos = content.find("[", match.end)
        else:
            pos = content.find("[", pos + 1)


class AssertionParser:
    """Parser for fuzzy-match assertions embedded in message content."""

    @staticmethod
    def parse_assertions(content: str) -> List[FuzzyMatchAssertion]:
        """
        Extract assertions in document order.

        Args:
            content: Expected message content

        Returns:
            One FuzzyMatchAssertion per match; empty when there is none
        """
        return [
            FuzzyMatchAssertion.from_text(match.text.strip(), float(match.threshold))
            for match in iter_matches(content)
        ]

    @staticmethod
    def clean_content(content: str) -> str:
        """
        Replace every assertion span with its left-hand text, untrimmed.

        Text that fails the grammar is returned verbatim.
        """
        parts = []
        last = 0
        for match in iter_matches(content):
            parts.append(content[last:match.start])
            parts.append(match.text)
            last = match.end

        if last == 0:
            return content
        parts.append(content[last:])
        return "".join(parts)

    @staticmethod
    def has_assertions(content: str) -> bool:
        """True if content holds at least one assertion; stops at the first."""
        return next(iter_matches(content), None) is not None
