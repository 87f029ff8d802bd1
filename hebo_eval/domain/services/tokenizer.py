"""
Tokenizer

Splits text into whitespace-delimited tokens. The policy is strict: tokens
keep their case and punctuation, so two tokens are equal only when their
characters are identical. Every similarity computation must tokenize both
operands with the same policy; mixing policies silently lowers scores.

normalize_text() is the lenient policy used by ROUGE. It is always applied
to both operands before tokenizing.
"""

import re
from typing import List

from hebo_eval.domain.exceptions import InvalidArgumentError

_PUNCTUATION = re.compile(r'[,!?;:()\[\]"]|(?<!\d)\.|\.(?!\d)')
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_NUMBER_WORDS = {
    "0": "zero", "1": "one", "2": "two", "3": "three", "4": "four",
    "5": "five", "6": "six", "7": "seven", "8": "eight", "9": "nine",
    "10": "ten", "11": "eleven", "12": "twelve", "13": "thirteen",
    "14": "fourteen", "15": "fifteen", "16": "sixteen", "17": "seventeen",
    "18": "eighteen", "19": "nineteen", "20": "twenty",
}


def _require_text(text: str) -> None:
    if text is None:
        raise InvalidArgumentError("text is required")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a str, got {type(text).__name__}")


def tokenize(text: str) -> List[str]:
    """
    Split text on runs of whitespace.

    Args:
        text: Raw text

    Returns:
        Tokens in order; empty for empty or all-whitespace input

    Raises:
        InvalidArgumentError: If text is None or not a string
    """
    _require_text(text)
    return text.split()


def normalize_text(text: str) -> str:
    """
    Lower-case text and strip the punctuation set .,!?;:()[]\".

    A dot between two digits is a decimal point and is kept, so "3.5" stays
    distinct from "35".
    """
    _require_text(text)
    return _PUNCTUATION.sub("", text.lower())


def _as_number(token: str):
    if not _DECIMAL.fullmatch(token):
        return None
    return float(token)


def is_number_match(token1: str, token2: str) -> bool:
    """
    Check whether two tokens denote the same number ("4" and "four", "4" and "4.0").

    Number words cover zero through twenty.
    """
    if _NUMBER_WORDS.get(token1) == token2 or _NUMBER_WORDS.get(token2) == token1:
        return True

    first, second = _as_number(token1), _as_number(token2)
    if first is not None and second is not None:
        return first == second

    return False
