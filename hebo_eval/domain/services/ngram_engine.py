"""
N-gram Engine

Sliding-window n-grams and multiset overlap between n-gram sequences.
"""

from collections import Counter
from typing import List, Sequence

from hebo_eval.domain.exceptions import InvalidArgumentError


def get_ngrams(tokens: Sequence[str], n: int) -> List[str]:
    """
    Build one n-gram per contiguous window of n tokens.

    Args:
        tokens: Token sequence
        n: Window size, at least 1

    Returns:
        Space-joined n-grams in window-start order; empty when len(tokens) < n

    Raises:
        InvalidArgumentError: If n is not a positive integer or tokens is None
    """
    if tokens is None:
        raise InvalidArgumentError("tokens are required")
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidArgumentError(f"n-gram size must be a positive integer, got {n!r}")

    return [" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def count_overlap(a: Sequence[str], b: Sequence[str]) -> int:
    """
    Size of the multiset intersection of two n-gram sequences.

    Each n-gram in b can be matched at most once, so duplicates count
    min(count in a, count in b) times. The result is symmetric in a and b.
    """
    if a is None or b is None:
        raise InvalidArgumentError("n-gram sequences are required")

    remaining = Counter(b)
    overlap = 0
    for ngram in a:
        if remaining[ngram] > 0:
            overlap += 1
            remaining[ngram] -= 1

    return overlap
