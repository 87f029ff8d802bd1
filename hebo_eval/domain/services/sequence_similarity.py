"""
Sequence Similarity

Longest common subsequence length over tokens, characters, or any other
elements compared by value equality.
"""

from typing import Any, List, Sequence

from hebo_eval.domain.exceptions import InvalidArgumentError


def compute_lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """
    Length of the longest common subsequence of a and b.

    Dynamic programming in O(len(a) * len(b)) time with two rolling rows
    sized to the shorter sequence.

    Raises:
        InvalidArgumentError: If either sequence is None
    """
    if a is None or b is None:
        raise InvalidArgumentError("sequences are required")

    # Iterate over the longer sequence so rows stay short
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return 0

    previous: List[int] = [0] * (len(b) + 1)
    for item in a:
        current = [0] * (len(b) + 1)
        for j, other in enumerate(b, start=1):
            if item == other:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current

    return previous[len(b)]
