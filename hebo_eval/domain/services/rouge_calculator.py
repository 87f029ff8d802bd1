"""
ROUGE Calculator

Recall-oriented scores of a candidate text against a reference text, built
on the n-gram engine and LCS. Both texts go through normalize_text() before
tokenizing so the comparison ignores case and punctuation on both sides.
"""

from typing import List

from hebo_eval.domain.value_objects import RougeScores
from .tokenizer import tokenize, normalize_text
from .ngram_engine import get_ngrams, count_overlap
from .sequence_similarity import compute_lcs_length


def rouge_n(reference: List[str], candidate: List[str], n: int) -> float:
    """Fraction of reference n-grams found in the candidate (0 if the reference has none)."""
    reference_ngrams = get_ngrams(reference, n)
    if not reference_ngrams:
        return 0.0
    overlap = count_overlap(reference_ngrams, get_ngrams(candidate, n))
    return overlap / len(reference_ngrams)


def rouge_lcs(reference: List[str], candidate: List[str]) -> float:
    """LCS length over reference length (0 for an empty reference)."""
    if not reference:
        return 0.0
    return compute_lcs_length(reference, candidate) / len(reference)


def compute_rouge(reference: str, candidate: str) -> RougeScores:
    """
    Compute ROUGE-1, ROUGE-2 and ROUGE-L for candidate against reference.

    Args:
        reference: Expected text
        candidate: Text being evaluated

    Returns:
        RougeScores with each score in [0, 1]
    """
    reference_tokens = tokenize(normalize_text(reference))
    candidate_tokens = tokenize(normalize_text(candidate))

    return RougeScores(
        rouge1=rouge_n(reference_tokens, candidate_tokens, 1),
        rouge2=rouge_n(reference_tokens, candidate_tokens, 2),
        rouge_l=rouge_lcs(reference_tokens, candidate_tokens),
    )
