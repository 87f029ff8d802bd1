"""
Domain Services for Evaluation

Pure, stateless text-similarity and scoring logic. No I/O.
"""

from .tokenizer import tokenize, normalize_text, is_number_match
from .ngram_engine import get_ngrams, count_overlap
from .sequence_similarity import compute_lcs_length
from .assertion_parser import AssertionParser, AssertionMatch, iter_matches
from .rouge_calculator import compute_rouge
from .fuzzy_match_scoring_service import FuzzyMatchScoringService
from .scoring_service import ScoringService
from .transcript_formatter import format_test_case_plain, format_message_block_plain

__all__ = [
    "tokenize",
    "normalize_text",
    "is_number_match",
    "get_ngrams",
    "count_overlap",
    "compute_lcs_length",
    "AssertionParser",
    "AssertionMatch",
    "iter_matches",
    "compute_rouge",
    "FuzzyMatchScoringService",
    "ScoringService",
    "format_test_case_plain",
    "format_message_block_plain",
]
