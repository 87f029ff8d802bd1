"""
Unit tests for the tokenizer.

Strict tokenization keeps case and punctuation; normalize_text is the
lenient policy used by ROUGE.
"""

import pytest

from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.services import tokenize, normalize_text, is_number_match


class TestTokenize:
    """Tests for tokenize()."""

    def test_splits_on_whitespace(self):
        assert tokenize("The answer is 42") == ["The", "answer", "is", "42"]

    def test_collapses_runs_of_whitespace(self):
        assert tokenize("  a \t b\n\nc  ") == ["a", "b", "c"]

    def test_keeps_case_and_punctuation(self):
        assert tokenize("Hello, World!") == ["Hello,", "World!"]

    def test_empty_and_blank_text(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            tokenize(None)

    def test_non_string_raises(self):
        with pytest.raises(InvalidArgumentError):
            tokenize(42)

    def test_invalid_argument_is_value_error(self):
        """Callers catching ValueError also catch InvalidArgumentError."""
        with pytest.raises(ValueError):
            tokenize(None)


class TestNormalizeText:
    """Tests for normalize_text()."""

    def test_lowercases_and_strips_punctuation(self):
        assert normalize_text('New York, NY! "(ok)" [x]; y: z?') == "new york ny ok x y z"

    def test_keeps_decimal_point(self):
        assert normalize_text("Pi is 3.14.") == "pi is 3.14"
        assert normalize_text("3.5") != normalize_text("35")

    def test_leaves_other_symbols(self):
        assert normalize_text("59°F - $5") == "59°f - $5"

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            normalize_text(None)


class TestIsNumberMatch:
    """Tests for is_number_match()."""

    def test_digit_and_word(self):
        assert is_number_match("4", "four") is True
        assert is_number_match("twenty", "20") is True

    def test_numeric_equivalence(self):
        assert is_number_match("4", "4.0") is True
        assert is_number_match("1e3", "1000") is True

    def test_only_plain_decimals_count_as_numbers(self):
        assert is_number_match("1_000", "1000") is False
        assert is_number_match("inf", "infinity") is False
        assert is_number_match("nan", "nan") is False

    def test_different_numbers(self):
        assert is_number_match("4", "five") is False
        assert is_number_match("4", "5") is False

    def test_words_beyond_twenty_are_not_known(self):
        assert is_number_match("21", "twenty-one") is False

    def test_non_numbers(self):
        assert is_number_match("cat", "dog") is False
