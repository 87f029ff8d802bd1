"""
Unit tests for the n-gram engine.
"""

import pytest

from hebo_eval.domain.exceptions import InvalidArgumentError
from hebo_eval.domain.services import get_ngrams, count_overlap


class TestGetNgrams:
    """Tests for get_ngrams()."""

    def test_bigrams(self):
        assert get_ngrams(["a", "b", "c"], 2) == ["a b", "b c"]

    def test_unigrams_are_the_tokens(self):
        assert get_ngrams(["a", "b", "c"], 1) == ["a", "b", "c"]

    def test_window_equal_to_length(self):
        assert get_ngrams(["a", "b", "c"], 3) == ["a b c"]

    def test_window_longer_than_tokens(self):
        assert get_ngrams(["a", "b"], 3) == []

    def test_empty_tokens(self):
        assert get_ngrams([], 1) == []

    def test_count_is_len_minus_n_plus_one(self):
        tokens = ["w%d" % i for i in range(10)]
        for n in range(1, 11):
            assert len(get_ngrams(tokens, n)) == 10 - n + 1

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_n_raises(self, n):
        with pytest.raises(InvalidArgumentError):
            get_ngrams(["a", "b"], n)

    def test_non_integer_n_raises(self):
        with pytest.raises(InvalidArgumentError):
            get_ngrams(["a", "b"], 1.5)
        with pytest.raises(InvalidArgumentError):
            get_ngrams(["a", "b"], True)

    def test_none_tokens_raises(self):
        with pytest.raises(InvalidArgumentError):
            get_ngrams(None, 1)


class TestCountOverlap:
    """Tests for count_overlap()."""

    def test_duplicates_matched_once(self):
        assert count_overlap(["x", "x"], ["x"]) == 1

    def test_multiset_minimum(self):
        assert count_overlap(["x", "x", "y"], ["x", "x", "x", "z"]) == 2

    def test_symmetric(self):
        a = ["a b", "b c", "a b", "c d"]
        b = ["a b", "c d", "c d"]
        assert count_overlap(a, b) == count_overlap(b, a) == 2

    def test_no_overlap(self):
        assert count_overlap(["a"], ["b"]) == 0

    def test_empty_sequences(self):
        assert count_overlap([], ["a"]) == 0
        assert count_overlap(["a"], []) == 0

    def test_bounded_by_shorter_sequence(self):
        a = ["a", "a", "a", "b"]
        b = ["a", "b"]
        assert count_overlap(a, b) <= min(len(a), len(b))

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            count_overlap(None, ["a"])
