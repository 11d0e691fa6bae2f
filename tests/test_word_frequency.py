from collections import Counter

import pytest

from plagiarism_detector.core.word_frequency import build_frequency_map, tokenize


class TestTokenize:

    def test_lowercases_and_strips_punctuation(self):
        assert list(tokenize("Hello, World!  foo-bar 42")) == ["hello", "world", "foobar", "42"]

    def test_splits_on_any_whitespace_run(self):
        assert list(tokenize("one\ttwo\n\nthree   four\r\nfive")) == ["one", "two", "three", "four", "five"]

    def test_unicode_spaces_separate_words(self):
        assert list(tokenize("a\u2003b\u3000c\u2028d\x1fe")) == ["a", "b", "c", "d", "e"]

    @pytest.mark.parametrize("joiner", ["\u00a0", "\u2007", "\u202f", "\u0085"])
    def test_no_break_spaces_join_words(self, joiner):
        assert list(tokenize(f"foo{joiner}bar baz")) == ["foobar", "baz"]

    def test_no_break_space_counts_as_one_word(self):
        assert build_frequency_map("foo\u00a0bar") == {"foobar": 1}

    def test_drops_tokens_that_become_empty(self):
        assert list(tokenize("!!! ??? ... -- a")) == ["a"]

    def test_non_ascii_letters_are_removed(self):
        assert list(tokenize("caf\u00e9 na\u00efve")) == ["caf", "nave"]

    def test_keeps_order_and_duplicates(self):
        assert list(tokenize("b a b")) == ["b", "a", "b"]

    def test_is_lazy(self):
        tokens = tokenize("alpha beta")
        assert next(tokens) == "alpha"
        assert next(tokens) == "beta"

    def test_empty_text(self):
        assert list(tokenize("")) == []
        assert list(tokenize("   \n\t ")) == []


class TestBuildFrequencyMap:

    def test_counts_normalized_words(self):
        counts = build_frequency_map("The cat saw THE dog. the end")
        assert counts == Counter({"the": 3, "cat": 1, "saw": 1, "dog": 1, "end": 1})

    def test_no_zero_or_empty_entries(self):
        counts = build_frequency_map("... word ,,, word !!")
        assert "" not in counts
        assert all(count >= 1 for count in counts.values())
        assert counts == {"word": 2}

    def test_deterministic(self):
        text = "to be or not to be"
        assert build_frequency_map(text) == build_frequency_map(text)

    def test_punctuation_only_text_is_empty(self):
        assert build_frequency_map("!!! ??? ...") == {}
