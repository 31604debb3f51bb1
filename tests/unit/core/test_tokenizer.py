"""
Unit tests for the incremental tokenizer.
"""

import pytest

from unibreak.core.base import BreakClass, Token
from unibreak.core.classifier import classify
from unibreak.core.tokenizer import Tokenizer, TokenizerStateError, iter_tokens, tokenize

C = BreakClass


def tokenize_in_chunks(chunks):
    tokenizer = Tokenizer()
    tokens = []
    for chunk in chunks:
        tokens.extend(tokenizer.feed(chunk))
    tokens.extend(tokenizer.finish())
    return tokens


class TestTokenizer:
    """Test grouping text into same-class runs."""

    def test_simple_words(self):
        """Test a simple two word text."""
        assert tokenize("hello world") == [
            Token("hello", C.AL),
            Token(" ", C.SP),
            Token("world", C.AL),
        ]

    def test_runs_are_maximal(self):
        """Test consecutive characters of one class form a single token."""
        tokens = tokenize("abc123   ")
        assert [(t.text, t.break_class) for t in tokens] == [
            ("abc", C.AL),
            ("123", C.NU),
            ("   ", C.SP),
        ]

    def test_empty_text(self):
        """Test an empty text produces no tokens."""
        assert tokenize("") == []

    def test_empty_feed(self):
        """Test feeding an empty string produces nothing and holds nothing."""
        tokenizer = Tokenizer()
        assert tokenizer.feed("") == []
        assert tokenizer.pending == ""
        assert tokenizer.finish() == []

    def test_line_endings(self):
        """Test CR and LF are separate tokens and repeated LFs form one run."""
        assert [t.break_class for t in tokenize("a\r\nb")] == [C.AL, C.CR, C.LF, C.AL]
        assert tokenize("\n\n") == [Token("\n\n", C.LF)]

    def test_non_ascii(self):
        """Test classification of non-ASCII runs."""
        tokens = tokenize("café 你好")
        assert tokens[0] == Token("café", C.AL)
        assert tokens[2] == Token("你好", C.ID)

    def test_combining_mark_is_own_token(self):
        """Test a combining mark forms its own run."""
        tokens = tokenize("e\u0301a")
        assert [t.break_class for t in tokens] == [C.AL, C.CM, C.AL]

    def test_partition(self, sample_texts, validator):
        """Test tokens partition the input and never mix classes."""
        for name, text in sample_texts.items():
            tokens = tokenize(text)
            assert "".join(t.text for t in tokens) == text, name
            assert validator.validate_tokens(tokens, text) == [], name


class TestChunkInvariance:
    """Test that chunk boundaries never change the token sequence."""

    def test_every_split_point(self, sample_texts):
        """Test splitting at every offset yields the whole-text tokens."""
        for name, text in sample_texts.items():
            expected = tokenize(text)
            for i in range(len(text) + 1):
                assert tokenize_in_chunks([text[:i], text[i:]]) == expected, f"{name} split at {i}"

    def test_character_at_a_time(self, sample_texts):
        """Test feeding one character at a time."""
        for name, text in sample_texts.items():
            assert tokenize_in_chunks(list(text)) == tokenize(text), name

    def test_pending_run_held_back(self):
        """Test the run open at the end of a chunk waits for more input."""
        tokenizer = Tokenizer()
        assert tokenizer.feed("hello wo") == [Token("hello", C.AL), Token(" ", C.SP)]
        assert tokenizer.pending == "wo"
        assert tokenizer.feed("rld") == []
        assert tokenizer.pending == "world"
        assert tokenizer.finish() == [Token("world", C.AL)]

    def test_empty_chunks_interleaved(self):
        """Test empty chunks between others change nothing."""
        assert tokenize_in_chunks(["ab", "", "cd", "", " "]) == [Token("abcd", C.AL), Token(" ", C.SP)]

    def test_iter_tokens(self):
        """Test the lazy chunk tokenizer."""
        assert list(iter_tokens(["hel", "lo ", "there"])) == tokenize("hello there")


class TestTokenizerState:
    """Test the tokenizer lifecycle."""

    def test_feed_after_finish(self):
        """Test feeding a finished tokenizer raises."""
        tokenizer = Tokenizer()
        tokenizer.finish()
        assert tokenizer.finished
        with pytest.raises(TokenizerStateError):
            tokenizer.feed("more")

    def test_finish_twice(self):
        """Test finishing twice raises."""
        tokenizer = Tokenizer()
        tokenizer.feed("text")
        tokenizer.finish()
        with pytest.raises(TokenizerStateError):
            tokenizer.finish()

    def test_unclassifiable_remainder(self):
        """Test a classifier failure emits the rest of the chunk as one XX token and stops."""
        def partial(codepoint):
            return None if codepoint == ord("?") else classify(codepoint)

        tokenizer = Tokenizer(classifier=partial)
        assert tokenizer.feed("ab") == []
        assert tokenizer.feed("c?d e") == [Token("abc", C.AL), Token("?d e", C.XX)]
        assert tokenizer.finished
        assert tokenizer.pending == ""
        with pytest.raises(TokenizerStateError):
            tokenizer.feed("more")
        with pytest.raises(TokenizerStateError):
            tokenizer.finish()

    def test_unclassifiable_joins_pending_unknown_run(self):
        """Test the remainder merges with an XX run still pending."""
        def partial(codepoint):
            if codepoint == ord("?"):
                return None
            if codepoint == ord("x"):
                return C.XX
            return classify(codepoint)

        tokenizer = Tokenizer(classifier=partial)
        assert tokenizer.feed("ax") == [Token("a", C.AL)]
        assert tokenizer.feed("x?b") == [Token("xx?b", C.XX)]
        assert tokenizer.finished
