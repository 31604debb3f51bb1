"""
Unit tests for token and result validation.
"""

import pytest

from unibreak.core.base import BreakAction, BreakClass, BreakResult, Token
from unibreak.core.streaming import break_text
from unibreak.core.tokenizer import tokenize
from unibreak.utils.validation import TokenValidator, ValidationError

A = BreakAction
C = BreakClass


class TestTokenValidator:
    """Test validation of token sequences."""

    def test_valid_tokens(self, validator):
        """Test tokenizer output validates cleanly."""
        text = "Hello, world! 123"
        assert validator.validate_tokens(tokenize(text), text) == []

    def test_adjacent_same_class(self):
        """Test non-maximal runs are reported."""
        validator = TokenValidator()
        issues = validator.validate_tokens([Token("ab", C.AL), Token("cd", C.AL)])
        assert len(issues) == 1
        assert "not maximal" in issues[0]

    def test_partition_mismatch(self):
        """Test tokens that do not rebuild the input are reported."""
        validator = TokenValidator()
        issues = validator.validate_tokens([Token("ab", C.AL)], "abc")
        assert any("partition" in issue for issue in issues)

    def test_strict_mode_reclassifies(self):
        """Test strict mode finds characters of another class."""
        token = Token("a1", C.AL)
        assert TokenValidator().validate_token(token) == []
        issues = TokenValidator(strict_mode=True).validate_token(token)
        assert len(issues) == 1
        assert "NU" in issues[0]

    def test_wrong_class_type(self):
        """Test a class that is not a BreakClass is reported."""
        issues = TokenValidator().validate_token(Token("a", "AL"))
        assert issues and "BreakClass" in issues[0]

    def test_assert_valid(self):
        """Test assert_valid raises on issues only."""
        validator = TokenValidator()
        validator.assert_valid(tokenize("fine text"), "fine text")
        with pytest.raises(ValidationError):
            validator.assert_valid([Token("x", C.AL), Token("y", C.AL)])


class TestResultValidation:
    """Test validation of break results."""

    def test_stream_results_valid(self, validator):
        """Test streamed results validate cleanly."""
        text = "one two\r\nthree"
        assert validator.validate_results(break_text(text), text) == []

    def test_explicit_before_end(self):
        """Test an explicit action before the last result is reported."""
        results = [
            BreakResult(Token("a", C.AL), A.EXPLICIT),
            BreakResult(Token(" ", C.SP), A.EXPLICIT),
        ]
        issues = TokenValidator().validate_results(results)
        assert len(issues) == 1
        assert "Result 0" in issues[0]

    def test_non_terminal_last_action(self):
        """Test the last result must carry a terminal action."""
        results = [BreakResult(Token("a", C.AL), A.DIRECT)]
        issues = TokenValidator().validate_results(results)
        assert any("non-terminal" in issue for issue in issues)

    def test_empty_results(self):
        """Test no results means no issues."""
        assert TokenValidator().validate_results([]) == []
