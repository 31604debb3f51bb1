"""
Validation utilities for tokens and break results.

This module checks the structural guarantees of the tokenizer and the engine:
tokens partition the input exactly, each token holds a single class, and a
result sequence ends with exactly one terminal action.
"""

import logging
from typing import List, Optional, Sequence

from unibreak.core.base import BreakAction, BreakClass, BreakResult, Token
from unibreak.core.classifier import classify

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised by ``assert_valid`` when validation finds issues."""
    pass


class TokenValidator:
    """
    Validator for token sequences and break results.

    Examples:
        ```python
        validator = TokenValidator()
        issues = validator.validate_tokens(tokenize(text), text)
        assert not issues
        ```
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize token validator.

        Args:
            strict_mode: Also re-classify every character of every token
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.TokenValidator")

    def validate_token(self, token: Token) -> List[str]:
        """
        Validate a single token.

        Returns:
            List of validation issues (empty if valid)
        """
        issues = []
        if not isinstance(token.text, str) or not token.text:
            issues.append("Token text must be a non-empty string")
            return issues
        if not isinstance(token.break_class, BreakClass):
            issues.append(f"Token class must be a BreakClass, got {token.break_class!r}")
            return issues

        if self.strict_mode:
            mismatched = {classify(ord(ch)) for ch in token.text} - {token.break_class}
            if mismatched:
                names = ", ".join(sorted(cls.name for cls in mismatched))
                issues.append(f"Token {token.text!r} ({token.break_class.name}) contains {names} characters")
        return issues

    def validate_tokens(self, tokens: Sequence[Token], original: Optional[str] = None) -> List[str]:
        """
        Validate a token sequence, optionally against the original input.

        Returns:
            List of validation issues (empty if valid)
        """
        issues = []
        for i, token in enumerate(tokens):
            for issue in self.validate_token(token):
                issues.append(f"Token {i}: {issue}")
            if i > 0 and tokens[i - 1].break_class == token.break_class:
                issues.append(f"Tokens {i - 1} and {i} share class {token.break_class.name} (run not maximal)")

        if original is not None:
            reconstructed = "".join(token.text for token in tokens)
            if reconstructed != original:
                issues.append(
                    f"Tokens do not partition the input: {len(reconstructed)} characters "
                    f"reconstructed, {len(original)} expected"
                )

        if issues:
            self.logger.debug(f"Token validation found {len(issues)} issues")
        return issues

    def validate_results(self, results: Sequence[BreakResult], original: Optional[str] = None) -> List[str]:
        """
        Validate a break result sequence.

        Returns:
            List of validation issues (empty if valid)
        """
        issues = self.validate_tokens([result.token for result in results], original)
        terminal = (BreakAction.EXPLICIT, BreakAction.MANDATORY)

        for i, result in enumerate(results[:-1]):
            if result.action is BreakAction.EXPLICIT:
                issues.append(f"Result {i}: EXPLICIT action before the end of text")

        if results and results[-1].action not in terminal:
            issues.append(f"Last result has non-terminal action {results[-1].action.name}")
        return issues

    def assert_valid(self, tokens: Sequence[Token], original: Optional[str] = None) -> None:
        """Raise ``ValidationError`` if the token sequence has issues."""
        issues = self.validate_tokens(tokens, original)
        if issues:
            raise ValidationError("; ".join(issues))
