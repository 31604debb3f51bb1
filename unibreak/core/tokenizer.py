"""
Tokenizer grouping code points into maximal same-class runs.

The tokenizer is incremental: ``feed`` may be called with arbitrary chunks of
text and the tokens produced are identical to tokenizing the concatenated
text at once. The run still open at the end of a chunk is held back until
the next chunk (or ``finish``) shows where it ends.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from unibreak.core.base import BreakClass, Token
from unibreak.core.classifier import classify

logger = logging.getLogger(__name__)

Classifier = Callable[[int], Optional[BreakClass]]


class TokenizerStateError(RuntimeError):
    """Raised when a tokenizer is used after ``finish``."""
    pass


class Tokenizer:
    """
    Incremental tokenizer.

    Examples:
        ```python
        tokenizer = Tokenizer()
        tokens = tokenizer.feed("hello wo")
        tokens += tokenizer.feed("rld")
        tokens += tokenizer.finish()
        # ["hello", " ", "world"]
        ```
    """

    def __init__(self, classifier: Classifier = classify):
        self.classifier = classifier
        self._run_class: Optional[BreakClass] = None
        self._run_parts: List[str] = []
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def pending(self) -> str:
        """Text of the run held back for the next chunk."""
        return "".join(self._run_parts)

    def feed(self, text: str) -> List[Token]:
        """
        Consume a chunk of text.

        A code point the classifier cannot classify ends the input: it and
        everything after it in ``text`` are emitted as one XX token (merged
        with a pending XX run) and the tokenizer is finished.

        Args:
            text: Next chunk of already decoded text

        Returns:
            Tokens completed by this chunk, in input order

        Raises:
            TokenizerStateError: If the tokenizer is already finished
        """
        if self._finished:
            raise TokenizerStateError("feed() called after the tokenizer finished")

        tokens: List[Token] = []
        run_start = 0
        for i, char in enumerate(text):
            cls = self.classifier(ord(char))
            if cls is None:
                # The remainder becomes one XX token and the tokenizer stops
                self._extend(text[run_start:i])
                if self._run_class is not BreakClass.XX:
                    self._flush(tokens)
                    self._run_class = BreakClass.XX
                self._extend(text[i:])
                self._flush(tokens)
                self._finished = True
                logger.debug(f"Unclassifiable code point U+{ord(char):04X}, emitting remainder as XX")
                return tokens
            if cls != self._run_class:
                self._extend(text[run_start:i])
                self._flush(tokens)
                self._run_class = cls
                run_start = i
        self._extend(text[run_start:])
        return tokens

    def finish(self) -> List[Token]:
        """
        Flush the pending run and close the tokenizer.

        Raises:
            TokenizerStateError: If the tokenizer is already finished
        """
        if self._finished:
            raise TokenizerStateError("finish() called on a finished tokenizer")
        tokens: List[Token] = []
        self._flush(tokens)
        self._finished = True
        return tokens

    def _extend(self, text: str) -> None:
        if text:
            self._run_parts.append(text)

    def _flush(self, tokens: List[Token]) -> None:
        if self._run_parts:
            tokens.append(Token("".join(self._run_parts), self._run_class))
        self._run_parts = []
        self._run_class = None


def tokenize(text: str) -> List[Token]:
    """Tokenize a complete text."""
    tokenizer = Tokenizer()
    tokens = tokenizer.feed(text)
    if not tokenizer.finished:
        tokens += tokenizer.finish()
    return tokens


def iter_tokens(chunks: Iterable[str]) -> Iterator[Token]:
    """Tokenize a sequence of text chunks lazily."""
    tokenizer = Tokenizer()
    for chunk in chunks:
        yield from tokenizer.feed(chunk)
        if tokenizer.finished:
            return
    yield from tokenizer.finish()
