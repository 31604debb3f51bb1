"""
Streaming adapter wiring the tokenizer into the break engine.

``LineBreakStream`` accepts chunks of text (or UTF-8 bytes), forwards every
completed token to a ``BreakEngine`` and republishes ``BreakResult`` triples
(token, class, action after the token). Results are returned from ``write`` /
``end`` and, optionally, pushed to a callback as they are produced.
"""

import codecs
import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union

from unibreak.core.base import BreakAction, BreakResult, Token
from unibreak.core.engine import BreakEngine
from unibreak.core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

ResultCallback = Callable[[BreakResult], None]

DEFAULT_BLOCK_SIZE = 64 * 1024


class StreamDecodeError(ValueError):
    """Raised when byte input is not valid in the stream's encoding."""
    pass


class LineBreakStream:
    """
    Push-based line breaking over a stream of chunks.

    Each token is held until the action for the boundary after it is known,
    i.e. until the next token arrives or the stream ends.

    Examples:
        Collecting results:
        ```python
        stream = LineBreakStream()
        results = stream.write("hello wor")
        results += stream.write("ld")
        results += stream.end()
        ```

        With a callback:
        ```python
        stream = LineBreakStream(on_result=lambda r: print(r.text, r.action.name))
        stream.end("some text")
        ```
    """

    def __init__(self, on_result: Optional[ResultCallback] = None, encoding: str = "utf-8"):
        self.on_result = on_result
        self.encoding = encoding
        self.tokenizer = Tokenizer()
        self.engine = BreakEngine()
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
        self._held: Optional[Token] = None
        self._ended = False
        self.tokens_seen = 0

    @property
    def ended(self) -> bool:
        return self._ended

    def write(self, chunk: Union[str, bytes]) -> List[BreakResult]:
        """
        Feed a chunk of input.

        Args:
            chunk: Text, or bytes in the stream's encoding

        Returns:
            Results completed by this chunk

        Raises:
            StreamDecodeError: If ``chunk`` holds invalid bytes
        """
        if self._ended:
            raise RuntimeError("write() called after end()")
        text = self._decode(chunk, final=False)
        return self._dispatch(self.tokenizer.feed(text))

    def end(self, data: Optional[Union[str, bytes]] = None) -> List[BreakResult]:
        """
        Finish the stream, optionally writing a last chunk first.

        Returns:
            Remaining results, the last one carrying the terminal action
        """
        results: List[BreakResult] = []
        if data:
            results.extend(self.write(data))
        if self._ended:
            raise RuntimeError("end() called twice")

        tail = self._decode(b"", final=True)
        if tail:
            results.extend(self._dispatch(self.tokenizer.feed(tail)))
        # The tokenizer finishes on its own after an unclassifiable code point
        if not self.tokenizer.finished:
            results.extend(self._dispatch(self.tokenizer.finish()))

        final_action = self.engine.end()
        if self._held is not None:
            results.append(self._publish(BreakResult(self._held, final_action)))
            self._held = None
        self._ended = True
        logger.debug(f"Stream ended after {self.tokens_seen} tokens ({final_action.name})")
        return results

    def _decode(self, chunk: Union[str, bytes], final: bool) -> str:
        if isinstance(chunk, str):
            return chunk
        try:
            return self._decoder.decode(chunk, final=final)
        except UnicodeDecodeError as e:
            raise StreamDecodeError(f"Invalid {self.encoding} input: {e}") from e

    def _dispatch(self, tokens: List[Token]) -> List[BreakResult]:
        results = []
        for token in tokens:
            self.tokens_seen += 1
            action = self.engine.process(token)
            if self._held is not None:
                results.append(self._publish(BreakResult(self._held, action)))
            self._held = token
        return results

    def _publish(self, result: BreakResult) -> BreakResult:
        if self.on_result is not None:
            self.on_result(result)
        return result


def break_text(text: str) -> List[BreakResult]:
    """Compute break results for a complete text."""
    return LineBreakStream().end(text)


def iter_breaks(chunks: Iterable[Union[str, bytes]], encoding: str = "utf-8") -> Iterator[BreakResult]:
    """Compute break results lazily over a sequence of chunks."""
    stream = LineBreakStream(encoding=encoding)
    for chunk in chunks:
        yield from stream.write(chunk)
    yield from stream.end()


def stream_file(
    file_path: Union[str, Path],
    block_size: int = DEFAULT_BLOCK_SIZE,
    encoding: str = "utf-8",
) -> Iterator[BreakResult]:
    """
    Compute break results for a file, reading it in fixed-size blocks.

    Args:
        file_path: Path of the file to read
        block_size: Number of bytes read per block
        encoding: Encoding of the file

    Yields:
        Break results in input order
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    start_time = time.time()
    stream = LineBreakStream(encoding=encoding)
    with open(file_path, "rb") as f:
        while True:
            block = f.read(block_size)
            if not block:
                break
            yield from stream.write(block)
    yield from stream.end()
    logger.debug(
        f"Processed {file_path} ({stream.tokens_seen} tokens) in {time.time() - start_time:.3f}s"
    )


BREAK_OPPORTUNITIES = frozenset({BreakAction.INDIRECT, BreakAction.DIRECT, BreakAction.MANDATORY})


def line_opportunities(text: str, include_end: bool = False) -> List[int]:
    """
    Character offsets at which a line may or must break.

    Args:
        text: Text to analyse
        include_end: Also report the end-of-text offset

    Returns:
        Sorted offsets into ``text``
    """
    offsets = []
    position = 0
    for result in break_text(text):
        position += len(result.token)
        if result.action in BREAK_OPPORTUNITIES and (position < len(text) or include_end):
            offsets.append(position)
        elif include_end and position == len(text):
            offsets.append(position)
    return offsets
