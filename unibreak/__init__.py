"""
Unicode line breaking library

Finds where a text may, may not, or must break across lines, following the
UAX #14 line breaking classes.

Public API Examples:

Classification:
    from unibreak import classify, BreakClass
    assert classify(ord("a")) is BreakClass.AL

Tokens and actions:
    from unibreak import Tokenizer, BreakEngine
    tokenizer, engine = Tokenizer(), BreakEngine()
    for token in tokenizer.feed("hello world") + tokenizer.finish():
        action = engine.process(token)
    final = engine.end()

Streaming:
    from unibreak import LineBreakStream
    stream = LineBreakStream(on_result=print)
    stream.write(b"hello ")
    stream.end(b"world")

Files:
    from unibreak import stream_file
    for result in stream_file("large_file.txt"):
        process(result)
"""

from unibreak.core.base import BreakAction, BreakClass, BreakResult, PairVerdict, Token
from unibreak.core.classifier import RangeTable, class_ranges, classify, classify_char
from unibreak.core.config import ConfigError, StreamConfig, load_config
from unibreak.core.engine import BreakEngine, BreakEngineStateError, EngineState, StateKind
from unibreak.core.streaming import (
    LineBreakStream,
    StreamDecodeError,
    break_text,
    iter_breaks,
    line_opportunities,
    stream_file,
)
from unibreak.core.tables import pair_verdict
from unibreak.core.tokenizer import Tokenizer, TokenizerStateError, iter_tokens, tokenize
from unibreak.utils.validation import TokenValidator, ValidationError

from unibreak.logging_config import (
    configure_logging,
    LogConfig,
    LogLevel,
    get_logger,
    enable_debug_mode,
    collect_debug_info,
    user_info,
    user_success,
    user_warning,
    user_error,
    debug_operation,
    performance_log,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "BreakAction",
    "BreakClass",
    "BreakResult",
    "PairVerdict",
    "Token",

    # Classification
    "RangeTable",
    "class_ranges",
    "classify",
    "classify_char",
    "pair_verdict",

    # Tokenizer and engine
    "Tokenizer",
    "TokenizerStateError",
    "tokenize",
    "iter_tokens",
    "BreakEngine",
    "BreakEngineStateError",
    "EngineState",
    "StateKind",

    # Streaming
    "LineBreakStream",
    "StreamDecodeError",
    "break_text",
    "iter_breaks",
    "line_opportunities",
    "stream_file",

    # Configuration and validation
    "StreamConfig",
    "ConfigError",
    "load_config",
    "TokenValidator",
    "ValidationError",

    # Logging and debugging
    "configure_logging",
    "LogConfig",
    "LogLevel",
    "get_logger",
    "enable_debug_mode",
    "collect_debug_info",
    "user_info",
    "user_success",
    "user_warning",
    "user_error",
    "debug_operation",
    "performance_log",

    # Version
    "__version__",
]
