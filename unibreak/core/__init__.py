"""
Core line breaking components: classification, tokenization and the break engine.
"""

from unibreak.core.base import BreakAction, BreakClass, BreakResult, PairVerdict, Token
from unibreak.core.classifier import RangeTable, class_ranges, classify, classify_char
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

__all__ = [
    "BreakAction",
    "BreakClass",
    "BreakResult",
    "PairVerdict",
    "Token",
    "RangeTable",
    "class_ranges",
    "classify",
    "classify_char",
    "BreakEngine",
    "BreakEngineStateError",
    "EngineState",
    "StateKind",
    "LineBreakStream",
    "StreamDecodeError",
    "break_text",
    "iter_breaks",
    "line_opportunities",
    "stream_file",
    "pair_verdict",
    "Tokenizer",
    "TokenizerStateError",
    "iter_tokens",
    "tokenize",
]
