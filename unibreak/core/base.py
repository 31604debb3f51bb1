"""
Base types for the line breaking library.

This module defines the enumerations and value objects shared by the
classifier, the tokenizer, the break engine and the streaming adapter.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict


class BreakClass(IntEnum):
    """Line breaking classes of UAX #14."""

    OP = 0   # Open punctuation
    CL = 1   # Close punctuation
    CP = 2   # Close parenthesis
    QU = 3   # Ambiguous quotation
    GL = 4   # Non-breaking ("glue")
    NS = 5   # Non-starter
    EX = 6   # Exclamation / interrogation
    SY = 7   # Symbols allowing break after
    IS = 8   # Infix numeric separator
    PR = 9   # Prefix numeric
    PO = 10  # Postfix numeric
    NU = 11  # Numeric
    AL = 12  # Alphabetic
    HL = 13  # Hebrew letter
    ID = 14  # Ideographic
    IN = 15  # Inseparable
    HY = 16  # Hyphen
    BA = 17  # Break after
    BB = 18  # Break before
    B2 = 19  # Break opportunity before and after
    ZW = 20  # Zero width space
    CM = 21  # Combining mark
    WJ = 22  # Word joiner
    H2 = 23  # Hangul LV syllable
    H3 = 24  # Hangul LVT syllable
    JL = 25  # Hangul L jamo
    JV = 26  # Hangul V jamo
    JT = 27  # Hangul T jamo

    # Resolved outside the pair table
    SP = 28  # Space
    LF = 29  # Line feed
    NL = 30  # Next line
    BK = 31  # Mandatory break
    CR = 32  # Carriage return
    XX = 33  # Unknown

    @property
    def is_mandatory_separator(self) -> bool:
        """True for classes that force a break after themselves."""
        return self in MANDATORY_SEPARATORS

    @property
    def in_pair_table(self) -> bool:
        """True for the classes that have a row and a column in the pair table."""
        return self <= BreakClass.JT


MANDATORY_SEPARATORS = frozenset({BreakClass.BK, BreakClass.CR, BreakClass.LF, BreakClass.NL})


class BreakAction(IntEnum):
    """Verdict for a boundary between two tokens."""

    PROHIBITED = 0  # No break allowed
    INDIRECT = 1    # Break allowed only because spaces intervene
    DIRECT = 2      # Break allowed
    MANDATORY = 3   # Break required
    EXPLICIT = 4    # End of text


class PairVerdict(Enum):
    """Value of a single cell of the class pair table."""

    PROHIBITED = "^"
    INDIRECT = "%"
    DIRECT = "_"


@dataclass(frozen=True)
class Token:
    """
    Maximal run of consecutive characters sharing one break class.

    Examples:
        ```python
        token = Token("hello", BreakClass.AL)
        assert len(token) == 5
        ```
    """

    text: str
    break_class: BreakClass

    def __post_init__(self):
        if not self.text:
            raise ValueError("Token text cannot be empty")

    def __len__(self) -> int:
        return len(self.text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert token to dictionary format."""
        return {"text": self.text, "class": self.break_class.name}


@dataclass(frozen=True)
class BreakResult:
    """
    A token together with the action decided for the boundary after it.

    This is the unit republished by the streaming adapter: the action of a
    token is only known once the next token (or the end of text) was seen.
    """

    token: Token
    action: BreakAction

    @property
    def text(self) -> str:
        return self.token.text

    @property
    def break_class(self) -> BreakClass:
        return self.token.break_class

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format for serialization."""
        return {
            "text": self.token.text,
            "class": self.token.break_class.name,
            "action": self.action.name,
        }
