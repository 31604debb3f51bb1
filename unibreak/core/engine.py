"""
Stateful break decision engine.

For every token boundary the engine emits one ``BreakAction``. The rules are
applied in a fixed priority order and an emitted action is never revised:

1. mandatory separators (BK, LF, NL, CR; CR LF is one unit)
2. word joiner / glue prohibition
3. unknown (XX) characters degrade to a direct break
4. no break before a space
5. combining marks inherit the class of their base
6. quotation mark adjacency
7. space runs carry the context across them and allow at most an indirect break
8. the class pair table

The carried context is a single ``EngineState`` value.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from unibreak.core.base import BreakAction, BreakClass, PairVerdict, Token
from unibreak.core.tables import pair_verdict

logger = logging.getLogger(__name__)

C = BreakClass

GLUE_CLASSES = frozenset({C.WJ, C.GL})


class BreakEngineStateError(RuntimeError):
    """Raised when the engine is driven out of sequence (e.g. after ``end``)."""
    pass


class StateKind(Enum):
    """Kinds of engine state."""

    START = "start"                      # No token seen yet
    AFTER_CLASS = "after_class"          # Last token was a regular (or combining) token
    IN_SPACE_RUN = "in_space_run"        # Last token was a space run
    CR_PENDING = "cr_pending"            # Last token was a carriage return
    AFTER_MANDATORY = "after_mandatory"  # Last token was BK, LF or NL
    ENDED = "ended"                      # end() was called


@dataclass(frozen=True)
class EngineState:
    """
    Context carried between boundaries.

    ``context`` is the effective class used for the next pair lookup; it is
    ``None`` when nothing before the current position can be looked up
    (start of text, start of a line). ``last`` is the raw class of the most
    recent token.
    """

    kind: StateKind
    context: Optional[BreakClass] = None
    last: Optional[BreakClass] = None


INITIAL_STATE = EngineState(StateKind.START)


class BreakEngine:
    """
    Single-pass line break decision procedure.

    Examples:
        ```python
        engine = BreakEngine()
        engine.process(Token("hello", BreakClass.AL))  # None
        engine.process(Token(" ", BreakClass.SP))      # PROHIBITED
        engine.process(Token("world", BreakClass.AL))  # INDIRECT
        engine.end()                                   # EXPLICIT
        ```
    """

    def __init__(self):
        self._state = INITIAL_STATE

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def ended(self) -> bool:
        return self._state.kind is StateKind.ENDED

    def process(self, token: Token) -> Optional[BreakAction]:
        """
        Consume the next token.

        Args:
            token: Next token of the text

        Returns:
            Action for the boundary before ``token``, or None for the first token

        Raises:
            BreakEngineStateError: If ``end`` was already called
        """
        state = self._state
        if state.kind is StateKind.ENDED:
            raise BreakEngineStateError("process() called after end()")

        cls = token.break_class
        action = None if state.kind is StateKind.START else self._decide(state, cls)
        self._state = self._advance(state, cls)
        if action is not None and logger.isEnabledFor(logging.DEBUG):
            context = state.context.name if state.context is not None else '-'
            logger.debug(f"{state.kind.value} [{context}] | {cls.name} -> {action.name}",
                         extra={'state': state.kind.value, 'break_class': cls.name, 'action': action.name})
        return action

    def end(self) -> BreakAction:
        """
        Close the text and return the action after the last token.

        Returns:
            MANDATORY if the text ended with a hard separator, else EXPLICIT

        Raises:
            BreakEngineStateError: If ``end`` was already called
        """
        state = self._state
        if state.kind is StateKind.ENDED:
            raise BreakEngineStateError("end() called twice")
        self._state = EngineState(StateKind.ENDED, last=state.last)
        if state.kind in (StateKind.AFTER_MANDATORY, StateKind.CR_PENDING):
            return BreakAction.MANDATORY
        return BreakAction.EXPLICIT

    def _decide(self, state: EngineState, cls: BreakClass) -> BreakAction:
        # Mandatory separators
        if state.kind is StateKind.CR_PENDING:
            return BreakAction.PROHIBITED if cls is C.LF else BreakAction.MANDATORY
        if state.kind is StateKind.AFTER_MANDATORY:
            return BreakAction.MANDATORY
        if cls.is_mandatory_separator:
            return BreakAction.PROHIBITED

        # Word joiner and glue
        if cls in GLUE_CLASSES or state.last in GLUE_CLASSES:
            return BreakAction.PROHIBITED

        # Unknown characters never suppress a break
        if cls is C.XX or state.last is C.XX or state.context is C.XX:
            return BreakAction.DIRECT

        if cls is C.SP:
            return BreakAction.PROHIBITED

        in_space_run = state.kind is StateKind.IN_SPACE_RUN

        # A mark after spaces (or at line start) has no base and stands as AL
        right = cls
        if cls is C.CM and (in_space_run or state.context is None):
            right = C.AL

        # Quotation marks
        if not in_space_run and (
            (state.context is C.QU and right is C.OP) or (state.context is C.CL and right is C.QU)
        ):
            return BreakAction.PROHIBITED

        if in_space_run:
            if state.context is None:
                return BreakAction.PROHIBITED
            if pair_verdict(state.context, right) is PairVerdict.PROHIBITED:
                return BreakAction.PROHIBITED
            return BreakAction.INDIRECT

        if pair_verdict(state.context, right) is PairVerdict.DIRECT:
            return BreakAction.DIRECT
        return BreakAction.PROHIBITED

    def _advance(self, state: EngineState, cls: BreakClass) -> EngineState:
        if cls is C.CR:
            return EngineState(StateKind.CR_PENDING, last=cls)
        if cls.is_mandatory_separator:
            return EngineState(StateKind.AFTER_MANDATORY, last=cls)

        # Context only survives a space run when the space followed a regular token
        carried = state.context if state.kind in (StateKind.AFTER_CLASS, StateKind.IN_SPACE_RUN) else None

        if cls is C.SP:
            return EngineState(StateKind.IN_SPACE_RUN, context=carried, last=cls)
        if cls is C.CM:
            if state.kind is StateKind.AFTER_CLASS:
                return EngineState(StateKind.AFTER_CLASS, context=state.context, last=cls)
            return EngineState(StateKind.AFTER_CLASS, context=C.AL, last=cls)
        return EngineState(StateKind.AFTER_CLASS, context=cls, last=cls)
