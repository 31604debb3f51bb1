"""
Code point classification.

The per-class range sets of ``unibreak.core.tables`` are merged once into a
single sorted interval table, so classifying a code point is one binary
search instead of a scan over every class.
"""

import logging
from bisect import bisect_right
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from unibreak.core.base import BreakClass
from unibreak.core.tables import CLASS_PRIORITY, CLASS_RANGES, Range

logger = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF


class RangeTable:
    """
    Merged, non-overlapping interval table mapping code points to classes.

    Overlaps between classes are resolved by ``priority`` (earlier wins);
    code points covered by no range resolve to ``default``.

    Examples:
        ```python
        table = RangeTable({BreakClass.NU: [(0x30, 0x39)]}, [BreakClass.NU])
        assert table.lookup(ord("7")) is BreakClass.NU
        assert table.lookup(ord("a")) is BreakClass.XX
        ```
    """

    def __init__(
        self,
        class_ranges: Mapping[BreakClass, Sequence[Range]],
        priority: Iterable[BreakClass],
        default: BreakClass = BreakClass.XX,
    ):
        self.default = default
        self._starts: List[int] = []
        self._ends: List[int] = []
        self._classes: List[BreakClass] = []
        self._build(class_ranges, list(priority))
        self._ascii = tuple(self._search(cp) for cp in range(0x80))
        logger.debug(f"Built range table with {len(self._starts)} intervals")

    def _build(self, class_ranges: Mapping[BreakClass, Sequence[Range]], priority: List[BreakClass]) -> None:
        rank = {cls: i for i, cls in enumerate(priority)}
        for cls in class_ranges:
            if cls not in rank:
                raise ValueError(f"Class {cls.name} has ranges but no priority")

        # Split the code space at every range edge; each elementary segment
        # takes the highest priority class covering it.
        edges = set()
        for ranges in class_ranges.values():
            for first, last in ranges:
                if first > last or first < 0 or last > MAX_CODE_POINT:
                    raise ValueError(f"Invalid range {first:#x}..{last:#x}")
                edges.add(first)
                edges.add(last + 1)
        points = sorted(edges)

        covering: Dict[int, BreakClass] = {}
        for cls in sorted(class_ranges, key=rank.__getitem__, reverse=True):
            for first, last in class_ranges[cls]:
                lo = bisect_right(points, first) - 1
                hi = bisect_right(points, last)
                for i in range(lo, hi):
                    covering[i] = cls

        for i in range(len(points) - 1):
            cls = covering.get(i)
            if cls is None:
                continue
            start, end = points[i], points[i + 1] - 1
            if self._classes and self._classes[-1] is cls and self._ends[-1] + 1 == start:
                self._ends[-1] = end
            else:
                self._starts.append(start)
                self._ends.append(end)
                self._classes.append(cls)

    def _search(self, codepoint: int) -> BreakClass:
        i = bisect_right(self._starts, codepoint) - 1
        if i >= 0 and codepoint <= self._ends[i]:
            return self._classes[i]
        return self.default

    def lookup(self, codepoint: int) -> BreakClass:
        """Return the break class of a code point."""
        if codepoint < 0x80:
            if codepoint < 0:
                raise ValueError(f"Invalid code point: {codepoint}")
            return self._ascii[codepoint]
        if codepoint > MAX_CODE_POINT:
            raise ValueError(f"Invalid code point: {codepoint:#x}")
        return self._search(codepoint)

    def intervals(self, cls: Optional[BreakClass] = None) -> List[Tuple[int, int, BreakClass]]:
        """Return the merged intervals, optionally restricted to one class."""
        return [
            (start, end, c)
            for start, end, c in zip(self._starts, self._ends, self._classes)
            if cls is None or c is cls
        ]

    def __len__(self) -> int:
        return len(self._starts)


DEFAULT_TABLE = RangeTable(CLASS_RANGES, CLASS_PRIORITY)


def classify(codepoint: int) -> BreakClass:
    """
    Map one code point to its break class.

    Args:
        codepoint: Integer code point in 0..0x10FFFF

    Returns:
        The break class; unlisted code points are ``BreakClass.XX``

    Raises:
        ValueError: If the code point is outside the Unicode code space
    """
    return DEFAULT_TABLE.lookup(codepoint)


def classify_char(char: str) -> BreakClass:
    """Classify a single character."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {len(char)}")
    return DEFAULT_TABLE.lookup(ord(char))


def class_ranges(cls: BreakClass) -> List[Range]:
    """Merged code point ranges that classify as ``cls``."""
    return [(start, end) for start, end, _ in DEFAULT_TABLE.intervals(cls)]
