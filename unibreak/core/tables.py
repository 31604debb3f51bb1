"""
Line breaking data: code point ranges per break class and the class pair table.

The ranges are an abridged rendition of the Unicode ``LineBreak.txt`` property
file (with the LB1 resolutions applied: ambiguous and complex-context
characters map to AL, conditional Japanese starters map to NS). The pair
table is the UAX #14 example pair table for the 28 classes OP..JT.
"""

from typing import Dict, List, Tuple

from unibreak.core.base import BreakClass, PairVerdict

Range = Tuple[int, int]

C = BreakClass

HANGUL_SYLLABLE_FIRST = 0xAC00
HANGUL_SYLLABLE_LAST = 0xD7A3
HANGUL_T_COUNT = 28


def _every_other(first: int, last: int) -> List[Range]:
    return [(cp, cp) for cp in range(first, last + 1, 2)]


def _hangul_lv() -> List[Range]:
    return [(cp, cp) for cp in range(HANGUL_SYLLABLE_FIRST, HANGUL_SYLLABLE_LAST + 1, HANGUL_T_COUNT)]


def _hangul_lvt() -> List[Range]:
    return [
        (cp + 1, min(cp + HANGUL_T_COUNT - 1, HANGUL_SYLLABLE_LAST))
        for cp in range(HANGUL_SYLLABLE_FIRST, HANGUL_SYLLABLE_LAST + 1, HANGUL_T_COUNT)
    ]


# Earlier classes win where ranges overlap, so the broad script blocks
# (ID, AL) come last and punctuation carved out of them comes first.
CLASS_PRIORITY: Tuple[BreakClass, ...] = (
    C.BK, C.CR, C.LF, C.NL, C.SP, C.ZW, C.WJ, C.GL, C.CM,
    C.OP, C.CL, C.CP, C.QU, C.NS, C.EX, C.SY, C.IS, C.PR, C.PO,
    C.NU, C.IN, C.HY, C.BA, C.BB, C.B2,
    C.H2, C.H3, C.JL, C.JV, C.JT,
    C.HL, C.ID, C.AL,
)

CLASS_RANGES: Dict[BreakClass, List[Range]] = {
    C.BK: [(0x0B, 0x0C), (0x2028, 0x2029)],
    C.CR: [(0x0D, 0x0D)],
    C.LF: [(0x0A, 0x0A)],
    C.NL: [(0x85, 0x85)],
    C.SP: [(0x20, 0x20)],
    C.ZW: [(0x200B, 0x200B)],
    C.WJ: [(0x2060, 0x2060), (0xFEFF, 0xFEFF)],
    C.GL: [
        (0xA0, 0xA0), (0x34F, 0x34F), (0x35C, 0x362), (0xF08, 0xF08), (0xF0C, 0xF0C),
        (0xF12, 0xF12), (0xFD9, 0xFDA), (0x180E, 0x180E), (0x2007, 0x2007),
        (0x2011, 0x2011), (0x202F, 0x202F),
    ],
    C.CM: [
        (0x00, 0x08), (0x0E, 0x1F), (0x7F, 0x84), (0x86, 0x9F), (0x300, 0x36F),
        (0x483, 0x489), (0x591, 0x5BD), (0x5BF, 0x5BF), (0x5C1, 0x5C2), (0x5C4, 0x5C5),
        (0x5C7, 0x5C7), (0x610, 0x61A), (0x64B, 0x65F), (0x670, 0x670), (0x6D6, 0x6DC),
        (0x6DF, 0x6E4), (0x6E7, 0x6E8), (0x6EA, 0x6ED), (0x900, 0x903), (0x93A, 0x93C),
        (0x93E, 0x94F), (0x951, 0x957), (0x962, 0x963), (0x981, 0x983), (0x9BC, 0x9BC),
        (0x9BE, 0x9CD), (0x1AB0, 0x1AFF), (0x1DC0, 0x1DFF), (0x200C, 0x200F),
        (0x202A, 0x202E), (0x2066, 0x206F), (0x20D0, 0x20F0), (0x302A, 0x302F),
        (0x3099, 0x309A), (0xFE00, 0xFE0F), (0xFE20, 0xFE2F), (0xFFF9, 0xFFFB),
        (0xE0001, 0xE0001), (0xE0020, 0xE007F), (0xE0100, 0xE01EF),
    ],
    C.OP: [
        (0x28, 0x28), (0x5B, 0x5B), (0x7B, 0x7B), (0xA1, 0xA1), (0xBF, 0xBF),
        (0xF3A, 0xF3A), (0xF3C, 0xF3C), (0x169B, 0x169B), (0x201A, 0x201A),
        (0x201E, 0x201E), (0x2045, 0x2045), (0x207D, 0x207D), (0x208D, 0x208D),
        (0x2308, 0x2308), (0x230A, 0x230A), (0x2329, 0x2329),
        *_every_other(0x2768, 0x2774), (0x27C5, 0x27C5), *_every_other(0x27E6, 0x27EE),
        *_every_other(0x2983, 0x2997), (0x29D8, 0x29D8), (0x29DA, 0x29DA), (0x29FC, 0x29FC),
        (0x2E18, 0x2E18), *_every_other(0x2E22, 0x2E28),
        *_every_other(0x3008, 0x3010), *_every_other(0x3014, 0x301A), (0x301D, 0x301D),
        (0xFD3E, 0xFD3E), (0xFE17, 0xFE17), *_every_other(0xFE35, 0xFE43), (0xFE47, 0xFE47),
        *_every_other(0xFE59, 0xFE5D), (0xFF08, 0xFF08), (0xFF3B, 0xFF3B), (0xFF5B, 0xFF5B),
        (0xFF5F, 0xFF5F), (0xFF62, 0xFF62),
    ],
    C.CL: [
        (0x7D, 0x7D), (0xF3B, 0xF3B), (0xF3D, 0xF3D), (0x169C, 0x169C), (0x2046, 0x2046),
        (0x207E, 0x207E), (0x208E, 0x208E), (0x2309, 0x2309), (0x230B, 0x230B),
        (0x232A, 0x232A), *_every_other(0x2769, 0x2775), (0x27C6, 0x27C6),
        *_every_other(0x27E7, 0x27EF), *_every_other(0x2984, 0x2998), (0x29D9, 0x29D9),
        (0x29DB, 0x29DB), (0x29FD, 0x29FD), *_every_other(0x2E23, 0x2E29),
        (0x3001, 0x3002), *_every_other(0x3009, 0x3011), *_every_other(0x3015, 0x301B),
        (0x301E, 0x301F), (0xFD3F, 0xFD3F), (0xFE11, 0xFE12), (0xFE18, 0xFE18),
        *_every_other(0xFE36, 0xFE44), (0xFE48, 0xFE48), (0xFE50, 0xFE50), (0xFE52, 0xFE52),
        *_every_other(0xFE5A, 0xFE5E), (0xFF0C, 0xFF0C), (0xFF0E, 0xFF0E), (0xFF5D, 0xFF5D),
        (0xFF60, 0xFF61), (0xFF63, 0xFF64),
    ],
    C.CP: [(0x29, 0x29), (0x5D, 0x5D), (0xFF09, 0xFF09), (0xFF3D, 0xFF3D)],
    C.QU: [
        (0x22, 0x22), (0x27, 0x27), (0xAB, 0xAB), (0xBB, 0xBB), (0x2018, 0x2019),
        (0x201B, 0x201D), (0x201F, 0x201F), (0x2039, 0x203A), (0x275B, 0x275E),
        (0x2E00, 0x2E0D), (0x2E1C, 0x2E1D), (0x2E20, 0x2E21),
    ],
    C.NS: [
        (0x17D6, 0x17D6), (0x203C, 0x203D), (0x2047, 0x2049), (0x3005, 0x3005),
        (0x301C, 0x301C), (0x303B, 0x303C), *_every_other(0x3041, 0x3049), (0x3063, 0x3063),
        *_every_other(0x3083, 0x3087), (0x308E, 0x308E), (0x3095, 0x3096), (0x309B, 0x309E),
        (0x30A0, 0x30A0), *_every_other(0x30A1, 0x30A9), (0x30C3, 0x30C3),
        *_every_other(0x30E3, 0x30E7), (0x30EE, 0x30EE), (0x30F5, 0x30F6), (0x30FB, 0x30FE),
        (0x31F0, 0x31FF), (0xA015, 0xA015), (0xFE54, 0xFE55), (0xFF1A, 0xFF1B),
        (0xFF65, 0xFF65), (0xFF9E, 0xFF9F),
    ],
    C.EX: [
        (0x21, 0x21), (0x3F, 0x3F), (0x5C6, 0x5C6), (0x61B, 0x61B), (0x61E, 0x61F),
        (0x6D4, 0x6D4), (0x7F9, 0x7F9), (0xF0D, 0xF11), (0xF14, 0xF14), (0x1802, 0x1803),
        (0x1808, 0x1809), (0x1944, 0x1945), (0x2762, 0x2763), (0x2CF9, 0x2CF9),
        (0x2CFE, 0x2CFE), (0x2E2E, 0x2E2E), (0xA60E, 0xA60E), (0xA876, 0xA877),
        (0xFE15, 0xFE16), (0xFE56, 0xFE57), (0xFF01, 0xFF01), (0xFF1F, 0xFF1F),
    ],
    C.SY: [(0x2F, 0x2F)],
    C.IS: [
        (0x2C, 0x2C), (0x2E, 0x2E), (0x3A, 0x3B), (0x37E, 0x37E), (0x589, 0x589),
        (0x60C, 0x60D), (0x7F8, 0x7F8), (0x2044, 0x2044), (0xFE10, 0xFE10), (0xFE13, 0xFE14),
    ],
    C.PR: [
        (0x24, 0x24), (0x2B, 0x2B), (0x5C, 0x5C), (0xA3, 0xA5), (0xB1, 0xB1),
        (0x58F, 0x58F), (0x9FB, 0x9FB), (0xAF1, 0xAF1), (0xBF9, 0xBF9), (0xE3F, 0xE3F),
        (0x17DB, 0x17DB), (0x20A0, 0x20A6), (0x20A8, 0x20B5), (0x20B7, 0x20BA),
        (0x20BC, 0x20BD), (0x2116, 0x2116), (0x2212, 0x2213), (0xFE69, 0xFE69),
        (0xFF04, 0xFF04), (0xFFE1, 0xFFE1), (0xFFE5, 0xFFE6),
    ],
    C.PO: [
        (0x25, 0x25), (0xA2, 0xA2), (0xB0, 0xB0), (0x609, 0x60B), (0x66A, 0x66A),
        (0x9F2, 0x9F3), (0x9F9, 0x9F9), (0xD79, 0xD79), (0x2030, 0x2037), (0x20A7, 0x20A7),
        (0x20B6, 0x20B6), (0x20BB, 0x20BB), (0x20BE, 0x20BE), (0x2103, 0x2103),
        (0x2109, 0x2109), (0xA838, 0xA838), (0xFDFC, 0xFDFC), (0xFE6A, 0xFE6A),
        (0xFF05, 0xFF05), (0xFFE0, 0xFFE0),
    ],
    C.NU: [
        (0x30, 0x39), (0x660, 0x669), (0x66B, 0x66C), (0x6F0, 0x6F9), (0x7C0, 0x7C9),
        (0x966, 0x96F), (0x9E6, 0x9EF), (0xA66, 0xA6F), (0xAE6, 0xAEF), (0xB66, 0xB6F),
        (0xBE6, 0xBEF), (0xC66, 0xC6F), (0xCE6, 0xCEF), (0xD66, 0xD6F), (0xE50, 0xE59),
        (0xED0, 0xED9), (0xF20, 0xF29), (0x1040, 0x1049), (0x1090, 0x1099),
        (0x17E0, 0x17E9), (0x1810, 0x1819),
    ],
    C.IN: [(0x2024, 0x2026), (0xFE19, 0xFE19)],
    C.HY: [(0x2D, 0x2D)],
    C.BA: [
        (0x09, 0x09), (0x7C, 0x7C), (0xAD, 0xAD), (0x58A, 0x58A), (0x5BE, 0x5BE),
        (0x964, 0x965), (0xE5A, 0xE5B), (0xF0B, 0xF0B), (0xF34, 0xF34), (0x1361, 0x1361),
        (0x1680, 0x1680), (0x16EB, 0x16ED), (0x1735, 0x1736), (0x17D4, 0x17D5),
        (0x17D8, 0x17D8), (0x17DA, 0x17DA), (0x1804, 0x1805), (0x2000, 0x2006),
        (0x2008, 0x200A), (0x2010, 0x2010), (0x2012, 0x2013), (0x2027, 0x2027),
        (0x2056, 0x2056), (0x2058, 0x205B), (0x205D, 0x205F), (0x2CFA, 0x2CFC),
        (0x2CFF, 0x2CFF), (0x2E0E, 0x2E15), (0x2E17, 0x2E17), (0x3000, 0x3000),
        (0x10100, 0x10102),
    ],
    C.BB: [
        (0xB4, 0xB4), (0x2C8, 0x2C8), (0x2CC, 0x2CC), (0x2DF, 0x2DF), (0xF01, 0xF04),
        (0xF06, 0xF07), (0xF09, 0xF0A), (0xFD0, 0xFD1), (0xFD3, 0xFD3), (0x1806, 0x1806),
        (0x1FFD, 0x1FFD), (0xA874, 0xA875),
    ],
    C.B2: [(0x2014, 0x2014), (0x2E3A, 0x2E3B)],
    C.H2: _hangul_lv(),
    C.H3: _hangul_lvt(),
    C.JL: [(0x1100, 0x115F), (0xA960, 0xA97C)],
    C.JV: [(0x1160, 0x11A7), (0xD7B0, 0xD7C6)],
    C.JT: [(0x11A8, 0x11FF), (0xD7CB, 0xD7FB)],
    C.HL: [(0x5D0, 0x5EA), (0x5F0, 0x5F2), (0xFB1D, 0xFB1D), (0xFB1F, 0xFB28), (0xFB2A, 0xFB4F)],
    C.ID: [
        (0x2E80, 0x2FFB), (0x3003, 0x3004), (0x3006, 0x3007), (0x3012, 0x3013),
        (0x3020, 0x3029), (0x3030, 0x303A), (0x303D, 0x303F), (0x3040, 0x30FF),
        (0x3100, 0x312F), (0x3131, 0x318E), (0x3190, 0x31E3), (0x3200, 0x4DBF),
        (0x4E00, 0x9FFF), (0xA000, 0xA48C), (0xA490, 0xA4C6), (0xF900, 0xFAFF),
        (0xFE30, 0xFE4F), (0xFF01, 0xFF60), (0xFFE0, 0xFFE6), (0x1F000, 0x1FAFF),
        (0x20000, 0x2FFFD), (0x30000, 0x3FFFD),
    ],
    C.AL: [
        (0x23, 0x23), (0x26, 0x26), (0x2A, 0x2A), (0x3C, 0x3E), (0x40, 0x5A),
        (0x5E, 0x7A), (0x7E, 0x7E), (0xA6, 0xAA), (0xAC, 0xAC), (0xAE, 0xAF),
        (0xB2, 0xB3), (0xB5, 0xBA), (0xBC, 0xBE), (0xC0, 0x2FF), (0x370, 0x482),
        (0x48A, 0x587), (0x600, 0x608), (0x620, 0x64A), (0x66D, 0x6D5), (0x6E5, 0x6E6),
        (0x6EE, 0x6FF), (0x700, 0x74F), (0x904, 0x939), (0x93D, 0x93D), (0x950, 0x950),
        (0x958, 0x961), (0x970, 0x97F), (0x985, 0x9B9), (0xE00, 0xEFF), (0x1000, 0x109F),
        (0x1780, 0x17FF), (0x1D00, 0x1DBF), (0x1E00, 0x1FFF), (0x2100, 0x214F),
        (0x2150, 0x218F), (0x2190, 0x23FF), (0x2400, 0x24FF), (0x2500, 0x27FF),
        (0x2800, 0x2BFF), (0x2C00, 0x2DFF), (0xA4D0, 0xA4FF), (0xA500, 0xA62B),
        (0xA640, 0xA69F), (0xA720, 0xA7FF), (0xFB00, 0xFB06), (0xFB50, 0xFDFF),
        (0xFE70, 0xFEFC), (0x1D400, 0x1D7FF),
    ],
}


# Rows and columns follow BreakClass order OP..JT. "^" prohibited,
# "%" indirect (only across spaces), "_" direct; "#" and "@" mark the
# combining-mark column where a mark attaches to its base.
PAIR_TABLE_COLUMNS = "OP CL CP QU GL NS EX SY IS PR PO NU AL HL ID IN HY BA BB B2 ZW CM WJ H2 H3 JL JV JT"

PAIR_TABLE_ROWS: Dict[BreakClass, str] = {
    C.OP: "^^^^^^^^^^^^^^^^^^^^^@^^^^^^",
    C.CL: "_^^%%^^^^%%_____%%__^#^_____",
    C.CP: "_^^%%^^^^%%%%%__%%__^#^_____",
    C.QU: "^^^%%%^^^%%%%%%%%%%%^#^%%%%%",
    C.GL: "%^^%%%^^^%%%%%%%%%%%^#^%%%%%",
    C.NS: "_^^%%%^^^_______%%__^#^_____",
    C.EX: "_^^%%%^^^______%%%__^#^_____",
    C.SY: "_^^%%%^^^__%_%__%%__^#^_____",
    C.IS: "_^^%%%^^^__%%%__%%__^#^_____",
    C.PR: "%^^%%%^^^__%%%%_%%__^#^%%%%%",
    C.PO: "%^^%%%^^^__%%%__%%__^#^_____",
    C.NU: "%^^%%%^^^%%%%%_%%%__^#^_____",
    C.AL: "%^^%%%^^^__%%%_%%%__^#^_____",
    C.HL: "%^^%%%^^^__%%%_%%%__^#^_____",
    C.ID: "_^^%%%^^^_%____%%%__^#^_____",
    C.IN: "_^^%%%^^^______%%%__^#^_____",
    C.HY: "_^^%%%^^^__%____%%__^#^_____",
    C.BA: "_^^%_%^^^_______%%__^#^_____",
    C.BB: "%^^%%%^^^%%%%%%%%%%%^#^%%%%%",
    C.B2: "_^^%%%^^^_______%%_^^#^_____",
    C.ZW: "____________________^_______",
    C.CM: "%^^%%%^^^__%%%_%%%__^#^_____",
    C.WJ: "%^^%%%^^^%%%%%%%%%%%^#^%%%%%",
    C.H2: "_^^%%%^^^_%____%%%__^#^___%%",
    C.H3: "_^^%%%^^^_%____%%%__^#^____%",
    C.JL: "_^^%%%^^^_%____%%%__^#^%%%%_",
    C.JV: "_^^%%%^^^_%____%%%__^#^___%%",
    C.JT: "_^^%%%^^^_%____%%%__^#^____%",
}

_CELL_VERDICTS = {
    "^": PairVerdict.PROHIBITED,
    "@": PairVerdict.PROHIBITED,
    "#": PairVerdict.PROHIBITED,
    "%": PairVerdict.INDIRECT,
    "_": PairVerdict.DIRECT,
}


def _build_pair_table() -> Tuple[Tuple[PairVerdict, ...], ...]:
    columns = PAIR_TABLE_COLUMNS.split()
    table = []
    for cls in BreakClass:
        if not cls.in_pair_table:
            break
        row = PAIR_TABLE_ROWS[cls]
        if len(row) != len(columns):
            raise ValueError(f"Pair table row {cls.name} has {len(row)} cells, expected {len(columns)}")
        table.append(tuple(_CELL_VERDICTS[cell] for cell in row))
    return tuple(table)


PAIR_TABLE = _build_pair_table()


def pair_verdict(left: BreakClass, right: BreakClass) -> PairVerdict:
    """
    Look up the pair table verdict for a boundary between two classes.

    Raises:
        ValueError: If either class has no row/column in the table
    """
    if not (left.in_pair_table and right.in_pair_table):
        raise ValueError(f"No pair table entry for {left.name} x {right.name}")
    return PAIR_TABLE[left][right]
