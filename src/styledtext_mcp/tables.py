"""Style table registry for the Unicode Mathematical Alphanumeric Symbols.

Each (style family, category) pair owns a ``SlotRange``: one optional
``(uppercase_base, lowercase_base)`` pair per emphasis. A styled character
is ``base + offset`` where ``offset`` is the 0-based position in its
alphabet (A=0 .. Z=25, 0=0 .. 9=9, Alpha=0 .. Omega=24).

Unicode did not allocate every styled letter contiguously: characters that
already existed in the Letterlike Symbols block (U+2100..U+214F) or the
Greek block were left as holes in the Mathematical block. Those offsets
live in sparse override tables and always win over the arithmetic.

Block map (uppercase base / lowercase base):

    Serif         letters  U+0041/0061   U+1D400/1D41A  U+1D434/1D44E  U+1D468/1D482
    Sans-Serif    letters  U+1D5A0/1D5BA U+1D5D4/1D5EE  U+1D608/1D622  U+1D63C/1D656
    Script        letters  U+1D49C/1D4B6 U+1D4D0/1D4EA
    Fraktur       letters  U+1D504/1D51E U+1D56C/1D586
    Monospace     letters  U+1D670/1D68A
    Double-Struck letters  (bold only)   U+1D538/1D552
    Serif         greek    U+0391/03B1   U+1D6A8/1D6C2  U+1D6E2/1D6FC  U+1D71C/1D736
    Sans-Serif    greek    (bold, bold-italic) U+1D756/1D770  U+1D790/1D7AA
    Digits        serif U+0030, bold U+1D7CE, double-struck U+1D7D8,
                  sans-serif U+1D7E2, sans-serif bold U+1D7EC, monospace U+1D7F6
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from enum import Enum
from operator import itemgetter
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Closed selector sets
# ---------------------------------------------------------------------------


def _normalize(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


class _Selector(str, Enum):
    """Enum accepting loose spellings: ``sans_serif``, ``SansSerif``, ``sans serif``."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = _normalize(value)
        key = cls._aliases().get(key, key)
        for member in cls:
            if _normalize(member.value) == key:
                return member
        return None

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    def __str__(self) -> str:
        return self.value


class StyleFamily(_Selector):
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    SCRIPT = "script"
    FRAKTUR = "fraktur"
    MONOSPACE = "monospace"
    DOUBLE_STRUCK = "double-struck"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"sans": "sansserif", "mono": "monospace", "blackboard": "doublestruck"}


class Emphasis(_Selector):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"regular": "normal", "plain": "normal", "italicbold": "bolditalic"}


class Category(str, Enum):
    LETTER = "letter"
    DIGIT = "digit"
    GREEK = "greek"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Slot ranges
# ---------------------------------------------------------------------------

BasePair = tuple[int, int]
OverrideTable = tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class SlotRange:
    """Base code points for one (family, category), one pair per emphasis.

    Categories without case (digits) repeat the same base in both halves.
    """

    normal: BasePair | None = None
    bold: BasePair | None = None
    italic: BasePair | None = None
    bold_italic: BasePair | None = None

    def get(self, emphasis: Emphasis) -> BasePair | None:
        return getattr(self, emphasis.name.lower())


_F = StyleFamily
_C = Category

_SLOTS: MappingProxyType[tuple[StyleFamily, Category], SlotRange] = MappingProxyType({
    # Latin letters
    (_F.SERIF, _C.LETTER): SlotRange(
        normal=(0x41, 0x61),
        bold=(0x1D400, 0x1D41A),
        italic=(0x1D434, 0x1D44E),
        bold_italic=(0x1D468, 0x1D482),
    ),
    (_F.SANS_SERIF, _C.LETTER): SlotRange(
        normal=(0x1D5A0, 0x1D5BA),
        bold=(0x1D5D4, 0x1D5EE),
        italic=(0x1D608, 0x1D622),
        bold_italic=(0x1D63C, 0x1D656),
    ),
    (_F.SCRIPT, _C.LETTER): SlotRange(
        normal=(0x1D49C, 0x1D4B6),
        bold=(0x1D4D0, 0x1D4EA),
    ),
    (_F.FRAKTUR, _C.LETTER): SlotRange(
        normal=(0x1D504, 0x1D51E),
        bold=(0x1D56C, 0x1D586),
    ),
    (_F.MONOSPACE, _C.LETTER): SlotRange(
        normal=(0x1D670, 0x1D68A),
    ),
    (_F.DOUBLE_STRUCK, _C.LETTER): SlotRange(
        bold=(0x1D538, 0x1D552),
    ),
    # Greek
    (_F.SERIF, _C.GREEK): SlotRange(
        normal=(0x391, 0x3B1),
        bold=(0x1D6A8, 0x1D6C2),
        italic=(0x1D6E2, 0x1D6FC),
        bold_italic=(0x1D71C, 0x1D736),
    ),
    (_F.SANS_SERIF, _C.GREEK): SlotRange(
        bold=(0x1D756, 0x1D770),
        bold_italic=(0x1D790, 0x1D7AA),
    ),
    # Digits
    (_F.SERIF, _C.DIGIT): SlotRange(
        normal=(0x30, 0x30),
        bold=(0x1D7CE, 0x1D7CE),
    ),
    (_F.SANS_SERIF, _C.DIGIT): SlotRange(
        normal=(0x1D7E2, 0x1D7E2),
        bold=(0x1D7EC, 0x1D7EC),
    ),
    (_F.MONOSPACE, _C.DIGIT): SlotRange(
        normal=(0x1D7F6, 0x1D7F6),
    ),
    (_F.DOUBLE_STRUCK, _C.DIGIT): SlotRange(
        normal=(0x1D7D8, 0x1D7D8),
    ),
})

# (uppercase, lowercase) alphabet sizes. Lowercase Greek carries seven
# variant symbols after omega (partial differential .. pi symbol).
_ALPHABET_LENGTH: MappingProxyType[Category, tuple[int, int]] = MappingProxyType({
    _C.LETTER: (26, 26),
    _C.DIGIT: (10, 10),
    _C.GREEK: (26, 32),
    _C.OTHER: (0, 0),
})


# ---------------------------------------------------------------------------
# Corner cases (offset -> explicit code point), sorted by offset
# ---------------------------------------------------------------------------

_E = Emphasis

_OVERRIDES: MappingProxyType[tuple[StyleFamily, Category, Emphasis, bool], OverrideTable] = MappingProxyType({
    (_F.SCRIPT, _C.LETTER, _E.NORMAL, True): (
        (1, 0x212C),   # B  SCRIPT CAPITAL B
        (4, 0x2130),   # E  SCRIPT CAPITAL E
        (5, 0x2131),   # F  SCRIPT CAPITAL F
        (7, 0x210B),   # H  SCRIPT CAPITAL H
        (8, 0x2110),   # I  SCRIPT CAPITAL I
        (11, 0x2112),  # L  SCRIPT CAPITAL L
        (12, 0x2133),  # M  SCRIPT CAPITAL M
        (17, 0x211B),  # R  SCRIPT CAPITAL R
    ),
    (_F.SCRIPT, _C.LETTER, _E.NORMAL, False): (
        (4, 0x212F),   # e  SCRIPT SMALL E
        (6, 0x210A),   # g  SCRIPT SMALL G
        (14, 0x2134),  # o  SCRIPT SMALL O
    ),
    (_F.FRAKTUR, _C.LETTER, _E.NORMAL, True): (
        (2, 0x212D),   # C  BLACK-LETTER CAPITAL C
        (7, 0x210C),   # H  BLACK-LETTER CAPITAL H
        (8, 0x2111),   # I  BLACK-LETTER CAPITAL I
        (17, 0x211C),  # R  BLACK-LETTER CAPITAL R
        (25, 0x2128),  # Z  BLACK-LETTER CAPITAL Z
    ),
    (_F.DOUBLE_STRUCK, _C.LETTER, _E.BOLD, True): (
        (2, 0x2102),   # C  DOUBLE-STRUCK CAPITAL C
        (7, 0x210D),   # H  DOUBLE-STRUCK CAPITAL H
        (13, 0x2115),  # N  DOUBLE-STRUCK CAPITAL N
        (15, 0x2119),  # P  DOUBLE-STRUCK CAPITAL P
        (16, 0x211A),  # Q  DOUBLE-STRUCK CAPITAL Q
        (17, 0x211D),  # R  DOUBLE-STRUCK CAPITAL R
        (25, 0x2124),  # Z  DOUBLE-STRUCK CAPITAL Z
    ),
    (_F.SERIF, _C.LETTER, _E.ITALIC, False): (
        (7, 0x210E),   # h  PLANCK CONSTANT
    ),
    (_F.SERIF, _C.GREEK, _E.NORMAL, True): (
        (17, 0x03F4),  # GREEK CAPITAL THETA SYMBOL
        (25, 0x2207),  # NABLA
    ),
    (_F.SERIF, _C.GREEK, _E.NORMAL, False): (
        (25, 0x2202),  # PARTIAL DIFFERENTIAL
        (26, 0x03F5),  # GREEK LUNATE EPSILON SYMBOL
        (27, 0x03D1),  # GREEK THETA SYMBOL
        (28, 0x03F0),  # GREEK KAPPA SYMBOL
        (29, 0x03D5),  # GREEK PHI SYMBOL
        (30, 0x03F1),  # GREEK RHO SYMBOL
        (31, 0x03D6),  # GREEK PI SYMBOL
    ),
})

# Flattened reverse view: (code_point, family, category, emphasis, uppercase, offset)
_OVERRIDE_ENTRIES: tuple[tuple[int, StyleFamily, Category, Emphasis, bool, int], ...] = tuple(
    (code_point, family, category, emphasis, uppercase, offset)
    for (family, category, emphasis, uppercase), table in _OVERRIDES.items()
    for offset, code_point in table
)


# ---------------------------------------------------------------------------
# Registry lookups
# ---------------------------------------------------------------------------


def has_table(family: StyleFamily, category: Category) -> bool:
    """True if ``category`` has any styled form in ``family``."""
    return (family, category) in _SLOTS


def slot_for(
    family: StyleFamily, category: Category, emphasis: Emphasis,
) -> BasePair | None:
    """Return ``(uppercase_base, lowercase_base)`` or None if unallocated."""
    slots = _SLOTS.get((family, category))
    if slots is None:
        return None
    return slots.get(emphasis)


def override_for(
    family: StyleFamily, category: Category, emphasis: Emphasis, uppercase: bool,
) -> OverrideTable:
    """Return the sorted ``(offset, code_point)`` corner cases for a slot."""
    return _OVERRIDES.get((family, category, emphasis, uppercase), ())


def lookup_override(table: OverrideTable, offset: int) -> int | None:
    """Binary-search ``table`` for ``offset``; return its code point or None."""
    idx = bisect.bisect_left(table, offset, key=itemgetter(0))
    if idx < len(table) and table[idx][0] == offset:
        return table[idx][1]
    return None


def reverse_override(
    code_point: int,
) -> tuple[StyleFamily, Category, Emphasis, bool, int] | None:
    """Exact-match a code point against every corner case.

    Returns ``(family, category, emphasis, uppercase, offset)`` or None.
    """
    for entry in _OVERRIDE_ENTRIES:
        if entry[0] == code_point:
            return entry[1:]
    return None


def alphabet_length(category: Category, uppercase: bool = True) -> int:
    """Number of offsets in ``category``'s alphabet for the given case."""
    upper, lower = _ALPHABET_LENGTH[category]
    return upper if uppercase else lower


def iter_slots():
    """Yield ``(family, category, emphasis, (upper_base, lower_base))`` for every allocated slot."""
    for (family, category), slots in _SLOTS.items():
        for emphasis in Emphasis:
            pair = slots.get(emphasis)
            if pair is not None:
                yield family, category, emphasis, pair


def supported_targets(category: Category) -> list[tuple[StyleFamily, Emphasis]]:
    """All ``(family, emphasis)`` targets ``category`` can be encoded into."""
    return [
        (family, emphasis)
        for family, cat, emphasis, _ in iter_slots()
        if cat is category
    ]
