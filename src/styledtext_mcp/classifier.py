"""Decode a character into its alphabet identity.

The contiguous ranges are derived from the registry once at import:
every allocated slot contributes its uppercase and lowercase runs, minus
the offsets served by corner cases (those code points are either holes
in the Mathematical block or, for plain Greek, unrelated characters).
The result is a sorted tuple of non-overlapping ranges searched with
``bisect``. Code points that miss every range are matched exactly against
the corner-case tables.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass

from styledtext_mcp.tables import (
    Category,
    Emphasis,
    StyleFamily,
    alphabet_length,
    iter_slots,
    override_for,
    reverse_override,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedChar:
    """Alphabet identity of a classified character."""

    category: Category
    uppercase: bool
    offset: int
    family: StyleFamily
    emphasis: Emphasis
    char: str


@dataclass(frozen=True)
class CodeRange:
    """A run of consecutive code points sharing one slot."""

    start: int
    end: int  # inclusive
    category: Category
    uppercase: bool
    family: StyleFamily
    emphasis: Emphasis
    first_offset: int = 0

    def __contains__(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end


def _runs(offsets: list[int]) -> list[tuple[int, int]]:
    """Split sorted offsets into ``(first, last)`` runs of consecutive values."""
    runs: list[tuple[int, int]] = []
    for offset in offsets:
        if runs and runs[-1][1] == offset - 1:
            runs[-1] = (runs[-1][0], offset)
        else:
            runs.append((offset, offset))
    return runs


def _build_ranges() -> tuple[CodeRange, ...]:
    ranges: list[CodeRange] = []
    for family, category, emphasis, (upper_base, lower_base) in iter_slots():
        # Caseless categories share one base; classify them as lowercase once.
        cases = [(False, lower_base)] if upper_base == lower_base else [
            (True, upper_base), (False, lower_base),
        ]
        for uppercase, base in cases:
            skipped = {o for o, _ in override_for(family, category, emphasis, uppercase)}
            offsets = [
                o for o in range(alphabet_length(category, uppercase)) if o not in skipped
            ]
            for first, last in _runs(offsets):
                ranges.append(CodeRange(
                    start=base + first,
                    end=base + last,
                    category=category,
                    uppercase=uppercase,
                    family=family,
                    emphasis=emphasis,
                    first_offset=first,
                ))
    ranges.sort(key=lambda r: r.start)
    for prev, cur in zip(ranges, ranges[1:]):
        if cur.start <= prev.end:
            raise RuntimeError(
                f"Overlapping style ranges: U+{prev.start:04X}..U+{prev.end:04X} "
                f"and U+{cur.start:04X}..U+{cur.end:04X}"
            )
    return tuple(ranges)


RANGES: tuple[CodeRange, ...] = _build_ranges()
_STARTS: tuple[int, ...] = tuple(r.start for r in RANGES)


def find_range(code_point: int) -> CodeRange | None:
    """Return the contiguous range containing ``code_point``, if any."""
    idx = bisect.bisect_right(_STARTS, code_point) - 1
    if idx >= 0 and code_point in RANGES[idx]:
        return RANGES[idx]
    return None


def classify(ch: str) -> DecodedChar | None:
    """Classify a single character.

    Returns a ``DecodedChar`` for plain or styled Latin letters, Greek
    letters and digits, or None for anything else (punctuation, spaces,
    other scripts, emoji). None is the pass-through signal, not an error.

    Raises:
        TypeError: If ``ch`` is not a str.
        ValueError: If ``ch`` is not exactly one character.
    """
    if not isinstance(ch, str):
        raise TypeError(f"expected a str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)}")

    code_point = ord(ch)
    hit = find_range(code_point)
    if hit is not None:
        return DecodedChar(
            category=hit.category,
            uppercase=hit.uppercase,
            offset=hit.first_offset + code_point - hit.start,
            family=hit.family,
            emphasis=hit.emphasis,
            char=ch,
        )

    corner = reverse_override(code_point)
    if corner is not None:
        family, category, emphasis, uppercase, offset = corner
        return DecodedChar(
            category=category,
            uppercase=uppercase,
            offset=offset,
            family=family,
            emphasis=emphasis,
            char=ch,
        )

    return None
