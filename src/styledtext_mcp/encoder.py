"""Re-encode a decoded character into a target style family and emphasis."""

from __future__ import annotations

import logging

from styledtext_mcp.classifier import DecodedChar, classify
from styledtext_mcp.tables import (
    Category,
    Emphasis,
    StyleFamily,
    alphabet_length,
    has_table,
    lookup_override,
    override_for,
    slot_for,
)

logger = logging.getLogger(__name__)

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StyleError(Exception):
    """Base exception for conversion failures."""

    def __init__(
        self,
        message: str,
        *,
        char: str | None = None,
        family: StyleFamily | None = None,
        emphasis: Emphasis | None = None,
    ):
        self.char = char
        self.family = family
        self.emphasis = emphasis
        super().__init__(message)


class OffsetOutOfRangeError(StyleError):
    """Raised when a decoded offset exceeds its alphabet length."""

    def __init__(self, offset: int, length: int, **kwargs):
        self.offset = offset
        self.length = length
        super().__init__(f"offset {offset} exceeds length {length}", **kwargs)


class UnsupportedCombinationError(StyleError):
    """Raised when the target family/emphasis has no form for the category."""

    def __init__(self, category: Category, family: StyleFamily, emphasis: Emphasis, **kwargs):
        self.category = category
        super().__init__(
            f"no {family.value}-{emphasis.value} form for {category.value} characters",
            family=family,
            emphasis=emphasis,
            **kwargs,
        )


class InvalidCodePointError(StyleError):
    """Raised when table arithmetic yields a non-scalar value (table defect)."""

    def __init__(self, code_point: int, **kwargs):
        self.code_point = code_point
        super().__init__(f"invalid code point {code_point:#06x}", **kwargs)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _to_char(code_point: int, decoded: DecodedChar, family: StyleFamily, emphasis: Emphasis) -> str:
    if not 0 <= code_point <= _MAX_CODE_POINT or code_point in _SURROGATES:
        raise InvalidCodePointError(
            code_point, char=decoded.char, family=family, emphasis=emphasis,
        )
    return chr(code_point)


def encode(decoded: DecodedChar, family: StyleFamily | str, emphasis: Emphasis | str) -> str:
    """Encode ``decoded`` in the requested family and emphasis.

    Corner-case overrides are consulted before the base pair, so a
    Letterlike Symbols code point is returned wherever Unicode left a hole.

    Raises:
        UnsupportedCombinationError: No mapping exists for the category in
            this family, or the emphasis slot is unallocated.
        OffsetOutOfRangeError: ``decoded.offset`` is outside the alphabet.
        InvalidCodePointError: Arithmetic produced a non-scalar value.
    """
    family = StyleFamily(family)
    emphasis = Emphasis(emphasis)
    category = decoded.category

    if not has_table(family, category):
        logger.debug("No %s table for %s", family, category)
        raise UnsupportedCombinationError(category, family, emphasis, char=decoded.char)

    length = alphabet_length(category, decoded.uppercase)
    if not 0 <= decoded.offset < length:
        raise OffsetOutOfRangeError(
            decoded.offset, length, char=decoded.char, family=family, emphasis=emphasis,
        )

    explicit = lookup_override(
        override_for(family, category, emphasis, decoded.uppercase), decoded.offset,
    )
    if explicit is not None:
        return _to_char(explicit, decoded, family, emphasis)

    pair = slot_for(family, category, emphasis)
    if pair is None:
        logger.debug("No %s-%s slot for %s", family, emphasis, category)
        raise UnsupportedCombinationError(category, family, emphasis, char=decoded.char)

    upper_base, lower_base = pair
    base = upper_base if decoded.uppercase else lower_base
    return _to_char(base + decoded.offset, decoded, family, emphasis)


def convert(ch: str, family: StyleFamily | str, emphasis: Emphasis | str) -> str:
    """Convert one character to ``family``/``emphasis``.

    Characters the classifier does not recognise are returned unchanged.
    Unknown selector names raise ValueError even for pass-through input.
    """
    family = StyleFamily(family)
    emphasis = Emphasis(emphasis)
    decoded = classify(ch)
    if decoded is None:
        return ch
    return encode(decoded, family, emphasis)
