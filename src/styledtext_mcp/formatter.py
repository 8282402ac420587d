"""String-level styling on top of the per-character engine.

Every function here walks the input in order and converts one character
at a time; characters the classifier does not know (spaces, punctuation,
emoji, other scripts) come through untouched.

Markdown inline formatting maps onto the Sans-Serif blocks, which render
as styled text on plain-text surfaces:

    **bold**          → Sans-Serif Bold         (U+1D5D4 block)
    *italic*          → Sans-Serif Italic       (U+1D608 block)
    ***bold italic*** → Sans-Serif Bold Italic  (U+1D63C block)
    `monospace`       → Monospace               (U+1D670 block)
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Iterable
from enum import Enum

from styledtext_mcp.classifier import classify
from styledtext_mcp.encoder import StyleError, convert, encode
from styledtext_mcp.tables import (
    Category,
    Emphasis,
    StyleFamily,
    supported_targets,
)

logger = logging.getLogger(__name__)


class ErrorPolicy(str, Enum):
    """What to emit for a character that cannot take the requested style."""

    KEEP = "keep"        # the input character, unstyled
    SKIP = "skip"        # nothing
    REPLACE = "replace"  # the caller's replacement string
    STRICT = "strict"    # re-raise the StyleError

    def __str__(self) -> str:
        return self.value


_TARGETS: dict[Category, list[tuple[StyleFamily, Emphasis]]] = {
    category: supported_targets(category) for category in Category
}


def style_text(
    text: str,
    family: StyleFamily | str,
    emphasis: Emphasis | str,
    *,
    errors: ErrorPolicy | str = ErrorPolicy.KEEP,
    replacement: str | None = None,
) -> str:
    """Convert every character of ``text`` to ``family``/``emphasis``.

    Args:
        text: Input text, plain or already styled.
        family: Target style family (enum member or name).
        emphasis: Target emphasis (enum member or name).
        errors: Policy for characters with no form in the target style,
            e.g. digits in Script.
        replacement: Emitted per failed character under ``replace``.

    Returns:
        The converted text, same character order as the input.

    Raises:
        ValueError: Unknown family/emphasis/policy, or ``replace`` without
            a replacement.
        StyleError: Under the ``strict`` policy.
    """
    family = StyleFamily(family)
    emphasis = Emphasis(emphasis)
    policy = ErrorPolicy(errors)
    if policy is ErrorPolicy.REPLACE and replacement is None:
        raise ValueError("The 'replace' error policy needs a replacement string.")

    out: list[str] = []
    for ch in text:
        try:
            out.append(convert(ch, family, emphasis))
        except StyleError as exc:
            if policy is ErrorPolicy.STRICT:
                raise
            logger.warning("Cannot style %r as %s-%s: %s", ch, family, emphasis, exc)
            if policy is ErrorPolicy.KEEP:
                out.append(ch)
            elif policy is ErrorPolicy.REPLACE:
                out.append(replacement)
    return "".join(out)


def to_plain(text: str) -> str:
    """Turn styled letters, Greek and digits back into their plain forms."""
    return "".join(convert(ch, StyleFamily.SERIF, Emphasis.NORMAL) for ch in text)


def random_style_text(
    text: str,
    *,
    exclude_families: Iterable[StyleFamily | str] = (),
    exclude_emphases: Iterable[Emphasis | str] = (),
    seed: int | None = None,
) -> str:
    """Give each character a randomly drawn style its category supports.

    A character whose category has no target left after the exclusions
    passes through unchanged.
    """
    banned_families = {StyleFamily(f) for f in exclude_families}
    banned_emphases = {Emphasis(e) for e in exclude_emphases}
    rng = random.Random(seed)

    out: list[str] = []
    for ch in text:
        decoded = classify(ch)
        if decoded is None:
            out.append(ch)
            continue
        choices = [
            (family, emphasis)
            for family, emphasis in _TARGETS[decoded.category]
            if family not in banned_families and emphasis not in banned_emphases
        ]
        if not choices:
            out.append(ch)
            continue
        family, emphasis = rng.choice(choices)
        out.append(encode(decoded, family, emphasis))
    return "".join(out)


# ---------------------------------------------------------------------------
# Markdown shorthands
# ---------------------------------------------------------------------------


def to_bold(text: str) -> str:
    """Convert text to Sans-Serif Bold."""
    return style_text(text, StyleFamily.SANS_SERIF, Emphasis.BOLD)


def to_italic(text: str) -> str:
    """Convert text to Sans-Serif Italic (digits stay plain)."""
    return style_text(text, StyleFamily.SANS_SERIF, Emphasis.ITALIC)


def to_bold_italic(text: str) -> str:
    """Convert text to Sans-Serif Bold Italic (digits stay plain)."""
    return style_text(text, StyleFamily.SANS_SERIF, Emphasis.BOLD_ITALIC)


def to_monospace(text: str) -> str:
    """Convert text to Monospace."""
    return style_text(text, StyleFamily.MONOSPACE, Emphasis.NORMAL)


def markdown_to_unicode(text: str) -> str:
    """Replace markdown inline formatting with styled characters.

    Longer delimiters are handled first:
    1. `monospace` (backticks)
    2. ***bold italic***
    3. **bold**
    4. *italic*

    Unmatched delimiters are left as-is.
    """
    text = re.sub(r"`([^`]+)`", lambda m: to_monospace(m.group(1)), text)
    text = re.sub(r"\*\*\*(.+?)\*\*\*", lambda m: to_bold_italic(m.group(1)), text)
    text = re.sub(r"\*\*(.+?)\*\*", lambda m: to_bold(m.group(1)), text)
    text = re.sub(r"\*(.+?)\*", lambda m: to_italic(m.group(1)), text)
    return text
