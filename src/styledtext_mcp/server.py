"""styledtext-mcp: FastMCP server exposing the Unicode styled-text engine.

Tools convert plain text to Mathematical Alphanumeric styles (serif,
sans-serif, script, fraktur, monospace, double-struck in normal, bold,
italic, bold-italic) and back. All tools are pure and free.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP
from pydantic import ValidationError

from styledtext_mcp.tables import Category, Emphasis, StyleFamily

logger = logging.getLogger(__name__)

mcp = FastMCP("styledtext")


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from styledtext_mcp.config import Settings

    _settings = Settings()
    return _settings


def _selector_error(exc: ValueError) -> dict[str, Any]:
    return {
        "error": str(exc),
        "families": [f.value for f in StyleFamily],
        "emphases": [e.value for e in Emphasis],
    }


def _policy_error(exc: ValueError) -> dict[str, Any]:
    from styledtext_mcp.formatter import ErrorPolicy

    return {
        "error": str(exc),
        "error_policies": [p.value for p in ErrorPolicy],
    }


def _settings_error(exc: ValidationError) -> dict[str, Any]:
    logger.error("Invalid styledtext settings: %s", exc)
    return {"error": f"Invalid STYLEDTEXT_* setting: {exc}"}


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check: returns service version and status."""
    import importlib.metadata as _meta

    from styledtext_mcp import __version__

    versions: dict[str, str] = {"styledtext_mcp": __version__}
    try:
        versions["fastmcp"] = _meta.version("fastmcp")
    except _meta.PackageNotFoundError:
        versions["fastmcp"] = "unknown"

    return {
        "service": "styledtext-mcp",
        "version": __version__,
        "versions": versions,
        "status": "ok",
    }


@mcp.tool()
async def list_styles() -> dict[str, Any]:
    """List style families, emphases, and which pairs each category supports.

    Returns:
        families: All family names.
        emphases: All emphasis names.
        supported: Per category ("letter", "digit", "greek"), the list of
            "family/emphasis" targets that have Unicode code points.
    """
    from styledtext_mcp.tables import supported_targets

    return {
        "families": [f.value for f in StyleFamily],
        "emphases": [e.value for e in Emphasis],
        "supported": {
            category.value: [f"{f}/{e}" for f, e in supported_targets(category)]
            for category in Category
            if category is not Category.OTHER
        },
    }


@mcp.tool()
async def style_text(
    text: str,
    family: str | None = None,
    emphasis: str | None = None,
    errors: str | None = None,
) -> dict[str, Any]:
    """Convert text to a Unicode Mathematical Alphanumeric style.

    Letters, digits and Greek letters are converted; everything else
    passes through. Some combinations do not exist in Unicode (digits in
    script or fraktur, Greek in monospace, italic digits); those
    characters are handled per the error policy.

    Args:
        text: Text to convert.
        family: serif, sans-serif, script, fraktur, monospace, double-struck.
            Defaults to the server setting (monospace).
        emphasis: normal, bold, italic, bold-italic. Defaults to normal.
        errors: keep (leave unstyled), skip (drop), replace (use the
            configured replacement), strict (fail the call).

    Returns:
        text: The converted text.
        family/emphasis: The style actually applied.
    """
    from styledtext_mcp.encoder import StyleError
    from styledtext_mcp.formatter import ErrorPolicy
    from styledtext_mcp.formatter import style_text as _style_text

    try:
        settings = get_settings()
    except ValidationError as exc:
        return _settings_error(exc)
    try:
        target_family = StyleFamily(family or settings.styledtext_default_family)
        target_emphasis = Emphasis(emphasis or settings.styledtext_default_emphasis)
    except ValueError as exc:
        return _selector_error(exc)
    try:
        policy = ErrorPolicy(errors or settings.styledtext_error_policy)
        converted = _style_text(
            text,
            target_family,
            target_emphasis,
            errors=policy,
            replacement=settings.styledtext_replacement,
        )
    except StyleError as exc:
        return {"error": str(exc), "char": exc.char}
    except ValueError as exc:
        return _policy_error(exc)

    return {
        "text": converted,
        "family": target_family.value,
        "emphasis": target_emphasis.value,
    }


@mcp.tool()
async def plain_text(text: str) -> dict[str, Any]:
    """Turn styled Unicode letters, digits and Greek back into plain text."""
    from styledtext_mcp.formatter import to_plain

    return {"text": to_plain(text)}


@mcp.tool()
async def random_style(
    text: str,
    exclude_families: list[str] | None = None,
    exclude_emphases: list[str] | None = None,
    seed: int | None = None,
) -> dict[str, Any]:
    """Style each character with a randomly chosen family and emphasis.

    Args:
        text: Text to convert.
        exclude_families: Families never drawn.
        exclude_emphases: Emphases never drawn.
        seed: Seed for reproducible output. Defaults to the server setting.
    """
    from styledtext_mcp.formatter import random_style_text

    if seed is None:
        try:
            seed = get_settings().styledtext_random_seed
        except ValidationError as exc:
            return _settings_error(exc)
    try:
        converted = random_style_text(
            text,
            exclude_families=exclude_families or (),
            exclude_emphases=exclude_emphases or (),
            seed=seed,
        )
    except ValueError as exc:
        return _selector_error(exc)
    return {"text": converted}


@mcp.tool()
async def format_markdown(text: str) -> dict[str, Any]:
    """Convert markdown inline formatting to styled Unicode.

        **bold**          → 𝗯𝗼𝗹𝗱
        *italic*          → 𝘪𝘵𝘢𝘭𝘪𝘤
        ***bold italic*** → 𝙗𝙤𝙡𝙙 𝙞𝙩𝙖𝙡𝙞𝙘
        `monospace`       → 𝚖𝚘𝚗𝚘𝚜𝚙𝚊𝚌𝚎

    Unmatched delimiters are left as-is.
    """
    from styledtext_mcp.formatter import markdown_to_unicode

    return {"text": markdown_to_unicode(text)}


@mcp.tool()
async def classify_char(char: str) -> dict[str, Any]:
    """Describe a single character's alphabet identity and current style."""
    from styledtext_mcp.classifier import classify

    try:
        decoded = classify(char)
    except ValueError as exc:
        return {"error": str(exc)}
    if decoded is None:
        return {"char": char, "classified": False}
    return {
        "char": char,
        "classified": True,
        "category": decoded.category.value,
        "uppercase": decoded.uppercase,
        "offset": decoded.offset,
        "family": decoded.family.value,
        "emphasis": decoded.emphasis.value,
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the styledtext MCP server."""
    logger.info("Starting styledtext MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
