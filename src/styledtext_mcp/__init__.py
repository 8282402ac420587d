"""styledtext-mcp: Unicode Mathematical Alphanumeric text styling."""

from styledtext_mcp.classifier import DecodedChar, classify
from styledtext_mcp.encoder import (
    InvalidCodePointError,
    OffsetOutOfRangeError,
    StyleError,
    UnsupportedCombinationError,
    convert,
    encode,
)
from styledtext_mcp.tables import Category, Emphasis, StyleFamily

__version__ = "0.1.0"

__all__ = [
    "Category",
    "DecodedChar",
    "Emphasis",
    "InvalidCodePointError",
    "OffsetOutOfRangeError",
    "StyleError",
    "StyleFamily",
    "UnsupportedCombinationError",
    "__version__",
    "classify",
    "convert",
    "encode",
]
