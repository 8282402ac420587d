"""styledtext-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from styledtext_mcp.formatter import ErrorPolicy
from styledtext_mcp.tables import Emphasis, StyleFamily


class Settings(BaseSettings):
    """styledtext settings shared by the CLI and the MCP server."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target style when the caller names none
    styledtext_default_family: StyleFamily = StyleFamily.MONOSPACE
    styledtext_default_emphasis: Emphasis = Emphasis.NORMAL

    # Per-character failure handling
    styledtext_error_policy: ErrorPolicy = ErrorPolicy.KEEP
    styledtext_replacement: str | None = None

    # Random styling (None = unseeded)
    styledtext_random_seed: int | None = None

    styledtext_log_level: str = "WARNING"
