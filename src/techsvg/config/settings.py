"""Application settings.

All configuration is sourced from environment variables (and optionally `.env`).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed environment-backed settings for techsvg."""

    model_config = SettingsConfigDict(
        env_prefix="TECHSVG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_theme: str = "github-dark"

    log_level: str = "INFO"
    json_logs: bool = False

    # MCP server
    mcp_transport: str = Field(
        default="stdio",
        validation_alias=AliasChoices("TECHSVG_MCP_TRANSPORT", "MCP_TRANSPORT"),
    )
    mcp_host: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("TECHSVG_MCP_HOST", "MCP_HOST"),
    )
    mcp_port: int = Field(
        default=8000,
        validation_alias=AliasChoices("TECHSVG_MCP_PORT", "MCP_PORT"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
