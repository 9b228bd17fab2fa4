"""
Music Assistant MCP Configuration

Environment-based configuration for the MCP server.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Read version from pyproject.toml - the single source of truth."""
    try:
        from importlib.metadata import version
        return version("music-assistant-mcp")
    except Exception:
        pass
    # Fallback: parse pyproject.toml directly (dev / non-installed mode)
    try:
        from pathlib import Path
        import re
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE)
        if match:
            return match.group(1)
    except Exception:
        pass
    return "0.0.0-unknown"


DEFAULT_MA_URL: str = "http://localhost:8095"


class Settings(BaseSettings):
    """Application settings loaded from environment variables (``MA_*``)."""

    # Service Info (app_version: single source is pyproject.toml when installed; else fallback)
    app_name: str = "music-assistant-mcp"
    app_version: str = _app_version_from_package()

    # Music Assistant server
    url: str = DEFAULT_MA_URL
    token: Optional[str] = None  # long-lived access token, sent as Authorization: Bearer
    request_timeout: Optional[float] = None  # seconds; None leaves requests unbounded

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="MA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
