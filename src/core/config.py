"""Core settings.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP) and the fan-out service read config the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ns-fanout"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ns-fanout"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ns-fanout"
    return Path.home() / ".config" / "ns-fanout"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    The defaults reproduce the batch the tool has always sent: three GET
    requests to the local catalog's namespace listing.
    """

    model_config = SettingsConfigDict(
        env_prefix="NS_FANOUT_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user-level one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    target_url: str = Field(
        default="http://localhost:3000/namespaces",
        min_length=8,
        description="Absolute URL every request of the batch is sent to.",
    )
    request_count: int = Field(
        default=3,
        ge=0,
        description="Number of concurrent requests per batch.",
    )
    http_method: str = Field(
        default="GET",
        min_length=1,
        description="HTTP method of the request descriptor.",
    )
    content_type: str = Field(
        default="application/json",
        min_length=1,
        description="Content-Type header sent with every request (even without a body).",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Per-request transport timeout (seconds).",
    )
    user_agent: str = Field(
        default="ns-fanout/0.1",
        min_length=1,
        description="User-Agent header for outbound requests.",
    )
