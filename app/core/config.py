"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

import random
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Private/dynamic port range accepted by the server
MIN_PORT = 1024
MAX_PORT = 65535

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

BUILD_TYPE_DEBUG = "DEBUG"
BUILD_TYPE_RELEASE = "RELEASE"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable carries the TYPING_ prefix, e.g.:
        export TYPING_PORT=8080
        export TYPING_LOG_LEVEL=info
        export TYPING_CLIENT_CRED=/path/to/google_client_cred.json
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="TYPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and the version string
    APP_NAME: str = "Typing"

    # VERSION / BUILD_NUMBER: Combined into "Typing 0.1.0-1 linux/x86_64"
    # BUILD_NUMBER is set by the ci/cd pipeline
    VERSION: str = "0.1.0"
    BUILD_NUMBER: str = "1"

    # BUILD: DEBUG enables colored log output, RELEASE disables it
    BUILD: str = BUILD_TYPE_DEBUG

    # ---------------------------------------------------------------------------
    # SERVER SETTINGS
    # ---------------------------------------------------------------------------
    # HOST: Bind address for uvicorn
    HOST: str = "0.0.0.0"

    # PORT: Listen port, must be in 1024-65535
    # - Missing or invalid values fall back to a random port (see get_port)
    PORT: Optional[int] = None

    # SHUTDOWN_GRACE_SECONDS: How long in-flight requests may drain on shutdown
    SHUTDOWN_GRACE_SECONDS: int = 5

    # ---------------------------------------------------------------------------
    # LOGGING SETTINGS
    # ---------------------------------------------------------------------------
    # LOG_LEVEL: DEBUG, INFO, WARN or ERROR (case-insensitive)
    # - Unknown values fall back to DEBUG
    LOG_LEVEL: str = "DEBUG"

    # ---------------------------------------------------------------------------
    # GOOGLE OAUTH SETTINGS
    # ---------------------------------------------------------------------------
    # CLIENT_CRED: Path of the OAuth client credential JSON downloaded from
    # Google Cloud Console (APIs & Services > Credentials > OAuth 2.0 Client IDs)
    CLIENT_CRED: str = "/etc/typing/google_client_cred.json"

    # ---------------------------------------------------------------------------
    # UPSTREAM HTTP SETTINGS
    # ---------------------------------------------------------------------------
    # HTTP_TIMEOUT: Seconds before an upstream Google API call is abandoned
    HTTP_TIMEOUT: float = 30.0

    @field_validator("PORT", mode="before")
    @classmethod
    def _parse_port(cls, value):
        """Drop ports that are not numbers or outside the dynamic range."""
        if value is None or value == "":
            return None
        try:
            port = int(value)
        except (TypeError, ValueError):
            return None
        if MIN_PORT <= port <= MAX_PORT:
            return port
        return None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _parse_log_level(cls, value):
        level = str(value or "").strip().upper()
        return level if level in LOG_LEVELS else "DEBUG"

    @field_validator("BUILD", mode="before")
    @classmethod
    def _parse_build(cls, value):
        build = str(value or "").strip().upper()
        return BUILD_TYPE_RELEASE if build == BUILD_TYPE_RELEASE else BUILD_TYPE_DEBUG

    def get_port(self) -> int:
        """Return the configured port, or a random one from the dynamic range."""
        if self.PORT is not None:
            return self.PORT
        return random.randint(MIN_PORT, MAX_PORT)

    @property
    def color_logs(self) -> bool:
        return self.BUILD != BUILD_TYPE_RELEASE


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from app.core.config import settings
settings = Settings()
