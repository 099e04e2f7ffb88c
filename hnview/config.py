"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseModel):
    """Comment tree rendering configuration."""

    # Columns of indentation added per nesting level
    indent_size: int = Field(default=1, ge=0)

    # Preferred comment width in columns
    # 0 derives the width from the terminal instead
    comment_width: int = Field(default=70, ge=0)

    # Width assumed when the terminal size cannot be queried
    # (output piped to a file, running under a test runner, etc.)
    fallback_screen_width: int = Field(default=80, gt=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class APISettings(BaseModel):
    """Render API configuration."""

    host: str = "localhost"
    port: int = 8000


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        RENDER__INDENT_SIZE=2
        RENDER__COMMENT_WIDTH=0     -> derive width from the terminal
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows RENDER__COMMENT_WIDTH syntax
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    # Nested settings
    render: RenderSettings = RenderSettings()
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()
