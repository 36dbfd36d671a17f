"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Rollup HTTP server
    ROLLUP_HTTP_SERVER_URL: str = "http://127.0.0.1:5004"

    # Timeout (seconds) for the long poll and for notices/reports; None waits forever
    ROLLUP_HTTP_TIMEOUT: float | None = None

    # Pause before polling again after the finish call failed
    FINISH_RETRY_DELAY_SECONDS: float = 1.0

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    @field_validator("ROLLUP_HTTP_SERVER_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Validate the server URL and strip any trailing slash."""
        value = value.strip().rstrip("/")
        if not value:
            msg = "ROLLUP_HTTP_SERVER_URL cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("ROLLUP_HTTP_TIMEOUT", "FINISH_RETRY_DELAY_SECONDS", mode="after")
    @classmethod
    def must_be_positive(cls, value: float | None) -> float | None:
        """Reject zero or negative durations."""
        if value is not None and value <= 0:
            msg = "durations must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """
    Route structlog through stdlib logging.

    Development gets colored console lines at DEBUG; production and test
    get INFO, with production rendered as one JSON object per line.
    Request context bound with ``structlog.contextvars`` (request type,
    sender, input index) is merged into every event.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
