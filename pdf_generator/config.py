"""
PDF Generator Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class PDFGeneratorSettings(BaseSettings):
    """
    PDF generator configuration with validation.

    All settings can be overridden via environment variables.
    Validation happens at startup to fail fast on misconfiguration.
    """

    # === Server ===
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to"
    )
    port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        # PORT wins over PDF_SERVER_PORT when both are set
        validation_alias=AliasChoices("PORT", "PDF_SERVER_PORT"),
        description="Listening port"
    )
    max_body_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Maximum accepted request body size in bytes (default 10MB)"
    )

    # === Playwright ===
    playwright_headless: bool = Field(
        default=True,
        description="Run Chromium headless"
    )
    playwright_timeout: int = Field(
        default=30000,
        ge=1000,
        description="Default Playwright operation timeout in milliseconds"
    )
    settle_delay_ms: int = Field(
        default=50,
        ge=0,
        le=5000,
        description="Delay after the DOM cleanup pass before PDF export (0-5000ms)"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins ('*' for all)"
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        description="Root log level: DEBUG, INFO, WARNING, ERROR"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(allowed))}")
        return v_upper

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]

    class Config:
        env_prefix = ""  # No prefix, use exact env var names
        case_sensitive = False  # PLAYWRIGHT_TIMEOUT = playwright_timeout
        populate_by_name = True


@lru_cache()
def get_settings() -> PDFGeneratorSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return PDFGeneratorSettings()


def validate_config_on_startup() -> PDFGeneratorSettings:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    """
    import logging
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    logger.info(f"Configuration loaded: port={settings.port}")
    logger.info(f"  playwright_headless={settings.playwright_headless}")
    logger.info(f"  playwright_timeout={settings.playwright_timeout}ms")
    logger.info(f"  settle_delay_ms={settings.settle_delay_ms}")
    logger.info(f"  max_body_bytes={settings.max_body_bytes}")
    logger.info(f"  cors_origins={settings.cors_origins_list}")

    return settings
