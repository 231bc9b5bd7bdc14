"""
Library API — Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the logging setup, and `run()`.
When:  Loaded once at module import time; validated before the app starts.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development, so the service
    starts with no environment at all.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Library API")

    # What: Whether the catalog starts with the two seed books
    # Tests that need an empty catalog set SEED_CATALOG=false
    seed_catalog: bool = Field(default=True)

    # What: Which ActivityLogger implementation the app wires in
    # Options: console (one line per call on stdout), logging (stdlib logger)
    activity_logger: str = Field(default="console")

    @field_validator("activity_logger")
    @classmethod
    def validate_activity_logger(cls, v: str) -> str:
        """Ensures the activity logger kind is one we know how to build."""
        valid_kinds = {"console", "logging"}
        lower = v.lower()
        if lower not in valid_kinds:
            raise ValueError(f"Invalid activity_logger '{v}'. Must be one of: {valid_kinds}")
        return lower

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # LOG_LEVEL and log_level both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
