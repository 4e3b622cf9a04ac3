"""
Note Organizer: Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the storage layer, the HTTP app and the CLI entry point.
When:  Loaded once at module import time. Command-line flags may override
       individual values for a single run (see __main__.py).
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that reproduce the classic behaviour:
    a compact `notes.json` in the working directory and an API on port 3000.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Path of the JSON file holding the whole note collection
    # Relative paths resolve against the current working directory
    notes_file: str = Field(
        default="notes.json",
        description="Path of the JSON file that stores every note",
    )

    # What: Write an empty collection when the API starts and the file is missing
    # Without it every request fails with 500 until the first CLI add
    create_store_on_startup: bool = Field(default=True)

    # What: Indentation used when writing the file (None = compact, single line)
    json_indent: Optional[int] = Field(default=None, ge=0, le=8)

    # ── Server ────────────────────────────────────────────────────────────
    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=3000, ge=1, le=65535)

    # What: Controls verbosity of application logging
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
        "case_sensitive": False,  # NOTES_FILE and notes_file both work
    }


# Singleton instance: imported throughout the application
settings = Settings()
