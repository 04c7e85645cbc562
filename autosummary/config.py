"""Configuration management using pydantic-settings."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Name under which the preprocessor is registered in book.toml
PREPROCESSOR_NAME = "auto-gen-summary"

# Keys of the [preprocessor.auto-gen-summary] table
FIRST_LINE_AS_LINK_TEXT = "first-line-as-link-text"
BLOW_UP = "blow-up"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUTO_SUMMARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default for `gen` when --first-line-as-link-text is not given
    use_title_as_link_text: bool = False

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()


@dataclass
class PreprocessorConfig:
    """Per-book options from the [preprocessor.auto-gen-summary] table."""

    first_line_as_link_text: bool = False
    blow_up: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "PreprocessorConfig":
        data = data or {}
        value = data.get(FIRST_LINE_AS_LINK_TEXT, False)
        return cls(
            # Anything that is not a real boolean counts as false
            first_line_as_link_text=value if isinstance(value, bool) else False,
            blow_up=BLOW_UP in data,
        )
