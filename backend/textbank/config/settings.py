"""
Centralized Configuration System for textbank

Type-safe configuration using Pydantic Settings:
- Environment variable binding with defaults
- Hierarchical configuration structure
- Test-friendly configuration isolation (reload_settings)
"""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranslationSettings(BaseSettings):
    """Translation file and fallback configuration"""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATIONS_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    root_folder: str = Field(
        default="lang",
        description="Folder holding one XML document per language"
    )
    file_pattern: str = Field(
        default="{0}_website.xml",
        description="File name pattern; {0} is replaced with the language id"
    )
    reference_language: str = Field(
        default="en",
        description="Language that receives every fallback write"
    )
    default_language: str = Field(
        default="en",
        description="Active language when the request does not choose one"
    )
    fill_empty_nodes: bool = Field(
        default=True,
        description="Write the fallback into an existing node that has neither text nor children"
    )

    @field_validator("file_pattern")
    @classmethod
    def validate_file_pattern(cls, v: str) -> str:
        if "{0}" not in v:
            raise ValueError("file_pattern must contain the '{0}' language placeholder")
        if "/" in v or "\\" in v:
            raise ValueError("file_pattern must be a file name, not a path")
        return v

    @field_validator("reference_language", "default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("language must not be empty")
        return v

    def file_path_for(self, language: str) -> Path:
        """Physical location of the document for a language"""
        return Path(self.root_folder) / self.file_pattern.format(language)


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    debug: bool = Field(
        default=False,
        description="Log textbank at DEBUG level regardless of log_level"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level of the textbank loggers"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    # Nested settings
    translations: TranslationSettings = Field(default_factory=TranslationSettings)


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Can be used with FastAPI's Depends() for dependency injection.
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        ApplicationSettings: New settings instance with reloaded values
    """
    global settings
    settings = ApplicationSettings()
    return settings
