"""Centralized settings management using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    """Extraction run configuration."""

    model_config = SettingsConfigDict(env_prefix="EXTRACT_")

    output_dir: Path = Field(default=Path("./output"), description="Output directory")
    index_filename: str = Field(default="index.json", description="Index file name")
    create_output_dir: bool = Field(
        default=True,
        description="Create the output directory when it does not exist",
    )

    @field_validator("index_filename")
    @classmethod
    def validate_index_filename(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("Index filename must be a bare file name")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    format: Literal["json", "console"] = Field(default="console", description="Log format")


class Settings(BaseSettings):
    """Main settings class aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
