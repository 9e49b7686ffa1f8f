"""Pydantic settings models for spewer configuration.

Two settings classes load from separate YAML config files with environment
variable override support. Source priority (highest to lowest):

    1. Init keyword arguments (e.g., values parsed from the command line)
    2. Environment variables (with prefix, e.g., SPEWER_OUTPUT_DIRECTORY)
    3. .env file
    4. YAML config file (e.g., config/spewer.yaml)
    5. Default values defined here

Config paths are resolved relative to PROJECT_ROOT so the application works
regardless of the current working directory.
"""

import codecs
import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from extract_spewer.spewer.types import OutputFormat

# Resolve project root: settings.py -> config/ -> extract_spewer/ -> src/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

_CONFIG_DIR = PROJECT_ROOT / "config"
_ENV_FILE = PROJECT_ROOT / ".env"


class SpewerSettings(BaseSettings):
    """Output sink: destination root, content format, metadata toggle."""

    output_directory: Path = Path(".")
    output_format: OutputFormat = OutputFormat.TEXT
    # Explicit override; wins over the extension implied by output_format.
    # An empty or blank value means "no extension", not "unset".
    output_extension: str | None = None
    output_metadata: bool = True
    output_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "spewer.yaml"),
        env_file=str(_ENV_FILE),
        env_prefix="SPEWER_",
        extra="ignore",
    )

    @field_validator("output_format", mode="before")
    @classmethod
    def _parse_output_format(cls, value: object) -> object:
        if isinstance(value, str):
            return OutputFormat.parse(value)
        return value

    @field_validator("output_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"Unknown output encoding: {value!r}") from exc

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


class LoggingSettings(BaseSettings):
    """Where the spewer logs and how much: JSON file plus console."""

    log_dir: str = "logs"
    log_file_name: str = "spewer.log"
    log_max_bytes: int = 10_485_760  # 10MB
    log_backup_count: int = 5
    console_level: str = "INFO"
    file_level: str = "DEBUG"

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "logging.yaml"),
        env_prefix="LOGGING_",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("console_level", "file_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return name
