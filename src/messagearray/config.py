"""Configuration management for messagearray using Pydantic models."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import CONFIG_FILE_NAME, DEFAULT_CONFIG


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    def to_logging_level(self) -> str:
        """Name understood by the logging module."""
        return "WARNING" if self is LogLevel.WARN else self.value.upper()


class RenderConfig(BaseModel):
    """Render configuration section."""
    prefix: str | None = None
    show_msg_ids: bool = Field(alias="showMsgIds", default=DEFAULT_CONFIG["show_msg_ids"])
    h2: bool | None = None  # None keeps each channel's default
    div_atts: dict[str, str] = Field(alias="divAtts", default_factory=dict)
    ul_atts: dict[str, str] = Field(alias="ulAtts", default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)

    def to_options(self) -> dict[str, Any]:
        """Keyword options for MessageStore.render_*/output_* calls."""
        options: dict[str, Any] = {
            "show_msg_ids": self.show_msg_ids,
            "div_atts": dict(self.div_atts),
            "ul_atts": dict(self.ul_atts),
        }
        if self.prefix:
            options["prefix"] = self.prefix
        if self.h2 is not None:
            options["h2"] = self.h2
        return options


class SiteConfig(BaseModel):
    """Site resolver configuration section."""
    catalog: str | None = None  # Path to a JSON message catalog
    lang: str = DEFAULT_CONFIG["lang"]

    @field_validator("lang")
    @classmethod
    def validate_lang(cls, v):
        if not v or not v.strip():
            raise ValueError("lang must not be empty")
        return v


class StoreConfig(BaseModel):
    """Message store configuration section."""
    fail_on_error_add: bool = Field(alias="failOnErrorAdd", default=DEFAULT_CONFIG["fail_on_error_add"])

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class MessageArrayConfig(BaseModel):
    """Complete messagearray configuration model."""
    render: RenderConfig = Field(default_factory=RenderConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> MessageArrayConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .messagearray.json

    Returns:
        MessageArrayConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            if not isinstance(config_data, dict):
                raise ValueError(f"Config file {config_path} must contain a JSON object")
            return MessageArrayConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except (OSError, ValidationError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .messagearray.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> MessageArrayConfig:
    """Create default configuration."""
    return MessageArrayConfig()
