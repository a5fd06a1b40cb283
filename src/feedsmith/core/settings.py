"""Pydantic settings for configuration management."""

from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from .exceptions import ConfigurationError


COMPACT_VALUES = {"false", "no", "off", "none"}


class FeedSettings(BaseSettings):
    """Rendering and logging settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FEEDSMITH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Rendering
    indent: str = Field(default="  ", description="Indentation per nesting level, empty for compact output")
    xml_declaration: bool = Field(default=True, description="Prefix rendered feeds with an XML declaration")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="text", description="Log format: json, text")
    log_dir: Optional[Path] = Field(default=None, description="Optional log file directory")

    @field_validator("indent", mode="before")
    @classmethod
    def normalize_indent(cls, v):
        """Map falsy values (and their string spellings) to compact output."""
        if v is None or v is False:
            return ""
        if v is True:
            return "  "
        if isinstance(v, int):
            return " " * v
        if isinstance(v, str) and v.strip().lower() in COMPACT_VALUES:
            return ""
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v):
        """Only json and text logs are supported."""
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Export settings as dict."""
        return self.model_dump(mode="json")


# Global settings cache
_settings_cache: Optional[FeedSettings] = None


def get_settings(config_path: Optional[Path] = None) -> FeedSettings:
    """Get or create settings instance."""
    global _settings_cache

    if _settings_cache is not None:
        return _settings_cache

    # Load from YAML if provided
    if config_path and Path(config_path).exists():
        try:
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse config file: {e}", config_key=str(config_path)) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError("Config file must contain a mapping", config_key=str(config_path))

        # Merge with environment variables
        settings = FeedSettings(**config_data)
    else:
        # Load from environment only
        settings = FeedSettings()

    _settings_cache = settings
    return settings


def reload_settings(config_path: Optional[Path] = None):
    """Force reload settings."""
    global _settings_cache
    _settings_cache = None
    return get_settings(config_path)
