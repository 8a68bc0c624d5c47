"""
Configuration manager for apiwire.

Loads configuration from a TOML file, applies APIWIRE_* environment overrides,
validates the result, and writes it back.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .models import APIWireConfig, APIWireSettings

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "apiwire" / "config.toml"


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""

    config_section: Dict[str, Any]
    settings: APIWireSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """Loads, validates and saves apiwire configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config: Optional[APIWireConfig] = None

    def load_config(self) -> APIWireConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        if not config_data["endpoint"].get("host"):
            raise MissingConfigurationError("endpoint.host", str(self.config_file))

        try:
            self._config = APIWireConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                help_text="Check that the file exists and is readable",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = APIWireSettings()

        for section in ("endpoint", "client", "logging"):
            value = config_data.setdefault(section, {})
            if not isinstance(value, dict):
                raise InvalidConfigurationError(section, value, "a TOML table")

        endpoint = EnvironmentOverride(config_data["endpoint"], settings)
        endpoint.apply_string_if_set("apiwire_host", "host")
        endpoint.apply_string_if_set("apiwire_base_path", "base_path")
        endpoint.apply_string_if_set("apiwire_endpoint_name", "name")

        client = EnvironmentOverride(config_data["client"], settings)
        client.apply_string_if_set("apiwire_authorization_header", "authorization_header")
        client.apply_if_set("apiwire_debug", "debug_print_requests")
        client.apply_if_set("apiwire_timeout", "timeout")
        client.apply_if_set("apiwire_max_workers", "max_workers")
        client.apply_string_if_set("apiwire_credentials_file", "credentials_file")

        logging_section = EnvironmentOverride(config_data["logging"], settings)
        logging_section.apply_string_if_set("apiwire_logging_level", "level")
        logging_section.apply_string_if_set("apiwire_logging_format", "format")
        logging_section.apply_string_if_set("apiwire_logging_file_path", "file_path")
        if settings.apiwire_logging_output:
            config_data["logging"]["output"] = [
                o.strip() for o in settings.apiwire_logging_output.split(",") if o.strip()
            ]

        return config_data

    def save_config(self, config: APIWireConfig) -> None:
        """Write configuration to the TOML file."""
        data = config.model_dump(mode="json", exclude_none=True)
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(data, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {self.config_file}: {e}",
                help_text="Check permissions on the configuration directory",
            ) from e
        self._config = config
