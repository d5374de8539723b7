"""
User configuration management for fastpaste.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fastpaste.config.models import UserConfigData
from fastpaste.core.errors import ConfigError
from fastpaste.utils.xdg import get_xdg_config_dir


logger = logging.getLogger(__name__)

# Environment variable prefixes
ENV_PREFIX = "FASTPASTE_"


class UserConfig:
    """
    Manages user-specific configuration for fastpaste using Pydantic Settings.

    The configuration is loaded from multiple sources with the following precedence:
    1. Environment variables (highest precedence) - handled by Pydantic Settings
    2. Config files (YAML) - handled by custom logic
    3. Default values (lowest precedence) - defined in model
    """

    def __init__(self, cli_config_path: str | Path | None = None):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
        """
        self._config_sources: dict[str, str] = {}
        self._main_config_path: Path | None = None
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_paths = self._generate_config_paths()
        self._load_config()

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend(
            [Path.cwd() / "fastpaste.yaml", Path.cwd() / ".fastpaste.yml"]
        )

        xdg_dir = get_xdg_config_dir()
        config_paths.extend([xdg_dir / "config.yaml", xdg_dir / "config.yml"])

        return config_paths

    def _search_config_files(self) -> tuple[dict[str, Any], Path | None]:
        """Return the data of the first existing config file and its path."""
        if self._cli_config_path and not self._cli_config_path.exists():
            raise ConfigError(f"Config file not found: {self._cli_config_path}")

        for config_path in self._config_paths:
            if not config_path.is_file():
                continue
            try:
                with config_path.open(encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(
                    f"Config file {config_path} must contain a mapping at top level"
                )
            return data, config_path

        return {}, None

    def _load_config(self) -> None:
        """Load configuration from config files and environment variables."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Config search paths: %s", [str(p) for p in self._config_paths]
            )

        config_data, found_path = self._search_config_files()

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            source = found_path or "environment"
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

        if found_path:
            logger.debug("Loaded user configuration from %s", found_path)
            self._main_config_path = found_path
            for key in config_data:
                self._config_sources[key] = f"file:{found_path.name}"
        else:
            logger.debug("No user configuration files found, using defaults")
            self._main_config_path = self._config_paths[-2]

        self._track_env_var_sources()

    def _track_env_var_sources(self) -> None:
        """Track which configuration values came from environment variables."""
        for env_name in os.environ:
            if not env_name.upper().startswith(ENV_PREFIX):
                continue
            config_key = env_name[len(ENV_PREFIX) :].lower()
            if config_key in UserConfigData.model_fields:
                self._config_sources[config_key] = "environment"

    @property
    def config_path(self) -> Path | None:
        return self._main_config_path

    def get_source(self, key: str) -> str:
        """
        Get the source of a configuration value.

        Returns:
            The source of the configuration value (environment, file:name, runtime, default)
        """
        return self._config_sources.get(key, "default")

    def get(self, key: str, default: Any = None) -> Any:
        if hasattr(self._config, key):
            return getattr(self._config, key)
        return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value for this session.

        Raises:
            ValueError: If the key is unknown or the value invalid
        """
        if key not in UserConfigData.model_fields:
            raise ValueError(f"Unknown configuration key: {key}")
        try:
            setattr(self._config, key, value)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {e}") from e
        self._config_sources[key] = "runtime"

    def get_log_level_int(self) -> int:
        """
        Get the log level as an integer value for use with logging module.

        Returns:
            The configured log level as an int (logging.INFO, etc.)
        """
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return level_map.get(self._config.log_level.upper(), logging.WARNING)


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """
    Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path)
