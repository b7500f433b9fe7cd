"""Configuration management for tapsmith.

This module reads the optional global INI settings file and fills every
missing key with its default value.
"""

import configparser
from pathlib import Path
from typing import TypedDict

from .constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOGGING,
    DEFAULT_HASH_TYPE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TARGET_ARCH,
    DEFAULT_TARGET_OS,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_URL,
    KEY_API_URL,
    KEY_ARCH,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_LOGGING,
    KEY_HASH_TYPE,
    KEY_LOG_LEVEL,
    KEY_LOGS,
    KEY_OS,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_TARGET,
    VALID_LOG_LEVELS,
)
from .exceptions import ConfigurationError


class NetworkConfig(TypedDict):
    """Network configuration options."""

    api_url: str
    timeout_seconds: int


class TargetConfig(TypedDict):
    """Platform markers used to pick release assets."""

    os: str
    arch: str
    hash_type: str


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    logs: Path


class GlobalConfig(TypedDict):
    """Global application configuration."""

    log_level: str
    console_log_level: str
    file_logging: bool
    network: NetworkConfig
    target: TargetConfig
    directory: DirectoryConfig


class ConfigManager:
    """Loads and saves the global settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_dir: Optional custom config directory. Defaults to
                ~/.config/tapsmith/

        """
        self._config_dir: Path = (
            config_dir or Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
        )
        self._settings_file: Path = self._config_dir / CONFIG_FILE_NAME

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self._settings_file

    def get_default_global_config(self) -> dict[str, dict[str, str]]:
        """Get default global configuration values as INI strings."""
        return {
            SECTION_DEFAULT: {
                KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
                KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
                KEY_FILE_LOGGING: str(DEFAULT_FILE_LOGGING).lower(),
            },
            SECTION_NETWORK: {
                KEY_API_URL: GITHUB_API_URL,
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_TARGET: {
                KEY_OS: DEFAULT_TARGET_OS,
                KEY_ARCH: DEFAULT_TARGET_ARCH,
                KEY_HASH_TYPE: DEFAULT_HASH_TYPE,
            },
            SECTION_DIRECTORY: {
                KEY_LOGS: str(self._config_dir / "logs"),
            },
        }

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from the INI file.

        Missing files, sections and keys fall back to defaults.

        Returns:
            Global configuration dictionary

        Raises:
            ConfigurationError: If the file cannot be parsed or holds an
                invalid value

        """
        parser = configparser.ConfigParser(interpolation=None)
        parser.read_dict(self.get_default_global_config())

        if self._settings_file.exists():
            try:
                parser.read(self._settings_file, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    str(e), target=str(self._settings_file)
                ) from e

        return self._convert_to_global_config(parser)

    def _convert_to_global_config(
        self, parser: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert parsed INI values to typed configuration."""
        defaults = parser[SECTION_DEFAULT]
        network = parser[SECTION_NETWORK]
        target = parser[SECTION_TARGET]
        directory = parser[SECTION_DIRECTORY]

        try:
            timeout = network.getint(KEY_TIMEOUT_SECONDS)
            file_logging = defaults.getboolean(KEY_FILE_LOGGING)
        except ValueError as e:
            raise ConfigurationError(
                str(e), target=str(self._settings_file)
            ) from e

        if timeout is None or timeout <= 0:
            raise ConfigurationError(
                f"{KEY_TIMEOUT_SECONDS} must be a positive integer",
                target=str(self._settings_file),
            )

        log_level = self._validate_log_level(defaults[KEY_LOG_LEVEL])
        console_log_level = self._validate_log_level(
            defaults[KEY_CONSOLE_LOG_LEVEL]
        )

        return GlobalConfig(
            log_level=log_level,
            console_log_level=console_log_level,
            file_logging=bool(file_logging),
            network=NetworkConfig(
                api_url=network[KEY_API_URL].rstrip("/"),
                timeout_seconds=timeout,
            ),
            target=TargetConfig(
                os=target[KEY_OS].strip(),
                arch=target[KEY_ARCH].strip(),
                hash_type=target[KEY_HASH_TYPE].strip().lower(),
            ),
            directory=DirectoryConfig(
                logs=Path(directory[KEY_LOGS]).expanduser(),
            ),
        )

    def _validate_log_level(self, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"unknown log level '{value}'",
                target=str(self._settings_file),
            )
        return level

    def save_default_config(self) -> Path:
        """Write the default settings file if it does not exist yet.

        Returns:
            Path of the settings file

        """
        if self._settings_file.exists():
            return self._settings_file

        self._config_dir.mkdir(parents=True, exist_ok=True)
        parser = configparser.ConfigParser(interpolation=None)
        parser.read_dict(self.get_default_global_config())
        with self._settings_file.open("w", encoding="utf-8") as f:
            parser.write(f)
        return self._settings_file


# Global config manager instance
config_manager = ConfigManager()
