"""Centralized constants module for tapsmith.

Constants are organized by logical categories and use typing.Final
annotations to ensure immutability.

Usage:
    from tapsmith.constants import GITHUB_API_URL
"""

from typing import Final

# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "tapsmith"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "tapsmith"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_FILE_LOGGING: Final[bool] = False

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_TARGET: Final[str] = "target"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_LOGGING: Final[str] = "file_logging"
KEY_API_URL: Final[str] = "api_url"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_OS: Final[str] = "os"
KEY_ARCH: Final[str] = "arch"
KEY_HASH_TYPE: Final[str] = "hash_type"
KEY_LOGS: Final[str] = "logs"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Network Constants
# =============================================================================

GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github+json"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 30

HTTP_FORBIDDEN: Final[int] = 403
HTTP_NOT_FOUND: Final[int] = 404
HTTP_TOO_MANY_REQUESTS: Final[int] = 429

# =============================================================================
# Authentication Constants
# =============================================================================

GITHUB_KEY_NAME: Final[str] = "tapsmith-github-token"
GITHUB_TOKEN_ENV_VARS: Final[tuple[str, ...]] = (
    "TAPSMITH_GITHUB_TOKEN",
    "GITHUB_TOKEN",
)

# =============================================================================
# Release Target Constants
# =============================================================================

DEFAULT_TARGET_OS: Final[str] = "darwin"
DEFAULT_TARGET_ARCH: Final[str] = "amd64"

# =============================================================================
# Checksum Constants
# =============================================================================

DEFAULT_HASH_TYPE: Final[str] = "sha256"
HASH_CHUNK_SIZE: Final[int] = 65536  # 64KB chunks

# =============================================================================
# Formula Constants
# =============================================================================

URL_VERSION_PLACEHOLDER: Final[str] = "#{version}"
FORMULA_EXTENSION: Final[str] = ".rb"
FORMULA_TEMPLATE_NAME: Final[str] = "formula.rb.j2"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "tapsmith.log"
LOG_MAX_FILE_SIZE_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
