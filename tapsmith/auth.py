"""GitHub authentication for release API requests.

Tokens are looked up from an explicit per-run value, the environment and
finally the system keyring. Anonymous access keeps working when none of
them is available.
"""

import getpass
import os
import re

import keyring
from keyring.errors import KeyringError

from .constants import GITHUB_KEY_NAME, GITHUB_TOKEN_ENV_VARS
from .logger import get_logger

logger = get_logger(__name__)


def validate_github_token(token) -> bool:
    """Validate GitHub token format.

    Supports both legacy and new token formats:
    - Legacy: 40 hexadecimal characters (classic personal access tokens)
    - New prefixed formats: ghp_, gho_, ghu_, ghs_, ghr_ and github_pat_

    Args:
        token: The GitHub token to validate.

    Returns:
        True if token format is valid, False otherwise.

    """
    if not token or not isinstance(token, str):
        return False

    token = token.strip()
    if not token:
        return False

    if re.match(r"^[a-f0-9]{40}$", token):
        return True

    prefixed_patterns = [
        r"^ghp_[A-Za-z0-9_]{36,251}$",  # Personal Access Tokens
        r"^gho_[A-Za-z0-9_]{36,251}$",  # OAuth Access tokens
        r"^ghu_[A-Za-z0-9_]{36,251}$",  # GitHub App user-to-server tokens
        r"^ghs_[A-Za-z0-9_]{36,251}$",  # GitHub App server-to-server tokens
        r"^ghr_[A-Za-z0-9_]{36,251}$",  # GitHub App refresh tokens
        r"^github_pat_[A-Za-z0-9_]{36,243}$",  # Fine-grained PATs
    ]

    return any(re.match(pattern, token) for pattern in prefixed_patterns)


class GitHubAuthManager:
    """Resolves GitHub tokens and applies them to request headers."""

    GITHUB_KEY_NAME: str = GITHUB_KEY_NAME
    _explicit_token: str | None = None
    _user_notified: bool = False

    @classmethod
    def set_token(cls, token: str | None) -> None:
        """Use the given token for the rest of this run.

        Args:
            token: Token passed on the command line, or None to clear it

        """
        cls._explicit_token = token.strip() if token else None

    @staticmethod
    def save_token() -> None:
        """Prompt user for GitHub token and save it in the keyring.

        Raises:
            ValueError: If the token is empty, unconfirmed or malformed

        """
        try:
            token = getpass.getpass(
                prompt="Enter your GitHub token (input hidden): "
            ).strip()
            if not token:
                logger.error("Attempted to save an empty GitHub token.")
                raise ValueError("Token cannot be empty")

            confirm_token = getpass.getpass(
                prompt="Confirm your GitHub token: "
            ).strip()
            if token != confirm_token:
                logger.error("GitHub token confirmation does not match.")
                raise ValueError("Token confirmation does not match")
        except (EOFError, KeyboardInterrupt) as e:
            logger.error("GitHub token input aborted: %s", e)
            raise ValueError("Token input aborted by user") from e

        if not validate_github_token(token):
            logger.error("Invalid GitHub token format provided.")
            raise ValueError(
                "Invalid GitHub token format. Must be a valid GitHub token."
            )

        keyring.set_password(GitHubAuthManager.GITHUB_KEY_NAME, "token", token)
        logger.info("GitHub token saved successfully.")

    @staticmethod
    def remove_token() -> None:
        """Remove GitHub token from keyring."""
        try:
            keyring.delete_password(GitHubAuthManager.GITHUB_KEY_NAME, "token")
        except Exception as e:
            logger.error("Error removing GitHub token from keyring: %s", e)
            raise

    @staticmethod
    def _get_keyring_token() -> str | None:
        try:
            return keyring.get_password(GitHubAuthManager.GITHUB_KEY_NAME, "token")
        except KeyringError as e:
            # Expected in headless environments
            logger.debug("Keyring access failed: %s", e)
            return None

    @classmethod
    def get_token(cls) -> str | None:
        """Retrieve the GitHub token for this run.

        Returns:
            Token if available, None otherwise.

        """
        if cls._explicit_token:
            logger.debug("Using GitHub token from command line (value hidden)")
            return cls._explicit_token

        for env_var in GITHUB_TOKEN_ENV_VARS:
            token = os.environ.get(env_var, "").strip()
            if token:
                logger.debug("Using GitHub token from %s (value hidden)", env_var)
                return token

        token = cls._get_keyring_token()
        if token:
            logger.debug("GitHub token retrieved from keyring (value hidden)")
            return token

        logger.debug("No GitHub token available")
        return None

    @classmethod
    def apply_auth(cls, headers: dict[str, str]) -> dict[str, str]:
        """Apply GitHub authentication to request headers.

        If no token is available the request stays anonymous and the user
        is told once per run about the lower rate limit.

        Args:
            headers: HTTP headers to apply authentication to.

        Returns:
            Headers with authentication applied if a token is available.

        """
        token = cls.get_token()

        if token:
            headers["Authorization"] = f"Bearer {token}"
        elif not cls._user_notified:
            cls._user_notified = True
            logger.info(
                "No GitHub token configured. API rate limits apply "
                "(60 requests/hour). Set GITHUB_TOKEN or use "
                "'tapsmith auth --save-token' to raise the limit."
            )

        return headers

    @classmethod
    def is_authenticated(cls) -> bool:
        """Check whether a token is available for this run."""
        return cls.get_token() is not None
