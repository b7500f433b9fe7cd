"""GitHub release client.

Fetches release metadata from the GitHub REST API. Releases are fetched fresh
on every call and never cached.
"""

from typing import Any
from urllib.parse import quote

import orjson
import requests

from .auth import GitHubAuthManager
from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    HTTP_FORBIDDEN,
    HTTP_NOT_FOUND,
    HTTP_TOO_MANY_REQUESTS,
)
from .exceptions import ReleaseError
from .http_session import create_session
from .logger import get_logger
from .models.release import Release

logger = get_logger(__name__)


class GitHubReleaseClient:
    """Fetches release information for GitHub repositories."""

    def __init__(
        self,
        session: requests.Session | None = None,
        api_url: str = GITHUB_API_URL,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the release client.

        Args:
            session: Optional requests session; a new one is created if omitted
            api_url: Base URL of the GitHub REST API
            timeout: Request timeout in seconds

        """
        self.session = session or create_session()
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def get_latest_release(self, owner: str, repo: str) -> Release:
        """Fetch the latest published release of a repository.

        Args:
            owner: Repository owner/organization
            repo: Repository name

        Returns:
            The latest release

        Raises:
            ReleaseError: If the release cannot be fetched

        """
        url = f"{self.api_url}/repos/{owner}/{repo}/releases/latest"
        logger.debug("Fetching latest release from %s", url)
        return self._fetch_release(url, f"{owner}/{repo}")

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> Release:
        """Fetch the release for a specific tag.

        Args:
            owner: Repository owner/organization
            repo: Repository name
            tag: Git tag of the release

        Returns:
            The tagged release

        Raises:
            ReleaseError: If the release cannot be fetched

        """
        url = f"{self.api_url}/repos/{owner}/{repo}/releases/tags/{quote(tag, safe='')}"
        logger.debug("Fetching release %s from %s", tag, url)
        return self._fetch_release(url, f"{owner}/{repo}@{tag}")

    def _fetch_release(self, url: str, target: str) -> Release:
        data = self._get_json(url, target)
        if not isinstance(data, dict):
            raise ReleaseError("unexpected response from GitHub API", target=target)
        try:
            release = Release.from_api_response(data)
        except (KeyError, TypeError) as e:
            raise ReleaseError(f"malformed release data: {e}", target=target) from e

        logger.info(
            "Found release %s for %s with %d assets",
            release.tag_name,
            target,
            len(release.assets),
        )
        return release

    def _get_json(self, url: str, target: str) -> Any:
        headers = GitHubAuthManager.apply_auth({"Accept": GITHUB_ACCEPT_HEADER})
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ReleaseError(f"request to {url} failed: {e}", target=target) from e

        with response:
            if response.status_code in (HTTP_FORBIDDEN, HTTP_TOO_MANY_REQUESTS) and (
                response.headers.get("X-RateLimit-Remaining") == "0"
                or "rate limit" in response.text.lower()
            ):
                logger.warning("GitHub API rate limit exceeded while fetching %s", target)
                raise ReleaseError(
                    "GitHub API rate limit exceeded; set GITHUB_TOKEN to raise the limit",
                    target=target,
                )
            if response.status_code == HTTP_NOT_FOUND:
                raise ReleaseError("release not found", target=target)
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise ReleaseError(
                    f"GitHub API returned HTTP {response.status_code}", target=target
                ) from e

            try:
                return orjson.loads(response.content)
            except orjson.JSONDecodeError as e:
                raise ReleaseError(f"invalid JSON from {url}: {e}", target=target) from e
