"""Release data models.

This module defines data structures for GitHub releases and their assets.
"""

import posixpath
from dataclasses import dataclass, field
from typing import Any, NotRequired, TypedDict
from urllib.parse import urlparse


class GitHubAsset(TypedDict):
    """GitHub API asset information dictionary."""

    name: str
    browser_download_url: str
    size: NotRequired[int]
    content_type: NotRequired[str]


@dataclass(frozen=True)
class ReleaseAsset:
    """Represents a downloadable file attached to a release."""

    name: str
    browser_download_url: str
    size: int = 0
    content_type: str | None = None

    @property
    def filename(self) -> str:
        """File name taken from the download URL."""
        return posixpath.basename(urlparse(self.browser_download_url).path)

    @classmethod
    def from_github_asset(cls, asset: GitHubAsset) -> "ReleaseAsset":
        """Create a ReleaseAsset from a GitHub API asset dictionary.

        Args:
            asset: GitHub API asset information dictionary

        Returns:
            ReleaseAsset: New ReleaseAsset instance

        """
        return cls(
            name=asset["name"],
            browser_download_url=asset["browser_download_url"],
            size=asset.get("size", 0),
            content_type=asset.get("content_type"),
        )


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    tag_name: str
    assets: list[ReleaseAsset] = field(default_factory=list)
    name: str | None = None
    prerelease: bool = False
    html_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Release":
        """Create a Release from a decoded GitHub API response.

        Args:
            data: Release JSON object

        Returns:
            Release: New Release instance

        Raises:
            KeyError: If the response has no tag_name
            TypeError: If the tag_name is not a non-empty string

        """
        tag_name = data["tag_name"]
        if not isinstance(tag_name, str) or not tag_name:
            raise TypeError(f"tag_name must be a non-empty string, got {tag_name!r}")

        return cls(
            tag_name=tag_name,
            assets=[
                ReleaseAsset.from_github_asset(asset)
                for asset in data.get("assets") or []
            ],
            name=data.get("name"),
            prerelease=bool(data.get("prerelease", False)),
            html_url=data.get("html_url"),
        )
