"""New formula scaffolding.

Builds a formula for a GitHub project from an ``owner/repo[@tag]`` slug:
fetches the release, picks the binary for the target platform, hashes it
and renders the bundled formula template.
"""

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, PackageLoader, StrictUndefined

from .constants import FORMULA_EXTENSION, FORMULA_TEMPLATE_NAME
from .exceptions import FormulaWriteError, SlugError, VersionError
from .github_client import GitHubReleaseClient
from .hash_calculator import HashCalculator
from .logger import get_logger
from .models.formula_data import FormulaData
from .selector import AssetSelector
from .utils.version_utils import format_release_version, parse_version

logger = get_logger(__name__)

_WORD_SEPARATOR_RE = re.compile(r"[-_.]+")


@dataclass(frozen=True)
class Slug:
    """Repository reference parsed from ``owner/repo[@tag]``."""

    owner: str
    repo: str
    tag: str = ""


def parse_slug(slug: str) -> Slug:
    """Parse an ``owner/repo`` or ``owner/repo@tag`` slug.

    An empty tag means the latest release.

    Raises:
        SlugError: If the slug is not of the expected form

    """
    parts = slug.strip().split("/")
    if len(parts) != 2 or not parts[0]:
        raise SlugError("expected owner/repo[@tag]", target=slug)

    repo, _, tag = parts[1].partition("@")
    if not repo:
        raise SlugError("expected owner/repo[@tag]", target=slug)
    return Slug(owner=parts[0], repo=repo, tag=tag)


def capitalize_name(name: str) -> str:
    """Derive a Ruby class name from a formula name.

    Example:
        >>> capitalize_name("my-tool")
        'MyTool'

    """
    return "".join(
        word[:1].upper() + word[1:] for word in _WORD_SEPARATOR_RE.split(name)
    )


def _create_environment() -> Environment:
    return Environment(
        loader=PackageLoader("tapsmith", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class FormulaCreator:
    """Creates new formulas from GitHub releases."""

    def __init__(
        self,
        client: GitHubReleaseClient,
        hash_calculator: HashCalculator,
        selector: AssetSelector | None = None,
    ) -> None:
        """Initialize the creator.

        Args:
            client: Client used to fetch releases
            hash_calculator: Calculator used to hash the selected asset
            selector: Asset selector for the target platform

        """
        self.client = client
        self.hash_calculator = hash_calculator
        self.selector = selector or AssetSelector()
        self._environment = _create_environment()

    def create(self, slug: str) -> FormulaData:
        """Gather everything needed to render a formula.

        Args:
            slug: ``owner/repo`` or ``owner/repo@tag``

        Returns:
            Template data for the new formula

        Raises:
            SlugError: If the slug is malformed
            ReleaseError: If the release cannot be fetched
            VersionError: If the release tag is not a semantic version
            AssetNotFoundError: If no asset fits the target platform
            ChecksumError: If the asset cannot be hashed

        """
        parsed = parse_slug(slug)
        data = FormulaData(
            name=parsed.repo,
            capitalized_name=capitalize_name(parsed.repo),
            owner=parsed.owner,
            repo=parsed.repo,
        )

        if parsed.tag:
            release = self.client.get_release_by_tag(
                parsed.owner, parsed.repo, parsed.tag
            )
        else:
            release = self.client.get_latest_release(parsed.owner, parsed.repo)

        try:
            version = parse_version(release.tag_name)
        except VersionError as e:
            raise VersionError(
                f"invalid tag name: {release.tag_name}", target=slug
            ) from e
        data.version = format_release_version(version)

        asset = self.selector.select(release.assets, target=slug)
        data.url = asset.browser_download_url
        data.sha256 = self.hash_calculator.calculate_url_hash(data.url)

        logger.info("Prepared formula %s %s from %s", data.name, data.version, data.url)
        return data

    def render(self, data: FormulaData) -> str:
        """Render the formula template."""
        template = self._environment.get_template(FORMULA_TEMPLATE_NAME)
        return template.render(**data.to_dict())

    def write(
        self,
        data: FormulaData,
        stream: TextIO | None = None,
        output: str | Path | None = None,
        overwrite: bool = False,
    ) -> Path | None:
        """Write a rendered formula to a file or a stream.

        A file is written when ``overwrite`` is set or ``output`` is given;
        without an explicit ``output`` it is ``<name>.rb`` in the current
        directory. Otherwise the formula goes to ``stream`` (stdout by
        default).

        Returns:
            The path written to, or None when writing to a stream

        Raises:
            FormulaWriteError: If the file cannot be written

        """
        rendered = self.render(data)

        if not overwrite and output is None:
            (stream or sys.stdout).write(rendered)
            return None

        destination = Path(output) if output is not None else Path(
            f"{data.name}{FORMULA_EXTENSION}"
        )
        try:
            destination.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise FormulaWriteError(str(e), target=str(destination)) from e
        logger.info("Wrote new formula %s", destination)
        return destination
