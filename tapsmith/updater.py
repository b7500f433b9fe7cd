"""Formula update workflow.

Reconciles a parsed formula with the latest GitHub release of its project:
compares versions, works out the new download url, hashes it and patches the
formula text.
"""

from .exceptions import VersionError
from .formula import Formula
from .github_client import GitHubReleaseClient
from .hash_calculator import HashCalculator
from .logger import get_logger
from .selector import AssetSelector
from .utils.version_utils import format_release_version, is_newer, parse_version

logger = get_logger(__name__)


class FormulaUpdater:
    """Brings formulas up to date with their latest release."""

    def __init__(
        self,
        client: GitHubReleaseClient,
        hash_calculator: HashCalculator,
        selector: AssetSelector | None = None,
    ) -> None:
        """Initialize the updater.

        Args:
            client: Client used to fetch releases
            hash_calculator: Calculator used to hash the new download
            selector: Asset selector for formulas with literal urls

        """
        self.client = client
        self.hash_calculator = hash_calculator
        self.selector = selector or AssetSelector()

    def update(self, formula: Formula) -> bool:
        """Update a formula to the latest release of its project.

        Args:
            formula: Parsed formula; patched in memory when updated

        Returns:
            True if the formula was updated, False if it is already current

        Raises:
            VersionError: If the current version or the release tag is not a
                semantic version
            ReleaseError: If the release cannot be fetched
            AssetNotFoundError: If no release asset fits a literal url
            ChecksumError: If the new download cannot be hashed

        """
        try:
            current = parse_version(formula.version)
        except VersionError as e:
            raise VersionError(
                f"invalid original version: {e.message}", target=formula.target
            ) from e

        release = self.client.get_latest_release(formula.owner, formula.repo)

        try:
            latest = parse_version(release.tag_name)
        except VersionError as e:
            raise VersionError(
                f"invalid release tag: {e.message}", target=formula.target
            ) from e

        if not is_newer(current, latest):
            logger.info(
                "%s is up to date (%s, latest release %s)",
                formula.target,
                formula.version,
                release.tag_name,
            )
            return False

        new_version = format_release_version(latest)
        if formula.is_url_template:
            new_url = formula.expand_url(new_version)
        else:
            asset = self.selector.select(
                release.assets,
                extension=formula.url_extension,
                target=formula.target,
            )
            new_url = asset.browser_download_url

        new_sha256 = self.hash_calculator.calculate_url_hash(new_url)

        old_version = formula.version
        formula.apply_update(new_version, new_url, new_sha256)
        logger.info(
            "Updated %s from %s to %s", formula.target, old_version, new_version
        )
        return True
