"""Release asset selection.

Assets are matched on their file name: it has to contain both the target OS
marker and the target architecture marker, and optionally end with a given
extension. The first match in API order wins.
"""

from collections.abc import Iterable

from .constants import DEFAULT_TARGET_ARCH, DEFAULT_TARGET_OS
from .exceptions import AssetNotFoundError
from .logger import get_logger
from .models.release import ReleaseAsset

logger = get_logger(__name__)


class AssetSelector:
    """Picks the release asset built for a target platform."""

    def __init__(
        self,
        target_os: str = DEFAULT_TARGET_OS,
        target_arch: str = DEFAULT_TARGET_ARCH,
    ) -> None:
        """Initialize the selector.

        Args:
            target_os: OS marker expected in asset file names (e.g. "darwin")
            target_arch: Architecture marker expected in asset file names
                (e.g. "amd64")

        """
        self.target_os = target_os
        self.target_arch = target_arch

    def matches(self, asset: ReleaseAsset, extension: str = "") -> bool:
        """Check whether an asset file name fits the target platform."""
        filename = asset.filename
        return (
            self.target_os in filename
            and self.target_arch in filename
            and filename.endswith(extension)
        )

    def select(
        self,
        assets: Iterable[ReleaseAsset],
        extension: str = "",
        target: str | None = None,
    ) -> ReleaseAsset:
        """Return the first asset matching the target platform.

        Args:
            assets: Release assets in API order
            extension: Required file name suffix, empty for any
            target: Optional name reported with the error

        Returns:
            The matching asset

        Raises:
            AssetNotFoundError: If no asset matches

        """
        assets = list(assets)
        for asset in assets:
            if self.matches(asset, extension):
                logger.debug("Selected asset %s", asset.filename)
                return asset

        logger.debug(
            "None of %s matched os=%s arch=%s extension=%r",
            [asset.filename for asset in assets],
            self.target_os,
            self.target_arch,
            extension,
        )
        wanted = f"{self.target_os}/{self.target_arch}"
        if extension:
            wanted += f" ({extension})"
        raise AssetNotFoundError(
            f"no release asset found for {wanted}", target=target
        )
