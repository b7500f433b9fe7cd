"""Exception classes for tapsmith operations.

Every failure is terminal for the operation being performed. The CLI layer
prints the message and exits with a non-zero status.
"""


class TapsmithError(Exception):
    """Base class for tapsmith errors."""

    action: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error message describing the failure.
            target: Optional file, URL or repository the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return string representation of the error.

        Returns:
            Formatted error message with target if available.

        """
        if self.target:
            return f"{self.action} for '{self.target}': {self.message}"
        return f"{self.action}: {self.message}"


class FormulaError(TapsmithError):
    """Raised when a formula file cannot be read or parsed."""

    action = "Invalid formula"


class FormulaWriteError(TapsmithError):
    """Raised when a formula cannot be written."""

    action = "Writing formula failed"


class VersionError(TapsmithError):
    """Raised when a version string is not a semantic version."""

    action = "Invalid version"


class ReleaseError(TapsmithError):
    """Raised when release metadata cannot be fetched."""

    action = "Release lookup failed"


class AssetNotFoundError(TapsmithError):
    """Raised when no release asset matches the target platform."""

    action = "No matching asset"


class ChecksumError(TapsmithError):
    """Raised when a checksum cannot be computed."""

    action = "Checksum failed"


class SlugError(TapsmithError):
    """Raised for a malformed owner/repo[@tag] slug."""

    action = "Invalid slug"


class ConfigurationError(TapsmithError):
    """Raised for invalid settings."""

    action = "Invalid configuration"
