"""Version utilities.

Release tags and formula versions are compared as semantic versions. Strings
are matched against the semver grammar first and then expressed as
packaging.version.Version objects, with every pre-release sorting before its
final release and build metadata dropped.
"""

import re

from packaging.version import InvalidVersion, Version

from ..exceptions import VersionError

_SEMVER_RE = re.compile(
    r"""
    ^
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.(?P<patch>\d+))?
    (?:-(?P<prerelease>[0-9A-Za-z.-]+))?
    (?:\+(?P<build>[0-9A-Za-z.-]+))?
    $
    """,
    re.VERBOSE,
)


def parse_version(value: str, target: str | None = None) -> Version:
    """Parse a version string or release tag as a semantic version.

    Accepts an optional "v" prefix and missing minor/patch components
    ("1.2" is 1.2.0). Build metadata is dropped. Any pre-release suffix
    sorts before the bare release; suffixes PEP 440 reads as alpha, beta,
    release candidate or dev releases keep their relative order.

    Args:
        value: Version string or tag (e.g. "v1.3.0", "2.0.0-beta.1")
        target: Optional name reported with the error (file or tag)

    Returns:
        Parsed version

    Raises:
        VersionError: If the string is not a semantic version

    """
    cleaned = value.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]

    match = _SEMVER_RE.match(cleaned)
    if not match:
        raise VersionError(f"'{value}' is not a semantic version", target=target)

    base = ".".join(
        match.group(part) or "0" for part in ("major", "minor", "patch")
    )
    prerelease = match.group("prerelease")
    if not prerelease:
        return Version(base)

    try:
        version = Version(f"{base}-{prerelease}")
    except InvalidVersion:
        version = None
    # "-1", "-r1" and "-post" read as post-releases in PEP 440
    if version is None or not version.is_prerelease or version.is_postrelease:
        version = Version(f"{base}.dev0")
    return version


def format_release_version(version: Version) -> str:
    """Return the major.minor.patch form of a version.

    Example:
        >>> format_release_version(Version("1.3.0rc1"))
        '1.3.0'

    """
    return f"{version.major}.{version.minor}.{version.micro}"


def is_newer(current: Version, latest: Version) -> bool:
    """Check whether latest is strictly greater than current."""
    return current < latest
