"""Homebrew formula parsing and patching.

A formula is read as plain text. The version, url and sha256 assignments are
located with regular expressions and later patched in place, touching only
the first occurrence of each so that every other byte of the file is kept.
"""

import posixpath
import re
from pathlib import Path
from urllib.parse import urlparse

from .constants import URL_VERSION_PLACEHOLDER
from .exceptions import FormulaError, FormulaWriteError
from .logger import get_logger
from .utils.text_utils import escape_replacement, expand_placeholders, replace_first

logger = get_logger(__name__)

NAME_RE = re.compile(r"""^\s+name\s*=\s*['"](.*)["']""", re.MULTILINE)
VERSION_RE = re.compile(r"""(^\s+version\s*['"])([^'"\n]*)(["'])""", re.MULTILINE)
URL_RE = re.compile(r"""(^\s+url\s*['"])([^'"\n]*)(["'])""", re.MULTILINE)
SHA256_RE = re.compile(r"""(\s+sha256\s*['"])([^'"\n]*)(["'])""", re.MULTILINE)

GITHUB_URL_RE = re.compile(r"^https://[^/]*github\.com/([^/]+)/([^/]+)")


class Formula:
    """A formula file and the fields detected in it."""

    def __init__(self, content: str, path: Path | None = None) -> None:
        """Parse formula text.

        Args:
            content: Full text of the formula
            path: File the text was read from, used for messages and writing

        Raises:
            FormulaError: If version, sha256 or url cannot be detected, or
                the url is not a GitHub URL

        """
        self.path = path
        self.content = content
        self.name = ""
        self.version = ""
        self.sha256 = ""
        self.url_template = ""
        self.url = ""
        self.owner = ""
        self.repo = ""
        self._parse()

    @property
    def target(self) -> str | None:
        """Name used to identify this formula in messages."""
        if self.path is not None:
            return str(self.path)
        return self.name or None

    @property
    def is_url_template(self) -> bool:
        """Whether the url is built from the version placeholder."""
        return URL_VERSION_PLACEHOLDER in self.url_template

    @property
    def url_extension(self) -> str:
        """Extension of the current download url, e.g. ".zip"."""
        return posixpath.splitext(urlparse(self.url).path)[1]

    @classmethod
    def load(cls, path: str | Path) -> "Formula":
        """Read and parse a formula file.

        Args:
            path: Path to the formula file

        Returns:
            Parsed formula

        Raises:
            FormulaError: If the file cannot be read or parsed

        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FormulaError(f"cannot read file: {e}", target=str(path)) from e
        return cls(content, path=path)

    def _parse(self) -> None:
        if m := NAME_RE.search(self.content):
            self.name = m.group(1)

        m = VERSION_RE.search(self.content)
        if not m:
            raise FormulaError("no version detected", target=self.target)
        self.version = m.group(2)

        m = SHA256_RE.search(self.content)
        if not m:
            raise FormulaError("no sha256 detected", target=self.target)
        self.sha256 = m.group(2)

        m = URL_RE.search(self.content)
        if not m:
            raise FormulaError("no url detected", target=self.target)
        self.url_template = m.group(2)
        self.url = self.expand_url(self.version)

        m = GITHUB_URL_RE.match(self.url)
        if not m:
            raise FormulaError(
                f"invalid url format: {self.url_template}", target=self.target
            )
        self.owner, self.repo = m.group(1), m.group(2)
        logger.debug(
            "Parsed formula %s: version=%s url=%s repository=%s/%s",
            self.target,
            self.version,
            self.url,
            self.owner,
            self.repo,
        )

    def expand_url(self, version: str) -> str:
        """Return the download url for a version.

        Template urls get ``#{name}`` and ``#{version}`` substituted;
        literal urls are returned unchanged.
        """
        if not self.is_url_template:
            return self.url_template
        return expand_placeholders(
            self.url_template, {"name": self.name, "version": version}
        )

    def apply_update(self, version: str, url: str, sha256: str) -> None:
        """Record new release values and patch them into the content.

        Only the first version and sha256 assignments are rewritten, plus
        the first url assignment when the url is not template-driven.

        Args:
            version: New version string
            url: New concrete download url
            sha256: Checksum of the new download

        """
        self.version = version
        self.url = url
        self.sha256 = sha256

        self.content = replace_first(
            VERSION_RE, self.content, rf"\g<1>{escape_replacement(version)}\g<3>"
        )
        self.content = replace_first(
            SHA256_RE, self.content, rf"\g<1>{escape_replacement(sha256)}\g<3>"
        )
        if not self.is_url_template:
            self.url_template = url
            self.content = replace_first(
                URL_RE, self.content, rf"\g<1>{escape_replacement(url)}\g<3>"
            )

    def write(self, path: str | Path | None = None) -> Path:
        """Write the current content to disk.

        Args:
            path: Destination; defaults to the file the formula was loaded from

        Returns:
            The path written to

        Raises:
            FormulaWriteError: If there is no destination or writing fails

        """
        destination = Path(path) if path is not None else self.path
        if destination is None:
            raise FormulaWriteError("no destination path", target=self.name or None)
        try:
            destination.write_text(self.content, encoding="utf-8")
        except OSError as e:
            raise FormulaWriteError(str(e), target=str(destination)) from e
        logger.debug("Wrote formula %s", destination)
        return destination
