"""Hash calculation for release assets.

Assets are streamed through the hash function in fixed-size chunks, so the
download is never held in memory as a whole.
"""

import hashlib
from collections.abc import Iterable

import requests

from .constants import DEFAULT_HASH_TYPE, DEFAULT_TIMEOUT_SECONDS, HASH_CHUNK_SIZE
from .exceptions import ChecksumError
from .http_session import USER_AGENT, create_session
from .logger import get_logger

logger = get_logger(__name__)


class HashCalculator:
    """Computes content hashes of byte strings, streams and URLs."""

    def __init__(
        self,
        hash_type: str = DEFAULT_HASH_TYPE,
        session: requests.Session | None = None,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the hash calculator with specified algorithm.

        Args:
            hash_type: Hash algorithm to use (e.g., 'sha256', 'sha512')
            session: Optional requests session used for downloads
            timeout: Download timeout in seconds

        Raises:
            ValueError: If specified hash algorithm is not available on the system
                or has no fixed digest length

        """
        self.hash_type = hash_type.lower()
        if self.hash_type not in hashlib.algorithms_available:
            raise ValueError(f"Hash type {self.hash_type} not available in this system")
        if hashlib.new(self.hash_type).digest_size == 0:
            raise ValueError(
                f"Hash type {self.hash_type} has a variable digest length"
            )
        self.session = session or create_session()
        self.timeout = timeout

    def calculate_bytes_hash(self, data: bytes) -> str:
        """Calculate the hash of a byte string.

        Example:
            >>> HashCalculator("sha256").calculate_bytes_hash(b"abc")
            'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

        """
        return self.calculate_stream_hash([data])

    def calculate_stream_hash(self, chunks: Iterable[bytes]) -> str:
        """Calculate the hash over an iterable of byte chunks.

        Args:
            chunks: Byte chunks in content order

        Returns:
            Calculated hash as lowercase hexadecimal string

        """
        hash_func = hashlib.new(self.hash_type)
        for chunk in chunks:
            if chunk:
                hash_func.update(chunk)
        return hash_func.hexdigest().lower()

    def calculate_url_hash(self, url: str) -> str:
        """Download a resource and calculate its hash.

        Args:
            url: URL of the resource

        Returns:
            Calculated hash as lowercase hexadecimal string

        Raises:
            ChecksumError: If the request fails or the server does not
                answer with a success status

        """
        logger.debug("Calculating %s of %s", self.hash_type, url)
        try:
            with self.session.get(
                url,
                headers={"User-Agent": USER_AGENT},
                stream=True,
                timeout=self.timeout,
            ) as response:
                response.raise_for_status()
                digest = self.calculate_stream_hash(
                    response.iter_content(chunk_size=HASH_CHUNK_SIZE)
                )
        except requests.HTTPError as e:
            raise ChecksumError(
                f"download returned HTTP {e.response.status_code}", target=url
            ) from e
        except requests.RequestException as e:
            raise ChecksumError(f"download failed: {e}", target=url) from e

        logger.debug("%s of %s: %s", self.hash_type, url, digest)
        return digest
