"""Base command handler for tapsmith CLI commands.

This module provides the abstract base class that all command handlers
inherit from, together with the wiring of the shared HTTP services.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TextIO

from ..config import GlobalConfig
from ..github_client import GitHubReleaseClient
from ..hash_calculator import HashCalculator
from ..http_session import create_session
from ..selector import AssetSelector


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers."""

    def __init__(self, global_config: GlobalConfig, stdout: TextIO) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            global_config: Loaded global configuration
            stdout: Stream that receives formula text

        """
        self.global_config = global_config
        self.stdout = stdout

    @abstractmethod
    def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        """

    def _build_services(
        self, args: Namespace
    ) -> tuple[GitHubReleaseClient, HashCalculator, AssetSelector]:
        """Create the release client, hash calculator and asset selector."""
        network = self.global_config["network"]
        target = self.global_config["target"]
        session = create_session()

        client = GitHubReleaseClient(
            session=session,
            api_url=network["api_url"],
            timeout=network["timeout_seconds"],
        )
        hash_calculator = HashCalculator(
            target["hash_type"],
            session=session,
            timeout=network["timeout_seconds"],
        )
        selector = AssetSelector(
            target_os=getattr(args, "target_os", target["os"]),
            target_arch=getattr(args, "target_arch", target["arch"]),
        )
        return client, hash_calculator, selector
