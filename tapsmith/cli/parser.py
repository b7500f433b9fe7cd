"""CLI argument parser for tapsmith.

This module handles the parsing of command-line arguments and provides
a clean interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from .. import __version__
from ..config import GlobalConfig


class CLIParser:
    """Command-line argument parser for tapsmith."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Global configuration supplying option defaults

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        Returns:
            Parsed arguments namespace

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with all subcommands."""
        parser = self._create_main_parser()
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="tapsmith",
            description="Keep Homebrew formulas in step with GitHub releases",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Print an updated formula
  %(prog)s update Formula/ghg.rb

  # Update formulas in place
  %(prog)s update -w Formula/*.rb

  # Scaffold a new formula from the latest release
  %(prog)s new Songmu/ghg

  # Scaffold from a specific release into a file
  %(prog)s new -o Formula/ghg.rb Songmu/ghg@v0.1.0

  # Token management
  %(prog)s auth --save-token
  %(prog)s auth --status
            """,
        )
        parser.add_argument(
            "--version", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--token",
            help="GitHub token for API requests (default: $GITHUB_TOKEN or keyring)",
        )
        parser.add_argument(
            "--verbose", action="store_true", help="Show debug logging"
        )
        return parser

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(dest="command", help="Available commands")

        self._add_update_command(subparsers)
        self._add_new_command(subparsers)
        self._add_auth_command(subparsers)

    def _add_target_options(self, command_parser: argparse.ArgumentParser) -> None:
        """Add options selecting the platform of release assets."""
        target = self.global_config["target"]
        command_parser.add_argument(
            "--os",
            dest="target_os",
            default=target["os"],
            help="OS marker in asset file names (default: %(default)s)",
        )
        command_parser.add_argument(
            "--arch",
            dest="target_arch",
            default=target["arch"],
            help="Architecture marker in asset file names (default: %(default)s)",
        )

    def _add_update_command(self, subparsers) -> None:
        update_parser = subparsers.add_parser(
            "update",
            help="Update formulas to the latest release",
            description="Update version, url and sha256 of existing formulas",
        )
        update_parser.add_argument(
            "files", nargs="+", help="Formula files to update"
        )
        update_parser.add_argument(
            "-w",
            "--write",
            action="store_true",
            help="Rewrite files in place instead of printing them",
        )
        self._add_target_options(update_parser)

    def _add_new_command(self, subparsers) -> None:
        new_parser = subparsers.add_parser(
            "new",
            help="Create a new formula from a GitHub release",
            description="Create a new formula from owner/repo[@tag]",
        )
        new_parser.add_argument("slug", help="Repository as owner/repo or owner/repo@tag")
        new_parser.add_argument(
            "-w",
            "--write",
            action="store_true",
            help="Write <name>.rb instead of printing the formula",
        )
        new_parser.add_argument(
            "-o", "--output", help="Write the formula to this path"
        )
        self._add_target_options(new_parser)

    def _add_auth_command(self, subparsers) -> None:
        auth_parser = subparsers.add_parser(
            "auth", help="Manage the GitHub token stored in the keyring"
        )
        group = auth_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--save-token", action="store_true", help="Save a GitHub token"
        )
        group.add_argument(
            "--remove-token", action="store_true", help="Remove the saved token"
        )
        group.add_argument(
            "--status", action="store_true", help="Show authentication status"
        )
