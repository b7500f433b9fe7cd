"""CLI runner for tapsmith.

This module orchestrates the execution of CLI commands by routing
parsed arguments to the appropriate command handlers.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence
from typing import TextIO

from ..auth import GitHubAuthManager
from ..commands.auth import AuthHandler
from ..commands.base import BaseCommandHandler
from ..commands.new import NewHandler
from ..commands.update import UpdateHandler
from ..config import ConfigManager
from ..exceptions import TapsmithError
from ..logger import configure_logging, get_logger
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Configuration manager; the default location is
                used when omitted
            stdout: Stream that receives formula text

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        self.stdout = stdout or sys.stdout
        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        """Initialize all command handlers with shared dependencies."""
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "update": UpdateHandler(self.global_config, self.stdout),
            "new": NewHandler(self.global_config, self.stdout),
            "auth": AuthHandler(self.global_config, self.stdout),
        }

    def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the CLI application.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        """
        parser = CLIParser(self.global_config)
        args = parser.parse_args(argv)

        if not args.command:
            print(
                "❌ No command specified. Use --help for usage information.",
                file=sys.stderr,
            )
            sys.exit(1)

        app_logger = configure_logging(verbose=args.verbose)
        if args.token:
            GitHubAuthManager.set_token(args.token)

        try:
            self._execute_command(args)
        except TapsmithError as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)
        finally:
            app_logger.restore_console_level()

    def _execute_command(self, args: Namespace) -> None:
        """Execute the specified command with appropriate handler."""
        handler = self.command_handlers.get(args.command)
        if handler is None:
            print(f"❌ Unknown command: {args.command}", file=sys.stderr)
            sys.exit(1)

        handler.execute(args)
