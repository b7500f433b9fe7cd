"""Main CLI entry point for tapsmith.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from .cli import CLIRunner
from .exceptions import TapsmithError


def main() -> None:
    """Run the CLI application.

    Raises:
        SystemExit: With status 1 when the run fails or is cancelled.

    """
    try:
        CLIRunner().run()
    except KeyboardInterrupt:
        print("\n⏹️  Operation cancelled by user", file=sys.stderr)
        sys.exit(1)
    except TapsmithError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
