"""Auth command handler."""

import sys
from argparse import Namespace

from keyring.errors import KeyringError

from ..auth import GitHubAuthManager
from .base import BaseCommandHandler


class AuthHandler(BaseCommandHandler):
    """Handler for GitHub token management."""

    def execute(self, args: Namespace) -> None:
        """Save, remove or report the GitHub token."""
        try:
            if args.save_token:
                GitHubAuthManager.save_token()
                print("✅ GitHub token saved")
            elif args.remove_token:
                GitHubAuthManager.remove_token()
                print("✅ GitHub token removed")
            elif GitHubAuthManager.is_authenticated():
                print("✅ GitHub token available")
            else:
                print("❌ No GitHub token configured")
        except (ValueError, KeyringError) as e:
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)
