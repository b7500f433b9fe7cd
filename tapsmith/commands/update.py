"""Update command handler."""

import sys
from argparse import Namespace

from ..formula import Formula
from ..logger import get_logger
from ..updater import FormulaUpdater
from .base import BaseCommandHandler

logger = get_logger(__name__)


class UpdateHandler(BaseCommandHandler):
    """Handler for the update command.

    Files are processed in order and the first failure aborts the run.
    Without ``--write`` the resulting formula text is printed.
    """

    def execute(self, args: Namespace) -> None:
        """Execute the update command."""
        client, hash_calculator, selector = self._build_services(args)
        updater = FormulaUpdater(client, hash_calculator, selector)

        for path in args.files:
            formula = Formula.load(path)
            old_version = formula.version
            updated = updater.update(formula)

            if updated:
                message = f"{path}: {old_version} -> {formula.version}"
            else:
                message = f"{path}: already up to date ({formula.version})"

            if args.write:
                if updated:
                    formula.write()
                print(message)
            else:
                self.stdout.write(formula.content)
                print(message, file=sys.stderr)
