"""New formula command handler."""

import sys
from argparse import Namespace

from ..creator import FormulaCreator
from .base import BaseCommandHandler


class NewHandler(BaseCommandHandler):
    """Handler for the new command."""

    def execute(self, args: Namespace) -> None:
        """Create a formula and write it to stdout or a file."""
        client, hash_calculator, selector = self._build_services(args)
        creator = FormulaCreator(client, hash_calculator, selector)

        data = creator.create(args.slug)
        written = creator.write(
            data,
            stream=self.stdout,
            output=args.output,
            overwrite=args.write,
        )
        if written is not None:
            print(f"Created {written} ({data.name} {data.version})", file=sys.stderr)
