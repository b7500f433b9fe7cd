"""Command-line interface for tapsmith."""

from .parser import CLIParser
from .runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
