"""Top-level package for tapsmith.

tapsmith keeps Homebrew formula files in step with the GitHub releases of the
projects they package.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tapsmith")
    # Handle None return in Python 3.13+ for uninstalled packages
    if __version__ is None:
        __version__ = "dev"
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
