"""Shared HTTP session setup."""

import requests

from . import __version__
from .constants import APP_NAME

USER_AGENT = f"{APP_NAME}/{__version__}"


def create_session() -> requests.Session:
    """Create a requests session that identifies as tapsmith.

    Returns:
        Session with the tapsmith User-Agent header set

    """
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session
