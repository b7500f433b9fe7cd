"""Pytest configuration and fixtures for tapsmith tests."""

import io
import logging

import orjson
import pytest
import requests

from tapsmith.auth import GitHubAuthManager
from tapsmith.constants import GITHUB_TOKEN_ENV_VARS


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for the application logger during tests.

    This allows pytest's caplog fixture to capture logs that production code
    keeps on the tapsmith logger's own handlers.
    """
    app_logger = logging.getLogger("tapsmith")
    original = app_logger.propagate
    app_logger.propagate = True
    yield
    app_logger.propagate = original


@pytest.fixture(autouse=True)
def isolate_auth(monkeypatch):
    """Keep tests away from real tokens and the system keyring."""
    for env_var in GITHUB_TOKEN_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setattr("keyring.get_password", lambda service, user: None)
    monkeypatch.setattr(GitHubAuthManager, "_explicit_token", None)
    monkeypatch.setattr(GitHubAuthManager, "_user_notified", False)


def make_response(
    status_code: int = 200,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    url: str = "https://example.invalid/",
) -> requests.Response:
    """Build a real requests.Response backed by an in-memory body."""
    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    response.headers.update(headers or {})
    response.url = url
    response.reason = "OK" if status_code < 400 else "Error"
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Minimal stand-in for requests.Session routing GETs by URL."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.routes: dict[str, tuple[int, bytes, dict[str, str]] | Exception] = {}
        self.calls: list[tuple[str, dict]] = []

    def add(
        self,
        url: str,
        body: bytes = b"",
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.routes[url] = (status_code, body, headers or {})

    def add_json(self, url: str, data, status_code: int = 200) -> None:
        self.add(url, orjson.dumps(data), status_code)

    def add_error(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def get(self, url: str, **kwargs) -> requests.Response:
        self.calls.append((url, kwargs))
        route = self.routes.get(url)
        if route is None:
            return make_response(404, b'{"message": "Not Found"}', url=url)
        if isinstance(route, Exception):
            raise route
        status_code, body, headers = route
        return make_response(status_code, body, headers, url=url)


@pytest.fixture
def fake_session():
    """Provide a fake HTTP session."""
    return FakeSession()


@pytest.fixture
def release_payload():
    """Build GitHub release JSON with assets named after the given files."""

    def _build(tag: str, filenames: list[str], owner="Songmu", repo="ghg"):
        return {
            "tag_name": tag,
            "name": tag,
            "prerelease": False,
            "html_url": f"https://github.com/{owner}/{repo}/releases/tag/{tag}",
            "assets": [
                {
                    "name": filename,
                    "browser_download_url": (
                        f"https://github.com/{owner}/{repo}/releases/download/"
                        f"{tag}/{filename}"
                    ),
                    "size": 1024,
                    "content_type": "application/zip",
                }
                for filename in filenames
            ],
        }

    return _build
