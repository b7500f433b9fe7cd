"""Tests for GitHubAuthManager: token lookup, storage and headers."""

from unittest.mock import MagicMock

import pytest
from keyring.errors import KeyringError

from tapsmith.auth import GitHubAuthManager, validate_github_token


def test_validate_github_token():
    """Test accepted and rejected token formats."""
    assert validate_github_token("a" * 40)
    assert validate_github_token("ghp_" + "A" * 36)
    assert validate_github_token("github_pat_" + "b" * 40)
    assert not validate_github_token("")
    assert not validate_github_token(None)
    assert not validate_github_token("invalid_token_format")


def test_no_token(monkeypatch):
    """Test anonymous use without any token source."""
    assert GitHubAuthManager.get_token() is None
    assert GitHubAuthManager.apply_auth({}) == {}
    assert not GitHubAuthManager.is_authenticated()


def test_env_token(monkeypatch):
    """Test GITHUB_TOKEN is used."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    assert GitHubAuthManager.apply_auth({})["Authorization"] == "Bearer env-token"


def test_token_precedence(monkeypatch):
    """Test explicit token beats the tapsmith variable beats GITHUB_TOKEN."""
    monkeypatch.setenv("GITHUB_TOKEN", "generic")
    monkeypatch.setenv("TAPSMITH_GITHUB_TOKEN", "specific")
    monkeypatch.setattr("keyring.get_password", lambda k, u: "stored")
    assert GitHubAuthManager.get_token() == "specific"

    GitHubAuthManager.set_token(" cli-token ")
    assert GitHubAuthManager.get_token() == "cli-token"


def test_keyring_token(monkeypatch):
    """Test the keyring is consulted last."""
    monkeypatch.setattr("keyring.get_password", lambda k, u: "stored")
    assert GitHubAuthManager.get_token() == "stored"


def test_keyring_unavailable(monkeypatch):
    """Test keyring failures fall back to anonymous access."""

    def broken(service, user):
        raise KeyringError("no backend")

    monkeypatch.setattr("keyring.get_password", broken)
    assert GitHubAuthManager.get_token() is None


def test_anonymous_notice_logged_once(caplog):
    """Test the rate limit notice is logged only once."""
    caplog.set_level("INFO", logger="tapsmith")
    GitHubAuthManager.apply_auth({})
    GitHubAuthManager.apply_auth({})
    assert caplog.text.count("No GitHub token configured") == 1


def test_save_token_valid(monkeypatch):
    """Test save_token stores a valid token."""
    valid_token = "a" * 40
    monkeypatch.setattr("getpass.getpass", lambda prompt: valid_token)
    keyring_set = MagicMock()
    monkeypatch.setattr("keyring.set_password", keyring_set)

    GitHubAuthManager.save_token()

    keyring_set.assert_called_with(GitHubAuthManager.GITHUB_KEY_NAME, "token", valid_token)


def test_save_token_empty(monkeypatch):
    """Test save_token rejects an empty token."""
    monkeypatch.setattr("getpass.getpass", lambda prompt: "   ")
    with pytest.raises(ValueError, match="empty"):
        GitHubAuthManager.save_token()


def test_save_token_mismatch(monkeypatch):
    """Test save_token rejects a different confirmation."""
    answers = iter(["a" * 40, "b" * 40])
    monkeypatch.setattr("getpass.getpass", lambda prompt: next(answers))
    with pytest.raises(ValueError, match="does not match"):
        GitHubAuthManager.save_token()


def test_save_token_invalid_format(monkeypatch):
    """Test save_token rejects malformed tokens."""
    monkeypatch.setattr("getpass.getpass", lambda prompt: "invalid_token_format")
    with pytest.raises(ValueError, match="Invalid GitHub token format"):
        GitHubAuthManager.save_token()


def test_remove_token(monkeypatch):
    """Test remove_token deletes the keyring entry."""
    keyring_delete = MagicMock()
    monkeypatch.setattr("keyring.delete_password", keyring_delete)
    GitHubAuthManager.remove_token()
    keyring_delete.assert_called_with(GitHubAuthManager.GITHUB_KEY_NAME, "token")
