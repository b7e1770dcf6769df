"""
Pytest configuration and shared test utilities.

Every test runs against an isolated (absent) user config file so a
developer's ~/.config/create-shipkit-app/config.yml never leaks in.
"""

import shutil
from unittest.mock import MagicMock

import pytest

from create_shipkit_app.utils import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point the config loader at an empty location and clear its cache."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(config_dir / "config.yml"))
    config_module.reset_config()
    yield config_dir / "config.yml"
    config_module.reset_config()


@pytest.fixture
def completed():
    """Factory for fake ``subprocess.run`` results."""

    def _completed(returncode=0, stdout="", stderr=""):
        return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)

    return _completed


@pytest.fixture
def git_env(monkeypatch):
    """Make real git commands deterministic: fixed identity, no user/system config."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    # Keep git from discovering a repository above tmp_path
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", "/")
