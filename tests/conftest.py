"""
Pytest configuration and fixtures for test isolation.
"""
import logging
import os
import pytest

from bundler.utils.logging_config import configure_logging
from tests.fixtures.projects import ProjectBuilder


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary working directory
    2. Pointing HOME at a temporary directory so no user settings are read
    3. Removing bundler environment variables
    """
    workdir = tmp_path / "workdir"
    workdir.mkdir(exist_ok=True)
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in list(os.environ):
        if name.startswith("AMD_BUNDLER_"):
            monkeypatch.delenv(name, raising=False)
    
    yield


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def project(tmp_path):
    """An empty project with a Scripts directory."""
    return ProjectBuilder(tmp_path / "site")


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default logging setup after commands reconfigure it."""
    logging.getLogger().setLevel(logging.INFO)
    yield
    configure_logging(level="info", force=True)
