"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from repo_mirror.config.settings import get_settings
from repo_mirror.git.url_resolver import URLResolver


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Settings are cached and the CLI reconfigures structlog; undo both."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def resolver() -> URLResolver:
    return URLResolver("github.com")
