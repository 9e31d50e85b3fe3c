"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from doclinks.api.log import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration", "links", "site", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def doclinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DOCLINKS_HOME at a fresh directory and detach log handlers afterwards.

    Site URL variables are cleared so that resolution only sees what a test sets.
    """
    home = tmp_path / ".doclinks"
    home.mkdir()
    monkeypatch.setenv("DOCLINKS_HOME", str(home))
    monkeypatch.delenv("SITE_URL", raising=False)
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture
def write_config(doclinks_home: Path):
    """Write a config.json into DOCLINKS_HOME."""

    def _write(data: dict) -> Path:
        path = doclinks_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """Empty documentation root."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


# =============================================================================
# Test Helpers
# =============================================================================


def write_doc(root: Path, rel: str, content: str) -> Path:
    """Create a document (and its parent directories) under root."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
