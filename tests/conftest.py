"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.cli)


# =============================================================================
# Prefix Helpers
# =============================================================================


def write_formula(taps_dir: Path, tap_name: str, name: str, deps: list | None = None) -> Path:
    """Write a formula definition into a tap, creating the tap directory."""
    user, repo = tap_name.split("/")
    formula_dir = taps_dir / user / f"homebrew-{repo}" / "Formula"
    formula_dir.mkdir(parents=True, exist_ok=True)
    path = formula_dir / f"{name}.json"
    path.write_text(json.dumps({"deps": deps or []}), encoding="utf-8")
    return path


def install_formula(cellar_dir: Path, name: str, version: str = "1.0") -> Path:
    """Create a keg for name in the Cellar."""
    keg = cellar_dir / name / version
    keg.mkdir(parents=True, exist_ok=True)
    return keg


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def kegctl_home(tmp_path: Path, monkeypatch) -> Path:
    """Point KEGCTL_HOME at a temporary directory for every test.

    Returns:
        Path to the kegctl home directory
    """
    home = tmp_path / ".kegctl"
    home.mkdir()
    monkeypatch.setenv("KEGCTL_HOME", str(home))
    return home


@pytest.fixture
def prefix(tmp_path: Path, kegctl_home: Path) -> Path:
    """Write a config whose prefix is a temporary directory.

    Returns:
        Path to the prefix
    """
    prefix_dir = tmp_path / "prefix"
    (prefix_dir / "Library" / "Taps").mkdir(parents=True)
    (prefix_dir / "Cellar").mkdir(parents=True)
    config = {"prefix": str(prefix_dir), "services": {"process_query_timeout": 2.0}}
    (kegctl_home / "config.json").write_text(json.dumps(config), encoding="utf-8")
    return prefix_dir


@pytest.fixture
def taps_dir(prefix: Path) -> Path:
    return prefix / "Library" / "Taps"


@pytest.fixture
def cellar_dir(prefix: Path) -> Path:
    return prefix / "Cellar"
