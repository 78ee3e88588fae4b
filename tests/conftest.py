"""
Shared pytest fixtures for plainvalue tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import plainvalue.config.sources as sources

# =============================================================================
# Environment Isolation
# =============================================================================


@_pytest.fixture(autouse=True)
def isolated_env(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> _pathlib.Path:
    """
    Isolate every test from the user's environment and config files.

    - Removes all PLAINVALUE_* environment variables
    - Points the user config dir at an empty temp directory
    - Runs the test from an empty temp working directory (no project config)

    Returns:
        The temp working directory.
    """
    for key in list(_os.environ):
        if key.startswith("PLAINVALUE_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("NO_COLOR", raising=False)

    user_config_dir = tmp_path / "user-config"
    user_config_dir.mkdir()
    monkeypatch.setenv(sources.ENV_CONFIG_DIR, str(user_config_dir))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@_pytest.fixture
def user_config_dir(isolated_env: _pathlib.Path) -> _pathlib.Path:
    """The (initially empty) user config directory."""
    return isolated_env.parent / "user-config"


@_pytest.fixture
def project_config_dir(isolated_env: _pathlib.Path) -> _pathlib.Path:
    """A .plainvalue directory in the working directory."""
    path = isolated_env / sources.PROJECT_CONFIG_DIRNAME
    path.mkdir()
    return path


# =============================================================================
# Data Fixtures
# =============================================================================


@_pytest.fixture
def nested_data() -> dict[str, _typing.Any]:
    """A small nested mapping with mixed leaves."""
    return {
        "a": 1,
        "b": {"c": 2, "d": {"e": 3}},
        "tags": ["x", "y"],
        "enabled": True,
        "note": None,
    }


@_pytest.fixture
def write_document(isolated_env: _pathlib.Path) -> _typing.Callable[[str, str], _pathlib.Path]:
    """Factory that writes a document into the working directory."""

    def _write(name: str, content: str) -> _pathlib.Path:
        path = isolated_env / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# CLI Fixtures
# =============================================================================


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """Click test runner."""
    return _click_testing.CliRunner()
