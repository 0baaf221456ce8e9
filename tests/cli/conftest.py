"""Pytest fixtures for CLI tests."""

from __future__ import annotations

import os

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove any LIBRELOGIN_ variables inherited from the test process.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture.

    Returns
    -------
    pytest.MonkeyPatch
        The same fixture, for setting variables in tests.
    """
    for name in list(os.environ):
        if name.startswith("LIBRELOGIN_"):
            monkeypatch.delenv(name)
    return monkeypatch
