"""Pytest fixtures for config module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_settings_file(tmp_path: Path) -> Path:
    """Create a sample envtree settings YAML file.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML settings file.
    """
    settings_file = tmp_path / "envtree.yaml"
    settings_file.write_text(
        """
overlay:
  prefix: MYAPP_
  mask: "<redacted>"
logging:
  level: DEBUG
"""
    )
    return settings_file


@pytest.fixture
def malformed_settings_file(tmp_path: Path) -> Path:
    """Create a malformed YAML file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created malformed YAML file.
    """
    settings_file = tmp_path / "bad.yaml"
    settings_file.write_text(
        """
overlay:
  prefix: [MYAPP_
  mask: unclosed
"""
    )
    return settings_file
