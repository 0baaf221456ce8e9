"""Root pytest configuration for envtree package tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from envtree.keys import ConfigurationKey
from envtree.tree import ConfigTree


class MailKeys:
    """Mail keys declared the way an application registers its schema."""

    HOST = ConfigurationKey(key="mail.host", default="localhost")
    PORT = ConfigurationKey(key="mail.port", default=587)
    PASSWORD = ConfigurationKey(key="mail.password", default="")


class GeneralKeys:
    """Top-level keys, some with hyphenated segments."""

    ALLOWED_COMMANDS = ConfigurationKey(
        key="allowed-commands-while-unauthorized",
        default=["login", "register"],
        comment="Commands allowed before login",
    )
    SESSION_TIMEOUT = ConfigurationKey(key="session-timeout", default=600)
    TOTP_ENABLED = ConfigurationKey(key="totp.enabled", default=False)
    MAX_LOGIN_ATTEMPTS = ConfigurationKey(
        key="limbo.max-login-attempts", default=3
    )


@pytest.fixture
def default_key_declarations() -> list[tuple[type, Any]]:
    """Provide (declaring type, default holder) pairs.

    Returns
    -------
    list[tuple[type, Any]]
        Declarations for the mail and general key namespaces.
    """
    return [(GeneralKeys, "config.yaml"), (MailKeys, "config.yaml")]


@pytest.fixture
def known_keys() -> list[ConfigurationKey]:
    """Provide the flattened schema of sample keys.

    Returns
    -------
    list[ConfigurationKey]
        All sample keys.
    """
    return [
        MailKeys.HOST,
        MailKeys.PORT,
        MailKeys.PASSWORD,
        GeneralKeys.ALLOWED_COMMANDS,
        GeneralKeys.SESSION_TIMEOUT,
        GeneralKeys.TOTP_ENABLED,
        GeneralKeys.MAX_LOGIN_ATTEMPTS,
    ]


@pytest.fixture
def sample_tree() -> ConfigTree:
    """Provide a tree as loaded from a configuration file.

    Returns
    -------
    ConfigTree
        Tree with mail, session and limbo settings.
    """
    return ConfigTree(
        {
            "allowed-commands-while-unauthorized": ["login", "register"],
            "session-timeout": 600,
            "mail": {"host": "localhost", "port": 587, "password": ""},
            "totp": {"enabled": False},
            "limbo": {"max-login-attempts": 3},
        }
    )


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """Create a sample application configuration YAML file.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
allowed-commands-while-unauthorized:
  - login
  - register
session-timeout: 600
mail:
  host: localhost
  port: 587
  password: ""
totp:
  enabled: false
"""
    )
    return config_file


@pytest.fixture(autouse=True)
def reset_envtree_logger() -> Iterator[None]:
    """Remove handlers and levels the CLI installs on the package logger."""
    yield
    package_logger = logging.getLogger("envtree")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
