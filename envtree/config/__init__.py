"""Configuration system for envtree package.

This module provides settings models and loaders for the overlay engine
itself: the variable prefix, which paths count as secret, and logging.

Examples
--------
>>> from envtree.config import EnvTreeConfig, get_default_config, load_config
>>> config = get_default_config()
>>> config.overlay.prefix
'LIBRELOGIN_'
>>> load_config(overlay__prefix="MYAPP_").overlay.prefix
'MYAPP_'
"""

from __future__ import annotations

from envtree.config.config import EnvTreeConfig
from envtree.config.defaults import DEFAULT_CONFIG, get_default_config
from envtree.config.loader import load_config, load_yaml_file, merge_configs
from envtree.config.logging import LoggingConfig, configure_logging
from envtree.config.overlay import (
    DEFAULT_MASK,
    DEFAULT_PREFIX,
    DEFAULT_SECRET_MARKERS,
    OverlayConfig,
)
from envtree.config.serialization import dump_yaml, to_yaml

__all__ = [
    # Main config
    "EnvTreeConfig",
    # Config sections
    "OverlayConfig",
    "LoggingConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "DEFAULT_MASK",
    "DEFAULT_PREFIX",
    "DEFAULT_SECRET_MARKERS",
    "get_default_config",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Logging
    "configure_logging",
    # Serialization
    "dump_yaml",
    "to_yaml",
]
