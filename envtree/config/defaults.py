"""Default configurations for the envtree package."""

from __future__ import annotations

from envtree.config.config import EnvTreeConfig
from envtree.config.logging import LoggingConfig
from envtree.config.overlay import OverlayConfig

DEFAULT_CONFIG = EnvTreeConfig(
    overlay=OverlayConfig(),
    logging=LoggingConfig(),
)
"""Default configuration instance.

Examples
--------
>>> from envtree.config.defaults import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.overlay.prefix
'LIBRELOGIN_'
"""


def get_default_config() -> EnvTreeConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    EnvTreeConfig
        A deep copy of the default configuration.

    Examples
    --------
    >>> config = get_default_config()
    >>> config.overlay.prefix = "APP_"
    >>> DEFAULT_CONFIG.overlay.prefix
    'LIBRELOGIN_'
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
