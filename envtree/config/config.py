"""Main configuration model for the envtree package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from envtree.config.logging import LoggingConfig
from envtree.config.overlay import OverlayConfig


class EnvTreeConfig(BaseModel):
    """Main configuration for the envtree package.

    Parameters
    ----------
    overlay : OverlayConfig
        Environment overlay configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = EnvTreeConfig()
    >>> config.overlay.prefix
    'LIBRELOGIN_'
    >>> config.logging.level
    'INFO'
    """

    overlay: OverlayConfig = Field(
        default_factory=OverlayConfig, description="Overlay configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self, include_defaults: bool = False) -> str:
        """Convert configuration to YAML string.

        Parameters
        ----------
        include_defaults : bool
            Whether to include values equal to the defaults.

        Returns
        -------
        str
            Configuration as YAML string.

        Examples
        --------
        >>> config = EnvTreeConfig(overlay=OverlayConfig(prefix="APP_"))
        >>> "prefix: APP_" in config.to_yaml()
        True
        """
        from envtree.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=include_defaults)
