"""Overlay engine configuration models for the envtree package."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_PREFIX = "LIBRELOGIN_"
DEFAULT_SECRET_MARKERS: tuple[str, ...] = ("password", "secret", "token", "key")
DEFAULT_MASK = "****"


class OverlayConfig(BaseModel):
    """Configuration for environment variable overlays.

    Parameters
    ----------
    prefix : str
        Leading string a variable name needs to be considered an override.
    secret_markers : list[str]
        Substrings that mark a dotted path as secret in log output.
    mask : str
        Placeholder logged instead of secret values.

    Examples
    --------
    >>> config = OverlayConfig()
    >>> config.prefix
    'LIBRELOGIN_'
    >>> config.mask
    '****'
    """

    prefix: str = Field(default=DEFAULT_PREFIX, description="Variable name prefix")
    secret_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SECRET_MARKERS),
        description="Path substrings whose values are masked in logs",
    )
    mask: str = Field(default=DEFAULT_MASK, description="Placeholder for secrets")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate prefix is non-empty."""
        if not v:
            raise ValueError("prefix must be non-empty")
        return v

    @field_validator("secret_markers")
    @classmethod
    def validate_secret_markers(cls, v: list[str]) -> list[str]:
        """Lower-case markers and drop blank entries."""
        return [marker.strip().lower() for marker in v if marker.strip()]
