"""Configuration loading from YAML files.

This module loads YAML documents, both the envtree settings file and the
application configuration files that overlays are applied to, and merges
settings from multiple sources.
"""

from pathlib import Path
from typing import Any

import yaml

from envtree.config.config import EnvTreeConfig
from envtree.config.defaults import get_default_config


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` layered on top.

    Sections present in both are merged key by key; any other value in
    ``override`` replaces the one in ``base``. Neither input is modified.

    Examples
    --------
    >>> base = {"overlay": {"prefix": "A_", "mask": "*"}}
    >>> merge_configs(base, {"overlay": {"mask": "#"}})
    {'overlay': {'prefix': 'A_', 'mask': '#'}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def nest_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Expand ``section__field`` keyword names into nested sections.

    Examples
    --------
    >>> nest_overrides({"overlay__prefix": "APP_", "logging__level": "DEBUG"})
    {'overlay': {'prefix': 'APP_'}, 'logging': {'level': 'DEBUG'}}
    """
    nested: dict[str, Any] = {}
    for name, value in overrides.items():
        *sections, field = name.split("__")
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[field] = value
    return nested


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load YAML file and return as dictionary.

    Parameters
    ----------
    path : Path | str
        Path to YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed YAML content.

    Raises
    ------
    FileNotFoundError
        If file doesn't exist.
    yaml.YAMLError
        If YAML is malformed or its top level is not a mapping.
    """
    path = Path(path) if isinstance(path, str) else path

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    # Handle empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise yaml.YAMLError(
            f"Expected a mapping at the top of {path}, got {type(content).__name__}"
        )
    return content


def load_config(
    config_path: Path | str | None = None,
    **overrides: Any,
) -> EnvTreeConfig:
    """Load envtree settings from a YAML file with optional overrides.

    Precedence (lowest to highest):
    1. Defaults
    2. YAML file values
    3. Keyword overrides

    Parameters
    ----------
    config_path : Path | str | None
        Path to YAML settings file. If None, uses defaults.
    **overrides : Any
        Direct overrides for config values, ``section__field`` style.

    Returns
    -------
    EnvTreeConfig
        Loaded and merged configuration.

    Raises
    ------
    FileNotFoundError
        If config_path is specified but doesn't exist.
    yaml.YAMLError
        If YAML file is malformed.
    ValidationError
        If configuration is invalid.

    Examples
    --------
    >>> config = load_config(overlay__prefix="APP_")
    >>> config.overlay.prefix
    'APP_'
    """
    base_config: dict[str, Any] = get_default_config().model_dump()

    if config_path is not None:
        yaml_config = load_yaml_file(config_path)
        base_config = merge_configs(base_config, yaml_config)

    return EnvTreeConfig(**merge_configs(base_config, nest_overrides(overrides)))
