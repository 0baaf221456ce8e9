"""YAML serialization for settings and configuration trees.

``Long`` values produced by coercion are plain integers once written out, and
``Path`` values become strings.
"""

from pathlib import Path
from typing import Any

import yaml

from envtree.coercion import Long
from envtree.config.config import EnvTreeConfig
from envtree.config.defaults import get_default_config


class EnvTreeDumper(yaml.SafeDumper):
    """Safe YAML dumper that also represents ``Long`` and ``Path`` values."""


EnvTreeDumper.add_representer(Long, yaml.SafeDumper.represent_int)
EnvTreeDumper.add_multi_representer(
    Path, lambda dumper, data: dumper.represent_str(str(data))
)


def dump_yaml(data: Any) -> str:
    """Dump data to a block-style YAML string, keeping key order.

    Parameters
    ----------
    data : Any
        Data to dump.

    Returns
    -------
    str
        YAML document.

    Examples
    --------
    >>> print(dump_yaml({"limit": Long(5)}), end="")
    limit: 5
    """
    return yaml.dump(
        data, Dumper=EnvTreeDumper, default_flow_style=False, sort_keys=False
    )


def config_to_dict(
    config: EnvTreeConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Convert EnvTreeConfig to dictionary for YAML serialization.

    Parameters
    ----------
    config : EnvTreeConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include default values.

    Returns
    -------
    dict[str, Any]
        Dictionary representation suitable for YAML.
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")

    if not include_defaults:
        default_dict: dict[str, Any] = get_default_config().model_dump(mode="json")
        config_dict = _remove_defaults(config_dict, default_dict)

    return config_dict


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove values that match defaults from config dictionary.

    Parameters
    ----------
    config_dict : dict[str, Any]
        Configuration dictionary.
    default_dict : dict[str, Any]
        Default configuration dictionary.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary with defaults removed.
    """
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested:
                result[key] = nested
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: EnvTreeConfig, include_defaults: bool = False) -> str:
    """Serialize EnvTreeConfig to YAML string.

    Parameters
    ----------
    config : EnvTreeConfig
        Configuration to serialize.
    include_defaults : bool
        Whether to include default values.

    Returns
    -------
    str
        YAML string representation.

    Examples
    --------
    >>> from envtree.config import get_default_config
    >>> to_yaml(get_default_config())
    '{}\\n'
    """
    return dump_yaml(config_to_dict(config, include_defaults=include_defaults))
