"""Environment-variable overlays for hierarchical configuration trees.

This package maps prefixed environment variables such as
``LIBRELOGIN_ALLOWED_COMMANDS_WHILE_UNAUTHORIZED`` onto the dotted key paths
of a loaded configuration (``allowed-commands-while-unauthorized``), coerces
their raw values, and writes them over whatever the file provided.

Examples
--------
>>> from envtree import ConfigTree, ConfigurationKey, EnvOverlay
>>> tree = ConfigTree({"mail": {"host": "localhost"}})
>>> overlay = EnvOverlay(environ={"LIBRELOGIN_MAIL_HOST": "smtp.example.org"})
>>> report = overlay.apply_overrides(tree, [ConfigurationKey(key="mail.host")])
>>> tree.node("mail", "host").get()
'smtp.example.org'
"""

from __future__ import annotations

__version__ = "0.3.0"

from envtree.coercion import Long, coerce_value, parse_boolean
from envtree.errors import EnvTreeError, KeySchemaError, TreeError
from envtree.keys import (
    ConfigurationKey,
    extract_keys,
    flatten_default_keys,
    keys_from_tree,
    known_paths,
)
from envtree.overlay import (
    AppliedOverride,
    EnvOverlay,
    FailedOverride,
    OverlayReport,
    is_secret_path,
)
from envtree.segments import iter_partitions, resolve_segments, split_env_name
from envtree.tree import ConfigNode, ConfigTree

__all__ = [
    "__version__",
    # Coercion
    "Long",
    "coerce_value",
    "parse_boolean",
    # Segments
    "iter_partitions",
    "resolve_segments",
    "split_env_name",
    # Tree
    "ConfigNode",
    "ConfigTree",
    # Keys
    "ConfigurationKey",
    "extract_keys",
    "flatten_default_keys",
    "keys_from_tree",
    "known_paths",
    # Overlay
    "AppliedOverride",
    "EnvOverlay",
    "FailedOverride",
    "OverlayReport",
    "is_secret_path",
    # Errors
    "EnvTreeError",
    "KeySchemaError",
    "TreeError",
]
