"""Hierarchical configuration tree addressed by path segments.

A :class:`ConfigTree` wraps the nested dictionaries produced by loading a
YAML configuration file. Values are reached through :class:`ConfigNode`
cells, which may point at paths that do not exist yet; setting such a node
creates the missing sections on the way.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from envtree.config.loader import load_yaml_file
from envtree.errors import TreeError

_MISSING = object()


class ConfigNode:
    """Writable cell at one path of a :class:`ConfigTree`.

    Parameters
    ----------
    tree : ConfigTree
        Tree the node belongs to.
    path : tuple[str, ...]
        Segments addressing the node.
    """

    def __init__(self, tree: ConfigTree, path: tuple[str, ...]) -> None:
        self._tree = tree
        self._path = path

    @property
    def path(self) -> tuple[str, ...]:
        """Segments addressing this node."""
        return self._path

    @property
    def key(self) -> str:
        """Dotted form of the path."""
        return ".".join(self._path)

    @property
    def virtual(self) -> bool:
        """Whether nothing is stored at this path yet."""
        return self._tree._lookup(self._path) is _MISSING

    def get(self, default: Any = None) -> Any:
        """Return the stored value, or ``default`` for a virtual node."""
        value = self._tree._lookup(self._path)
        return default if value is _MISSING else value

    def set(self, value: Any) -> None:
        """Store ``value`` at this path, creating missing sections.

        Raises
        ------
        TreeError
            If the path is empty, contains an empty segment, or runs through
            a value that is not a section.
        """
        self._tree._assign(self._path, value)

    def __repr__(self) -> str:
        return f"ConfigNode({self.key!r})"


class ConfigTree:
    """Mutable configuration tree backed by nested dictionaries.

    Parameters
    ----------
    data : dict[str, Any] | None
        Initial content. The tree takes ownership of the dictionary.

    Examples
    --------
    >>> tree = ConfigTree({"mail": {"host": "localhost"}})
    >>> tree.node("mail", "port").set(587)
    >>> tree.to_dict()
    {'mail': {'host': 'localhost', 'port': 587}}
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._root: dict[str, Any] = data if data is not None else {}

    @classmethod
    def from_file(cls, path: Path | str) -> ConfigTree:
        """Load a tree from a YAML file.

        Raises
        ------
        FileNotFoundError
            If file doesn't exist.
        yaml.YAMLError
            If YAML is malformed.
        """
        return cls(load_yaml_file(path))

    def node(self, *path: str) -> ConfigNode:
        """Return the node at ``path``; it need not exist yet."""
        return ConfigNode(self, tuple(path))

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the tree content."""
        return copy.deepcopy(self._root)

    def leaves(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(dotted_path, value)`` for every non-section value.

        Examples
        --------
        >>> tree = ConfigTree({"mail": {"host": "h", "port": 25}, "debug": False})
        >>> list(tree.leaves())
        [('mail.host', 'h'), ('mail.port', 25), ('debug', False)]
        """
        for path, value in self.leaf_paths():
            yield ".".join(path), value

    def leaf_paths(self) -> Iterator[tuple[tuple[str, ...], Any]]:
        """Yield ``(segments, value)`` for every non-section value.

        Examples
        --------
        >>> tree = ConfigTree({"a.b": 1, "c": {"d": 2}})
        >>> list(tree.leaf_paths())
        [(('a.b',), 1), (('c', 'd'), 2)]
        """
        yield from _iter_leaves(self._root, ())

    def _lookup(self, path: tuple[str, ...]) -> Any:
        current: Any = self._root
        for segment in path:
            if not isinstance(current, dict) or segment not in current:
                return _MISSING
            current = current[segment]
        return current

    def _assign(self, path: tuple[str, ...], value: Any) -> None:
        if not path:
            raise TreeError("Cannot replace the root of the configuration tree")
        if any(not isinstance(segment, str) or not segment for segment in path):
            raise TreeError("Path segments must be non-empty strings", path)

        current = self._root
        for depth, segment in enumerate(path[:-1]):
            child = current.setdefault(segment, {})
            if not isinstance(child, dict):
                raise TreeError(
                    f"Cannot descend into {type(child).__name__} value",
                    path[: depth + 1],
                )
            current = child
        current[path[-1]] = value


def _iter_leaves(
    section: dict[str, Any], prefix: tuple[str, ...]
) -> Iterator[tuple[tuple[str, ...], Any]]:
    for key, value in section.items():
        path = (*prefix, str(key))
        if isinstance(value, dict) and value:
            yield from _iter_leaves(value, path)
        else:
            yield path, value
