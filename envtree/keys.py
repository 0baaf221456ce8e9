"""Configuration key schema.

Known keys are what the segment resolver matches candidate paths against.
They can be declared as class attributes of a namespace class, or derived
from the leaves of an already loaded :class:`~envtree.tree.ConfigTree`.

Examples
--------
>>> class MailKeys:
...     HOST = ConfigurationKey(key="mail.host", default="localhost")
...     PORT = ConfigurationKey(key="mail.port", default=587)
>>> [k.key for k in extract_keys(MailKeys)]
['mail.host', 'mail.port']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from envtree.errors import KeySchemaError

if TYPE_CHECKING:
    from envtree.tree import ConfigTree


logger = logging.getLogger(__name__)


class ConfigurationKey(BaseModel):
    """A registered configuration path.

    Parameters
    ----------
    key : str
        Dotted path, e.g. ``"mail.host"``. Case is kept but matching is
        case-insensitive.
    default : Any
        Default value, informational only.
    comment : str | None
        Human-readable description.

    Examples
    --------
    >>> ConfigurationKey(key="mail.host").segments
    ('mail', 'host')
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Dotted configuration path")
    default: Any = Field(default=None, description="Default value")
    comment: str | None = Field(default=None, description="Key description")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate key is a non-empty dotted path."""
        v = v.strip()
        if not v:
            raise ValueError("key must be non-empty")
        if any(not segment for segment in v.split(".")):
            raise ValueError(f"key must not contain empty segments: {v!r}")
        return v

    @property
    def segments(self) -> tuple[str, ...]:
        """Path segments of the key."""
        return tuple(self.key.split("."))


def extract_keys(owner: type) -> list[ConfigurationKey]:
    """Collect the ``ConfigurationKey`` class attributes of ``owner``.

    Attributes inherited from base classes are included; a subclass
    attribute replaces the base attribute of the same name.

    Parameters
    ----------
    owner : type
        Class declaring the keys.

    Returns
    -------
    list[ConfigurationKey]
        Keys in declaration order, base classes first.

    Raises
    ------
    KeySchemaError
        If ``owner`` is not a class.
    """
    if not isinstance(owner, type):
        raise KeySchemaError(
            f"Keys must be declared on a class, got {type(owner).__name__}"
        )

    found: dict[str, ConfigurationKey] = {}
    for klass in reversed(owner.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, ConfigurationKey):
                found[name] = value
    return list(found.values())


def flatten_default_keys(
    declarations: Iterable[tuple[type, Any]],
) -> list[ConfigurationKey]:
    """Expand ``(declaring_type, default_holder)`` pairs into one key list.

    Only the declaring type contributes keys; the holder travels alongside
    it for the caller's benefit.

    Raises
    ------
    KeySchemaError
        If a declaring type is not a class.
    """
    keys: list[ConfigurationKey] = []
    for owner, _holder in declarations:
        keys.extend(extract_keys(owner))
    return keys


def keys_from_tree(tree: ConfigTree) -> list[ConfigurationKey]:
    """Register every leaf of a loaded tree as a known key.

    Leaves that no dotted key can address are skipped with a warning: a
    mapping key that is empty or contains a dot would be written back as a
    different, nested path.

    Examples
    --------
    >>> from envtree.tree import ConfigTree
    >>> tree = ConfigTree({"mail": {"host": "localhost"}})
    >>> keys_from_tree(tree)[0].key
    'mail.host'
    """
    keys: list[ConfigurationKey] = []
    for segments, value in tree.leaf_paths():
        dotted = ".".join(segments)
        if any(not segment.strip() or "." in segment for segment in segments):
            logger.warning(f"Skipping configuration key {dotted!r}: not addressable")
            continue
        try:
            keys.append(ConfigurationKey(key=dotted, default=value))
        except ValidationError as e:
            logger.warning(f"Skipping configuration key {dotted!r}: {e}")
    return keys


def known_paths(keys: Iterable[ConfigurationKey] | None) -> frozenset[str]:
    """Return the lower-cased dotted paths of ``keys``.

    Examples
    --------
    >>> sorted(known_paths([ConfigurationKey(key="Mail.Host")]))
    ['mail.host']
    >>> known_paths(None)
    frozenset()
    """
    if keys is None:
        return frozenset()
    return frozenset(key.key.lower() for key in keys)
