"""Environment variable overlay engine.

Applies prefixed environment variables on top of a loaded configuration
tree. Conventions:

- Default prefix: ``LIBRELOGIN_``.
- ``LIBRELOGIN_MAIL_HOST`` overrides ``mail.host``.
- ``LIBRELOGIN_ALLOWED_COMMANDS_WHILE_UNAUTHORIZED`` overrides the hyphenated
  key ``allowed-commands-while-unauthorized`` when that key is registered.
- Comma-separated values become lists of strings.
- Every ``_`` separates words; doubled underscores carry no extra meaning.

The pass is best-effort: a variable that cannot be applied is logged and
skipped, and nothing is raised to the caller.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from envtree.coercion import coerce_value
from envtree.config.overlay import DEFAULT_MASK, DEFAULT_PREFIX, DEFAULT_SECRET_MARKERS
from envtree.keys import ConfigurationKey, flatten_default_keys, known_paths
from envtree.segments import resolve_segments, split_env_name

if TYPE_CHECKING:
    from envtree.config.overlay import OverlayConfig
    from envtree.tree import ConfigTree


class AppliedOverride(BaseModel):
    """An environment variable that was written into the tree.

    Attributes
    ----------
    variable : str
        Environment variable name.
    path : tuple[str, ...]
        Resolved path segments.
    value : Any
        Coerced value that was written.
    masked : bool
        Whether the value was masked in the log.
    matched_key : bool
        Whether the path matched a registered key.
    """

    variable: str = Field(..., description="Environment variable name")
    path: tuple[str, ...] = Field(..., description="Resolved path segments")
    value: Any = Field(..., description="Coerced value")
    masked: bool = Field(default=False, description="Value masked in logs")
    matched_key: bool = Field(default=False, description="Path is a known key")

    @property
    def dotted_path(self) -> str:
        """Dotted form of the resolved path."""
        return ".".join(self.path)


class FailedOverride(BaseModel):
    """An environment variable that could not be applied."""

    variable: str = Field(..., description="Environment variable name")
    words: list[str] = Field(default_factory=list, description="Split words")
    error: str = Field(..., description="Failure message")


class OverlayReport(BaseModel):
    """Outcome of one overlay pass.

    Attributes
    ----------
    applied : list[AppliedOverride]
        Overrides written to the tree, in processing order.
    failed : list[FailedOverride]
        Overrides that were skipped.
    aborted : str | None
        Reason the whole pass was skipped, if it was.
    """

    applied: list[AppliedOverride] = Field(default_factory=list)
    failed: list[FailedOverride] = Field(default_factory=list)
    aborted: str | None = Field(default=None)

    @property
    def ok(self) -> bool:
        """Whether every candidate variable was applied."""
        return self.aborted is None and not self.failed


def is_secret_path(
    path: Sequence[str], markers: Iterable[str] = DEFAULT_SECRET_MARKERS
) -> bool:
    """Check whether a path looks like it holds a secret.

    Examples
    --------
    >>> is_secret_path(("mail", "password"))
    True
    >>> is_secret_path(("database", "api-key"))
    True
    >>> is_secret_path(("mail", "host"))
    False
    """
    joined = ".".join(path).lower()
    return any(marker in joined for marker in markers)


def _format_words(words: Sequence[str]) -> str:
    return "[" + ", ".join(words) + "]"


class EnvOverlay:
    """Overlay prefixed environment variables onto a configuration tree.

    Parameters
    ----------
    prefix : str | None
        Required variable name prefix. None selects ``LIBRELOGIN_``.
    environ : Mapping[str, str | None] | None
        Environment to read. None reads ``os.environ`` at each pass.
    logger : logging.Logger | None
        Logger for applied and failed overrides.
    secret_markers : Iterable[str]
        Lower-case path substrings whose values are masked in logs.
    mask : str
        Placeholder logged in place of secret values.

    Examples
    --------
    >>> from envtree.tree import ConfigTree
    >>> tree = ConfigTree()
    >>> overlay = EnvOverlay(environ={"LIBRELOGIN_SESSION_TIMEOUT": "300"})
    >>> report = overlay.apply_overrides(tree, [])
    >>> tree.to_dict()
    {'session': {'timeout': 300}}
    """

    def __init__(
        self,
        prefix: str | None = DEFAULT_PREFIX,
        *,
        environ: Mapping[str, str | None] | None = None,
        logger: logging.Logger | None = None,
        secret_markers: Iterable[str] = DEFAULT_SECRET_MARKERS,
        mask: str = DEFAULT_MASK,
    ) -> None:
        self._prefix = DEFAULT_PREFIX if prefix is None else prefix
        self._environ = environ
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._secret_markers = tuple(marker.lower() for marker in secret_markers)
        self._mask = mask

    @classmethod
    def from_config(
        cls,
        config: OverlayConfig,
        *,
        environ: Mapping[str, str | None] | None = None,
        logger: logging.Logger | None = None,
    ) -> EnvOverlay:
        """Build an overlay from an :class:`~envtree.config.OverlayConfig`."""
        return cls(
            config.prefix,
            environ=environ,
            logger=logger,
            secret_markers=config.secret_markers,
            mask=config.mask,
        )

    @property
    def prefix(self) -> str:
        """Required variable name prefix."""
        return self._prefix

    def load_from_environment(
        self,
        default_keys: Iterable[tuple[type, Any]],
        tree: ConfigTree,
    ) -> OverlayReport:
        """Flatten declared keys and apply the environment to ``tree``.

        Parameters
        ----------
        default_keys : Iterable[tuple[type, Any]]
            ``(declaring_type, default_holder)`` pairs, see
            :func:`~envtree.keys.flatten_default_keys`.
        tree : ConfigTree
            Tree to write into.

        Returns
        -------
        OverlayReport
            Result of the pass. If the keys cannot be flattened nothing is
            applied and ``aborted`` holds the reason.
        """
        try:
            keys = flatten_default_keys(default_keys)
        except Exception as e:
            return self._abort(e)
        return self.apply_overrides(tree, keys)

    def apply_overrides(
        self,
        tree: ConfigTree,
        known_keys: Iterable[ConfigurationKey] | None,
    ) -> OverlayReport:
        """Apply every prefixed environment variable to ``tree``.

        Parameters
        ----------
        tree : ConfigTree
            Tree to write into.
        known_keys : Iterable[ConfigurationKey] | None
            Registered keys used to recover hyphenated segments.

        Returns
        -------
        OverlayReport
            Applied and failed overrides.
        """
        try:
            schema = {key.key.lower(): key for key in known_keys or ()}
            known = known_paths(schema.values())
            environ = dict(os.environ if self._environ is None else self._environ)
        except Exception as e:
            return self._abort(e)

        report = OverlayReport()
        for name, raw in environ.items():
            if raw is None:
                continue
            words = split_env_name(name, self._prefix)
            if words is None:
                continue

            try:
                report.applied.append(
                    self._apply_one(tree, name, raw, words, known, schema)
                )
            except Exception as e:
                self._logger.warning(
                    f"Failed to apply env override {name} -> "
                    f"{_format_words(words)}: {e}"
                )
                report.failed.append(
                    FailedOverride(variable=name, words=words, error=str(e))
                )

        return report

    def _apply_one(
        self,
        tree: ConfigTree,
        name: str,
        raw: str,
        words: list[str],
        known: frozenset[str],
        schema: Mapping[str, ConfigurationKey],
    ) -> AppliedOverride:
        segments = resolve_segments(words, known)
        dotted = ".".join(segments)
        matched_key = dotted.lower() in schema

        value = coerce_value(raw)
        tree.node(*segments).set(value)

        masked = is_secret_path(segments, self._secret_markers)
        shown = self._mask if masked else raw
        self._logger.info(f"Applied env override for {dotted} = {shown}")

        return AppliedOverride(
            variable=name,
            path=segments,
            value=value,
            masked=masked,
            matched_key=matched_key,
        )

    def _abort(self, error: Exception) -> OverlayReport:
        self._logger.warning(f"Failed to apply environment overrides: {error}")
        return OverlayReport(aborted=str(error))
