"""Exceptions raised by envtree."""

from __future__ import annotations

from collections.abc import Sequence


class EnvTreeError(Exception):
    """Base exception for envtree errors."""

    pass


class TreeError(EnvTreeError):
    """Exception raised when a configuration tree rejects a path or value.

    Parameters
    ----------
    message
        Error message describing why the write was rejected.
    path
        Segments of the path that was being addressed. Empty if unknown.

    Attributes
    ----------
    path : tuple[str, ...]
        Segments of the rejected path.

    Examples
    --------
    >>> try:
    ...     raise TreeError("Cannot descend into scalar", path=("mail", "host"))
    ... except TreeError as e:
    ...     print(e)
    Cannot descend into scalar (at 'mail.host')
    """

    def __init__(self, message: str, path: Sequence[str] = ()) -> None:
        self.path = tuple(path)
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message."""
        message = super().__str__()
        if self.path:
            return f"{message} (at '{'.'.join(self.path)}')"
        return message


class KeySchemaError(EnvTreeError):
    """Exception raised when configuration keys cannot be extracted."""

    pass
