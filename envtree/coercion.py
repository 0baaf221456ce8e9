"""Heuristic typing of raw environment variable values.

Environment variables only carry strings. This module guesses the intended
Python type from the shape of the string alone, without consulting any
schema: booleans, comma-separated lists, 32-bit and 64-bit integers, simple
decimals, and finally the untouched string.
"""

from __future__ import annotations

import re
from typing import Any

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_WORDS = frozenset({"true", "1", "yes", "y"})
FALSE_WORDS = frozenset({"false", "0", "no", "n"})

_INT_PATTERN = re.compile(r"-?\d+", re.ASCII)
_LONG_PATTERN = re.compile(r"(-?\d+)L", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"-?\d+\.\d+", re.ASCII)


class Long(int):
    """Integer that was parsed as a signed 64-bit value.

    Behaves exactly like ``int``; the subclass only records that the value
    was written with an ``L`` suffix or did not fit in 32 bits.

    Examples
    --------
    >>> Long(5) + 1
    6
    >>> Long(5)
    Long(5)
    """

    __slots__ = ()

    def __repr__(self) -> str:
        """Return a representation that keeps the 64-bit marker visible."""
        return f"Long({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


def parse_boolean(text: str) -> bool:
    """Parse a boolean word.

    Parameters
    ----------
    text : str
        One of ``true/1/yes/y`` or ``false/0/no/n``, in any case, optionally
        surrounded by whitespace.

    Returns
    -------
    bool
        Parsed boolean.

    Raises
    ------
    ValueError
        If the text is not a recognized boolean word.

    Examples
    --------
    >>> parse_boolean("Yes")
    True
    >>> parse_boolean(" n ")
    False
    """
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"Cannot parse boolean from {word!r}")


def _parse_integer(digits: str, force_long: bool = False) -> int | None:
    """Parse an integer literal into ``int`` or ``Long``.

    Returns None when the value does not fit in 64 bits.
    """
    value = int(digits)
    if not force_long and INT32_MIN <= value <= INT32_MAX:
        return value
    if INT64_MIN <= value <= INT64_MAX:
        return Long(value)
    return None


def coerce_value(raw: str) -> Any:
    """Convert a raw environment value to the most plausible Python type.

    Rules, applied in order to the whitespace-trimmed value:

    1. ``true/1/yes/y`` and ``false/0/no/n`` (any case) become ``bool``.
    2. Anything containing a comma becomes a ``list[str]`` of trimmed pieces.
    3. ``-?\\d+`` becomes ``int`` inside the 32-bit range and ``Long``
       beyond it; ``-?\\d+L`` always becomes ``Long``.
    4. ``-?\\d+.\\d+`` becomes ``float``.
    5. Everything else, including integers wider than 64 bits, is returned
       as the original untrimmed string.

    Parameters
    ----------
    raw : str
        Raw environment variable value.

    Returns
    -------
    Any
        Coerced value. Never raises.

    Examples
    --------
    >>> coerce_value("TRUE")
    True
    >>> coerce_value("a, b ,c")
    ['a', 'b', 'c']
    >>> coerce_value("123")
    123
    >>> coerce_value("123L")
    Long(123)
    >>> coerce_value("0.75")
    0.75
    >>> coerce_value(" plain text ")
    ' plain text '
    """
    trimmed = raw.strip()
    lowered = trimmed.lower()

    if lowered in TRUE_WORDS or lowered in FALSE_WORDS:
        return parse_boolean(trimmed)

    if "," in trimmed:
        return [piece.strip() for piece in trimmed.split(",")]

    try:
        if _INT_PATTERN.fullmatch(trimmed):
            parsed = _parse_integer(trimmed)
            if parsed is not None:
                return parsed
        elif match := _LONG_PATTERN.fullmatch(trimmed):
            parsed = _parse_integer(match.group(1), force_long=True)
            if parsed is not None:
                return parsed
        elif _DECIMAL_PATTERN.fullmatch(trimmed):
            return float(trimmed)
    except ValueError:
        pass

    return raw
