"""Reconstruction of configuration paths from environment variable names.

Environment variable names only have ``_`` as a word separator, while
configuration paths use ``.`` between levels and ``-`` inside multi-word
segments. ``ALLOWED_COMMANDS_WHILE_UNAUTHORIZED`` could therefore be four
nested levels or a single hyphenated segment. The resolver enumerates every
way of grouping the words into segments and keeps the first grouping that
names a registered key path, preferring fewer, longer segments.

The search is exponential in the number of words (``2^(n-1)`` groupings for
``n`` words). Key names in practice are a handful of words long; past about
twelve words a memoized or trie-based matcher would be needed.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence, Set
from itertools import combinations, pairwise


def split_env_name(name: str, prefix: str) -> list[str] | None:
    """Split an environment variable name into lower-cased words.

    The prefix and any underscores directly after it are removed, and the
    remainder is split on every ``_``. Doubled underscores produce empty
    words; trailing underscores are ignored.

    Parameters
    ----------
    name : str
        Environment variable name.
    prefix : str
        Required leading string.

    Returns
    -------
    list[str] | None
        Lower-cased words, or None if ``name`` does not start with ``prefix``.

    Examples
    --------
    >>> split_env_name("LIBRELOGIN_MAIL_HOST", "LIBRELOGIN_")
    ['mail', 'host']
    >>> split_env_name("LIBRELOGIN___DEBUG", "LIBRELOGIN_")
    ['debug']
    >>> split_env_name("OTHER_MAIL_HOST", "LIBRELOGIN_") is None
    True
    """
    if not name.startswith(prefix):
        return None

    remainder = name[len(prefix) :].lstrip("_")
    words = [word.lower() for word in remainder.split("_")]

    while words and not words[-1]:
        words.pop()

    return words


def iter_partitions(words: Sequence[str]) -> Iterator[tuple[str, ...]]:
    """Yield every contiguous grouping of ``words`` as hyphen-joined segments.

    Groupings come in ascending number of segments. Among groupings with the
    same number of segments, those with shorter leading segments come first.

    Parameters
    ----------
    words : Sequence[str]
        Words to group.

    Yields
    ------
    tuple[str, ...]
        Segments of one grouping.

    Examples
    --------
    >>> list(iter_partitions(["a", "b", "c"]))
    [('a-b-c',), ('a', 'b-c'), ('a-b', 'c'), ('a', 'b', 'c')]
    """
    count = len(words)
    for cut_count in range(count):
        for cuts in combinations(range(1, count), cut_count):
            bounds = (0, *cuts, count)
            yield tuple("-".join(words[start:end]) for start, end in pairwise(bounds))


def resolve_segments(words: Sequence[str], known_paths: Set[str]) -> tuple[str, ...]:
    """Resolve words into the configuration path they most plausibly name.

    Parameters
    ----------
    words : Sequence[str]
        Lower-cased words from :func:`split_env_name`.
    known_paths : Set[str]
        Lower-cased dotted paths of the registered configuration keys.

    Returns
    -------
    tuple[str, ...]
        Segments of the first grouping whose dotted form is a known path.
        Without a match, one segment per word with ``-`` replaced by ``_``.

    Examples
    --------
    >>> resolve_segments(["mail", "host"], {"mail.host"})
    ('mail', 'host')
    >>> resolve_segments(
    ...     ["allowed", "commands", "while", "unauthorized"],
    ...     {"allowed-commands-while-unauthorized"},
    ... )
    ('allowed-commands-while-unauthorized',)
    >>> resolve_segments(["foo", "bar"], set())
    ('foo', 'bar')
    """
    if not words:
        return ()

    for partition in iter_partitions(words):
        if ".".join(partition).lower() in known_paths:
            return partition

    return tuple(word.replace("-", "_") for word in words)
