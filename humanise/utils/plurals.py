"""
Pluralization helper for humanise.

Adds or removes a bare "s" suffix depending on a count. There is no
irregular-plural support: callers supply base forms that pluralize with "s".
"""

from __future__ import annotations

import operator


def pluralize(count: int, word: str, opposite: bool = False) -> str:
    """
    Add a plural suffix to a word if there is supposed to be one.

    Args:
        count: Number of items. Only an exact 1 counts as singular.
        word: Word to apply the suffix to
        opposite: False suffixes plurals (nouns). True suffixes the
            singular instead, for verbs agreeing with a subject of size count.

    Returns:
        word, optionally suffixed with "s"

    Raises:
        TypeError: If count is not an integer. Any integer type is accepted,
            numpy integers included.

    Examples:
        >>> pluralize(1, 'apple')
        'apple'
        >>> pluralize(5, 'apple')
        'apples'
        >>> pluralize(1, 'make', opposite=True)
        'makes'
        >>> pluralize(5, 'make', opposite=True)
        'make'
    """
    try:
        count = operator.index(count)
    except TypeError:
        raise TypeError(f"count must be an integer, got {type(count).__name__}") from None

    singular = count == 1
    if singular == opposite:
        return f"{word}s"
    return word


# Name used by earlier releases
plural_suffix = pluralize


__all__ = ['pluralize', 'plural_suffix']
