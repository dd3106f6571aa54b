"""
List joining for humanise.

Joins values into an English phrase using the serial (Oxford) comma.
"""

from __future__ import annotations

from typing import Iterable


def humanise_list(items: Iterable[object]) -> str:
    """
    Join items into a human-readable English list.

    Each item is rendered with str(), so anything printable can be listed.

    Args:
        items: Values to join, in order. Any iterable is accepted.

    Returns:
        - "" for no items
        - the item itself for one item
        - "A and B" for two items
        - "A, B, and C" (serial comma) for three or more

    Examples:
        >>> humanise_list(['apples'])
        'apples'
        >>> humanise_list(['apples', 'bananas'])
        'apples and bananas'
        >>> humanise_list(['apples', 'bananas', 'strawberries'])
        'apples, bananas, and strawberries'
    """
    words = [str(item) for item in items]

    if len(words) < 2:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return ", ".join(words[:-1]) + f", and {words[-1]}"


__all__ = ['humanise_list']
