"""
Duration humanisation.

Turns a millisecond count (or a timedelta) into an English phrase such as
"1 minute, 2 seconds, and 345 milliseconds". Durations are decomposed into
fixed-length units only, from days down to milliseconds.
"""

from __future__ import annotations

import logging
import operator
from datetime import timedelta
from typing import Union

import numpy as np

from .config import (
    ATTOSECONDS_PER_MS,
    DURATION_UNITS,
    NUMPY_UNIT_ATTOSECONDS,
    SHORT_UNIT_WORDS,
    VERBOSE_UNIT_WORDS,
    ZERO_DURATION_SHORT,
    ZERO_DURATION_VERBOSE,
)
from .models import UnitBreakdown
from .utils.lists import humanise_list
from .utils.plurals import pluralize

logger = logging.getLogger(__name__)

DurationValue = Union[timedelta, np.timedelta64]


def _check_milliseconds(milliseconds: int) -> int:
    """Validate a millisecond count and return it as a plain int."""
    # bool is an int subclass but never a meaningful duration
    if isinstance(milliseconds, (bool, np.bool_)):
        raise TypeError("milliseconds must be an integer, got bool")
    try:
        milliseconds = operator.index(milliseconds)
    except TypeError:
        raise TypeError(
            f"milliseconds must be an integer, got {type(milliseconds).__name__}"
        ) from None
    if milliseconds < 0:
        raise ValueError(f"milliseconds must not be negative, got {milliseconds}")
    return milliseconds


def decompose(milliseconds: int) -> UnitBreakdown:
    """
    Split a millisecond count into days, hours, minutes, seconds and milliseconds.

    Args:
        milliseconds: Non-negative number of milliseconds. There is no upper
            bound; days simply keep growing.

    Returns:
        UnitBreakdown whose total_milliseconds equals the input

    Raises:
        TypeError: If milliseconds is not an integer (numpy integers are accepted)
        ValueError: If milliseconds is negative

    Examples:
        >>> decompose(62345)
        UnitBreakdown(days=0, hours=0, minutes=1, seconds=2, milliseconds=345)
    """
    milliseconds = _check_milliseconds(milliseconds)

    counts = {}
    remaining = milliseconds
    for unit, length in DURATION_UNITS:
        counts[unit], remaining = divmod(remaining, length)

    return UnitBreakdown(**counts)


def build_phrases(breakdown: UnitBreakdown, verbose: bool = True) -> list[str]:
    """
    Format each non-zero unit of a breakdown as "<count> <word>".

    Args:
        breakdown: Decomposed duration
        verbose: Use full words for minutes, seconds and milliseconds.
            Otherwise "min", "sec"/"secs" and "ms" are used. Days and hours
            always use full words.

    Returns:
        Phrases in descending unit order. Zero units are left out, so a zero
        breakdown gives an empty list.

    Examples:
        >>> build_phrases(UnitBreakdown(minutes=2, milliseconds=5), verbose=False)
        ['2 min', '5 ms']
    """
    words = VERBOSE_UNIT_WORDS if verbose else SHORT_UNIT_WORDS

    phrases = []
    for unit, count in breakdown.items():
        if count == 0:
            continue
        word, plural = words[unit]
        if plural:
            word = pluralize(count, word)
        phrases.append(f"{count} {word}")
    return phrases


def humanise_duration_from_milliseconds(milliseconds: int, verbose: bool = True) -> str:
    """
    Humanise a duration given in milliseconds.

    Args:
        milliseconds: Total milliseconds in the duration (non-negative)
        verbose: Use full words rather than shortening minutes ("min"),
            seconds ("secs") and milliseconds ("ms")

    Returns:
        The duration as an English phrase, largest units first.
        A zero duration gives "0 seconds" (or "0 secs").

    Raises:
        TypeError: If milliseconds is not an integer (numpy integers are accepted)
        ValueError: If milliseconds is negative

    Examples:
        >>> humanise_duration_from_milliseconds(123)
        '123 milliseconds'
        >>> humanise_duration_from_milliseconds(1234)
        '1 second and 234 milliseconds'
        >>> humanise_duration_from_milliseconds(62345)
        '1 minute, 2 seconds, and 345 milliseconds'
        >>> humanise_duration_from_milliseconds(62345, verbose=False)
        '1 min, 2 secs, and 345 ms'
    """
    milliseconds = _check_milliseconds(milliseconds)

    if milliseconds == 0:
        return ZERO_DURATION_VERBOSE if verbose else ZERO_DURATION_SHORT

    return humanise_list(build_phrases(decompose(milliseconds), verbose))


def _timedelta_to_milliseconds(duration: timedelta) -> int:
    # Integer microseconds avoid float rounding and the overflow of
    # abs(timedelta.min)
    microseconds = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    return abs(microseconds) // 1000


def _timedelta64_to_milliseconds(duration: np.timedelta64) -> int:
    if np.isnat(duration):
        raise ValueError("Cannot humanise NaT (not-a-time)")

    unit, step = np.datetime_data(duration.dtype)
    if unit not in NUMPY_UNIT_ATTOSECONDS:
        raise ValueError(
            f"Unsupported timedelta64 unit {unit!r}: only fixed-length units "
            f"from weeks down to attoseconds can be humanised"
        )

    count = abs(int(duration.astype(np.int64)))
    return count * step * NUMPY_UNIT_ATTOSECONDS[unit] // ATTOSECONDS_PER_MS


def to_milliseconds(duration: DurationValue) -> int:
    """
    Convert a time-span value to whole milliseconds.

    Negative spans are made positive and sub-millisecond precision is
    truncated.

    Args:
        duration: datetime.timedelta or numpy.timedelta64

    Returns:
        Non-negative number of milliseconds

    Raises:
        TypeError: If duration is not a supported time-span type
        ValueError: If duration is NaT or uses a calendar unit (years, months)
    """
    if isinstance(duration, timedelta):
        milliseconds = _timedelta_to_milliseconds(duration)
    elif isinstance(duration, np.timedelta64):
        milliseconds = _timedelta64_to_milliseconds(duration)
    else:
        raise TypeError(
            f"Expected datetime.timedelta or numpy.timedelta64, got {type(duration).__name__}"
        )

    logger.debug(f"Converted {duration!r} to {milliseconds} ms")
    return milliseconds


def humanise_duration_from_duration_value(duration: DurationValue, verbose: bool = True) -> str:
    """
    Convert a time-span to milliseconds, then humanise it.

    See humanise_duration_from_milliseconds() and to_milliseconds().

    Examples:
        >>> humanise_duration_from_duration_value(timedelta(days=1, hours=1))
        '1 day and 1 hour'
        >>> humanise_duration_from_duration_value(timedelta(seconds=-90), verbose=False)
        '1 min and 30 secs'
    """
    return humanise_duration_from_milliseconds(to_milliseconds(duration), verbose)


# Shorter names
humanise_duration_ms = humanise_duration_from_milliseconds
humanise_duration = humanise_duration_from_duration_value


__all__ = [
    'decompose',
    'build_phrases',
    'to_milliseconds',
    'humanise_duration_from_milliseconds',
    'humanise_duration_from_duration_value',
    'humanise_duration_ms',
    'humanise_duration',
]
