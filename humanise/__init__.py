"""
humanise
========
Convert raw numbers, durations and collections of values into natural
English strings.

Features:
- Durations from milliseconds, datetime.timedelta or numpy.timedelta64
- Verbose ("2 minutes") or abbreviated ("2 min") unit words
- Serial-comma list joining ("a, b, and c")
- Count-dependent plural suffixes for nouns and verbs
"""

__version__ = "0.2.0"

from .models import UnitBreakdown
from .config import MS_PER_SECOND, MS_PER_MINUTE, MS_PER_HOUR, MS_PER_DAY
from .utils import humanise_list, pluralize, plural_suffix
from .durations import (
    decompose,
    build_phrases,
    to_milliseconds,
    humanise_duration_from_milliseconds,
    humanise_duration_from_duration_value,
    humanise_duration_ms,
    humanise_duration,
)

__all__ = [
    "UnitBreakdown",
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "humanise_list",
    "pluralize",
    "plural_suffix",
    "decompose",
    "build_phrases",
    "to_milliseconds",
    "humanise_duration_from_milliseconds",
    "humanise_duration_from_duration_value",
    "humanise_duration_ms",
    "humanise_duration",
]
