"""
Configuration constants for humanise.

This module contains:
- Fixed millisecond lengths of the supported duration units
- Unit word tables for verbose and abbreviated output
- Default settings used by the command line interface
"""

# Fixed-length units only. Months and years vary in length, so days is the
# largest unit a millisecond count is decomposed into.
MS_PER_SECOND = 1000
MS_PER_MINUTE = MS_PER_SECOND * 60
MS_PER_HOUR = MS_PER_MINUTE * 60
MS_PER_DAY = MS_PER_HOUR * 24

# Units in descending order, paired with their length in milliseconds
DURATION_UNITS = (
    ('days', MS_PER_DAY),
    ('hours', MS_PER_HOUR),
    ('minutes', MS_PER_MINUTE),
    ('seconds', MS_PER_SECOND),
    ('milliseconds', 1),
)

# Unit words as (word, pluralize). Words with pluralize=False are printed
# as-is regardless of the count.
VERBOSE_UNIT_WORDS = {
    'days': ('day', True),
    'hours': ('hour', True),
    'minutes': ('minute', True),
    'seconds': ('second', True),
    'milliseconds': ('millisecond', True),
}

SHORT_UNIT_WORDS = {
    'days': ('day', True),
    'hours': ('hour', True),
    'minutes': ('min', False),
    'seconds': ('sec', True),
    'milliseconds': ('ms', False),
}

# Returned instead of an empty phrase when the duration is zero
ZERO_DURATION_VERBOSE = "0 seconds"
ZERO_DURATION_SHORT = "0 secs"

# numpy.timedelta64 units, expressed in attoseconds so every conversion
# to milliseconds stays in exact integer arithmetic
NUMPY_UNIT_ATTOSECONDS = {
    'W': 7 * 86_400 * 10**18,
    'D': 86_400 * 10**18,
    'h': 3_600 * 10**18,
    'm': 60 * 10**18,
    's': 10**18,
    'ms': 10**15,
    'us': 10**12,
    'ns': 10**9,
    'ps': 10**6,
    'fs': 10**3,
    'as': 1,
}
ATTOSECONDS_PER_MS = 10**15

# Default verbosity for the CLI when neither flag nor config chooses one
DEFAULT_VERBOSE = True

# User configuration location
import os
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.humanise')
