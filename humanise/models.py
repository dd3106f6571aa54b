"""
Data models for humanise.

Contains the dataclass representing a millisecond count split into units.
"""

import numbers
from dataclasses import dataclass, fields
from typing import Iterator

from .config import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND

# Exclusive upper bound of each unit below days
_UNIT_LIMITS = {
    'hours': 24,
    'minutes': 60,
    'seconds': 60,
    'milliseconds': 1000,
}


@dataclass(frozen=True)
class UnitBreakdown:
    """
    A duration split into whole days, hours, minutes, seconds and milliseconds.

    Attributes:
        days: Whole days (unbounded)
        hours: Remaining hours (0-23)
        minutes: Remaining minutes (0-59)
        seconds: Remaining seconds (0-59)
        milliseconds: Remaining milliseconds (0-999)
    """
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(
                    f"{f.name} must be an integer, got {type(value).__name__}"
                )
            # Store numpy integers as plain ints
            value = int(value)
            object.__setattr__(self, f.name, value)
            if value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")
            limit = _UNIT_LIMITS.get(f.name)
            if limit is not None and value >= limit:
                raise ValueError(f"{f.name} must be less than {limit}, got {value}")

    def __iter__(self) -> Iterator[int]:
        return (getattr(self, f.name) for f in fields(self))

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (unit, value) pairs, largest unit first."""
        return ((f.name, getattr(self, f.name)) for f in fields(self))

    @property
    def total_milliseconds(self) -> int:
        """Return the millisecond count this breakdown was built from."""
        return (
            self.days * MS_PER_DAY
            + self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )

    @property
    def is_zero(self) -> bool:
        """True if every unit is zero."""
        return not any(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return dict(self.items())

    @classmethod
    def from_dict(cls, data: dict) -> 'UnitBreakdown':
        """
        Create UnitBreakdown from dictionary. Missing units default to 0.

        Raises:
            ValueError: If a unit is not an integer or is out of range
        """
        return cls(
            days=data.get('days', 0),
            hours=data.get('hours', 0),
            minutes=data.get('minutes', 0),
            seconds=data.get('seconds', 0),
            milliseconds=data.get('milliseconds', 0),
        )
