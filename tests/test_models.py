"""
Unit tests for the UnitBreakdown data model.
"""

import dataclasses

import numpy as np
import pytest

from humanise.models import UnitBreakdown


class TestUnitBreakdown:
    """Test UnitBreakdown data class."""

    def test_creation(self):
        b = UnitBreakdown(days=3, hours=4, minutes=5, seconds=6, milliseconds=7)
        assert b.days == 3
        assert b.hours == 4
        assert b.minutes == 5
        assert b.seconds == 6
        assert b.milliseconds == 7

    def test_defaults_are_zero(self):
        b = UnitBreakdown()
        assert tuple(b) == (0, 0, 0, 0, 0)
        assert b.is_zero

    def test_is_zero_false(self):
        assert not UnitBreakdown(milliseconds=1).is_zero

    def test_total_milliseconds(self):
        b = UnitBreakdown(days=1, hours=1, minutes=1, seconds=1, milliseconds=1)
        assert b.total_milliseconds == 86_400_000 + 3_600_000 + 60_000 + 1000 + 1

    def test_items_descending(self):
        b = UnitBreakdown(days=1, milliseconds=2)
        assert list(b.items()) == [
            ('days', 1), ('hours', 0), ('minutes', 0), ('seconds', 0), ('milliseconds', 2),
        ]

    def test_frozen(self):
        b = UnitBreakdown(days=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            b.days = 2

    @pytest.mark.parametrize('field, value', [
        ('hours', 24),
        ('minutes', 60),
        ('seconds', 60),
        ('milliseconds', 1000),
    ])
    def test_range_enforced(self, field, value):
        with pytest.raises(ValueError):
            UnitBreakdown(**{field: value})

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            UnitBreakdown(days=-1)

    def test_days_unbounded(self):
        assert UnitBreakdown(days=10**30).days == 10**30

    def test_to_dict(self):
        b = UnitBreakdown(hours=2, seconds=30)
        assert b.to_dict() == {
            'days': 0, 'hours': 2, 'minutes': 0, 'seconds': 30, 'milliseconds': 0,
        }

    def test_from_dict(self):
        b = UnitBreakdown.from_dict({'minutes': 5, 'milliseconds': 250})
        assert b == UnitBreakdown(minutes=5, milliseconds=250)

    def test_from_dict_invalid(self):
        with pytest.raises(ValueError):
            UnitBreakdown.from_dict({'seconds': 75})

    @pytest.mark.parametrize('data', [
        {'hours': 1.5},
        {'days': True},
        {'hours': 1.5, 'days': True},
        {'minutes': "5"},
        {'seconds': None},
        {'milliseconds': np.float64(2.0)},
    ])
    def test_from_dict_non_integer(self, data):
        with pytest.raises(ValueError):
            UnitBreakdown.from_dict(data)

    def test_numpy_integers_stored_as_int(self):
        b = UnitBreakdown(days=np.int64(3), hours=np.uint8(4))
        assert b == UnitBreakdown(days=3, hours=4)
        assert type(b.days) is int
        assert type(b.hours) is int
