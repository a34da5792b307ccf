"""
Tests for the intensity classifier module.
"""

from datetime import date
from unittest.mock import patch

import pytest

from habit_calendar.intensity import classify, is_today
from habit_calendar.models import IntensityBand


class TestClassify:
    """Tests for the classify function."""

    def test_zero_is_none(self):
        assert classify(0) == IntensityBand.NONE

    @pytest.mark.parametrize(
        "value, band",
        [
            (1, IntensityBand.VERY_LOW),
            (19, IntensityBand.VERY_LOW),
            (20, IntensityBand.LOW),
            (39, IntensityBand.LOW),
            (40, IntensityBand.MEDIUM),
            (59, IntensityBand.MEDIUM),
            (60, IntensityBand.HIGH),
            (79, IntensityBand.HIGH),
            (80, IntensityBand.VERY_HIGH),
            (100, IntensityBand.VERY_HIGH),
        ],
    )
    def test_band_boundaries(self, value, band):
        """Boundary values belong to the higher band."""
        assert classify(value) == band

    def test_fractional_values_below_boundary(self):
        assert classify(19.9) == IntensityBand.VERY_LOW
        assert classify(0.5) == IntensityBand.VERY_LOW

    def test_every_percentage_has_exactly_one_band(self):
        """Bands cover 0-100 and never decrease as the percentage grows."""
        bands = [classify(p) for p in range(101)]

        assert set(bands) == set(IntensityBand)
        assert bands == sorted(bands)

    def test_bands_are_ordered(self):
        assert IntensityBand.NONE < IntensityBand.VERY_LOW < IntensityBand.LOW
        assert IntensityBand.LOW < IntensityBand.MEDIUM < IntensityBand.HIGH
        assert IntensityBand.HIGH < IntensityBand.VERY_HIGH


class TestIsToday:
    """Tests for the is_today function."""

    def test_same_day(self):
        assert is_today(date(2026, 3, 4), today=date(2026, 3, 4))

    def test_different_day(self):
        assert not is_today(date(2026, 3, 3), today=date(2026, 3, 4))

    def test_defaults_to_current_day(self):
        with patch("habit_calendar.intensity.current_day", return_value=date(2026, 3, 4)):
            assert is_today(date(2026, 3, 4))
            assert not is_today(date(2025, 3, 4))
