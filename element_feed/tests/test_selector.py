"""
Tests for day-of-year and hour-identifier based element selection.
"""

import unittest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from element_feed.errors import InvalidModulusError
from element_feed.selector import (
    day_index,
    day_of_year,
    hour_identifier,
    hour_index,
    select_day_index,
    select_hour_index,
)

UTC = timezone.utc


class TestDayOfYear(unittest.TestCase):
    """Test the 1-based ordinal day computation"""

    def test_first_day(self):
        self.assertEqual(day_of_year(datetime(2026, 1, 1)), 1)

    def test_mid_year(self):
        self.assertEqual(day_of_year(datetime(2026, 7, 1)), 182)

    def test_end_of_year(self):
        self.assertEqual(day_of_year(datetime(2026, 12, 31)), 365)
        self.assertEqual(day_of_year(datetime(2024, 12, 31)), 366)

    def test_leap_year_february(self):
        self.assertEqual(day_of_year(datetime(2024, 2, 28)), 59)
        self.assertEqual(day_of_year(datetime(2025, 2, 28)), 59)
        self.assertEqual(day_of_year(datetime(2024, 2, 29)), 60)

    def test_march_first_leap_and_non_leap(self):
        self.assertEqual(day_of_year(datetime(2024, 3, 1)), 61)
        self.assertEqual(day_of_year(datetime(2025, 3, 1)), 60)

    def test_year_transition(self):
        self.assertEqual(day_of_year(datetime(2025, 12, 31)), 365)
        self.assertEqual(day_of_year(datetime(2026, 1, 1)), 1)

    def test_time_of_day_does_not_change_the_day(self):
        self.assertEqual(day_of_year(datetime(2026, 1, 17, 0, 0)), 17)
        self.assertEqual(day_of_year(datetime(2026, 1, 17, 23, 59, 59)), 17)

    def test_accepts_dates(self):
        self.assertEqual(day_of_year(date(2024, 2, 29)), 60)
        self.assertEqual(day_of_year(date(2024, 12, 31)), 366)

    def test_uses_the_moments_own_calendar(self):
        # 23:30 on Dec 31st in New York is already Jan 1st in UTC
        new_york = timezone(timedelta(hours=-5))
        moment = datetime(2025, 12, 31, 23, 30, tzinfo=new_york)
        self.assertEqual(day_of_year(moment), 365)
        self.assertEqual(day_of_year(moment.astimezone(UTC)), 1)

    def test_daylight_saving_does_not_shift_the_day(self):
        new_york = ZoneInfo("America/New_York")
        # Clocks spring forward on March 8th 2026 and fall back on November 1st
        self.assertEqual(day_of_year(datetime(2026, 3, 9, 0, 30, tzinfo=new_york)), 68)
        self.assertEqual(day_of_year(datetime(2026, 7, 1, tzinfo=new_york)), 182)
        self.assertEqual(day_of_year(datetime(2026, 11, 2, 0, 30, tzinfo=new_york)), 306)
        self.assertEqual(day_of_year(datetime(2026, 12, 31, 23, 59, tzinfo=new_york)), 365)

    def test_accepts_iso_strings(self):
        self.assertEqual(day_of_year("2024-03-01T10:00:00+00:00"), 61)

    def test_every_day_of_a_century(self):
        for year in (2000, 2023, 2024, 2100):
            start = date(year, 1, 1)
            for offset in range(366 if year % 4 == 0 and year != 2100 else 365):
                self.assertEqual(day_of_year(start + timedelta(days=offset)), offset + 1)


class TestDayIndex(unittest.TestCase):
    """Test the day to element index mapping, including its phase shift"""

    def test_day_one_maps_to_index_one(self):
        self.assertEqual(day_index(1, 118), 1)

    def test_exact_multiples_map_to_zero(self):
        self.assertEqual(day_index(118, 118), 0)
        self.assertEqual(day_index(236, 118), 0)
        self.assertEqual(day_index(354, 118), 0)

    def test_wraps_after_a_cycle(self):
        self.assertEqual(day_index(119, 118), 1)
        self.assertEqual(day_index(237, 118), 1)

    def test_day_zero(self):
        self.assertEqual(day_index(0, 118), 0)

    def test_large_day(self):
        index = day_index(999999, 118)
        self.assertTrue(0 <= index < 118)

    def test_matches_modulo_for_three_cycles(self):
        for day in range(1, 355):
            self.assertEqual(day_index(day, 118), day % 118)

    def test_one_cycle_covers_every_element(self):
        indices = {day_index(day, 118) for day in range(1, 119)}
        self.assertEqual(len(indices), 118)


class TestHourIdentifier(unittest.TestCase):
    """Test the YYYYMMDDHH UTC hour identifier"""

    def test_afternoon(self):
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 14, tzinfo=UTC)), 2026011714)

    def test_zone_with_daylight_saving(self):
        new_york = ZoneInfo("America/New_York")
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 9, tzinfo=new_york)), 2026011714)
        self.assertEqual(hour_identifier(datetime(2026, 7, 1, 10, tzinfo=new_york)), 2026070114)

    def test_midnight(self):
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 0, tzinfo=UTC)), 2026011700)
        self.assertEqual(hour_identifier(datetime(2026, 1, 1, 0, tzinfo=UTC)), 2026010100)

    def test_last_hour(self):
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 23, tzinfo=UTC)), 2026011723)
        self.assertEqual(hour_identifier(datetime(2026, 12, 31, 23, tzinfo=UTC)), 2026123123)

    def test_single_digit_month_and_day(self):
        self.assertEqual(hour_identifier(datetime(2026, 1, 1, 12, tzinfo=UTC)), 2026010112)

    def test_minutes_and_seconds_are_ignored(self):
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 14, 59, 59, 999999, tzinfo=UTC)), 2026011714)

    def test_far_future(self):
        self.assertEqual(hour_identifier(datetime(9999, 12, 31, 23, tzinfo=UTC)), 9999123123)

    def test_iso_strings(self):
        self.assertEqual(hour_identifier("2026-01-17T00:00:00Z"), 2026011700)
        self.assertEqual(hour_identifier("2026-01-17T23:00:00Z"), 2026011723)
        self.assertEqual(hour_identifier("9999-12-31T23:00:00Z"), 9999123123)

    def test_always_uses_utc(self):
        paris = timezone(timedelta(hours=1))
        self.assertEqual(hour_identifier(datetime(2026, 1, 17, 15, 30, tzinfo=paris)), 2026011714)
        self.assertEqual(hour_identifier(datetime(2026, 1, 1, 0, 30, tzinfo=paris)), 2025123123)

    def test_hours_of_a_day_are_distinct(self):
        ids = {hour_identifier(datetime(2026, 1, 17, hour, tzinfo=UTC)) for hour in range(24)}
        self.assertEqual(len(ids), 24)


class TestHourIndex(unittest.TestCase):
    """Test the hour identifier to element index mapping"""

    def test_matches_modulo(self):
        self.assertEqual(hour_index(2026011714, 118), 2026011714 % 118)

    def test_wraps(self):
        self.assertEqual(hour_index(118, 118), 0)
        self.assertEqual(hour_index(119, 118), 1)

    def test_every_element_appears_over_consecutive_identifiers(self):
        counts = [0] * 118
        for i in range(1000):
            counts[hour_index(2026010100 + i, 118)] += 1
        self.assertTrue(all(count > 0 for count in counts))

    def test_day_rollover_is_not_a_single_step(self):
        before = select_hour_index(datetime(2026, 1, 17, 23, tzinfo=UTC), 118)
        after = select_hour_index(datetime(2026, 1, 18, 0, tzinfo=UTC), 118)
        self.assertEqual(after, (before + 77) % 118)


@pytest.mark.parametrize("modulus", [0, -1, -118])
def test_non_positive_modulus_is_rejected(modulus):
    with pytest.raises(InvalidModulusError):
        day_index(1, modulus)
    with pytest.raises(InvalidModulusError):
        hour_index(2026011714, modulus)
    with pytest.raises(InvalidModulusError):
        select_day_index(datetime(2026, 1, 1), modulus)
    with pytest.raises(InvalidModulusError):
        select_hour_index(datetime(2026, 1, 1, tzinfo=UTC), modulus)


@pytest.mark.parametrize("modulus", [1.5, "118", True, None])
def test_non_integer_modulus_is_rejected(modulus):
    with pytest.raises(InvalidModulusError):
        day_index(1, modulus)


def test_invalid_modulus_is_a_value_error():
    with pytest.raises(ValueError):
        day_index(1, 0)


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 2, 29), 60 % 118),
        (datetime(2024, 3, 1), 61 % 118),
        (datetime(2025, 3, 1), 60 % 118),
        (datetime(2026, 4, 28), 0),
        (datetime(2026, 4, 29), 1),
    ],
)
def test_select_day_index(moment, expected):
    assert select_day_index(moment, 118) == expected
    assert select_day_index(moment, 118) == day_of_year(moment) % 118


if __name__ == "__main__":
    unittest.main()
