"""
Deterministic selection of the element of the day and of the hour.

Both cycles map a point in time to an index in ``[0, modulus)`` where the
modulus is the number of elements. Nothing here reads the clock: callers
pass the moment explicitly.

Two quirks of the published feed are kept on purpose, since the
day-to-element mapping is already observable by consumers:

* ``day_index`` is ``day % n``, so January 1st selects index 1 and index 0
  only comes up on days that are multiples of ``n``.
* The day cycle follows the local calendar of the moment while the hour
  cycle always uses UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from .errors import InvalidModulusError
from .utils import coerce_datetime

ONE_DAY = timedelta(days=1)


def _check_modulus(modulus: int) -> None:
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise InvalidModulusError(f"modulus must be an int, got {type(modulus).__name__}")
    if modulus <= 0:
        raise InvalidModulusError(f"modulus must be positive, got {modulus}")


def day_of_year(moment: date | datetime | str) -> int:
    """Return the 1-based ordinal of the moment's date within its year.

    Uses the wall-clock calendar fields of the moment: an aware datetime
    keeps its own zone, a naive one is taken as local time. The value is
    the whole number of days elapsed since midnight of January 1st, plus
    one, so Feb 29th of a leap year is day 60 and Dec 31st is 365 or 366.

    Args:
        moment: A date, a datetime, or an ISO-8601 string

    Returns:
        Day of year (1-366)
    """
    moment = coerce_datetime(moment)
    if isinstance(moment, datetime):
        wall_clock = moment.replace(tzinfo=None)
        start_of_year = datetime(wall_clock.year, 1, 1)
    else:
        wall_clock = moment
        start_of_year = date(moment.year, 1, 1)
    return (wall_clock - start_of_year) // ONE_DAY + 1


def day_index(day: int, modulus: int) -> int:
    """Return the element index for a day of the year.

    Examples (modulus 118):
        1 -> 1
        118 -> 0
        119 -> 1

    Raises:
        InvalidModulusError: If modulus is not a positive integer
    """
    _check_modulus(modulus)
    return day % modulus


def hour_identifier(moment: datetime | str) -> int:
    """Return the YYYYMMDDHH integer of the moment's UTC hour.

    Examples:
        2026-01-17T14:00:00Z -> 2026011714
        2026-01-17T15:30:00+01:00 -> 2026011714

    Naive datetimes are read as local time and converted to UTC.
    """
    utc = coerce_datetime(moment).astimezone(timezone.utc)
    return int(f"{utc.year:04d}{utc.month:02d}{utc.day:02d}{utc.hour:02d}")


def hour_index(identifier: int, modulus: int) -> int:
    """Return the element index for an hour identifier.

    Consecutive hours do not step through the elements one by one: the jump
    from hour 23 to hour 00 of the next day is 77 in identifier space, and
    larger still across month ends.

    Raises:
        InvalidModulusError: If modulus is not a positive integer
    """
    _check_modulus(modulus)
    return identifier % modulus


def select_day_index(moment: date | datetime | str, modulus: int) -> int:
    """Index of the element of the day for ``moment``."""
    return day_index(day_of_year(moment), modulus)


def select_hour_index(moment: datetime | str, modulus: int) -> int:
    """Index of the element of the hour for ``moment``."""
    return hour_index(hour_identifier(moment), modulus)
