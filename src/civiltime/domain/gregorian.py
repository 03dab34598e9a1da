"""Proleptic Gregorian calendar arithmetic.

Works for any integer year, including year 0 and negative years, which the
standard library ``datetime`` types cannot represent.
"""

from __future__ import annotations

from typing import Final

MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_ERA: Final[int] = 146_097
YEARS_PER_ERA: Final[int] = 400

# Days from 0000-03-01 to 1970-01-01
_EPOCH_SHIFT: Final[int] = 719_468

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        ValueError: if ``month`` is not in ``1..12``.
    """

    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month {month} outside of range [1,12]")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Count days since 1970-01-01 for a valid calendar date."""

    shifted_year = year - 1 if month <= 2 else year
    era = shifted_year // YEARS_PER_ERA
    year_of_era = shifted_year - era * YEARS_PER_ERA
    month_index = month - 3 if month > 2 else month + 9
    day_of_year = (153 * month_index + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`."""

    days += _EPOCH_SHIFT
    era = days // DAYS_PER_ERA
    day_of_era = days - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    month_index = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_index + 2) // 5 + 1
    month = month_index + 3 if month_index < 10 else month_index - 9
    year = year_of_era + era * YEARS_PER_ERA + (1 if month <= 2 else 0)
    return year, month, day


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Fold out-of-range month and day values into a real calendar date.

    Months outside ``1..12`` carry into the year. Days past the end of the
    month roll forward into the following months, days below 1 roll back,
    so ``(2021, 2, 29)`` becomes ``(2021, 3, 1)`` rather than being clamped.
    """

    carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    year += carry
    month = month_index + 1
    first_of_month = days_from_civil(year, month, 1)
    return civil_from_days(first_of_month + day - 1)


__all__ = [
    "civil_from_days",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "normalize",
]
