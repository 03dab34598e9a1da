"""Field-bounds validation shared by every output boundary."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from civiltime.domain import gregorian
from civiltime.errors import FieldViolation, RangeError

MIN_YEAR: Final[int] = 0
MAX_YEAR: Final[int] = 9999
MAX_NANOSECOND: Final[int] = 999_999_999


class ValidationMode(StrEnum):
    """How strictly a value is checked before it is rendered as canonical text.

    ``FULL`` checks every field. ``YEAR_ONLY`` only enforces the four-digit year
    and leaves month, day and clock fields unchecked, matching older encoders.
    """

    FULL = "full"
    YEAR_ONLY = "year_only"


def _bounded(field: str, value: int, lower: int, upper: int) -> list[FieldViolation]:
    if lower <= value <= upper:
        return []
    return [FieldViolation(field, value, lower, upper)]


def date_violations(
    year: int, month: int, day: int, *, mode: ValidationMode = ValidationMode.FULL
) -> list[FieldViolation]:
    violations = _bounded("year", year, MIN_YEAR, MAX_YEAR)
    if mode is ValidationMode.YEAR_ONLY:
        return violations
    violations += _bounded("month", month, 1, gregorian.MONTHS_PER_YEAR)
    if 1 <= month <= gregorian.MONTHS_PER_YEAR:
        violations += _bounded("day", day, 1, gregorian.days_in_month(year, month))
    else:
        violations += _bounded("day", day, 1, 31)
    return violations


def time_violations(
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
    *,
    mode: ValidationMode = ValidationMode.FULL,
) -> list[FieldViolation]:
    if mode is ValidationMode.YEAR_ONLY:
        return []
    return [
        *_bounded("hour", hour, 0, 23),
        *_bounded("minute", minute, 0, 59),
        *_bounded("second", second, 0, 59),
        *_bounded("nanosecond", nanosecond, 0, MAX_NANOSECOND),
    ]


def ensure_valid(operation: str, violations: list[FieldViolation]) -> None:
    """Raise :class:`RangeError` for ``operation`` if any field was out of bounds."""

    if violations:
        raise RangeError(operation, violations)


__all__ = [
    "MAX_NANOSECOND",
    "MAX_YEAR",
    "MIN_YEAR",
    "ValidationMode",
    "date_violations",
    "ensure_valid",
    "time_violations",
]
