"""Civil calendar date."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Self

from civiltime.domain import codec, gregorian
from civiltime.domain.validation import ValidationMode, date_violations, ensure_valid
from civiltime.errors import ParseError


@dataclass(frozen=True, order=True)
class Date:
    """A calendar day with no time zone.

    Fields are not validated on construction, so ``Date(2021, 2, 30)`` is
    representable; bounds are enforced when the value is rendered as text.
    """

    year: int = 0
    month: int = 0
    day: int = 0

    def __str__(self) -> str:
        return codec.format_date(self.year, self.month, self.day)

    @classmethod
    def of(cls, value: dt.date) -> Self:
        """Return the civil date of a stdlib ``date`` or ``datetime``."""

        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``YYYY-MM-DD``.

        Raises:
            ParseError: if ``text`` is malformed or names a day that does not exist.
        """

        try:
            fields = codec.parse_layout(text, codec.DATE_LAYOUT, codec.DATE_LAYOUT_TEXT)
        except codec.LayoutError as exc:
            raise ParseError("date", text, str(exc)) from exc
        return cls(fields["year"], fields["month"], fields["day"])

    # JSON --------------------------------------------------------------------

    def to_json(self, *, mode: ValidationMode = ValidationMode.FULL) -> bytes:
        ensure_valid("Date.to_json", date_violations(*self._fields(), mode=mode))
        return codec.quote_json(str(self))

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Self:
        try:
            text = codec.unquote_json(data)
        except codec.LayoutError as exc:
            raise ParseError("date", codec.document_text(data), str(exc)) from exc
        return cls.parse(text)

    # Persistence -------------------------------------------------------------

    def value(self, *, mode: ValidationMode = ValidationMode.FULL) -> str:
        """Return the canonical text handed to a database driver."""

        ensure_valid("Date.value", date_violations(*self._fields(), mode=mode))
        return str(self)

    @classmethod
    def scan(cls, value: object) -> Self:
        """Build a date from a database driver value.

        Raises:
            ParseError: if the value is not a canonical date.
        """

        if isinstance(value, dt.datetime):
            raise ParseError("date", repr(value), "unsupported driver value of type datetime")
        try:
            text = codec.driver_text(value, dt.date, codec.native_date_text)
        except codec.LayoutError as exc:
            raise ParseError("date", repr(value), str(exc)) from exc
        return cls.parse(text)

    # Arithmetic --------------------------------------------------------------

    def add_days(self, days: int) -> Self:
        return self._from_days(self._days() + days)

    def add_months(self, months: int) -> Self:
        """Advance by ``months`` calendar months.

        A day that does not exist in the target month carries into the next one:
        ``Date(2020, 2, 29).add_months(12) == Date(2021, 3, 1)``.
        """

        return type(self)(*gregorian.normalize(self.year, self.month + months, self.day))

    def add_years(self, years: int) -> Self:
        return self.add_months(years * gregorian.MONTHS_PER_YEAR)

    def days_since(self, other: Date) -> int:
        """Return the signed number of days from ``other`` to this date."""

        return self._days() - other._days()

    # Queries -----------------------------------------------------------------

    def is_valid(self) -> bool:
        """Report whether the date names a real calendar day, in any year."""

        if not 1 <= self.month <= gregorian.MONTHS_PER_YEAR:
            return False
        return 1 <= self.day <= gregorian.days_in_month(self.year, self.month)

    def is_zero(self) -> bool:
        return self == type(self)()

    def to_date(self) -> dt.date:
        """Return the stdlib ``date``; years below 1 are not representable there."""

        return dt.date(self.year, self.month, self.day)

    def _fields(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def _days(self) -> int:
        year, month, day = gregorian.normalize(*self._fields())
        return gregorian.days_from_civil(year, month, day)

    @classmethod
    def _from_days(cls, days: int) -> Self:
        return cls(*gregorian.civil_from_days(days))


__all__ = ["Date"]
