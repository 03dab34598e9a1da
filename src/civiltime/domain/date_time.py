"""Civil date and time of day, combined."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Self

from civiltime.domain import codec
from civiltime.domain.date import Date
from civiltime.domain.time_of_day import TimeOfDay
from civiltime.domain.validation import (
    ValidationMode,
    date_violations,
    ensure_valid,
    time_violations,
)
from civiltime.errors import ParseError


@dataclass(frozen=True, order=True)
class DateTime:
    """A calendar day and wall-clock reading with no time zone.

    Not an instant: two values that print identically are the same value,
    whatever clock or zone they were read from.
    """

    date: Date = field(default_factory=Date)
    time: TimeOfDay = field(default_factory=TimeOfDay)

    def __str__(self) -> str:
        return f"{self.date}T{self.time}"

    @classmethod
    def of(cls, value: dt.datetime) -> Self:
        """Return the wall-clock reading of ``value``; any ``tzinfo`` is dropped."""

        return cls(Date.of(value), TimeOfDay.of(value.time()))

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``YYYY-MM-DDTHH:MM:SS.fffffffff`` as a single layout.

        A lowercase ``t`` separator is accepted as well.
        """

        try:
            fields = codec.parse_layout(text, codec.DATETIME_LAYOUT, codec.DATETIME_LAYOUT_TEXT)
        except codec.LayoutError as exc:
            raise ParseError("datetime", text, str(exc)) from exc
        return cls(
            Date(fields["year"], fields["month"], fields["day"]),
            TimeOfDay(fields["hour"], fields["minute"], fields["second"], fields["nanosecond"]),
        )

    def to_json(self, *, mode: ValidationMode = ValidationMode.FULL) -> bytes:
        self._validate("DateTime.to_json", mode)
        return codec.quote_json(str(self))

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Self:
        try:
            text = codec.unquote_json(data)
        except codec.LayoutError as exc:
            raise ParseError("datetime", codec.document_text(data), str(exc)) from exc
        return cls.parse(text)

    def value(self, *, mode: ValidationMode = ValidationMode.FULL) -> str:
        self._validate("DateTime.value", mode)
        return str(self)

    @classmethod
    def scan(cls, value: object) -> Self:
        try:
            text = codec.driver_text(value, dt.datetime, codec.native_datetime_text)
        except codec.LayoutError as exc:
            raise ParseError("datetime", repr(value), str(exc)) from exc
        return cls.parse(text)

    def is_valid(self) -> bool:
        return self.date.is_valid() and self.time.is_valid()

    def is_zero(self) -> bool:
        return self.date.is_zero() and self.time.is_zero()

    def to_datetime(self) -> dt.datetime:
        """Return a naive stdlib ``datetime``, truncating to microseconds."""

        return dt.datetime.combine(self.date.to_date(), self.time.to_time())

    def _validate(self, operation: str, mode: ValidationMode) -> None:
        date, time = self.date, self.time
        ensure_valid(
            operation,
            [
                *date_violations(date.year, date.month, date.day, mode=mode),
                *time_violations(time.hour, time.minute, time.second, time.nanosecond, mode=mode),
            ],
        )


__all__ = ["DateTime"]
