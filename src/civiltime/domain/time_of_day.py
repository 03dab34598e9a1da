"""Civil time of day."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Self

from civiltime.domain import codec
from civiltime.domain.validation import ValidationMode, ensure_valid, time_violations
from civiltime.errors import ParseError

_NANOS_PER_MICRO = 1000


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock reading with nanosecond precision and no date or zone."""

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __str__(self) -> str:
        return codec.format_time(self.hour, self.minute, self.second, self.nanosecond)

    @classmethod
    def of(cls, value: dt.time) -> Self:
        return cls(value.hour, value.minute, value.second, value.microsecond * _NANOS_PER_MICRO)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``HH:MM:SS.fffffffff``; the fraction may be shorter or omitted."""

        try:
            fields = codec.parse_layout(text, codec.TIME_LAYOUT, codec.TIME_LAYOUT_TEXT)
        except codec.LayoutError as exc:
            raise ParseError("time", text, str(exc)) from exc
        return cls(fields["hour"], fields["minute"], fields["second"], fields["nanosecond"])

    def to_json(self, *, mode: ValidationMode = ValidationMode.FULL) -> bytes:
        ensure_valid("TimeOfDay.to_json", time_violations(*self._fields(), mode=mode))
        return codec.quote_json(str(self))

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Self:
        try:
            text = codec.unquote_json(data)
        except codec.LayoutError as exc:
            raise ParseError("time", codec.document_text(data), str(exc)) from exc
        return cls.parse(text)

    def value(self, *, mode: ValidationMode = ValidationMode.FULL) -> str:
        ensure_valid("TimeOfDay.value", time_violations(*self._fields(), mode=mode))
        return str(self)

    @classmethod
    def scan(cls, value: object) -> Self:
        try:
            text = codec.driver_text(value, dt.time, codec.native_time_text)
        except codec.LayoutError as exc:
            raise ParseError("time", repr(value), str(exc)) from exc
        return cls.parse(text)

    def is_valid(self) -> bool:
        return not time_violations(*self._fields())

    def is_zero(self) -> bool:
        return self == type(self)()

    def to_time(self) -> dt.time:
        """Return the stdlib ``time``, truncating to microseconds."""

        return dt.time(
            self.hour, self.minute, self.second, self.nanosecond // _NANOS_PER_MICRO
        )

    def _fields(self) -> tuple[int, int, int, int]:
        return self.hour, self.minute, self.second, self.nanosecond


__all__ = ["TimeOfDay"]
