"""Shared text codec helpers: fixed-width layout parsing and canonical formatting."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeAlias

from civiltime.domain import gregorian

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Callable, Mapping

NANOS_DIGITS: Final[int] = 9

DATE_LAYOUT_TEXT: Final[str] = "YYYY-MM-DD"
TIME_LAYOUT_TEXT: Final[str] = "HH:MM:SS.fffffffff"
DATETIME_LAYOUT_TEXT: Final[str] = f"{DATE_LAYOUT_TEXT}T{TIME_LAYOUT_TEXT}"


class LayoutError(Exception):
    """Low-level diagnostic raised by :func:`parse_layout`."""


@dataclass(frozen=True, slots=True)
class DigitField:
    name: str
    label: str
    width: int


@dataclass(frozen=True, slots=True)
class Separator:
    text: str
    alternatives: str = ""

    def matches(self, char: str) -> bool:
        return char == self.text or char in self.alternatives


@dataclass(frozen=True, slots=True)
class Fraction:
    """Optional ``.`` followed by one to nine digits, read as nanoseconds."""

    name: str = "nanosecond"
    label: str = ".fffffffff"


LayoutElement: TypeAlias = DigitField | Separator | Fraction

DATE_LAYOUT: Final[tuple[LayoutElement, ...]] = (
    DigitField("year", "YYYY", 4),
    Separator("-"),
    DigitField("month", "MM", 2),
    Separator("-"),
    DigitField("day", "DD", 2),
)

TIME_LAYOUT: Final[tuple[LayoutElement, ...]] = (
    DigitField("hour", "HH", 2),
    Separator(":"),
    DigitField("minute", "MM", 2),
    Separator(":"),
    DigitField("second", "SS", 2),
    Fraction(),
)

DATETIME_LAYOUT: Final[tuple[LayoutElement, ...]] = (
    *DATE_LAYOUT,
    Separator("T", alternatives="t"),
    *TIME_LAYOUT,
)

_TIME_BOUNDS: Final[Mapping[str, int]] = {"hour": 23, "minute": 59, "second": 59}


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _read_fraction(rest: str) -> tuple[int, str]:
    if len(rest) < 2 or rest[0] != "." or not _is_ascii_digits(rest[1]):
        return 0, rest
    end = 1
    while end < len(rest) and _is_ascii_digits(rest[end]):
        end += 1
    digits = rest[1:end]
    if len(digits) > NANOS_DIGITS:
        raise LayoutError(f'fractional second "{digits}" has more than {NANOS_DIGITS} digits')
    return int(digits.ljust(NANOS_DIGITS, "0")), rest[end:]


def parse_layout(text: str, layout: tuple[LayoutElement, ...], layout_text: str) -> dict[str, int]:
    """Match ``text`` against ``layout`` and return the parsed integer fields.

    Calendar and clock ranges are checked after the whole text has matched, so a
    structural mismatch is always reported before an out-of-range field.

    Raises:
        LayoutError: describing the layout element or field that failed.
    """

    fields: dict[str, int] = {}
    rest = text
    prefix = f'parsing time "{text}" as "{layout_text}"'
    for element in layout:
        match element:
            case DigitField(name=name, label=label, width=width):
                chunk = rest[:width]
                if len(chunk) != width or not _is_ascii_digits(chunk):
                    raise LayoutError(f'{prefix}: cannot parse "{rest}" as "{label}"')
                fields[name] = int(chunk)
                rest = rest[width:]
            case Separator(text=literal):
                if not rest or not element.matches(rest[0]):
                    raise LayoutError(f'{prefix}: cannot parse "{rest}" as "{literal}"')
                rest = rest[1:]
            case Fraction(name=name):
                try:
                    fields[name], rest = _read_fraction(rest)
                except LayoutError as exc:
                    raise LayoutError(f"{prefix}: {exc}") from exc
    if rest:
        raise LayoutError(f'parsing time "{text}": extra text: "{rest}"')
    _check_ranges(text, fields)
    return fields


def _check_ranges(text: str, fields: Mapping[str, int]) -> None:
    if "month" in fields:
        month = fields["month"]
        if not 1 <= month <= gregorian.MONTHS_PER_YEAR:
            raise LayoutError(f'parsing time "{text}": month out of range')
        day = fields["day"]
        if not 1 <= day <= gregorian.days_in_month(fields["year"], month):
            raise LayoutError(f'parsing time "{text}": day out of range')
    for name, upper in _TIME_BOUNDS.items():
        if name in fields and fields[name] > upper:
            raise LayoutError(f'parsing time "{text}": {name} out of range')


def format_date(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_time(hour: int, minute: int, second: int, nanosecond: int) -> str:
    return f"{hour:02d}:{minute:02d}:{second:02d}.{nanosecond:09d}"


def quote_json(text: str) -> bytes:
    """Render canonical text as a JSON string document."""

    return json.dumps(text).encode("ascii")


def unquote_json(data: bytes | bytearray | str) -> str:
    """Return the string carried by a JSON string document.

    Raises:
        LayoutError: if ``data`` is not valid JSON or is not a JSON string.
    """

    try:
        loaded = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LayoutError(f"malformed JSON document {data!r}: {exc}") from exc
    if not isinstance(loaded, str):
        raise LayoutError(f"expected a JSON string, got {type(loaded).__name__}")
    return loaded


def document_text(data: bytes | bytearray | str) -> str:
    """Return a JSON document as text for diagnostics, whatever type it arrived as."""

    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="replace")


def driver_text(value: object, native: type, render: Callable[[Any], str]) -> str:
    """Coerce a database driver scalar to canonical text.

    ``native`` is the ``datetime`` stdlib type a driver may hand back for the column
    and ``render`` turns such an object into canonical text.

    Raises:
        LayoutError: for values that are neither text nor a supported native type.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("ascii")
        except UnicodeDecodeError as exc:
            raise LayoutError(f"driver value {bytes(value)!r} is not ASCII text") from exc
    if isinstance(value, native):
        return render(value)
    raise LayoutError(f"unsupported driver value of type {type(value).__name__}")


def native_date_text(value: dt.date) -> str:
    return format_date(value.year, value.month, value.day)


def native_time_text(value: dt.time) -> str:
    return format_time(value.hour, value.minute, value.second, value.microsecond * 1000)


def native_datetime_text(value: dt.datetime) -> str:
    return f"{native_date_text(value.date())}T{native_time_text(value.time())}"


__all__ = [
    "DATETIME_LAYOUT",
    "DATETIME_LAYOUT_TEXT",
    "DATE_LAYOUT",
    "DATE_LAYOUT_TEXT",
    "TIME_LAYOUT",
    "TIME_LAYOUT_TEXT",
    "LayoutError",
    "document_text",
    "driver_text",
    "format_date",
    "format_time",
    "native_date_text",
    "native_datetime_text",
    "native_time_text",
    "parse_layout",
    "quote_json",
    "unquote_json",
]
