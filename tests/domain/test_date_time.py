from __future__ import annotations

import datetime as dt

import pytest

from civiltime import (
    CivilValue,
    Date,
    DateTime,
    ParseError,
    RangeError,
    TimeOfDay,
    ValidationMode,
)

LEAP_DAY_READING = DateTime(Date(2020, 2, 29), TimeOfDay(3, 42, 31, 876))


def test_datetime_to_json_joins_date_and_time() -> None:
    assert LEAP_DAY_READING.to_json() == b'"2020-02-29T03:42:31.000000876"'


def test_datetime_to_json_rejects_year_out_of_range() -> None:
    with pytest.raises(RangeError) as exc:
        DateTime(Date(-1, 1, 1), TimeOfDay()).to_json()

    assert str(exc.value) == "DateTime.to_json: year '-1' outside of range [0,9999]"


def test_datetime_to_json_enumerates_date_and_time_violations() -> None:
    value = DateTime(Date(2021, 2, 29), TimeOfDay(24, 0, 0, 0))

    with pytest.raises(RangeError) as exc:
        value.to_json()

    assert [violation.field for violation in exc.value.violations] == ["day", "hour"]
    assert value.to_json(mode=ValidationMode.YEAR_ONLY) == b'"2021-02-29T24:00:00.000000000"'


def test_datetime_from_json_reads_combined_string() -> None:
    assert DateTime.from_json(b'"2020-02-29T03:42:31.000000876"') == LEAP_DAY_READING


def test_datetime_from_json_rejects_short_year() -> None:
    with pytest.raises(ParseError) as exc:
        DateTime.from_json(b'"0-02-29T03:42:31.000000876"')

    assert str(exc.value) == (
        'invalid datetime: parsing time "0-02-29T03:42:31.000000876" as '
        '"YYYY-MM-DDTHH:MM:SS.fffffffff": '
        'cannot parse "0-02-29T03:42:31.000000876" as "YYYY"'
    )
    assert exc.value.kind == "datetime"


@pytest.mark.parametrize(
    ("text", "detail"),
    [
        ("2020-02-29 03:42:31.000000876", 'cannot parse " 03:42:31.000000876" as "T"'),
        ("2020-02-29", 'cannot parse "" as "T"'),
        ("2020-02-30T03:42:31.000000876", "day out of range"),
        ("2020-02-29T24:00:00.000000000", "hour out of range"),
        ("2020-02-29T03:42:31.000000876Z", 'extra text: "Z"'),
    ],
)
def test_datetime_parse_rejects_malformed_text(text: str, detail: str) -> None:
    with pytest.raises(ParseError) as exc:
        DateTime.parse(text)

    assert str(exc.value).startswith("invalid datetime: ")
    assert detail in str(exc.value)


def test_datetime_parse_accepts_lowercase_separator() -> None:
    assert DateTime.parse("2020-02-29t03:42:31.000000876") == LEAP_DAY_READING


def test_datetime_value_and_scan_are_symmetric() -> None:
    assert LEAP_DAY_READING.value() == "2020-02-29T03:42:31.000000876"
    assert DateTime.scan("2020-02-29T03:42:31.000000876") == LEAP_DAY_READING
    assert DateTime.scan(b"2020-02-29T03:42:31.000000876") == LEAP_DAY_READING


def test_datetime_scan_reads_wall_clock_of_stdlib_datetime() -> None:
    aware = dt.datetime(2020, 2, 29, 3, 42, 31, 1, tzinfo=dt.timezone(dt.timedelta(hours=5)))

    assert DateTime.scan(aware) == DateTime(Date(2020, 2, 29), TimeOfDay(3, 42, 31, 1_000))


def test_datetime_scan_surfaces_decode_failures() -> None:
    with pytest.raises(ParseError, match="invalid datetime"):
        DateTime.scan("2020-02-29")

    with pytest.raises(ParseError, match="unsupported driver value of type date"):
        DateTime.scan(dt.date(2020, 2, 29))


def test_datetime_value_validates_every_field() -> None:
    with pytest.raises(RangeError, match=r"^DateTime\.value: minute '60'"):
        DateTime(Date(2020, 1, 1), TimeOfDay(0, 60, 0, 0)).value()


def test_datetime_equality_is_structural() -> None:
    decoded = DateTime.from_json(b'"2021-03-01T00:00:00.000000000"')
    built = DateTime(Date(2020, 2, 29).add_years(1))

    assert decoded == built
    assert hash(decoded) == hash(built)


def test_datetime_ordering_compares_date_before_time() -> None:
    late_evening = DateTime(Date(2020, 1, 1), TimeOfDay(23, 59, 59, 999_999_999))
    next_midnight = DateTime(Date(2020, 1, 2))

    assert late_evening < next_midnight
    assert max(late_evening, next_midnight) is next_midnight


def test_datetime_zero_value_and_validity() -> None:
    assert DateTime().is_zero()
    assert not DateTime().is_valid()
    assert LEAP_DAY_READING.is_valid()
    assert not DateTime(Date(2020, 2, 29), TimeOfDay(0, 0, 60, 0)).is_valid()


def test_datetime_converts_to_and_from_stdlib() -> None:
    native = dt.datetime(2020, 2, 29, 3, 42, 31, 876)

    assert DateTime.of(native) == DateTime(Date(2020, 2, 29), TimeOfDay(3, 42, 31, 876_000))
    assert DateTime.of(native).to_datetime() == native
    assert LEAP_DAY_READING.to_datetime() == dt.datetime(2020, 2, 29, 3, 42, 31, 0)


def test_datetime_satisfies_civil_value_protocol() -> None:
    assert isinstance(DateTime(), CivilValue)


def test_datetime_from_json_failure_keeps_decoded_document_text() -> None:
    with pytest.raises(ParseError) as exc:
        DateTime.from_json(b'"2020-02-29T03:42')

    assert exc.value.text == '"2020-02-29T03:42'


def test_datetime_value_year_only_mode_skips_clock_checks() -> None:
    value = DateTime(Date(2020, 1, 1), TimeOfDay(24, 0, 0, 0))

    assert value.value(mode=ValidationMode.YEAR_ONLY) == "2020-01-01T24:00:00.000000000"
