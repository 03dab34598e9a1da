from __future__ import annotations

import datetime as dt

import pytest

from civiltime.domain import codec


def test_parse_layout_returns_integer_fields() -> None:
    fields = codec.parse_layout(
        "2020-02-29T03:42:31.000000876", codec.DATETIME_LAYOUT, codec.DATETIME_LAYOUT_TEXT
    )

    assert fields == {
        "year": 2020,
        "month": 2,
        "day": 29,
        "hour": 3,
        "minute": 42,
        "second": 31,
        "nanosecond": 876,
    }


def test_parse_layout_rejects_non_ascii_digits() -> None:
    with pytest.raises(codec.LayoutError, match='as "YYYY"'):
        codec.parse_layout("２０２０-02-29", codec.DATE_LAYOUT, codec.DATE_LAYOUT_TEXT)


def test_parse_layout_reports_structure_before_range() -> None:
    with pytest.raises(codec.LayoutError, match="extra text"):
        codec.parse_layout("2020-13-01x", codec.DATE_LAYOUT, codec.DATE_LAYOUT_TEXT)


def test_formatters_zero_pad_fields() -> None:
    assert codec.format_date(33, 4, 5) == "0033-04-05"
    assert codec.format_time(1, 2, 3, 4) == "01:02:03.000000004"


def test_json_quoting_round_trip() -> None:
    assert codec.quote_json("2020-02-29") == b'"2020-02-29"'
    assert codec.unquote_json(b'"2020-02-29"') == "2020-02-29"


def test_unquote_json_rejects_non_strings() -> None:
    with pytest.raises(codec.LayoutError, match="expected a JSON string, got list"):
        codec.unquote_json(b'["2020-02-29"]')


def test_driver_text_coerces_supported_values() -> None:
    def render(value: dt.date) -> str:
        return codec.native_date_text(value)

    assert codec.driver_text("x", dt.date, render) == "x"
    assert codec.driver_text(memoryview(b"2020-02-29"), dt.date, render) == "2020-02-29"
    assert codec.driver_text(dt.date(2020, 2, 29), dt.date, render) == "2020-02-29"


def test_driver_text_rejects_non_ascii_bytes() -> None:
    with pytest.raises(codec.LayoutError, match="not ASCII text"):
        codec.driver_text("é".encode(), dt.date, codec.native_date_text)


def test_native_datetime_text_keeps_wall_clock() -> None:
    value = dt.datetime(2020, 2, 29, 3, 42, 31, 876)

    assert codec.native_datetime_text(value) == "2020-02-29T03:42:31.000876000"


def test_document_text_decodes_binary_documents() -> None:
    assert codec.document_text(b'"2020-02-29') == '"2020-02-29'
    assert codec.document_text(bytearray(b"null")) == "null"
    assert codec.document_text('"x"') == '"x"'
    assert codec.document_text(b"\xff") == "�"
