# tests/utils/test_formatters.py

"""
표시용 포맷팅 함수 단위 테스트입니다.
"""

import math
from datetime import date, datetime

import pytest

from bizdesk.utils import formatters


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (int(2.25 * 1024 ** 3), "2.25 GB"),
        (5 * 1024 ** 4, "5120 GB"),
        (math.nan, "NaN Bytes"),
        (math.inf, "Infinity Bytes"),
        (-math.inf, "-Infinity Bytes"),
    ],
)
def test_format_file_size(size, expected):
    assert formatters.format_file_size(size) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3.14", 3.14),
        ("42px", 42.0),
        ("  -7.5e2 apples", -750.0),
        (".5", 0.5),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (12, 12.0),
    ],
)
def test_parse_number(raw, expected):
    assert formatters.parse_number(raw) == expected


def test_parse_number_infinity():
    assert formatters.parse_number("Infinity") == math.inf
    assert formatters.parse_number("-Infinity and beyond") == -math.inf


def test_truncate():
    assert formatters.truncate("hello world", 5) == "hello..."
    assert formatters.truncate("hello", 5) == "hello"
    assert formatters.truncate("", 3) == ""


def test_capitalize():
    assert formatters.capitalize("") == ""
    assert formatters.capitalize("hELLO") == "Hello"
    assert formatters.capitalize("a") == "A"


def test_format_percentage_and_number():
    assert formatters.format_percentage(21) == "21.00%"
    assert formatters.format_percentage(9.456, 1) == "9.5%"
    assert formatters.format_number(3.14159) == "3.14"
    assert formatters.format_number(2, 0) == "2"


def test_format_percentage_and_number_non_finite():
    assert formatters.format_percentage(math.nan) == "NaN%"
    assert formatters.format_percentage(math.inf, 1) == "Infinity%"
    assert formatters.format_number(math.nan) == "NaN"
    assert formatters.format_number(-math.inf) == "-Infinity"


def test_format_currency_defaults_to_euro_in_dutch():
    formatted = formatters.format_currency(1234.5)

    assert "€" in formatted
    assert "1.234,50" in formatted


def test_format_currency_other_locale_and_string_amount():
    assert formatters.format_currency(1234.5, "USD", "en-US") == "$1,234.50"
    assert formatters.format_currency("99.9 EUR", "USD", "en-US") == "$99.90"
    assert formatters.format_currency("abc", "USD", "en-US") == "$0.00"


def test_format_date():
    assert formatters.format_date(date(2025, 3, 5)) == "Mar 5, 2025"
    assert formatters.format_date("2025-03-05T10:30:00Z") == "Mar 5, 2025"
    assert formatters.format_date("not a date") == "Invalid Date"


def test_format_date_unknown_locale_falls_back():
    assert formatters.format_date(date(2025, 3, 5), locale="xx-YY") == "Mar 5, 2025"


def test_format_datetime_contains_date_and_time():
    formatted = formatters.format_datetime(datetime(2025, 3, 5, 14, 7), locale="en-US", format="short")

    assert "3/5/25" in formatted
    assert "2:07" in formatted
    assert formatters.format_datetime("", locale="en-US") == "Invalid Date"
