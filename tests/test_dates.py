# tests/test_dates.py

from __future__ import annotations

import pytest

from famtree.dates.normalizer import (
    extract_year,
    format_partner_span,
    normalize_date,
    serial_to_iso,
    year_of,
)


@pytest.mark.parametrize("raw", [None, "", "   ", 0, "0", -5, -0.5, False])
def test_empty_and_non_positive_dates_are_blank(raw):
    assert normalize_date(raw) == ""


def test_bare_year():
    assert normalize_date(1485) == "1485"
    assert normalize_date("1515") == "1515"
    assert normalize_date(1899.0) == "1899"


def test_year_fraction_is_truncated():
    assert normalize_date(1485.9) == "1485"


def test_serial_day_counts_before_the_leap_bug():
    assert serial_to_iso(1) == "1900-01-01"
    assert serial_to_iso(59) == "1900-02-28"


def test_fictitious_leap_day_is_kept():
    assert serial_to_iso(60) == "1900-02-29"
    assert serial_to_iso(61) == "1900-03-01"


def test_small_numbers_are_years_not_day_counts():
    assert normalize_date(1) == "1"
    assert normalize_date(60) == "60"
    assert normalize_date(61) == "61"


def test_serial_date_above_threshold():
    # 44000 is 2020-06-18 in spreadsheet tools
    assert normalize_date(44000) == "2020-06-18"
    assert normalize_date("25715") == "1970-05-27"


def test_serial_to_iso_matches_spreadsheet_calendar():
    assert serial_to_iso(10000) == "1927-05-18"
    assert serial_to_iso(36526) == "2000-01-01"


def test_serial_overflow_passes_through():
    assert normalize_date(10 ** 12) == str(10 ** 12)


def test_free_text_passes_through():
    assert normalize_date("27.05.1970") == "27.05.1970"
    assert normalize_date("ca. 1850") == "ca. 1850"


def test_extract_year_prefers_leading_year():
    assert extract_year("1970-05-27") == "1970"
    assert extract_year("1485") == "1485"


def test_extract_year_finds_embedded_year():
    assert extract_year("27.05.1970") == "1970"
    assert extract_year("ca. 1850") == "1850"


def test_extract_year_without_year_returns_input():
    assert extract_year("unbekannt") == "unbekannt"
    assert extract_year("") == ""
    assert extract_year(None) == ""


def test_year_of():
    assert year_of("1902-03-01") == 1902
    assert year_of("um 1750") == 1750
    assert year_of("unbekannt") is None
    assert year_of("") is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("*1954", "*1954"),
        ("†2019", "†2019"),
        ("1887–1918", "1887–1918"),
        ("1887-1918", "1887–1918"),
        ("*27.05.1970", "*1970"),
        ("* 1901 † 1975", "*1901"),
        ("no-year-text", "no-year-text"),
        ("geboren 1930", "1930"),
        ("", ""),
    ],
)
def test_format_partner_span(raw, expected):
    assert format_partner_span(raw) == expected


def test_format_partner_span_single_year_with_hyphen_is_not_a_range():
    assert format_partner_span("*27-05-1970") == "*1970"
