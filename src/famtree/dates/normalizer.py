# src/famtree/dates/normalizer.py

from __future__ import annotations

import re
from datetime import date as Date, timedelta
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Spreadsheet serial dates
# ---------------------------------------------------------------------------

# Day 0 of the spreadsheet calendar. Serial 1 is 1900-01-01.
SPREADSHEET_EPOCH = Date(1899, 12, 30)

# Serial 60 is the 1900-02-29 that never existed; spreadsheets count it anyway.
FICTITIOUS_LEAP_SERIAL = 60
FICTITIOUS_LEAP_DAY = "1900-02-29"

# Anything below this is a bare year, anything at or above a day-count.
SERIAL_THRESHOLD = 10000

YEAR_AT_START = re.compile(r"^(\d{4})")
YEAR_ANYWHERE = re.compile(r"\b(\d{4})\b")

RANGE_MARKERS = ("–", "-")
BIRTH_MARKER = "*"
DEATH_MARKER = "†"


def _as_number(raw: Any) -> Optional[float]:
    """Parse ``raw`` as a number, or None when it is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    try:
        return float(str(raw).strip())
    except ValueError:
        return None


def serial_to_iso(serial: float) -> str:
    """
    Convert a spreadsheet day-count into ``YYYY-MM-DD``.

    Reproduces the spreadsheet leap-year error: serials from 60 on are shifted
    one day earlier than a true day-count from the epoch would be.
    """
    days = int(serial)
    if days == FICTITIOUS_LEAP_SERIAL:
        return FICTITIOUS_LEAP_DAY

    offset = days if days >= FICTITIOUS_LEAP_SERIAL else days + 1
    return (SPREADSHEET_EPOCH + timedelta(days=offset)).isoformat()


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def normalize_date(raw: Any) -> str:
    """
    Decode a record's date field into a canonical string.

        None / '' / 0 / negative   -> ''
        1485, '1485'               -> '1485'        (bare year)
        44000                      -> '2020-06-18'  (spreadsheet day-count)
        '27.05.1970'               -> '27.05.1970'  (free text passes through)
    """
    if raw is None or isinstance(raw, bool):
        return ""
    if isinstance(raw, str) and not raw.strip():
        return ""

    number = _as_number(raw)
    if number is None:
        return str(raw).strip()
    if number != number or number <= 0:
        # NaN or non-positive
        return ""

    if number < SERIAL_THRESHOLD:
        return str(int(number))

    try:
        return serial_to_iso(number)
    except (OverflowError, ValueError):
        return str(raw).strip() if isinstance(raw, str) else str(raw)


def extract_year(date_str: Optional[str]) -> str:
    """
    Return the year part of a normalized date.

    A leading 4-digit run wins ('1970-05-27' -> '1970'); otherwise any
    embedded 4-digit run ('ca. 1850' -> '1850'); otherwise the input as-is.
    """
    if not date_str:
        return ""
    s = str(date_str).strip()

    m = YEAR_AT_START.match(s)
    if m:
        return m.group(1)

    m = YEAR_ANYWHERE.search(s)
    if m:
        return m.group(1)

    return s


def year_of(date_str: Optional[str]) -> Optional[int]:
    """Integer year of a normalized date, or None when none can be found."""
    year = extract_year(date_str)
    if len(year) == 4 and year.isdigit():
        return int(year)
    return None


def format_partner_span(raw: Optional[str]) -> str:
    """
    Shorten a partner's free-text birth/death note to years.

        '*27.05.1970' -> '*1970'
        '†2019'       -> '†2019'
        '1887–1918'   -> '1887–1918'
        'unbekannt'   -> 'unbekannt'
    """
    if not raw:
        return ""
    text = str(raw)

    years = YEAR_ANYWHERE.findall(text)
    if not years:
        return text

    if any(marker in text for marker in RANGE_MARKERS) and len(years) >= 2:
        return f"{years[0]}–{years[-1]}"
    if BIRTH_MARKER in text:
        return f"{BIRTH_MARKER}{years[0]}"
    if DEATH_MARKER in text:
        return f"{DEATH_MARKER}{years[0]}"
    return years[0]
