from .normalizer import (
    extract_year,
    format_partner_span,
    normalize_date,
    serial_to_iso,
    year_of,
)

__all__ = [
    "extract_year",
    "format_partner_span",
    "normalize_date",
    "serial_to_iso",
    "year_of",
]
