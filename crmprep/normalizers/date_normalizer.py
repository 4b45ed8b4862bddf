"""
Date of birth normalization

Emits ISO dates (YYYY-MM-DD). Anything that will not parse is returned
as-is so a bad cell never blocks the row.
"""

from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser

from .field_normalizer import to_text

# Fills in parts missing from partial dates ("May 2020" -> 2020-05-01)
_DEFAULT_DATE = datetime(1970, 1, 1)


def _is_number(text: str) -> bool:
    return text.lstrip('+-').replace('.', '', 1).isdigit()


def normalize_date(value: Any) -> str:
    """
    Normalize a date cell to ``YYYY-MM-DD``.

    Args:
        value: Cell value (date, datetime, or text)

    Returns:
        ISO date, the original text if unparseable, or '' if empty

    Examples:
        >>> normalize_date("May 14, 1990")
        "1990-05-14"

        >>> normalize_date("not a date")
        "not a date"
    """
    text = to_text(value)
    if not text:
        return ''

    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    # Bare numbers are ambiguous (serials, years, ids); keep them verbatim
    # whether they arrive as numbers (.xlsx) or as text (.csv)
    if not isinstance(value, str) or _is_number(text):
        return text

    try:
        parsed = date_parser.parse(text, default=_DEFAULT_DATE)
    except (ValueError, OverflowError):
        return text

    return parsed.date().isoformat()
