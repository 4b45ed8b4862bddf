"""
Basic field normalization

Turns spreadsheet scalars into text:
- None / NaN / NaT -> empty string
- Integral floats lose their ".0" (phone numbers stored as numbers)
- Dates -> ISO text
- Strings trimmed
"""

from datetime import date, datetime
from typing import Any

import pandas as pd


def to_text(value: Any) -> str:
    """
    Convert a single cell value to text.

    Args:
        value: Raw cell value from a loader

    Returns:
        Text form of the value ('' for missing cells)

    Examples:
        >>> to_text(6135550123.0)
        "6135550123"

        >>> to_text("  Jane  ")
        "Jane"
    """
    if value is None:
        return ''

    if isinstance(value, str):
        return value.strip()

    if isinstance(value, bool):
        return str(value)

    try:
        if pd.isna(value):
            return ''
    except (TypeError, ValueError):
        # Containers are not scalars; fall through to str()
        pass

    if isinstance(value, float) and value.is_integer():
        return str(int(value))

    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat(sep=' ')

    if isinstance(value, date):
        return value.isoformat()

    return str(value).strip()


def is_blank(value: Any) -> bool:
    """True when the value is empty after conversion and trimming."""
    return to_text(value) == ''
