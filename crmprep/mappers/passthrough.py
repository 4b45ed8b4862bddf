"""
Unmapped-column passthrough

Copies source columns the mapper did not use into the record's
extension area so nothing in the sheet is silently dropped.
"""

from typing import Any, Dict, Iterable, Literal

from core.errors import MappingError
from core.models import EXPORT_COLUMNS
from ..normalizers import is_blank, to_text

PassthroughMode = Literal['off', 'permissive', 'strict']

PASSTHROUGH_MODES = ('off', 'permissive', 'strict')


def check_mode(mode: str) -> str:
    if mode not in PASSTHROUGH_MODES:
        raise MappingError(
            f"Unknown passthrough mode '{mode}' (expected one of: {', '.join(PASSTHROUGH_MODES)})"
        )
    return mode


def collect_extras(
    row: Dict[str, Any],
    consumed: Iterable[str],
    mode: str = 'permissive'
) -> Dict[str, str]:
    """
    Collect unmapped columns from a row.

    Args:
        row: Raw row (header -> value)
        consumed: Headers already used for known fields
        mode: 'off' (collect nothing), 'permissive' (keep everything),
              'strict' (skip values that are empty after trimming)

    Returns:
        Dict of {original header: text value}
    """
    check_mode(mode)
    if mode == 'off':
        return {}

    skip = set(consumed) | set(EXPORT_COLUMNS)
    extras: Dict[str, str] = {}

    for header, value in row.items():
        if header in skip:
            continue
        if mode == 'strict' and is_blank(value):
            continue
        extras[header] = to_text(value)

    return extras
