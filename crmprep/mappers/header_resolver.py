"""
Header resolver

Ranked keyword matching over arbitrary spreadsheet headers. Keywords are
tried in rank order; for each keyword, headers are scanned in column order
and the first header containing the keyword (case-insensitive) wins.

Matching is by substring, so "Home Phone Number" matches "phone" and so
does "Phone Extension".
"""

from typing import Any, Dict, Iterable, Optional, Sequence, Tuple


def find_header(headers: Iterable[str], keywords: Sequence[str]) -> Optional[str]:
    """
    Find the first header matching any keyword.

    Args:
        headers: Header names in column order
        keywords: Keywords in priority order

    Returns:
        Matching header, or None
    """
    headers = list(headers)
    lowered = [(header, str(header).lower()) for header in headers]

    for keyword in keywords:
        needle = keyword.lower()
        for header, text in lowered:
            if needle in text:
                return header

    return None


def resolve(row: Dict[str, Any], keywords: Sequence[str]) -> Tuple[Optional[str], Any]:
    """
    Resolve a value from a row by keyword.

    Returns:
        (header, value) for the match, or (None, '') when nothing matches
    """
    header = find_header(row.keys(), keywords)
    if header is None:
        return None, ''
    return header, row[header]
