"""
Name splitting utility

Splits full names into first/last names on the first whitespace boundary.
"""

from typing import Tuple


def split_name(full_name: str) -> Tuple[str, str]:
    """
    Split a full name into first and last name.

    - First word = first name
    - Everything after the first whitespace run = last name
    - A single word is all first name

    Args:
        full_name: Full name string (e.g., "John Doe" or "Jane Mary Smith")

    Returns:
        Tuple of (first_name, last_name)

    Examples:
        >>> split_name("John Doe")
        ("John", "Doe")

        >>> split_name("Jane Mary Smith")
        ("Jane", "Mary Smith")

        >>> split_name("Madonna")
        ("Madonna", "")
    """
    if not full_name or not isinstance(full_name, str):
        return ('', '')

    parts = full_name.strip().split(None, 1)

    if not parts:
        return ('', '')

    if len(parts) == 1:
        return (parts[0], '')

    return (parts[0], parts[1].strip())


def join_and_split(first_name: str, last_name: str) -> Tuple[str, str]:
    """
    Combine separately mapped first/last columns, then re-split.

    Handles sheets where the "first name" column holds a full name
    ("Jane Doe" / "") as well as clean splits ("Jane" / "Doe").
    """
    combined = ' '.join(part for part in (first_name or '', last_name or '') if part.strip())
    return split_name(combined)
