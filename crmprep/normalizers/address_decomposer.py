"""
Address decomposition

Splits a single combined address cell into street, city, province and
postal code. This is a heuristic: there is no country awareness and no
postal-code validation.
"""

import re
from dataclasses import dataclass

_SEPARATORS = re.compile(r'[,\n]')


@dataclass
class AddressParts:
    street: str = ""
    city: str = ""
    province: str = ""
    postal_code: str = ""


def decompose_address(text: str) -> AddressParts:
    """
    Decompose a combined address.

    Strategy 1: split on commas/newlines. Three or more parts are assigned
    positionally (street, city, province, postal code if present).

    Strategy 2: otherwise split on whitespace and assign from the tail:
    last token = postal code, then province, then city, rest = street.

    Examples:
        >>> decompose_address("123 Main St, Springfield, ON, A1B2C3")
        AddressParts(street="123 Main St", city="Springfield", province="ON", postal_code="A1B2C3")

        >>> decompose_address("123 Main St Springfield ON A1B2C3")
        AddressParts(street="123 Main St", city="Springfield", province="ON", postal_code="A1B2C3")
    """
    if not text or not text.strip():
        return AddressParts()

    parts = [part.strip() for part in _SEPARATORS.split(text)]

    if len(parts) >= 3:
        return AddressParts(
            street=parts[0],
            city=parts[1],
            province=parts[2],
            postal_code=parts[3] if len(parts) > 3 else '',
        )

    tokens = text.split()
    postal_code = tokens.pop() if tokens else ''
    province = tokens.pop() if tokens else ''
    city = tokens.pop() if tokens else ''

    return AddressParts(
        street=' '.join(tokens),
        city=city,
        province=province,
        postal_code=postal_code,
    )
