"""
Row mapper

Maps raw spreadsheet rows (header -> value) onto ContactRecord using a
MappingProfile. Every row yields exactly one record; field-level problems
degrade to raw or empty values instead of failing the row.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from core.models import ContactRecord
from ..normalizers import (
    decompose_address,
    join_and_split,
    normalize_date,
    split_name,
    to_text,
    validate_stage,
)
from .passthrough import collect_extras
from .profiles import MappingProfile, TARGET_FIELDS, get_profile
from .strategies import pick_header

logger = logging.getLogger(__name__)

# Dedicated location columns; when any is present the address cell is street only
LOCATION_FIELDS = ('city', 'province', 'postal_code')


class RowMapper:
    """
    Map raw rows to contact records.

    Example:
        mapper = RowMapper(get_profile('keyword'))
        records = mapper.map_rows(rows)
    """

    def __init__(
        self,
        profile: Optional[MappingProfile] = None,
        overrides: Optional[Mapping[str, Optional[str]]] = None
    ):
        """
        Initialize row mapper.

        Args:
            profile: Mapping profile (default: keyword profile)
            overrides: Optional {target field: header or None} chosen by the user
        """
        profile = profile or get_profile()
        if overrides:
            profile = profile.with_overrides(overrides)
        self.profile = profile
        # Strategy results depend only on the header sequence
        self._detected: Dict[tuple, Dict[str, Optional[str]]] = {}

    def detect(self, headers: Sequence[str]) -> Dict[str, Optional[str]]:
        """
        Work out which source header feeds each target field.

        Args:
            headers: Header names in column order

        Returns:
            Dict of {target field: header or None}
        """
        key = tuple(headers)
        if key not in self._detected:
            self._detected[key] = {
                target: pick_header(self.profile.strategies_for(target), key)
                for target in TARGET_FIELDS
            }
        return self._detected[key]

    def used_fields(self, headers: Sequence[str]) -> List[str]:
        """
        Target fields whose detected column actually feeds the record.

        A full-name column is ignored when first/last columns exist.
        """
        columns = self.detect(headers)
        split_columns = columns['first_name'] is not None or columns['last_name'] is not None

        used = []
        for target in TARGET_FIELDS:
            if columns[target] is None:
                continue
            if target == 'full_name' and split_columns:
                continue
            used.append(target)
        return used

    def consumed_headers(self, headers: Sequence[str]) -> List[str]:
        """Headers whose values end up in a known record field."""
        columns = self.detect(headers)
        consumed = []
        for target in self.used_fields(headers):
            if columns[target] not in consumed:
                consumed.append(columns[target])
        return consumed

    def map_row(self, row: Dict[str, Any]) -> ContactRecord:
        """Map a single raw row."""
        columns = self.detect(list(row.keys()))

        def value(target: str) -> Any:
            header = columns.get(target)
            return row.get(header, '') if header is not None else ''

        def text(target: str) -> str:
            return to_text(value(target))

        # Name: separate first/last columns, else a full-name column
        if columns['first_name'] is not None or columns['last_name'] is not None:
            first_name, last_name = join_and_split(text('first_name'), text('last_name'))
        else:
            first_name, last_name = split_name(text('full_name'))

        # Address: decompose only when the sheet has no dedicated location columns
        address_text = text('address')
        if any(columns[target] is not None for target in LOCATION_FIELDS):
            street, city, province, postal_code = (
                address_text, text('city'), text('province'), text('postal_code')
            )
        else:
            parts = decompose_address(address_text)
            street, city, province, postal_code = (
                parts.street, parts.city, parts.province, parts.postal_code
            )

        record = ContactRecord(
            first_name=first_name,
            last_name=last_name,
            email=text('email'),
            phone=text('phone'),
            address=street,
            city=city,
            province=province,
            postal_code=postal_code,
            date_of_birth=normalize_date(value('date_of_birth')),
            borrower_stage=validate_stage(value('borrower_stage')),
            partner_type=text('partner_type'),
            lead_source=text('lead_source'),
            campaign=text('campaign'),
        )

        consumed = self.consumed_headers(list(row.keys()))
        record.extra = collect_extras(row, consumed, self.profile.passthrough)

        return record

    def map_rows(self, rows: Iterable[Dict[str, Any]]) -> List[ContactRecord]:
        """Map rows in order, one record per row."""
        records = [self.map_row(row) for row in rows]
        logger.debug("Mapped %d rows with profile '%s'", len(records), self.profile.name)
        return records

    def get_mapping_summary(self, headers: Sequence[str]) -> Dict[str, str]:
        """
        Get a summary of the detected mapping.

        Returns:
            Dict of {target_field: source_header} for fields that feed the record
        """
        columns = self.detect(headers)
        return {target: columns[target] for target in self.used_fields(headers)}

    def get_unmapped_headers(self, headers: Sequence[str]) -> List[str]:
        """Headers no target field uses."""
        used = set(self.consumed_headers(headers))
        return [header for header in headers if header not in used]
