"""
CRM Prep Data Models
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Literal


BorrowerStage = Literal['Active Lead', 'Business Partner Only', 'Prospect', 'Client']

VALID_STAGES: List[str] = ['Active Lead', 'Business Partner Only', 'Prospect', 'Client']
DEFAULT_STAGE: BorrowerStage = 'Prospect'

OUTPUT_FILENAME = 'formatted_contacts.csv'
SHEET_NAME = 'Formatted Data'

# Record attribute -> export column, in export order
FIELD_COLUMNS: Dict[str, str] = {
    'first_name': 'FirstName',
    'last_name': 'LastName',
    'email': 'Email',
    'phone': 'Phone',
    'address': 'Address',
    'city': 'City',
    'province': 'Province',
    'postal_code': 'PostalCode',
    'date_of_birth': 'DateOfBirth',
    'borrower_stage': 'BorrowerStage.Name',
    'partner_type': 'PartnerType.Name',
    'lead_source': 'LeadSource',
    'campaign': 'Campaign',
}

EXPORT_COLUMNS: List[str] = list(FIELD_COLUMNS.values())

_COLUMN_FIELDS = {column: name for name, column in FIELD_COLUMNS.items()}


@dataclass
class ContactRecord:
    """One normalized contact. Unmapped source columns live in ``extra``."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    province: str = ""
    postal_code: str = ""
    date_of_birth: str = ""
    borrower_stage: BorrowerStage = DEFAULT_STAGE
    partner_type: str = ""
    lead_source: str = ""
    campaign: str = ""

    # Extension area, keyed by original header text
    extra: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.borrower_stage not in VALID_STAGES:
            self.borrower_stage = DEFAULT_STAGE

    def to_dict(self) -> Dict[str, str]:
        """Export shape: fixed columns first, then extension columns."""
        row = {column: getattr(self, name) for name, column in FIELD_COLUMNS.items()}
        for header, value in self.extra.items():
            row.setdefault(header, value)
        return row

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContactRecord':
        """
        Rebuild a record from the export shape.

        Accepts export column names or attribute names. Keys that match
        neither go to ``extra``. An invalid stage falls back to the default.
        """
        known = {f.name for f in fields(cls)} - {'extra'}
        values: Dict[str, str] = {}
        extra: Dict[str, str] = {}

        for key, value in data.items():
            text = '' if value is None else str(value)
            if key in _COLUMN_FIELDS:
                values[_COLUMN_FIELDS[key]] = text
            elif key in known:
                values[key] = text
            elif key == 'extra' and isinstance(value, dict):
                extra.update({str(k): '' if v is None else str(v) for k, v in value.items()})
            else:
                extra[key] = text

        return cls(**values, extra=extra)
