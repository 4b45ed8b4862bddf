"""
Mapping profiles

A profile is the full precedence configuration for one kind of sheet:
for each target field, the ordered strategies that pick its column, plus
the passthrough mode for unmapped columns.

Built-in profiles:
- positional: name, date of birth, phone and email by column position
  (1st-4th); everything else by exact header. No passthrough.
- keyword: exact header, then keyword match for every field. Name falls
  back to the first column. Strict passthrough.
- registered: like keyword, but the date column is "Date Registered".
  Permissive passthrough.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional

from core.errors import MappingError
from .passthrough import check_mode
from .strategies import ColumnStrategy, ExactHeader, KeywordMatch, Position


# Target fields resolved from the sheet (full_name feeds the name splitter)
TARGET_FIELDS = [
    'first_name', 'last_name', 'full_name',
    'email', 'phone',
    'address', 'city', 'province', 'postal_code',
    'date_of_birth',
    'borrower_stage', 'partner_type', 'lead_source', 'campaign',
]

# Ranked keywords per field (most specific first)
FIELD_KEYWORDS: Dict[str, List[str]] = {
    'first_name': ['first name', 'firstname', 'first_name', 'given name'],
    'last_name': ['last name', 'lastname', 'last_name', 'surname', 'family name'],
    'full_name': ['full name', 'fullname', 'full_name', 'contact name', 'client name', 'borrower name'],
    'email': ['email', 'e-mail'],
    'phone': ['phone', 'mobile', 'cell'],
    'address': ['street', 'address'],
    'city': ['city', 'town'],
    'province': ['province', 'state'],
    'postal_code': ['postal', 'zip', 'postcode', 'post code'],
    'date_of_birth': ['birth', 'dob', 'date of birth', 'birth date'],
    'borrower_stage': ['stage'],
    'partner_type': ['partner'],
    'lead_source': ['lead source', 'leadsource', 'source'],
    'campaign': ['campaign'],
}

# Exact headers tried before keywords (the export names themselves)
EXACT_HEADERS: Dict[str, str] = {
    'first_name': 'FirstName',
    'last_name': 'LastName',
    'full_name': 'Name',
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


@dataclass
class MappingProfile:
    """Ordered column strategies per target field, plus passthrough mode."""
    name: str
    rules: Dict[str, List[ColumnStrategy]] = field(default_factory=dict)
    passthrough: str = 'strict'
    description: str = ''

    def __post_init__(self):
        check_mode(self.passthrough)

    def strategies_for(self, target: str) -> List[ColumnStrategy]:
        return self.rules.get(target, [])

    def with_overrides(self, columns: Mapping[str, Optional[str]]) -> 'MappingProfile':
        """
        Copy of this profile with user-chosen columns taking precedence.

        A header pins the field to that exact column; None disables the
        field entirely.
        """
        rules = {target: list(strategies) for target, strategies in self.rules.items()}
        for target, header in columns.items():
            if target not in TARGET_FIELDS:
                raise MappingError(f"Unknown target field '{target}'")
            if header is None:
                rules[target] = []
            else:
                rules[target] = [ExactHeader(header)] + rules.get(target, [])
        return replace(self, rules=rules)

    def with_passthrough(self, mode: str) -> 'MappingProfile':
        return replace(self, passthrough=check_mode(mode))


def _keyword_rules() -> Dict[str, List[ColumnStrategy]]:
    rules: Dict[str, List[ColumnStrategy]] = {}
    for target in TARGET_FIELDS:
        rules[target] = [ExactHeader(EXACT_HEADERS[target]), KeywordMatch(FIELD_KEYWORDS[target])]
    rules['full_name'].append(Position(0))
    return rules


def _positional_rules() -> Dict[str, List[ColumnStrategy]]:
    return {
        'full_name': [Position(0)],
        'date_of_birth': [Position(1)],
        'phone': [Position(2)],
        'email': [Position(3)],
        'address': [ExactHeader('Address')],
        'borrower_stage': [ExactHeader('BorrowerStage.Name')],
        'partner_type': [ExactHeader('PartnerType.Name')],
        'lead_source': [ExactHeader('LeadSource')],
        'campaign': [ExactHeader('Campaign')],
    }


def _registered_rules() -> Dict[str, List[ColumnStrategy]]:
    rules = _keyword_rules()
    rules['date_of_birth'] = [ExactHeader('Date Registered'), KeywordMatch(['date registered'])]
    return rules


def _build_profiles() -> Dict[str, MappingProfile]:
    return {
        'positional': MappingProfile(
            name='positional',
            rules=_positional_rules(),
            passthrough='off',
            description='Name, DOB, phone, email from columns 1-4; other fields by exact header',
        ),
        'keyword': MappingProfile(
            name='keyword',
            rules=_keyword_rules(),
            passthrough='strict',
            description='Exact header, then keyword match; name falls back to column 1',
        ),
        'registered': MappingProfile(
            name='registered',
            rules=_registered_rules(),
            passthrough='permissive',
            description='Keyword match, with the date taken from "Date Registered"',
        ),
    }


PROFILES = _build_profiles()

DEFAULT_PROFILE = 'keyword'


def get_profile(name: Optional[str] = None) -> MappingProfile:
    """Look up a built-in profile by name (default: keyword)."""
    name = name or DEFAULT_PROFILE
    if name not in PROFILES:
        raise MappingError(
            f"Unknown mapping profile '{name}' (expected one of: {', '.join(PROFILES)})"
        )
    return PROFILES[name]


def list_profiles() -> List[MappingProfile]:
    return list(PROFILES.values())
