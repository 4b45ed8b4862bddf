"""
Data normalizers for CRM Prep
"""

from .field_normalizer import to_text, is_blank
from .name_splitter import split_name, join_and_split
from .date_normalizer import normalize_date
from .address_decomposer import AddressParts, decompose_address
from .stage_validator import validate_stage

__all__ = [
    'to_text',
    'is_blank',
    'split_name',
    'join_and_split',
    'normalize_date',
    'AddressParts',
    'decompose_address',
    'validate_stage',
]
