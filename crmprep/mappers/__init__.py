"""
Field mappers for CRM Prep
"""

from .header_resolver import find_header, resolve
from .strategies import ColumnStrategy, ExactHeader, KeywordMatch, Position, pick_header
from .profiles import MappingProfile, get_profile, list_profiles, TARGET_FIELDS
from .passthrough import collect_extras, PASSTHROUGH_MODES
from .row_mapper import RowMapper
from .interactive_mapper import InteractiveMapper

__all__ = [
    'find_header', 'resolve',
    'ColumnStrategy', 'ExactHeader', 'KeywordMatch', 'Position', 'pick_header',
    'MappingProfile', 'get_profile', 'list_profiles', 'TARGET_FIELDS',
    'collect_extras', 'PASSTHROUGH_MODES',
    'RowMapper', 'InteractiveMapper',
]
