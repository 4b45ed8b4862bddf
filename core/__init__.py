"""CRM Prep Core"""

from ._version import __version__
from .config import PrepConfig, get_config, reload_config
from .errors import CRMPrepError, LoadError, MappingError
from .models import ContactRecord, BorrowerStage, VALID_STAGES, DEFAULT_STAGE

__all__ = [
    'PrepConfig', 'get_config', 'reload_config',
    'CRMPrepError', 'LoadError', 'MappingError',
    'ContactRecord', 'BorrowerStage', 'VALID_STAGES', 'DEFAULT_STAGE',
]
