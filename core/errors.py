"""
CRM Prep exceptions
"""


class CRMPrepError(Exception):
    """Base class for errors surfaced to the CLI."""


class LoadError(CRMPrepError):
    """Spreadsheet could not be read (missing, corrupt, empty or unsupported)."""


class MappingError(CRMPrepError):
    """Unknown mapping profile or passthrough mode."""
