"""
CRM Prep - contact spreadsheet formatter
"""

from core._version import __version__

__all__ = ['__version__']
