"""
External services for CRM Prep
"""

from .enhancer import RecordEnhancer, SYSTEM_PROMPT

__all__ = ['RecordEnhancer', 'SYSTEM_PROMPT']
