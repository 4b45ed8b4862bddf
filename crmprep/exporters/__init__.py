"""
Exporters for CRM Prep
"""

from .csv_exporter import CSVExporter

__all__ = ['CSVExporter']
