"""
Data loaders for CRM Prep
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple

from core.errors import LoadError
from .base import DataLoader
from .csv_loader import CSVLoader
from .excel_loader import ExcelLoader

LOADERS = {
    '.csv': CSVLoader,
    '.xlsx': ExcelLoader,
    '.xlsm': ExcelLoader,
}


def get_loader(file_path: str) -> DataLoader:
    """Pick a loader by file extension."""
    suffix = Path(file_path).suffix.lower()
    if suffix not in LOADERS:
        raise LoadError(
            f"Unsupported file type '{suffix or file_path}' (expected one of: {', '.join(LOADERS)})"
        )
    return LOADERS[suffix](file_path)


def load_spreadsheet(file_path: str) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Load the first sheet of a .csv/.xlsx file as (records, headers)."""
    return get_loader(file_path).load()


__all__ = ['DataLoader', 'CSVLoader', 'ExcelLoader', 'get_loader', 'load_spreadsheet']
