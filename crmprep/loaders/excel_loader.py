"""
Excel workbook loader

Reads the first sheet of an .xlsx/.xlsm workbook with pandas (openpyxl
engine). Row 1 is the header. Empty cells load as ''; date cells stay
datetimes so the date normalizer can format them directly.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd

from core.errors import LoadError
from .base import DataLoader

logger = logging.getLogger(__name__)


class ExcelLoader(DataLoader):
    """
    Load the first sheet of an Excel workbook.

    Example:
        loader = ExcelLoader("contacts.xlsx")
        records, headers = loader.load()
    """

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)

        if not self.file_path.is_file():
            raise LoadError(f"Workbook not found: {file_path}")

    def load(self) -> Tuple[List[Dict[str, Any]], List[str]]:
        try:
            df = pd.read_excel(self.file_path, sheet_name=0, dtype=object, engine='openpyxl')
        except Exception as e:
            raise LoadError(f"Could not read workbook {self.file_path}: {e}") from e

        df.columns = [str(c) for c in df.columns]
        df = df.astype(object).where(pd.notna(df), '')

        headers = list(df.columns)
        if not headers:
            raise LoadError(f"Workbook has no headers: {self.file_path}")

        records = df.to_dict(orient='records')
        if not records:
            raise LoadError(f"Workbook is empty: {self.file_path}")

        logger.debug("Loaded %d rows from first sheet of %s", len(records), self.file_path)
        return records, headers
