"""
Contact processing session

Holds the current file and the current result for one session. Each
action replaces the result wholesale; a failed action leaves the previous
result untouched.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from core.models import ContactRecord
from .exporters import CSVExporter
from .loaders import load_spreadsheet
from .mappers import MappingProfile, RowMapper, get_profile
from .services import RecordEnhancer

logger = logging.getLogger(__name__)


class ContactDataProcessor:
    """
    Load → map → (enhance) → export, one file at a time.

    Example:
        processor = ContactDataProcessor(get_profile('keyword'))
        processor.process_file("contacts.xlsx")
        processor.enhance()
        processor.export("output/formatted_contacts.csv")
    """

    def __init__(
        self,
        profile: Optional[MappingProfile] = None,
        overrides: Optional[Mapping[str, Optional[str]]] = None,
        enhancer: Optional[RecordEnhancer] = None,
        exporter: Optional[CSVExporter] = None,
    ):
        self.row_mapper = RowMapper(profile or get_profile(), overrides)
        self.enhancer = enhancer
        self.exporter = exporter or CSVExporter()

        self.file_path: Optional[Path] = None
        self.headers: List[str] = []
        self.raw_records: List[Dict[str, Any]] = []
        self.result: Optional[List[ContactRecord]] = None

    def load(self, file_path: str) -> List[Dict[str, Any]]:
        """
        Read a spreadsheet without mapping it.

        Raises:
            LoadError: If the file cannot be read (session state unchanged)
        """
        records, headers = load_spreadsheet(file_path)
        self.file_path = Path(file_path)
        self.headers = headers
        self.raw_records = records
        return records

    def set_overrides(self, overrides: Mapping[str, Optional[str]]):
        """Re-pin columns (e.g. after interactive review)."""
        self.row_mapper = RowMapper(self.row_mapper.profile, overrides)

    def map_loaded(self) -> List[ContactRecord]:
        """Map the loaded rows and make them the current result."""
        self.result = self.row_mapper.map_rows(self.raw_records)
        logger.info("Formatted %d contacts from %s", len(self.result), self.file_path)
        return self.result

    def process_file(self, file_path: str) -> List[ContactRecord]:
        """
        Load and map a spreadsheet.

        Raises:
            LoadError: If the file cannot be read (previous result kept)
        """
        self.load(file_path)
        return self.map_loaded()

    def enhance(self) -> List[ContactRecord]:
        """Run AI cleanup over the current result (best-effort)."""
        if self.result is None:
            raise RuntimeError("No processed data to enhance")
        if self.enhancer is None:
            self.enhancer = RecordEnhancer.from_config()

        self.result = self.enhancer.enhance(self.result)
        return self.result

    def export(self, output_path: Optional[str] = None) -> str:
        """
        Write the current result to CSV (or .xlsx when the path says so).

        Returns:
            Path written
        """
        if self.result is None:
            raise RuntimeError("No processed data to export")

        output_path = output_path or self.exporter.default_output_path()
        if Path(output_path).suffix.lower() == '.xlsx':
            self.exporter.export_workbook(self.result, output_path)
        else:
            self.exporter.export(self.result, output_path)

        logger.info("Exported %d contacts to %s", len(self.result), output_path)
        return output_path
