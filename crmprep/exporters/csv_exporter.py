"""
CSV exporter

Exports contact records to CSV in the fixed export column order, with
any passthrough columns appended after the fixed ones.
"""

import csv
from typing import List, Optional
from pathlib import Path

import pandas as pd

from core.models import ContactRecord, EXPORT_COLUMNS, OUTPUT_FILENAME, SHEET_NAME


class CSVExporter:
    """
    Export contact records to CSV format.

    Example:
        exporter = CSVExporter()
        exporter.export(records, "output/formatted_contacts.csv")
    """

    STANDARD_COLUMNS = EXPORT_COLUMNS

    def export(
        self,
        records: List[ContactRecord],
        output_path: str,
        include_header: bool = True
    ) -> int:
        """
        Export records to CSV.

        Args:
            records: Contact records
            output_path: Path to output CSV file
            include_header: Whether to include header row

        Returns:
            Number of records exported
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        columns = self.get_columns(records)

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=columns, restval='')

            if include_header:
                writer.writeheader()

            for record in records:
                writer.writerow(record.to_dict())

        return len(records)

    def export_workbook(self, records: List[ContactRecord], output_path: str) -> int:
        """
        Export records as a single-sheet workbook (sheet "Formatted Data").

        Returns:
            Number of records exported
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame([record.to_dict() for record in records], columns=self.get_columns(records))
        df = df.fillna('')
        df.to_excel(output_path, sheet_name=SHEET_NAME, index=False, engine='openpyxl')

        return len(records)

    def get_columns(self, records: List[ContactRecord]) -> List[str]:
        """Fixed columns, then extension columns in first-seen order."""
        columns = list(self.STANDARD_COLUMNS)
        seen = set(columns)
        for record in records:
            for header in record.extra:
                if header not in seen:
                    seen.add(header)
                    columns.append(header)
        return columns

    @staticmethod
    def default_output_path(base_dir: Optional[str] = None) -> str:
        """
        Default export location: {output dir}/formatted_contacts.csv

        Args:
            base_dir: Base directory for output (default: uses centralized config)

        Returns:
            Full path to output file
        """
        if base_dir is None:
            from core.config import get_config
            output_dir = get_config().get_output_dir()
        else:
            output_dir = Path(base_dir)

        return str(output_dir / OUTPUT_FILENAME)
