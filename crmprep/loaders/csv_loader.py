"""
CSV loader with auto-delimiter detection

Loads CSV files with automatic detection of:
- Delimiter (comma, tab, pipe, semicolon)
- Encoding (UTF-8, latin1, etc.)
- Header row (always the first row)
"""

import csv
import logging
from typing import Any, Dict, List, Tuple
from pathlib import Path

from core.errors import LoadError
from .base import DataLoader

logger = logging.getLogger(__name__)

DELIMITERS = [',', '\t', '|', ';']


class CSVLoader(DataLoader):
    """
    Load data from CSV files with auto-detection.

    Example:
        loader = CSVLoader("contacts.csv")
        records, headers = loader.load()
    """

    def __init__(self, file_path: str):
        """
        Initialize CSV loader.

        Args:
            file_path: Path to CSV file
        """
        self.file_path = Path(file_path)

        if not self.file_path.is_file():
            raise LoadError(f"CSV file not found: {file_path}")

    def load(self) -> Tuple[List[Dict[str, Any]], List[str]]:
        """
        Load CSV file with auto-delimiter detection.

        Cell values are kept as text exactly as written (no trimming).

        Returns:
            Tuple of (records, headers)

        Raises:
            LoadError: If the file is unreadable, has no header, or has no rows
        """
        try:
            delimiter = self._detect_delimiter()
            encoding = self._detect_encoding()

            records = []
            with open(self.file_path, 'r', encoding=encoding, newline='') as f:
                reader = csv.DictReader(f, delimiter=delimiter)
                headers = list(reader.fieldnames or [])

                if not headers:
                    raise LoadError(f"CSV file has no headers: {self.file_path}")

                for row in reader:
                    records.append({h: (row.get(h) if row.get(h) is not None else '') for h in headers})

        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read CSV file {self.file_path}: {e}") from e

        if not records:
            raise LoadError(f"CSV file is empty: {self.file_path}")

        logger.debug(
            "Loaded %d rows from %s (delimiter=%r, encoding=%s)",
            len(records), self.file_path, delimiter, encoding
        )
        return records, headers

    def _detect_delimiter(self) -> str:
        """
        Auto-detect CSV delimiter.

        Tries common delimiters: comma, tab, pipe, semicolon

        Returns:
            Detected delimiter character
        """
        with open(self.file_path, 'r', encoding='utf-8', errors='ignore') as f:
            sample = ''.join([f.readline() for _ in range(5)])

        try:
            return csv.Sniffer().sniff(sample, delimiters=''.join(DELIMITERS)).delimiter
        except csv.Error:
            # Fallback: count occurrences of common delimiters in the header line
            header_line = sample.splitlines()[0] if sample else ''
            counts = {d: header_line.count(d) for d in DELIMITERS}
            return max(counts.items(), key=lambda x: x[1])[0]

    def _detect_encoding(self) -> str:
        """
        Auto-detect file encoding.

        Returns:
            Encoding name (utf-8-sig, latin1, etc.)
        """
        encodings = ['utf-8-sig', 'cp1252', 'latin1']

        for encoding in encodings:
            try:
                with open(self.file_path, 'r', encoding=encoding) as f:
                    f.read()
                return encoding
            except (UnicodeDecodeError, LookupError):
                continue

        return 'latin1'
