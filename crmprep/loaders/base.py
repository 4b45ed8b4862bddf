"""
Abstract base class for spreadsheet loaders
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple


class DataLoader(ABC):
    """
    Abstract base class for loading the first sheet of a spreadsheet.

    All loaders must implement the load() method which returns:
    - records: List of dictionaries (header -> cell value, in column order)
    - headers: List of column names from the first row
    """

    @abstractmethod
    def load(self) -> Tuple[List[Dict[str, Any]], List[str]]:
        """
        Load data from source.

        Returns:
            Tuple of (records, headers)

        Raises:
            LoadError: If the file cannot be read
        """
        pass
