"""
Column selection strategies

Each target field owns an ordered list of strategies. The list is
evaluated top-down and the first strategy that names a header wins,
even when that header's cell is empty for a given row.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .header_resolver import find_header


class ColumnStrategy(ABC):
    """Picks a source header for a target field."""

    @abstractmethod
    def pick(self, headers: Sequence[str]) -> Optional[str]:
        """Return the chosen header, or None if this strategy does not apply."""

    @abstractmethod
    def describe(self) -> str:
        pass


class ExactHeader(ColumnStrategy):
    """Strict, case-sensitive header match."""

    def __init__(self, name: str):
        self.name = name

    def pick(self, headers: Sequence[str]) -> Optional[str]:
        return self.name if self.name in headers else None

    def describe(self) -> str:
        return f'exact "{self.name}"'

    def __eq__(self, other):
        return isinstance(other, ExactHeader) and other.name == self.name

    def __repr__(self) -> str:
        return f"ExactHeader({self.name!r})"


class KeywordMatch(ColumnStrategy):
    """Case-insensitive substring match over ranked keywords."""

    def __init__(self, keywords: Sequence[str]):
        self.keywords: List[str] = list(keywords)

    def pick(self, headers: Sequence[str]) -> Optional[str]:
        return find_header(headers, self.keywords)

    def describe(self) -> str:
        return 'keyword ' + '|'.join(self.keywords)

    def __eq__(self, other):
        return isinstance(other, KeywordMatch) and other.keywords == self.keywords

    def __repr__(self) -> str:
        return f"KeywordMatch({self.keywords!r})"


class Position(ColumnStrategy):
    """N-th column of the row (0-based)."""

    def __init__(self, index: int):
        self.index = index

    def pick(self, headers: Sequence[str]) -> Optional[str]:
        headers = list(headers)
        if 0 <= self.index < len(headers):
            return headers[self.index]
        return None

    def describe(self) -> str:
        return f'column #{self.index + 1}'

    def __eq__(self, other):
        return isinstance(other, Position) and other.index == self.index

    def __repr__(self) -> str:
        return f"Position({self.index})"


def pick_header(strategies: Sequence[ColumnStrategy], headers: Sequence[str]) -> Optional[str]:
    """Evaluate a strategy chain top-down."""
    for strategy in strategies:
        header = strategy.pick(headers)
        if header is not None:
            return header
    return None
