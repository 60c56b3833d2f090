"""Storage contracts used by the recommendation engine."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..data.models import AssetCode, Summary


class CodeRepository(ABC):
    """Storage of supported crypto codes."""

    @abstractmethod
    def exists_by_code(self, code: str) -> bool:
        """Check whether a code is stored."""

    @abstractmethod
    def find_all(self) -> list[AssetCode]:
        """All stored codes in insertion order."""

    @abstractmethod
    def save(self, code: str) -> AssetCode:
        """Store a new code and return it with its id."""


class SummaryRepository(ABC):
    """Storage of computed summaries."""

    @abstractmethod
    def find_exact(self, code: str, start: datetime, end: datetime) -> Optional[Summary]:
        """Summary for exactly this code and period, if stored."""

    @abstractmethod
    def upsert(self, summary: Summary) -> Summary:
        """
        Insert a summary, or update the prices of the stored summary with the
        same code and period. Returns the stored summary.
        """

    @abstractmethod
    def find_since(self, code: str, since: datetime) -> list[Summary]:
        """Summaries of one code whose period starts after `since`."""

    @abstractmethod
    def find_all_since(self, since: datetime) -> dict[str, list[Summary]]:
        """Summaries of all codes whose period starts after `since`, per code."""
