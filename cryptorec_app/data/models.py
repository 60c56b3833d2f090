"""
Canonical data models for crypto prices and their summaries.

This module defines immutable data structures for parsed price observations,
period summaries and registered crypto codes.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Observation:
    """Single parsed price line."""
    code: str           # Upper-cased crypto code
    ts: datetime        # UTC timestamp
    price: float        # Strictly positive price


@dataclass(frozen=True)
class Summary:
    """Oldest/newest/min/max prices of one crypto over one period."""
    code: str
    start_time: datetime    # Earliest timestamp in the period
    end_time: datetime      # Latest timestamp in the period
    oldest: float           # Price at start_time
    newest: float           # Price at end_time
    min_price: float
    max_price: float
    id: Optional[int] = field(default=None, compare=False)    # Store row id once persisted

    @property
    def normalized_range(self) -> float:
        """(max - min) / min, derived from the current prices."""
        return (self.max_price - self.min_price) / self.min_price

    def with_prices(self, other: "Summary") -> "Summary":
        """Keep this summary's identity, take the prices of another."""
        return replace(
            self,
            oldest=other.oldest,
            newest=other.newest,
            min_price=other.min_price,
            max_price=other.max_price,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "code": self.code,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "oldest": self.oldest,
            "newest": self.newest,
            "min": self.min_price,
            "max": self.max_price,
            "normalized_range": self.normalized_range,
        }

    def format(self, day_format: str = "%d-%m-%Y") -> str:
        """Single-line human readable report."""
        return (
            f" Code : {self.code}"
            f" | Period : {self.start_time.strftime(day_format)} - {self.end_time.strftime(day_format)}"
            f" | Oldest Price : {self.oldest:.2f}"
            f" | Newest Price : {self.newest:.2f}"
            f" | Min Price : {self.min_price:.2f}"
            f" | Max Price : {self.max_price:.2f}"
            f" | Normalized Range : {self.normalized_range:.2f}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class AssetCode:
    """Registered crypto code."""
    code: str
    id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "code": self.code}

    def __str__(self) -> str:
        return self.code
