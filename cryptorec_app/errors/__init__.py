"""
Error classification system for the crypto recommendation engine.

All user-facing errors derive from RecommendationError and carry the literal
message returned to the caller; system failures are kept apart.
"""

from .base import RecommendationError
from .data_quality import (
    SourceError,
    SourceNotFound,
    SourceReadError,
    CorruptedSource,
    MalformedTimestampOrPrice,
    InsufficientFields,
    CodeMismatch,
    NonPositivePrice,
    EmptySeries,
)
from .lookup import (
    InvalidDateFormat,
    InvalidMonthsParameter,
    UnknownCode,
    NoDataForDate,
    NoHistoricalData,
    NoHistoryAcrossCodes,
)
from .registration import (
    RegistrationError,
    DuplicateCode,
    CodeTooLong,
    InvalidCodeFormat,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    "RecommendationError",
    # Source / data quality
    "SourceError",
    "SourceNotFound",
    "SourceReadError",
    "CorruptedSource",
    "MalformedTimestampOrPrice",
    "InsufficientFields",
    "CodeMismatch",
    "NonPositivePrice",
    "EmptySeries",
    # Lookups and parameters
    "InvalidDateFormat",
    "InvalidMonthsParameter",
    "UnknownCode",
    "NoDataForDate",
    "NoHistoricalData",
    "NoHistoryAcrossCodes",
    # Registration
    "RegistrationError",
    "DuplicateCode",
    "CodeTooLong",
    "InvalidCodeFormat",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
    "ConfigurationError",
]
