"""
Data quality error classifications for crypto price sources.

A price file is either readable and consistent or rejected as a whole:
a single bad line invalidates the file.
"""

from typing import Optional

from .base import RecommendationError


class SourceError(RecommendationError):
    """Base class for problems with a crypto prices file."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class SourceNotFound(SourceError):
    """The prices file for a code does not exist."""

    def __init__(self, source: str, **kwargs):
        super().__init__(f"The crypto prices file cannot be found : {source}", source=source, **kwargs)


class SourceReadError(SourceError):
    """The prices file exists but could not be read."""

    def __init__(self, source: str, **kwargs):
        super().__init__(f"IO error reading the crypto prices file : {source}", source=source, **kwargs)


class CorruptedSource(SourceError):
    """The prices file content is unusable."""

    reason: Optional[str] = None

    def __init__(self, source: Optional[str] = None, **kwargs):
        reason = f"({self.reason})" if self.reason else ""
        super().__init__(
            f"The crypto prices file is corrupted{reason} : {source or '<unknown>'}",
            source=source,
            **kwargs
        )


class MalformedTimestampOrPrice(CorruptedSource):
    """Timestamp or price field is not a number."""

    reason = "time or price format"

    def __init__(self, source: Optional[str] = None, raw_value: Optional[str] = None, **kwargs):
        super().__init__(source, **kwargs)
        self.raw_value = raw_value


class InsufficientFields(CorruptedSource):
    """A record has fewer than the three expected fields."""

    reason = "insufficient data"

    def __init__(self, source: Optional[str] = None, field_count: Optional[int] = None, **kwargs):
        super().__init__(source, **kwargs)
        self.field_count = field_count


class CodeMismatch(CorruptedSource):
    """A record belongs to another crypto than the file."""

    reason = "other codes"

    def __init__(self, source: Optional[str] = None, expected_code: Optional[str] = None,
                 found_code: Optional[str] = None, **kwargs):
        super().__init__(source, **kwargs)
        self.expected_code = expected_code
        self.found_code = found_code


class NonPositivePrice(CorruptedSource):
    """A record has a zero or negative price."""

    reason = "zero or negative prices"

    def __init__(self, source: Optional[str] = None, price: Optional[float] = None, **kwargs):
        super().__init__(source, **kwargs)
        self.price = price


class EmptySeries(CorruptedSource):
    """The file produced no usable record at all."""

    reason = "no data"
