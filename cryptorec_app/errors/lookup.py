"""
Request parameter and lookup error classifications.

These cover malformed query parameters and lookups that find nothing.
"""

from typing import Optional

from .base import RecommendationError


class InvalidDateFormat(RecommendationError):
    """Day parameter is not in dd-MM-yyyy format."""

    def __init__(self, raw_value: Optional[str] = None, **kwargs):
        super().__init__("Incorrect format for date parameter", **kwargs)
        self.raw_value = raw_value


class InvalidMonthsParameter(RecommendationError):
    """Months parameter is not a number or is out of range."""

    NOT_A_NUMBER = "The number of months to search for in history must be a number"
    OUT_OF_RANGE = ("The number of months to search for in history must be greater "
                    "than zero and less than 36(3y)")

    def __init__(self, message: str, raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value


class UnknownCode(RecommendationError):
    """The crypto code is not registered."""

    def __init__(self, code: str, **kwargs):
        super().__init__(f"The crypto code {code} is not supported", **kwargs)
        self.code = code


class NoDataForDate(RecommendationError):
    """No crypto has price data for the requested day."""

    def __init__(self, **kwargs):
        super().__init__("There is no crypto price data for this date", **kwargs)


class NoHistoricalData(RecommendationError):
    """No stored summary for a code within the lookback window."""

    def __init__(self, code: Optional[str] = None, months: Optional[int] = None, **kwargs):
        super().__init__(f"There is no data for the crypto {code} in the last {months} months", **kwargs)
        self.code = code
        self.months = months


class NoHistoryAcrossCodes(RecommendationError):
    """No stored summary for any code within the lookback window."""

    def __init__(self, months: Optional[int | str] = None, **kwargs):
        # Two spaces before "in", months quoted as the caller passed it
        super().__init__(f"There is no crypto data  in the last {months} months", **kwargs)
        self.months = months
