"""
Parsers converting raw CSV records and request parameters to typed values.

A price record is a sequence of three fields: timestamp (epoch milliseconds),
crypto code and price. Any defect in a record marks the whole prices file as
corrupted, so every parse error here is a CorruptedSource subclass.
"""

import math
import re
from datetime import date, datetime
from typing import Optional, Sequence

from ..errors import (
    CodeMismatch,
    InsufficientFields,
    InvalidDateFormat,
    InvalidMonthsParameter,
    MalformedTimestampOrPrice,
    NonPositivePrice,
)
from ..utils.time import epoch_ms_to_datetime
from .models import Observation

TIMESTAMP_FIELD = 0
CODE_FIELD = 1
PRICE_FIELD = 2
RECORD_FIELDS = 3

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_DAY_RE = re.compile(r"\d{2}-\d{2}-\d{4}")


def parse_record(fields: Sequence[str], expected_code: str, *,
                 source: Optional[str] = None) -> Observation:
    """
    Parse one raw price record into an Observation.

    Expected format: [ts_ms, code, price], e.g. ["1641009600000", "BTC", "46813.21"]

    Args:
        fields: Raw record fields, surrounding whitespace allowed
        expected_code: Code the prices file belongs to
        source: Prices file name used in error messages

    Returns:
        Parsed observation with upper-cased code

    Raises:
        InsufficientFields: If fewer than three fields are present
        MalformedTimestampOrPrice: If timestamp or price is not a number
        CodeMismatch: If the record code differs from expected_code (case-insensitive)
        NonPositivePrice: If price <= 0
    """
    if len(fields) < RECORD_FIELDS:
        raise InsufficientFields(source, field_count=len(fields))

    raw_ts = fields[TIMESTAMP_FIELD].strip()
    if not _INTEGER_RE.fullmatch(raw_ts):
        raise MalformedTimestampOrPrice(source, raw_value=raw_ts)
    try:
        ts = epoch_ms_to_datetime(int(raw_ts))
    except OverflowError:
        raise MalformedTimestampOrPrice(source, raw_value=raw_ts)

    raw_price = fields[PRICE_FIELD].strip()
    if not _DECIMAL_RE.fullmatch(raw_price):
        raise MalformedTimestampOrPrice(source, raw_value=raw_price)
    price = float(raw_price)
    # 1e999 and the like overflow to inf
    if not math.isfinite(price):
        raise MalformedTimestampOrPrice(source, raw_value=raw_price)

    code = fields[CODE_FIELD].strip()
    if code.upper() != expected_code.strip().upper():
        raise CodeMismatch(source, expected_code=expected_code, found_code=code)

    if price <= 0:
        raise NonPositivePrice(source, price=price)

    return Observation(code=code.upper(), ts=ts, price=price)


def parse_day(raw_day: str, day_format: str = "%d-%m-%Y") -> date:
    """
    Parse a day parameter such as "01-01-2022".

    Day and month must have two digits and the year four.

    Raises:
        InvalidDateFormat: If the value is not a valid dd-MM-yyyy date
    """
    if raw_day is None or not _DAY_RE.fullmatch(raw_day.strip()):
        raise InvalidDateFormat(raw_day)
    try:
        return datetime.strptime(raw_day.strip(), day_format).date()
    except ValueError:
        raise InvalidDateFormat(raw_day)


def parse_months(raw_months: str, min_months: int = 1, max_months: int = 36) -> int:
    """
    Parse the history lookback parameter.

    Raises:
        InvalidMonthsParameter: If the value is not an integer or is outside
            [min_months, max_months]
    """
    value = str(raw_months).strip() if raw_months is not None else ""
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidMonthsParameter(InvalidMonthsParameter.NOT_A_NUMBER, raw_value=raw_months)

    months = int(value)
    if months < min_months or months > max_months:
        raise InvalidMonthsParameter(InvalidMonthsParameter.OUT_OF_RANGE, raw_value=raw_months)

    return months
