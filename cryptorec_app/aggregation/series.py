"""Single-pass oldest/newest/min/max aggregation of one crypto's prices"""

from datetime import date, datetime, timezone
from typing import Iterable, Optional, Sequence

from ..data.models import Summary
from ..data.parsers import parse_record
from ..errors import EmptySeries
from ..logging.config import get_source_logger
from ..utils.time import calendar_date


def aggregate_series(records: Iterable[Sequence[str]], code: str, *,
                     day: Optional[date] = None,
                     tz=timezone.utc,
                     source: Optional[str] = None) -> Optional[Summary]:
    """
    Compute the Summary of one crypto's price records.

    Records need not be sorted: the earliest timestamp gives the oldest price
    and the latest gives the newest. On equal timestamps the first record wins.

    Args:
        records: Raw [ts_ms, code, price] records
        code: Code the records must belong to
        day: Only aggregate records on this calendar date if set
        tz: Timezone in which calendar dates are taken
        source: Prices file name used in errors and logs

    Returns:
        Summary, or None if a day filter is set and no record falls on that day

    Raises:
        CorruptedSource: On the first bad record, or EmptySeries if no day
            filter is set and there are no records
    """
    logger = get_source_logger(__name__, source or code)
    code = code.strip().upper()

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    oldest = newest = 0.0
    min_price = float("inf")
    max_price = 0.0
    count = 0

    for fields in records:
        observation = parse_record(fields, code, source=source)

        if day is not None and calendar_date(observation.ts, tz) != day:
            continue

        price = observation.price
        if start is None or observation.ts < start:
            start = observation.ts
            oldest = price
        if end is None or observation.ts > end:
            end = observation.ts
            newest = price
        if price < min_price:
            min_price = price
        if price > max_price:
            max_price = price
        count += 1

    if count == 0:
        if day is None:
            logger.warning("No price records in source", code=code)
            raise EmptySeries(source)
        logger.debug("No price records for day", code=code, day=day.isoformat())
        return None

    logger.debug("Price records aggregated", code=code, records=count)
    return Summary(
        code=code,
        start_time=start,
        end_time=end,
        oldest=oldest,
        newest=newest,
        min_price=min_price,
        max_price=max_price,
    )
