"""Merging of stored period summaries into one coarser summary"""

from typing import Iterable, Mapping, Optional

from ..data.models import Summary
from ..errors import NoHistoricalData, NoHistoryAcrossCodes
from ..logging.config import get_logger
from .ranking import rank_summaries

logger = get_logger(__name__)


def merge_summaries(summaries: Iterable[Summary], *, code: Optional[str] = None,
                    months: Optional[int] = None) -> Summary:
    """
    Merge summaries of one crypto covering sub-periods.

    The earliest start gives start and oldest price, the latest end gives end
    and newest price, min and max are taken over all summaries. Sub-periods may
    overlap or leave gaps.

    Args:
        summaries: Summaries of the same crypto, already filtered to the
            lookback window by the caller
        code: Crypto code, used for the result and the error message
        months: Lookback length, used for the error message

    Returns:
        Merged summary

    Raises:
        NoHistoricalData: If there is nothing to merge
    """
    start_summary: Optional[Summary] = None
    end_summary: Optional[Summary] = None
    min_price = float("inf")
    max_price = 0.0

    for summary in summaries:
        if start_summary is None or summary.start_time < start_summary.start_time:
            start_summary = summary
        if end_summary is None or summary.end_time > end_summary.end_time:
            end_summary = summary
        if summary.min_price < min_price:
            min_price = summary.min_price
        if summary.max_price > max_price:
            max_price = summary.max_price

    if start_summary is None:
        raise NoHistoricalData(code, months)

    return Summary(
        code=code or start_summary.code,
        start_time=start_summary.start_time,
        end_time=end_summary.end_time,
        oldest=start_summary.oldest,
        newest=end_summary.newest,
        min_price=min_price,
        max_price=max_price,
    )


def merge_all_histories(history_by_code: Mapping[str, Iterable[Summary]],
                        codes: Iterable[str], *, months: Optional[int] = None,
                        raw_months: Optional[str] = None) -> list[Summary]:
    """
    Merge the history of every code and rank the results.

    Codes without history are skipped.

    Args:
        history_by_code: Stored summaries in the lookback window, per code
        codes: Codes to merge
        months: Lookback length, used in error messages
        raw_months: Months parameter as the caller passed it, quoted in the
            error when no code has history (defaults to months)

    Returns:
        Merged summaries ranked by normalized range

    Raises:
        NoHistoryAcrossCodes: If no code has any history
    """
    merged = []
    for code in codes:
        try:
            merged.append(merge_summaries(history_by_code.get(code, ()), code=code, months=months))
        except NoHistoricalData as e:
            logger.debug("No history for code", code=code, months=months, reason=e.message)

    if not merged:
        raise NoHistoryAcrossCodes(months if raw_months is None else raw_months)

    return rank_summaries(merged)
