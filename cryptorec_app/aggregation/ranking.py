"""Ranking of summaries by normalized range"""

from typing import Iterable

from ..data.models import Summary


def _rank_key(summary: Summary) -> tuple:
    return (-summary.normalized_range, summary.code, summary.start_time)


def rank_summaries(summaries: Iterable[Summary]) -> list[Summary]:
    """
    Order summaries by normalized range, highest first.

    Equal ranges are ordered by code, then by period start. Every summary is
    kept, including those with equal ranges.
    """
    return sorted(summaries, key=_rank_key)
