"""Price aggregation engine: per-file summaries, history merges and ranking"""

from .history import merge_all_histories, merge_summaries
from .ranking import rank_summaries
from .series import aggregate_series

__all__ = [
    "aggregate_series",
    "merge_summaries",
    "merge_all_histories",
    "rank_summaries",
]
