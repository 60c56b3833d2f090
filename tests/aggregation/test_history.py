"""Tests for merging stored summaries into history summaries."""

import pytest
from datetime import datetime, timezone

from cryptorec_app.aggregation.history import merge_all_histories, merge_summaries
from cryptorec_app.data.models import Summary
from cryptorec_app.errors import NoHistoricalData, NoHistoryAcrossCodes


def day(d: int, month: int = 1) -> datetime:
    return datetime(2022, month, d, tzinfo=timezone.utc)


def make_summary(code="BTC", start=1, end=31, oldest=10.0, newest=20.0,
                 min_price=10.0, max_price=20.0, month=1) -> Summary:
    return Summary(
        code=code, start_time=day(start, month), end_time=day(end, month),
        oldest=oldest, newest=newest, min_price=min_price, max_price=max_price,
    )


class TestMergeSummaries:
    """Test merge_summaries function."""

    def test_single_summary_is_identity(self):
        summary = make_summary()
        assert merge_summaries([summary]) == summary

    def test_min_and_max_across_summaries(self):
        merged = merge_summaries([
            make_summary(min_price=10.0, max_price=20.0),
            make_summary(start=2, end=30, min_price=5.0, max_price=30.0),
        ])

        assert merged.min_price == 5.0
        assert merged.max_price == 30.0
        assert merged.normalized_range == 5.0

    def test_oldest_and_newest_follow_period_bounds(self):
        """Oldest comes from the earliest start, newest from the latest end."""
        january = make_summary(start=1, end=31, oldest=100.0, newest=110.0, min_price=90.0, max_price=120.0)
        february = make_summary(start=1, end=28, oldest=111.0, newest=130.0,
                                min_price=105.0, max_price=140.0, month=2)
        mid_january = make_summary(start=10, end=12, oldest=95.0, newest=96.0, min_price=95.0, max_price=97.0)

        merged = merge_summaries([february, mid_january, january])

        assert merged.start_time == day(1)
        assert merged.end_time == day(28, 2)
        assert merged.oldest == 100.0
        assert merged.newest == 130.0
        assert merged.min_price == 90.0
        assert merged.max_price == 140.0

    def test_overlapping_periods(self):
        merged = merge_summaries([
            make_summary(start=1, end=20, oldest=1.0, newest=2.0, min_price=1.0, max_price=3.0),
            make_summary(start=10, end=31, oldest=4.0, newest=5.0, min_price=2.0, max_price=6.0),
        ])

        assert (merged.start_time, merged.end_time) == (day(1), day(31))
        assert (merged.oldest, merged.newest) == (1.0, 5.0)
        assert (merged.min_price, merged.max_price) == (1.0, 6.0)

    def test_equal_starts_first_summary_wins(self):
        merged = merge_summaries([
            make_summary(start=1, end=5, oldest=1.0),
            make_summary(start=1, end=5, oldest=2.0, newest=99.0),
        ])
        assert merged.oldest == 1.0
        assert merged.newest == 20.0

    def test_code_override(self):
        assert merge_summaries([make_summary()], code="BTC").code == "BTC"

    def test_accepts_generator(self):
        merged = merge_summaries(make_summary(start=s, end=s + 1) for s in (3, 1, 2))
        assert merged.start_time == day(1)
        assert merged.end_time == day(4)

    def test_empty_history(self):
        with pytest.raises(NoHistoricalData) as exc_info:
            merge_summaries([], code="BTC", months=3)

        assert exc_info.value.message == "There is no data for the crypto BTC in the last 3 months"
        assert exc_info.value.code == "BTC"
        assert exc_info.value.months == 3


class TestMergeAllHistories:
    """Test merge_all_histories function."""

    def test_merges_and_ranks_codes(self):
        history = {
            "BTC": [make_summary("BTC", min_price=10.0, max_price=12.0)],
            "ETH": [
                make_summary("ETH", start=1, end=15, min_price=10.0, max_price=15.0),
                make_summary("ETH", start=16, end=31, min_price=8.0, max_price=14.0),
            ],
        }

        ranked = merge_all_histories(history, ["BTC", "ETH"], months=1)

        assert [s.code for s in ranked] == ["ETH", "BTC"]
        assert ranked[0].min_price == 8.0
        assert ranked[0].max_price == 15.0

    def test_codes_without_history_are_skipped(self):
        history = {"BTC": [make_summary("BTC")]}

        ranked = merge_all_histories(history, ["BTC", "DOGE", "XRP"], months=2)

        assert [s.code for s in ranked] == ["BTC"]

    def test_only_listed_codes_are_merged(self):
        history = {"BTC": [make_summary("BTC")], "OLD": [make_summary("OLD")]}
        assert [s.code for s in merge_all_histories(history, ["BTC"])] == ["BTC"]

    def test_no_history_for_any_code(self):
        with pytest.raises(NoHistoryAcrossCodes) as exc_info:
            merge_all_histories({}, ["BTC", "ETH"], months=6)
        assert exc_info.value.message == "There is no crypto data  in the last 6 months"

    def test_no_history_quotes_raw_months(self):
        with pytest.raises(NoHistoryAcrossCodes) as exc_info:
            merge_all_histories({}, ["BTC"], months=12, raw_months="+12")
        assert exc_info.value.message == "There is no crypto data  in the last +12 months"
        assert exc_info.value.months == "+12"
