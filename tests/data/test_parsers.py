"""Tests for price record and request parameter parsing."""

import pytest
from datetime import date, datetime, timezone

from cryptorec_app.data.parsers import parse_day, parse_months, parse_record
from cryptorec_app.errors import (
    CodeMismatch,
    CorruptedSource,
    InsufficientFields,
    InvalidDateFormat,
    InvalidMonthsParameter,
    MalformedTimestampOrPrice,
    NonPositivePrice,
)


class TestParseRecord:
    """Test parse_record function."""

    def test_parse_valid_record(self):
        """Should convert epoch millis to UTC datetime and price to float."""
        observation = parse_record(["1641009600000", "BTC", "46813.21"], "BTC")

        assert observation.code == "BTC"
        assert observation.ts == datetime(2022, 1, 1, 4, 0, tzinfo=timezone.utc)
        assert observation.price == 46813.21

    def test_fields_are_trimmed(self):
        """Should ignore whitespace around fields."""
        observation = parse_record([" 1641009600000 ", " btc ", " 46813.21 "], "BTC")

        assert observation.code == "BTC"
        assert observation.price == 46813.21

    def test_code_match_is_case_insensitive(self):
        """Should accept a lower-case code in the record or the expectation."""
        assert parse_record(["1641009600000", "btc", "1.0"], "BTC").code == "BTC"
        assert parse_record(["1641009600000", "BTC", "1.0"], "btc").code == "BTC"

    def test_millisecond_precision_kept(self):
        """Should keep milliseconds exactly."""
        observation = parse_record(["1641009600123", "BTC", "1.0"], "BTC")
        assert observation.ts.microsecond == 123000

    @pytest.mark.parametrize("fields", [
        [],
        ["1641009600000"],
        ["1641009600000", "BTC"],
    ])
    def test_insufficient_fields(self, fields):
        """Should reject records with fewer than three fields."""
        with pytest.raises(InsufficientFields) as exc_info:
            parse_record(fields, "BTC", source="BTC_values.csv")

        assert exc_info.value.message == "The crypto prices file is corrupted(insufficient data) : BTC_values.csv"
        assert exc_info.value.field_count == len(fields)

    @pytest.mark.parametrize("fields", [
        ["abc", "BTC", "46813.21"],
        ["1641009600000.5", "BTC", "46813.21"],
        ["", "BTC", "46813.21"],
        ["1641009600000", "BTC", "price"],
        ["1641009600000", "BTC", ""],
        ["1641009600000", "BTC", "nan"],
        ["1641009600000", "BTC", "inf"],
        ["1641009600000", "BTC", "46_813.21"],
        ["1641009600000", "BTC", "1e999"],
        ["1641009600000", "BTC", "0x1p3"],
        ["1641009600000", "BTC", "١٢"],
    ])
    def test_malformed_timestamp_or_price(self, fields):
        """Should reject non-numeric timestamps and prices."""
        with pytest.raises(MalformedTimestampOrPrice) as exc_info:
            parse_record(fields, "BTC", source="BTC_values.csv")

        assert exc_info.value.message == "The crypto prices file is corrupted(time or price format) : BTC_values.csv"

    @pytest.mark.parametrize("fields", [
        ["1641009600000", "ETH", "abc"],
        ["1641009600000", "ETH", "46_813.21"],
        ["abc", "ETH", "3715.32"],
    ])
    def test_format_checked_before_code(self, fields):
        """A foreign record with a malformed number reports the format."""
        with pytest.raises(MalformedTimestampOrPrice):
            parse_record(fields, "BTC", source="BTC_values.csv")

    @pytest.mark.parametrize("price", ["1", "1.", ".5", "+2.5", "4.6e4", "4.6E-1"])
    def test_decimal_price_forms(self, price):
        assert parse_record(["1641009600000", "BTC", price], "BTC").price == float(price)

    def test_code_mismatch(self):
        """Should reject a record of another crypto."""
        with pytest.raises(CodeMismatch) as exc_info:
            parse_record(["1641009600000", "ETH", "3715.32"], "BTC", source="BTC_values.csv")

        error = exc_info.value
        assert error.message == "The crypto prices file is corrupted(other codes) : BTC_values.csv"
        assert error.expected_code == "BTC"
        assert error.found_code == "ETH"

    @pytest.mark.parametrize("price", ["0", "0.0", "-1.5"])
    def test_non_positive_price(self, price):
        """Should reject zero and negative prices."""
        with pytest.raises(NonPositivePrice) as exc_info:
            parse_record(["1641009600000", "BTC", price], "BTC", source="BTC_values.csv")

        assert exc_info.value.message == "The crypto prices file is corrupted(zero or negative prices) : BTC_values.csv"

    def test_parse_errors_mark_source_corrupted(self):
        """All record errors should be CorruptedSource errors."""
        for fields in (["x", "BTC", "1"], ["1", "BTC"], ["1", "ETH", "1"], ["1", "BTC", "-1"]):
            with pytest.raises(CorruptedSource):
                parse_record(fields, "BTC")

    def test_extra_fields_ignored(self):
        """Should only use the first three fields."""
        observation = parse_record(["1641009600000", "BTC", "1.5", "extra"], "BTC")
        assert observation.price == 1.5


class TestParseDay:
    """Test parse_day function."""

    def test_valid_day(self):
        assert parse_day("01-01-2022") == date(2022, 1, 1)

    def test_day_is_trimmed(self):
        assert parse_day(" 31-12-2021 ") == date(2021, 12, 31)

    @pytest.mark.parametrize("raw_day", [
        "01.01.2022",
        "2022-01-01",
        "1-1-2022",
        "32-01-2022",
        "29-02-2022",
        "",
        None,
    ])
    def test_invalid_day(self, raw_day):
        with pytest.raises(InvalidDateFormat) as exc_info:
            parse_day(raw_day)
        assert exc_info.value.message == "Incorrect format for date parameter"


class TestParseMonths:
    """Test parse_months function."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("36", 36), (" 6 ", 6), ("+3", 3)])
    def test_valid_months(self, raw, expected):
        assert parse_months(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "-1", "37", "40"])
    def test_out_of_range(self, raw):
        with pytest.raises(InvalidMonthsParameter) as exc_info:
            parse_months(raw)
        assert exc_info.value.message == (
            "The number of months to search for in history must be greater than zero and less than 36(3y)"
        )

    @pytest.mark.parametrize("raw", ["xx", "", "1.5", "1_0", None])
    def test_not_a_number(self, raw):
        with pytest.raises(InvalidMonthsParameter) as exc_info:
            parse_months(raw)
        assert exc_info.value.message == "The number of months to search for in history must be a number"

    def test_custom_bounds(self):
        assert parse_months("48", max_months=48) == 48
        with pytest.raises(InvalidMonthsParameter):
            parse_months("2", min_months=3)
