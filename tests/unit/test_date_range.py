"""
Unit tests for date_range.py
"""
import pytest
from datetime import date

from date_range import (
    DEFAULT_START_DATE,
    format_date,
    parse_date,
    resolve_date_range,
)
from errors import InvalidSessionDataError

TODAY = date(2023, 2, 14)


class TestResolveDateRange:
    """Test default filling of missing bounds."""

    def test_both_empty(self):
        assert resolve_date_range("", "", today=TODAY) == (DEFAULT_START_DATE, "2023-Feb-14")

    def test_both_none(self):
        assert resolve_date_range(None, None, today=TODAY) == ("2022-Sep-19", "2023-Feb-14")

    def test_only_start(self):
        assert resolve_date_range("2023-Jan-01", "", today=TODAY) == ("2023-Jan-01", "2023-Feb-14")

    def test_only_end(self):
        assert resolve_date_range("", "2023-Jan-31", today=TODAY) == (DEFAULT_START_DATE, "2023-Jan-31")

    def test_both_supplied_verbatim(self):
        assert resolve_date_range("2023-Jan-01", "2023-Jan-31", today=TODAY) == (
            "2023-Jan-01",
            "2023-Jan-31",
        )

    def test_supplied_values_not_validated(self):
        """Resolution never rewrites what the caller passed."""
        assert resolve_date_range("garbage", "2023-Jan-31") == ("garbage", "2023-Jan-31")

    def test_defaults_to_real_today(self):
        _, end = resolve_date_range("", "")
        assert end == format_date(date.today())


class TestParseDate:
    """Test YYYY-Mon-DD parsing and formatting."""

    def test_parse(self):
        assert parse_date("2022-Sep-19") == date(2022, 9, 19)

    def test_format(self):
        assert format_date(date(2023, 1, 5)) == "2023-Jan-05"

    def test_format_parse_agree(self):
        assert parse_date(format_date(TODAY)) == TODAY

    @pytest.mark.parametrize("value", ["2022-09-19", "19-Sep-2022", "", "2022-Sep-31"])
    def test_invalid(self, value):
        with pytest.raises(InvalidSessionDataError):
            parse_date(value)
