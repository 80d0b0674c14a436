import datetime

import pytest

from outlet_marker.dates import format_date, format_date_text, is_date_in_range, parse_date


class TestParseDate:
    @pytest.mark.parametrize(
        "text",
        ["25.12.2024", "25/12/2024", "25-12-2024", "2024-12-25", "2024.12.25", " 2024/12/25 "],
    )
    def test_supported_formats(self, text):
        assert parse_date(text) == datetime.date(2024, 12, 25)

    def test_single_digit_day_and_month(self):
        assert parse_date("1.2.2025") == datetime.date(2025, 2, 1)
        assert parse_date("2025-2-1") == datetime.date(2025, 2, 1)

    def test_fallback_parser(self):
        assert parse_date("25 Dec 2024") == datetime.date(2024, 12, 25)

    @pytest.mark.parametrize("text", ["12", "Dec 2024", "25 Dec", "12:30"])
    def test_partial_dates_are_none(self, text):
        assert parse_date(text) is None

    @pytest.mark.parametrize("text", [None, "", "   ", "not a date", "31.02.2024"])
    def test_unparseable_is_none(self, text):
        assert parse_date(text) is None


class TestFormatDate:
    def test_zero_padded(self):
        assert format_date(datetime.date(2025, 2, 1)) == "01.02.2025"

    def test_format_text(self):
        assert format_date_text("2024-12-01") == "01.12.2024"

    def test_format_text_keeps_unparseable(self):
        assert format_date_text("скоро") == "скоро"
        assert format_date_text("") == ""


class TestIsDateInRange:
    day = datetime.date(2024, 12, 25)

    def test_both_bounds(self):
        assert is_date_in_range(self.day, datetime.date(2024, 12, 20), datetime.date(2024, 12, 31))
        assert is_date_in_range(self.day, self.day, self.day)
        assert not is_date_in_range(self.day, datetime.date(2025, 1, 1), datetime.date(2025, 1, 2))

    def test_start_only(self):
        assert is_date_in_range(self.day, datetime.date(2024, 12, 1), None)
        assert not is_date_in_range(self.day, datetime.date(2025, 1, 1), None)

    def test_end_only(self):
        assert is_date_in_range(self.day, None, datetime.date(2024, 12, 31))
        assert not is_date_in_range(self.day, None, datetime.date(2024, 12, 1))

    def test_no_bounds(self):
        assert is_date_in_range(self.day, None, None)
