from datetime import date

import pytest

from pocketledger.utils.dates import get_month_range, parse_date


class TestMonthRange:

    def test_regular_month(self):
        assert get_month_range("2024-02") == (date(2024, 2, 1), date(2024, 3, 1))

    def test_december_rolls_over(self):
        assert get_month_range("2023-12") == (date(2023, 12, 1), date(2024, 1, 1))

    @pytest.mark.parametrize("month", ["2024-00", "2024-13", "2024-1", "24-01", "", "2024/01"])
    def test_rejects_bad_months(self, month):
        with pytest.raises(ValueError):
            get_month_range(month)


class TestParseDate:

    def test_plain_date(self):
        assert parse_date("2024-03-10") == date(2024, 3, 10)

    def test_timestamp_keeps_date(self):
        assert parse_date("2024-03-10T23:15:00Z") == date(2024, 3, 10)

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-02-30"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_date(value)
