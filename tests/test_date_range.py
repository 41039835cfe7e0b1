from __future__ import annotations

from datetime import date

import pytest

from rental_app.core.errors import InvalidDateFormat, InvalidDateRange
from rental_app.services.date_range import format_date, parse_date, validate_order


class TestParseDate:
    def test_parses_canonical_text(self):
        assert parse_date("2024-06-05") == date(2024, 6, 5)

    @pytest.mark.parametrize(
        "text",
        ["2024-13-01", "05/06/2024", "tomorrow", "2024-02-30", "2024-6-5", "20240605", " 2024-06-05", "2024-06-05 "],
    )
    def test_rejects_non_canonical_text(self, text):
        with pytest.raises(InvalidDateFormat):
            parse_date(text)

    @pytest.mark.parametrize("text", ["", None])
    def test_rejects_empty_text(self, text):
        with pytest.raises(InvalidDateFormat):
            parse_date(text)

    def test_format_is_canonical(self):
        assert format_date(date(2024, 1, 2)) == "2024-01-02"


class TestValidateOrder:
    def test_start_before_end_is_valid(self):
        validate_order(date(2024, 6, 1), date(2024, 6, 2))

    def test_equal_dates_are_invalid(self):
        with pytest.raises(InvalidDateRange):
            validate_order(date(2024, 6, 1), date(2024, 6, 1))

    def test_inverted_dates_are_invalid(self):
        with pytest.raises(InvalidDateRange) as exc_info:
            validate_order(date(2024, 6, 5), date(2024, 6, 1))
        assert exc_info.value.params == ["2024-06-05", "2024-06-01"]
