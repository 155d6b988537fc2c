"""Tests for utils.formatters."""

from datetime import datetime, timedelta, timezone

import pytest

from utils import formatters


@pytest.mark.parametrize(
    "text,max_length,expected",
    [
        ("Hello world", 5, "Hello..."),
        ("Hello", 5, "Hello"),
        ("Hello", None, "Hello"),
        ("Hello", 0, "Hello"),
    ],
)
def test_format_text(text, max_length, expected):
    assert formatters.format_text(text, max_length) == expected


def test_case_conversions():
    assert formatters.format_title_case("hELLO wORLD") == "Hello World"
    assert formatters.format_camel_case("Hello big-world") == "helloBigWorld"
    assert formatters.format_snake_case("  Hello, Big World! ") == "hello_big_world"


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1048576, "1 MB"),
        (1234567, "1.18 MB"),
        (1024**5, "1024 TB"),
    ],
)
def test_format_bytes(size, expected):
    assert formatters.format_bytes(size) == expected
    assert formatters.format_file_size(size) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "0:00"), (65, "1:05"), (3600, "1:00:00"), (3725, "1:02:05")],
)
def test_format_duration(seconds, expected):
    assert formatters.format_duration(seconds) == expected


class TestFormatRelativeTime:
    NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=30), "just now"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(hours=2), "2 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=14), "2 weeks ago"),
            (timedelta(days=60), "2 months ago"),
            (timedelta(days=400), "1 year ago"),
            (timedelta(days=800), "2 years ago"),
        ],
    )
    def test_relative_time(self, delta, expected):
        assert formatters.format_relative_time(self.NOW - delta, now=self.NOW) == expected

    def test_accepts_iso_string(self):
        assert (
            formatters.format_relative_time("2025-06-01T09:00:00Z", now=self.NOW)
            == "3 hours ago"
        )

    def test_defaults_to_current_time(self):
        recent = datetime.now() - timedelta(seconds=5)
        assert formatters.format_relative_time(recent) == "just now"


@pytest.mark.parametrize(
    "phone,country,expected",
    [
        ("555-123-4567", "US", "(555) 123-4567"),
        ("+370 668 21177", "LT", "+3 706 682 1177"),
        ("12345", "US", "12345"),
    ],
)
def test_format_phone_number(phone, country, expected):
    assert formatters.format_phone_number(phone, country) == expected


def test_format_credit_card_and_ssn():
    assert formatters.format_credit_card("4111-1111-1111-1111") == "4111 1111 1111 1111"
    assert formatters.format_credit_card("n/a") == "n/a"
    assert formatters.format_ssn("123456789") == "123-45-6789"
    assert formatters.format_ssn("1234") == "1234"


def test_format_address_skips_empty_parts():
    address = {"street": "Gedimino pr. 1", "city": "Vilnius", "state": "", "zip_code": "01103", "country": "LT"}
    assert formatters.format_address(address) == "Gedimino pr. 1, Vilnius, 01103, LT"


class TestFormatList:
    @pytest.mark.parametrize(
        "items,expected",
        [
            ([], ""),
            (["roses"], "roses"),
            (["roses", "tulips"], "roses and tulips"),
            (["roses", "tulips", "lilies"], "roses, tulips, and lilies"),
        ],
    )
    def test_format_list(self, items, expected):
        assert formatters.format_list(items) == expected

    def test_or_conjunction(self):
        assert formatters.format_list(["a", "b", "c"], "or") == "a, b, or c"

    def test_does_not_mutate_input(self):
        items = ["a", "b", "c"]
        formatters.format_list(items)
        assert items == ["a", "b", "c"]


class TestFormatPrice:
    def test_usd_default(self):
        assert formatters.format_price(1234.5) == "$1,234.50"

    def test_always_two_decimals(self):
        assert formatters.format_price(10) == "$10.00"
        assert formatters.format_price(1000, "JPY") == "¥1,000.00"

    def test_locale_specific_format(self):
        formatted = formatters.format_price(10, "EUR", "lt")
        assert "10,00" in formatted
        assert "€" in formatted

    def test_price_range(self):
        assert formatters.format_price_range(10, 20) == "$10.00 - $20.00"

    def test_price_range_collapses_equal_ends(self):
        assert formatters.format_price_range(15, 15) == "$15.00"
