"""This module contains utility functions for formatting text, numbers, dates and prices."""

import re
from datetime import datetime, timezone
from typing import Literal, Mapping, Optional, Sequence, Union

from babel.numbers import format_currency

BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_text(text: str, max_length: Optional[int] = None) -> str:
    """Truncate text to max_length characters, appending an ellipsis when cut.

    Examples:

        format_text("Hello world", 5)
        Output: "Hello..."
    """
    if max_length and len(text) > max_length:
        return text[:max_length] + "..."
    return text


def format_title_case(text: str) -> str:
    """Capitalize the first letter of each space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def format_camel_case(text: str) -> str:
    """Convert text to camelCase, treating any non-alphanumeric run as a separator."""
    return re.sub(
        r"[^a-zA-Z0-9]+(.)", lambda match: match.group(1).upper(), text.lower()
    )


def format_snake_case(text: str) -> str:
    """Convert text to snake_case, trimming leading and trailing separators."""
    return re.sub(r"[^a-zA-Z0-9]+", "_", text.lower()).strip("_")


def format_bytes(size: Union[int, float]) -> str:
    """Format a byte count using 1024 based units.

    Args:
        size (int | float): Number of bytes.

    Returns:
        str: Human readable size with at most two decimals, e.g. "1.5 KB".
    """
    if size <= 0:
        return "0 Bytes"

    index = 0
    value = float(size)
    while value >= 1024 and index < len(BYTE_UNITS) - 1:
        value /= 1024
        index += 1
    amount = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{amount} {BYTE_UNITS[index]}"


def format_file_size(size: Union[int, float]) -> str:
    return format_bytes(size)


def format_duration(seconds: int) -> str:
    """Format seconds as H:MM:SS, or M:SS when under an hour."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def _parse_datetime(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_relative_time(
    date: Union[datetime, str], now: Optional[datetime] = None
) -> str:
    """Describe how long ago a moment was, e.g. "3 hours ago".

    Args:
        date (datetime | str): The moment, as a datetime or an ISO 8601 string.
        now (datetime, optional): Reference time. Defaults to the current time
            in the same awareness (naive or UTC) as date.

    Returns:
        str: "just now" under a minute, otherwise minutes, hours, days, weeks,
        months (30 days) or years (365 days) ago.
    """
    target = _parse_datetime(date)
    if now is None:
        now = datetime.now(timezone.utc) if target.tzinfo else datetime.now()

    seconds = int((now - target).total_seconds())
    if seconds < 60:
        return "just now"

    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    days = hours // 24
    if days < 7:
        return _plural(days, "day")

    weeks = days // 7
    if weeks < 4:
        return _plural(weeks, "week")

    months = days // 30
    if months < 12:
        return _plural(months, "month")

    return _plural(days // 365, "year")


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def format_phone_number(phone: str, country: str = "US") -> str:
    """Format a phone number.

    US numbers with ten digits become "(XXX) XXX-XXXX"; any other number with
    at least ten digits becomes "+X XXX XXX XXXX". Shorter input is returned
    unchanged.
    """
    digits = _digits(phone)
    if country == "US" and len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) >= 10:
        return f"+{digits[:1]} {digits[1:4]} {digits[4:7]} {digits[7:11]}"
    return phone


def format_credit_card(card_number: str) -> str:
    digits = _digits(card_number)
    if not digits:
        return card_number
    return " ".join(digits[i : i + 4] for i in range(0, len(digits), 4))


def format_ssn(ssn: str) -> str:
    digits = _digits(ssn)
    if len(digits) == 9:
        return f"{digits[:3]}-{digits[3:5]}-{digits[5:]}"
    return ssn


ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


def format_address(address: Mapping[str, Optional[str]]) -> str:
    """Join the non-empty address parts in street, city, state, zip, country order."""
    return ", ".join(
        address[field] for field in ADDRESS_FIELDS if address.get(field)
    )


def format_list(
    items: Sequence[str], conjunction: Literal["and", "or"] = "and"
) -> str:
    """Join items as an English list: "a, b, and c".

    The input sequence is not modified.
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def format_price(price: float, currency: str = "USD", locale: str = "en") -> str:
    """Format a price with CLDR currency rules and exactly two decimals.

    Examples:

        format_price(1234.5)
        Output: "$1,234.50"
    """
    return format_currency(price, currency, locale=locale, currency_digits=False)


def format_price_range(
    min_price: float,
    max_price: float,
    currency: str = "USD",
    locale: str = "en",
) -> str:
    """Format a price range, collapsing to a single price when both ends match."""
    if min_price == max_price:
        return format_price(min_price, currency, locale)
    return (
        f"{format_price(min_price, currency, locale)} - "
        f"{format_price(max_price, currency, locale)}"
    )
