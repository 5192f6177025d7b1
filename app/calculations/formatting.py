"""
Display Formatting

Deterministic, locale-independent conversions of amounts, percentages and
enum values into display strings.
"""

import re
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]

STATUS_LABELS = {
    "completed": "Completed",
    "in_progress": "In Progress",
    "pending": "Pending",
}


def _round(amount: Number, places: str) -> Decimal:
    """Round half away from zero to the exponent given by ``places``."""
    return Decimal(str(amount)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def format_currency(amount: Optional[Number]) -> str:
    """
    Format an amount as whole dollars with thousands separators.

    Examples:
        1234567 -> "$1,234,567"
        None -> "$0"
        -2500 -> "$-2,500"
    """
    if amount is None:
        return "$0"
    return f"${int(_round(amount, '1')):,}"


def format_currency_short(amount: Optional[Number]) -> str:
    """
    Format an amount compactly.

    Millions keep one decimal ("$1.5M"), thousands keep none ("$8K"), and
    anything smaller, negative amounts included, is printed as given
    ("$500", "$-138000").
    """
    if amount is None:
        return "$0"
    if amount >= 1_000_000:
        return f"${_round(Decimal(str(amount)) / 1_000_000, '0.1')}M"
    if amount >= 1_000:
        return f"${_round(Decimal(str(amount)) / 1_000, '1')}K"
    return f"${amount}"


def format_percent(value: Optional[Number], decimals: int = 2) -> str:
    """Format a percentage value (6.0 -> "6.00%")."""
    if value is None:
        value = 0
    places = "1" if decimals == 0 else "0." + "0" * (decimals - 1) + "1"
    return f"{_round(value, places)}%"


def status_label(status) -> str:
    """Human label for a renovation status; unknown values pass through."""
    key = getattr(status, "value", status)
    return STATUS_LABELS.get(key, key)


def priority_label(priority) -> str:
    key = getattr(priority, "value", priority)
    return key[:1].upper() + key[1:]


def property_count_label(count: int) -> str:
    return f"{count} propert{'y' if count == 1 else 'ies'}"


def greeting(now: datetime) -> str:
    """Time-of-day greeting for the dashboard header."""
    if now.hour < 12:
        return "Good Morning"
    if now.hour < 17:
        return "Good Afternoon"
    return "Good Evening"


def parse_whole_amount(text: Optional[str]) -> Optional[int]:
    """
    Read a whole amount from typed input, ignoring everything but digits.

    "$285,000" -> 285000; "" -> None.
    """
    digits = re.sub(r"[^0-9]", "", text or "")
    return int(digits) if digits else None
