"""Publish date formatting.

Dates are rendered as "DD Month YYYY" (e.g. "08 January 2026") with English
month names regardless of the process locale.
"""

from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional

from dateutil import parser as dateparser


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(raw: str) -> str:
    """Format a raw date string for display.

    Args:
        raw: Date string as found in the page (ISO 8601, RFC 2822 or
            free text such as "Jan 8, 2026")

    Returns:
        "DD Month YYYY", or raw unchanged if it cannot be parsed
    """
    parsed = _parse_date(raw)
    if parsed is None:
        return raw
    return f"{parsed.day:02d} {MONTH_NAMES[parsed.month - 1]} {parsed.year}"


def _parse_date(raw: str) -> Optional[datetime]:
    value = raw.strip()
    if not value:
        return None

    # Try ISO format (meta tags and <time datetime>)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass

    # Try RFC 2822 format
    try:
        return parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError):
        pass

    # Visible post-date text, e.g. "Jan 8, 2026" or "2024/03/01"
    try:
        return dateparser.parse(value)
    except (ValueError, OverflowError):
        pass

    return None
