"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("command-hub.utils")


def parse_date(date_str: str | None, format_string: str = "%Y-%m-%d") -> str:
    """
    Parse a date string from ISO format to a specified format.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string
        format_string: The output format (default: "%Y-%m-%d")

    Returns:
        Formatted date string, empty string if date_str is empty, or the
        original string if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {str(e)}")

    return date_str


def parse_date_human_readable(date_str: str | None) -> str:
    """Parse a date string to a human-readable format (Month Day, Year)."""
    return parse_date(date_str, "%B %d, %Y")


def parse_datetime_human_readable(date_str: str | None) -> str:
    """Parse a timestamp to "Month Day, Year HH:MM" for ticket display."""
    return parse_date(date_str, "%B %d, %Y %H:%M")


def format_jql_date(date_str: str) -> str:
    """
    Normalize a user-supplied date to the ``YYYY-MM-DD`` form JQL expects.

    Raises:
        ValueError: If the value cannot be read as a date
    """
    try:
        return dateutil.parser.parse(date_str).strftime("%Y-%m-%d")
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date '{date_str}': expected YYYY-MM-DD") from e
