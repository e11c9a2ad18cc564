"""
Date and Time utilities

This module handles XMLTV date parsing and the normalisation of query windows.
Centralizes all date parsing logic so channel, programme and CLI code agree on
the same semantics.
"""
from datetime import datetime, timezone
from typing import Optional
import logging
import re

logger = logging.getLogger(__name__)

# YYYYMMDDhhmmss or any leading substring of it (at least the year), optionally
# followed by a numeric offset. Textual zones such as 'BST' never match.
XMLTV_DATE_PATTERN = re.compile(r"(?P<digits>[0-9]{4,14})(\s(?P<offset>[+-]*[0-9]{1,4}))?")

COMPLETE_DATE = "20000101000000"
DEFAULT_OFFSET = "+0000"

MIN_DATE = datetime.min.replace(tzinfo=timezone.utc)


class InvalidDateError(ValueError):
    """Raised when a value does not look like an XMLTV date"""
    pass


class DateFormatError(ValueError):
    """Raised when date format is invalid"""
    pass


def _pad_digits(digits: str) -> str:
    """Pad a partial date out to 14 characters so 2016061509 becomes 20160615090000"""
    if len(digits) < len(COMPLETE_DATE):
        return digits + COMPLETE_DATE[len(digits):]
    return digits


def match_xmltv_date(value: str) -> tuple[str, Optional[str]]:
    """
    Split an XMLTV date into its padded digit run and raw offset

    Args:
        value: XMLTV date like '200007281733' or '19880523083000 +0300'

    Returns:
        Tuple of (14 digit date component, offset or None)

    Raises:
        InvalidDateError: If the value does not match the XMLTV date shape
    """
    match = XMLTV_DATE_PATTERN.fullmatch(value or "")
    if match is None:
        raise InvalidDateError(f"Invalid XMLTV date: '{value}'")

    return _pad_digits(match.group("digits")), match.group("offset") or None


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an XMLTV date into a timezone-aware datetime

    All XMLTV dates are 'YYYYMMDDhhmmss' or some initial substring of it,
    optionally followed by a timezone offset. If no explicit offset is given,
    UTC is assumed.

    Args:
        value: XMLTV date like '200209' or '19880523083000 +0300'

    Returns:
        Timezone-aware datetime, or None if the value can't be parsed
    """
    if not value:
        return None

    try:
        date_component, raw_offset = match_xmltv_date(value)
    except InvalidDateError:
        logger.debug(f"Ignoring unparsable XMLTV date: {value!r}")
        return None

    # Only +HHMM / -HHMM offsets are usable, anything else is parsed as UTC
    offset = None
    if raw_offset is not None and len(raw_offset) == 5:
        offset = f"{raw_offset[:3]}:{raw_offset[3:]}"

    try:
        if offset is None:
            parsed = datetime.strptime(date_component, "%Y%m%d%H%M%S")
            return parsed.replace(tzinfo=timezone.utc)
        return datetime.strptime(f"{date_component} {offset}", "%Y%m%d%H%M%S %z")
    except ValueError:
        logger.debug(f"Ignoring out of range XMLTV date: {value!r}")
        return None


def standardise_date(value: Optional[str]) -> str:
    """
    Rewrite an XMLTV date as '<14 digits> <offset>'

    Unlike parse_date this never fails: malformed input falls back to the
    default date and a '+0000' offset.
    """
    date_component = ""
    offset = DEFAULT_OFFSET

    try:
        date_component, raw_offset = match_xmltv_date(value or "")
        offset = raw_offset or DEFAULT_OFFSET
    except InvalidDateError:
        pass

    return f"{_pad_digits(date_component)} {offset}"


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _normalize_iso8601_string(date_str: str) -> str:
    """Normalize ISO8601 string by replacing 'Z' with '+00:00'"""
    return date_str.replace('Z', '+00:00') if date_str.endswith('Z') else date_str


def parse_iso8601_to_utc(date_str: str) -> datetime:
    """
    Parse ISO8601 date string and convert to UTC datetime

    Args:
        date_str: ISO8601 datetime string (e.g., '2025-10-09T00:00:00Z' or '2025-10-09T00:00:00+01:00')

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        DateFormatError: If the date string format is invalid
    """
    try:
        normalized = _normalize_iso8601_string(date_str)
        return ensure_utc(datetime.fromisoformat(normalized))
    except (ValueError, AttributeError) as e:
        raise DateFormatError(f"Invalid ISO8601 datetime format: '{date_str}'") from e
