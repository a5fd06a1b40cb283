"""
Scalar formatting helpers

Converts leaf values into their textual representation, canonicalizes
date-like inputs into timezone-aware datetimes and guesses MIME types for
enclosure and media URLs.
"""

import mimetypes
from datetime import date, datetime, timezone
from email.utils import format_datetime
from typing import Any, Optional
from urllib.parse import urlparse

from dateutil import parser as dateutil_parser

from .exceptions import InvalidDateError


DEFAULT_MIME_TYPE = "application/octet-stream"


def to_timestamp(value: Any, field: Optional[str] = None) -> datetime:
    """
    Convert a date-like value into a canonical timestamp

    Args:
        value: datetime, date, POSIX timestamp (seconds) or a date string
        field: Field name used in error reporting

    Returns:
        Timezone-aware datetime. Naive inputs are taken to be UTC and aware
        datetimes are returned unchanged.

    Raises:
        InvalidDateError: if the value cannot be parsed
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(value, field=field) from e

    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8")

    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value, field=field)

    try:
        parsed = dateutil_parser.parse(value.strip())
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidDateError(value, field=field) from e

    return to_timestamp(parsed, field=field)


def format_value(value: Any) -> Any:
    """
    Convert a leaf value into its textual representation

    Datetimes become RFC 822 strings (``Fri, 31 Oct 2014 18:12:21 +0000``),
    binary payloads are decoded as UTF-8 and every other value is returned
    unchanged.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return format_datetime(value)

    if isinstance(value, date):
        return format_datetime(to_timestamp(value))

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")

    return value


def format_date(value: Any, field: Optional[str] = None) -> str:
    """Canonicalize and format a date-like value"""
    return format_value(to_timestamp(value, field=field))


def detect_mime_type(url: Optional[str]) -> str:
    """Guess the MIME type of a URL or file path from its extension"""
    if not url:
        return DEFAULT_MIME_TYPE

    path = urlparse(str(url)).path or str(url)
    content_type, _ = mimetypes.guess_type(path)
    return content_type or DEFAULT_MIME_TYPE
