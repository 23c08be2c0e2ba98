"""Timestamp formatting and parsing for the wire formats AWS uses."""

import calendar
from datetime import datetime, timezone
from email.utils import formatdate
from typing import Union

from botocore.utils import parse_timestamp as _botocore_parse_timestamp

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%S"


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to be UTC; aware values are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_iso8601(value: datetime) -> str:
    """Format as ``yyyy-MM-ddTHH:mm:ss.SSSZ`` in UTC."""
    value = as_utc(value)
    return f"{value.strftime(ISO8601_FORMAT)}.{value.microsecond // 1000:03d}Z"


def format_rfc822(value: datetime) -> str:
    """Format as an RFC 822 date, as used in HTTP headers."""
    return formatdate(to_epoch_seconds(value), usegmt=True)


def to_epoch_seconds(value: datetime) -> Union[int, float]:
    """Seconds since the epoch, with millisecond precision."""
    value = as_utc(value)
    seconds = calendar.timegm(value.timetuple()) + value.microsecond / 1_000_000
    seconds = round(seconds, 3)
    return int(seconds) if seconds.is_integer() else seconds


def parse_timestamp(value: Union[str, int, float]) -> datetime:
    """
    Parse epoch seconds, ISO 8601 or RFC 822 into a UTC datetime.

    Raises:
        ValueError: If the value is not a recognised timestamp
    """
    return _botocore_parse_timestamp(value).astimezone(timezone.utc)
