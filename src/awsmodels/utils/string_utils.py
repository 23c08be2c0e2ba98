"""Conversions between wire strings and python values."""

import base64
from datetime import datetime
from decimal import Decimal
from typing import Optional

from awsmodels.utils.date_utils import format_iso8601

UTF8 = "utf-8"
COMMA_SEPARATOR = ","


def to_integer(value: str) -> int:
    return int(value.strip())


def to_string(value: str) -> str:
    return str(value)


def to_boolean(value: str) -> bool:
    """Only a case-insensitive ``true`` is true."""
    return value.strip().lower() == "true"


def to_big_integer(value: str) -> int:
    return int(value)


def to_big_decimal(value: str) -> Decimal:
    return Decimal(value)


def to_bytes(value: str) -> bytes:
    """Decode base64 text."""
    return base64.b64decode(value)


def from_integer(value: int) -> str:
    return str(int(value))


def from_long(value: int) -> str:
    return str(int(value))


def from_byte(value: int) -> str:
    """
    Format a signed 8-bit value.

    Raises:
        ValueError: If the value does not fit in a byte
    """
    if not -128 <= value <= 127:
        raise ValueError(f"Value out of byte range: {value}")
    return str(int(value))


def from_string(value: str) -> str:
    return value


def from_boolean(value: bool) -> str:
    return "true" if value else "false"


def from_big_integer(value: int) -> str:
    return str(value)


def from_big_decimal(value: Decimal) -> str:
    return str(value)


def from_float(value: float) -> str:
    return repr(float(value))


def from_double(value: float) -> str:
    return repr(float(value))


def from_date(value: datetime) -> str:
    return format_iso8601(value)


def from_bytes(value: bytes) -> str:
    """Encode bytes as base64 text."""
    return base64.b64encode(value).decode("ascii")


def replace(original: str, part_to_match: str, replacement: str) -> str:
    """Replace every occurrence; replaced text is never rescanned."""
    if not part_to_match:
        return original
    return original.replace(part_to_match, replacement)


def join(joiner: str, *parts: str) -> str:
    return joiner.join(parts)


def trim(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


def is_null_or_empty(value: Optional[str]) -> bool:
    return not value
