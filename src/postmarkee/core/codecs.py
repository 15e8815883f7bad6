"""Field-scoped (de)serialization hooks for Postmark's inbound payload.

Postmark sends the inbound ``Date`` in an RFC 2822 style pattern
(``Fri, 1 Aug 2014 16:45:32 -0400``) and attachment ``Content`` as
base64. Both hooks are attached to individual fields through the
``Annotated`` aliases at the bottom of this module.
"""

from __future__ import annotations

import base64
import binascii
import re
from datetime import UTC, datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_RFC2822_PATTERN = re.compile(
    r"^(?:" + "|".join(_WEEKDAYS) + r"), "
    r"(?P<day>\d{1,2}) (?P<month>" + "|".join(_MONTHS) + r") (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) "
    r"(?P<sign>[+-])(?P<offset_hours>\d{2}):?(?P<offset_minutes>\d{2})$"
)


def parse_rfc2822(value: Any) -> datetime:
    """Parse Postmark's inbound date string into an aware UTC datetime.

    The weekday name is matched but not cross-checked against the date.
    Datetime inputs are normalized to UTC and truncated to whole seconds.

    Raises:
        ValueError: If the string does not follow the pattern or names an
            impossible date, or if the instant falls outside the UTC range
            `datetime` can hold.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        try:
            return value.astimezone(UTC).replace(microsecond=0)
        except OverflowError as e:
            raise ValueError(f"datetime {value!r} is out of range in UTC") from e
    if not isinstance(value, str):
        raise ValueError(f"expected an RFC 2822 date string, got {type(value).__name__}")

    match = _RFC2822_PATTERN.match(value)
    if match is None:
        raise ValueError(f"invalid RFC 2822 date {value!r}")

    offset = timedelta(
        hours=int(match["offset_hours"]),
        minutes=int(match["offset_minutes"]),
    )
    if match["sign"] == "-":
        offset = -offset

    try:
        local = datetime(
            int(match["year"]),
            _MONTHS.index(match["month"]) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone(offset),
        )
        return local.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid RFC 2822 date {value!r}: {e}") from e


def format_rfc2822(value: datetime) -> str:
    """Format a datetime in Postmark's inbound date pattern, always at +0000."""
    utc = value.astimezone(UTC)
    return (
        f"{_WEEKDAYS[utc.weekday()]}, {utc.day} {_MONTHS[utc.month - 1]} "
        f"{utc.year:04d} {utc:%H:%M:%S} +0000"
    )


def decode_base64(value: Any) -> bytes:
    """Decode standard base64 text; raw bytes pass through untouched.

    Raises:
        ValueError: If the text is not valid base64.
    """
    if isinstance(value, bytes | bytearray):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError(f"expected a base64 string, got {type(value).__name__}")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 content: {e}") from e


def encode_base64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


Rfc2822DateTime = Annotated[
    datetime,
    BeforeValidator(parse_rfc2822),
    PlainSerializer(format_rfc2822, return_type=str),
]

Base64Bytes = Annotated[
    bytes,
    BeforeValidator(decode_base64),
    PlainSerializer(encode_base64, return_type=str),
]
