"""Codec for the fixed-width ``YYYYMMDDTHHMMSSZ`` timestamps of the stream."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from timewarrior_report.errors import FormatError

_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2})(?P<minute>[0-9]{2})(?P<second>[0-9]{2})Z"
)


def parse_timestamp(text: str) -> datetime:
    """Parse ``text`` into an aware UTC datetime.

    The whole string must match; ``strptime`` is avoided because it accepts
    unpadded fields.
    """
    if not isinstance(text, str):
        raise FormatError(f"timestamp must be a string, got {type(text).__name__}")
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(f"timestamp {text!r} does not match YYYYMMDDTHHMMSSZ")
    parts = {name: int(value) for name, value in match.groupdict().items()}
    try:
        return datetime(tzinfo=timezone.utc, **parts)
    except ValueError as exc:
        raise FormatError(f"timestamp {text!r} is out of range: {exc}") from exc


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None or value.utcoffset() is None:
        raise FormatError("timestamp must be timezone-aware")
    if value.microsecond:
        raise FormatError("timestamp cannot carry sub-second precision")
    utc = value.astimezone(timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{utc.year:04d}{utc.month:02d}{utc.day:02d}"
        f"T{utc.hour:02d}{utc.minute:02d}{utc.second:02d}Z"
    )
