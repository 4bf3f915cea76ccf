"""Ranges like '9:00 AM to 5:00 PM' or '09:00 to 17:00'."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ._util import _minutes_since_midnight
from .timeparse import (
    convert_12_to_24,
    convert_24_to_12,
    format_time_input,
    is_valid_12_hour_format,
    is_valid_24_hour_format,
)

RANGE_SEPARATOR = " to "

_SPLIT_RE = re.compile(r"\s+to\s+", re.IGNORECASE)
# "9:00-17:00", "9:00 – 17:00", "9:00 TO 17:00", "9:00   to 17:00"
_LOOSE_SEPARATOR_RE = re.compile(r"\s*[-–—]\s*|\s+to\s+", re.IGNORECASE)


@dataclass(frozen=True)
class TimeRange:
    start_time: str
    end_time: str


def parse_time_range(value: object) -> TimeRange | None:
    """
    Split '<start> to <end>' into its two parts.
    Returns None unless there are exactly two non-empty parts.
    The parts are not validated.
    """
    if not value or not isinstance(value, str):
        return None

    parts = [p.strip() for p in _SPLIT_RE.split(value.strip())]
    if len(parts) != 2 or not all(parts):
        return None
    return TimeRange(start_time=parts[0], end_time=parts[1])


def is_valid_time_range_12(value: object) -> bool:
    r = parse_time_range(value)
    if r is None:
        return False
    return is_valid_12_hour_format(r.start_time) and is_valid_12_hour_format(r.end_time)


def is_valid_time_range_24(value: object) -> bool:
    r = parse_time_range(value)
    if r is None:
        return False
    return is_valid_24_hour_format(r.start_time) and is_valid_24_hour_format(r.end_time)


def _to_minutes(time24: str) -> int:
    hours, minutes = time24.strip().split(":")
    return _minutes_since_midnight(int(hours), int(minutes))


def is_valid_time_range_order(value: object) -> bool:
    """
    True iff the end is strictly later than the start on the same day.
    Works on either format; the start decides which one is assumed.
    Ranges that cross midnight are never in order.
    """
    r = parse_time_range(value)
    if r is None:
        return False

    if is_valid_12_hour_format(r.start_time):
        start24 = convert_12_to_24(r.start_time)
        end24 = convert_12_to_24(r.end_time)
    elif is_valid_24_hour_format(r.start_time):
        start24 = r.start_time
        end24 = r.end_time if is_valid_24_hour_format(r.end_time) else None
    else:
        return False

    if start24 is None or end24 is None:
        return False

    return _to_minutes(end24) > _to_minutes(start24)


def convert_time_range_12_to_24(value: object) -> str | None:
    """'9:00 AM to 5:00 PM' -> '09:00 to 17:00'. Order is not checked."""
    if not is_valid_time_range_12(value):
        return None
    r = parse_time_range(value)
    if r is None:
        return None

    start = convert_12_to_24(r.start_time)
    end = convert_12_to_24(r.end_time)
    if start is None or end is None:
        return None
    return f"{start}{RANGE_SEPARATOR}{end}"


def convert_time_range_24_to_12(value: object) -> str | None:
    """'14:30 to 15:30' -> '2:30 PM to 3:30 PM'. Order is not checked."""
    if not is_valid_time_range_24(value):
        return None
    r = parse_time_range(value)
    if r is None:
        return None

    start = convert_24_to_12(r.start_time)
    end = convert_24_to_12(r.end_time)
    if start is None or end is None:
        return None
    return f"{start}{RANGE_SEPARATOR}{end}"


def format_time_range_input(value: object, fmt: str) -> str:
    """
    Lenient cleanup of a typed range before validation.
    Dashes and loosely spaced 'to' become ' to '; with fmt "12" each
    endpoint also goes through format_time_input. Does not validate.
    """
    if not value or not isinstance(value, str):
        return ""

    cleaned = _LOOSE_SEPARATOR_RE.sub(RANGE_SEPARATOR, value.strip())

    if fmt == "12":
        parts = cleaned.split(RANGE_SEPARATOR)
        if len(parts) == 2:
            cleaned = RANGE_SEPARATOR.join(format_time_input(p, "12") for p in parts)

    return cleaned
