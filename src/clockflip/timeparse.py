from __future__ import annotations

import re
from dataclasses import dataclass

from ._util import Clock, _now_local

_TIME_12_RE = re.compile(r"(0?[1-9]|1[0-2]):([0-5][0-9])\s?(AM|PM)", re.IGNORECASE)
_TIME_24_RE = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")

_TRAILING_PERIOD_RE = re.compile(r"\s?(AM|PM)$")
_GLUED_PERIOD_RE = re.compile(r"([0-9])(AM|PM)")


@dataclass(frozen=True)
class CurrentTime:
    time12: str
    time24: str


def _match_12(value: object) -> re.Match[str] | None:
    if not value or not isinstance(value, str):
        return None
    return _TIME_12_RE.fullmatch(value.strip())


def _match_24(value: object) -> re.Match[str] | None:
    if not value or not isinstance(value, str):
        return None
    return _TIME_24_RE.fullmatch(value.strip())


def is_valid_12_hour_format(value: object) -> bool:
    """True for 'H:MM AM' / 'HH:MM pm' style strings (hour 1-12)."""
    return _match_12(value) is not None


def is_valid_24_hour_format(value: object) -> bool:
    """True for 'H:MM' / 'HH:MM' strings with hour 0-23."""
    return _match_24(value) is not None


def convert_12_to_24(time12: object) -> str | None:
    """
    '2:30 PM' -> '14:30'
    '12:05 AM' -> '00:05'
    Returns None when time12 is not a valid 12-hour time.
    """
    m = _match_12(time12)
    if not m:
        return None

    hour = int(m.group(1))
    minutes = m.group(2)
    period = m.group(3).upper()

    if period == "AM":
        if hour == 12:
            hour = 0
    elif hour != 12:
        hour += 12

    return f"{hour:02d}:{minutes}"


def convert_24_to_12(time24: object) -> str | None:
    """
    '14:30' -> '2:30 PM'
    '00:00' -> '12:00 AM'
    The hour is never zero-padded. Returns None when time24 is not valid.
    """
    m = _match_24(time24)
    if not m:
        return None

    return _format_12(int(m.group(1)), m.group(2))


def _format_12(hour24: int, minutes: str) -> str:
    hour12 = hour24
    period = "AM"
    if hour24 == 0:
        hour12 = 12
    elif hour24 == 12:
        period = "PM"
    elif hour24 > 12:
        hour12 = hour24 - 12
        period = "PM"

    return f"{hour12}:{minutes} {period}"


def format_time_input(value: object, fmt: str) -> str:
    """
    Lenient cleanup of raw keyboard input, before validation.
      - trims and uppercases
      - fmt "12": appends " AM" when no designator is present,
        and puts a space between the digits and the designator
    Does not validate; check the result with is_valid_12_hour_format.
    """
    if not value or not isinstance(value, str):
        return ""

    cleaned = value.strip().upper()

    if fmt == "12":
        if not _TRAILING_PERIOD_RE.search(cleaned):
            cleaned += " AM"
        cleaned = _GLUED_PERIOD_RE.sub(r"\1 \2", cleaned, count=1)

    return cleaned


def get_current_time(clock: Clock | None = None) -> CurrentTime:
    # the only read of the system clock in the library
    now = (clock or _now_local)()
    time24 = f"{now.hour:02d}:{now.minute:02d}"
    return CurrentTime(time12=_format_12(now.hour, f"{now.minute:02d}"), time24=time24)
