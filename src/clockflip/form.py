"""
Form state for the interactive converter.

Each tab holds one immutable state value. A field change is an event;
reduce(state, event) re-derives the counterpart field and the error text
and returns a new state. Nothing here touches widgets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from ._util import Clock
from .timeparse import (
    convert_12_to_24,
    convert_24_to_12,
    format_time_input,
    get_current_time,
    is_valid_12_hour_format,
    is_valid_24_hour_format,
)
from .timerange import (
    convert_time_range_12_to_24,
    convert_time_range_24_to_12,
    format_time_range_input,
    is_valid_time_range_12,
    is_valid_time_range_24,
    is_valid_time_range_order,
)

ERR_INVALID = "Invalid time format"
ERR_FORMAT_12 = "Use format: HH:MM AM/PM (e.g., 2:30 PM)"
ERR_FORMAT_24 = "Use format: HH:MM (e.g., 14:30)"
ERR_RANGE_FORMAT_12 = "Use format: H:MM AM/PM to H:MM AM/PM (e.g., 9:00 AM to 5:00 PM)"
ERR_RANGE_FORMAT_24 = "Use format: HH:MM to HH:MM (e.g., 09:00 to 17:00)"
ERR_RANGE_ORDER = "End time must be after start time"

# raw input shorter than this is still being typed, so no format error yet
_HINT_AFTER_12 = 3
_HINT_AFTER_24 = 2
_HINT_AFTER_RANGE_12 = 7
_HINT_AFTER_RANGE_24 = 5

PERIODS = ("AM", "PM")
_PERIOD_SUFFIX_RE = re.compile(r"\s*(AM|PM)\s*$", re.IGNORECASE)


# -------------------------
# State
# -------------------------

@dataclass(frozen=True)
class TimeFormState:
    time12: str = ""
    time24: str = ""
    error12: str = ""
    error24: str = ""
    last_updated: str = ""


@dataclass(frozen=True)
class RangeFormState:
    range12: str = ""
    range24: str = ""
    error12: str = ""
    error24: str = ""
    last_updated: str = ""


# -------------------------
# Events
# -------------------------

@dataclass(frozen=True)
class Edit12:
    value: str


@dataclass(frozen=True)
class Edit24:
    value: str


@dataclass(frozen=True)
class SelectPeriod:
    period: str


@dataclass(frozen=True)
class UseCurrentTime:
    pass


@dataclass(frozen=True)
class Clear:
    pass


Event = Edit12 | Edit24 | SelectPeriod | UseCurrentTime | Clear
FormState = TimeFormState | RangeFormState


# -------------------------
# Single time tab
# -------------------------

def _edit_time12(state: TimeFormState, value: str) -> TimeFormState:
    new = replace(state, time12=value, error12="", last_updated="12")
    if value.strip() == "":
        return replace(new, time24="")

    formatted = format_time_input(value, "12")
    if is_valid_12_hour_format(formatted):
        converted = convert_12_to_24(formatted)
        if converted:
            return replace(new, time24=converted)
        return replace(new, error12=ERR_INVALID)
    if len(value) > _HINT_AFTER_12:
        return replace(new, error12=ERR_FORMAT_12)
    return new


def _edit_time24(state: TimeFormState, value: str) -> TimeFormState:
    new = replace(state, time24=value, error24="", last_updated="24")
    if value.strip() == "":
        return replace(new, time12="")

    if is_valid_24_hour_format(value):
        converted = convert_24_to_12(value)
        if converted:
            return replace(new, time12=converted)
        return replace(new, error24=ERR_INVALID)
    if len(value) > _HINT_AFTER_24:
        return replace(new, error24=ERR_FORMAT_24)
    return new


def _with_period(time12: str, period: str) -> str:
    digits = _PERIOD_SUFFIX_RE.sub("", time12.strip())
    return f"{digits} {period}" if digits else ""


def _reduce_time(state: TimeFormState, event: Event, clock: Clock | None) -> TimeFormState:
    if isinstance(event, Edit12):
        return _edit_time12(state, event.value)
    if isinstance(event, Edit24):
        return _edit_time24(state, event.value)
    if isinstance(event, SelectPeriod):
        period = event.period.strip().upper()
        if period not in PERIODS:
            raise ValueError(f"period must be AM or PM (got {event.period!r})")
        return _edit_time12(state, _with_period(state.time12, period))
    if isinstance(event, UseCurrentTime):
        current = get_current_time(clock)
        return TimeFormState(time12=current.time12, time24=current.time24, last_updated="current")
    if isinstance(event, Clear):
        return TimeFormState()
    raise ValueError(f"Unsupported event for time form: {event!r}")


# -------------------------
# Range tab
# -------------------------

def _edit_range12(state: RangeFormState, value: str) -> RangeFormState:
    new = replace(state, range12=value, error12="", last_updated="12")
    if value.strip() == "":
        return replace(new, range24="")

    formatted = format_time_range_input(value, "12")
    if is_valid_time_range_12(formatted):
        if not is_valid_time_range_order(formatted):
            return replace(new, error12=ERR_RANGE_ORDER)
        converted = convert_time_range_12_to_24(formatted)
        if converted:
            return replace(new, range24=converted)
        return replace(new, error12=ERR_INVALID)
    if len(value) > _HINT_AFTER_RANGE_12:
        return replace(new, error12=ERR_RANGE_FORMAT_12)
    return new


def _edit_range24(state: RangeFormState, value: str) -> RangeFormState:
    new = replace(state, range24=value, error24="", last_updated="24")
    if value.strip() == "":
        return replace(new, range12="")

    formatted = format_time_range_input(value, "24")
    if is_valid_time_range_24(formatted):
        if not is_valid_time_range_order(formatted):
            return replace(new, error24=ERR_RANGE_ORDER)
        converted = convert_time_range_24_to_12(formatted)
        if converted:
            return replace(new, range12=converted)
        return replace(new, error24=ERR_INVALID)
    if len(value) > _HINT_AFTER_RANGE_24:
        return replace(new, error24=ERR_RANGE_FORMAT_24)
    return new


def _reduce_range(state: RangeFormState, event: Event) -> RangeFormState:
    if isinstance(event, Edit12):
        return _edit_range12(state, event.value)
    if isinstance(event, Edit24):
        return _edit_range24(state, event.value)
    if isinstance(event, Clear):
        return RangeFormState()
    raise ValueError(f"Unsupported event for range form: {event!r}")


# -------------------------
# Public API
# -------------------------

def reduce(state: FormState, event: Event, clock: Clock | None = None) -> FormState:
    if isinstance(state, TimeFormState):
        return _reduce_time(state, event, clock)
    if isinstance(state, RangeFormState):
        return _reduce_range(state, event)
    raise ValueError(f"Unsupported form state: {state!r}")


def field_status(value: str, error: str, fmt: str, is_range: bool = False) -> bool:
    """Green-tick indicator: empty fields count as valid."""
    if value == "":
        return True
    if error:
        return False
    if is_range:
        formatted = format_time_range_input(value, fmt)
        ok = is_valid_time_range_12(formatted) if fmt == "12" else is_valid_time_range_24(formatted)
    elif fmt == "12":
        ok = is_valid_12_hour_format(format_time_input(value, "12"))
    else:
        ok = is_valid_24_hour_format(value)
    return ok


def conversion_direction(state: FormState) -> tuple[str, str]:
    if state.last_updated == "12":
        return "12-Hour", "24-Hour"
    if state.last_updated == "24":
        return "24-Hour", "12-Hour"
    return "Current Time", "Both Formats"
