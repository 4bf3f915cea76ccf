"""Tests for the single-time validators and converters in timeparse."""

from __future__ import annotations

from datetime import datetime

import pytest

from clockflip.timeparse import (
    CurrentTime,
    convert_12_to_24,
    convert_24_to_12,
    format_time_input,
    get_current_time,
    is_valid_12_hour_format,
    is_valid_24_hour_format,
)


def _clock(hour: int, minute: int):
    return lambda: datetime(2026, 2, 25, hour, minute, 42)


# ---- is_valid_12_hour_format ----


@pytest.mark.parametrize("value", ["2:30 PM", "02:30 PM", "12:00 AM", "11:59 pm", "1:05am", "  9:15 AM  "])
def test_valid_12_hour(value):
    assert is_valid_12_hour_format(value) is True


@pytest.mark.parametrize(
    "value",
    ["", None, 230, "13:00 AM", "0:30 AM", "3:60 PM", "3:5 PM", "2:30", "2:30  PM", "2:30 PM extra", "14:30"],
)
def test_invalid_12_hour(value):
    assert is_valid_12_hour_format(value) is False


# ---- is_valid_24_hour_format ----


@pytest.mark.parametrize("value", ["00:00", "0:00", "9:30", "09:30", "14:30", "23:59", " 17:00 "])
def test_valid_24_hour(value):
    assert is_valid_24_hour_format(value) is True


@pytest.mark.parametrize("value", ["", None, 1430, "25:00", "24:00", "12:60", "14:3", "2:30 PM", "14:30\n5"])
def test_invalid_24_hour(value):
    assert is_valid_24_hour_format(value) is False


# ---- convert_12_to_24 ----


def test_midnight_12_to_24():
    assert convert_12_to_24("12:00 AM") == "00:00"


def test_noon_12_to_24():
    assert convert_12_to_24("12:00 PM") == "12:00"


def test_pm_adds_twelve():
    assert convert_12_to_24("2:30 PM") == "14:30"


def test_am_unchanged_and_padded():
    assert convert_12_to_24("9:05 AM") == "09:05"


def test_lowercase_designator():
    assert convert_12_to_24("11:45 pm") == "23:45"


def test_designator_without_space():
    assert convert_12_to_24("2:30PM") == "14:30"


def test_12_to_24_invalid_returns_none():
    assert convert_12_to_24("13:00 PM") is None
    assert convert_12_to_24(None) is None
    assert convert_12_to_24("") is None


# ---- convert_24_to_12 ----


def test_midnight_24_to_12():
    assert convert_24_to_12("00:00") == "12:00 AM"


def test_noon_24_to_12():
    assert convert_24_to_12("12:00") == "12:00 PM"


def test_afternoon_24_to_12():
    assert convert_24_to_12("14:30") == "2:30 PM"


def test_morning_hour_not_padded():
    assert convert_24_to_12("09:05") == "9:05 AM"


def test_single_digit_hour_input():
    assert convert_24_to_12("7:15") == "7:15 AM"


def test_24_to_12_invalid_returns_none():
    assert convert_24_to_12("25:00") is None
    assert convert_24_to_12("2:30 PM") is None
    assert convert_24_to_12(None) is None


def test_round_trip_every_minute():
    for h in range(24):
        for m in range(60):
            t = f"{h:02d}:{m:02d}"
            assert convert_12_to_24(convert_24_to_12(t)) == t


# ---- format_time_input ----


def test_format_empty():
    assert format_time_input("", "12") == ""
    assert format_time_input(None, "12") == ""


def test_format_appends_am():
    assert format_time_input("2:30", "12") == "2:30 AM"


def test_format_inserts_space():
    assert format_time_input("2:30pm", "12") == "2:30 PM"


def test_format_trims_and_uppercases():
    assert format_time_input("  2:30 pm ", "12") == "2:30 PM"


def test_format_24_leaves_digits_alone():
    assert format_time_input(" 14:30 ", "24") == "14:30"


def test_format_does_not_validate():
    assert format_time_input("99:99", "12") == "99:99 AM"
    assert is_valid_12_hour_format(format_time_input("99:99", "12")) is False


@pytest.mark.parametrize("value", ["2:30", "2:30pm", "2:30 PM", "12:00am", "garbage"])
def test_format_idempotent(value):
    once = format_time_input(value, "12")
    assert format_time_input(once, "12") == once


# ---- get_current_time ----


def test_current_time_afternoon():
    assert get_current_time(_clock(14, 5)) == CurrentTime(time12="2:05 PM", time24="14:05")


def test_current_time_midnight():
    result = get_current_time(_clock(0, 0))
    assert result.time24 == "00:00"
    assert result.time12 == "12:00 AM"


def test_current_time_default_clock():
    result = get_current_time()
    assert is_valid_24_hour_format(result.time24)
    assert convert_24_to_12(result.time24) == result.time12


def test_current_time_matches_converter_every_hour():
    for h in range(24):
        result = get_current_time(_clock(h, 7))
        assert result.time24 == f"{h:02d}:07"
        assert result.time12 == convert_24_to_12(result.time24)
