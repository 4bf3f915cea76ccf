"""Shared low-level helpers used by the library, form and cli."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def _now_local() -> datetime:
    return datetime.now().astimezone()


def _minutes_since_midnight(hour: int, minute: int) -> int:
    return hour * 60 + minute
