"""Wall-clock parsing, half-hour slots and duration formatting."""

from __future__ import annotations

import math
import re

from weekly_planner.errors import InvalidDayError, InvalidTimeError
from weekly_planner.schema import Weekday

GRID_START_MIN = 6 * 60
GRID_END_MIN = 22 * 60 + 30
SLOT_MINUTES = 30

_HHMM_RE = re.compile(r"^(\d{2}):(\d{2})$")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_time(value: str) -> int:
    """Parse a strict 24-hour ``HH:MM`` string into minutes since midnight."""

    m = _HHMM_RE.match(value) if isinstance(value, str) else None
    if not m:
        raise InvalidTimeError(f"Invalid time: {value!r} (expected HH:MM)")

    hour = int(m.group(1))
    minute = int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeError(f"Invalid time: {value!r} (out of range)")
    return hour * 60 + minute


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def occupied_interval(start_time: str, duration: float) -> tuple[int, int]:
    """Return the half-open ``[start, end)`` minute interval of an activity."""

    start = parse_time(start_time)
    return start, start + round_half_up(duration * 60)


def generate_half_hour_slots() -> list[str]:
    """Slots shown by the weekly grid: 06:00 through 22:30 inclusive."""

    return [format_minutes(m) for m in range(GRID_START_MIN, GRID_END_MIN + 1, SLOT_MINUTES)]


def format_duration(hours: float) -> str:
    """Render hours as ``30min``, ``1h``, ``2h`` or ``1h 30min``."""

    if hours < 1:
        return f"{round_half_up(hours * 60)}min"
    if hours == 1:
        return "1h"

    whole = int(math.floor(hours))
    minutes = round_half_up((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}min"


def parse_day(value) -> Weekday:
    if isinstance(value, Weekday):
        return value
    label = value.strip() if isinstance(value, str) else value
    try:
        return Weekday(label)
    except ValueError as exc:
        valid = ", ".join(day.value for day in Weekday)
        raise InvalidDayError(f"Invalid day: {value!r}. Use one of: {valid}") from exc
