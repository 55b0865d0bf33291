"""Same-day overlap detection."""

from __future__ import annotations

from typing import Iterable, Optional

from weekly_planner.schema import Activity, Weekday
from weekly_planner.timeslots import occupied_interval


def intervals_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Half-open intervals overlap only when they share at least one minute."""

    return a[0] < b[1] and b[0] < a[1]


def find_conflict(
    activities: Iterable[Activity],
    day: Weekday,
    start_time: str,
    duration: float,
    exclude_id: Optional[str] = None,
) -> Optional[Activity]:
    """Return the activity on ``day`` that overlaps the candidate, if any.

    When several activities overlap, the one starting earliest is reported;
    equal starts keep store order.
    """

    candidate = occupied_interval(start_time, duration)

    found: Optional[Activity] = None
    found_start = None
    for activity in activities:
        if activity.day != day or activity.id == exclude_id:
            continue
        interval = occupied_interval(activity.start_time, activity.duration)
        if not intervals_overlap(candidate, interval):
            continue
        if found is None or interval[0] < found_start:
            found, found_start = activity, interval[0]
    return found
