"""Weekly time aggregation."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from weekly_planner.categories import CategoryRegistry
from weekly_planner.schema import Activity, Weekday, WeeklyStats


def compute_stats(activities: Iterable[Activity]) -> WeeklyStats:
    """Sum durations overall, per category key and per day label."""

    total = 0.0
    count = 0
    by_category: dict[str, float] = defaultdict(float)
    by_day: dict[str, float] = defaultdict(float)

    for activity in activities:
        total += activity.duration
        by_category[activity.category] += activity.duration
        by_day[activity.day.value] += activity.duration
        count += 1

    return WeeklyStats(
        total_time=total,
        by_category=dict(by_category),
        by_day=dict(by_day),
        activity_count=count,
    )


def percentage(part: float, total: float) -> float:
    if total == 0:
        return 0.0
    return part / total * 100.0


def category_breakdown(stats: WeeklyStats, registry: CategoryRegistry) -> list[tuple[str, float, float]]:
    """Rows of (display name, hours, percent), largest share first."""

    ranked = sorted(stats.by_category.items(), key=lambda item: (-item[1], item[0]))
    return [
        (registry.display_name(key), hours, percentage(hours, stats.total_time))
        for key, hours in ranked
    ]


def day_breakdown(stats: WeeklyStats) -> list[tuple[str, float, float]]:
    """Rows of (day, hours, percent) for all seven days, in week order."""

    rows = []
    for day in Weekday:
        hours = stats.by_day.get(day.value, 0.0)
        rows.append((day.value, hours, percentage(hours, stats.total_time)))
    return rows
