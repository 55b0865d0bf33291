"""Weekly grid and statistics views for console and UI renderers."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from weekly_planner.categories import CategoryRegistry
from weekly_planner.schema import Activity, Weekday, WeeklyStats
from weekly_planner.stats import category_breakdown, day_breakdown
from weekly_planner.timeslots import (
    GRID_START_MIN,
    SLOT_MINUTES,
    format_duration,
    generate_half_hour_slots,
    occupied_interval,
)

CELL_WIDTH = 12


def grid_rows(activities: Iterable[Activity]) -> list[tuple[str, dict[Weekday, Optional[Activity]]]]:
    """For each half-hour slot, the activity starting exactly there on each day."""

    starts: dict[tuple[Weekday, str], Activity] = {}
    for activity in activities:
        starts.setdefault((activity.day, activity.start_time), activity)

    return [
        (slot, {day: starts.get((day, slot)) for day in Weekday})
        for slot in generate_half_hour_slots()
    ]


def occupancy_matrix(activities: Iterable[Activity]) -> np.ndarray:
    """Fraction of every grid slot (rows) covered on every day (columns)."""

    slots = len(generate_half_hour_slots())
    slot_starts = GRID_START_MIN + SLOT_MINUTES * np.arange(slots)
    slot_ends = slot_starts + SLOT_MINUTES

    matrix = np.zeros((slots, len(Weekday)), dtype=float)
    for activity in activities:
        start, end = occupied_interval(activity.start_time, activity.duration)
        covered = np.clip(np.minimum(slot_ends, end) - np.maximum(slot_starts, start), 0, SLOT_MINUTES)
        matrix[:, activity.day.position] += covered / SLOT_MINUTES

    return np.clip(matrix, 0.0, 1.0)


def short_title(title: str, width: int = CELL_WIDTH) -> str:
    if len(title) > width:
        return f"{title[:width - 3]}..."
    return title


def render_grid(activities: Iterable[Activity]) -> str:
    border = "+" + "-" * 11 + ("+" + "-" * (CELL_WIDTH + 2)) * len(Weekday) + "+"
    header = "| " + "TIME".center(9) + " |" + "".join(f" {day.value:^{CELL_WIDTH}} |" for day in Weekday)

    lines = [border, header, border]
    for slot, cells in grid_rows(activities):
        label = slot if slot.endswith(":00") else ""
        row = "| " + f"{label:^9}" + " |"
        for day in Weekday:
            activity = cells[day]
            text = short_title(activity.title) if activity else ""
            row += f" {text:^{CELL_WIDTH}} |"
        lines.append(row)
        if slot.endswith(":30"):
            lines.append(border)
    return "\n".join(lines)


def render_stats(stats: WeeklyStats, registry: CategoryRegistry) -> str:
    lines = [
        "WEEKLY STATISTICS",
        f"Total activities: {stats.activity_count}",
        f"Total weekly time: {format_duration(stats.total_time)}",
        "",
        "BY CATEGORY",
    ]
    for name, hours, pct in category_breakdown(stats, registry):
        lines.append(f"  {name:20} {format_duration(hours):>12} {pct:>6.1f}%")

    lines += ["", "BY DAY"]
    for day, hours, pct in day_breakdown(stats):
        lines.append(f"  {day:20} {format_duration(hours):>12} {pct:>6.1f}%")
    return "\n".join(lines)
