"""CSV export of the schedule."""

from __future__ import annotations

from typing import Iterable, Optional

from weekly_planner.errors import PersistenceError
from weekly_planner.schema import Activity

FIELDNAMES = [
    "id",
    "title",
    "category",
    "day",
    "start_time",
    "duration",
    "location",
    "description",
    "created_at",
]


def _flatten(value: Optional[str]) -> str:
    # The export format has no quoting, so commas and line breaks cannot appear in a field.
    if not value:
        return ""
    return value.replace(",", ";").replace("\r", " ").replace("\n", " ")


def to_rows(activities: Iterable[Activity]) -> list[dict]:
    """Flatten activities into export rows with comma-free text fields."""

    return [
        {
            "id": activity.id,
            "title": _flatten(activity.title),
            "category": activity.category,
            "day": activity.day.value,
            "start_time": activity.start_time,
            "duration": f"{activity.duration:g}",
            "location": _flatten(activity.location),
            "description": _flatten(activity.description),
            "created_at": activity.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        }
        for activity in activities
    ]


def export(activities: Iterable[Activity], file_path: str) -> int:
    """Write activities to ``file_path`` and return the number of rows written."""

    rows = to_rows(activities)
    try:
        with open(file_path, "w", newline="", encoding="utf-8") as handle:
            handle.write(",".join(FIELDNAMES) + "\n")
            for row in rows:
                handle.write(",".join(row[name] for name in FIELDNAMES) + "\n")
    except OSError as exc:
        raise PersistenceError(f"Could not export to {file_path}: {exc}") from exc
    return len(rows)
