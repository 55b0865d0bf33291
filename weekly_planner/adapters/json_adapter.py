"""JSON persistence for the whole schedule document."""

from __future__ import annotations

import json
import math
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

from weekly_planner.categories import CategoryRegistry
from weekly_planner.errors import InvalidTimeError, PersistenceError
from weekly_planner.organizer import MAX_DURATION_HOURS
from weekly_planner.schema import Activity, Weekday
from weekly_planner.timeslots import parse_time

_REQUIRED_FIELDS = ("id", "title", "category", "day", "start_time", "duration", "created_at")


@dataclass
class Snapshot:
    """Everything a schedule document holds."""

    activities: list[Activity]
    registry: CategoryRegistry


def _dump_activity(activity: Activity) -> dict:
    return {
        "id": activity.id,
        "title": activity.title,
        "category": activity.category,
        "day": activity.day.value,
        "start_time": activity.start_time,
        "duration": activity.duration,
        "location": activity.location,
        "description": activity.description,
        "created_at": activity.created_at.isoformat(),
    }


def _optional_str(item: dict, key: str):
    value = item.get(key)
    return str(value) if value else None


def _parse_activity(item: dict, index: int) -> Activity:
    if not isinstance(item, dict):
        raise ValueError(f"Activity {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Activity {index}: missing required fields {missing}")

    try:
        day = Weekday(item["day"])
    except ValueError as exc:
        raise ValueError(f"Activity {index}: invalid day '{item['day']}'") from exc

    try:
        created_at = datetime.fromisoformat(str(item["created_at"]))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Activity {index}: malformed created_at") from exc

    try:
        duration = float(item["duration"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Activity {index}: invalid duration") from exc
    if math.isnan(duration) or not 0 < duration <= MAX_DURATION_HOURS:
        raise ValueError(f"Activity {index}: duration {duration:g} outside (0, {MAX_DURATION_HOURS:g}] hours")

    start_time = str(item["start_time"])
    try:
        parse_time(start_time)
    except InvalidTimeError as exc:
        raise ValueError(f"Activity {index}: {exc}") from exc

    return Activity(
        id=str(item["id"]),
        title=str(item["title"]),
        category=str(item["category"]),
        day=day,
        start_time=start_time,
        duration=duration,
        location=_optional_str(item, "location"),
        description=_optional_str(item, "description"),
        created_at=created_at,
    )


def _parse_categories(payload, registry: CategoryRegistry) -> None:
    if not isinstance(payload, dict):
        raise ValueError("categories must be an object keyed by category key")
    for key, meta in payload.items():
        if not isinstance(meta, dict):
            raise ValueError(f"Category '{key}': expected an object")
        registry.register(key, meta.get("name", ""), meta.get("color", ""))


class JsonStore:
    """Reads and writes ``{"activities": [...], "categories": {...}}`` documents."""

    def __init__(self, path):
        self.path = Path(path)

    def save(self, activities: Iterable[Activity], registry: CategoryRegistry) -> None:
        document = {
            "activities": [_dump_activity(activity) for activity in activities],
            "categories": {c.key: {"name": c.name, "color": c.color} for c in registry.list()},
        }
        text = json.dumps(document, indent=2, ensure_ascii=False)

        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(f"Could not write {self.path}: {exc}") from exc

    def load(self) -> Snapshot:
        """Parse the document, layering stored categories over the defaults."""

        try:
            with open(self.path, encoding="utf-8") as handle:
                payload = json.load(handle)
        except OSError as exc:
            raise PersistenceError(f"Could not read {self.path}: {exc}") from exc
        except ValueError as exc:
            raise PersistenceError(f"Malformed JSON in {self.path}: {exc}") from exc

        try:
            if not isinstance(payload, dict):
                raise ValueError("JSON payload must be an object")
            items = payload.get("activities", [])
            if not isinstance(items, list):
                raise ValueError("activities must be a list of objects")

            registry = CategoryRegistry()
            _parse_categories(payload.get("categories", {}), registry)
            activities = [_parse_activity(item, i) for i, item in enumerate(items, start=1)]
        except ValueError as exc:
            raise PersistenceError(f"Invalid schedule document {self.path}: {exc}") from exc

        return Snapshot(activities=activities, registry=registry)
