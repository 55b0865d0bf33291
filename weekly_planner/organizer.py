"""Scheduling engine: the single gateway for schedule mutations."""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from weekly_planner.categories import CategoryRegistry
from weekly_planner.conflicts import find_conflict
from weekly_planner.errors import (
    ActivityNotFoundError,
    EmptyTitleError,
    InvalidDayError,
    InvalidDurationError,
    PersistenceError,
    TimeConflictError,
    UnknownCategoryError,
)
from weekly_planner.schema import DAY_ORDER, Activity, WeeklyStats
from weekly_planner.stats import compute_stats
from weekly_planner.timeslots import parse_day, parse_time

logger = logging.getLogger(__name__)

MAX_DURATION_HOURS = 8.0


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _coerce_duration(duration) -> float:
    if isinstance(duration, bool):
        raise InvalidDurationError(f"Invalid duration: {duration!r}")
    try:
        hours = float(duration)
    except (TypeError, ValueError) as exc:
        raise InvalidDurationError(f"Invalid duration: {duration!r}") from exc
    if math.isnan(hours) or not 0 < hours <= MAX_DURATION_HOURS:
        raise InvalidDurationError(
            f"Duration must be greater than 0 and at most {MAX_DURATION_HOURS:g} hours, got {duration!r}"
        )
    return hours


class WeeklyOrganizer:
    """Owns the activity store and the category registry.

    Every mutation validates first and mutates second, so a rejected call leaves
    the schedule untouched. When a ``store`` is given, each successful mutation
    is written through to it; a failed write is logged and kept in
    ``last_save_error`` but never rolls the mutation back.
    """

    def __init__(
        self,
        registry: Optional[CategoryRegistry] = None,
        activities: Iterable[Activity] = (),
        store=None,
    ):
        self._registry = registry if registry is not None else CategoryRegistry()
        self._activities: list[Activity] = list(activities)
        self._store = store
        self.last_save_error: Optional[PersistenceError] = None
        self.load_error: Optional[PersistenceError] = None

    @classmethod
    def open(cls, store) -> "WeeklyOrganizer":
        """Load the schedule from ``store``, starting empty if that fails."""

        try:
            snapshot = store.load()
        except PersistenceError as exc:
            logger.warning("Could not load existing data, starting with an empty schedule: %s", exc)
            organizer = cls(store=store)
            organizer.load_error = exc
            return organizer

        logger.info("Loaded %d activities", len(snapshot.activities))
        return cls(registry=snapshot.registry, activities=snapshot.activities, store=store)

    @property
    def categories(self) -> CategoryRegistry:
        return self._registry

    def __len__(self) -> int:
        return len(self._activities)

    # -- validation --------------------------------------------------------

    def _validated(self, candidate: Activity, exclude_id: Optional[str] = None) -> Activity:
        day = parse_day(candidate.day)
        parse_time(candidate.start_time)
        if not self._registry.contains(candidate.category):
            raise UnknownCategoryError(f"Category '{candidate.category}' does not exist")
        duration = _coerce_duration(candidate.duration)
        title = (candidate.title or "").strip()
        if not title:
            raise EmptyTitleError("Title cannot be empty")

        conflicting = find_conflict(self._activities, day, candidate.start_time, duration, exclude_id=exclude_id)
        if conflicting is not None:
            raise TimeConflictError(conflicting)

        return replace(candidate, day=day, duration=duration, title=title)

    def _index_of(self, activity_id: str) -> int:
        for index, activity in enumerate(self._activities):
            if activity.id == activity_id:
                return index
        raise ActivityNotFoundError(activity_id)

    # -- persistence -------------------------------------------------------

    def save(self) -> None:
        if self._store is None:
            return
        self._store.save(self._activities, self._registry)

    def _persist(self) -> None:
        try:
            self.save()
        except PersistenceError as exc:
            logger.warning("Error saving data: %s", exc)
            self.last_save_error = exc
        else:
            self.last_save_error = None

    # -- mutations ---------------------------------------------------------

    def add_activity(
        self,
        title: str,
        category: str,
        day,
        start_time: str,
        duration: float,
        location: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Validate and append a new activity, returning its id."""

        candidate = Activity(
            id=str(uuid.uuid4()),
            title=title,
            category=category,
            day=day,
            start_time=start_time,
            duration=duration,
            location=_optional_text(location),
            description=_optional_text(description),
            created_at=datetime.now().astimezone(),
        )
        activity = self._validated(candidate)
        self._activities.append(activity)
        logger.info("Added activity %s '%s' on %s at %s", activity.id, activity.title, activity.day.value, activity.start_time)

        self._persist()
        return activity.id

    def edit_activity(
        self,
        activity_id: str,
        *,
        title: Optional[str] = None,
        category: Optional[str] = None,
        day=None,
        start_time: Optional[str] = None,
        duration: Optional[float] = None,
        location: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Activity:
        """Apply the supplied fields to an activity, all or nothing.

        ``None`` keeps the current value. For ``location`` and ``description``
        an empty string clears the field.
        """

        index = self._index_of(activity_id)
        current = self._activities[index]

        changes = {
            "title": title,
            "category": category,
            "day": day,
            "start_time": start_time,
            "duration": duration,
        }
        merged = replace(current, **{name: value for name, value in changes.items() if value is not None})
        if location is not None:
            merged = replace(merged, location=_optional_text(location))
        if description is not None:
            merged = replace(merged, description=_optional_text(description))

        updated = self._validated(merged, exclude_id=current.id)
        self._activities[index] = updated
        logger.info("Edited activity %s", activity_id)

        self._persist()
        return updated

    def remove_activity(self, activity_id: str) -> Activity:
        index = self._index_of(activity_id)
        removed = self._activities.pop(index)
        logger.info("Removed activity %s '%s'", removed.id, removed.title)

        self._persist()
        return removed

    # -- queries -----------------------------------------------------------

    def get_activity(self, activity_id: str) -> Optional[Activity]:
        for activity in self._activities:
            if activity.id == activity_id:
                return activity
        return None

    def get_activities_by_day(self, day) -> list[Activity]:
        """Activities on ``day`` by start time; empty for an unknown day."""

        try:
            day = parse_day(day)
        except InvalidDayError:
            return []
        return sorted((a for a in self._activities if a.day == day), key=lambda a: a.start_time)

    def get_all_activities(self) -> list[Activity]:
        return sorted(
            self._activities,
            key=lambda a: (DAY_ORDER.get(a.day, len(DAY_ORDER)), a.start_time),
        )

    def search_activities(self, query: str) -> list[Activity]:
        needle = query.lower()

        def matches(activity: Activity) -> bool:
            fields = (activity.title, activity.category, activity.location, activity.description)
            return any(value is not None and needle in value.lower() for value in fields)

        return [activity for activity in self._activities if matches(activity)]

    def compute_stats(self) -> WeeklyStats:
        return compute_stats(self._activities)
