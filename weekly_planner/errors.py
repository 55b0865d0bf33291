"""Exceptions raised by the scheduling engine and its adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weekly_planner.schema import Activity


class PlannerError(Exception):
    """Base class for every planner failure."""


class ValidationError(PlannerError, ValueError):
    """Input rejected before any mutation took place."""


class InvalidDayError(ValidationError):
    pass


class InvalidTimeError(ValidationError):
    pass


class UnknownCategoryError(ValidationError):
    pass


class InvalidDurationError(ValidationError):
    pass


class EmptyTitleError(ValidationError):
    pass


class TimeConflictError(ValidationError):
    """The candidate interval overlaps an existing activity on the same day."""

    def __init__(self, conflicting: Activity):
        self.conflicting = conflicting
        super().__init__(
            f"Time conflict with '{conflicting.title}' "
            f"({conflicting.day.value} {conflicting.start_time})"
        )


class ActivityNotFoundError(PlannerError, LookupError):
    def __init__(self, activity_id: str):
        self.activity_id = activity_id
        super().__init__(f"Activity not found: {activity_id}")


class PersistenceError(PlannerError):
    """Reading or writing the schedule document failed; the cause is chained."""
