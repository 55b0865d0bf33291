"""Core data schema for the weekly planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Weekday(str, Enum):
    """The seven canonical days of the planning week, in display order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def position(self) -> int:
        return DAY_ORDER[self]

    def __str__(self) -> str:
        return self.value


DAY_ORDER = {day: position for position, day in enumerate(Weekday)}


@dataclass(frozen=True)
class Category:
    """Display metadata for a category key."""

    key: str
    name: str
    color: str


@dataclass(frozen=True)
class Activity:
    """A time-boxed activity placed on one day of the week."""

    id: str
    title: str
    category: str
    day: Weekday
    start_time: str
    duration: float
    location: Optional[str]
    description: Optional[str]
    created_at: datetime


@dataclass
class WeeklyStats:
    """Aggregate hours for the current schedule."""

    total_time: float = 0.0
    by_category: dict[str, float] = field(default_factory=dict)
    by_day: dict[str, float] = field(default_factory=dict)
    activity_count: int = 0
