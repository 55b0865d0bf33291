"""Demo script for weekly-planner."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from weekly_planner.errors import TimeConflictError
from weekly_planner.grid import render_grid, render_stats
from weekly_planner.organizer import WeeklyOrganizer


def main() -> None:
    organizer = WeeklyOrganizer()
    organizer.add_activity("Standup", "meeting", "Monday", "09:00", 0.5)
    try:
        organizer.add_activity("Review", "meeting", "Monday", "09:15", 0.5)
    except TimeConflictError as exc:
        print("Rejected:", exc)
    organizer.add_activity("Review", "meeting", "Monday", "09:30", 0.5)
    organizer.add_activity("Deep work", "work", "Monday", "10:00", 2.5, location="Office")
    organizer.add_activity("Gym", "exercise", "Wednesday", "18:00", 1.5)

    print("Monday:", [(a.title, a.start_time) for a in organizer.get_activities_by_day("Monday")])
    print(render_grid(organizer.get_all_activities()))
    print(render_stats(organizer.compute_stats(), organizer.categories))


if __name__ == "__main__":
    main()
