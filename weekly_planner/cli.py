"""Command line front end for the weekly planner."""

from __future__ import annotations

import argparse
import logging
import sys

from weekly_planner.adapters import csv_adapter
from weekly_planner.adapters.json_adapter import JsonStore
from weekly_planner.config import load_config
from weekly_planner.errors import PersistenceError, PlannerError
from weekly_planner.grid import render_grid, render_stats
from weekly_planner.organizer import WeeklyOrganizer
from weekly_planner.schema import Activity
from weekly_planner.timeslots import format_duration

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _format_activity(activity: Activity, organizer: WeeklyOrganizer) -> str:
    lines = [
        f"ID: {activity.id}",
        f"  {activity.title}",
        f"  {activity.day.value} at {activity.start_time} ({format_duration(activity.duration)})",
        f"  Category: {organizer.categories.display_name(activity.category)}",
    ]
    if activity.location:
        lines.append(f"  Location: {activity.location}")
    if activity.description:
        lines.append(f"  Description: {activity.description}")
    return "\n".join(lines)


def _print_activities(activities: list[Activity], organizer: WeeklyOrganizer) -> None:
    if not activities:
        print("No activities found.")
        return
    print("\n\n".join(_format_activity(a, organizer) for a in activities))


def _cmd_add(organizer: WeeklyOrganizer, args) -> None:
    activity_id = organizer.add_activity(
        args.title,
        args.category,
        args.day,
        args.start,
        args.duration,
        location=args.location,
        description=args.description,
    )
    print(f"Activity created. ID: {activity_id}")


def _cmd_list(organizer: WeeklyOrganizer, args) -> None:
    if args.day:
        _print_activities(organizer.get_activities_by_day(args.day), organizer)
    else:
        _print_activities(organizer.get_all_activities(), organizer)


def _cmd_edit(organizer: WeeklyOrganizer, args) -> None:
    organizer.edit_activity(
        args.id,
        title=args.title,
        category=args.category,
        day=args.day,
        start_time=args.start,
        duration=args.duration,
        location=args.location,
        description=args.description,
    )
    print("Activity updated.")


def _cmd_remove(organizer: WeeklyOrganizer, args) -> None:
    removed = organizer.remove_activity(args.id)
    print(f"Removed '{removed.title}'.")


def _cmd_grid(organizer: WeeklyOrganizer, args) -> None:
    print(render_grid(organizer.get_all_activities()))


def _cmd_stats(organizer: WeeklyOrganizer, args) -> None:
    print(render_stats(organizer.compute_stats(), organizer.categories))


def _cmd_search(organizer: WeeklyOrganizer, args) -> None:
    _print_activities(organizer.search_activities(args.query), organizer)


def _cmd_export(organizer: WeeklyOrganizer, args) -> None:
    count = csv_adapter.export(organizer.get_all_activities(), args.out)
    print(f"Exported {count} activities to {args.out}")


def _cmd_categories(organizer: WeeklyOrganizer, args) -> None:
    if args.add:
        key, name, color = args.add
        organizer.categories.register(key, name, color)
        organizer.save()
    for category in organizer.categories.list():
        print(f"{category.key:12} {category.name:16} {category.color}")


def build_parser(config) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Weekly planner with 30-minute slots and conflict checks.")
    ap.add_argument("--data", default=config.data_file, help=f"Schedule JSON file (default: {config.data_file})")
    ap.add_argument("--log-level", default=config.log_level, help=f"Logging level (default: {config.log_level})")
    sub = ap.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add an activity")
    add.add_argument("title")
    add.add_argument("--category", required=True)
    add.add_argument("--day", required=True, help="Monday ... Sunday")
    add.add_argument("--start", required=True, help="Start time HH:MM")
    add.add_argument("--duration", type=float, required=True, help="Hours, e.g. 0.5 or 1.5")
    add.add_argument("--location")
    add.add_argument("--description")
    add.set_defaults(handler=_cmd_add)

    lst = sub.add_parser("list", help="List activities")
    lst.add_argument("--day")
    lst.set_defaults(handler=_cmd_list)

    edit = sub.add_parser("edit", help="Edit an activity; omitted fields are kept")
    edit.add_argument("id")
    edit.add_argument("--title")
    edit.add_argument("--category")
    edit.add_argument("--day")
    edit.add_argument("--start")
    edit.add_argument("--duration", type=float)
    edit.add_argument("--location", help="Empty string clears the location")
    edit.add_argument("--description", help="Empty string clears the description")
    edit.set_defaults(handler=_cmd_edit)

    remove = sub.add_parser("remove", help="Remove an activity")
    remove.add_argument("id")
    remove.set_defaults(handler=_cmd_remove)

    sub.add_parser("grid", help="Show the weekly grid").set_defaults(handler=_cmd_grid)
    sub.add_parser("stats", help="Show weekly statistics").set_defaults(handler=_cmd_stats)

    search = sub.add_parser("search", help="Search title, category, location and description")
    search.add_argument("query")
    search.set_defaults(handler=_cmd_search)

    export = sub.add_parser("export", help="Export activities to CSV")
    export.add_argument("--out", default=config.export_file, help=f"CSV path (default: {config.export_file})")
    export.set_defaults(handler=_cmd_export)

    categories = sub.add_parser("categories", help="List categories")
    categories.add_argument("--add", nargs=3, metavar=("KEY", "NAME", "COLOR"), help="Register a category")
    categories.set_defaults(handler=_cmd_categories)

    return ap


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING), format=LOG_FORMAT)

    organizer = WeeklyOrganizer.open(JsonStore(args.data))
    if organizer.load_error is not None:
        print(f"warning: {organizer.load_error}; starting with an empty schedule", file=sys.stderr)

    try:
        args.handler(organizer, args)
    except (PlannerError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if organizer.last_save_error is not None:
        print(f"warning: changes kept in memory but not saved: {organizer.last_save_error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
