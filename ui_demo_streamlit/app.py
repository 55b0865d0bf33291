"""Streamlit demo UI for weekly-planner."""

from __future__ import annotations

from typing import Any

from weekly_planner.adapters.json_adapter import JsonStore
from weekly_planner.config import load_config
from weekly_planner.errors import PlannerError
from weekly_planner.grid import grid_rows, occupancy_matrix, short_title
from weekly_planner.organizer import WeeklyOrganizer
from weekly_planner.schema import Weekday
from weekly_planner.stats import category_breakdown, day_breakdown
from weekly_planner.timeslots import format_duration, generate_half_hour_slots


def _grid_table(organizer: WeeklyOrganizer) -> list[dict[str, Any]]:
    table = []
    for slot, cells in grid_rows(organizer.get_all_activities()):
        row = {"Time": slot}
        for day in Weekday:
            activity = cells[day]
            row[day.value] = short_title(activity.title) if activity else ""
        table.append(row)
    return table


def _occupancy_table(organizer: WeeklyOrganizer) -> list[dict[str, Any]]:
    matrix = occupancy_matrix(organizer.get_all_activities())
    return [
        {"Time": slot, **{day.value: f"{matrix[i, day.position] * 100:.0f}%" for day in Weekday}}
        for i, slot in enumerate(generate_half_hour_slots())
    ]


def build_report(organizer: WeeklyOrganizer) -> dict[str, Any]:
    """Collect everything the page shows into a UI-friendly payload."""

    stats = organizer.compute_stats()
    return {
        "activity_count": stats.activity_count,
        "total_time": format_duration(stats.total_time),
        "grid": _grid_table(organizer),
        "occupancy": _occupancy_table(organizer),
        "by_category": [
            {"Category": name, "Time": format_duration(hours), "Share": f"{pct:.1f}%"}
            for name, hours, pct in category_breakdown(stats, organizer.categories)
        ],
        "by_day": [
            {"Day": day, "Time": format_duration(hours), "Share": f"{pct:.1f}%"}
            for day, hours, pct in day_breakdown(stats)
        ],
    }


def main() -> None:
    import streamlit as st

    config = load_config()
    st.set_page_config(page_title="Weekly Planner Demo", layout="wide")
    st.title("Weekly Planner: Streamlit Demo")

    organizer = WeeklyOrganizer.open(JsonStore(config.data_file))
    if organizer.load_error is not None:
        st.warning(f"Starting with an empty schedule: {organizer.load_error}")

    with st.sidebar:
        st.header("Add activity")
        with st.form("add_activity"):
            title = st.text_input("Title")
            category = st.selectbox(
                "Category",
                options=[c.key for c in organizer.categories.list()],
                format_func=organizer.categories.display_name,
            )
            day = st.selectbox("Day", options=[d.value for d in Weekday])
            start = st.selectbox("Start", options=generate_half_hour_slots(), index=6)
            duration = st.number_input("Duration (hours)", min_value=0.5, max_value=8.0, value=1.0, step=0.5)
            location = st.text_input("Location (optional)")
            description = st.text_area("Description (optional)")
            submitted = st.form_submit_button("Add", type="primary")

    if submitted:
        try:
            organizer.add_activity(title, category, day, start, duration, location=location, description=description)
        except PlannerError as exc:
            st.error(f"Input error: {exc}")
        else:
            st.success(f"Added '{title.strip()}' on {day} at {start}.")
            if organizer.last_save_error is not None:
                st.warning(f"Not saved to disk: {organizer.last_save_error}")

    report = build_report(organizer)

    st.subheader("A) Weekly Grid")
    st.table(report["grid"])

    st.subheader("B) Slot Occupancy")
    st.table(report["occupancy"])

    st.subheader("C) Statistics")
    c1, c2 = st.columns(2)
    c1.metric("Activities", report["activity_count"])
    c2.metric("Total time", report["total_time"])
    s1, s2 = st.columns(2)
    s1.write("**By category**")
    s1.table(report["by_category"])
    s2.write("**By day**")
    s2.table(report["by_day"])


if __name__ == "__main__":
    main()
