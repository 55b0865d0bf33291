import json

import pytest

from weekly_planner.adapters.csv_adapter import export, to_rows
from weekly_planner.adapters.json_adapter import JsonStore
from weekly_planner.errors import PersistenceError
from weekly_planner.organizer import WeeklyOrganizer


def populated(store=None):
    organizer = WeeklyOrganizer(store=store)
    organizer.categories.register("music", "Music", "#123456")
    organizer.add_activity("Piano, scales", "music", "Thursday", "19:00", 0.75, location="Home, studio")
    organizer.add_activity("Standup", "meeting", "Monday", "09:00", 0.5, description="daily")
    return organizer


def test_json_round_trip(tmp_path):
    store = JsonStore(tmp_path / "week.json")
    organizer = populated(store)

    snapshot = store.load()
    assert snapshot.activities == organizer.get_all_activities()[::-1]
    assert snapshot.registry == organizer.categories
    assert snapshot.registry.get("music").color == "#123456"


def test_json_document_shape(tmp_path):
    path = tmp_path / "week.json"
    populated(JsonStore(path))
    document = json.loads(path.read_text(encoding="utf-8"))
    assert set(document) == {"activities", "categories"}
    assert document["categories"]["work"] == {"name": "Work", "color": "#3B82F6"}
    first = document["activities"][0]
    assert first["day"] == "Thursday"
    assert first["duration"] == 0.75
    assert first["description"] is None


def test_open_reloads_saved_state(tmp_path):
    store = JsonStore(tmp_path / "week.json")
    original = populated(store)
    reopened = WeeklyOrganizer.open(store)
    assert reopened.load_error is None
    assert reopened.get_all_activities() == original.get_all_activities()


def test_json_load_missing_file(tmp_path):
    with pytest.raises(PersistenceError):
        JsonStore(tmp_path / "missing.json").load()


def test_json_load_malformed(tmp_path):
    path = tmp_path / "week.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PersistenceError):
        JsonStore(path).load()


def test_json_load_invalid_record(tmp_path):
    path = tmp_path / "week.json"
    payload = {
        "activities": [
            {
                "id": "x",
                "title": "Bad",
                "category": "work",
                "day": "Someday",
                "start_time": "09:00",
                "duration": 1,
                "created_at": "2025-01-01T09:00:00",
            }
        ],
        "categories": {},
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(PersistenceError, match="Activity 1"):
        JsonStore(path).load()


def test_open_degrades_on_malformed_document(tmp_path):
    path = tmp_path / "week.json"
    path.write_text("[]", encoding="utf-8")
    organizer = WeeklyOrganizer.open(JsonStore(path))
    assert len(organizer) == 0
    assert organizer.load_error is not None


def test_save_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonStore(blocker / "week.json")
    with pytest.raises(PersistenceError):
        store.save([], WeeklyOrganizer().categories)


def test_to_rows_flattens_free_text():
    rows = to_rows(populated().get_all_activities())
    assert [row["title"] for row in rows] == ["Standup", "Piano; scales"]
    piano = rows[1]
    assert piano["location"] == "Home; studio"
    assert piano["description"] == ""
    assert piano["duration"] == "0.75"
    assert len(piano["created_at"]) == len("YYYY-MM-DD HH:MM:SS")


def test_csv_export(tmp_path):
    path = tmp_path / "week.csv"
    count = export(populated().get_all_activities(), str(path))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert count == 2
    assert lines[0] == "id,title,category,day,start_time,duration,location,description,created_at"
    assert all(len(line.split(",")) == 9 for line in lines)
    assert ",Piano; scales,music,Thursday,19:00,0.75,Home; studio,," in lines[2]


def write_single_activity(path, **overrides):
    record = {
        "id": "x",
        "title": "Stored",
        "category": "work",
        "day": "Monday",
        "start_time": "09:00",
        "duration": 1,
        "created_at": "2025-01-01T09:00:00",
    }
    record.update(overrides)
    path.write_text(json.dumps({"activities": [record], "categories": {}}), encoding="utf-8")


@pytest.mark.parametrize(
    "overrides",
    [
        {"start_time": "9am"},
        {"start_time": "24:00"},
        {"duration": -5},
        {"duration": 0},
        {"duration": 20},
    ],
)
def test_json_load_rejects_out_of_range_records(tmp_path, overrides):
    path = tmp_path / "week.json"
    write_single_activity(path, **overrides)
    with pytest.raises(PersistenceError, match="Activity 1"):
        JsonStore(path).load()


def test_open_with_bad_start_time_falls_back_and_accepts_new_activities(tmp_path):
    path = tmp_path / "week.json"
    write_single_activity(path, start_time="9am")
    organizer = WeeklyOrganizer.open(JsonStore(path))
    assert organizer.load_error is not None
    assert len(organizer) == 0

    organizer.add_activity("Valid", "work", "Monday", "14:00", 1)
    assert len(organizer) == 1


def test_csv_export_writes_raw_text_without_escaping(tmp_path):
    organizer = WeeklyOrganizer()
    organizer.add_activity('Say "hi" C:\\dir', "work", "Monday", "09:00", 1, description="a, b")
    path = tmp_path / "week.csv"
    export(organizer.get_all_activities(), str(path))
    line = path.read_text(encoding="utf-8").splitlines()[1]
    assert ',Say "hi" C:\\dir,work,Monday,09:00,1,,a; b,' in line
