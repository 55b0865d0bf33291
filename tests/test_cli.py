import json

from weekly_planner.cli import main


def run(tmp_path, *argv):
    return main(["--data", str(tmp_path / "week.json"), *argv])


def test_add_list_and_grid(tmp_path, capsys):
    assert run(tmp_path, "add", "Standup", "--category", "meeting", "--day", "Monday", "--start", "09:00", "--duration", "0.5") == 0
    assert run(tmp_path, "list", "--day", "Monday") == 0
    out = capsys.readouterr().out
    assert "Activity created" in out
    assert "Monday at 09:00 (30min)" in out

    assert run(tmp_path, "grid") == 0
    assert "Standup" in capsys.readouterr().out


def test_conflict_reports_error(tmp_path, capsys):
    run(tmp_path, "add", "Standup", "--category", "meeting", "--day", "Monday", "--start", "09:00", "--duration", "0.5")
    code = run(tmp_path, "add", "Review", "--category", "meeting", "--day", "Monday", "--start", "09:15", "--duration", "0.5")
    assert code == 1
    assert "Standup" in capsys.readouterr().err


def test_edit_remove_and_not_found(tmp_path, capsys):
    run(tmp_path, "add", "Gym", "--category", "exercise", "--day", "Friday", "--start", "18:00", "--duration", "1")
    document = json.loads((tmp_path / "week.json").read_text(encoding="utf-8"))
    activity_id = document["activities"][0]["id"]

    assert run(tmp_path, "edit", activity_id, "--start", "19:00") == 0
    document = json.loads((tmp_path / "week.json").read_text(encoding="utf-8"))
    assert document["activities"][0]["start_time"] == "19:00"

    assert run(tmp_path, "remove", activity_id) == 0
    assert run(tmp_path, "remove", activity_id) == 1
    assert "not found" in capsys.readouterr().err


def test_stats_search_export_and_categories(tmp_path, capsys):
    run(tmp_path, "add", "Piano", "--category", "leisure", "--day", "Sunday", "--start", "10:00", "--duration", "1.5")
    assert run(tmp_path, "stats") == 0
    assert "1h 30min" in capsys.readouterr().out

    assert run(tmp_path, "search", "pia") == 0
    assert "Piano" in capsys.readouterr().out

    out_path = tmp_path / "week.csv"
    assert run(tmp_path, "export", "--out", str(out_path)) == 0
    assert out_path.read_text(encoding="utf-8").count("\n") == 2

    assert run(tmp_path, "categories", "--add", "music", "Music", "#123456") == 0
    assert "music" in capsys.readouterr().out
    document = json.loads((tmp_path / "week.json").read_text(encoding="utf-8"))
    assert document["categories"]["music"]["name"] == "Music"
