from weekly_planner.config import DEFAULT_DATA_FILE, PlannerConfig, load_config


def test_defaults_from_empty_environment():
    assert load_config({}) == PlannerConfig()
    assert load_config({}).data_file == DEFAULT_DATA_FILE


def test_environment_overrides():
    config = load_config(
        {
            "WEEKLY_PLANNER_DATA_FILE": "/tmp/plan.json",
            "WEEKLY_PLANNER_EXPORT_FILE": "/tmp/plan.csv",
            "WEEKLY_PLANNER_LOG_LEVEL": "debug",
        }
    )
    assert config.data_file == "/tmp/plan.json"
    assert config.export_file == "/tmp/plan.csv"
    assert config.log_level == "DEBUG"


def test_process_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WEEKLY_PLANNER_DATA_FILE", "env.json")
    assert load_config().data_file == "env.json"
