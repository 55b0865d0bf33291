import pytest

from weekly_planner.categories import CategoryRegistry


def test_defaults_in_insertion_order():
    registry = CategoryRegistry()
    keys = [c.key for c in registry.list()]
    assert keys == ["work", "personal", "health", "study", "leisure", "meeting", "exercise"]
    assert registry.get("health").name == "Health"
    assert registry.get("work").color == "#3B82F6"
    assert registry.contains("meeting")
    assert "nope" not in registry
    assert registry.get("nope") is None


def test_register_adds_and_updates_in_place():
    registry = CategoryRegistry()
    registry.register("music", "Music", "#000000")
    assert registry.list()[-1].key == "music"
    assert len(registry) == 8

    registry.register("work", "Job", "#111111")
    assert registry.list()[0].name == "Job"
    assert len(registry) == 8


def test_register_rejects_blank_key():
    registry = CategoryRegistry()
    with pytest.raises(ValueError):
        registry.register("  ", "Blank", "#fff")


def test_display_name_falls_back_to_key():
    registry = CategoryRegistry()
    assert registry.display_name("study") == "Study"
    assert registry.display_name("unknown") == "unknown"
