from muh2log.logs import event_catalog


def test_bundled_templates_loaded():
    event_catalog.reload_event_templates()
    templates = event_catalog.EVENT_TEMPLATES
    assert templates[("parser", "unrecognized_line")] == "unrecognized line #{line_number}: '{text}'"
    assert ("app", "load_error") not in templates


def test_missing_file(tmp_path):
    event_catalog.reload_event_templates(tmp_path / "absent.json")
    assert event_catalog.EVENT_TEMPLATES == {("app", "load_error"): "Event templates file missing"}


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    event_catalog.reload_event_templates(path)
    assert event_catalog.EVENT_TEMPLATES[("app", "load_error")].startswith(
        "Failed to load event templates"
    )


def test_non_string_entries_ignored(tmp_path):
    path = tmp_path / "mixed.json"
    path.write_text('{"a": {"ok": "fine", "bad": 3}, "b": "nope"}', encoding="utf-8")
    event_catalog.reload_event_templates(path)
    assert event_catalog.EVENT_TEMPLATES == {("a", "ok"): "fine"}
