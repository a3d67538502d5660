"""Tests for loading detailed report and project exports."""

import json

import pytest

from services.toggl import (
    load_detailed_report,
    load_projects,
    normalize_project,
    normalize_report_item,
)


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_detailed_report_from_list(tmp_path):
    path = write_json(
        tmp_path / "report.json",
        [
            {
                "start": "2024-01-01T09:00:00",
                "end": "2024-01-01T09:30:00",
                "description": "A",
                "project_id": 1,
            }
        ],
    )

    assert load_detailed_report(path) == [
        {
            "start": "2024-01-01T09:00:00",
            "end": "2024-01-01T09:30:00",
            "description": "A",
            "project_id": 1,
        }
    ]


def test_load_detailed_report_from_data_envelope(tmp_path):
    path = write_json(
        tmp_path / "report.json",
        {
            "total_count": 1,
            "data": [
                {
                    "id": 99,
                    "pid": 5,
                    "start": "2024-01-01T09:00:00+01:00",
                    "stop": "2024-01-01T10:00:00+01:00",
                    "description": None,
                }
            ],
        },
    )

    (item,) = load_detailed_report(path)
    assert item == {
        "start": "2024-01-01T09:00:00+01:00",
        "end": "2024-01-01T10:00:00+01:00",
        "description": "",
        "project_id": 5,
    }


def test_project_id_takes_precedence_over_pid():
    item = normalize_report_item(
        {"start": "s", "end": "e", "description": "d", "project_id": 1, "pid": 2}
    )
    assert item["project_id"] == 1


def test_missing_project_id_is_none():
    item = normalize_report_item({"start": "s", "end": "e"})
    assert item["project_id"] is None
    assert item["description"] == ""


def test_load_projects(tmp_path):
    path = write_json(
        tmp_path / "projects.json",
        {
            "data": [
                {"id": 1, "name": "Client work", "color": "#ff0000"},
                {"id": 2, "name": "Admin", "hex_color": "#00ff00"},
                {"id": 3, "name": "Unstyled"},
            ]
        },
    )

    assert load_projects(path) == [
        {"id": 1, "color": "#ff0000"},
        {"id": 2, "color": "#00ff00"},
        {"id": 3, "color": None},
    ]


def test_normalize_project_prefers_color():
    assert normalize_project({"id": 1, "color": "#123456", "hex_color": "#abcdef"}) == {
        "id": 1,
        "color": "#123456",
    }


@pytest.mark.parametrize("payload", [{"items": []}, {"data": {"id": 1}}, "text", 42])
def test_unexpected_payload_raises_value_error(tmp_path, payload):
    path = write_json(tmp_path / "bad.json", payload)
    with pytest.raises(ValueError, match="bad.json"):
        load_detailed_report(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_projects(tmp_path / "missing.json")


def test_running_timer_raises_value_error(tmp_path):
    path = write_json(
        tmp_path / "report.json",
        [{"id": 42, "start": "2024-01-01T09:00:00", "stop": None, "description": "still going"}],
    )
    with pytest.raises(ValueError, match="42"):
        load_detailed_report(path)


@pytest.mark.parametrize("description", ["", "0", " "])
def test_description_is_copied_verbatim(description):
    item = normalize_report_item({"start": "s", "end": "e", "description": description})
    assert item["description"] == description
