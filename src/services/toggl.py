"""
Loading of exported detailed time reports and project lists.

Exports are JSON files holding either a bare list of records or an object
with a "data" list. Older exports name some fields differently (pid, stop,
hex_color); records are normalized to the keys the time table expects.
"""

import json
from pathlib import Path

from models.timetable import DetailedReportItem, Project


def _read_records(path: Path) -> list[dict]:
    """Read the record list from a JSON export."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("data")

    if not isinstance(payload, list):
        raise ValueError(
            f"{path}: expected a list of records or an object with a 'data' list"
        )
    return payload


def normalize_report_item(item: dict) -> DetailedReportItem:
    """Map a raw report record onto start/end/description/project_id."""
    project_id = item.get("project_id")
    if project_id is None:
        project_id = item.get("pid")

    end = item.get("end")
    if end is None:
        end = item.get("stop")
    if end is None:
        # Running timers are exported with a null stop
        raise ValueError(
            f"Report item {item.get('id')!r} starting {item['start']} has no end time"
        )

    description = item.get("description")

    return {
        "start": item["start"],
        "end": end,
        "description": "" if description is None else description,
        "project_id": project_id,
    }


def normalize_project(project: dict) -> Project:
    """Map a raw project record onto id/color."""
    color = project.get("color")
    if not color:
        color = project.get("hex_color")
    return {"id": project["id"], "color": color}


def load_detailed_report(path: Path) -> list[DetailedReportItem]:
    """
    Load report items from a detailed report export.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no record list, or an item has no end
            time (a timer that was still running at export)
    """
    return [normalize_report_item(item) for item in _read_records(Path(path))]


def load_projects(path: Path) -> list[Project]:
    """
    Load the project directory from a projects export.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no record list
    """
    return [normalize_project(project) for project in _read_records(Path(path))]
