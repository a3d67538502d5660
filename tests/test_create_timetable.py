"""Tests for the create_timetable script and the request log database."""

import json
import sqlite3

from openpyxl import load_workbook

from api.logging import RequestLog, log_request
from core.config import TIMETABLE_SHEET_NAME
from scripts.create_timetable import default_output_path, main
from scripts.init_db import create_database


def write_exports(tmp_path, sample_entries, sample_projects):
    entries_path = tmp_path / "report.json"
    projects_path = tmp_path / "projects.json"
    entries_path.write_text(json.dumps({"data": sample_entries}), encoding="utf-8")
    projects_path.write_text(json.dumps(sample_projects), encoding="utf-8")
    return entries_path, projects_path


def test_json_to_stdout(tmp_path, capsys, sample_entries, sample_projects):
    entries_path, projects_path = write_exports(tmp_path, sample_entries, sample_projects)

    main(entries_path, projects_path, timezone_name="UTC")

    data = json.loads(capsys.readouterr().out)
    assert [day["date"] for day in data["days"]] == ["2024-01-01", "2024-01-02"]
    assert data["days"][0]["entries"][0]["color"] == "#ff0000"


def test_json_to_file_without_projects(tmp_path, sample_entries, sample_projects):
    entries_path, _ = write_exports(tmp_path, sample_entries, sample_projects)
    output_path = tmp_path / "out" / "timetable.json"

    main(entries_path, output_path=output_path, timezone_name="UTC")

    data = json.loads(output_path.read_text(encoding="utf-8"))
    colors = [entry["color"] for day in data["days"] for entry in day["entries"]]
    assert colors == ["#cccccc", "#cccccc"]


def test_xlsx_output(tmp_path, sample_entries, sample_projects):
    entries_path, projects_path = write_exports(tmp_path, sample_entries, sample_projects)
    output_path = tmp_path / "timetable.xlsx"

    week = main(entries_path, projects_path, "xlsx", output_path, "UTC")

    assert len(week.days) == 2
    ws = load_workbook(output_path)[TIMETABLE_SHEET_NAME]
    assert ws.cell(row=2, column=1).value == "2024-01-01"


def test_default_output_path():
    assert default_output_path("2024-01-01").name == "timetable_2024_01_01.xlsx"
    assert default_output_path(None).name == "timetable_empty.xlsx"


def test_request_log_round_trip(tmp_path):
    db_path = tmp_path / "db" / "timetable.db"
    create_database(db_path)

    log = RequestLog(
        endpoint="/v1/timetable",
        method="POST",
        status_code=422,
        error_code="VALIDATION_ERROR",
        entries_received=3,
        details=[("validation_error", "bad timestamp")],
    )
    log_request(log, db_path)

    conn = sqlite3.connect(db_path)
    try:
        row = conn.execute(
            "SELECT endpoint, status_code, entries_received FROM api_requests WHERE request_id = ?",
            (log.request_id,),
        ).fetchone()
        details = conn.execute(
            "SELECT detail_type, message FROM api_request_details WHERE request_id = ?",
            (log.request_id,),
        ).fetchall()
    finally:
        conn.close()

    assert row == ("/v1/timetable", 422, 3)
    assert details == [("validation_error", "bad timestamp")]
