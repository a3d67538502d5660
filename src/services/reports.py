"""
Report generation for time tables in JSON and Excel formats.
"""

import io
import json
import re
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from core.config import TIMETABLE_COLUMN_WIDTHS, TIMETABLE_HEADERS, TIMETABLE_SHEET_NAME
from models.timetable import TimeTableWeek

HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def week_to_json(week: TimeTableWeek, indent: int | None = 2) -> str:
    """Serialize a time table to JSON text."""
    return json.dumps(week.to_dict(), indent=indent)


def css_color_to_argb(color: str) -> str | None:
    """
    Convert a CSS hex color to the ARGB string openpyxl expects.

    '#abc' and '#aabbcc' forms are supported. Named colors, rgb() and the
    like return None.
    """
    if not color or not HEX_COLOR_RE.match(color):
        return None
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"FF{digits.upper()}"


def write_text_cell(ws, row: int, column: int, value):
    """
    Write a value so that text comes back as the same text.

    Control characters Excel cannot store are dropped, and strings starting
    with "=" are kept as strings rather than formulas.
    """
    if isinstance(value, str):
        value = ILLEGAL_CHARACTERS_RE.sub("", value)
    cell = ws.cell(row=row, column=column, value=value)
    if isinstance(value, str):
        cell.data_type = "s"
    return cell


def write_timetable_sheet(ws, week: TimeTableWeek):
    """
    Write headers and time table rows to an Excel worksheet.

    One row per entry, grouped by day in time table order. The Color column
    is filled with the entry's project color when it is a hex color.
    """
    # Write headers (row 1)
    for col_idx, header in enumerate(TIMETABLE_HEADERS, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)

    for col_idx, width in enumerate(TIMETABLE_COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    # Write data rows
    row_idx = 2
    for day in week.days:
        for entry in day.entries:
            project_id = "" if entry.project_id is None else entry.project_id
            row_data = [day.date, entry.time_range, entry.description, project_id, entry.color]
            for col_idx, value in enumerate(row_data, start=1):
                write_text_cell(ws, row_idx, col_idx, value)

            argb = css_color_to_argb(entry.color)
            if argb:
                ws.cell(row=row_idx, column=len(row_data)).fill = PatternFill(
                    fill_type="solid", start_color=argb, end_color=argb
                )
            row_idx += 1


def create_timetable_workbook(week: TimeTableWeek) -> Workbook:
    """Create a workbook with a single time table sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = TIMETABLE_SHEET_NAME
    write_timetable_sheet(ws, week)
    return wb


def create_timetable_excel_report(week: TimeTableWeek, output_path: Path):
    """Create the Excel time table report at output_path."""
    wb = create_timetable_workbook(week)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(output_path))
    print(f"Saved Excel time table to: {output_path}")


def timetable_excel_to_bytes(week: TimeTableWeek) -> bytes:
    """Render the Excel time table report in memory."""
    buffer = io.BytesIO()
    create_timetable_workbook(week).save(buffer)
    return buffer.getvalue()
