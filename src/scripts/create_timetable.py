#!/usr/bin/env python3
"""
Create a day-grouped time table from a detailed time report export.

Reads report items and (optionally) the project directory from JSON
exports, groups entries by day, resolves project colors, and writes the
result as JSON or as an Excel workbook.

Usage:
    uv run python src/scripts/create_timetable.py --entries data/report.json \
        --projects data/projects.json --format xlsx
"""

import argparse
import sys
import traceback
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import OUTPUT_DIR
from services.reports import create_timetable_excel_report, week_to_json
from services.timetable import TimeTableView, get_display_timezone
from services.toggl import load_detailed_report, load_projects


def default_output_path(first_date: str | None) -> Path:
    """Default location for an Excel time table, named after its first day."""
    suffix = first_date.replace("-", "_") if first_date else "empty"
    return OUTPUT_DIR / "timetables" / f"timetable_{suffix}.xlsx"


def main(
    entries_path: Path,
    projects_path: Path | None = None,
    output_format: str = "json",
    output_path: Path | None = None,
    timezone_name: str | None = None,
):
    """Main entry point."""
    try:
        # 1. Load report items and projects
        time_entries = load_detailed_report(entries_path)
        projects = load_projects(projects_path) if projects_path else []
        print(
            f"Loaded {len(time_entries)} entries and {len(projects)} projects",
            file=sys.stderr,
        )

        # 2. Group by day
        tz = get_display_timezone(timezone_name)
        week = TimeTableView(time_entries, projects, tz=tz).render_time_table()
        print(f"Grouped into {len(week.days)} day(s)", file=sys.stderr)

        # 3. Write output
        if output_format == "xlsx":
            first_date = week.days[0].date if week.days else None
            create_timetable_excel_report(
                week, output_path or default_output_path(first_date)
            )
        elif output_path:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(week_to_json(week), encoding="utf-8")
            print(f"Saved JSON time table to: {output_path}", file=sys.stderr)
        else:
            print(week_to_json(week))

        return week

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        traceback.print_exc()
        raise


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate a day-grouped time table")
    parser.add_argument(
        "--entries", required=True, type=Path, help="Detailed report export (JSON)"
    )
    parser.add_argument(
        "--projects",
        type=Path,
        help="Projects export (JSON). Without it every entry gets the default color.",
    )
    parser.add_argument(
        "--format", choices=["json", "xlsx"], default="json", help="Output format"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file. Defaults to stdout for json, output/timetables/ for xlsx.",
    )
    parser.add_argument(
        "--timezone",
        help="IANA timezone for dates and times. Defaults to DISPLAY_TIMEZONE or local time.",
    )
    args = parser.parse_args()

    main(args.entries, args.projects, args.format, args.output, args.timezone)
