"""
Day-grouped time table built from detailed report items.

Entries are bucketed by the calendar date of their start time in the display
timezone, each bucket keeping the input order, and annotated with the color
of their project.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from core.config import (
    DATE_FORMAT,
    DEFAULT_PROJECT_COLOR,
    DISPLAY_TIMEZONE,
    TIME_FORMAT,
    TIME_RANGE_SEPARATOR,
)
from models.timetable import ProjectId, TimeTableDay, TimeTableEntry, TimeTableWeek


def get_display_timezone(name: str | None = None) -> tzinfo | None:
    """
    Resolve the display timezone.

    Args:
        name: IANA zone name. Falls back to DISPLAY_TIMEZONE when None.

    Returns:
        ZoneInfo for the name, or None for the machine's local timezone.

    Raises:
        ZoneInfoNotFoundError: If the name is not a known zone.
    """
    name = DISPLAY_TIMEZONE if name is None else name
    if not name:
        return None
    return ZoneInfo(name)


def parse_instant(value: datetime | str, tz: tzinfo | None = None) -> datetime:
    """
    Parse a timestamp and express it in the display timezone.

    Aware values are converted (tz=None converts to local time). Naive values
    are taken as wall-clock time in the display timezone and left as is.
    Unparseable strings raise whatever datetime.fromisoformat raises.
    """
    instant = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(tz)


def format_date_key(value: datetime | str, tz: tzinfo | None = None) -> str:
    """Format the calendar date of a timestamp as YYYY-MM-DD."""
    return parse_instant(value, tz).strftime(DATE_FORMAT)


def format_time_range(
    start: datetime | str, end: datetime | str, tz: tzinfo | None = None
) -> str:
    """Format start/end as 'HH:MM - HH:MM'."""
    return TIME_RANGE_SEPARATOR.join(
        parse_instant(value, tz).strftime(TIME_FORMAT) for value in (start, end)
    )


def build_color_lookup(projects: Iterable[Mapping]) -> dict[ProjectId, str | None]:
    """
    Index project colors by id. The first project wins for a duplicated id.

    Ids match by dict key equality, so 1, 1.0 and True name the same project.
    """
    lookup: dict[ProjectId, str | None] = {}
    for project in projects:
        lookup.setdefault(project["id"], project.get("color"))
    return lookup


def resolve_project_color(
    project_id: ProjectId | None, color_lookup: Mapping[ProjectId, str | None]
) -> str:
    """Project color, or DEFAULT_PROJECT_COLOR if unknown or empty."""
    return color_lookup.get(project_id) or DEFAULT_PROJECT_COLOR


def group_entries_by_day(
    time_entries: Iterable[Mapping], tz: tzinfo | None = None
) -> dict[str, list[Mapping]]:
    """
    Bucket entries by the date of their start time.

    Buckets come out in the order their dates were first seen and keep the
    relative input order of their entries.
    """
    entries_by_day: dict[str, list[Mapping]] = {}
    for entry in time_entries:
        day = format_date_key(entry["start"], tz)
        entries_by_day.setdefault(day, []).append(entry)
    return entries_by_day


class TimeTableView:
    """Builds the time table once and serves it to the rendering layer."""

    def __init__(
        self,
        time_entries: Iterable[Mapping],
        projects: Iterable[Mapping],
        tz: tzinfo | None = None,
    ):
        self._tz = tz if tz is not None else get_display_timezone()
        self._time_table_week = self._create_time_table_week(time_entries, projects)

    def _create_time_table_week(
        self, time_entries: Iterable[Mapping], projects: Iterable[Mapping]
    ) -> TimeTableWeek:
        color_lookup = build_color_lookup(projects)

        days = []
        for day, entries in group_entries_by_day(time_entries, self._tz).items():
            day_entries = tuple(
                self._create_time_table_entry(entry, color_lookup) for entry in entries
            )
            days.append(TimeTableDay(date=day, entries=day_entries))

        return TimeTableWeek(days=tuple(days))

    def _create_time_table_entry(
        self, entry: Mapping, color_lookup: Mapping[ProjectId, str | None]
    ) -> TimeTableEntry:
        project_id = entry.get("project_id")
        description = entry.get("description")
        return TimeTableEntry(
            time_range=format_time_range(entry["start"], entry["end"], self._tz),
            description="" if description is None else description,
            project_id=project_id,
            color=resolve_project_color(project_id, color_lookup),
        )

    def render_time_table(self) -> TimeTableWeek:
        """Return the time table built at construction."""
        return self._time_table_week
