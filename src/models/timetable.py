"""
Data models for time entries and the day-grouped time table.

Inputs use TypedDict since they arrive as plain dictionaries (JSON exports,
API bodies). The derived time table is built once and never mutated, so it
is modelled with frozen dataclasses holding tuples.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import NotRequired, TypedDict

ProjectId = int | str


class DetailedReportItem(TypedDict):
    """Single tracked interval from a detailed time report."""
    start: datetime | str
    end: datetime | str
    description: str
    project_id: ProjectId | None


class Project(TypedDict):
    """Project directory entry."""
    id: ProjectId
    color: NotRequired[str | None]


@dataclass(frozen=True)
class TimeTableEntry:
    """Display-ready entry: formatted range plus resolved project color."""
    time_range: str
    description: str
    project_id: ProjectId | None
    color: str


@dataclass(frozen=True)
class TimeTableDay:
    """All entries that started on one calendar date."""
    date: str
    entries: tuple[TimeTableEntry, ...] = ()


@dataclass(frozen=True)
class TimeTableWeek:
    """Day buckets in the order their dates were first seen."""
    days: tuple[TimeTableDay, ...] = ()

    @property
    def entry_count(self) -> int:
        return sum(len(day.entries) for day in self.days)

    def to_dict(self) -> dict:
        """Plain dict/list form, ready for JSON."""
        return {
            "days": [
                {
                    "date": day["date"],
                    "entries": list(day["entries"]),
                }
                for day in asdict(self)["days"]
            ]
        }
