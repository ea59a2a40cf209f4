"""
Analysis window filters.

A filter is resolved to a concrete optional start date by the caller,
once per user interaction. The engine only ever sees the resolved date,
so it never depends on the wall clock.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Union


# Quick-select windows offered by the dashboard, in days
PRESET_WINDOWS = (7, 14, 30, 60, 90, 180, 365)


@dataclass(frozen=True)
class AllRecords:
    """No restriction."""

    def resolve(self, today: dt.date) -> Optional[dt.date]:
        return None


@dataclass(frozen=True)
class Since:
    """Keep records dated on or after `start`."""

    start: dt.date

    def resolve(self, today: dt.date) -> Optional[dt.date]:
        return self.start


@dataclass(frozen=True)
class RollingDays:
    """Keep the trailing `days` days, counted back from `today`."""

    days: int

    def __post_init__(self):
        if self.days <= 0:
            raise ValueError(f"Rolling window must be positive, got {self.days}")

    def resolve(self, today: dt.date) -> Optional[dt.date]:
        return today - dt.timedelta(days=self.days)


RangeFilter = Union[AllRecords, Since, RollingDays]


def parse_range(value: Optional[str]) -> RangeFilter:
    """
    Build a filter from a compact string form.

        None / "" / "all"  → AllRecords
        "30d"              → RollingDays(30)
        "2024-01-01"       → Since(2024-01-01)
    """
    if not value or value == "all":
        return AllRecords()
    if value.endswith("d") and value[:-1].isdigit():
        return RollingDays(int(value[:-1]))
    return Since(dt.date.fromisoformat(value))
