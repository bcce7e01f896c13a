"""
windows.py - Time windows over the match record corpus.

A day window covers one (format, year, month, day). A month window covers
every day label "01".."31" regardless of how long the month really is; day
labels that do not exist in the calendar simply hold no records. There is no
year window: year pages only need to know which months hold data.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

ALL_DAYS: Tuple[str, ...] = tuple(f"{day:02d}" for day in range(1, 32))


@dataclass(frozen=True)
class Window:
    """
    A day or month window for one format.

    Attributes:
        format (str): Format name, as used in log file names.
        year (str): Year label, e.g. '2023'.
        month (str): Two-digit month label.
        day (Optional[str]): Two-digit day label, or None for a month window.
    """
    format: str
    year: str
    month: str
    day: Optional[str] = None

    @property
    def is_day(self) -> bool:
        return self.day is not None

    @property
    def days(self) -> Tuple[str, ...]:
        """Day labels whose records make up this window."""
        return (self.day,) if self.day is not None else ALL_DAYS

    @property
    def path_parts(self) -> Tuple[str, ...]:
        """Output path components below the output root."""
        parts = (self.format, self.year, self.month)
        return parts + (self.day,) if self.day is not None else parts

    @property
    def date_label(self) -> str:
        label = f"{self.year}/{self.month}"
        return f"{label}/{self.day}" if self.day is not None else label

    @property
    def title(self) -> str:
        return f"{self.format} {self.date_label} Usage Stats"

    def species_title(self, species_id: str) -> str:
        return f"{self.format} {self.date_label} {species_id} Usage Stats"


def month_window(format: str, year: str, month: str) -> Window:
    return Window(format=format, year=year, month=month)


def day_windows(format: str, year: str, month: str) -> List[Window]:
    """All 31 day windows of a month, in label order."""
    return [Window(format=format, year=year, month=month, day=day) for day in ALL_DAYS]
