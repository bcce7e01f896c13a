"""
record_source.py - Loading of recorded match logs.

Match logs are stored one JSON document per match:

    <base>/<year>-<month>/<format>/<year>-<month>-<day>/<format>-*.log.json

Unreadable directories and files, invalid JSON and documents that do not
follow the log schema are skipped; none of these reach the aggregation.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from usage_stats.match_record import MatchRecord, MatchRecordError
from usage_stats.windows import ALL_DAYS, Window

logger = logging.getLogger(__name__)

LOG_SUFFIX = '.log.json'


def read_match_record(path: Path) -> Optional[MatchRecord]:
    """
    Read and validate one match log.

    Args:
        path (Path): Path to a .log.json file.

    Returns:
        Optional[MatchRecord]: The record, or None if it could not be read or validated.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        record = MatchRecord.from_dict(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, MatchRecordError) as e:
        logger.debug(f"Skipping match log {path}: {e}")
        record = None
    return record


class RecordSource:
    """
    Supplies validated match records for a format and time window.

    Attributes:
        base_path (Path): Root directory of the match logs.
    """

    def __init__(self, base_path: Union[str, Path]) -> None:
        self.base_path = Path(base_path)

    def day_directory(self, format: str, year: str, month: str, day: str) -> Path:
        return self.base_path / f"{year}-{month}" / format / f"{year}-{month}-{day}"

    def list_log_files(self, format: str, directory: Path) -> List[Path]:
        """
        List the match logs of a format in a directory.

        Args:
            format (str): Format name; log file names start with it.
            directory (Path): Day directory.

        Returns:
            List[Path]: Sorted log file paths; empty if the directory is missing or unreadable.
        """
        try:
            if not directory.is_dir():
                return []
            names = sorted(
                entry.name for entry in directory.iterdir()
                if entry.name.startswith(format) and entry.name.endswith(LOG_SUFFIX)
            )
        except OSError as e:
            logger.warning(f"Could not list {directory}: {e}")
            return []
        return [directory / name for name in names]

    def fetch_records(self, format: str, year: str, month: str, days: Optional[Iterable[str]] = None) -> List[MatchRecord]:
        """
        Fetch the valid match records of a format for the given days.

        Args:
            format (str): Format name.
            year (str): Year label.
            month (str): Month label.
            days (Optional[Iterable[str]]): Day labels; all of "01".."31" if None.

        Returns:
            List[MatchRecord]: Records in directory then file name order.
        """
        records = []
        skipped = 0
        for day in (ALL_DAYS if days is None else days):
            for path in self.list_log_files(format, self.day_directory(format, year, month, day)):
                record = read_match_record(path)
                if record is None:
                    skipped += 1
                else:
                    records.append(record)
        if skipped:
            logger.info(f"Skipped {skipped} unreadable match logs for {format} {year}-{month}")
        return records

    def fetch_window(self, window: Window) -> List[MatchRecord]:
        return self.fetch_records(window.format, window.year, window.month, window.days)
