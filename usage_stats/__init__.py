"""usage_stats package: Exposes core classes and utilities for team usage statistics from match logs."""

from usage_stats.identifiers import to_id
from usage_stats.match_record import MatchRecord, MatchRecordError, TeamEntry
from usage_stats.record_source import RecordSource, read_match_record
from usage_stats.windows import ALL_DAYS, Window, day_windows, month_window
from usage_stats.statistics import (
    PresenceNode,
    SpeciesEntry,
    Statistics,
    StatisticsConfig,
    Stats,
    UsagePipeline,
    aggregate,
    is_present,
    sorted_entries,
    sorted_species,
)
from usage_stats.report import ReportGenerator, ReportRenderer, RunConfig

__all__ = [
    "ALL_DAYS",
    "MatchRecord",
    "MatchRecordError",
    "PresenceNode",
    "RecordSource",
    "ReportGenerator",
    "ReportRenderer",
    "RunConfig",
    "SpeciesEntry",
    "Statistics",
    "StatisticsConfig",
    "Stats",
    "TeamEntry",
    "UsagePipeline",
    "Window",
    "aggregate",
    "day_windows",
    "is_present",
    "month_window",
    "read_match_record",
    "sorted_entries",
    "sorted_species",
    "to_id",
]
