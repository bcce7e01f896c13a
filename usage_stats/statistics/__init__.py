"""
Statistics module for match usage analysis.

This module turns a window's match records into nested usage and win
counts, orders them for presentation and decides which windows hold data.

Main components:
    - AxisCollector: Base class for the per-species breakdown collectors
    - UsagePipeline / aggregate: Fold match records into Stats
    - sorted_entries / sorted_species: Descending-usage views
    - PresenceNode: Bottom-up presence of days, months, years and formats
    - Built-in collectors: partner, against, item, ability, nature, move
"""

from usage_stats.statistics.base import AxisCollector, register_collector, get_collector_registry
from usage_stats.statistics.pipeline import UsagePipeline, StatisticsConfig, aggregate
from usage_stats.statistics.model import AXES, Stats, SpeciesUsage, UsageCount
from usage_stats.statistics.sorting import SpeciesEntry, sorted_entries, sorted_species
from usage_stats.statistics.presence import PresenceNode, is_present
from usage_stats.statistics.statistics import Statistics

# Import collectors to ensure they're registered
from usage_stats.statistics import collectors

__all__ = [
    'AXES',
    'AxisCollector',
    'register_collector',
    'get_collector_registry',
    'UsagePipeline',
    'StatisticsConfig',
    'aggregate',
    'Stats',
    'SpeciesUsage',
    'UsageCount',
    'SpeciesEntry',
    'sorted_entries',
    'sorted_species',
    'PresenceNode',
    'is_present',
    'Statistics',
    'collectors',
]
