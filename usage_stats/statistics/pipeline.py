"""
Pipeline folding match records into usage statistics.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence
import yaml

from usage_stats.identifiers import to_id
from usage_stats.match_record import MatchRecord, TeamEntry
from usage_stats.statistics.base import AxisCollector, get_collector_registry
from usage_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@dataclass
class StatisticsConfig:
    """
    Configuration for statistics collection.

    Attributes:
        axes: Dict of axis name -> enabled status
        config_file: Path to YAML config file (optional)
    """
    axes: Dict[str, bool] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section from the YAML file and extracts
        axis enable/disable settings.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
                statistics_config = data.get('statistics') or {}

                axes_config = statistics_config.get('axes') or {}
                for axis, settings in axes_config.items():
                    if isinstance(settings, dict):
                        self.axes[axis] = settings.get('enabled', True)
                    elif isinstance(settings, bool):
                        self.axes[axis] = settings

                logger.info(f"Loaded statistics config from {self.config_file}")
        except (OSError, yaml.YAMLError, AttributeError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")

    def is_enabled(self, axis: str) -> bool:
        """
        Check if an axis is enabled.

        Args:
            axis: Axis name to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.axes.get(axis, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatisticsConfig:
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary with 'axes' key mapping axis name to enabled status

        Returns:
            StatisticsConfig instance
        """
        return cls(axes=dict(data.get('axes', {})))


@dataclass
class UsagePipeline:
    """
    Pipeline aggregating the match records of one window.

    The pipeline holds no per-run state: every call to run() builds and
    returns its own Stats, so one pipeline may serve several windows at once.

    Attributes:
        collectors: List of axis collector instances to run
        config: Configuration for the pipeline
    """
    collectors: List[AxisCollector] = field(default_factory=list)
    config: StatisticsConfig = field(default_factory=StatisticsConfig)

    def __post_init__(self) -> None:
        """
        Initialize collectors from registry if none provided.
        """
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Load all registered collectors with configuration applied.
        """
        registry = get_collector_registry()
        for collector_id, collector_cls in registry.items():
            enabled = self.config.is_enabled(collector_id)
            try:
                collector = collector_cls(enabled=enabled)
                self.collectors.append(collector)
                logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")
            except (TypeError, ValueError) as e:
                logger.error(f"Failed to load collector {collector_id}: {e}")

    def run(self, records: Iterable[MatchRecord]) -> Stats:
        """
        Aggregate match records into a fresh Stats.

        Both sides of every record are applied. The result does not depend
        on record order.

        Args:
            records: Iterable of validated MatchRecord objects

        Returns:
            Stats object, all-zero if there were no records
        """
        stats = Stats()
        enabled_collectors = [c for c in self.collectors if c.enabled]

        match_count = 0
        for record in records:
            match_count += 1
            winner_id = to_id(record.winner)
            for side_id, team, opposing_team in record.sides():
                self._apply_team(stats, team, opposing_team, to_id(side_id) == winner_id, enabled_collectors)

        logger.debug(f"Aggregated {match_count} matches into {len(stats.species)} species")
        return stats

    def _apply_team(
        self,
        stats: Stats,
        team: Sequence[TeamEntry],
        opposing_team: Sequence[TeamEntry],
        won: bool,
        collectors: Sequence[AxisCollector],
    ) -> None:
        """
        Add one side's team to the statistics. (Private method)

        Args:
            stats: Statistics being built
            team: The side's own team
            opposing_team: The other side's team
            won: Whether this side won the match
            collectors: Enabled axis collectors
        """
        # an empty team still counts as a processed side
        stats.total_teams += 1
        for entry in team:
            species_id = to_id(entry.species)
            species_usage = stats.get_species(species_id)
            species_usage.record(won)
            for collector in collectors:
                for key in collector.keys(species_id, entry, team, opposing_team):
                    species_usage.record_axis(collector.collector_id, key, won)


def aggregate(records: Iterable[MatchRecord], config: Optional[StatisticsConfig] = None) -> Stats:
    """
    Aggregate match records with the registered collectors.

    Args:
        records: Iterable of validated MatchRecord objects
        config: Optional axis configuration (all axes enabled by default)

    Returns:
        Stats for the given records
    """
    pipeline = UsagePipeline(config=config or StatisticsConfig())
    return pipeline.run(records)
