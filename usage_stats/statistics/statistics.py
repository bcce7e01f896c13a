from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

from usage_stats.match_record import MatchRecord
from usage_stats.record_source import RecordSource
from usage_stats.windows import Window
from .pipeline import StatisticsConfig, UsagePipeline
from .model import Stats
from .presence import is_present
from .sorting import SpeciesEntry, sorted_species

logger = logging.getLogger(__name__)


class Statistics:
    """
    High-level interface for collecting usage statistics for one window.

    This is a convenience wrapper around UsagePipeline that provides
    a simpler API for common use cases.

    Example:
        # From a record source
        stats = Statistics(record_source=RecordSource('logs'), window=month_window('gen9ou', '2023', '01'))
        entries = stats.sorted_species()

        # Standalone usage
        stats = Statistics(records=records)
        results = stats.results
    """

    def __init__(
        self,
        records: Optional[Iterable[MatchRecord]] = None,
        record_source: Optional[RecordSource] = None,
        window: Optional[Window] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
    ) -> None:
        """
        Initialize statistics collection.

        Args:
            records: Optional iterable of MatchRecord objects
            record_source: Optional RecordSource to fetch records from (requires window)
            window: Window to fetch from record_source
            config_dict: Dictionary to configure axes (e.g., {'axes': {'move': False}})
            config_file: Path to YAML config file
        """
        if record_source is not None:
            if window is None:
                raise ValueError("window is required when record_source is given")
            records = record_source.fetch_window(window)

        self.records: List[MatchRecord] = list(records) if records is not None else []
        if not self.records:
            logger.info("No match records provided to Statistics")

        # Create configuration
        if config_dict:
            self.config = StatisticsConfig.from_dict(config_dict)
        elif config_file:
            self.config = StatisticsConfig(config_file=config_file)
        else:
            # Use defaults - all axes enabled
            self.config = StatisticsConfig()

        self.pipeline = UsagePipeline(config=self.config)
        self._results = self.pipeline.run(self.records)

    @property
    def results(self) -> Stats:
        """Get the statistics results."""
        return self._results

    @property
    def is_present(self) -> bool:
        return is_present(self._results)

    def analyze(self, records: Optional[Iterable[MatchRecord]] = None) -> Stats:
        """
        Analyze the given records, replacing previous results.

        Args:
            records: Optional iterable of MatchRecord objects. If None, uses self.records.

        Returns:
            Stats object with collected statistics
        """
        if records is not None:
            self.records = list(records)
        self._results = self.pipeline.run(self.records)
        return self._results

    def sorted_species(self) -> List[SpeciesEntry]:
        """Species with data, most used first."""
        return sorted_species(self._results)

    def to_dict(self) -> Dict[str, Any]:
        """
        Export all statistics as a dictionary.
        """
        return self._results.to_dict()
