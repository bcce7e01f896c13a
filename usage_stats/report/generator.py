"""
Report generation over formats, years, months and days.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import List, Optional, Sequence

from usage_stats.app_hooks import AppHooks
from usage_stats.record_source import RecordSource
from usage_stats.report.config import RunConfig
from usage_stats.report.renderer import ReportRenderer
from usage_stats.statistics.model import Stats
from usage_stats.statistics.pipeline import StatisticsConfig, UsagePipeline
from usage_stats.statistics.presence import PresenceNode
from usage_stats.statistics.sorting import sorted_species
from usage_stats.windows import Window, day_windows, month_window

logger = logging.getLogger(__name__)


class ReportGenerator:
    """
    Aggregates every requested window and renders the levels that hold data.

    A month is rendered iff one of its days holds data, a year iff one of its
    months does, a format iff one of its years does, and the root index iff
    one of the formats does.

    Attributes:
        record_source (RecordSource): Supplies match records per window.
        renderer (ReportRenderer): Writes the report artifacts.
        run_config (RunConfig): Formats, years, months and worker count.
        pipeline (UsagePipeline): Aggregation pipeline shared by all windows.
        app_hooks (Optional[AppHooks]): Progress reporting and stop requests.
    """

    def __init__(
        self,
        record_source: RecordSource,
        renderer: ReportRenderer,
        run_config: RunConfig,
        statistics_config: Optional[StatisticsConfig] = None,
        app_hooks: Optional[AppHooks] = None,
    ) -> None:
        self.record_source = record_source
        self.renderer = renderer
        self.run_config = run_config
        self.pipeline = UsagePipeline(config=statistics_config or StatisticsConfig())
        self.app_hooks = app_hooks
        self._stopped = False

    def run(self) -> PresenceNode:
        """
        Generate the reports for every configured format, year and month.

        Returns:
            PresenceNode: Root of the presence tree (formats -> years -> months -> days).
        """
        config = self.run_config
        self._stopped = False
        total_months = len(config.formats) * len(config.years) * len(config.months)
        self._report_step(info="Generating usage reports", target=total_months, reset_counter=True, plus_step=0)

        format_nodes = [self.generate_format(format) for format in config.formats]
        root = PresenceNode.branch('', format_nodes)
        if root.present:
            self.renderer.render_root(root.present_labels())
        else:
            logger.info("No match records found for any format; nothing rendered")
        return root

    def generate_format(self, format: str) -> PresenceNode:
        year_nodes = [self.generate_year(format, year) for year in self.run_config.years]
        format_node = PresenceNode.branch(format, year_nodes)
        if format_node.present:
            self.renderer.render_format(format, format_node.present_labels())
        return format_node

    def generate_year(self, format: str, year: str) -> PresenceNode:
        month_nodes = []
        for month in self.run_config.months:
            if self._stopped or self._stop_requested(f"Report generation stopped before {format} {year}/{month}"):
                self._stopped = True
                break
            month_nodes.append(self.generate_month(format, year, month))
            self._report_step(plus_step=1)
        year_node = PresenceNode.branch(year, month_nodes)
        if year_node.present:
            self.renderer.render_year(format, year, year_node.present_labels())
        return year_node

    def generate_month(self, format: str, year: str, month: str) -> PresenceNode:
        """
        Aggregate and render one month and its days.

        The month window and its 31 day windows are aggregated concurrently,
        each into its own Stats.

        Returns:
            PresenceNode: The month, with one child per day label.
        """
        month_win = month_window(format, year, month)
        days = day_windows(format, year, month)
        month_stats, *day_stats = self.aggregate_windows([month_win] + days)

        day_nodes = []
        for window, stats in zip(days, day_stats):
            day_node = PresenceNode.leaf(window.day, stats)
            if day_node.present:
                self.renderer.render_window(window, stats, sorted_species(stats))
            day_nodes.append(day_node)

        month_node = PresenceNode.branch(month, day_nodes)
        if month_node.present:
            self.renderer.render_window(month_win, month_stats, sorted_species(month_stats), days=month_node.present_labels())
            logger.info(f"{month_win.title}: {month_stats.total_teams} teams over {len(month_node.present_children())} days")
            self._update_key_value(f"{format} {year}/{month}", month_stats.total_teams)
        else:
            logger.debug(f"{month_win.title}: no match records")
        return month_node

    def aggregate_window(self, window: Window) -> Stats:
        return self.pipeline.run(self.record_source.fetch_window(window))

    def aggregate_windows(self, windows: Sequence[Window]) -> List[Stats]:
        """Aggregate windows on a thread pool, results in input order."""
        with ThreadPoolExecutor(max_workers=self.run_config.workers) as executor:
            return list(executor.map(self.aggregate_window, windows))

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.debug(info)

    def _update_key_value(self, key: str, value: object) -> None:
        """Report a status value via app hooks if available. (Private method)"""
        if self.app_hooks and callable(getattr(self.app_hooks, "update_key_value", None)):
            self.app_hooks.update_key_value(key, value)

    def _stop_requested(self, logger_stop_message: str = "Stop requested by user") -> bool:
        """
        Check if stop has been requested via app hooks. (Private method)

        Returns:
            bool: True if stop requested, False otherwise.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "stop_requested", None)):
            if self.app_hooks.stop_requested():
                if logger_stop_message:
                    logger.info(logger_stop_message)
                return True
        return False
