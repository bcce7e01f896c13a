"""
Report module: run configuration, orchestration and rendering of usage reports.
"""

from usage_stats.report.config import OUTPUT_TYPES, RunConfig
from usage_stats.report.generator import ReportGenerator
from usage_stats.report.renderer import ReportRenderer

__all__ = [
    'OUTPUT_TYPES',
    'RunConfig',
    'ReportGenerator',
    'ReportRenderer',
]
