from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

logger = logging.getLogger(__name__)

OUTPUT_TYPES = ('html', 'json')


def _as_list(value: Any) -> List[str]:
    # YAML allows a scalar where a single item is meant, and reads 2023 or 01 as ints
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def _as_month(value: str) -> str:
    return value.zfill(2) if value.isdigit() else value


@dataclass
class RunConfig:
    """
    Which formats, years and months to process, and what to write.

    Attributes:
        directory: Root directory of the match logs
        output_directory: Root directory of the generated reports
        formats: Format names
        years: Year labels
        months: Two-digit month labels
        output_types: Any of 'html', 'json'
        workers: Threads used to compute the windows of a month
    """
    directory: Optional[Path] = None
    output_directory: Optional[Path] = None
    formats: List[str] = field(default_factory=list)
    years: List[str] = field(default_factory=list)
    months: List[str] = field(default_factory=list)
    output_types: List[str] = field(default_factory=lambda: ['html'])
    workers: int = 4

    def __post_init__(self) -> None:
        """Normalize field types and validate output types and worker count."""
        if self.directory is not None:
            self.directory = Path(self.directory)
        if self.output_directory is not None:
            self.output_directory = Path(self.output_directory)
        self.formats = _as_list(self.formats)
        self.years = _as_list(self.years)
        self.months = [_as_month(month) for month in _as_list(self.months)]
        self.output_types = [output_type.lower() for output_type in _as_list(self.output_types)]
        unknown = [output_type for output_type in self.output_types if output_type not in OUTPUT_TYPES]
        if unknown:
            raise ValueError(f"Unknown output type(s) {', '.join(unknown)}; choose from {', '.join(OUTPUT_TYPES)}")
        try:
            self.workers = int(self.workers)
        except (TypeError, ValueError):
            raise ValueError(f"workers must be a whole number, got {self.workers!r}")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

    @property
    def create_html(self) -> bool:
        return 'html' in self.output_types

    @property
    def create_json(self) -> bool:
        return 'json' in self.output_types

    def missing_fields(self) -> List[str]:
        """Names of the settings a run cannot do without."""
        required = ('directory', 'output_directory', 'formats', 'years', 'months', 'output_types')
        return [name for name in required if not getattr(self, name)]

    def merged(self, **overrides: Any) -> RunConfig:
        """
        Copy of this configuration with the given non-empty values replaced.

        None and empty lists leave the current value in place.
        """
        changes = {key: value for key, value in overrides.items() if value not in (None, [], ())}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> RunConfig:
        """
        Create configuration from a dictionary, ignoring unknown keys.

        Args:
            config_dict (Dict[str, Any]): Contents of the 'run' section.

        Returns:
            RunConfig: Configuration instance.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning(f"Ignoring unknown run settings: {', '.join(unknown)}")
        return cls(**{key: value for key, value in config_dict.items() if key in known})

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> RunConfig:
        """
        Load configuration from the 'run' section of a YAML file.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            RunConfig: Configuration instance loaded from YAML.
        """
        if not yaml_path or not Path(yaml_path).exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Error parsing {yaml_path}: top level must be a mapping")
        run_section = config_dict.get('run') or {}
        if not isinstance(run_section, dict):
            raise ValueError(f"Error parsing {yaml_path}: 'run' must be a mapping")
        logger.info(f"Loaded run config from {yaml_path}")
        return cls.from_dict(run_section)
