"""
Base classes for axis collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Dict, Iterable, Sequence, Type

from usage_stats.match_record import TeamEntry
from usage_stats.statistics.model import AXES

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['AxisCollector']] = {}


def register_collector(cls: Type['AxisCollector']) -> Type['AxisCollector']:
    """
    Decorator to register a collector class in the global registry.

    Usage:
        @register_collector
        @dataclass
        class ItemCollector(AxisCollector):
            collector_id: str = "item"
            ...
    """
    collector_id = getattr(cls, 'collector_id', '')
    if collector_id in AXES:
        _COLLECTOR_REGISTRY[collector_id] = cls
        logger.debug(f"Registered axis collector: {collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} has no valid axis 'collector_id', not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['AxisCollector']]:
    """Get the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class AxisCollector(ABC):
    """
    Base class for axis collectors.

    An axis collector decides which keys of one breakdown axis a team entry
    contributes to. The pipeline adds one use (and one win if the side won)
    per returned key, so a key returned twice is counted twice.

    Attributes:
        collector_id: Axis name this collector fills (one of AXES)
        enabled: Whether this collector is enabled (can be set via config)
    """
    collector_id: str = ""
    enabled: bool = True

    @abstractmethod
    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        """
        Keys to increment on this axis for one entry.

        Args:
            species_id: Normalized species id of the entry
            entry: The team entry being counted
            team: The entry's own team (including the entry)
            opposing_team: The other side's team

        Returns:
            Normalized keys, one per increment
        """
        pass

    def __post_init__(self):
        """Validate collector configuration."""
        if self.collector_id not in AXES:
            raise ValueError(f"{self.__class__.__name__} must define collector_id as one of {', '.join(AXES)}")
