"""
Ordering of aggregated usage for presentation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, TypeVar

from usage_stats.statistics.model import AXES, Stats, UsageCount

T = TypeVar('T')

SortedAxis = List[Tuple[str, UsageCount]]


def sorted_entries(mapping: Mapping[str, T]) -> List[Tuple[str, T]]:
    """
    Order a usage mapping by descending usage.

    There is no secondary key: entries with equal usage keep the mapping's
    iteration order, and callers must not rely on that order.

    Args:
        mapping: id -> object with a 'usage' attribute

    Returns:
        List of (id, counts) pairs, usage non-increasing
    """
    return sorted(mapping.items(), key=lambda item: item[1].usage, reverse=True)


@dataclass
class SpeciesEntry:
    """
    One species ready for rendering, with every axis already sorted.
    """
    name: str
    usage: int
    wins: int
    axes: Dict[str, SortedAxis] = field(default_factory=dict)

    def axis(self, name: str) -> SortedAxis:
        return self.axes.get(name, [])

    def to_dict(self) -> Dict[str, Any]:
        """JSON document for one species page."""
        data: Dict[str, Any] = {'name': self.name, 'usage': self.usage, 'wins': self.wins}
        for name in AXES:
            data[name] = [{'name': key, **count.to_dict()} for key, count in self.axis(name)]
        return data


def sorted_species(stats: Stats) -> List[SpeciesEntry]:
    """
    Species of a Stats ordered by descending usage, zero-usage species removed.

    Each of the six breakdown axes is sorted the same way but not filtered.

    Args:
        stats: Aggregated statistics for one window

    Returns:
        List of SpeciesEntry
    """
    entries = []
    for species_id, usage in sorted_entries(stats.species):
        if usage.usage == 0:
            continue
        entries.append(SpeciesEntry(
            name=species_id,
            usage=usage.usage,
            wins=usage.wins,
            axes={name: sorted_entries(usage.axis(name)) for name in AXES},
        ))
    return entries
