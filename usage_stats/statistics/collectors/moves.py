"""
Move collector.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from usage_stats.identifiers import to_id
from usage_stats.match_record import TeamEntry
from usage_stats.statistics.base import AxisCollector, register_collector


@register_collector
@dataclass
class MoveCollector(AxisCollector):
    """
    Counts the moves listed on an entry.

    Moves are counted per occurrence: a move listed twice on one entry is
    counted twice. An empty move list contributes nothing.
    """
    collector_id: str = "move"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return [to_id(move) for move in entry.moves]
