"""
Item, ability and nature collectors.

Every entry carries exactly one of each, so each contributes a single key.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from usage_stats.identifiers import to_id
from usage_stats.match_record import TeamEntry
from usage_stats.statistics.base import AxisCollector, register_collector


@register_collector
@dataclass
class ItemCollector(AxisCollector):
    collector_id: str = "item"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return [to_id(entry.item)]


@register_collector
@dataclass
class AbilityCollector(AxisCollector):
    collector_id: str = "ability"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return [to_id(entry.ability)]


@register_collector
@dataclass
class NatureCollector(AxisCollector):
    collector_id: str = "nature"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return [to_id(entry.nature)]
