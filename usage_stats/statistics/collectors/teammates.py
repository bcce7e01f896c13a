"""
Partner and opponent collectors.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from usage_stats.identifiers import to_id
from usage_stats.match_record import TeamEntry
from usage_stats.statistics.base import AxisCollector, register_collector


def distinct_species_ids(team: Sequence[TeamEntry]) -> List[str]:
    """Normalized species ids of a team, each once, in first-appearance order."""
    return list(dict.fromkeys(to_id(entry.species) for entry in team))


@register_collector
@dataclass
class PartnerCollector(AxisCollector):
    """
    Counts the teammates a species was brought with.

    Each teammate species is counted once per team however often it appears,
    and the species never partners itself.
    """
    collector_id: str = "partner"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return [partner_id for partner_id in distinct_species_ids(team) if partner_id != species_id]


@register_collector
@dataclass
class AgainstCollector(AxisCollector):
    """
    Counts the opposing species a species was matched against.

    Each opposing species is counted once per team.
    """
    collector_id: str = "against"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return distinct_species_ids(opposing_team)
