"""
Data models for statistics module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

AXES: Tuple[str, ...] = ('partner', 'against', 'item', 'ability', 'nature', 'move')


@dataclass
class UsageCount:
    """
    Usage and win counters for one key.

    wins never exceeds usage: a win is only ever recorded together with a use.
    """
    usage: int = 0
    wins: int = 0

    def record(self, won: bool) -> None:
        self.usage += 1
        if won:
            self.wins += 1

    def to_dict(self) -> Dict[str, int]:
        return {'usage': self.usage, 'wins': self.wins}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UsageCount:
        return cls(usage=int(data.get('usage', 0)), wins=int(data.get('wins', 0)))


def _axis_to_dict(axis: Dict[str, UsageCount]) -> Dict[str, Dict[str, int]]:
    return {key: count.to_dict() for key, count in axis.items()}


def _axis_from_dict(data: Optional[Dict[str, Any]]) -> Dict[str, UsageCount]:
    return {key: UsageCount.from_dict(value) for key, value in (data or {}).items()}


@dataclass
class SpeciesUsage:
    """
    Usage of one species, with breakdowns keyed by normalized id.

    Attributes:
        usage: Number of team slots this species filled
        wins: Number of those slots on a winning side
        partner: Teammate species (each teammate once per team)
        against: Opposing species (each opponent once per team)
        item: Held items
        ability: Abilities
        nature: Natures
        move: Moves (once per listed occurrence)
    """
    usage: int = 0
    wins: int = 0
    partner: Dict[str, UsageCount] = field(default_factory=dict)
    against: Dict[str, UsageCount] = field(default_factory=dict)
    item: Dict[str, UsageCount] = field(default_factory=dict)
    ability: Dict[str, UsageCount] = field(default_factory=dict)
    nature: Dict[str, UsageCount] = field(default_factory=dict)
    move: Dict[str, UsageCount] = field(default_factory=dict)

    def record(self, won: bool) -> None:
        self.usage += 1
        if won:
            self.wins += 1

    def axis(self, name: str) -> Dict[str, UsageCount]:
        """Get one breakdown mapping by axis name."""
        if name not in AXES:
            raise KeyError(f"Unknown axis: {name}")
        return getattr(self, name)

    def record_axis(self, name: str, key: str, won: bool) -> None:
        """Add one use (and one win if won) of key on an axis, creating the key on first sight."""
        axis = self.axis(name)
        if key not in axis:
            axis[key] = UsageCount()
        axis[key].record(won)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'usage': self.usage, 'wins': self.wins}
        for name in AXES:
            data[name] = _axis_to_dict(self.axis(name))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SpeciesUsage:
        return cls(
            usage=int(data.get('usage', 0)),
            wins=int(data.get('wins', 0)),
            **{name: _axis_from_dict(data.get(name)) for name in AXES},
        )


@dataclass
class Stats:
    """
    Aggregated usage for one time window.

    A fresh Stats is built for every window; it is filled by a single pass
    over that window's records and not modified afterwards.
    """
    total_teams: int = 0
    species: Dict[str, SpeciesUsage] = field(default_factory=dict)

    def get_species(self, species_id: str) -> SpeciesUsage:
        """Get the usage for a species, creating an all-zero entry on first sight."""
        if species_id not in self.species:
            self.species[species_id] = SpeciesUsage()
        return self.species[species_id]

    def is_empty(self) -> bool:
        return self.total_teams == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            'total_teams': self.total_teams,
            'species': {species_id: usage.to_dict() for species_id, usage in self.species.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Stats:
        """Create from a plain dictionary."""
        return cls(
            total_teams=int(data.get('total_teams', 0)),
            species={species_id: SpeciesUsage.from_dict(value) for species_id, value in data.get('species', {}).items()},
        )
