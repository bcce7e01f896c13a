"""
match_record.py - Recorded match outcomes.

Defines TeamEntry (one team member's build) and MatchRecord (one completed
match between two sides), with validation of the on-disk JSON shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


class MatchRecordError(ValueError):
    """Raised when a match log does not follow the expected schema."""


def _require_str(d: Dict[str, Any], key: str) -> str:
    value = d.get(key)
    if not isinstance(value, str):
        raise MatchRecordError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_number(d: Dict[str, Any], key: str) -> float:
    value = d.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MatchRecordError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _require_list(d: Dict[str, Any], key: str) -> List[Any]:
    value = d.get(key)
    if not isinstance(value, list):
        raise MatchRecordError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TeamEntry:
    """
    One team member's build.

    Attributes:
        species (str): Species display name.
        item (str): Held item name.
        ability (str): Ability name.
        nature (str): Nature name.
        moves (Tuple[str, ...]): Move names in listed order.
    """
    species: str
    item: str = ''
    ability: str = ''
    nature: str = ''
    moves: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, d: Any) -> 'TeamEntry':
        """
        Create a TeamEntry from a decoded JSON object.

        Args:
            d (Any): Decoded team set.
        Returns:
            TeamEntry: The constructed entry.
        Raises:
            MatchRecordError: If a field is missing or has the wrong type.
        """
        if not isinstance(d, dict):
            raise MatchRecordError(f"team set must be an object, got {type(d).__name__}")
        moves = _require_list(d, 'moves')
        for move in moves:
            if not isinstance(move, str):
                raise MatchRecordError(f"move names must be strings, got {type(move).__name__}")
        return cls(
            species=_require_str(d, 'species'),
            item=_require_str(d, 'item'),
            ability=_require_str(d, 'ability'),
            nature=_require_str(d, 'nature'),
            moves=tuple(moves),
        )

    def as_dict(self) -> dict:
        return {
            'species': self.species,
            'item': self.item,
            'ability': self.ability,
            'nature': self.nature,
            'moves': list(self.moves),
        }


@dataclass(frozen=True)
class MatchRecord:
    """
    One completed match.

    Only winner, side ids and teams are used by the aggregation; ratings and
    timestamp are carried along untouched.

    Attributes:
        winner (str): Identifier of the winning side.
        p1 (str): Identifier of side 1.
        p2 (str): Identifier of side 2.
        p1_team (Tuple[TeamEntry, ...]): Side 1 team.
        p2_team (Tuple[TeamEntry, ...]): Side 2 team.
        p1_rating (float): Side 1 rating.
        p2_rating (float): Side 2 rating.
        timestamp (str): Match timestamp as recorded.
    """
    winner: str
    p1: str
    p2: str
    p1_team: Tuple[TeamEntry, ...] = ()
    p2_team: Tuple[TeamEntry, ...] = ()
    p1_rating: float = 0.0
    p2_rating: float = 0.0
    timestamp: str = ''

    def sides(self) -> Tuple[Tuple[str, Tuple[TeamEntry, ...], Tuple[TeamEntry, ...]], ...]:
        """(side id, own team, opposing team) for side 1, then side 2."""
        return (
            (self.p1, self.p1_team, self.p2_team),
            (self.p2, self.p2_team, self.p1_team),
        )

    @classmethod
    def from_dict(cls, d: Any) -> 'MatchRecord':
        """
        Create a MatchRecord from a decoded match log.

        Args:
            d (Any): Decoded JSON document.
        Returns:
            MatchRecord: The constructed record.
        Raises:
            MatchRecordError: If the document does not match the log schema.
        """
        if not isinstance(d, dict):
            raise MatchRecordError(f"match log must be an object, got {type(d).__name__}")
        return cls(
            winner=_require_str(d, 'winner'),
            p1=_require_str(d, 'p1'),
            p2=_require_str(d, 'p2'),
            p1_team=tuple(TeamEntry.from_dict(s) for s in _require_list(d, 'p1team')),
            p2_team=tuple(TeamEntry.from_dict(s) for s in _require_list(d, 'p2team')),
            p1_rating=_require_number(d, 'p1rating'),
            p2_rating=_require_number(d, 'p2rating'),
            timestamp=_require_str(d, 'timestamp'),
        )

    def as_dict(self) -> dict:
        """
        Convert the MatchRecord back to the on-disk log shape.

        Returns:
            dict: Dictionary representation of the record.
        """
        return {
            'winner': self.winner,
            'p1': self.p1,
            'p2': self.p2,
            'p1team': [entry.as_dict() for entry in self.p1_team],
            'p2team': [entry.as_dict() for entry in self.p2_team],
            'p1rating': self.p1_rating,
            'p2rating': self.p2_rating,
            'timestamp': self.timestamp,
        }
