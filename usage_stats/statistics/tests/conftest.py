"""
Pytest fixtures for statistics tests.
"""
from __future__ import annotations

import pytest
from typing import Sequence

from usage_stats.match_record import MatchRecord, TeamEntry


@pytest.fixture
def make_entry():
    """Create a TeamEntry with sensible defaults."""
    def _create_entry(species: str, item: str = "Leftovers", ability: str = "Pressure",
                      nature: str = "Adamant", moves: Sequence[str] = ("Protect",)) -> TeamEntry:
        return TeamEntry(species=species, item=item, ability=ability, nature=nature, moves=tuple(moves))

    return _create_entry


@pytest.fixture
def make_record(make_entry):
    """Create a MatchRecord from species name lists."""
    def _create_record(p1_species: Sequence[str], p2_species: Sequence[str],
                       winner: str = "Alice", p1: str = "Alice", p2: str = "Bob") -> MatchRecord:
        return MatchRecord(
            winner=winner,
            p1=p1,
            p2=p2,
            p1_team=tuple(make_entry(species) for species in p1_species),
            p2_team=tuple(make_entry(species) for species in p2_species),
            p1_rating=1500,
            p2_rating=1500,
            timestamp="2023-01-15T12:00:00Z",
        )

    return _create_record


@pytest.fixture
def ash_vs_misty():
    """Single match: Ash's Pikachu beats Misty's Starmie."""
    return MatchRecord(
        winner="Ash",
        p1="Ash",
        p2="Misty",
        p1_team=(TeamEntry(species="Pikachu", item="Light Ball", ability="Static", nature="Jolly",
                           moves=("Thunderbolt", "Iron Tail")),),
        p2_team=(TeamEntry(species="Starmie", item="Leftovers", ability="Natural Cure", nature="Timid",
                           moves=("Surf",)),),
        p1_rating=1600,
        p2_rating=1550,
        timestamp="2023-01-15T12:00:00Z",
    )


@pytest.fixture
def sample_records(make_record):
    """A handful of matches with repeated species and both sides winning."""
    return [
        make_record(["Pikachu", "Charizard", "Snorlax"], ["Starmie", "Snorlax"], winner="Alice"),
        make_record(["Pikachu", "Pikachu", "Gengar"], ["Charizard"], winner="Bob"),
        make_record(["Mr. Mime", "Snorlax"], ["Pikachu", "Gengar", "Starmie"], winner="alice"),
        make_record(["Gengar"], ["Gengar", "Snorlax"], winner="Nobody"),
    ]
