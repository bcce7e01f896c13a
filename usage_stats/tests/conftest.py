"""
Pytest fixtures for usage_stats tests.
"""
from __future__ import annotations

import json

import pytest


def match_log(winner="Alice", p1="Alice", p2="Bob", p1_species=("Pikachu",), p2_species=("Starmie",)):
    """Build a decoded match log document."""
    def team(species_names):
        return [
            {"species": name, "item": "Leftovers", "ability": "Pressure", "nature": "Adamant", "moves": ["Protect"]}
            for name in species_names
        ]

    return {
        "winner": winner,
        "p1": p1,
        "p2": p2,
        "p1team": team(p1_species),
        "p2team": team(p2_species),
        "p1rating": 1500,
        "p2rating": 1480,
        "timestamp": "2023-01-15T12:00:00Z",
    }


@pytest.fixture
def log_dir(tmp_path):
    """Empty root directory for match logs."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def write_log(log_dir):
    """Write a match log below log_dir; returns the written path."""
    def _write(name, document=None, format="gen9ou", year="2023", month="01", day="15"):
        directory = log_dir / f"{year}-{month}" / format / f"{year}-{month}-{day}"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        if document is None:
            document = match_log()
        path.write_text(document if isinstance(document, str) else json.dumps(document), encoding="utf-8")
        return path

    return _write
