"""
Tests for statistics.pipeline module.
"""
from __future__ import annotations

import itertools

import pytest
from dataclasses import dataclass
from typing import Iterable, Sequence

from usage_stats.match_record import MatchRecord, TeamEntry
from usage_stats.statistics.base import AxisCollector
from usage_stats.statistics.model import AXES, Stats, UsageCount
from usage_stats.statistics.pipeline import StatisticsConfig, UsagePipeline, aggregate


# Mock collector for testing (not a test class, so doesn't start with "Test")
@dataclass
class MockCollector(AxisCollector):
    """Counts every entry under the same item key."""
    collector_id: str = "item"

    def keys(self, species_id: str, entry: TeamEntry, team: Sequence[TeamEntry], opposing_team: Sequence[TeamEntry]) -> Iterable[str]:
        return ["mock"]


def _all_counts(stats: Stats):
    for usage in stats.species.values():
        yield usage
        for name in AXES:
            yield from usage.axis(name).values()


class TestStatisticsConfig:
    """Tests for StatisticsConfig class."""

    def test_default_enabled(self):
        """Test that axes are enabled by default."""
        config = StatisticsConfig()

        assert config.is_enabled('move') is True

    def test_explicitly_disabled(self):
        """Test explicitly disabling an axis."""
        config = StatisticsConfig(axes={'move': False})

        assert config.is_enabled('move') is False

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = StatisticsConfig.from_dict({'axes': {'nature': False, 'item': True}})

        assert config.is_enabled('nature') is False
        assert config.is_enabled('item') is True

    def test_load_from_file(self, tmp_path):
        """Test loading axis settings from the statistics section of a YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "statistics:\n"
            "  axes:\n"
            "    move: false\n"
            "    nature:\n"
            "      enabled: false\n"
            "    item:\n"
            "      enabled: true\n"
        )

        config = StatisticsConfig(config_file=config_file)

        assert config.is_enabled('move') is False
        assert config.is_enabled('nature') is False
        assert config.is_enabled('item') is True
        assert config.is_enabled('partner') is True

    def test_broken_file_keeps_defaults(self, tmp_path):
        """Test an unparsable file is logged and ignored."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("statistics: [unclosed\n")

        config = StatisticsConfig(config_file=config_file)

        assert config.is_enabled('move') is True

    def test_missing_file_keeps_defaults(self, tmp_path):
        """Test a config file that does not exist is ignored."""
        config = StatisticsConfig(config_file=tmp_path / "missing.yaml")

        assert config.axes == {}


class TestUsagePipeline:
    """Tests for UsagePipeline class."""

    def test_registry_collectors_loaded(self):
        """Test all six axes are loaded from the registry."""
        pipeline = UsagePipeline()

        assert [c.collector_id for c in pipeline.collectors] == list(AXES)

    def test_single_match(self, ash_vs_misty):
        """Test the aggregate of one Pikachu versus Starmie match."""
        stats = aggregate([ash_vs_misty])

        assert stats.total_teams == 2
        assert set(stats.species) == {'pikachu', 'starmie'}

        pikachu = stats.species['pikachu']
        assert (pikachu.usage, pikachu.wins) == (1, 1)
        assert pikachu.partner == {}
        assert pikachu.against == {'starmie': UsageCount(1, 1)}
        assert pikachu.item == {'lightball': UsageCount(1, 1)}
        assert pikachu.ability == {'static': UsageCount(1, 1)}
        assert pikachu.nature == {'jolly': UsageCount(1, 1)}
        assert pikachu.move == {'thunderbolt': UsageCount(1, 1), 'irontail': UsageCount(1, 1)}

        starmie = stats.species['starmie']
        assert (starmie.usage, starmie.wins) == (1, 0)
        assert starmie.partner == {}
        assert starmie.against == {'pikachu': UsageCount(1, 0)}
        assert starmie.item == {'leftovers': UsageCount(1, 0)}
        assert starmie.ability == {'naturalcure': UsageCount(1, 0)}
        assert starmie.nature == {'timid': UsageCount(1, 0)}
        assert starmie.move == {'surf': UsageCount(1, 0)}

    def test_second_side_can_win(self, make_record):
        """Test the winner is matched against each side's own id."""
        stats = aggregate([make_record(["Pikachu"], ["Starmie"], winner="Bob")])

        assert stats.species['pikachu'].wins == 0
        assert stats.species['starmie'].wins == 1

    def test_winner_is_normalized(self, make_record):
        """Test winner and side ids are compared after normalization."""
        stats = aggregate([make_record(["Pikachu"], ["Starmie"], winner="a.l.i.c.e", p1="Alice")])

        assert stats.species['pikachu'].wins == 1

    def test_empty_input(self):
        """Test no records gives an all-zero Stats."""
        stats = aggregate([])

        assert stats.total_teams == 0
        assert stats.species == {}

    def test_empty_team_counts_as_side(self, make_record):
        """Test a side with no entries still counts as a processed team."""
        stats = aggregate([make_record([], ["Starmie"])])

        assert stats.total_teams == 2
        assert set(stats.species) == {'starmie'}
        assert stats.species['starmie'].against == {}

    def test_total_teams_two_per_match(self, sample_records):
        """Test two teams are counted per match."""
        stats = aggregate(sample_records)

        assert stats.total_teams == 2 * len(sample_records)

    def test_wins_never_exceed_usage(self, sample_records):
        """Test the win bound at every level."""
        stats = aggregate(sample_records)

        for count in _all_counts(stats):
            assert 0 <= count.wins <= count.usage

    def test_record_order_does_not_matter(self, sample_records):
        """Test every permutation of the records gives the same Stats."""
        expected = aggregate(sample_records)

        for permutation in itertools.permutations(sample_records):
            assert aggregate(permutation) == expected

    def test_duplicate_species_in_team(self, make_record):
        """Test partner ids are collapsed per team but every entry is counted."""
        stats = aggregate([make_record(["Pikachu", "Pikachu", "Gengar"], ["Charizard", "Charizard"])])

        pikachu = stats.species['pikachu']
        assert pikachu.usage == 2
        # never partners itself; Gengar once per Pikachu entry
        assert pikachu.partner == {'gengar': UsageCount(2, 2)}
        assert pikachu.against == {'charizard': UsageCount(2, 2)}
        assert stats.species['gengar'].partner == {'pikachu': UsageCount(1, 1)}
        assert stats.species['charizard'].partner == {}

    def test_duplicate_moves_counted_per_occurrence(self, make_entry):
        """Test a move listed twice on one entry is counted twice."""
        record = MatchRecord(
            winner="Alice", p1="Alice", p2="Bob",
            p1_team=(make_entry("Pikachu", moves=("Thunderbolt", "Thunderbolt", "Protect")),),
            p2_team=(make_entry("Starmie", moves=()),),
        )

        stats = aggregate([record])

        assert stats.species['pikachu'].move == {'thunderbolt': UsageCount(2, 2), 'protect': UsageCount(1, 1)}
        assert stats.species['starmie'].move == {}

    def test_names_normalized_to_same_key(self, make_entry):
        """Test display names that normalize alike share one key."""
        record = MatchRecord(
            winner="Alice", p1="Alice", p2="Bob",
            p1_team=(make_entry("Mr. Mime", item="Choice Scarf"),),
            p2_team=(make_entry("mr mime", item="choice-scarf"),),
        )

        stats = aggregate([record])

        assert set(stats.species) == {'mrmime'}
        assert stats.species['mrmime'].usage == 2
        assert stats.species['mrmime'].wins == 1
        assert stats.species['mrmime'].item == {'choicescarf': UsageCount(2, 1)}
        assert stats.species['mrmime'].against == {'mrmime': UsageCount(2, 1)}

    def test_disabled_axis_left_empty(self, ash_vs_misty):
        """Test a disabled axis is not collected."""
        stats = aggregate([ash_vs_misty], StatisticsConfig(axes={'move': False}))

        assert stats.species['pikachu'].move == {}
        assert stats.species['pikachu'].item == {'lightball': UsageCount(1, 1)}

    def test_explicit_collectors(self, ash_vs_misty):
        """Test running the pipeline with a given collector list."""
        pipeline = UsagePipeline(collectors=[MockCollector()])

        stats = pipeline.run([ash_vs_misty])

        assert stats.species['pikachu'].item == {'mock': UsageCount(1, 1)}
        assert stats.species['pikachu'].move == {}

    def test_disabled_collector_skipped(self, ash_vs_misty):
        """Test that disabled collectors are not run."""
        pipeline = UsagePipeline(collectors=[MockCollector(enabled=False)])

        stats = pipeline.run([ash_vs_misty])

        assert stats.species['pikachu'].item == {}
        assert stats.species['pikachu'].usage == 1

    def test_runs_are_independent(self, ash_vs_misty):
        """Test each run starts from a fresh Stats."""
        pipeline = UsagePipeline()

        first = pipeline.run([ash_vs_misty])
        second = pipeline.run([ash_vs_misty])

        assert first == second
        assert first is not second
        assert second.total_teams == 2


def test_collector_requires_axis_id():
    """Test a collector without a valid axis id cannot be created."""
    with pytest.raises(ValueError):
        MockCollector(collector_id="tera_type")
