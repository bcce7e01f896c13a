"""
Tests for statistics.presence module.
"""
from __future__ import annotations

import pytest

from usage_stats.statistics.model import Stats
from usage_stats.statistics.pipeline import aggregate
from usage_stats.statistics.presence import PresenceNode, is_present


class TestIsPresent:
    """Tests for is_present."""

    def test_empty_stats_absent(self):
        """Test an all-zero Stats is absent."""
        assert is_present(aggregate([])) is False

    def test_teams_present(self, ash_vs_misty):
        """Test a Stats with processed teams is present."""
        assert is_present(aggregate([ash_vs_misty])) is True

    def test_empty_team_still_present(self, make_record):
        """Test presence counts sides, not species."""
        stats = aggregate([make_record([], [])])

        assert stats.species == {}
        assert is_present(stats) is True


class TestPresenceNode:
    """Tests for PresenceNode."""

    def test_branch_present_if_any_child(self):
        """Test a branch is present when one child is."""
        days = [
            PresenceNode.leaf('01', Stats()),
            PresenceNode.leaf('02', Stats(total_teams=2)),
            PresenceNode.leaf('03', Stats()),
        ]

        month = PresenceNode.branch('01', days)

        assert month.present is True
        assert month.present_labels() == ['02']

    def test_branch_absent_if_no_child(self):
        """Test a branch with only absent children is absent."""
        month = PresenceNode.branch('02', [PresenceNode.leaf('01', Stats())])

        assert month.present is False
        assert month.present_children() == []

    def test_branch_without_children(self):
        """Test a branch with no children is absent."""
        assert PresenceNode.branch('', []).present is False

    def test_propagation_through_levels(self):
        """Test presence flows from a single day up to the root."""
        day = PresenceNode.leaf('15', Stats(total_teams=1))
        empty_month = PresenceNode.branch('02', [PresenceNode.leaf('01', Stats())])
        month = PresenceNode.branch('01', [day])
        year = PresenceNode.branch('2023', [month, empty_month])
        empty_year = PresenceNode.branch('2022', [])
        format_node = PresenceNode.branch('gen9ou', [empty_year, year])
        root = PresenceNode.branch('', [format_node, PresenceNode.branch('gen8ou', [])])

        assert root.present is True
        assert root.present_labels() == ['gen9ou']
        assert format_node.present_labels() == ['2023']
        assert year.present_labels() == ['01']

    def test_find(self):
        """Test looking up a descendant by label path."""
        day = PresenceNode.leaf('15', Stats(total_teams=1))
        root = PresenceNode.branch('', [PresenceNode.branch('gen9ou', [PresenceNode.branch('2023', [
            PresenceNode.branch('01', [day])])])])

        assert root.find('gen9ou', '2023', '01', '15') is day
        with pytest.raises(KeyError):
            root.find('gen9ou', '2024')
