"""
Presence of data across the format -> year -> month -> day hierarchy.

A day or month window is present when its Stats processed at least one team.
Above the day level presence is propagated bottom-up: a month is present iff
one of its days is, a year iff one of its months is, a format iff one of its
years is, and the root iff one of the formats is. Only present levels are
rendered.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from usage_stats.statistics.model import Stats


def is_present(stats: Stats) -> bool:
    return stats.total_teams > 0


@dataclass(frozen=True)
class PresenceNode:
    """
    Presence of one level in the report hierarchy.

    Attributes:
        label: Day, month, year or format label ('' for the root)
        present: Whether the level holds any data
        children: Child levels in input order
    """
    label: str
    present: bool
    children: Sequence[PresenceNode] = field(default_factory=tuple)

    @classmethod
    def leaf(cls, label: str, stats: Stats) -> PresenceNode:
        return cls(label=label, present=is_present(stats))

    @classmethod
    def branch(cls, label: str, children: Sequence[PresenceNode]) -> PresenceNode:
        """
        Build a level from its children.

        The level's own aggregate, if it has one, plays no part.
        """
        children = tuple(children)
        return cls(label=label, present=any(child.present for child in children), children=children)

    def present_children(self) -> List[PresenceNode]:
        return [child for child in self.children if child.present]

    def present_labels(self) -> List[str]:
        return [child.label for child in self.present_children()]

    def find(self, *labels: str) -> PresenceNode:
        """
        Look up a descendant by its label path.

        Raises:
            KeyError: If no child matches a label on the path.
        """
        node = self
        for label in labels:
            for child in node.children:
                if child.label == label:
                    node = child
                    break
            else:
                raise KeyError(f"No child '{label}' under '{node.label}'")
        return node
