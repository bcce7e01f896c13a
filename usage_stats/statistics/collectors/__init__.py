"""
Built-in axis collectors.

Import collectors here to automatically register them.
"""

from usage_stats.statistics.collectors.teammates import PartnerCollector, AgainstCollector
from usage_stats.statistics.collectors.attributes import ItemCollector, AbilityCollector, NatureCollector
from usage_stats.statistics.collectors.moves import MoveCollector

__all__ = [
    'PartnerCollector',
    'AgainstCollector',
    'ItemCollector',
    'AbilityCollector',
    'NatureCollector',
    'MoveCollector',
]
