"""
Example: Using the Statistics convenience wrapper.

Shows aggregating records held in memory, reading a month of match logs from
disk, and disabling a breakdown axis.
"""
import sys

from usage_stats import MatchRecord, RecordSource, Statistics, TeamEntry, month_window
from usage_stats.report.renderer import percent


def example_basic_usage():
    """Aggregate a couple of records built in code."""

    records = [
        MatchRecord(
            winner='Ash', p1='Ash', p2='Misty',
            p1_team=(TeamEntry('Pikachu', 'Light Ball', 'Static', 'Jolly', ('Thunderbolt', 'Iron Tail')),),
            p2_team=(TeamEntry('Starmie', 'Leftovers', 'Natural Cure', 'Timid', ('Surf', 'Psychic')),),
        ),
        MatchRecord(
            winner='Brock', p1='Ash', p2='Brock',
            p1_team=(TeamEntry('Pikachu', 'Light Ball', 'Static', 'Jolly', ('Thunderbolt', 'Quick Attack')),),
            p2_team=(TeamEntry('Onix', 'Hard Stone', 'Sturdy', 'Impish', ('Rock Slide', 'Bind')),),
        ),
    ]

    stats = Statistics(records=records)
    results = stats.results

    print("=== Species ===")
    print(f"Total teams: {results.total_teams}")
    for entry in stats.sorted_species():
        print(f"{entry.name}: used {entry.usage} ({percent(entry.usage, results.total_teams)}), "
              f"won {percent(entry.wins, entry.usage)}")

    print("\n=== Pikachu moves ===")
    pikachu = next(entry for entry in stats.sorted_species() if entry.name == 'pikachu')
    for move, count in pikachu.axis('move'):
        print(f"{move}: {count.usage} uses, {count.wins} wins")


def example_with_record_source(log_directory):
    """Aggregate a month of match logs, without the move breakdown."""

    stats = Statistics(
        record_source=RecordSource(log_directory),
        window=month_window('gen9ou', '2023', '01'),
        config_dict={'axes': {'move': False}},
    )

    if not stats.is_present:
        print("No match records for gen9ou 2023/01")
        return

    for entry in stats.sorted_species()[:10]:
        print(f"{entry.name}: {entry.usage}")


if __name__ == '__main__':
    example_basic_usage()
    if len(sys.argv) > 1:
        example_with_record_source(sys.argv[1])
