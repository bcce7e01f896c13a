import pytest

from usage_stats.identifiers import to_id


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Pikachu", "pikachu"),
        ("Mr. Mime", "mrmime"),
        ("Farfetch’d", "farfetchd"),
        ("Choice Scarf", "choicescarf"),
        ("U-turn", "uturn"),
        ("Porygon2", "porygon2"),
        ("Flabébé", "flabb"),
        ("", ""),
        ("!!!", ""),
    ],
)
def test_to_id(text, expected):
    """Test to_id lowercases and drops everything but a-z and 0-9."""
    assert to_id(text) == expected


def test_to_id_idempotent():
    """Test normalizing twice gives the same id."""
    for text in ("Mr. Mime", "Light Ball", "10,000,000 Volt Thunderbolt"):
        assert to_id(to_id(text)) == to_id(text)


def test_to_id_display_variants_collide():
    """Test display variants of one name share an id."""
    assert to_id("Mr. Mime") == to_id("mr mime") == to_id("MR-MIME")
