from usage_stats.windows import ALL_DAYS, Window, day_windows, month_window


def test_all_days():
    """Test day labels run from 01 to 31 as two-digit strings."""
    assert len(ALL_DAYS) == 31
    assert ALL_DAYS[0] == "01"
    assert ALL_DAYS[8] == "09"
    assert ALL_DAYS[-1] == "31"


def test_month_window():
    """Test a month window covers every day label."""
    window = month_window("gen9ou", "2023", "02")

    assert window.is_day is False
    assert window.days == ALL_DAYS
    assert window.path_parts == ("gen9ou", "2023", "02")
    assert window.title == "gen9ou 2023/02 Usage Stats"


def test_day_window():
    """Test a day window covers only its own day."""
    window = Window("gen9ou", "2023", "02", "30")

    assert window.is_day is True
    assert window.days == ("30",)
    assert window.path_parts == ("gen9ou", "2023", "02", "30")
    assert window.title == "gen9ou 2023/02/30 Usage Stats"
    assert window.species_title("pikachu") == "gen9ou 2023/02/30 pikachu Usage Stats"


def test_day_windows():
    """Test a month has 31 day windows in label order."""
    windows = day_windows("gen9ou", "2023", "04")

    assert [w.day for w in windows] == list(ALL_DAYS)
    assert all(w.month == "04" and w.format == "gen9ou" for w in windows)
