DEFAULT_TRACKED_STATS: tuple[str, ...] = ("damagePerSecond", "hitpoints", "healthRecovery")


# Hero name -> stats file (relative to the data directory)
HERO_FILES: dict[str, str] = {
    "Barbarian King": "barbarian_king_stats.json",
    "Archer Queen": "archer_queen_stats.json",
    "Minion Prince": "minion_prince_stats.json",
    "Grand Warden": "grand_warden_stats.json",
    "Royal Champion": "royal_champion_stats.json",
}


STAT_DISPLAY_NAMES = {
    "damagePerSecond": "Damage Per Second",
    "hitpoints": "Hitpoints",
    "healthRecovery": "Health Recovery",
}

STAT_SHORT_NAMES = {
    "damagePerSecond": "DPS",
    "hitpoints": "HP",
    "healthRecovery": "Recovery",
}

# (background, border) for chart series
STAT_COLORS = {
    "damagePerSecond": ("rgba(255, 99, 132, 0.2)", "rgba(255, 99, 132, 1)"),
    "hitpoints": ("rgba(54, 162, 235, 0.2)", "rgba(54, 162, 235, 1)"),
    "healthRecovery": ("rgba(75, 192, 192, 0.2)", "rgba(75, 192, 192, 1)"),
}
DEFAULT_STAT_COLORS = ("rgba(153, 102, 255, 0.2)", "rgba(153, 102, 255, 1)")


# Growth bands for terminal bars, checked top-down: (lower bound, inclusive, rich style, legend)
GROWTH_BANDS = [
    (5.0, True, "bright_green", "High increase (≥5%)"),
    (3.0, True, "bright_yellow", "Good increase (3-5%)"),
    (1.0, True, "yellow", "Moderate increase (1-3%)"),
    (0.0, False, "blue", "Small increase (0-1%)"),
]
NO_GROWTH_STYLE = "dim"
NO_GROWTH_LEGEND = "Minimal/no increase"


def display_name(stat: str) -> str:
    return STAT_DISPLAY_NAMES.get(stat, stat)


def short_name(stat: str) -> str:
    return STAT_SHORT_NAMES.get(stat, display_name(stat))
