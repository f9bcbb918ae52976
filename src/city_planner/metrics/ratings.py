"""Rating tiers and display labels for city indicators."""

from enum import StrEnum


class Rating(StrEnum):
    """Four-tier rating for bounded 0-100 scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# Lower bound of each tier, best first
RATING_THRESHOLDS: list[tuple[int, Rating]] = [
    (80, Rating.EXCELLENT),
    (60, Rating.GOOD),
    (40, Rating.FAIR),
]

FAIR_THRESHOLD = 40

# Green coverage is rated on a stretched scale: 40% green already counts as excellent
GREEN_COVERAGE_RATING_SCALE = 2.5

# Upper bound of each carbon band (inclusive), lowest first
CARBON_LABELS: list[tuple[int, str]] = [
    (-20, "Carbon Negative"),
    (0, "Carbon Neutral"),
    (30, "Low Emissions"),
    (60, "Moderate Emissions"),
]
CARBON_HIGH_LABEL = "High Emissions"


def rating(score: float) -> Rating:
    for threshold, tier in RATING_THRESHOLDS:
        if score >= threshold:
            return tier
    return Rating.POOR


def green_coverage_score(green_coverage: float) -> float:
    return min(100.0, green_coverage * GREEN_COVERAGE_RATING_SCALE)


def carbon_label(carbon_footprint: float) -> str:
    for upper, label in CARBON_LABELS:
        if carbon_footprint <= upper:
            return label
    return CARBON_HIGH_LABEL


def carbon_is_good(carbon_footprint: float) -> bool:
    return carbon_footprint <= 0


def format_number(value: float) -> str:
    """Compact display form: 1.2M, 650.0K, 980."""
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if magnitude >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:,.0f}"
