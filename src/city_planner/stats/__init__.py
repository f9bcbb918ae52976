"""City statistics module."""

from city_planner.stats.engine import BOUNDED_INDICATORS, CityStats, calculate_stats
from city_planner.stats.sustainability import DEFAULT_WEIGHTS, SustainabilityWeights

__all__ = [
    "BOUNDED_INDICATORS",
    "CityStats",
    "DEFAULT_WEIGHTS",
    "SustainabilityWeights",
    "calculate_stats",
]
