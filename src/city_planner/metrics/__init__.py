"""City metrics module - ratings, indicators and recommendations."""

from city_planner.metrics.indicators import (
    CityMetrics,
    Indicator,
    compare_stats,
    construction_cost,
    zone_distribution_chart,
)
from city_planner.metrics.ratings import Rating, carbon_label, rating
from city_planner.metrics.recommendations import Recommendation, build_recommendations

__all__ = [
    "CityMetrics",
    "Indicator",
    "Rating",
    "Recommendation",
    "build_recommendations",
    "carbon_label",
    "compare_stats",
    "construction_cost",
    "rating",
    "zone_distribution_chart",
]
