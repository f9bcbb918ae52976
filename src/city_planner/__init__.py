"""Zoned city planning core: grid model, statistics, metrics and simulation."""

# grid must load before stats: the stats engine reads the grid's zone catalog
from city_planner.grid import City, CitySize, LayoutParams, Zone, ZoneType, load_city
from city_planner.metrics import CityMetrics
from city_planner.simulation import Scenario, TemporalSimulator
from city_planner.stats import CityStats, calculate_stats

__version__ = "0.1.0"
__all__ = [
    "City",
    "CityMetrics",
    "CitySize",
    "CityStats",
    "LayoutParams",
    "Scenario",
    "TemporalSimulator",
    "Zone",
    "ZoneType",
    "calculate_stats",
    "load_city",
]
