"""Zoned city grid module."""

from city_planner.grid.catalog import ZONE_CATALOG, ZoneSpec
from city_planner.grid.history import History, Snapshot
from city_planner.grid.model import City, load_city
from city_planner.grid.types import CitySize, LayoutParams, Zone, ZoneType

__all__ = [
    "City",
    "CitySize",
    "History",
    "LayoutParams",
    "Snapshot",
    "ZONE_CATALOG",
    "Zone",
    "ZoneSpec",
    "ZoneType",
    "load_city",
]
