"""Presentation-ready indicators built from a city's statistics.

Everything here reads the city and returns plain dicts for dashboards,
charts and reports; nothing mutates the city.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from city_planner.grid.catalog import ZONE_CATALOG
from city_planner.grid.types import ZoneType
from city_planner.metrics.ratings import (
    carbon_is_good,
    carbon_label,
    format_number,
    green_coverage_score,
    rating,
)
from city_planner.metrics.recommendations import Recommendation, build_recommendations
from city_planner.stats.engine import CityStats

if TYPE_CHECKING:
    from city_planner.grid.model import City

# Chart order for built zone types
CHART_ZONE_ORDER = [
    ZoneType.RESIDENTIAL,
    ZoneType.COMMERCIAL,
    ZoneType.INDUSTRIAL,
    ZoneType.GREEN,
    ZoneType.TRANSIT,
    ZoneType.ROAD,
]

COMPARED_FIELDS = [
    "sustainability_score",
    "population",
    "green_coverage",
    "transit_score",
    "walkability",
    "carbon_footprint",
]


@dataclass(frozen=True)
class Indicator:
    """One dashboard card."""

    value: int
    label: str
    rating: str

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "label": self.label, "rating": self.rating}


def zone_distribution_chart(distribution: Mapping[ZoneType, int]) -> dict[str, list]:
    """Chart data: labels, percentage shares of built cells and colors."""
    built = sum(distribution.get(zone_type, 0) for zone_type in CHART_ZONE_ORDER)
    labels, data, colors = [], [], []
    for zone_type in CHART_ZONE_ORDER:
        spec = ZONE_CATALOG[zone_type]
        count = distribution.get(zone_type, 0)
        labels.append(spec.label)
        data.append(round(count / built * 100, 1) if built > 0 else 0.0)
        colors.append(spec.color)
    return {"labels": labels, "data": data, "colors": colors}


def construction_cost(distribution: Mapping[ZoneType, int]) -> int:
    """Total construction cost (thousands) of every zoned cell."""
    return sum(
        ZONE_CATALOG[zone_type].cost * count
        for zone_type, count in distribution.items()
        if zone_type in ZONE_CATALOG
    )


def compare_stats(first: CityStats, second: CityStats) -> dict[str, int]:
    """Signed differences (second - first) for the headline indicators."""
    diffs = {}
    for field_name in COMPARED_FIELDS:
        head, *rest = field_name.split("_")
        key = head + "".join(part.title() for part in rest)
        diffs[key] = getattr(second, field_name) - getattr(first, field_name)
    return diffs


class CityMetrics:
    """Reads a city's statistics and turns them into labeled indicators."""

    def __init__(self, city: "City") -> None:
        self.city = city

    @property
    def stats(self) -> CityStats:
        return self.city.stats

    def carbon_footprint(self) -> dict[str, Any]:
        value = self.stats.carbon_footprint
        good = carbon_is_good(value)
        return {
            "value": value,
            "label": carbon_label(value),
            "status": "good" if good else "warn",
            "good": good,
        }

    def energy_efficiency(self) -> Indicator:
        value = self.stats.energy_efficiency
        return Indicator(value, f"{value}%", rating(value))

    def green_coverage(self) -> Indicator:
        value = self.stats.green_coverage
        return Indicator(value, f"{value}%", rating(green_coverage_score(value)))

    def transit_score(self) -> Indicator:
        value = self.stats.transit_score
        return Indicator(value, f"{value}/100", rating(value))

    def walkability(self) -> Indicator:
        value = self.stats.walkability
        return Indicator(value, f"{value}/100", rating(value))

    def air_quality(self) -> Indicator:
        value = self.stats.air_quality
        tier = rating(value)
        return Indicator(value, tier.title(), tier)

    def get_recommendations(self) -> list[Recommendation]:
        return build_recommendations(self.stats, self.city.distribution)

    def get_all(self) -> dict[str, Any]:
        """Every indicator in one JSON-ready dict."""
        stats = self.stats
        air = self.air_quality().to_dict()
        air["status"] = air["rating"]
        return {
            "sustainabilityScore": stats.sustainability_score,
            "sustainabilityRating": rating(stats.sustainability_score),
            "population": {
                "value": stats.population,
                "label": format_number(stats.population),
                "target": self.city.target_population,
            },
            "energyConsumption": {
                "value": stats.energy_consumption,
                "label": f"{format_number(stats.energy_consumption)} MWh",
            },
            "constructionCost": construction_cost(self.city.distribution),
            "carbonFootprint": self.carbon_footprint(),
            "energyEfficiency": self.energy_efficiency().to_dict(),
            "greenCoverage": self.green_coverage().to_dict(),
            "transitScore": self.transit_score().to_dict(),
            "walkability": self.walkability().to_dict(),
            "airQuality": air,
            "zoneDistribution": zone_distribution_chart(self.city.distribution),
        }

    def report(self) -> dict[str, Any]:
        """Export payload, indicators and recommendations for report renderers."""
        return {
            "city": self.city.export_data(),
            "metrics": self.get_all(),
            "recommendations": [r.to_dict() for r in self.get_recommendations()],
        }
