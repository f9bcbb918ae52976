"""Sample city templates and named layout presets.

Templates are modeled on real-world cities known for their planning
approach. Each maps to a grid size and the ratio parameters used to
generate its layout.
"""

from typing import Any

from city_planner.grid.model import City
from city_planner.grid.types import LayoutParams

SAMPLE_CITIES: dict[str, dict[str, Any]] = {
    "copenhagen": {
        "name": "Copenhagen Model",
        "description": "Based on Copenhagen, Denmark - a world leader in sustainable urban planning",
        "population": 650_000,
        "grid_size": 80,
        "ratios": {
            "residentialRatio": 0.30,
            "commercialRatio": 0.12,
            "industrialRatio": 0.05,
            "greenRatio": 0.35,
            "transitRatio": 0.12,
            "roadRatio": 0.06,
        },
        "features": [
            "35% green coverage with connected parks",
            "Extensive cycling infrastructure",
            "District heating network",
            "Harbor front regeneration",
        ],
    },
    "singapore": {
        "name": "Singapore Model",
        "description": "Based on Singapore - high-density, transit-oriented smart city",
        "population": 5_900_000,
        "grid_size": 120,
        "ratios": {
            "residentialRatio": 0.35,
            "commercialRatio": 0.20,
            "industrialRatio": 0.10,
            "greenRatio": 0.18,
            "transitRatio": 0.12,
            "roadRatio": 0.05,
        },
        "features": [
            "Integrated transit network (MRT)",
            "High-rise residential clusters",
            "Smart traffic management",
            "Gardens and skyparks",
        ],
    },
    "curitiba": {
        "name": "Curitiba Model",
        "description": "Based on Curitiba, Brazil - pioneer of Bus Rapid Transit",
        "population": 1_900_000,
        "grid_size": 100,
        "ratios": {
            "residentialRatio": 0.38,
            "commercialRatio": 0.15,
            "industrialRatio": 0.08,
            "greenRatio": 0.22,
            "transitRatio": 0.12,
            "roadRatio": 0.05,
        },
        "features": [
            "Bus Rapid Transit (BRT) corridors",
            "Linear parks along waterways",
            "Mixed-use development zones",
            "Pedestrian-only downtown",
        ],
    },
    "amsterdam": {
        "name": "Amsterdam Model",
        "description": "Based on Amsterdam, Netherlands - bicycle-friendly canal city",
        "population": 870_000,
        "grid_size": 80,
        "ratios": {
            "residentialRatio": 0.32,
            "commercialRatio": 0.15,
            "industrialRatio": 0.06,
            "greenRatio": 0.25,
            "transitRatio": 0.15,
            "roadRatio": 0.07,
        },
        "features": [
            "World-class cycling infrastructure",
            "Dense tram and metro network",
            "Historic canal integration",
            "Car-free zones",
        ],
    },
    "portland": {
        "name": "Portland Model",
        "description": "Based on Portland, Oregon - urban growth boundary pioneer",
        "population": 650_000,
        "grid_size": 80,
        "ratios": {
            "residentialRatio": 0.35,
            "commercialRatio": 0.12,
            "industrialRatio": 0.08,
            "greenRatio": 0.28,
            "transitRatio": 0.10,
            "roadRatio": 0.07,
        },
        "features": [
            "Urban growth boundary",
            "Light rail transit (MAX)",
            "Urban forest cover",
            "Neighborhood-scale planning",
        ],
    },
    "masdar": {
        "name": "Masdar City Model",
        "description": "Based on Masdar City, UAE - zero-carbon sustainable city",
        "population": 50_000,
        "grid_size": 50,
        "ratios": {
            "residentialRatio": 0.25,
            "commercialRatio": 0.20,
            "industrialRatio": 0.02,
            "greenRatio": 0.30,
            "transitRatio": 0.18,
            "roadRatio": 0.05,
        },
        "features": [
            "100% renewable energy target",
            "Personal Rapid Transit pods",
            "Zero-waste systems",
            "Passive cooling design",
        ],
    },
    "barcelona": {
        "name": "Barcelona Superblocks",
        "description": "Based on Barcelona's superblock (superilles) model",
        "population": 1_600_000,
        "grid_size": 100,
        "ratios": {
            "residentialRatio": 0.35,
            "commercialRatio": 0.18,
            "industrialRatio": 0.05,
            "greenRatio": 0.22,
            "transitRatio": 0.15,
            "roadRatio": 0.05,
        },
        "features": [
            "Superblock grid pattern",
            "Interior plazas and parks",
            "Reduced through-traffic",
            "Ground-floor retail mix",
        ],
    },
    "tokyo": {
        "name": "Tokyo TOD Model",
        "description": "Based on Tokyo, Japan - transit-oriented mega-city",
        "population": 14_000_000,
        "grid_size": 120,
        "ratios": {
            "residentialRatio": 0.35,
            "commercialRatio": 0.22,
            "industrialRatio": 0.08,
            "greenRatio": 0.12,
            "transitRatio": 0.18,
            "roadRatio": 0.05,
        },
        "features": [
            "Dense rail network integration",
            "Mixed-use station districts",
            "Efficient land use",
            "Advanced smart city tech",
        ],
    },
}

# City-type presets used when no template or explicit ratios are given
LAYOUT_PRESETS: dict[str, LayoutParams] = {
    "eco": LayoutParams(
        residential_ratio=0.30, commercial_ratio=0.12, industrial_ratio=0.03,
        green_ratio=0.40, transit_ratio=0.12, road_ratio=0.05,
    ),
    "tech": LayoutParams(
        residential_ratio=0.30, commercial_ratio=0.28, industrial_ratio=0.08,
        green_ratio=0.20, transit_ratio=0.12, road_ratio=0.05,
    ),
    "transit": LayoutParams(
        residential_ratio=0.38, commercial_ratio=0.15, industrial_ratio=0.05,
        green_ratio=0.20, transit_ratio=0.20, road_ratio=0.03,
    ),
    "mixed": LayoutParams(),
}


def get_sample_city(sample_id: str) -> dict[str, Any] | None:
    return SAMPLE_CITIES.get(sample_id)


def list_sample_cities() -> list[dict[str, Any]]:
    """Summaries of every template for pickers."""
    return [
        {
            "id": sample_id,
            "name": sample["name"],
            "description": sample["description"],
            "population": sample["population"],
        }
        for sample_id, sample in SAMPLE_CITIES.items()
    ]


def build_sample_city(sample_id: str, seed: int | None = None) -> City | None:
    """Create a city at the template's size and generate its layout."""
    sample = get_sample_city(sample_id)
    if sample is None:
        return None

    city = City(sample["grid_size"], name=sample["name"], seed=seed)
    city.generate_layout(sample["ratios"])
    return city
