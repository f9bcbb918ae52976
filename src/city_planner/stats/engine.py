"""Statistics engine - derives city indicators from a zone distribution.

Every indicator is recomputed together from the distribution and the zone
catalog; nothing here holds state.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from city_planner.grid.catalog import ZONE_CATALOG, ZoneSpec
from city_planner.grid.types import ZoneType
from city_planner.stats.sustainability import (
    DEFAULT_WEIGHTS,
    SustainabilityWeights,
    clamp,
    round_half_up,
)

# Indicators clamped to [0, 100]
BOUNDED_INDICATORS = (
    "green_coverage",
    "transit_score",
    "walkability",
    "air_quality",
    "energy_efficiency",
    "sustainability_score",
)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class CityStats:
    """Derived indicators for a city.

    carbon_footprint is signed and unbounded (negative is better);
    population and energy_consumption are raw totals.
    """

    population: int = 0
    energy_consumption: int = 0
    carbon_footprint: int = 0
    green_coverage: int = 0
    transit_score: int = 50
    walkability: int = 50
    air_quality: int = 60
    energy_efficiency: int = 60
    sustainability_score: int = 50

    def to_dict(self) -> dict[str, int]:
        """Convert to the camelCase dict used in exports."""
        return {_camel(key): value for key, value in asdict(self).items()}


def calculate_stats(
    distribution: Mapping[ZoneType, int],
    grid_size: int,
    catalog: Mapping[ZoneType, ZoneSpec] = ZONE_CATALOG,
    weights: SustainabilityWeights = DEFAULT_WEIGHTS,
) -> CityStats:
    """Compute all indicators for a distribution on a grid_size x grid_size grid.

    Ratios are counts over built (non-empty) cells and are zero when nothing
    is built.
    """
    total_cells = grid_size * grid_size
    built_cells = total_cells - distribution.get(ZoneType.EMPTY, 0)

    def count(zone_type: ZoneType) -> int:
        return distribution.get(zone_type, 0)

    def ratio(zone_type: ZoneType) -> float:
        return count(zone_type) / built_cells if built_cells > 0 else 0.0

    population = sum(
        catalog[zone_type].population * n
        for zone_type, n in distribution.items()
        if zone_type in catalog
    )
    energy = sum(
        catalog[zone_type].energy * n
        for zone_type, n in distribution.items()
        if zone_type in catalog
    )

    green_ratio = ratio(ZoneType.GREEN)
    transit_ratio = ratio(ZoneType.TRANSIT)
    residential_ratio = ratio(ZoneType.RESIDENTIAL)
    industrial_ratio = ratio(ZoneType.INDUSTRIAL)

    green_coverage = round_half_up(green_ratio * 100)

    transit_score = clamp(round_half_up(50 + transit_ratio * 200 - residential_ratio * 30))
    walkability = clamp(round_half_up(
        50 + green_coverage * 0.5 + transit_ratio * 50 - industrial_ratio * 30
    ))
    air_quality = clamp(round_half_up(
        60 + green_coverage * 0.8 + transit_ratio * 20 - industrial_ratio * 50
    ))
    energy_efficiency = clamp(round_half_up(
        60 + green_coverage * 0.3 - industrial_ratio * 20
    ))

    # Relative carbon balance: emitters minus offsets over a 5-per-cell scale
    if built_cells > 0:
        net_carbon = (
            count(ZoneType.INDUSTRIAL) * 10
            + count(ZoneType.COMMERCIAL) * 5
            - count(ZoneType.GREEN) * 8
            - count(ZoneType.TRANSIT) * 4
        )
        carbon_footprint = round_half_up(net_carbon / (built_cells * 5) * 100)
    else:
        carbon_footprint = 0

    return CityStats(
        population=population,
        energy_consumption=energy,
        carbon_footprint=carbon_footprint,
        green_coverage=int(clamp(green_coverage)),
        transit_score=int(transit_score),
        walkability=int(walkability),
        air_quality=int(air_quality),
        energy_efficiency=int(energy_efficiency),
        sustainability_score=weights.score(distribution),
    )
