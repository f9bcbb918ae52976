"""Sustainability scoring policy.

The composite score is a pluggable policy: it only has to be a pure function
of the zone distribution bounded to [0, 100]. The default weights reward
green space and transit, give partial credit for housing up to a cap and
penalize industry and excess road surface.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass

from city_planner.grid.types import ZoneType

EMPTY_CITY_SCORE = 50


def round_half_up(value: float) -> int:
    """Round halves toward +inf, matching the dashboard rounding."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class SustainabilityWeights:
    """Weights for the composite sustainability score (ratios over built cells)."""

    base: float = 40.0
    green: float = 80.0
    transit: float = 60.0
    residential: float = 25.0
    residential_cap: float = 0.4
    industrial: float = 70.0
    road_excess: float = 20.0
    road_allowance: float = 0.15

    def score(self, distribution: Mapping[ZoneType, int]) -> int:
        """Compute the bounded composite score for a distribution."""
        built = sum(
            count for zone_type, count in distribution.items()
            if zone_type != ZoneType.EMPTY
        )
        if built <= 0:
            return EMPTY_CITY_SCORE

        def share(zone_type: ZoneType) -> float:
            return distribution.get(zone_type, 0) / built

        raw = (
            self.base
            + share(ZoneType.GREEN) * self.green
            + share(ZoneType.TRANSIT) * self.transit
            + min(share(ZoneType.RESIDENTIAL), self.residential_cap) * self.residential
            - share(ZoneType.INDUSTRIAL) * self.industrial
            - max(0.0, share(ZoneType.ROAD) - self.road_allowance) * self.road_excess
        )
        return int(clamp(round_half_up(raw)))


DEFAULT_WEIGHTS = SustainabilityWeights()
