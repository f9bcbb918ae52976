"""Temporal simulation - projects a city forward in time under policy scenarios.

The simulator anchors on a saved baseline (grid snapshot plus the ratios
that describe it). A projection for a target year:
1. Starts from the baseline ratios
2. Merges the active scenario's targets and deltas
3. Grows the population-driving ratios along a saturating curve
4. Regenerates the city's grid from the result with the baseline seed

The baseline year always maps back to the saved baseline snapshot.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from city_planner.config import settings
from city_planner.grid.history import Snapshot
from city_planner.grid.model import City
from city_planner.grid.types import LayoutParams, ZoneType
from city_planner.simulation.scenarios import SCENARIOS
from city_planner.simulation.types import Scenario, YearProjection

logger = logging.getLogger(__name__)

# Maximum fractional growth per ratio as years -> infinity
GROWTH_CEILINGS: dict[str, float] = {
    "residential_ratio": 0.30,
    "commercial_ratio": 0.40,
}
# Years to reach ~63% of the growth ceiling
GROWTH_HORIZON_YEARS = 15.0

SEED_RANGE = 2**32


def growth_factor(years: int, ceiling: float, horizon: float = GROWTH_HORIZON_YEARS) -> float:
    """Monotonic saturating multiplier; exactly 1.0 at zero years."""
    if years <= 0:
        return 1.0
    return 1.0 + ceiling * (1.0 - math.exp(-years / horizon))


def grow_params(params: LayoutParams, years: int) -> LayoutParams:
    """Scale population-driving ratios for elapsed years (clamped by LayoutParams)."""
    if years <= 0:
        return params
    values = params.model_dump()
    for key, ceiling in GROWTH_CEILINGS.items():
        values[key] *= growth_factor(years, ceiling)
    return LayoutParams.model_validate(values)


def params_from_distribution(distribution: Mapping[ZoneType, int], total_cells: int) -> LayoutParams:
    """Describe a hand-drawn grid by its zone shares of the whole grid."""
    if total_cells <= 0:
        return LayoutParams()
    return LayoutParams.model_validate({
        f"{zone_type.value}_ratio": distribution.get(zone_type, 0) / total_cells
        for zone_type in (
            ZoneType.RESIDENTIAL,
            ZoneType.COMMERCIAL,
            ZoneType.INDUSTRIAL,
            ZoneType.GREEN,
            ZoneType.TRANSIT,
            ZoneType.ROAD,
        )
    })


@dataclass(frozen=True)
class Baseline:
    """The anchored state all projections start from."""

    snapshot: Snapshot
    params: LayoutParams
    seed: int


class TemporalSimulator:
    """Projects a city's layout across years and applies policy scenarios."""

    def __init__(
        self,
        city: City,
        *,
        scenarios: Mapping[str, Scenario] | None = None,
        base_year: int | None = None,
        max_year: int | None = None,
        seed: int | None = None,
    ) -> None:
        self.city = city
        self.scenarios = SCENARIOS if scenarios is None else scenarios
        self.base_year = settings.base_year if base_year is None else base_year
        self.max_year = settings.max_year if max_year is None else max_year
        if self.max_year < self.base_year:
            raise ValueError(
                f"max_year {self.max_year} is before base_year {self.base_year}"
            )
        self.seed = seed

        self.current_year = self.base_year
        self.active_scenario: Scenario | None = None
        self._baseline: Baseline | None = None

    @property
    def baseline(self) -> Baseline | None:
        return self._baseline

    @property
    def years_elapsed(self) -> int:
        return self.current_year - self.base_year

    def save_baseline(self) -> Baseline:
        """Anchor projections on the city's current state.

        Clears any active scenario and rewinds the simulated year.
        """
        params = self.city.layout_params or params_from_distribution(
            self.city.distribution, self.city.total_cells,
        )
        seed = self.seed if self.seed is not None else self.city.rng.randrange(SEED_RANGE)
        self._baseline = Baseline(snapshot=self.city.snapshot(), params=params, seed=seed)
        self.current_year = self.base_year
        self.active_scenario = None
        logger.info(
            "Saved simulation baseline for %s (year %d, sustainability %d)",
            self.city.name, self.base_year, self._baseline.snapshot.stats.sustainability_score,
        )
        return self._baseline

    def _ensure_baseline(self) -> Baseline:
        if self._baseline is None:
            return self.save_baseline()
        return self._baseline

    def resolve_scenario(self, scenario: Scenario | str) -> Scenario | None:
        if isinstance(scenario, Scenario):
            return scenario
        if isinstance(scenario, str):
            return self.scenarios.get(scenario)
        return None

    def is_supported_year(self, year: object) -> bool:
        return (
            isinstance(year, int) and not isinstance(year, bool)
            and self.base_year <= year <= self.max_year
        )

    def target_params(self, year: int, scenario: Scenario | None = None) -> LayoutParams:
        """Ratios projected for a year under a scenario (no mutation)."""
        baseline = self._ensure_baseline()
        params = baseline.params
        if scenario is not None:
            params = scenario.apply(params)
        return grow_params(params, year - self.base_year)

    def apply_scenario(self, scenario: Scenario | str) -> bool:
        """Activate a scenario and realize it at the current simulated year.

        Unknown scenario ids are rejected without touching the city.
        """
        resolved = self.resolve_scenario(scenario)
        if resolved is None:
            logger.warning("Rejected unknown scenario: %r", scenario)
            return False

        self._ensure_baseline()
        self.active_scenario = resolved
        self._realize(self.current_year)
        logger.info("Applied scenario %s at year %d", resolved.name, self.current_year)
        return True

    def set_target_year(self, year: int) -> bool:
        """Project the city to a year in [base_year, max_year].

        The base year restores the baseline exactly; an active scenario stays
        armed for later years. Out-of-range years are rejected.
        """
        if not self.is_supported_year(year):
            logger.warning(
                "Rejected target year %r (supported %d-%d)", year, self.base_year, self.max_year,
            )
            return False

        baseline = self._ensure_baseline()
        self.current_year = year
        if year == self.base_year:
            self.city.restore(baseline.snapshot)
        else:
            self._realize(year)
        logger.debug("Projected %s to year %d", self.city.name, year)
        return True

    def reset(self) -> None:
        """Drop the scenario and year projection and restore the baseline."""
        self.active_scenario = None
        self.current_year = self.base_year
        if self._baseline is not None:
            self.city.restore(self._baseline.snapshot)
            logger.info("Simulation reset to baseline for %s", self.city.name)

    def _realize(self, year: int) -> None:
        baseline = self._ensure_baseline()
        params = self.target_params(year, self.active_scenario)
        self.city.generate_layout(params, seed=baseline.seed)

    def project_range(
        self, start_year: int, end_year: int, step: int = 1,
    ) -> list[YearProjection] | None:
        """Project statistics for each year in [start_year, end_year].

        Runs on a scratch city so the live city is never touched. Returns
        None if either bound is outside the supported range.
        """
        if not (self.is_supported_year(start_year) and self.is_supported_year(end_year)):
            logger.warning(
                "Rejected projection range %r-%r (supported %d-%d)",
                start_year, end_year, self.base_year, self.max_year,
            )
            return None
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")

        baseline = self._ensure_baseline()
        scratch = City(self.city.grid_size, name=f"{self.city.name} (projection)", history_limit=1)
        projections = []
        for year in range(start_year, end_year + 1, step):
            if year == self.base_year:
                params, stats = baseline.params, baseline.snapshot.stats
            else:
                params = self.target_params(year, self.active_scenario)
                scratch.generate_layout(params, seed=baseline.seed)
                stats = scratch.stats
            projections.append(YearProjection(year=year, params=params, stats=stats))
        return projections
