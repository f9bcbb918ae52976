"""Temporal simulation module."""

from city_planner.simulation.scenarios import SCENARIOS, get_scenario
from city_planner.simulation.simulator import TemporalSimulator, grow_params
from city_planner.simulation.types import Scenario, YearProjection

__all__ = [
    "SCENARIOS",
    "Scenario",
    "TemporalSimulator",
    "YearProjection",
    "get_scenario",
    "grow_params",
]
