"""Built-in policy scenarios.

Each scenario lists ratio targets (replacing the baseline value) and
deltas (shifting it). Results are clamped by LayoutParams.
"""

from city_planner.simulation.types import Scenario

SCENARIOS: dict[str, Scenario] = {
    scenario.id: scenario
    for scenario in [
        # Parks, urban forests and cleaner industry
        Scenario(
            id="green_city",
            name="Green City Initiative",
            description="Convert underused land to parks and phase out heavy industry.",
            deltas={"green": 0.10, "industrial": -0.04},
        ),
        # Transit-oriented development around new hubs
        Scenario(
            id="transit_first",
            name="Transit First",
            description="Invest in rail and bus rapid transit ahead of road building.",
            deltas={"transit": 0.08, "road": -0.02, "residential": 0.02},
        ),
        Scenario(
            id="industrial_boom",
            name="Industrial Boom",
            description="Attract manufacturing at the expense of open space.",
            deltas={"industrial": 0.08, "green": -0.06, "commercial": 0.02},
        ),
        Scenario(
            id="densification",
            name="Densification",
            description="Upzone housing and mixed-use commercial in the inner rings.",
            deltas={"residential": 0.08, "commercial": 0.05, "green": -0.03},
        ),
        Scenario(
            id="car_free",
            name="Car-Free Core",
            description="Remove through traffic and hand street space to transit and parks.",
            targets={"road": 0.03},
            deltas={"transit": 0.10, "green": 0.05},
        ),
    ]
}


def get_scenario(scenario_id: str) -> Scenario | None:
    """Return the built-in scenario with this id, or None if unknown."""
    return SCENARIOS.get(scenario_id)
