"""Pytest configuration and fixtures for planner tests."""

import pytest

from city_planner.grid import City

LAYOUT_SEED = 11


@pytest.fixture
def empty_city():
    """A 10x10 city with nothing zoned."""
    return City(10, name="Test City", seed=1)


@pytest.fixture
def generated_city():
    """A 40x40 city with a seeded default layout."""
    city = City(40, name="Generated City", seed=LAYOUT_SEED)
    city.generate_layout(seed=LAYOUT_SEED)
    return city

