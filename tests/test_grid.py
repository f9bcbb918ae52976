"""Tests for the city grid model."""

import pytest

from city_planner.grid import City, CitySize, LayoutParams, Zone, ZoneType
from city_planner.grid.catalog import ZONE_CATALOG, is_known_zone
from city_planner.grid.types import size_for_grid
from city_planner.stats import CityStats


def _assert_consistent(city):
    assert sum(city.distribution.values()) == city.total_cells
    counted = {zone_type: 0 for zone_type in ZONE_CATALOG}
    for row in city.grid:
        for zone in row:
            counted[zone.type] += 1
    assert counted == city.distribution
    assert city.stats == city.calculate_stats()


class TestCityConstruction:
    def test_named_sizes(self):
        assert City("small").grid_size == 50
        assert City(CitySize.MEDIUM).grid_size == 80
        large = City("large")
        assert large.grid_size == 120
        assert large.target_population == 2_000_000

    def test_explicit_grid_size_buckets_size_class(self):
        assert City(10).size == CitySize.SMALL
        assert City(90).size == CitySize.MEDIUM
        assert City(101).size == CitySize.LARGE

    def test_size_buckets(self):
        assert size_for_grid(60) == CitySize.SMALL
        assert size_for_grid(61) == CitySize.MEDIUM
        assert size_for_grid(100) == CitySize.MEDIUM

    def test_invalid_sizes_rejected(self):
        with pytest.raises(ValueError):
            City(0)
        with pytest.raises(ValueError):
            City(161)
        with pytest.raises(ValueError):
            City("huge")

    def test_new_city_is_empty(self, empty_city):
        assert empty_city.distribution[ZoneType.EMPTY] == 100
        assert empty_city.built_cells == 0
        assert empty_city.stats == CityStats()
        assert len(empty_city.history) == 1
        _assert_consistent(empty_city)


class TestSetZone:
    def test_sets_cell(self, empty_city):
        assert empty_city.set_zone(3, 4, ZoneType.RESIDENTIAL) is True
        assert empty_city.get_zone(3, 4).type == ZoneType.RESIDENTIAL
        assert empty_city.get_zone(4, 3).type == ZoneType.EMPTY
        assert empty_city.distribution[ZoneType.RESIDENTIAL] == 1
        assert empty_city.stats.population == 100
        _assert_consistent(empty_city)

    def test_accepts_string_type(self, empty_city):
        assert empty_city.set_zone(0, 0, "green") is True
        assert empty_city.distribution[ZoneType.GREEN] == 1

    def test_same_type_is_noop(self, empty_city):
        empty_city.set_zone(1, 1, ZoneType.TRANSIT)
        zone = empty_city.get_zone(1, 1)
        assert empty_city.set_zone(1, 1, ZoneType.TRANSIT) is False
        assert empty_city.get_zone(1, 1) is zone
        assert empty_city.distribution[ZoneType.TRANSIT] == 1

    def test_retyping_moves_counts(self, empty_city):
        empty_city.set_zone(1, 1, ZoneType.INDUSTRIAL)
        empty_city.set_zone(1, 1, ZoneType.GREEN)
        assert empty_city.distribution[ZoneType.INDUSTRIAL] == 0
        assert empty_city.distribution[ZoneType.GREEN] == 1
        _assert_consistent(empty_city)

    def test_retyping_assigns_new_id(self, empty_city):
        before = empty_city.get_zone(2, 2).id
        empty_city.set_zone(2, 2, ZoneType.ROAD)
        assert empty_city.get_zone(2, 2).id != before

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 10), (1.5, 2)])
    def test_out_of_range_is_noop(self, empty_city, x, y):
        assert empty_city.set_zone(x, y, ZoneType.RESIDENTIAL) is False
        assert empty_city.built_cells == 0

    def test_unknown_type_is_noop(self, empty_city):
        assert empty_city.set_zone(0, 0, "volcano") is False
        assert empty_city.built_cells == 0

    def test_does_not_record_history(self, empty_city):
        empty_city.set_zone(0, 0, ZoneType.RESIDENTIAL)
        assert len(empty_city.history) == 1


class TestFillArea:
    def test_fills_inclusive_rectangle(self, empty_city):
        changed = empty_city.fill_area(2, 2, 4, 3, ZoneType.COMMERCIAL)
        assert changed == 6
        assert empty_city.distribution[ZoneType.COMMERCIAL] == 6
        assert empty_city.get_zone(4, 3).type == ZoneType.COMMERCIAL
        assert empty_city.get_zone(5, 3).type == ZoneType.EMPTY
        _assert_consistent(empty_city)

    def test_corners_in_any_order(self, empty_city):
        assert empty_city.fill_area(4, 3, 2, 2, ZoneType.GREEN) == 6

    def test_clamps_to_grid(self, empty_city):
        assert empty_city.fill_area(-5, -5, 2, 2, ZoneType.ROAD) == 9
        assert empty_city.fill_area(8, 8, 30, 30, ZoneType.ROAD) == 4
        _assert_consistent(empty_city)

    def test_fully_outside_changes_nothing(self, empty_city):
        assert empty_city.fill_area(20, 20, 30, 30, ZoneType.ROAD) == 0
        assert empty_city.built_cells == 0

    def test_counts_only_changed_cells(self, empty_city):
        empty_city.set_zone(0, 0, ZoneType.GREEN)
        assert empty_city.fill_area(0, 0, 1, 1, ZoneType.GREEN) == 3

    def test_records_one_history_step(self, empty_city):
        empty_city.fill_area(0, 0, 9, 9, ZoneType.RESIDENTIAL)
        assert len(empty_city.history) == 2
        assert empty_city.undo() is True
        assert empty_city.built_cells == 0

    def test_unknown_type_is_noop(self, empty_city):
        assert empty_city.fill_area(0, 0, 3, 3, "lava") == 0
        assert empty_city.built_cells == 0


class TestGetZoneAndClear:
    def test_get_zone_out_of_range(self, empty_city):
        assert empty_city.get_zone(10, 10) is None
        assert empty_city.get_zone(-1, 0) is None

    def test_get_zone_returns_zone(self, empty_city):
        zone = empty_city.get_zone(0, 0)
        assert isinstance(zone, Zone)
        assert zone.id

    def test_clear_resets_everything(self, generated_city):
        generated_city.clear()
        assert generated_city.built_cells == 0
        assert generated_city.layout_params is None
        assert generated_city.stats == CityStats()
        _assert_consistent(generated_city)


class TestGenerateLayout:
    def test_distribution_matches_grid(self, generated_city):
        assert generated_city.built_cells > 0
        _assert_consistent(generated_city)

    def test_records_history_and_params(self, empty_city):
        params = empty_city.generate_layout({"greenRatio": 0.4})
        assert params.green_ratio == 0.4
        assert empty_city.layout_params == params
        assert len(empty_city.history) == 2

    def test_seeded_layouts_repeat(self):
        first, second = City(30), City(30)
        first.generate_layout(seed=5)
        second.generate_layout(seed=5)
        assert [[z.type for z in row] for row in first.grid] == [
            [z.type for z in row] for row in second.grid
        ]

    def test_single_cell_grid(self):
        city = City(1)
        city.generate_layout(seed=1)
        assert city.get_zone(0, 0).type == ZoneType.ROAD


class TestLayoutParams:
    def test_defaults(self):
        params = LayoutParams()
        assert params.residential_ratio == 0.35
        assert params.road_ratio == 0.07

    def test_out_of_range_values_clamped(self):
        params = LayoutParams.model_validate({"greenRatio": 0.9, "industrial_ratio": -1})
        assert params.green_ratio == 0.5
        assert params.industrial_ratio == 0.0

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError):
            LayoutParams(green_ratio="lots")

    def test_coerce(self):
        assert LayoutParams.coerce(None) == LayoutParams()
        params = LayoutParams(transit_ratio=0.2)
        assert LayoutParams.coerce(params) is params
        assert LayoutParams.coerce({"transitRatio": 0.2}) == params

    def test_to_dict_uses_camel_case(self):
        assert LayoutParams().to_dict()["residentialRatio"] == 0.35


class TestCatalog:
    def test_every_zone_type_catalogued(self):
        assert set(ZONE_CATALOG) == set(ZoneType)

    def test_is_known_zone(self):
        assert is_known_zone("residential")
        assert is_known_zone(ZoneType.ROAD)
        assert not is_known_zone("volcano")
        assert not is_known_zone(None)
