"""Tests for city export and import."""

import json

import pytest

from city_planner.grid import City, CitySize, ZoneType, load_city
from city_planner.grid.schemas import CityPayload
from city_planner.stats import CityStats


def _types(city):
    return [[zone.type for zone in row] for row in city.grid]


def _payload(grid_size: int = 3, zone_type: str = "green", **extra) -> dict:
    payload = {
        "gridSize": grid_size,
        "grid": [[{"type": zone_type} for _ in range(grid_size)] for _ in range(grid_size)],
    }
    payload.update(extra)
    return payload


class TestExport:
    def test_export_shape(self, generated_city):
        data = generated_city.export_data()
        assert set(data) == {
            "id", "name", "size", "gridSize", "grid", "stats", "distribution", "exportedAt",
        }
        assert data["size"] == "small"
        assert data["gridSize"] == 40
        assert data["grid"][0][0].keys() == {"type", "id"}
        assert data["stats"]["sustainabilityScore"] == generated_city.stats.sustainability_score
        assert sum(data["distribution"].values()) == 1600

    def test_export_json(self, empty_city):
        data = json.loads(empty_city.export_json())
        assert data["name"] == "Test City"
        assert data["distribution"]["empty"] == 100


class TestImport:
    def test_round_trip(self, generated_city):
        data = generated_city.export_data()
        copy = City(40)
        assert copy.import_data(data) is True

        assert copy.id == generated_city.id
        assert copy.name == generated_city.name
        assert _types(copy) == _types(generated_city)
        assert copy.grid[5][7].id == generated_city.grid[5][7].id
        assert copy.distribution == generated_city.distribution
        assert copy.stats == generated_city.stats

    def test_import_json(self, generated_city):
        copy = City(40)
        assert copy.import_json(generated_city.export_json()) is True
        assert copy.stats == generated_city.stats

    def test_import_records_history(self, empty_city):
        assert empty_city.import_data(_payload(10)) is True
        assert empty_city.undo() is True
        assert empty_city.built_cells == 0

    def test_distribution_recounted_from_grid(self, empty_city):
        data = _payload(
            10, "residential",
            distribution={"residential": 1},
            stats={"population": 5},
        )
        assert empty_city.import_data(data) is True
        assert empty_city.distribution[ZoneType.RESIDENTIAL] == 100
        assert empty_city.stats.population == 10_000

    def test_import_drops_generation_ratios(self, empty_city):
        empty_city.generate_layout({"residentialRatio": 0.5}, seed=1)
        assert empty_city.import_data(_payload(10)) is True
        assert empty_city.layout_params is None

    def test_grid_size_mismatch_rejected(self, empty_city):
        assert empty_city.import_data(_payload(12)) is False
        assert empty_city.built_cells == 0

    @pytest.mark.parametrize(
        "data",
        [
            "not a payload",
            {},
            {"gridSize": 10, "grid": []},
            {"gridSize": 2, "grid": [[{"type": "green"}], [{"type": "green"}]]},
            {"gridSize": 1, "grid": [[{"type": "lava"}]]},
            {"gridSize": 0, "grid": []},
        ],
    )
    def test_malformed_payload_leaves_city_untouched(self, empty_city, data):
        before = empty_city.export_data()
        assert empty_city.import_data(data) is False
        after = empty_city.export_data()
        before.pop("exportedAt")
        after.pop("exportedAt")
        assert after == before
        assert len(empty_city.history) == 1

    def test_one_bad_cell_rejects_whole_grid(self, empty_city):
        data = _payload(10)
        data["grid"][9][9] = {"type": "volcano"}
        assert empty_city.import_data(data) is False
        assert empty_city.built_cells == 0

    def test_invalid_json(self, empty_city):
        assert empty_city.import_json("{not json") is False


class TestPayloadDefaults:
    def test_missing_fields_defaulted(self):
        payload = CityPayload.model_validate(_payload(3))
        assert payload.name == "Imported City"
        assert payload.size == CitySize.MEDIUM
        assert payload.id
        assert all(record.id for row in payload.grid for record in row)

    def test_grid_size_from_size_class(self):
        payload = CityPayload.model_validate({
            "size": "small",
            "grid": [[{"type": "road"}] * 50 for _ in range(50)],
        })
        assert payload.grid_size == 50

    def test_unknown_size_falls_back_to_medium(self):
        payload = CityPayload.model_validate(_payload(3, size="gigantic"))
        assert payload.size == CitySize.MEDIUM


class TestLoadCity:
    def test_builds_new_city(self):
        city = load_city(_payload(3, name="Tiny", stats={"population": 999}))
        assert city.name == "Tiny"
        assert city.grid_size == 3
        assert city.distribution[ZoneType.GREEN] == 9
        assert city.stats.population == 0
        assert len(city.history) == 1
        assert city.undo() is False

    def test_malformed_returns_none(self):
        assert load_city({"grid": "nope"}) is None

    def test_stats_match_fresh_computation(self, generated_city):
        city = load_city(generated_city.export_data())
        assert city.stats == generated_city.stats
        assert city.stats != CityStats()
