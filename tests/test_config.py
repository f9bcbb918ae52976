"""Tests for planner settings."""

from city_planner.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_SIZE", "HISTORY_LIMIT", "BASE_YEAR", "MAX_YEAR", "LAYOUT_SEED"):
            monkeypatch.delenv(f"CITY_PLANNER_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_size == "medium"
        assert settings.history_limit == 50
        assert settings.base_year == 2025
        assert settings.max_year == 2050
        assert settings.layout_seed is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CITY_PLANNER_HISTORY_LIMIT", "10")
        monkeypatch.setenv("CITY_PLANNER_LAYOUT_SEED", "42")
        settings = Settings(_env_file=None)
        assert settings.history_limit == 10
        assert settings.layout_seed == 42
