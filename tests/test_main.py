"""Tests for the command-line entry point."""

import json

import pytest

from city_planner.main import build_city, build_parser, main


class TestCli:
    def test_sample_report(self, capsys):
        assert main(["--sample", "masdar", "--seed", "1"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["city"]["name"] == "Masdar City Model"
        assert report["simulation"] == {"year": 2025, "scenario": None}
        assert "sustainabilityScore" in report["metrics"]

    def test_scenario_and_year(self, capsys):
        args = ["--sample", "masdar", "--seed", "1", "--scenario", "car_free", "--year", "2035"]
        assert main(args) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["simulation"] == {"year": 2035, "scenario": "car_free"}

    def test_preset(self, capsys):
        assert main(["--preset", "eco", "--size", "small", "--seed", "2"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["city"]["gridSize"] == 50

    def test_unknown_scenario(self, capsys):
        assert main(["--sample", "masdar", "--scenario", "moon_base"]) == 2
        assert capsys.readouterr().out == ""

    def test_year_out_of_range(self):
        assert main(["--sample", "masdar", "--year", "1990"]) == 2

    def test_unknown_size(self):
        assert main(["--preset", "eco", "--size", "enormous"]) == 2

    def test_unknown_sample(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--sample", "atlantis"])
        assert exc.value.code == 2

    def test_unknown_sample_without_parser(self):
        args = build_parser().parse_args(["--seed", "1"])
        args.sample = "atlantis"
        with pytest.raises(ValueError):
            build_city(args)
