"""
Tests for the command line entry point.
"""

import os

import pandas as pd
import pytest

from main import create_parser, main, settings_from_args


class TestSettings:
    def test_defaults_are_kept(self):
        settings = settings_from_args(create_parser().parse_args([]))
        assert settings["latitude"] == 34.0
        assert settings["organs"] == ["leaves", "stems"]
        assert settings["self_shading"] is False

    def test_overrides(self):
        args = create_parser().parse_args(
            ["--latitude", "-12.5", "--k", "0.4", "--self-shading", "--organs", "roots", "--no-summary"]
        )
        settings = settings_from_args(args)
        assert settings["latitude"] == -12.5
        assert settings["K"] == 0.4
        assert settings["self_shading"] is True
        assert settings["organs"] == ["roots"]
        assert settings["create_summary"] is False


class TestMain:
    def test_constant_conditions_to_csv(self, tmp_path):
        result = main(
            ["--start-day", "1", "--end-day", "3", "--output-dir", str(tmp_path), "--storage-format", "csv"]
        )
        budget = pd.read_csv(result["daily"]["daily_budget"])
        assert list(budget["Day"]) == [1, 2, 3]

    def test_forcing_file(self, tmp_path):
        forcing = tmp_path / "forcing.csv"
        pd.DataFrame({"Day": [10, 11], "Temperature": [8.0, 9.0], "Depth": [0.3, 0.4]}).to_csv(forcing, index=False)
        result = main(
            ["--file-path", str(forcing), "--output-dir", str(tmp_path / "out"), "--storage-format", "csv"]
        )
        assert os.path.isfile(result["metadata"])

    def test_missing_forcing_file(self, tmp_path):
        assert main(["--file-path", str(tmp_path / "missing.csv"), "--output-dir", str(tmp_path)]) is None

    def test_invalid_latitude_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--latitude", "95", "--end-day", "2", "--output-dir", str(tmp_path)])
        assert exc_info.value.code == 2

    def test_empty_day_window_exits(self, tmp_path):
        forcing = tmp_path / "forcing.csv"
        pd.DataFrame({"Day": [10, 11], "Temperature": [8.0, 9.0], "Depth": [0.3, 0.4]}).to_csv(forcing, index=False)
        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "--file-path", str(forcing),
                    "--start-day", "100",
                    "--end-day", "110",
                    "--storage-format", "csv",
                    "--output-dir", str(tmp_path / "out"),
                ]
            )
        assert exc_info.value.code == 2
        assert not os.path.exists(tmp_path / "out")
