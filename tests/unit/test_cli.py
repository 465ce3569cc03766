"""Tests for the gesturepath CLI."""

import json
import logging

import pytest
from click.testing import CliRunner

from gesturepath.cli import main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("gesturepath")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner():
    return CliRunner()


class TestDraw:
    def test_json_output(self, runner) -> None:
        result = runner.invoke(main, ["draw", "line 4 90"])
        assert result.exit_code == 0
        assert result.stdout == '["0,-0","0,-0","0,-4"]\n'

    def test_windows(self, runner) -> None:
        result = runner.invoke(main, ["draw", "--windows", "line 4 90"])
        assert result.exit_code == 0
        assert result.stdout == '["0,0","0,0","0,4"]\n'

    def test_points_format(self, runner) -> None:
        result = runner.invoke(main, ["draw", "-f", "points", "--windows", "fd 2"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["0 0", "0 0", "2 0"]

    def test_precision(self, runner) -> None:
        result = runner.invoke(main, ["draw", "-p", "1", "--windows", "line 1 45"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)[-1] == "0.7,0.7"

    def test_stats(self, runner) -> None:
        result = runner.invoke(main, ["draw", "--stats", "line 4 90"])
        assert result.exit_code == 0
        assert "Points: 3" in result.output
        assert "Length: 4.0000" in result.output

    def test_bad_program(self, runner) -> None:
        result = runner.invoke(main, ["draw", "bogus 1"])
        assert result.exit_code == 1
        assert "unknown command" in result.output

    def test_negative_precision(self, runner) -> None:
        result = runner.invoke(main, ["draw", "-p", "-1", "fd 1"])
        assert result.exit_code == 2

    def test_infinite_angle(self, runner) -> None:
        result = runner.invoke(main, ["draw", "line 1 inf"])
        assert result.exit_code == 0
        assert result.stdout == '["0,-0","0,-0","NaN,NaN"]\n'

    def test_verbose(self, runner) -> None:
        result = runner.invoke(main, ["-v", "draw", "fd 1"])
        assert result.exit_code == 0


class TestDemo:
    def test_gesture_p(self, runner) -> None:
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        points = json.loads(result.stdout)
        assert len(points) == 188
        assert points[:3] == ["0,-0", "0,-0", "0,-4"]
