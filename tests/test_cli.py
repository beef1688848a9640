"""Tests for the command line interface."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from click.testing import CliRunner

from lift_insights.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def initialized(runner, data_dir):
    """Initialized project with one client."""
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(main, ["clients", "add", "Jane Doe"])
    assert result.exit_code == 0, result.output
    return data_dir


def write_workout(path, hours_ago: int = 10, **overrides):
    logged_at = datetime.now(timezone.utc) - timedelta(hours=hours_ago)
    data = {
        "workout_name": "Push Day",
        "logged_at": logged_at.isoformat(),
        "fatigue_level": "moderate",
        "exercises": [
            {
                "exercise_name": "Bench Press",
                "order_index": 0,
                "sets": [
                    {"set_number": 1, "reps": 10, "weight_kg": 60, "is_warmup": True},
                    {"set_number": 2, "reps": 5, "weight_kg": 100},
                ],
            },
            {"exercise_name": "  ", "order_index": 1, "sets": []},
        ],
    }
    data.update(overrides)
    path.write_text(json.dumps(data))
    return path


class TestCli:
    """End-to-end CLI tests against a temporary data directory."""

    def test_requires_init(self, runner, data_dir):
        result = runner.invoke(main, ["clients", "list"])
        assert result.exit_code == 1
        assert "not initialized" in result.output

    def test_clients_list(self, runner, initialized):
        result = runner.invoke(main, ["clients", "list"])
        assert result.exit_code == 0
        assert "Jane Doe" in result.output

    def test_log_add_from_file(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json")
        result = runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        assert result.exit_code == 0, result.output
        assert "Logged 'Push Day'" in result.output
        # The blank exercise is dropped
        assert "1 exercises, 2 sets" in result.output

    def test_log_add_unknown_client(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json")
        result = runner.invoke(main, ["log", "add", "42", "--file", str(workout)])

        assert result.exit_code == 1
        assert "Client 42 not found" in result.output

    def test_log_add_invalid_file(self, runner, initialized, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = runner.invoke(main, ["log", "add", "1", "--file", str(bad)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_log_add_bad_fatigue(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json", fatigue_level="extreme")
        result = runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_log_add_non_numeric_set(self, runner, initialized, tmp_path):
        workout = write_workout(
            tmp_path / "workout.json",
            exercises=[
                {
                    "exercise_name": "Bench Press",
                    "sets": [{"set_number": 1, "reps": "five", "weight_kg": 100}],
                }
            ],
        )
        result = runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "reps" in result.output

        records = runner.invoke(main, ["records", "1"])
        assert records.exit_code == 0
        assert "No qualifying sets" in records.output

    def test_log_list_show_delete(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json")
        runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        listed = runner.invoke(main, ["log", "list", "1"])
        assert listed.exit_code == 0
        assert "Push Day" in listed.output

        shown = runner.invoke(main, ["log", "show", "1"])
        assert shown.exit_code == 0
        assert "Bench Press" in shown.output
        assert "warm-up" in shown.output

        deleted = runner.invoke(main, ["log", "delete", "1", "--yes"])
        assert deleted.exit_code == 0

        missing = runner.invoke(main, ["log", "show", "1"])
        assert missing.exit_code == 1

    def test_recovery(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json", hours_ago=10)
        runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        result = runner.invoke(main, ["recovery", "1"])

        assert result.exit_code == 0, result.output
        assert "chest" in result.output
        assert "Recovering" in result.output
        assert "Still recovering: chest" in result.output

    def test_recovery_without_logs(self, runner, initialized):
        result = runner.invoke(main, ["recovery", "1"])
        assert result.exit_code == 0
        assert "No workouts logged" in result.output

    def test_records(self, runner, initialized, tmp_path):
        workout = write_workout(tmp_path / "workout.json", hours_ago=10)
        runner.invoke(main, ["log", "add", "1", "--file", str(workout)])

        result = runner.invoke(main, ["records", "1"])

        assert result.exit_code == 0, result.output
        assert "Bench Press" in result.output
        assert "113 kg" in result.output
        assert "New this week" in result.output

    def test_init_twice_keeps_data(self, runner, initialized):
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert "[WARN] Database already exists" in result.output
        assert "Jane Doe" in runner.invoke(main, ["clients", "list"]).output

    def test_serve_runs_app_factory(self, runner, initialized, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

        result = runner.invoke(main, ["serve", "--port", "3000", "--log-level", "debug"])

        assert result.exit_code == 0, result.output
        app, kwargs = calls[0]
        assert app == "lift_insights.web:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 3000
        assert kwargs["log_level"] == "debug"
        assert "http://127.0.0.1:3000" in result.output
