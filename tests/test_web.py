"""Tests for the JSON API."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from lift_insights.web import create_app


@pytest.fixture
def api(data_dir):
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def client_id(api):
    response = api.post("/clients", data={"name": "Jane Doe"})
    assert response.status_code == 201
    return response.json()["id"]


def workout(hours_ago: int, fatigue: str | None = None, **sets_by_exercise):
    logged_at = datetime.now(timezone.utc) - timedelta(hours=hours_ago)
    return {
        "workout_name": "Session",
        "logged_at": logged_at.isoformat(),
        "fatigue_level": fatigue,
        "exercises": [
            {
                "exercise_name": name.replace("_", " "),
                "order_index": index,
                "sets": [
                    {"set_number": n, "weight_kg": weight, "reps": reps}
                    for n, (weight, reps) in enumerate(sets, start=1)
                ],
            }
            for index, (name, sets) in enumerate(sets_by_exercise.items())
        ],
    }


class TestClientsApi:
    """Tests for client routes."""

    def test_health(self, api):
        assert api.get("/health").json()["status"] == "healthy"

    def test_create_and_list(self, api, client_id):
        clients = api.get("/clients").json()["clients"]
        assert [c["name"] for c in clients] == ["Jane Doe"]
        assert api.get(f"/clients/{client_id}").json()["name"] == "Jane Doe"

    def test_blank_name(self, api):
        response = api.post("/clients", data={"name": "  "})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_missing_client(self, api):
        assert api.get("/clients/999").status_code == 404


class TestTrainingLogsApi:
    """Tests for training log routes."""

    def test_create_and_get(self, api, client_id):
        response = api.post(
            f"/clients/{client_id}/logs",
            json=workout(5, "high", Bench_Press=[(100, 5)]),
        )
        assert response.status_code == 201
        created = response.json()
        assert created["fatigue_level"] == "high"
        assert created["exercises"][0]["exercise_name"] == "Bench Press"

        fetched = api.get(f"/logs/{created['id']}").json()
        assert fetched == created

    def test_list_includes_totals(self, api, client_id):
        api.post(f"/clients/{client_id}/logs", json=workout(5, Squat=[(100, 5), (100, 5)]))
        logs = api.get(f"/clients/{client_id}/logs").json()["logs"]

        assert len(logs) == 1
        assert logs[0]["total_sets"] == 2
        assert logs[0]["total_volume"] == 1000

    def test_create_invalid(self, api, client_id):
        response = api.post(f"/clients/{client_id}/logs", json={"workout_name": " "})
        assert response.status_code == 400

        response = api.post(f"/clients/{client_id}/logs", json={"notes": "no name"})
        assert response.status_code == 400
        assert "workout_name" in response.json()["error"]

    def test_non_numeric_set_rejected(self, api, client_id):
        body = workout(5, Bench_Press=[(100, 5)])
        body["exercises"][0]["sets"][0]["reps"] = "five"

        response = api.post(f"/clients/{client_id}/logs", json=body)

        assert response.status_code == 400
        assert "reps" in response.json()["error"]
        assert api.get(f"/clients/{client_id}/logs").json()["logs"] == []
        assert api.get(f"/clients/{client_id}/records").status_code == 200

    def test_numeric_strings_accepted(self, api, client_id):
        body = workout(5, Bench_Press=[(100, 5)])
        body["exercises"][0]["sets"][0].update(reps="5", weight_kg="100")

        created = api.post(f"/clients/{client_id}/logs", json=body).json()

        assert created["exercises"][0]["sets"][0]["reps"] == 5
        records = api.get(f"/clients/{client_id}/records").json()["records"]
        assert records[0]["estimated_1rm"] == 113

    def test_update_with_non_numeric_set_rejected(self, api, client_id):
        created = api.post(
            f"/clients/{client_id}/logs", json=workout(5, Squat=[(100, 5)])
        ).json()
        exercises = created["exercises"]
        exercises[0]["sets"][0]["weight_kg"] = "heavy"

        response = api.put(f"/logs/{created['id']}", json={"exercises": exercises})

        assert response.status_code == 400
        stored = api.get(f"/logs/{created['id']}").json()
        assert stored["exercises"][0]["sets"][0]["weight_kg"] == 100

    def test_future_log_keeps_recovery_in_range(self, api, client_id):
        api.post(f"/clients/{client_id}/logs", json=workout(-10, Squat=[(100, 5)]))

        muscles = api.get(f"/clients/{client_id}/recovery").json()["muscles"]

        assert all(0 <= m["recovery_percent"] <= 100 for m in muscles)
        quads = next(m for m in muscles if m["muscle"] == "quads")
        assert quads["recovery_percent"] == 0
        assert quads["suggested_wait_hours"] == 48

    def test_create_for_missing_client(self, api):
        response = api.post("/clients/999/logs", json=workout(1, Squat=[(100, 5)]))
        assert response.status_code == 404

    def test_update_replaces_exercises(self, api, client_id):
        created = api.post(
            f"/clients/{client_id}/logs", json=workout(5, Squat=[(100, 5)])
        ).json()

        response = api.put(
            f"/logs/{created['id']}",
            json={
                "workout_name": "Legs",
                "exercises": [
                    {
                        "exercise_name": "Leg Press",
                        "order_index": 0,
                        "sets": [{"set_number": 1, "weight_kg": 200, "reps": 10}],
                    }
                ],
            },
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["workout_name"] == "Legs"
        assert updated["logged_at"] == created["logged_at"]
        assert [ex["exercise_name"] for ex in updated["exercises"]] == ["Leg Press"]

    def test_update_fields_keeps_exercises(self, api, client_id):
        created = api.post(
            f"/clients/{client_id}/logs", json=workout(5, Squat=[(100, 5)])
        ).json()

        updated = api.put(f"/logs/{created['id']}", json={"notes": "Easy day"}).json()

        assert updated["notes"] == "Easy day"
        assert updated["exercises"] == created["exercises"]

    def test_update_missing(self, api):
        assert api.put("/logs/999", json={"notes": "x"}).status_code == 404

    def test_delete(self, api, client_id):
        created = api.post(
            f"/clients/{client_id}/logs", json=workout(5, Squat=[(100, 5)])
        ).json()

        assert api.delete(f"/logs/{created['id']}").json()["status"] == "deleted"
        assert api.get(f"/logs/{created['id']}").status_code == 404
        assert api.delete(f"/logs/{created['id']}").status_code == 404


class TestAnalyticsApi:
    """Tests for recovery and record routes."""

    def test_recovery_empty(self, api, client_id):
        data = api.get(f"/clients/{client_id}/recovery").json()
        assert data == {
            "muscles": [],
            "ready_to_train": [],
            "still_recovering": [],
            "has_data": False,
        }

    def test_recovery(self, api, client_id):
        api.post(
            f"/clients/{client_id}/logs",
            json=workout(50, "high", Chest_Fly=[(20, 10)]),
        )
        data = api.get(f"/clients/{client_id}/recovery").json()

        assert data["has_data"] is True
        assert data["muscles"][0]["muscle"] == "chest"
        assert data["muscles"][0]["status"] == "recovering"
        assert data["still_recovering"] == ["chest"]

    def test_records(self, api, client_id):
        api.post(f"/clients/{client_id}/logs", json=workout(24 * 10, Bench_Press=[(100, 5)]))
        api.post(f"/clients/{client_id}/logs", json=workout(24, Bench_Press=[(105, 5)]))

        data = api.get(f"/clients/{client_id}/records").json()

        assert data["has_records"] is True
        assert data["is_loading"] is False
        record = data["records"][0]
        assert record["estimated_1rm"] == 118
        assert record["previous_best"] == 113
        assert record["improvement"] == 5
        assert [r["exercise_name"] for r in data["recent_prs"]] == ["Bench Press"]

    def test_missing_client(self, api):
        assert api.get("/clients/999/recovery").status_code == 404
        assert api.get("/clients/999/records").status_code == 404
