"""
Integration tests for the /api/workouts endpoints.
"""
import pytest


def _payload(**overrides):
    payload = {
        "userId": "user_2",
        "dateTime": "2025-09-16T12:00:00Z",
        "duration": 1250,
        "exercises": [
            {
                "exerciseId": "ex_row",
                "name": "Barbell Row",
                "sets": [
                    {"reps": 8, "weight": 60, "weightUnit": "kg"},
                    {"reps": -1, "weight": 60, "weightUnit": "kg"},
                ],
            }
        ],
    }
    payload.update(overrides)
    return payload


@pytest.mark.integration
class TestCreateWorkout:
    """Tests for POST /api/workouts."""

    def test_creates_and_clamps(self, client, workout_store):
        resp = client.post("/api/workouts", json=_payload())

        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["userId"] == "user_2"
        assert body["data"]["duration"] == 1250
        assert body["data"]["exercises"][0]["sets"][1]["reps"] == 0
        assert any(w["_id"] == body["data"]["_id"] for w in workout_store.workouts)

    def test_naive_datetime_is_stored_as_utc(self, client):
        resp = client.post("/api/workouts", json=_payload(dateTime="2025-09-16T12:00:00"))

        assert resp.json()["data"]["dateTime"] == "2025-09-16T12:00:00+00:00"

    def test_rejects_empty_exercises(self, client):
        resp = client.post("/api/workouts", json=_payload(exercises=[]))

        assert resp.status_code == 400
        assert resp.json() == {
            "success": False,
            "error": "Add at least one exercise before completing.",
        }

    def test_rejects_sets_without_data(self, client):
        exercises = [{"name": "Squat", "sets": [{"reps": 0, "weight": 0, "weightUnit": "kg"}]}]

        resp = client.post("/api/workouts", json=_payload(exercises=exercises))

        assert resp.status_code == 400
        assert "Enter reps and weights" in resp.json()["error"]

    @pytest.mark.parametrize("unit", ["stone", "kilograms", "kgs"])
    def test_rejects_unknown_weight_unit(self, client, workout_store, unit):
        exercises = [{"name": "Squat", "sets": [{"reps": 5, "weight": 100, "weightUnit": unit}]}]
        before = len(workout_store.workouts)

        resp = client.post("/api/workouts", json=_payload(exercises=exercises))

        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert "weightUnit" in body["error"]
        assert len(workout_store.workouts) == before

    def test_missing_weight_unit_defaults_to_lbs(self, client):
        exercises = [{"name": "Squat", "sets": [{"reps": 5, "weight": 100}]}]

        resp = client.post("/api/workouts", json=_payload(exercises=exercises))

        assert resp.status_code == 201
        assert resp.json()["data"]["exercises"][0]["sets"][0]["weightUnit"] == "lbs"

    def test_rejects_missing_user(self, client):
        payload = _payload()
        del payload["userId"]

        resp = client.post("/api/workouts", json=payload)

        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert "userId" in body["error"]

    def test_rejects_negative_duration(self, client):
        resp = client.post("/api/workouts", json=_payload(duration=-5))

        assert resp.status_code == 400
        assert resp.json()["success"] is False


@pytest.mark.integration
class TestReadWorkouts:
    """Tests for the read endpoints."""

    def test_list_all(self, client):
        resp = client.get("/api/workouts")

        assert resp.status_code == 200
        assert [w["_id"] for w in resp.json()["data"]] == ["w3", "w2", "w1"]

    def test_list_for_user(self, client):
        client.post("/api/workouts", json=_payload())

        resp = client.get("/api/workouts/user/user_2")

        data = resp.json()["data"]
        assert len(data) == 1
        assert data[0]["userId"] == "user_2"

    def test_list_for_unknown_user_is_empty(self, client):
        resp = client.get("/api/workouts/user/nobody")

        assert resp.json() == {"success": True, "data": []}

    def test_get_one(self, client):
        resp = client.get("/api/workouts/w2")

        assert resp.status_code == 200
        assert resp.json()["data"]["_id"] == "w2"

    def test_get_unknown(self, client):
        resp = client.get("/api/workouts/missing")

        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Workout not found"}

    def test_no_update_or_delete_routes(self, client):
        assert client.put("/api/workouts/w1", json={}).status_code == 405
        assert client.delete("/api/workouts/w1").status_code == 405


@pytest.mark.integration
class TestStatsEndpoints:
    """Tests for history, stats and detail endpoints."""

    def test_history(self, client):
        resp = client.get("/api/workouts/user/user_1/history")

        rows = resp.json()["data"]
        assert [row["workoutId"] for row in rows] == ["w3", "w2", "w1"]
        assert [row["dateLabel"] for row in rows] == ["Today", "Today", "Yesterday"]
        assert rows[0]["exerciseNames"] == ["Squat", "Push Up"]
        assert rows[0]["totalVolumeKg"] == 510

    def test_stats(self, client):
        resp = client.get("/api/workouts/user/user_1/stats")

        data = resp.json()["data"]
        assert data["summary"] == {
            "totalWorkouts": 3,
            "totalDurationSeconds": 8100,
            "averageDurationSeconds": 2700,
            "daysActive": 2,
        }
        assert data["totalDurationLabel"] == "2h 15m"
        assert data["averageDurationLabel"] == "45m 0s"
        assert data["lastWorkout"]["workoutId"] == "w3"

    def test_stats_for_user_without_workouts(self, client):
        resp = client.get("/api/workouts/user/nobody/stats")

        data = resp.json()["data"]
        assert data["summary"]["totalWorkouts"] == 0
        assert data["summary"]["averageDurationSeconds"] == 0
        assert data["lastWorkout"] is None

    def test_detail(self, client):
        resp = client.get("/api/workouts/w1/detail")

        data = resp.json()["data"]
        assert data["dateLabel"] == "Monday, September 15, 2025 at 9:00 AM"
        assert data["durationLabel"] == "30m"
        assert data["totalVolumeKg"] == 1160
        assert data["totalSets"] == 2
        assert data["totalExercises"] == 1

    def test_detail_unknown(self, client):
        resp = client.get("/api/workouts/missing/detail")

        assert resp.status_code == 404


@pytest.mark.integration
def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.integration
class TestRequestId:
    """Tests for the X-Request-ID header."""

    def test_echoes_caller_request_id(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "req-42"})

        assert resp.headers["X-Request-ID"] == "req-42"

    def test_generates_request_id(self, client):
        resp = client.get("/api/workouts/missing")

        assert resp.status_code == 404
        assert len(resp.headers["X-Request-ID"]) == 32
