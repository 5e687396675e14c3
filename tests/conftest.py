"""
Shared fixtures.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest


# Tuesday, 16 September 2025, 18:00 UTC
REFERENCE_NOW = datetime(2025, 9, 16, 18, 0, tzinfo=timezone.utc)


def make_workout_document(
    workout_id: str,
    date_time: Optional[str],
    duration: Optional[int] = 600,
    user_id: str = "user_1",
    exercises: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Workout document in the shape the workouts API serves."""
    document: Dict[str, Any] = {
        "_id": workout_id,
        "userId": user_id,
        "dateTime": date_time,
        "exercises": exercises if exercises is not None else [
            {
                "exerciseId": "ex_bench",
                "name": "Bench Press",
                "sets": [
                    {"reps": 10, "weight": 60, "weightUnit": "kg"},
                    {"reps": 8, "weight": 70, "weightUnit": "kg"},
                ],
            }
        ],
    }
    if duration is not None:
        document["duration"] = duration
    return document


@pytest.fixture
def reference_now() -> datetime:
    return REFERENCE_NOW


@pytest.fixture
def sample_workouts() -> List[Dict[str, Any]]:
    """Three workouts for user_1 across two days, oldest first."""
    return [
        make_workout_document("w1", "2025-09-15T09:00:00Z", duration=1800),
        make_workout_document("w2", "2025-09-16T07:30:00Z", duration=3600),
        make_workout_document(
            "w3",
            "2025-09-16T17:00:00Z",
            duration=2700,
            exercises=[
                {
                    "exerciseId": "ex_squat",
                    "name": "Squat",
                    "sets": [{"reps": 5, "weight": 225, "weightUnit": "lbs"}],
                },
                {
                    "exerciseId": "ex_pushup",
                    "name": "Push Up",
                    "sets": [{"reps": 20, "weight": 0, "weightUnit": "kg"}],
                },
            ],
        ),
    ]
