"""
TestClient wired to the application with in-memory stores.

The lifespan is not entered, so no database connection is made.
"""
from datetime import timezone

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_calculator, get_exercise_store, get_reference_now, get_workout_store
from app.main import app
from app.services.analytics import StatsCalculator
from tests.conftest import REFERENCE_NOW
from tests.fakes import FakeExerciseStore, FakeWorkoutStore


@pytest.fixture
def workout_store(sample_workouts):
    return FakeWorkoutStore(sample_workouts)


@pytest.fixture
def exercise_store():
    return FakeExerciseStore()


@pytest.fixture
def client(workout_store, exercise_store):
    app.dependency_overrides[get_workout_store] = lambda: workout_store
    app.dependency_overrides[get_exercise_store] = lambda: exercise_store
    app.dependency_overrides[get_calculator] = lambda: StatsCalculator(tz=timezone.utc)
    app.dependency_overrides[get_reference_now] = lambda: REFERENCE_NOW
    yield TestClient(app)
    app.dependency_overrides.clear()
