"""
Shared FastAPI dependencies.
"""
from datetime import datetime, timezone

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.services.analytics import StatsCalculator
from app.services.catalog import ExerciseStore
from app.services.workouts import WorkoutStore


def get_workout_store(db: AsyncSession = Depends(get_db)) -> WorkoutStore:
    return WorkoutStore(db)


def get_exercise_store(db: AsyncSession = Depends(get_db)) -> ExerciseStore:
    return ExerciseStore(db)


def get_calculator() -> StatsCalculator:
    return StatsCalculator.from_settings()


def get_reference_now() -> datetime:
    """The instant "Today" is relative to for date labels."""
    return datetime.now(timezone.utc)
