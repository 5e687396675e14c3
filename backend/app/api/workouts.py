"""
Workouts API endpoints.

Workouts are created once when a session finishes. There is no update
or delete route.
"""
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.deps import get_calculator, get_reference_now, get_workout_store
from app.core.logging import get_logger
from app.services.analytics import StatsCalculator, WeightUnit
from app.services.workouts import WorkoutStore, WorkoutValidationError, clean_exercises

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request Schemas
# ========================================

class SetPayload(BaseModel):
    """One performed set."""
    reps: int = 0
    weight: float = 0
    weightUnit: WeightUnit = WeightUnit.LBS


class ExercisePayload(BaseModel):
    """One exercise performed during the session."""
    exerciseId: str | None = None
    name: str = ""
    sets: list[SetPayload] = Field(default_factory=list)


class CreateWorkoutRequest(BaseModel):
    """Request to store a finished workout session."""
    userId: str = Field(..., min_length=1, description="Owner user ID")
    dateTime: datetime | None = Field(None, description="When the workout happened")
    duration: int = Field(0, ge=0, description="Elapsed seconds")
    exercises: list[ExercisePayload] = Field(default_factory=list)


def _ok(data: Any) -> dict:
    return {"success": True, "data": data}


# ========================================
# API Endpoints
# ========================================

@router.post("", status_code=201)
async def create_workout(
    request: CreateWorkoutRequest,
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Store a finished workout.
    """
    try:
        exercises = clean_exercises([e.model_dump() for e in request.exercises])
    except WorkoutValidationError as e:
        logger.info("Rejected workout", user_id=request.userId, reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    date_time = request.dateTime
    if date_time is not None and date_time.tzinfo is None:
        date_time = date_time.replace(tzinfo=timezone.utc)

    workout = await store.create(
        user_id=request.userId,
        duration=request.duration,
        exercises=exercises,
        date_time=date_time,
    )
    return _ok(workout)


@router.get("")
async def list_workouts(
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Get all workouts, most recent first.
    """
    return _ok(await store.list_all())


@router.get("/user/{user_id}")
async def list_user_workouts(
    user_id: str,
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Get a user's workouts, most recent first.
    """
    return _ok(await store.list_for_user(user_id))


@router.get("/user/{user_id}/history")
async def get_user_history(
    user_id: str,
    store: WorkoutStore = Depends(get_workout_store),
    calculator: StatsCalculator = Depends(get_calculator),
    reference_now: datetime = Depends(get_reference_now),
):
    """
    History rows for a user's workouts.
    """
    workouts = await store.list_for_user(user_id)
    rows = calculator.history(workouts, reference_now)
    return _ok([row.to_dict() for row in rows])


@router.get("/user/{user_id}/stats")
async def get_user_stats(
    user_id: str,
    store: WorkoutStore = Depends(get_workout_store),
    calculator: StatsCalculator = Depends(get_calculator),
    reference_now: datetime = Depends(get_reference_now),
):
    """
    Summary statistics for a user's workouts.
    """
    workouts = await store.list_for_user(user_id)
    return _ok(calculator.dashboard(workouts, reference_now).to_dict())


@router.get("/{workout_id}")
async def get_workout(
    workout_id: str,
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Get a specific workout by ID.
    """
    workout = await store.get(workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return _ok(workout)


@router.get("/{workout_id}/detail")
async def get_workout_detail(
    workout_id: str,
    store: WorkoutStore = Depends(get_workout_store),
    calculator: StatsCalculator = Depends(get_calculator),
):
    """
    Summary card and set listing for one workout.
    """
    workout = await store.get(workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return _ok(calculator.detail(workout).to_dict())
