"""
Exercise catalog API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from app.api.deps import get_exercise_store
from app.core.logging import get_logger
from app.services.catalog import (
    ExerciseStore,
    ExerciseValidationError,
    normalize_difficulty,
    validate_new_exercise,
)

logger = get_logger(__name__)
router = APIRouter()


class CreateExerciseRequest(BaseModel):
    """Request to add an exercise to the catalog."""
    name: str = Field("", description="Exercise name")
    description: str = Field("", description="How to perform the exercise")
    difficulty: str | None = Field(None, description="beginner, intermediate or advanced")
    imageUrl: str | None = None
    videoUrl: str | None = None
    isActive: bool = True


@router.get("")
async def list_exercises(
    search: str | None = Query(None, description="Case-insensitive name filter"),
    difficulty: str | None = Query(None),
    includeInactive: bool = Query(False),
    store: ExerciseStore = Depends(get_exercise_store),
):
    """
    Get catalog exercises, sorted by name.
    """
    exercises = await store.search(search, difficulty, includeInactive)
    return {"success": True, "data": exercises}


@router.get("/{exercise_id}")
async def get_exercise(
    exercise_id: str,
    store: ExerciseStore = Depends(get_exercise_store),
):
    """
    Get a specific catalog exercise by ID.
    """
    exercise = await store.get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return {"success": True, "data": exercise}


@router.post("", status_code=201)
async def create_exercise(
    request: CreateExerciseRequest,
    store: ExerciseStore = Depends(get_exercise_store),
):
    """
    Add an exercise to the catalog.
    """
    try:
        validate_new_exercise(request.name, request.description)
        difficulty = normalize_difficulty(request.difficulty)
    except ExerciseValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    exercise = await store.create(
        name=request.name.strip(),
        description=request.description.strip(),
        difficulty=difficulty,
        image_url=request.imageUrl,
        video_url=request.videoUrl,
        is_active=request.isActive,
    )
    return {"success": True, "data": exercise}
