"""
In-memory fakes for the database-backed stores.

They return the same document shapes as WorkoutStore and ExerciseStore
so API tests can run without a database.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.models.exercise import difficulty_label
from app.services.catalog import filter_exercises


class FakeWorkoutStore:
    """Dict-backed stand-in for WorkoutStore."""

    def __init__(self, workouts: Optional[List[Dict[str, Any]]] = None):
        self.workouts: List[Dict[str, Any]] = list(workouts or [])

    async def create(
        self,
        user_id: str,
        duration: int,
        exercises: List[Dict[str, Any]],
        date_time: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        document = {
            "_id": str(uuid.uuid4()),
            "userId": user_id,
            "dateTime": (date_time or datetime.now(timezone.utc)).isoformat(),
            "duration": duration,
            "exercises": exercises,
            "createdAt": 0,
        }
        self.workouts.append(document)
        return document

    async def list_all(self) -> List[Dict[str, Any]]:
        return self._recent_first(self.workouts)

    async def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        return self._recent_first(w for w in self.workouts if w["userId"] == user_id)

    async def get(self, workout_id: str) -> Optional[Dict[str, Any]]:
        for workout in self.workouts:
            if workout["_id"] == workout_id:
                return workout
        return None

    def _recent_first(self, workouts) -> List[Dict[str, Any]]:
        return sorted(workouts, key=lambda w: w["dateTime"], reverse=True)


class FakeExerciseStore:
    """Dict-backed stand-in for ExerciseStore."""

    def __init__(self, exercises: Optional[List[Dict[str, Any]]] = None):
        self.exercises: List[Dict[str, Any]] = list(exercises or [])

    async def search(
        self,
        search: Optional[str] = None,
        difficulty: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[Dict[str, Any]]:
        return filter_exercises(self.exercises, search, difficulty, include_inactive)

    async def get(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        for exercise in self.exercises:
            if exercise["_id"] == exercise_id:
                return exercise
        return None

    async def create(
        self,
        name: str,
        description: str,
        difficulty: str,
        image_url: Optional[str] = None,
        video_url: Optional[str] = None,
        is_active: bool = True,
    ) -> Dict[str, Any]:
        document = {
            "_id": str(uuid.uuid4()),
            "name": name,
            "description": description,
            "difficulty": difficulty,
            "difficultyLabel": difficulty_label(difficulty),
            "imageUrl": image_url,
            "videoUrl": video_url,
            "isActive": is_active,
        }
        self.exercises.append(document)
        return document


def make_catalog_entry(
    name: str,
    difficulty: str = "beginner",
    is_active: bool = True,
) -> Dict[str, Any]:
    return {
        "_id": str(uuid.uuid4()),
        "name": name,
        "description": f"How to do {name}",
        "difficulty": difficulty,
        "difficultyLabel": difficulty_label(difficulty),
        "imageUrl": None,
        "videoUrl": None,
        "isActive": is_active,
    }
