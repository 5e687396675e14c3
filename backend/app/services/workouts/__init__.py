"""
Workouts module - Storage and validation of logged workouts.
"""
from app.services.workouts.store import WorkoutStore
from app.services.workouts.validation import WorkoutValidationError, clean_exercises

__all__ = [
    "WorkoutStore",
    "WorkoutValidationError",
    "clean_exercises",
]
