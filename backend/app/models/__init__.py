from app.models.workout import WorkoutRecord
from app.models.exercise import CatalogExercise, Difficulty

__all__ = [
    "WorkoutRecord",
    "CatalogExercise",
    "Difficulty",
]
