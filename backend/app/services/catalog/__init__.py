"""
Catalog module - The exercise library.
"""
from app.services.catalog.search import (
    ExerciseValidationError,
    filter_exercises,
    normalize_difficulty,
    validate_new_exercise,
)
from app.services.catalog.store import ExerciseStore

__all__ = [
    "ExerciseStore",
    "ExerciseValidationError",
    "filter_exercises",
    "normalize_difficulty",
    "validate_new_exercise",
]
