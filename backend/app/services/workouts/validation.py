"""
Validation for workouts submitted at the end of an active session.
"""
from typing import Any, Dict, List

from app.services.analytics.adapter import WorkoutAdapter, exercises_to_documents


class WorkoutValidationError(ValueError):
    """Raised when a submitted workout cannot be stored."""


_adapter = WorkoutAdapter()


def clean_exercises(raw_exercises: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Validate and normalize the exercise entries of a new workout.

    Negative reps and weights are clamped to 0 and units are normalized.

    Raises:
        WorkoutValidationError: no exercises, an exercise without sets,
            or no set with any reps or weight
    """
    if not raw_exercises:
        raise WorkoutValidationError("Add at least one exercise before completing.")

    cleaned = []
    for raw_entry in raw_exercises:
        entry = _adapter.normalize_exercise(raw_entry)
        if not entry.sets:
            label = entry.name or entry.exercise_id or "exercise"
            raise WorkoutValidationError(f"Add at least one set for {label}.")
        cleaned.append(entry)

    has_data = any(
        s.reps > 0 or s.weight > 0
        for entry in cleaned
        for s in entry.sets
    )
    if not has_data:
        raise WorkoutValidationError(
            "Enter reps and weights for at least one set before completing."
        )

    return exercises_to_documents(cleaned)
