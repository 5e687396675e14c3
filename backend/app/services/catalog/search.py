"""
Exercise catalog filtering and new-entry validation.
"""
from typing import Any, Dict, Iterable, List, Optional

from app.models.exercise import Difficulty


class ExerciseValidationError(ValueError):
    """Raised when a new catalog entry is incomplete."""


def normalize_difficulty(value: Optional[str]) -> str:
    """
    Accept a difficulty in any case ("Beginner" -> "beginner").

    Raises:
        ExerciseValidationError: value is not a known difficulty
    """
    text = (value or Difficulty.BEGINNER.value).strip().lower()
    try:
        return Difficulty(text).value
    except ValueError:
        allowed = ", ".join(d.value for d in Difficulty)
        raise ExerciseValidationError(f"Difficulty must be one of: {allowed}")


def validate_new_exercise(name: Optional[str], description: Optional[str]) -> None:
    if not (name or "").strip():
        raise ExerciseValidationError("Please enter an exercise name")
    if not (description or "").strip():
        raise ExerciseValidationError("Please enter a description")


def filter_exercises(
    exercises: Iterable[Dict[str, Any]],
    search: Optional[str] = None,
    difficulty: Optional[str] = None,
    include_inactive: bool = False,
) -> List[Dict[str, Any]]:
    """
    Filter catalog documents and sort them by name.

    Args:
        exercises: Catalog documents
        search: Case-insensitive substring of the name
        difficulty: Exact difficulty, any case
        include_inactive: Keep entries whose isActive flag is off

    Returns:
        Matching documents
    """
    query = (search or "").strip().lower()
    wanted = difficulty.strip().lower() if difficulty else None

    matches = []
    for exercise in exercises:
        if not include_inactive and not exercise.get("isActive", True):
            continue
        if query and query not in (exercise.get("name") or "").lower():
            continue
        if wanted and (exercise.get("difficulty") or "").lower() != wanted:
            continue
        matches.append(exercise)

    return sorted(matches, key=lambda e: (e.get("name") or "").lower())
