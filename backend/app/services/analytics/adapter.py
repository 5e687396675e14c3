"""
Workout Record Adapter - Normalize raw workout documents into typed records.

Raw documents arrive as camelCase JSON from the workouts API or from
stored rows. Defaulting rules live here so the aggregator can assume
well-formed input:
- missing, invalid or non-finite numbers become 0, negatives are clamped to 0
- missing or unknown weight units fall back to lbs
- missing or non-list collections become empty
- unparseable timestamps become None
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from app.core.logging import get_logger

logger = get_logger(__name__)


class WeightUnit(str, Enum):
    """Unit a set's weight is recorded in."""
    KG = "kg"
    LBS = "lbs"


DEFAULT_WEIGHT_UNIT = WeightUnit.LBS


@dataclass
class WorkoutSet:
    """Single set: reps performed at a weight."""
    reps: int = 0
    weight: float = 0.0
    weight_unit: WeightUnit = DEFAULT_WEIGHT_UNIT


@dataclass
class ExerciseEntry:
    """Performance record of one exercise inside a workout."""
    exercise_id: Optional[str] = None
    name: str = ""
    sets: List[WorkoutSet] = field(default_factory=list)


@dataclass
class Workout:
    """
    A logged workout session.

    Created once when a session is finished and never edited afterwards.
    """
    id: Optional[str] = None
    user_id: Optional[str] = None
    date_time: Optional[datetime] = None
    duration: int = 0  # seconds
    exercises: List[ExerciseEntry] = field(default_factory=list)


class WorkoutAdapter:
    """
    Adapter for workout documents as served by the workouts API.

    Accepts both the stored-document shape (``_id``, ``exerciseId``) and
    the payload shape posted by the mobile client.
    """

    def normalize(self, raw_data: Dict[str, Any]) -> Workout:
        """Normalize one raw workout document."""
        exercises = [
            self.normalize_exercise(entry)
            for entry in _as_list(raw_data.get("exercises"))
            if isinstance(entry, dict)
        ]

        workout = Workout(
            id=self._extract_id(raw_data),
            user_id=raw_data.get("userId"),
            date_time=parse_datetime(raw_data.get("dateTime")),
            duration=_non_negative_int(raw_data.get("duration")),
            exercises=exercises,
        )

        if workout.date_time is None and raw_data.get("dateTime") is not None:
            logger.warning(
                "Unparseable workout dateTime",
                workout_id=workout.id,
                value=str(raw_data.get("dateTime")),
            )

        return workout

    def normalize_many(self, raw_items: Iterable[Dict[str, Any]]) -> List[Workout]:
        """Normalize a collection, skipping anything that is not a document."""
        workouts = [self.normalize(item) for item in raw_items if isinstance(item, dict)]

        logger.debug("Normalized workouts", count=len(workouts))

        return workouts

    def _extract_id(self, raw_data: Dict[str, Any]) -> Optional[str]:
        value = raw_data.get("_id") or raw_data.get("id")
        return str(value) if value is not None else None

    def normalize_exercise(self, raw_entry: Dict[str, Any]) -> ExerciseEntry:
        # Stored documents may carry a reference object instead of a flat id
        exercise_id = raw_entry.get("exerciseId") or raw_entry.get("_id")
        reference = raw_entry.get("exercise")
        if exercise_id is None and isinstance(reference, dict):
            exercise_id = reference.get("_ref") or reference.get("_id")

        name = raw_entry.get("name")
        if not name and isinstance(reference, dict):
            name = reference.get("name")

        return ExerciseEntry(
            exercise_id=str(exercise_id) if exercise_id is not None else None,
            name=str(name or ""),
            sets=[
                self._normalize_set(raw_set)
                for raw_set in _as_list(raw_entry.get("sets"))
                if isinstance(raw_set, dict)
            ],
        )

    def _normalize_set(self, raw_set: Dict[str, Any]) -> WorkoutSet:
        return WorkoutSet(
            reps=_non_negative_int(raw_set.get("reps")),
            weight=_non_negative_float(raw_set.get("weight")),
            weight_unit=parse_weight_unit(raw_set.get("weightUnit")),
        )


def parse_weight_unit(value: Any) -> WeightUnit:
    """Parse a unit string, falling back to the default unit."""
    if isinstance(value, WeightUnit):
        return value
    try:
        return WeightUnit(str(value).strip().lower())
    except ValueError:
        return DEFAULT_WEIGHT_UNIT


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed) or pass a datetime through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _non_negative_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _non_negative_int(value: Any) -> int:
    return int(_non_negative_float(value))


def exercises_to_documents(entries: Iterable[ExerciseEntry]) -> List[Dict[str, Any]]:
    """Serialize exercise entries back to the camelCase document shape."""
    return [
        {
            "exerciseId": entry.exercise_id,
            "name": entry.name,
            "sets": [
                {
                    "reps": s.reps,
                    "weight": s.weight,
                    "weightUnit": s.weight_unit.value,
                }
                for s in entry.sets
            ],
        }
        for entry in entries
    ]


def to_document(workout: Workout) -> Dict[str, Any]:
    """Serialize a workout back to the camelCase document shape."""
    return {
        "_id": workout.id,
        "userId": workout.user_id,
        "dateTime": workout.date_time.isoformat() if workout.date_time else None,
        "duration": workout.duration,
        "exercises": exercises_to_documents(workout.exercises),
    }
