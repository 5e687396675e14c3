"""
Workout Stats Aggregator - Pure functions over lists of workouts.

Everything here is deterministic: the current time is always passed in
as ``reference_now`` and no function reads a clock, the environment, or
storage. Calendar dates are taken in local time; aware datetimes are
converted to ``tz`` (the system zone when ``tz`` is None) first.
"""
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Dict, Iterable, List, Optional, Sequence

from app.services.analytics.adapter import (
    ExerciseEntry,
    WeightUnit,
    Workout,
)

LBS_TO_KG = 0.453592


# ========================================
# Result structures
# ========================================

@dataclass
class Summary:
    """Aggregate statistics over a collection of workouts."""
    total_workouts: int = 0
    total_duration_seconds: int = 0
    average_duration_seconds: int = 0
    days_active: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalWorkouts": self.total_workouts,
            "totalDurationSeconds": self.total_duration_seconds,
            "averageDurationSeconds": self.average_duration_seconds,
            "daysActive": self.days_active,
        }


@dataclass
class HistoryRow:
    """One line of the workout history list."""
    workout_id: Optional[str]
    date_label: str
    duration_label: str
    exercise_count: int
    total_sets: int
    total_volume_kg: int
    exercise_names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workoutId": self.workout_id,
            "dateLabel": self.date_label,
            "durationLabel": self.duration_label,
            "exerciseCount": self.exercise_count,
            "totalSets": self.total_sets,
            "totalVolumeKg": self.total_volume_kg,
            "exerciseNames": list(self.exercise_names),
        }


@dataclass
class WorkoutDetail:
    """Summary card and set listing for a single workout."""
    workout_id: Optional[str]
    date_label: str
    duration_label: str
    total_volume_kg: int
    total_sets: int
    total_exercises: int
    exercises: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workoutId": self.workout_id,
            "dateLabel": self.date_label,
            "durationLabel": self.duration_label,
            "totalVolumeKg": self.total_volume_kg,
            "totalSets": self.total_sets,
            "totalExercises": self.total_exercises,
            "exercises": self.exercises,
        }


@dataclass
class Dashboard:
    """Home/profile statistics with pre-formatted labels."""
    summary: Summary
    total_duration_label: str
    average_duration_label: str
    last_workout: Optional[HistoryRow] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "totalDurationLabel": self.total_duration_label,
            "averageDurationLabel": self.average_duration_label,
            "lastWorkout": self.last_workout.to_dict() if self.last_workout else None,
        }


# ========================================
# Helpers
# ========================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calendar_date(value: datetime, tz: Optional[tzinfo] = None) -> date:
    """Local calendar date of a timestamp. Naive values are already local."""
    return to_local(value, tz).date()


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(tz)
    return value


def convert_weight(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert a weight between kg and lbs."""
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.LBS:
        return value * LBS_TO_KG
    return value / LBS_TO_KG


# ========================================
# Aggregations
# ========================================

def compute_summary(workouts: Iterable[Workout], tz: Optional[tzinfo] = None) -> Summary:
    """
    Totals, average duration and distinct active days.

    Order of ``workouts`` does not matter. Workouts without a timestamp
    still count towards totals but not towards active days.
    """
    total_workouts = 0
    total_duration = 0
    active_days = set()

    for workout in workouts:
        total_workouts += 1
        total_duration += workout.duration or 0
        if workout.date_time is not None:
            active_days.add(calendar_date(workout.date_time, tz))

    average = round_half_up(total_duration / total_workouts) if total_workouts else 0

    return Summary(
        total_workouts=total_workouts,
        total_duration_seconds=total_duration,
        average_duration_seconds=average,
        days_active=len(active_days),
    )


def compute_total_volume(exercises: Iterable[ExerciseEntry]) -> int:
    """Sum of reps x weight over all sets, in whole kilograms."""
    volume = 0.0
    for entry in exercises:
        for workout_set in entry.sets:
            weight_kg = convert_weight(workout_set.weight, workout_set.weight_unit, WeightUnit.KG)
            volume += workout_set.reps * weight_kg
    return round_half_up(volume)


def compute_total_sets(exercises: Iterable[ExerciseEntry]) -> int:
    return sum(len(entry.sets) for entry in exercises)


def sort_by_recency(workouts: Sequence[Workout]) -> List[Workout]:
    """
    Most recent first.

    Stable: workouts sharing a timestamp keep their input order. Workouts
    without a timestamp go last.
    """
    def sort_key(workout: Workout) -> float:
        if workout.date_time is None:
            return float("-inf")
        return workout.date_time.timestamp()

    # sorted() with reverse=True keeps equal keys in input order
    return sorted(workouts, key=sort_key, reverse=True)


def latest_workout(workouts: Sequence[Workout]) -> Optional[Workout]:
    ordered = sort_by_recency(workouts)
    return ordered[0] if ordered else None


# ========================================
# Formatting
# ========================================

def format_duration(seconds: Optional[float]) -> str:
    """
    Format seconds as "45s", "1m 5s" or "1h 1m".

    Seconds are dropped once the duration reaches an hour.
    """
    if not seconds:
        return "0s"
    seconds = int(seconds)
    mins, secs = divmod(seconds, 60)
    hours, rem_mins = divmod(mins, 60)
    if hours > 0:
        return f"{hours}h {rem_mins}m"
    if mins > 0:
        return f"{mins}m {secs}s"
    return f"{secs}s"


def format_duration_minutes(seconds: Optional[float]) -> str:
    """Format seconds as rounded minutes: "50m" or "1h 20m"."""
    minutes = round_half_up((seconds or 0) / 60)
    if minutes < 60:
        return f"{minutes}m"
    hours, rem_mins = divmod(minutes, 60)
    return f"{hours}h {rem_mins}m"


def bucket_date_label(
    date_time: Optional[datetime],
    reference_now: datetime,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    "Today", "Yesterday" or a short label such as "Tue, Sep 16".

    Only calendar dates are compared; time of day is ignored.
    """
    if date_time is None:
        return "Unknown date"

    day = calendar_date(date_time, tz)
    today = calendar_date(reference_now, tz)

    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{day:%a}, {day:%b} {day.day}"


def format_long_date(date_time: Optional[datetime], tz: Optional[tzinfo] = None) -> str:
    """E.g. "Tuesday, July 1, 2025 at 3:52 PM"."""
    if date_time is None:
        return "Unknown date"
    local = to_local(date_time, tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local:%A}, {local:%B} {local.day}, {local.year} "
        f"at {hour}:{local.minute:02d} {meridiem}"
    )


# ========================================
# Display rows
# ========================================

def build_history_row(
    workout: Workout,
    reference_now: datetime,
    tz: Optional[tzinfo] = None,
) -> HistoryRow:
    return HistoryRow(
        workout_id=workout.id,
        date_label=bucket_date_label(workout.date_time, reference_now, tz),
        duration_label=format_duration(workout.duration),
        exercise_count=len(workout.exercises),
        total_sets=compute_total_sets(workout.exercises),
        total_volume_kg=compute_total_volume(workout.exercises),
        exercise_names=[entry.name for entry in workout.exercises],
    )


def build_history(
    workouts: Sequence[Workout],
    reference_now: datetime,
    tz: Optional[tzinfo] = None,
) -> List[HistoryRow]:
    """History rows, most recent workout first."""
    return [build_history_row(w, reference_now, tz) for w in sort_by_recency(workouts)]


def build_workout_detail(workout: Workout, tz: Optional[tzinfo] = None) -> WorkoutDetail:
    return WorkoutDetail(
        workout_id=workout.id,
        date_label=format_long_date(workout.date_time, tz),
        duration_label=format_duration_minutes(workout.duration),
        total_volume_kg=compute_total_volume(workout.exercises),
        total_sets=compute_total_sets(workout.exercises),
        total_exercises=len(workout.exercises),
        exercises=[
            {
                "exerciseId": entry.exercise_id,
                "name": entry.name,
                "sets": [
                    {
                        "setNumber": index,
                        "reps": s.reps,
                        "weight": s.weight,
                        "weightUnit": s.weight_unit.value,
                    }
                    for index, s in enumerate(entry.sets, start=1)
                ],
            }
            for entry in workout.exercises
        ],
    )


def build_dashboard(
    workouts: Sequence[Workout],
    reference_now: datetime,
    tz: Optional[tzinfo] = None,
) -> Dashboard:
    summary = compute_summary(workouts, tz)
    last = latest_workout(workouts)

    return Dashboard(
        summary=summary,
        total_duration_label=format_duration(summary.total_duration_seconds),
        average_duration_label=format_duration(summary.average_duration_seconds),
        last_workout=build_history_row(last, reference_now, tz) if last else None,
    )
