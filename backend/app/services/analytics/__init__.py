"""
Analytics module - Workout statistics and history aggregation.

This module provides:
- Typed workout records and the adapter that normalizes raw documents
- Pure aggregation and formatting functions
- Statistics calculator engine
"""
from app.services.analytics.adapter import (
    WeightUnit,
    WorkoutSet,
    ExerciseEntry,
    Workout,
    WorkoutAdapter,
    DEFAULT_WEIGHT_UNIT,
)
from app.services.analytics.aggregator import (
    Summary,
    HistoryRow,
    WorkoutDetail,
    Dashboard,
    LBS_TO_KG,
    compute_summary,
    compute_total_volume,
    compute_total_sets,
    format_duration,
    format_duration_minutes,
    bucket_date_label,
    sort_by_recency,
    latest_workout,
    convert_weight,
    format_long_date,
    build_history_row,
    build_history,
    build_workout_detail,
    build_dashboard,
)
from app.services.analytics.calculator import StatsCalculator

__all__ = [
    # Data structures
    "WeightUnit",
    "WorkoutSet",
    "ExerciseEntry",
    "Workout",
    "Summary",
    "HistoryRow",
    "WorkoutDetail",
    "Dashboard",
    "LBS_TO_KG",
    # Adapter
    "WorkoutAdapter",
    "DEFAULT_WEIGHT_UNIT",
    # Aggregation
    "compute_summary",
    "compute_total_volume",
    "compute_total_sets",
    "format_duration",
    "format_duration_minutes",
    "bucket_date_label",
    "sort_by_recency",
    "latest_workout",
    "convert_weight",
    "format_long_date",
    # Display rows
    "build_history_row",
    "build_history",
    "build_workout_detail",
    "build_dashboard",
    # Calculator
    "StatsCalculator",
]
