"""
Services module - Application business logic layer.

Modules:
- analytics: Workout statistics and history aggregation
- workouts: Workout storage and submission validation
- catalog: Exercise library
- external: Workouts REST API client
"""
# Main exports for convenience
from app.services.analytics import StatsCalculator
from app.services.external import WorkoutsApiClient

__all__ = [
    "StatsCalculator",
    "WorkoutsApiClient",
]
