"""
Stats Calculator - Entry point for computing workout statistics.

Orchestrates:
- Normalization of raw workout documents
- Timezone resolution for calendar-day bucketing
- Aggregation into summaries, history rows and detail views
"""
from datetime import datetime, tzinfo
from typing import Any, Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings
from app.core.logging import get_logger
from app.services.analytics import aggregator
from app.services.analytics.adapter import WorkoutAdapter, Workout
from app.services.analytics.aggregator import Dashboard, HistoryRow, Summary, WorkoutDetail

logger = get_logger(__name__)


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Look up an IANA zone name.

    Returns None (system local zone) when unset or unknown.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone, using system local time", timezone=name)
        return None


class StatsCalculator:
    """
    Statistics engine over raw workout documents.

    Usage:
        calculator = StatsCalculator()
        dashboard = calculator.dashboard(raw_workouts, reference_now=now)
    """

    def __init__(self, tz: Optional[tzinfo] = None, adapter: Optional[WorkoutAdapter] = None):
        self.tz = tz
        self.adapter = adapter or WorkoutAdapter()

    @classmethod
    def from_settings(cls) -> "StatsCalculator":
        return cls(tz=resolve_timezone(settings.TIMEZONE))

    def normalize(self, raw_items: Iterable[Dict[str, Any]]) -> List[Workout]:
        return self.adapter.normalize_many(raw_items)

    def summary(self, raw_items: Iterable[Dict[str, Any]]) -> Summary:
        """Aggregate statistics without any display formatting."""
        return aggregator.compute_summary(self.normalize(raw_items), self.tz)

    def history(
        self,
        raw_items: Iterable[Dict[str, Any]],
        reference_now: datetime,
    ) -> List[HistoryRow]:
        """
        History list rows, most recent first.

        Args:
            raw_items: Raw workout documents
            reference_now: Instant that "Today" and "Yesterday" are relative to

        Returns:
            One row per workout
        """
        workouts = self.normalize(raw_items)
        rows = aggregator.build_history(workouts, reference_now, self.tz)

        logger.debug("Built workout history", rows=len(rows))

        return rows

    def detail(self, raw_data: Dict[str, Any]) -> WorkoutDetail:
        """Summary card for a single workout."""
        return aggregator.build_workout_detail(self.adapter.normalize(raw_data), self.tz)

    def dashboard(
        self,
        raw_items: Iterable[Dict[str, Any]],
        reference_now: datetime,
    ) -> Dashboard:
        """
        Summary plus formatted labels and the latest workout.

        Args:
            raw_items: Raw workout documents
            reference_now: Instant used for the latest workout's date label

        Returns:
            Dashboard with computed values
        """
        workouts = self.normalize(raw_items)
        dashboard = aggregator.build_dashboard(workouts, reference_now, self.tz)

        logger.info(
            "Computed workout statistics",
            total_workouts=dashboard.summary.total_workouts,
            days_active=dashboard.summary.days_active,
        )

        return dashboard
