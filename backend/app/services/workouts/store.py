"""
Workout Store - Database operations for logged workouts.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.workout import WorkoutRecord
from app.core.logging import get_logger

logger = get_logger(__name__)


class WorkoutStore:
    """
    Database store for workouts.

    Workouts are created once and never updated, so only create and
    read operations exist. Every method returns workout documents.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        user_id: str,
        duration: int,
        exercises: List[Dict[str, Any]],
        date_time: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Store a finished workout.

        Args:
            user_id: Owner identifier from the identity provider
            duration: Elapsed seconds
            exercises: Validated exercise entries
            date_time: When the workout happened (defaults to now)

        Returns:
            The stored workout document
        """
        record = WorkoutRecord(
            user_id=user_id,
            date_time=date_time or datetime.now(timezone.utc),
            duration=duration,
            exercises=exercises,
        )
        self.db.add(record)
        await self.db.flush()
        await self.db.refresh(record)

        logger.info(
            "Workout created",
            workout_id=str(record.id),
            user_id=user_id,
            exercise_count=len(exercises),
        )

        return record.to_dict()

    async def list_all(self) -> List[Dict[str, Any]]:
        """All workouts, most recent first."""
        result = await self.db.execute(
            select(WorkoutRecord).order_by(WorkoutRecord.date_time.desc())
        )
        return [record.to_dict() for record in result.scalars().all()]

    async def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """A user's workouts, most recent first."""
        result = await self.db.execute(
            select(WorkoutRecord)
            .where(WorkoutRecord.user_id == user_id)
            .order_by(WorkoutRecord.date_time.desc())
        )
        return [record.to_dict() for record in result.scalars().all()]

    async def get(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """
        Get one workout by id.

        Returns:
            Workout document or None if not found
        """
        try:
            workout_uuid = uuid.UUID(workout_id)
        except ValueError:
            logger.warning("Invalid workout_id format", workout_id=workout_id)
            return None

        result = await self.db.execute(
            select(WorkoutRecord).where(WorkoutRecord.id == workout_uuid)
        )
        record = result.scalar_one_or_none()
        return record.to_dict() if record else None
