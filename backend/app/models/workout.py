"""
Workout database model.
"""
import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutRecord(Base):
    """
    Logged workout stored in database.

    Exercise entries and their sets are owned by the workout and stored
    as one JSON document on the row.
    """

    __tablename__ = "workouts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        index=True
    )
    date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True
    )
    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0
    )
    exercises: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow
    )

    def to_dict(self) -> dict:
        """Convert to the workout document shape served by the API."""
        return {
            "_id": str(self.id),
            "userId": self.user_id,
            "dateTime": self.date_time.isoformat(),
            "duration": self.duration,
            "exercises": self.exercises,
            "createdAt": int(self.created_at.timestamp() * 1000) if self.created_at else None,
        }
