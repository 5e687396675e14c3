"""
Exercise catalog database model.
"""
import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, String, DateTime, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Difficulty(str, enum.Enum):
    """Difficulty levels of a catalog exercise."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DIFFICULTY_LABELS = {
    Difficulty.BEGINNER.value: "Beginner",
    Difficulty.INTERMEDIATE.value: "Intermediate",
    Difficulty.ADVANCED.value: "Advanced",
}


def difficulty_label(difficulty: str | None) -> str:
    """Display label for a difficulty value."""
    return DIFFICULTY_LABELS.get((difficulty or "").lower(), "Unknown")


class CatalogExercise(Base):
    """Reusable exercise definition shown in the exercise library."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    difficulty: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=Difficulty.BEGINNER.value
    )
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "_id": str(self.id),
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty,
            "difficultyLabel": difficulty_label(self.difficulty),
            "imageUrl": self.image_url,
            "videoUrl": self.video_url,
            "isActive": self.is_active,
        }
