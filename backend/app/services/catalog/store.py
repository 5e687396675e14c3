"""
Exercise Store - Database operations for the exercise catalog.
"""
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exercise import CatalogExercise
from app.services.catalog.search import filter_exercises
from app.core.logging import get_logger

logger = get_logger(__name__)


class ExerciseStore:
    """Database store for catalog exercises."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(
        self,
        search: Optional[str] = None,
        difficulty: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[Dict[str, Any]]:
        """Catalog entries matching the filters, sorted by name."""
        result = await self.db.execute(select(CatalogExercise))
        documents = [row.to_dict() for row in result.scalars().all()]
        return filter_exercises(documents, search, difficulty, include_inactive)

    async def get(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        try:
            exercise_uuid = uuid.UUID(exercise_id)
        except ValueError:
            logger.warning("Invalid exercise_id format", exercise_id=exercise_id)
            return None

        result = await self.db.execute(
            select(CatalogExercise).where(CatalogExercise.id == exercise_uuid)
        )
        row = result.scalar_one_or_none()
        return row.to_dict() if row else None

    async def create(
        self,
        name: str,
        description: str,
        difficulty: str,
        image_url: Optional[str] = None,
        video_url: Optional[str] = None,
        is_active: bool = True,
    ) -> Dict[str, Any]:
        """
        Add an entry to the catalog.

        Inputs are expected to be validated already.
        """
        row = CatalogExercise(
            name=name,
            description=description,
            difficulty=difficulty,
            image_url=image_url,
            video_url=video_url,
            is_active=is_active,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)

        logger.info("Exercise created", exercise_id=str(row.id), name=name)

        return row.to_dict()
