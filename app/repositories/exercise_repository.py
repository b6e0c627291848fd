from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.exercise import Exercise, MovementPattern


class ExerciseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_pattern(self, pattern_id: int) -> List[Exercise]:
        result = await self.db.execute(
            select(Exercise).where(
                Exercise.movement_pattern_id == pattern_id,
                Exercise.is_published == True,  # noqa: E712
            )
        )
        return list(result.scalars().all())


class MovementPatternRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_primary(self) -> List[MovementPattern]:
        result = await self.db.execute(
            select(MovementPattern)
            .where(MovementPattern.category == "primary")
            .order_by(MovementPattern.sort_order.asc())
        )
        return list(result.scalars().all())
