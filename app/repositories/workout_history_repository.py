from datetime import datetime, timedelta
from typing import Set

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.workout_log import WorkoutLog, ExerciseLog


class WorkoutHistoryRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def recent_exercise_ids(self, user_id: int, days: int = 14) -> Set[int]:
        """Уникальные id упражнений из завершённых тренировок за последние days дней"""
        cutoff = datetime.utcnow() - timedelta(days=days)
        result = await self.db.execute(
            select(ExerciseLog.exercise_id)
            .join(WorkoutLog, ExerciseLog.workout_log_id == WorkoutLog.id)
            .where(
                WorkoutLog.user_id == user_id,
                WorkoutLog.completed_at >= cutoff,
            )
            .distinct()
        )
        return set(result.scalars().all())
