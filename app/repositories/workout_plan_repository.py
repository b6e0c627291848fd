from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy import select

from app.models.exercise import Exercise
from app.models.workout_plan import (
    PlanStatusEnum,
    WorkoutPlan,
    WorkoutSession,
    WorkoutSessionExercise,
)
from app.services.workout_generator.exceptions import ActivePlanExists


class WorkoutPlanRepository:
    """
    PlanStore поверх SQLAlchemy.

    create_* только добавляют объект и делают flush (чтобы получить id),
    фиксирует всю генерацию целиком вызывающий код через commit().
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_active_plan(self, user_id: int) -> Optional[WorkoutPlan]:
        result = await self.db.execute(
            select(WorkoutPlan).where(
                WorkoutPlan.user_id == user_id,
                WorkoutPlan.status == PlanStatusEnum.active.value,
            )
        )
        return result.scalars().first()

    async def create_plan(self, **fields) -> WorkoutPlan:
        plan = WorkoutPlan(**fields)
        self.db.add(plan)
        try:
            await self.db.flush()
        except IntegrityError as e:
            # Частичный уникальный индекс uq_workout_plans_active_user
            raise ActivePlanExists(fields.get("user_id")) from e
        return plan

    async def create_session(self, **fields) -> WorkoutSession:
        session = WorkoutSession(**fields)
        self.db.add(session)
        await self.db.flush()
        return session

    async def create_session_exercise(self, **fields) -> WorkoutSessionExercise:
        session_exercise = WorkoutSessionExercise(**fields)
        self.db.add(session_exercise)
        await self.db.flush()
        return session_exercise

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    # ---- чтение для API ----

    async def list_for_user(self, user_id: int) -> List[WorkoutPlan]:
        result = await self.db.execute(
            select(WorkoutPlan)
            .where(WorkoutPlan.user_id == user_id)
            .order_by(WorkoutPlan.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_for_user(self, plan_id: int, user_id: int) -> Optional[WorkoutPlan]:
        result = await self.db.execute(
            select(WorkoutPlan)
            .options(selectinload(WorkoutPlan.sessions))
            .where(WorkoutPlan.id == plan_id, WorkoutPlan.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_active_with_sessions(self, user_id: int) -> Optional[WorkoutPlan]:
        result = await self.db.execute(
            select(WorkoutPlan)
            .options(selectinload(WorkoutPlan.sessions))
            .where(
                WorkoutPlan.user_id == user_id,
                WorkoutPlan.status == PlanStatusEnum.active.value,
            )
        )
        return result.scalars().first()

    async def get_session_for_date(self, user_id: int, day: date) -> Optional[WorkoutSession]:
        result = await self.db.execute(
            select(WorkoutSession)
            .join(WorkoutPlan, WorkoutSession.workout_plan_id == WorkoutPlan.id)
            .options(
                selectinload(WorkoutSession.exercises)
                .selectinload(WorkoutSessionExercise.exercise)
                .selectinload(Exercise.movement_pattern)
            )
            .where(
                WorkoutPlan.user_id == user_id,
                WorkoutPlan.status == PlanStatusEnum.active.value,
                WorkoutSession.scheduled_date == day,
            )
        )
        return result.scalars().first()
