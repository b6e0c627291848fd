"""
Интерфейсы хранилищ, через которые генератор получает и сохраняет данные.

Реализации на SQLAlchemy лежат в app/repositories, в тестах их заменяют
in-memory фейки.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Protocol, Set

from app.models.exercise import Exercise, MovementPattern
from app.models.profile import UserProfile
from app.models.workout_plan import WorkoutPlan, WorkoutSession, WorkoutSessionExercise


class ProfileStore(Protocol):
    async def get_profile(self, user_id: int) -> Optional[UserProfile]:
        ...


class ExerciseStore(Protocol):
    async def find_by_pattern(self, pattern_id: int) -> List[Exercise]:
        """Только опубликованные упражнения паттерна"""
        ...


class MovementPatternStore(Protocol):
    async def list_primary(self) -> List[MovementPattern]:
        """Основные паттерны, отсортированные по sort_order"""
        ...


class WorkoutHistoryStore(Protocol):
    async def recent_exercise_ids(self, user_id: int, days: int) -> Set[int]:
        ...


class PlanStore(Protocol):
    async def get_active_plan(self, user_id: int) -> Optional[WorkoutPlan]:
        ...

    async def create_plan(
        self,
        *,
        user_id: int,
        name: str,
        explanation: str,
        start_date: datetime,
        end_date: datetime,
        duration_weeks: int,
        frequency: int,
        split_type: str,
        mesocycles: List[Dict[str, Any]],
        deload_weeks: List[int],
        status: str,
    ) -> WorkoutPlan:
        ...

    async def create_session(
        self,
        *,
        workout_plan_id: int,
        user_id: int,
        week_number: int,
        day_of_week: int,
        session_number: int,
        scheduled_date: date,
        name: str,
        warmup: Dict[str, Any],
        cooldown: Dict[str, Any],
        is_deload: bool,
        status: str,
    ) -> WorkoutSession:
        ...

    async def create_session_exercise(
        self,
        *,
        workout_session_id: int,
        exercise_id: int,
        exercise_order: int,
        sets: int,
        reps: str,
        rest_seconds: int,
        coaching_notes: str,
    ) -> WorkoutSessionExercise:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
