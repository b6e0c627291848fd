"""
Общие фикстуры для всех тестов.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- Для unit-тестов генератора хранилища заменяются in-memory реализациями
  (InMemory*Store), а случайность: заглушкой FirstPick, которая всегда берёт
  первый кандидат.
- Для эндпоинтов get_current_user заменяется лямбдой с нужным пользователем,
  репозиторий планов и генератор: на AsyncMock.
- JWT-токены создаются через jose с тем же SECRET_KEY, что и в приложении.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime, timedelta
from typing import AsyncGenerator, Dict, List, Optional
from jose import jwt

from app.api.router import api_router
from app.core.config import settings
from app.core.dependencies import (
    get_current_user,
    get_plan_repository,
    get_user_repository,
    get_workout_generator,
)
from app.core.initial_exercises import INITIAL_MOVEMENT_PATTERNS, INITIAL_EXERCISES
from app.models.exercise import Exercise, MovementPattern
from app.models.profile import UserProfile
from app.models.user import User
from app.models.workout_plan import WorkoutPlan, WorkoutSession, WorkoutSessionExercise
from app.repositories.user_repository import UserRepository
from app.repositories.workout_plan_repository import WorkoutPlanRepository
from app.services.workout_generator import WorkoutGenerator


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="Calisthenics Coach Test App")
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


def make_auth_headers(user: User) -> dict:
    """Создать заголовки авторизации с валидным JWT для указанного пользователя."""
    access_token = jwt.encode(
        {"sub": str(user.id), "exp": datetime.utcnow() + timedelta(minutes=30)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    return {"Authorization": f"Bearer {access_token}"}


def make_profile(**overrides) -> UserProfile:
    """Полностью заполненный профиль новичка; любое поле можно переопределить."""
    data = dict(
        id=1,
        user_id=1,
        training_experience="beginner",
        activity_level="moderately_active",
        goals=["muscle_gain"],
        days_per_week=3,
        minutes_per_session=45,
        has_pull_up_bar=False,
        has_dip_bars=False,
        has_resistance_bands=False,
        has_gymnastics_rings=False,
        has_parallettes=False,
        has_weighted_vest=False,
        injuries=[],
        assessment_scores={
            "pushLevel": 5,
            "pullLevel": 5,
            "squatLevel": 5,
            "hingeLevel": 5,
            "coreLevel": 5,
        },
        favorite_exercise_ids=[],
    )
    data.update(overrides)
    return UserProfile(**data)


def make_exercise(
    exercise_id: int,
    pattern_id: int = 1,
    difficulty: int = 5,
    equipment_required: Optional[List[str]] = None,
    contraindications: Optional[List[str]] = None,
    target_muscles: Optional[List[str]] = None,
    name: Optional[str] = None,
) -> Exercise:
    return Exercise(
        id=exercise_id,
        name=name or f"Exercise {exercise_id}",
        slug=f"exercise-{exercise_id}",
        movement_pattern_id=pattern_id,
        difficulty=difficulty,
        equipment_required=equipment_required or [],
        contraindications=contraindications or [],
        target_muscles=target_muscles or [],
        is_published=True,
    )


def build_catalog():
    """Паттерны и упражнения из стартового справочника с проставленными id."""
    patterns = [
        MovementPattern(id=index, category="primary", **data)
        for index, data in enumerate(INITIAL_MOVEMENT_PATTERNS, start=1)
    ]
    pattern_ids = {p.name: p.id for p in patterns}
    exercises = []
    for index, data in enumerate(INITIAL_EXERCISES, start=1):
        data = dict(data)
        pattern_name = data.pop("pattern")
        exercises.append(Exercise(
            id=index,
            slug=f"exercise-{index}",
            movement_pattern_id=pattern_ids[pattern_name],
            is_published=True,
            **data,
        ))
    return patterns, exercises


# ---------------------------------------------------------------------------
# In-memory хранилища для генератора
# ---------------------------------------------------------------------------

class FirstPick:
    """Детерминированный источник случайности: всегда первый кандидат."""

    def __init__(self):
        self.calls = []

    def pick(self, candidates):
        self.calls.append(list(candidates))
        return candidates[0]


class InMemoryProfileStore:
    def __init__(self, profiles: Optional[Dict[int, UserProfile]] = None):
        self.profiles = profiles or {}

    async def get_profile(self, user_id):
        return self.profiles.get(user_id)


class InMemoryExerciseStore:
    def __init__(self, exercises: List[Exercise]):
        self.exercises = exercises
        self.calls = 0

    async def find_by_pattern(self, pattern_id):
        self.calls += 1
        return [e for e in self.exercises if e.movement_pattern_id == pattern_id and e.is_published]


class InMemoryPatternStore:
    def __init__(self, patterns: List[MovementPattern]):
        self.patterns = patterns

    async def list_primary(self):
        return sorted(
            [p for p in self.patterns if p.category == "primary"],
            key=lambda p: p.sort_order,
        )


class InMemoryHistoryStore:
    def __init__(self, recent_ids=None):
        self.recent_ids = set(recent_ids or [])
        self.requested_days = None

    async def recent_exercise_ids(self, user_id, days):
        self.requested_days = days
        return set(self.recent_ids)


class InMemoryPlanStore:
    """
    PlanStore в памяти. Записи видны как "сохранённые" только после commit(),
    rollback() выбрасывает всё несохранённое.
    """

    def __init__(self, exercises: Optional[List[Exercise]] = None, fail_on_exercise: Optional[int] = None):
        self.exercises = {e.id: e for e in (exercises or [])}
        self.fail_on_exercise = fail_on_exercise
        self.pending = []
        self.plans: List[WorkoutPlan] = []
        self.sessions: List[WorkoutSession] = []
        self.session_exercises: List[WorkoutSessionExercise] = []
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1

    def _assign_id(self, obj):
        obj.id = self._next_id
        self._next_id += 1
        self.pending.append(obj)
        return obj

    def _all_plans(self):
        return self.plans + [o for o in self.pending if isinstance(o, WorkoutPlan)]

    async def get_active_plan(self, user_id):
        for plan in self.plans:
            if plan.user_id == user_id and plan.status == "active":
                return plan
        return None

    async def get_active_with_sessions(self, user_id):
        return await self.get_active_plan(user_id)

    async def list_for_user(self, user_id):
        return [p for p in reversed(self.plans) if p.user_id == user_id]

    async def get_for_user(self, plan_id, user_id):
        for plan in self.plans:
            if plan.id == plan_id and plan.user_id == user_id:
                return plan
        return None

    async def get_session_for_date(self, user_id, day):
        for session in self.sessions:
            if session.user_id == user_id and session.scheduled_date == day:
                return session
        return None

    async def create_plan(self, **fields):
        plan = WorkoutPlan(created_at=datetime.utcnow(), **fields)
        return self._assign_id(plan)

    async def create_session(self, **fields):
        session = WorkoutSession(**fields)
        plan = next(p for p in self._all_plans() if p.id == fields["workout_plan_id"])
        plan.sessions.append(session)
        return self._assign_id(session)

    async def create_session_exercise(self, **fields):
        if self.fail_on_exercise is not None and len(
            [o for o in self.pending if isinstance(o, WorkoutSessionExercise)]
        ) >= self.fail_on_exercise:
            raise RuntimeError("database connection lost")
        item = WorkoutSessionExercise(**fields)
        item.exercise = self.exercises.get(fields["exercise_id"])
        session = next(
            o for o in self.pending
            if isinstance(o, WorkoutSession) and o.id == fields["workout_session_id"]
        )
        session.exercises.append(item)
        return self._assign_id(item)

    async def commit(self):
        self.commits += 1
        for obj in self.pending:
            if isinstance(obj, WorkoutPlan):
                self.plans.append(obj)
            elif isinstance(obj, WorkoutSession):
                self.sessions.append(obj)
            else:
                self.session_exercises.append(obj)
        self.pending = []

    async def rollback(self):
        self.rollbacks += 1
        self.pending = []


# ---------------------------------------------------------------------------
# Фикстуры справочника и генератора
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()


@pytest.fixture
def random_source() -> FirstPick:
    return FirstPick()


@pytest.fixture
def plan_store(catalog) -> InMemoryPlanStore:
    _, exercises = catalog
    return InMemoryPlanStore(exercises)


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore()


@pytest.fixture
def make_generator(catalog, plan_store, history_store, random_source):
    """Фабрика генератора: профиль(и) передаются явно, остальное: из фикстур."""
    patterns, exercises = catalog

    def _make(*profiles, exercises_override=None, store=None):
        return WorkoutGenerator(
            profile_store=InMemoryProfileStore({p.user_id: p for p in profiles}),
            exercise_store=InMemoryExerciseStore(exercises_override if exercises_override is not None else exercises),
            pattern_store=InMemoryPatternStore(patterns),
            history_store=history_store,
            plan_store=store or plan_store,
            random_source=random_source,
        )

    return _make


# ---------------------------------------------------------------------------
# Фикстуры пользователей и зависимостей HTTP
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    return User(
        id=1,
        email="athlete@example.com",
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def mock_repo() -> AsyncMock:
    """Мокированный UserRepository для проверки токена."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_plan_repo() -> AsyncMock:
    repo = AsyncMock(spec=WorkoutPlanRepository)
    repo.get_active_plan.return_value = None
    repo.get_active_with_sessions.return_value = None
    repo.get_for_user.return_value = None
    repo.get_session_for_date.return_value = None
    repo.list_for_user.return_value = []
    return repo


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock(spec=WorkoutGenerator)
    generator.generate_workout_plan = AsyncMock()
    return generator


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(mock_repo, mock_plan_repo, mock_generator) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент без подменённого пользователя: проверка токена проходит через
    get_current_user, UserRepository → mock_repo.
    """
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_repo
    app.dependency_overrides[get_plan_repository] = lambda: mock_plan_repo
    app.dependency_overrides[get_workout_generator] = lambda: mock_generator
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(user_fixture, mock_plan_repo, mock_generator) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент, аутентифицированный как обычный пользователь.
    get_current_user → user_fixture, репозиторий планов и генератор: моки.
    """
    app = create_test_app()
    app.dependency_overrides[get_current_user] = lambda: user_fixture
    app.dependency_overrides[get_plan_repository] = lambda: mock_plan_repo
    app.dependency_overrides[get_workout_generator] = lambda: mock_generator
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
