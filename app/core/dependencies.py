from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.config import settings
from app.models.user import User
from app.repositories.user_repository import UserRepository, ProfileRepository
from app.repositories.exercise_repository import ExerciseRepository, MovementPatternRepository
from app.repositories.workout_history_repository import WorkoutHistoryRepository
from app.repositories.workout_plan_repository import WorkoutPlanRepository
from app.services.workout_generator import WorkoutGenerator


security = HTTPBearer()


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Фабрика репозитория: инжектируется в эндпоинты через Depends."""
    return UserRepository(db)


def get_plan_repository(db: AsyncSession = Depends(get_db)) -> WorkoutPlanRepository:
    return WorkoutPlanRepository(db)


def get_workout_generator(
        db: AsyncSession = Depends(get_db),
        plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
) -> WorkoutGenerator:
    """Генератор на одной сессии БД, вся генерация идёт одной транзакцией."""
    return WorkoutGenerator(
        profile_store=ProfileRepository(db),
        exercise_store=ExerciseRepository(db),
        pattern_store=MovementPatternRepository(db),
        history_store=WorkoutHistoryRepository(db),
        plan_store=plan_repo,
    )


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Невалидный токен доступа",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
        user_id: str = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = await repo.get_by_id(int(user_id))
    if user is None:
        raise credentials_exception

    return user
