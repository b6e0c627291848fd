import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.core.dependencies import get_current_user, get_plan_repository, get_workout_generator
from app.models.user import User
from app.repositories.workout_plan_repository import WorkoutPlanRepository
from app.schemas.workout_plan import (
    ExerciseBrief,
    GeneratePlanResponse,
    GenerationStats,
    SessionExerciseRead,
    TodaySessionResponse,
    WorkoutPlanDetail,
    WorkoutPlanRead,
    WorkoutPlanSummary,
    WorkoutSessionRead,
)
from app.services.workout_generator import (
    ActivePlanExists,
    ProfileIncomplete,
    WorkoutGenerator,
)

logger = logging.getLogger(__name__)

router = APIRouter()
sessions_router = APIRouter()

# Сколько ближайших сессий отдаём вместе с активным планом
UPCOMING_SESSIONS_LIMIT = 10


def active_plan_conflict(plan) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": "У вас уже есть активная программа тренировок",
            "existing_plan": {
                "id": plan.id,
                "name": plan.name,
                "start_date": plan.start_date.isoformat(),
                "end_date": plan.end_date.isoformat(),
            } if plan is not None else None,
        },
    )


# ==========================
# ENDPOINTS
# ==========================

@router.post("/generate", status_code=status.HTTP_201_CREATED, response_model=GeneratePlanResponse)
async def generate_plan(
    current_user: User = Depends(get_current_user),
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """Сгенерировать 12-недельную программу для текущего пользователя"""
    existing_plan = await plan_repo.get_active_plan(current_user.id)
    if existing_plan:
        return active_plan_conflict(existing_plan)

    try:
        result = await generator.generate_workout_plan(current_user.id)
    except ProfileIncomplete as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ActivePlanExists:
        # Параллельный запрос успел создать план между проверкой и вставкой
        return active_plan_conflict(await plan_repo.get_active_plan(current_user.id))
    except Exception:
        logger.exception("Ошибка генерации программы для user_id=%s", current_user.id)
        raise HTTPException(status_code=500, detail="Не удалось сгенерировать программу тренировок")

    return GeneratePlanResponse(
        plan=WorkoutPlanRead.model_validate(result.workout_plan),
        stats=GenerationStats(
            total_sessions=result.sessions_count,
            total_exercises=result.exercises_count,
        ),
    )


@router.get("/active", response_model=WorkoutPlanDetail)
async def get_active_plan(
    current_user: User = Depends(get_current_user),
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
):
    plan = await plan_repo.get_active_with_sessions(current_user.id)
    if not plan:
        raise HTTPException(status_code=404, detail="Активная программа не найдена")

    detail = WorkoutPlanDetail.model_validate(plan)
    detail.sessions = detail.sessions[:UPCOMING_SESSIONS_LIMIT]
    return detail


@router.get("", response_model=List[WorkoutPlanSummary])
async def list_plans(
    current_user: User = Depends(get_current_user),
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
):
    plans = await plan_repo.list_for_user(current_user.id)
    return [WorkoutPlanSummary.model_validate(p) for p in plans]


@router.get("/{plan_id}", response_model=WorkoutPlanDetail)
async def get_plan(
    plan_id: int,
    current_user: User = Depends(get_current_user),
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
):
    # Чужие планы не отдаём: фильтр по user_id внутри запроса
    plan = await plan_repo.get_for_user(plan_id, current_user.id)
    if not plan:
        raise HTTPException(status_code=404, detail="Программа не найдена")
    return WorkoutPlanDetail.model_validate(plan)


@sessions_router.get("/today", response_model=TodaySessionResponse)
async def get_today_session(
    current_user: User = Depends(get_current_user),
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repository),
):
    today = datetime.utcnow().date()
    session = await plan_repo.get_session_for_date(current_user.id, today)
    if not session:
        raise HTTPException(status_code=404, detail="На сегодня тренировка не запланирована")

    exercises = [
        SessionExerciseRead(
            id=item.id,
            exercise_order=item.exercise_order,
            sets=item.sets,
            reps=item.reps,
            rest_seconds=item.rest_seconds,
            tempo=item.tempo,
            coaching_notes=item.coaching_notes,
            exercise=ExerciseBrief(
                id=item.exercise.id,
                name=item.exercise.name,
                difficulty=item.exercise.difficulty,
                target_muscles=item.exercise.target_muscles,
                movement_pattern=item.exercise.movement_pattern.name if item.exercise.movement_pattern else None,
            ),
        )
        for item in session.exercises
    ]

    return TodaySessionResponse(
        **WorkoutSessionRead.model_validate(session).model_dump(),
        exercises=exercises,
    )
