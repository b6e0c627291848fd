from fastapi import APIRouter
from app.api.v1.workout_plans import router as workout_plans_router
from app.api.v1.workout_plans import sessions_router as workout_sessions_router

api_router = APIRouter()

api_router.include_router(workout_plans_router, prefix="/workout-plans", tags=["workout-plans"])
api_router.include_router(workout_sessions_router, prefix="/workout-sessions", tags=["workout-sessions"])
