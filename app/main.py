import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.core.database import init_database
from app.core.db import AsyncSessionLocal
from app.core.logging import setup_logging
from app.core.seed_exercises import seed_reference_data

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Calisthenics Coach - personalized bodyweight programming")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    await init_database()

    if settings.SEED_REFERENCE_DATA:
        async with AsyncSessionLocal() as session:
            await seed_reference_data(session)

    logger.info("Приложение запущено!")


@app.get("/")
async def root():
    return {
        "app": "Calisthenics Coach",
        "message": "12-week calisthenics programs built from your profile",
        "links": {
            "generate": "/api/workout-plans/generate",
            "active_plan": "/api/workout-plans/active",
            "today": "/api/workout-sessions/today",
            "docs": "/docs",
        },
    }
