"""
Скрипт для загрузки паттернов движений и стартового каталога упражнений
"""
import asyncio
import logging
import re

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import AsyncSessionLocal
from app.core.initial_exercises import INITIAL_MOVEMENT_PATTERNS, INITIAL_EXERCISES
from app.models.exercise import MovementPattern, Exercise

logger = logging.getLogger(__name__)


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


async def seed_reference_data(db: AsyncSession) -> int:
    """Загрузить справочник, если он пуст. Возвращает число созданных упражнений."""
    result = await db.execute(select(func.count()).select_from(MovementPattern))
    if result.scalar_one() > 0:
        logger.info("Справочник паттернов уже заполнен. Пропускаем загрузку.")
        return 0

    patterns = {}
    for pattern_data in INITIAL_MOVEMENT_PATTERNS:
        pattern = MovementPattern(category="primary", **pattern_data)
        db.add(pattern)
        patterns[pattern.name] = pattern
    await db.flush()

    for exercise_data in INITIAL_EXERCISES:
        data = dict(exercise_data)
        pattern_name = data.pop("pattern")
        db.add(Exercise(
            slug=slugify(data["name"]),
            movement_pattern_id=patterns[pattern_name].id,
            is_published=True,
            **data,
        ))

    await db.commit()
    logger.info(
        "Загружено %s паттернов и %s упражнений",
        len(INITIAL_MOVEMENT_PATTERNS), len(INITIAL_EXERCISES),
    )
    return len(INITIAL_EXERCISES)


async def seed_exercises():
    async with AsyncSessionLocal() as db:
        await seed_reference_data(db)


if __name__ == "__main__":
    asyncio.run(seed_exercises())
