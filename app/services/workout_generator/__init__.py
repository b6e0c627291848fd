from app.services.workout_generator.exceptions import (
    ActivePlanExists,
    ProfileIncomplete,
    WorkoutGenerationError,
)
from app.services.workout_generator.generator_service import GeneratedPlan, WorkoutGenerator
from app.services.workout_generator.random_source import RandomSource, SystemRandomSource

__all__ = [
    "WorkoutGenerator", "GeneratedPlan",
    "WorkoutGenerationError", "ProfileIncomplete", "ActivePlanExists",
    "RandomSource", "SystemRandomSource",
]
