"""
Генератор 12-недельной программы тренировок.

Проверяет профиль, выбирает частоту, сплит и шаблон периодизации,
затем неделя за неделей создаёт сессии и упражнения. Все записи одной
генерации фиксируются одним commit, при любой ошибке делается rollback.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Set

from app.core.config import settings
from app.models.exercise import Exercise, MovementPattern
from app.models.profile import ASSESSMENT_FIELDS, ActivityLevelEnum, UserProfile
from app.models.workout_plan import PlanStatusEnum, SessionStatusEnum, WorkoutPlan
from app.services.workout_generator import periodization, scheduler
from app.services.workout_generator.exceptions import ProfileIncomplete
from app.services.workout_generator.exercise_selector import (
    ExerciseSelector,
    determine_split_type,
    user_equipment,
)
from app.services.workout_generator.interfaces import (
    ExerciseStore,
    MovementPatternStore,
    PlanStore,
    ProfileStore,
    WorkoutHistoryStore,
)
from app.services.workout_generator.random_source import RandomSource

logger = logging.getLogger(__name__)

REQUIRED_PROFILE_FIELDS = (
    "training_experience",
    "activity_level",
    "days_per_week",
    "minutes_per_session",
)

# Длительность программы фиксирована: 12 недель, 84 дня
PLAN_DURATION_WEEKS = 12

MIN_FREQUENCY = 2
MAX_FREQUENCY = 5

BASE_COACHING_NOTE = "Focus on controlled movement and proper form."
SHOULDER_NOTE = " Keep movements pain-free and reduce range if needed."
KNEE_NOTE = " Avoid deep knee flexion if painful."
SHOULDER_MUSCLES = ("chest", "pectoral", "shoulder", "deltoid", "tricep")
KNEE_MUSCLES = ("quad", "glute")


@dataclass
class GeneratedPlan:
    workout_plan: WorkoutPlan
    sessions_count: int
    exercises_count: int


def validate_profile(profile: Optional[UserProfile]) -> None:
    if profile is None:
        raise ProfileIncomplete("User profile not found. Complete onboarding first.", field="profile")

    for field in REQUIRED_PROFILE_FIELDS:
        if not getattr(profile, field, None):
            raise ProfileIncomplete(f"Profile missing required field: {field}", field=field)

    if profile.training_experience not in periodization.TEMPLATES:
        raise ProfileIncomplete(
            f"Unknown training experience: {profile.training_experience}",
            field="training_experience",
        )

    if not profile.goals:
        raise ProfileIncomplete("Profile must have at least one fitness goal", field="goals")

    scores = profile.assessment_scores or {}
    for field in ASSESSMENT_FIELDS:
        if scores.get(field) is None:
            raise ProfileIncomplete(f"Profile missing assessment: {field}", field=field)


def determine_training_frequency(profile: UserProfile, age: Optional[int] = None) -> int:
    """Частота тренировок в неделю, всегда в диапазоне [2, 5]."""
    if age is None:
        age = settings.DEFAULT_ATHLETE_AGE

    frequency = profile.days_per_week

    if profile.activity_level == ActivityLevelEnum.sedentary.value and age > 40:
        frequency = min(frequency, 3)

    # Короткие тренировки можно делать чаще, длинные - реже
    if profile.minutes_per_session < 30:
        frequency = min(frequency + 1, MAX_FREQUENCY)
    if profile.minutes_per_session > 60:
        frequency = max(frequency - 1, MIN_FREQUENCY)

    return max(MIN_FREQUENCY, min(frequency, MAX_FREQUENCY))


def plan_explanation(profile: UserProfile, template: periodization.PeriodizationTemplate) -> str:
    goals = list(profile.goals or [])
    primary_goal = goals[0] if goals else "general fitness"
    return (
        f"A personalized {PLAN_DURATION_WEEKS}-week {template.template_name.lower()} designed for {primary_goal}. "
        f"This program includes {len(template.mesocycles)} training phases with strategic "
        f"deload weeks for optimal recovery and progress."
    )


def _targets_any(exercise: Exercise, keywords: Iterable[str]) -> bool:
    for muscle in exercise.target_muscles or []:
        muscle = muscle.lower()
        if any(keyword in muscle for keyword in keywords):
            return True
    return False


def coaching_notes(exercise: Exercise, injuries: Iterable[str]) -> str:
    injuries = set(injuries or [])
    notes = BASE_COACHING_NOTE

    if "shoulder_pain" in injuries and _targets_any(exercise, SHOULDER_MUSCLES):
        notes += SHOULDER_NOTE
    if "knee_pain" in injuries and _targets_any(exercise, KNEE_MUSCLES):
        notes += KNEE_NOTE

    return notes


class WorkoutGenerator:
    def __init__(
        self,
        profile_store: ProfileStore,
        exercise_store: ExerciseStore,
        pattern_store: MovementPatternStore,
        history_store: WorkoutHistoryStore,
        plan_store: PlanStore,
        random_source: Optional[RandomSource] = None,
    ):
        self.profile_store = profile_store
        self.pattern_store = pattern_store
        self.history_store = history_store
        self.plan_store = plan_store
        self.selector = ExerciseSelector(exercise_store, random_source)

    async def generate_workout_plan(self, user_id: int, start_date: Optional[datetime] = None) -> GeneratedPlan:
        profile = await self.profile_store.get_profile(user_id)
        validate_profile(profile)

        frequency = determine_training_frequency(profile)
        template = periodization.select_template(profile.training_experience)
        split_type = determine_split_type(frequency, profile.training_experience)
        equipment = user_equipment(profile)
        injuries = list(profile.injuries or [])
        favorite_ids = set(profile.favorite_exercise_ids or [])

        recent_ids = set(await self.history_store.recent_exercise_ids(user_id, settings.RECENT_EXERCISE_DAYS))
        primary_patterns = await self.pattern_store.list_primary()

        logger.info(
            "Генерация плана: user_id=%s template=%s frequency=%s split=%s",
            user_id, template.template_name, frequency, split_type,
        )

        start = start_date or datetime.utcnow()
        duration_weeks = PLAN_DURATION_WEEKS

        try:
            plan = await self.plan_store.create_plan(
                user_id=user_id,
                name=f"{template.template_name} - {start.date().isoformat()}",
                explanation=plan_explanation(profile, template),
                start_date=start,
                end_date=start + timedelta(weeks=duration_weeks),
                duration_weeks=duration_weeks,
                frequency=frequency,
                split_type=split_type,
                mesocycles=periodization.serialize_mesocycles(template),
                deload_weeks=list(template.deload_weeks),
                status=PlanStatusEnum.active.value,
            )

            sessions_count = 0
            exercises_count = 0
            for week in range(1, duration_weeks + 1):
                mesocycle = periodization.mesocycle_for_week(template, week)
                if mesocycle is None and week > 1:
                    # Разгрузочная неделя между мезоциклами - параметры предыдущей недели
                    mesocycle = periodization.mesocycle_for_week(template, week - 1)
                if mesocycle is None:
                    logger.warning("Неделя %s не попала ни в один мезоцикл, пропускаем", week)
                    continue

                sessions, exercises = await self._generate_week(
                    plan=plan,
                    user_id=user_id,
                    week=week,
                    start=start,
                    frequency=frequency,
                    split_type=split_type,
                    mesocycle=mesocycle,
                    is_deload=periodization.is_deload_week(template, week),
                    profile=profile,
                    primary_patterns=primary_patterns,
                    equipment=equipment,
                    injuries=injuries,
                    recent_ids=recent_ids,
                    favorite_ids=favorite_ids,
                )
                sessions_count += sessions
                exercises_count += exercises

            await self.plan_store.commit()
        except Exception:
            logger.exception("Ошибка генерации плана для user_id=%s, откатываем", user_id)
            await self.plan_store.rollback()
            raise

        logger.info(
            "План %s создан: %s сессий, %s упражнений", plan.id, sessions_count, exercises_count,
        )
        return GeneratedPlan(
            workout_plan=plan,
            sessions_count=sessions_count,
            exercises_count=exercises_count,
        )

    async def _generate_week(
        self,
        *,
        plan: WorkoutPlan,
        user_id: int,
        week: int,
        start: datetime,
        frequency: int,
        split_type: str,
        mesocycle: periodization.Mesocycle,
        is_deload: bool,
        profile: UserProfile,
        primary_patterns: List[MovementPattern],
        equipment: List[str],
        injuries: List[str],
        recent_ids: Set[int],
        favorite_ids: Set[int],
    ):
        sets = periodization.effective_sets(mesocycle)
        reps = mesocycle.reps
        rest_seconds = periodization.effective_rest(mesocycle)
        if is_deload:
            sets, reps = periodization.deload_adjust(sets, reps)

        sessions_created = 0
        exercises_created = 0

        for day_index, day_of_week in enumerate(scheduler.session_days_for_frequency(frequency)):
            type_name = scheduler.session_type(split_type, day_index)

            session = await self.plan_store.create_session(
                workout_plan_id=plan.id,
                user_id=user_id,
                week_number=week,
                day_of_week=day_of_week,
                session_number=day_index + 1,
                scheduled_date=scheduler.session_date(start, week, day_of_week),
                name=scheduler.session_name(week, type_name),
                warmup=dict(scheduler.WARMUP),
                cooldown=dict(scheduler.COOLDOWN),
                is_deload=is_deload,
                status=SessionStatusEnum.scheduled.value,
            )
            sessions_created += 1

            requirements = scheduler.pattern_requirements(
                type_name, primary_patterns, profile.assessment_scores,
            )
            exercises = await self.selector.select_exercises_for_session(
                requirements,
                equipment,
                injuries,
                recent_ids=recent_ids,
                favorite_ids=favorite_ids,
            )
            # Список "недавних" копится на всю генерацию, а не на одну сессию
            recent_ids.update(e.id for e in exercises)

            for order, exercise in enumerate(exercises, start=1):
                await self.plan_store.create_session_exercise(
                    workout_session_id=session.id,
                    exercise_id=exercise.id,
                    exercise_order=order,
                    sets=sets,
                    reps=reps,
                    rest_seconds=rest_seconds,
                    coaching_notes=coaching_notes(exercise, injuries),
                )
                exercises_created += 1

        return sessions_created, exercises_created
