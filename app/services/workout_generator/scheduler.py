"""
Расписание недели: дни тренировок, типы сессий, даты и набор паттернов для каждого типа.
"""
from datetime import date, datetime, timedelta
from typing import Dict, List, Mapping, Tuple, Union

from app.models.exercise import MovementPattern
from app.services.workout_generator.exercise_selector import (
    FULL_BODY,
    PUSH_PULL_LEGS,
    UPPER_LOWER,
    PatternRequirement,
)

# 1 = понедельник, 7 = воскресенье
SESSION_DAYS = {
    2: (1, 4),
    3: (1, 3, 5),
    4: (1, 2, 4, 5),
    5: (1, 2, 3, 5, 6),
}
DEFAULT_FREQUENCY = 3

FULL_BODY_A = "Full Body A"
FULL_BODY_B = "Full Body B"
UPPER_BODY = "Upper Body"
LOWER_BODY = "Lower Body"
PUSH = "Push"
PULL = "Pull"
LEGS = "Legs"

# Тип сессии -> (паттерн, количество упражнений)
SESSION_PATTERNS: Dict[str, Tuple[Tuple[str, int], ...]] = {
    FULL_BODY_A: (
        ("horizontal_push", 1),
        ("horizontal_pull", 1),
        ("squat", 1),
        ("hinge", 1),
        ("core_stability", 1),
    ),
    UPPER_BODY: (
        ("horizontal_push", 1),
        ("vertical_push", 1),
        ("horizontal_pull", 1),
        ("vertical_pull", 1),
        ("core_stability", 1),
    ),
    LOWER_BODY: (
        ("squat", 2),
        ("hinge", 2),
        ("core_stability", 2),
    ),
    PUSH: (
        ("horizontal_push", 1),
        ("vertical_push", 1),
        ("core_stability", 1),
    ),
    PULL: (
        ("horizontal_pull", 1),
        ("vertical_pull", 1),
        ("core_stability", 1),
    ),
    LEGS: (
        ("squat", 2),
        ("hinge", 2),
        ("core_stability", 1),
    ),
}
SESSION_PATTERNS[FULL_BODY_B] = SESSION_PATTERNS[FULL_BODY_A]

# Паттерн -> ключ оценки в assessment_scores
PATTERN_ASSESSMENT_FIELDS = {
    "horizontal_push": "pushLevel",
    "vertical_push": "pushLevel",
    "horizontal_pull": "pullLevel",
    "vertical_pull": "pullLevel",
    "squat": "squatLevel",
    "hinge": "hingeLevel",
    "core_stability": "coreLevel",
}
DEFAULT_PATTERN_LEVEL = 5

WARMUP = {
    "duration": "5-10 minutes",
    "activities": ["Dynamic stretching", "Joint mobility", "Light movement preparation"],
}
COOLDOWN = {
    "duration": "5 minutes",
    "activities": ["Static stretching", "Breathing exercises"],
}


def session_days_for_frequency(frequency: int) -> Tuple[int, ...]:
    return SESSION_DAYS.get(frequency, SESSION_DAYS[DEFAULT_FREQUENCY])


def session_type(split_type: str, day_index: int) -> str:
    if split_type == FULL_BODY:
        return FULL_BODY_A if day_index % 2 == 0 else FULL_BODY_B
    if split_type == UPPER_LOWER:
        return UPPER_BODY if day_index % 2 == 0 else LOWER_BODY
    if split_type == PUSH_PULL_LEGS:
        return (PUSH, PULL, LEGS)[day_index % 3]
    return FULL_BODY_A


def session_date(start: Union[date, datetime], week: int, day_of_week: int) -> date:
    if isinstance(start, datetime):
        start = start.date()
    return start + timedelta(days=(week - 1) * 7 + (day_of_week - 1))


def session_name(week: int, type_name: str) -> str:
    return f"Week {week} - {type_name}"


def user_level_for_pattern(pattern_name: str, assessment_scores: Mapping) -> int:
    field = PATTERN_ASSESSMENT_FIELDS.get(pattern_name)
    if not field:
        return DEFAULT_PATTERN_LEVEL
    return (assessment_scores or {}).get(field) or DEFAULT_PATTERN_LEVEL


def pattern_requirements(
    type_name: str,
    primary_patterns: List[MovementPattern],
    assessment_scores: Mapping,
) -> List[PatternRequirement]:
    """
    Требования к паттернам для сессии данного типа.

    Порядок задаётся sort_order основных паттернов, а не таблицей SESSION_PATTERNS.
    Паттерны, которых нет в справочнике, пропускаются.
    """
    counts = dict(SESSION_PATTERNS.get(type_name, ()))
    requirements = []
    for pattern in sorted(primary_patterns, key=lambda p: p.sort_order or 0):
        if pattern.name not in counts:
            continue
        requirements.append(PatternRequirement(
            pattern_id=pattern.id,
            pattern_name=pattern.name,
            user_level=user_level_for_pattern(pattern.name, assessment_scores),
            count=counts[pattern.name],
        ))
    return requirements
