"""
Каталог периодизации.

Три неизменяемых шаблона (Beginner / Intermediate / Advanced) с мезоциклами,
целевыми подходами/повторами/отдыхом/RPE и разгрузочными неделями,
плюс чистые функции для работы с ними.
"""
import re
from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Optional, Tuple, Union

from app.models.profile import TrainingExperienceEnum


@dataclass(frozen=True)
class Range:
    min: int
    max: int


@dataclass(frozen=True)
class Mesocycle:
    name: str
    week_start: int
    week_end: int  # включительно
    focus: str
    sets: Union[int, Range]
    reps: str
    rest_seconds: Union[int, Range]
    rpe_target: Union[int, Range]
    notes: str = ""

    def contains(self, week: int) -> bool:
        return self.week_start <= week <= self.week_end

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PeriodizationTemplate:
    template_name: str
    experience_level: str
    mesocycles: Tuple[Mesocycle, ...]
    deload_weeks: Tuple[int, ...]

    def to_dict(self) -> dict:
        return asdict(self)


# Beginner (0-6 месяцев): линейная периодизация
BEGINNER_TEMPLATE = PeriodizationTemplate(
    template_name="Beginner Linear Periodization",
    experience_level=TrainingExperienceEnum.beginner.value,
    deload_weeks=(4, 8, 12),
    mesocycles=(
        Mesocycle(
            name="Anatomical Adaptation",
            week_start=1,
            week_end=3,
            focus="Movement pattern learning, connective tissue strengthening, work capacity building",
            sets=Range(2, 3),
            reps="12-15",
            rest_seconds=Range(60, 90),
            rpe_target=Range(6, 7),
            notes="Higher reps with lower complexity builds work capacity, teaches patterns, "
                  "and prepares joints/tendons for heavier loading.",
        ),
        Mesocycle(
            name="Hypertrophy Introduction",
            week_start=5,
            week_end=7,
            focus="Muscle building, volume increase, progressive overload",
            sets=3,
            reps="8-12",
            rest_seconds=Range(90, 120),
            rpe_target=Range(7, 8),
            notes="Rep range and volume optimal for muscle protein synthesis. "
                  "Intensity increases while recovery capacity improves.",
        ),
        Mesocycle(
            name="Strength Preparation",
            week_start=9,
            week_end=11,
            focus="Strength development, harder progressions, skill introduction",
            sets=Range(3, 4),
            reps="6-10",
            rest_seconds=Range(120, 180),
            rpe_target=Range(8, 9),
            notes="Lower reps with harder progressions build maximal strength. "
                  "Prepares for advanced training methods.",
        ),
    ),
)

# Intermediate (6-18 месяцев): волнообразная периодизация (DUP)
INTERMEDIATE_TEMPLATE = PeriodizationTemplate(
    template_name="Intermediate DUP",
    experience_level=TrainingExperienceEnum.intermediate.value,
    deload_weeks=(4, 8, 12),
    mesocycles=(
        Mesocycle(
            name="Strength Phase",
            week_start=1,
            week_end=3,
            focus="Maximal strength development with undulating volume",
            sets=Range(4, 5),
            reps="5-6",
            rest_seconds=Range(120, 180),
            rpe_target=Range(8, 9),
            notes="Lower reps, higher sets for strength. Alternate with hypertrophy days.",
        ),
        Mesocycle(
            name="Hypertrophy Phase",
            week_start=5,
            week_end=7,
            focus="Muscle building with moderate volume and intensity",
            sets=Range(3, 4),
            reps="8-12",
            rest_seconds=Range(90, 120),
            rpe_target=Range(7, 8),
            notes="Classic hypertrophy range. Varies within each week with strength days.",
        ),
        Mesocycle(
            name="Peak Intensity",
            week_start=9,
            week_end=11,
            focus="Maximum intensity with reduced volume",
            sets=Range(3, 4),
            reps="3-5",
            rest_seconds=Range(180, 240),
            rpe_target=9,
            notes="Highest intensity week. Focus on skill work and advanced progressions.",
        ),
    ),
)

# Advanced (18+ месяцев): блоковая периодизация
ADVANCED_TEMPLATE = PeriodizationTemplate(
    template_name="Advanced Block Periodization",
    experience_level=TrainingExperienceEnum.advanced.value,
    deload_weeks=(5, 9, 12),
    mesocycles=(
        Mesocycle(
            name="Accumulation Block",
            week_start=1,
            week_end=4,
            focus="High volume, moderate intensity - build work capacity and muscle mass",
            sets=Range(4, 5),
            reps="10-15",
            rest_seconds=Range(60, 90),
            rpe_target=Range(7, 8),
            notes="Volume accumulation phase. Builds capacity for intensification.",
        ),
        Mesocycle(
            name="Intensification Block",
            week_start=6,
            week_end=8,
            focus="Moderate volume, high intensity - convert hypertrophy to strength",
            sets=Range(3, 4),
            reps="5-8",
            rest_seconds=Range(120, 180),
            rpe_target=Range(8, 9),
            notes="Intensity increases while volume decreases. Converts mass to strength.",
        ),
        Mesocycle(
            name="Realization Block",
            week_start=10,
            week_end=11,
            focus="Low volume, maximum intensity - peak performance and PR testing",
            sets=Range(2, 3),
            reps="1-5",
            rest_seconds=Range(180, 300),
            rpe_target=9,
            notes="Peak performance phase. Max effort attempts and skill demonstrations.",
        ),
    ),
)

TEMPLATES = MappingProxyType({
    TrainingExperienceEnum.never.value: BEGINNER_TEMPLATE,
    TrainingExperienceEnum.beginner.value: BEGINNER_TEMPLATE,
    TrainingExperienceEnum.intermediate.value: INTERMEDIATE_TEMPLATE,
    TrainingExperienceEnum.advanced.value: ADVANCED_TEMPLATE,
})

DELOAD_SETS_FACTOR = 0.5
DELOAD_REPS_FACTOR = 0.7

_REPS_RANGE = re.compile(r"(\d+)-(\d+)")


def select_template(experience: str) -> PeriodizationTemplate:
    """never/beginner -> Beginner, intermediate -> Intermediate, advanced -> Advanced."""
    if isinstance(experience, TrainingExperienceEnum):
        experience = experience.value
    try:
        return TEMPLATES[experience]
    except KeyError:
        raise ValueError(f"Unknown training experience: {experience}")


def mesocycle_for_week(template: PeriodizationTemplate, week: int) -> Optional[Mesocycle]:
    """
    Мезоцикл, в диапазон которого попадает неделя, или None.

    None возвращается, например, для разгрузочной недели между мезоциклами.
    Подставлять мезоцикл предыдущей недели должен вызывающий код.
    """
    for mesocycle in template.mesocycles:
        if mesocycle.contains(week):
            return mesocycle
    return None


def is_deload_week(template: PeriodizationTemplate, week: int) -> bool:
    return week in template.deload_weeks


def deload_adjust(sets: int, reps: str) -> Tuple[int, str]:
    """
    Параметры разгрузочной недели: подходы вдвое меньше,
    каждая граница диапазона повторений на 30% меньше (не меньше 1).
    """
    deload_sets = max(1, int(sets * DELOAD_SETS_FACTOR))

    match = _REPS_RANGE.search(reps)
    if not match:
        return deload_sets, reps

    min_reps = max(1, int(int(match.group(1)) * DELOAD_REPS_FACTOR))
    max_reps = max(1, int(int(match.group(2)) * DELOAD_REPS_FACTOR))
    return deload_sets, f"{min_reps}-{max_reps}"


def effective_rest(mesocycle: Mesocycle) -> int:
    # Для диапазона - середина
    rest = mesocycle.rest_seconds
    if isinstance(rest, Range):
        return (rest.min + rest.max) // 2
    return rest


def effective_sets(mesocycle: Mesocycle) -> int:
    # Для диапазона - максимум (обычные недели)
    sets = mesocycle.sets
    if isinstance(sets, Range):
        return sets.max
    return sets


def serialize_mesocycles(template: PeriodizationTemplate) -> list:
    return [mesocycle.to_dict() for mesocycle in template.mesocycles]
