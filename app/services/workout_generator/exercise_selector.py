"""
Подбор упражнений.

Фильтрация по паттерну движения, сложности, инвентарю и противопоказаниям,
затем выбор с приоритетом избранных и "свежих" (давно не выполнявшихся) упражнений.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from app.models.exercise import Exercise
from app.models.profile import TrainingExperienceEnum, UserProfile
from app.services.workout_generator.interfaces import ExerciseStore
from app.services.workout_generator.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)

FULL_BODY = "full-body"
UPPER_LOWER = "upper-lower"
PUSH_PULL_LEGS = "push-pull-legs"

# Сколько самых сложных "свежих" упражнений участвуют в случайном выборе
TOP_CANDIDATES = 3

# Флаг профиля -> тег инвентаря в справочнике упражнений
EQUIPMENT_FLAGS = {
    "has_pull_up_bar": "pull_up_bar",
    "has_dip_bars": "dip_bars",
    "has_resistance_bands": "resistance_bands",
    "has_gymnastics_rings": "gymnastics_rings",
    "has_parallettes": "parallettes",
    "has_weighted_vest": "weighted_vest",
}


@dataclass(frozen=True)
class PatternRequirement:
    pattern_id: int
    pattern_name: str
    user_level: int
    count: int = 1


def difficulty_window(user_level: int):
    return max(1, user_level - 1), user_level + 2


def filter_candidates(
    exercises: Iterable[Exercise],
    user_level: int,
    available_equipment: Iterable[str],
    injuries: Iterable[str],
) -> List[Exercise]:
    """Шаги 1-3: сложность, инвентарь, противопоказания."""
    min_difficulty, max_difficulty = difficulty_window(user_level)
    equipment = set(available_equipment)
    injury_set = set(injuries or [])

    candidates = [e for e in exercises if min_difficulty <= e.difficulty <= max_difficulty]
    # Пустой список требований = упражнение с собственным весом
    candidates = [e for e in candidates if set(e.equipment_required or []) <= equipment]
    if injury_set:
        candidates = [e for e in candidates if not (set(e.contraindications or []) & injury_set)]
    return candidates


def choose_preferred(
    candidates: List[Exercise],
    recent_ids: Set[int],
    favorite_ids: Set[int],
    random_source: RandomSource,
) -> Optional[Exercise]:
    """Шаг 4: избранные -> свежие (топ-3 по сложности) -> самое сложное."""
    if not candidates:
        return None

    favorites_not_recent = [e for e in candidates if e.id in favorite_ids and e.id not in recent_ids]
    if favorites_not_recent:
        return random_source.pick(favorites_not_recent)

    fresh = [e for e in candidates if e.id not in recent_ids]
    if fresh:
        fresh.sort(key=lambda e: e.difficulty, reverse=True)
        return random_source.pick(fresh[:TOP_CANDIDATES])

    # Всё выполнялось недавно - берём самое сложное без случайности
    return max(candidates, key=lambda e: e.difficulty)


class ExerciseSelector:
    def __init__(self, exercise_store: ExerciseStore, random_source: Optional[RandomSource] = None):
        self.exercise_store = exercise_store
        self.random_source = random_source or default_random_source
        # Справочник не меняется за время генерации, читаем каждый паттерн один раз
        self._pattern_cache: Dict[int, List[Exercise]] = {}

    async def _exercises_for_pattern(self, pattern_id: int) -> List[Exercise]:
        if pattern_id not in self._pattern_cache:
            self._pattern_cache[pattern_id] = list(await self.exercise_store.find_by_pattern(pattern_id))
        return self._pattern_cache[pattern_id]

    async def select_exercise(
        self,
        pattern_id: int,
        user_level: int,
        available_equipment: Iterable[str],
        injuries: Iterable[str],
        recent_ids: Optional[Iterable[int]] = None,
        favorite_ids: Optional[Iterable[int]] = None,
    ) -> Optional[Exercise]:
        exercises = await self._exercises_for_pattern(pattern_id)
        if not exercises:
            return None

        candidates = filter_candidates(exercises, user_level, available_equipment, injuries)
        return choose_preferred(
            candidates,
            set(recent_ids or []),
            set(favorite_ids or []),
            self.random_source,
        )

    async def select_exercises_for_session(
        self,
        requirements: List[PatternRequirement],
        available_equipment: Iterable[str],
        injuries: Iterable[str],
        recent_ids: Optional[Iterable[int]] = None,
        favorite_ids: Optional[Iterable[int]] = None,
    ) -> List[Exercise]:
        """
        Подобрать упражнения на сессию по списку требований.

        Выбранные упражнения сразу считаются "недавними", поэтому внутри одной
        сессии упражнение не повторяется, пока есть альтернативы.
        Паттерн без подходящих упражнений пропускается.
        """
        equipment = list(available_equipment)
        injury_list = list(injuries or [])
        pool = set(recent_ids or [])
        selected: List[Exercise] = []

        for requirement in requirements:
            for _ in range(requirement.count or 1):
                exercise = await self.select_exercise(
                    requirement.pattern_id,
                    requirement.user_level,
                    equipment,
                    injury_list,
                    recent_ids=pool,
                    favorite_ids=favorite_ids,
                )
                if exercise is None:
                    logger.debug(
                        "Нет подходящих упражнений для паттерна %s (уровень %s)",
                        requirement.pattern_name,
                        requirement.user_level,
                    )
                    continue
                selected.append(exercise)
                pool.add(exercise.id)

        return selected


def determine_split_type(frequency: int, experience: str) -> str:
    novice = experience in (TrainingExperienceEnum.never.value, TrainingExperienceEnum.beginner.value)

    if frequency <= 3 and novice:
        return FULL_BODY
    if frequency == 3:
        return FULL_BODY
    if frequency == 4:
        return UPPER_LOWER
    if frequency >= 5:
        return PUSH_PULL_LEGS
    return FULL_BODY


def user_equipment(profile: UserProfile) -> List[str]:
    equipment = ["none"]  # свой вес доступен всегда
    for flag, tag in EQUIPMENT_FLAGS.items():
        if getattr(profile, flag, False):
            equipment.append(tag)
    return equipment
