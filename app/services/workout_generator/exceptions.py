from typing import Optional


class WorkoutGenerationError(Exception):
    """Базовая ошибка генератора программ"""


class ProfileIncomplete(WorkoutGenerationError):
    """Профиль не заполнен настолько, чтобы собрать программу. Исправляется пользователем."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ActivePlanExists(WorkoutGenerationError):
    """У пользователя уже есть активный план"""

    def __init__(self, user_id: int, plan=None):
        super().__init__(f"User {user_id} already has an active workout plan")
        self.user_id = user_id
        self.plan = plan
