from app.models.user import User
from app.models.profile import UserProfile
from app.models.exercise import MovementPattern, Exercise
from app.models.workout_plan import WorkoutPlan, WorkoutSession, WorkoutSessionExercise
from app.models.workout_log import WorkoutLog, ExerciseLog

__all__ = [
    "User", "UserProfile",
    "MovementPattern", "Exercise",
    "WorkoutPlan", "WorkoutSession", "WorkoutSessionExercise",
    "WorkoutLog", "ExerciseLog",
]
