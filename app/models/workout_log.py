from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.base import Base

# Журнал выполненных тренировок. Пишется модулем логирования тренировок,
# генератор читает его только для подбора "свежих" упражнений.

class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    workout_session_id = Column(Integer, ForeignKey("workout_sessions.id"), nullable=True)
    completed_at = Column(DateTime, nullable=True, index=True)

    user = relationship("User", back_populates="workout_logs")
    exercise_logs = relationship("ExerciseLog", back_populates="workout_log", cascade="all, delete-orphan")

class ExerciseLog(Base):
    __tablename__ = "exercise_logs"

    id = Column(Integer, primary_key=True)
    workout_log_id = Column(Integer, ForeignKey("workout_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False)
    sets_completed = Column(Integer, default=0, nullable=False)

    workout_log = relationship("WorkoutLog", back_populates="exercise_logs")
