import enum
from sqlalchemy import Column, Integer, String, DateTime, Date, ForeignKey, Boolean, JSON, Index, text
from sqlalchemy.orm import relationship
from app.core.base import Base
from datetime import datetime

class PlanStatusEnum(str, enum.Enum):
    active = "active"
    completed = "completed"
    archived = "archived"

class SessionStatusEnum(str, enum.Enum):
    scheduled = "scheduled"
    completed = "completed"
    skipped = "skipped"

class WorkoutPlan(Base):
    __tablename__ = "workout_plans"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    explanation = Column(String, nullable=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    duration_weeks = Column(Integer, nullable=False, default=12)
    frequency = Column(Integer, nullable=False)
    split_type = Column(String(20), nullable=False)
    mesocycles = Column(JSON, nullable=False)
    deload_weeks = Column(JSON, nullable=False)
    status = Column(String(20), nullable=False, default=PlanStatusEnum.active.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="workout_plans")
    sessions = relationship(
        "WorkoutSession",
        back_populates="workout_plan",
        cascade="all, delete-orphan",
        order_by="WorkoutSession.scheduled_date",
    )

    __table_args__ = (
        # Не больше одного активного плана на пользователя
        Index(
            'uq_workout_plans_active_user',
            'user_id',
            unique=True,
            postgresql_where=text("status = 'active'"),
        ),
    )

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"

    id = Column(Integer, primary_key=True)
    workout_plan_id = Column(Integer, ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_number = Column(Integer, nullable=False)       # 1-12
    day_of_week = Column(Integer, nullable=False)       # 1=Пн .. 7=Вс
    session_number = Column(Integer, nullable=False)
    scheduled_date = Column(Date, nullable=False, index=True)
    name = Column(String, nullable=False)
    warmup = Column(JSON, nullable=True)
    cooldown = Column(JSON, nullable=True)
    is_deload = Column(Boolean, default=False, nullable=False)
    status = Column(String(20), nullable=False, default=SessionStatusEnum.scheduled.value)

    workout_plan = relationship("WorkoutPlan", back_populates="sessions")
    exercises = relationship(
        "WorkoutSessionExercise",
        back_populates="workout_session",
        cascade="all, delete-orphan",
        order_by="WorkoutSessionExercise.exercise_order",
    )

class WorkoutSessionExercise(Base):
    __tablename__ = "workout_session_exercises"

    id = Column(Integer, primary_key=True)
    workout_session_id = Column(Integer, ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False)
    exercise_order = Column(Integer, nullable=False)
    sets = Column(Integer, nullable=False)
    reps = Column(String(20), nullable=False)           # "8-12"
    rest_seconds = Column(Integer, nullable=False)
    tempo = Column(String(20), nullable=True)
    coaching_notes = Column(String, nullable=True)

    workout_session = relationship("WorkoutSession", back_populates="exercises")
    exercise = relationship("Exercise")
