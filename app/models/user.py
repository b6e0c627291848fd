from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.orm import relationship
from app.core.base import Base
from datetime import datetime

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False)
    # Пока не участвует в расчёте частоты тренировок (см. DEFAULT_ATHLETE_AGE)
    date_of_birth = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete")
    workout_plans = relationship("WorkoutPlan", back_populates="user", cascade="all, delete")
    workout_logs = relationship("WorkoutLog", back_populates="user", cascade="all, delete")
