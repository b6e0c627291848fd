import enum
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON, DateTime, ARRAY
from sqlalchemy.orm import relationship
from app.core.base import Base
from datetime import datetime

class TrainingExperienceEnum(str, enum.Enum):
    never = "never"
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"

class ActivityLevelEnum(str, enum.Enum):
    sedentary = "sedentary"
    lightly_active = "lightly_active"
    moderately_active = "moderately_active"
    very_active = "very_active"
    extremely_active = "extremely_active"

# Ключи assessment_scores: оценка 1-10 по каждому базовому паттерну
ASSESSMENT_FIELDS = ("pushLevel", "pullLevel", "squatLevel", "hingeLevel", "coreLevel")

class UserProfile(Base):
    """Фитнес-профиль, заполняется на онбординге"""
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    training_experience = Column(String(20), nullable=True)  # TrainingExperienceEnum
    activity_level = Column(String(20), nullable=True)       # ActivityLevelEnum
    goals = Column(ARRAY(String), default=list)              # "fat_loss", "muscle_gain", "strength", ...
    days_per_week = Column(Integer, nullable=True)
    minutes_per_session = Column(Integer, nullable=True)

    # Доступный инвентарь
    has_pull_up_bar = Column(Boolean, default=False, nullable=False)
    has_dip_bars = Column(Boolean, default=False, nullable=False)
    has_resistance_bands = Column(Boolean, default=False, nullable=False)
    has_gymnastics_rings = Column(Boolean, default=False, nullable=False)
    has_parallettes = Column(Boolean, default=False, nullable=False)
    has_weighted_vest = Column(Boolean, default=False, nullable=False)

    injuries = Column(ARRAY(String), default=list)           # "shoulder_pain", "knee_pain", ...
    assessment_scores = Column(JSON, nullable=True)          # {"pushLevel": 5, ...}
    favorite_exercise_ids = Column(ARRAY(Integer), default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="profile")
