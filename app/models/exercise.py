from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, ARRAY, Index
from sqlalchemy.orm import relationship
from app.core.base import Base

class MovementPattern(Base):
    __tablename__ = "movement_patterns"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)  # "horizontal_push", "squat", ...
    display_name = Column(String(100), nullable=False)
    category = Column(String(20), nullable=False, default="primary")
    description = Column(String, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)

    exercises = relationship("Exercise", back_populates="movement_pattern")

class Exercise(Base):
    """Справочник упражнений. Генератор его только читает."""
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    movement_pattern_id = Column(Integer, ForeignKey("movement_patterns.id"), nullable=False, index=True)
    difficulty = Column(Integer, nullable=False)                # 1-10
    description = Column(String, nullable=True)
    target_muscles = Column(ARRAY(String), default=list)
    equipment_required = Column(ARRAY(String), default=list)    # пусто = свой вес
    contraindications = Column(ARRAY(String), default=list)     # теги травм
    is_published = Column(Boolean, default=True, nullable=False)

    movement_pattern = relationship("MovementPattern", back_populates="exercises")

    __table_args__ = (
        Index('idx_exercise_pattern_published', 'movement_pattern_id', 'is_published'),
    )
