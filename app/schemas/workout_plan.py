from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime, date

class WorkoutPlanSummary(BaseModel):
    id: int
    name: str
    explanation: Optional[str] = None
    start_date: datetime
    end_date: datetime
    duration_weeks: int
    frequency: int
    split_type: str
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class WorkoutSessionRead(BaseModel):
    id: int
    week_number: int
    day_of_week: int
    session_number: int
    scheduled_date: date
    name: str
    warmup: Optional[Dict[str, Any]] = None
    cooldown: Optional[Dict[str, Any]] = None
    is_deload: bool
    status: str

    class Config:
        from_attributes = True

class WorkoutPlanRead(WorkoutPlanSummary):
    mesocycles: List[Dict[str, Any]]
    deload_weeks: List[int]

class WorkoutPlanDetail(WorkoutPlanRead):
    sessions: List[WorkoutSessionRead] = []

class ExerciseBrief(BaseModel):
    id: int
    name: str
    difficulty: int
    target_muscles: Optional[List[str]] = None
    movement_pattern: Optional[str] = None

class SessionExerciseRead(BaseModel):
    id: int
    exercise_order: int
    sets: int
    reps: str
    rest_seconds: int
    tempo: Optional[str] = None
    coaching_notes: Optional[str] = None
    exercise: ExerciseBrief

class TodaySessionResponse(WorkoutSessionRead):
    exercises: List[SessionExerciseRead]

class GenerationStats(BaseModel):
    total_sessions: int
    total_exercises: int

class GeneratePlanResponse(BaseModel):
    message: str = "Программа тренировок создана"
    plan: WorkoutPlanRead
    stats: GenerationStats
