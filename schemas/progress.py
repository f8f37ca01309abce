# schemas/progress.py
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

# ---------- Request ----------


class ProgressEvent(BaseModel):
    simulation_id: str
    completed: bool
    score: Optional[float] = None
    time_spent_minutes: int = Field(ge=0)
    # opaque snapshot of the simulation controls; passed through untouched
    parameters: Optional[Any] = None


# ---------- Snapshot ----------


class CompletedSimulation(BaseModel):
    simulation_id: str
    completed_at: datetime
    score: Optional[float] = None
    time_spent_minutes: int


class CurrentSimulation(BaseModel):
    simulation_id: str
    started_at: datetime
    last_parameters: Optional[Any] = None


class Achievement(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    earned_at: datetime


class ProgressSnapshot(BaseModel):
    user_id: str
    completed_simulations: List[CompletedSimulation] = Field(default_factory=list)
    current_simulation: Optional[CurrentSimulation] = None
    total_time_minutes: int = 0
    achievements: List[Achievement] = Field(default_factory=list)
    last_activity: datetime
