# schemas/tutor.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    question: str
    # Current simulation, parameters, etc. Accepted but not used for matching yet.
    context: Optional[str] = None


class SuggestedExperiment(BaseModel):
    simulation_id: str
    title: str
    description: str


class AnswerBundle(BaseModel):
    answer: str
    related_topics: List[str] = Field(default_factory=list)
    suggested_experiments: List[SuggestedExperiment] = Field(default_factory=list)
