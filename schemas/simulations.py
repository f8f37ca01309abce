# schemas/simulations.py
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SimulationOut(BaseModel):
    id: str
    name: str
    icon: str
    description: str
    color: str
    badge: Optional[str] = None
    default_parameters: Dict[str, Any] = Field(default_factory=dict)


class RunRequest(BaseModel):
    # Missing keys fall back to the simulation's defaults
    parameters: Dict[str, Any] = Field(default_factory=dict)


class RunResponse(BaseModel):
    simulation_id: str
    parameters: Dict[str, Any]
    results: Dict[str, Any]
