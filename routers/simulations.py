# routers/simulations.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from schemas.simulations import RunRequest, RunResponse, SimulationOut
from simulations import SIMULATIONS, Simulation, get_simulation, run_simulation

router = APIRouter(prefix="/simulations", tags=["simulations"])


def _require(sim_id: str) -> Simulation:
    sim = get_simulation(sim_id)
    if not sim:
        raise HTTPException(status_code=404, detail="simulation not found")
    return sim


@router.get("", response_model=List[SimulationOut])
def list_simulations():
    return [s.describe() for s in SIMULATIONS]


@router.get("/{sim_id}", response_model=SimulationOut)
def get_simulation_detail(sim_id: str):
    return _require(sim_id).describe()


@router.post("/{sim_id}/run", response_model=RunResponse)
def run(sim_id: str, req: RunRequest):
    sim = _require(sim_id)
    try:
        return run_simulation(sim, req.parameters)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )
