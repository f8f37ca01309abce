# simulations.py
# Catalog of the simulations the frontend ships, plus closed-form "runs"
# so the API can answer with numbers instead of a stub.

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger("physics-tutorial.simulations")

# hbar^2 / 2m_e in eV*nm^2, scaled by particle mass (electron masses)
HBAR2_2M = 0.0381
RYDBERG_EV = 13.6
ORBITAL_LETTERS = "spdfgh"
DEFAULT_L = 1
DEFAULT_M = 0
# visible range the double-slit slider covers
WAVELENGTH_MIN_NM = 400.0
WAVELENGTH_MAX_NM = 700.0


# ---------- Parameter models ----------


class DoubleSlitParams(BaseModel):
    wavelength_nm: float = Field(default=550.0, ge=WAVELENGTH_MIN_NM, le=WAVELENGTH_MAX_NM)
    slit_separation_mm: float = Field(default=0.25, gt=0)
    screen_distance_m: float = Field(default=1.0, gt=0)
    observer_mode: bool = False


class TunnelingParams(BaseModel):
    particle_energy: float = Field(default=5.0, ge=0)  # eV
    barrier_height: float = Field(default=8.0, ge=0)  # eV
    barrier_width: float = Field(default=1.5, gt=0)  # nm
    particle_mass: float = Field(default=1.0, gt=0)  # electron masses


class HydrogenParams(BaseModel):
    # l and m left out by the caller follow n (2p by default, clamped so 1s works);
    # explicit values are checked, not clamped
    n: int = Field(default=2, ge=1, le=len(ORBITAL_LETTERS))
    l: Optional[int] = Field(default=None, ge=0)  # noqa: E741
    m: Optional[int] = None

    @model_validator(mode="after")
    def _check_quantum_numbers(self) -> "HydrogenParams":
        if self.l is None:
            self.l = max(0, min(DEFAULT_L, self.n - 1))
        if self.m is None:
            self.m = max(-self.l, min(self.l, DEFAULT_M))
        if self.l >= self.n:
            raise ValueError("l must be smaller than n")
        if abs(self.m) > self.l:
            raise ValueError("|m| must not exceed l")
        return self


# ---------- Physics ----------


def tunneling_probability(
    energy: float, barrier_height: float, barrier_width: float, particle_mass: float = 1.0
) -> float:
    """WKB estimate T ~ exp(-2*kappa*L); 1.0 in the classical case E >= V0."""
    if energy >= barrier_height:
        return 1.0
    kappa = math.sqrt((barrier_height - energy) / (HBAR2_2M / particle_mass))
    return max(0.0, min(1.0, math.exp(-2 * kappa * barrier_width)))


def orbital_name(n: int, l: int) -> str:  # noqa: E741
    if l < 0 or l >= n or l >= len(ORBITAL_LETTERS):
        return "?"
    return f"{n}{ORBITAL_LETTERS[l]}"


def orbital_energy_ev(n: int) -> float:
    if n < 1:
        return 0.0
    return -RYDBERG_EV / (n * n)


def average_radius_bohr(n: int, l: int) -> float:  # noqa: E741
    return (3 * n * n - l * (l + 1)) / 2


def fringe_spacing_mm(wavelength_nm: float, slit_separation_mm: float, screen_distance_m: float) -> float:
    # small-angle: dy = lambda * L / d
    wavelength_m = wavelength_nm * 1e-9
    return wavelength_m * screen_distance_m / (slit_separation_mm * 1e-3) * 1e3


def _run_double_slit(p: DoubleSlitParams) -> Dict[str, Any]:
    spacing = fringe_spacing_mm(p.wavelength_nm, p.slit_separation_mm, p.screen_distance_m)
    return {
        "fringe_spacing_mm": spacing,
        "interference": not p.observer_mode,
        # which-path information destroys the fringes
        "pattern": "two-bands" if p.observer_mode else "interference-fringes",
    }


def _run_tunneling(p: TunnelingParams) -> Dict[str, Any]:
    t = tunneling_probability(p.particle_energy, p.barrier_height, p.barrier_width, p.particle_mass)
    return {
        "transmission_probability": t,
        "reflection_probability": 1.0 - t,
        "classical": p.particle_energy >= p.barrier_height,
    }


def _run_hydrogen(p: HydrogenParams) -> Dict[str, Any]:
    return {
        "orbital": orbital_name(p.n, p.l),
        "energy_ev": orbital_energy_ev(p.n),
        "average_radius_bohr": average_radius_bohr(p.n, p.l),
        "angular_momentum": math.sqrt(p.l * (p.l + 1)),
    }


# ---------- Catalog ----------


class Simulation(NamedTuple):
    id: str
    name: str
    icon: str
    description: str
    color: str
    params_model: Type[BaseModel]
    run: Callable[[Any], Dict[str, Any]]
    badge: Optional[str] = None

    def describe(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "color": self.color,
            "badge": self.badge,
            "default_parameters": self.params_model().model_dump(),
        }


SIMULATIONS: List[Simulation] = [
    Simulation(
        id="double-slit",
        name="Double-Slit Experiment",
        icon="🌊",
        description="Explore wave-particle duality",
        color="#3b82f6",
        params_model=DoubleSlitParams,
        run=_run_double_slit,
    ),
    Simulation(
        id="tunneling",
        name="Quantum Tunneling",
        icon="⚡",
        description="Barrier penetration phenomenon",
        color="#a855f7",
        params_model=TunnelingParams,
        run=_run_tunneling,
        badge="🏆 Nobel 2025",
    ),
    Simulation(
        id="hydrogen",
        name="Hydrogen Orbitals",
        icon="⚛️",
        description="Atomic structure visualization",
        color="#f97316",
        params_model=HydrogenParams,
        run=_run_hydrogen,
    ),
]


def get_simulation(sim_id: str) -> Optional[Simulation]:
    return next((s for s in SIMULATIONS if s.id == sim_id), None)


def run_simulation(sim: Simulation, overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate overrides (missing keys take the model defaults) and compute results.
    Raises pydantic.ValidationError for bad parameters.
    """
    params = sim.params_model(**overrides)
    results = sim.run(params)
    logger.info("Ran simulation=%s", sim.id)
    return {"simulation_id": sim.id, "parameters": params.model_dump(), "results": results}
