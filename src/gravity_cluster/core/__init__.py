from .config import PairwisePolicy, SimulationConfig
from .model import Body, BodyHandle, BodyRole, BodyStore, Vector
from .physics import (
    ForceModel,
    bounding_radius,
    center_of_mass,
    implicit_velocities,
    kinetic_energy_proxy,
    total_mass,
)
from .sim import FixedStepClock, Integrator, Simulation, VerletIntegrator

__all__ = [
    "Body",
    "BodyHandle",
    "BodyRole",
    "BodyStore",
    "Vector",
    "PairwisePolicy",
    "SimulationConfig",
    "ForceModel",
    "bounding_radius",
    "center_of_mass",
    "implicit_velocities",
    "kinetic_energy_proxy",
    "total_mass",
    "FixedStepClock",
    "Integrator",
    "Simulation",
    "VerletIntegrator",
]
