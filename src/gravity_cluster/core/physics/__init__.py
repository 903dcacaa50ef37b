from .diagnostics import (
    bounding_radius,
    center_of_mass,
    implicit_velocities,
    kinetic_energy_proxy,
    total_mass,
)
from .forces import ForceModel, central_accelerations, pairwise_accelerations

__all__ = [
    "bounding_radius",
    "center_of_mass",
    "central_accelerations",
    "ForceModel",
    "implicit_velocities",
    "kinetic_energy_proxy",
    "pairwise_accelerations",
    "total_mass",
]
