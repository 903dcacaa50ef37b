from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np


class PairwisePolicy(str, Enum):
    REPULSION = "repulsion"
    ATTRACTION = "attraction"
    NONE = "none"


@dataclass(frozen=True)
class SimulationConfig:
    """Startup-time constants of the force model, integrator and spawner."""

    dt: float = 1.0 / 64.0
    gravity_constant: float = 5.0
    repulsion_constant: float = 2.0
    damping: float = 0.005
    pairwise_policy: PairwisePolicy = PairwisePolicy.REPULSION
    # Measured in units of the pair's combined radii.
    repulsion_cutoff: float = 10.0
    central_enabled: bool = True
    central_center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    central_target_anchor: bool = False
    central_scale: float = 10.0
    central_negligible: float = 0.01
    min_distance: float = 1e-6
    body_count: int = 165
    mass_density: float = 0.1
    radius_range: tuple[float, float] = (1.0, 2.0)
    spawn_radius: float = 50.0
    spawn_min_fraction: float = 0.2
    spawn_speed: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairwise_policy", PairwisePolicy(self.pairwise_policy))
        object.__setattr__(self, "central_center", tuple(float(v) for v in self.central_center))
        object.__setattr__(self, "radius_range", tuple(float(v) for v in self.radius_range))
        if len(self.central_center) != 3:
            raise ValueError("central_center must have length 3")
        if not all(math.isfinite(v) for v in self.central_center):
            raise ValueError("central_center must be finite")
        if not self.dt > 0:
            raise ValueError("dt must be positive")
        if not 0.0 <= self.damping < 1.0:
            raise ValueError("damping must be in [0, 1)")
        for name in ("gravity_constant", "repulsion_constant", "central_negligible", "spawn_speed"):
            if not getattr(self, name) >= 0:
                raise ValueError(f"{name} must be non-negative")
        for name in ("repulsion_cutoff", "central_scale", "min_distance", "mass_density", "spawn_radius"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be positive")
        if self.body_count < 0:
            raise ValueError("body_count must be non-negative")
        if len(self.radius_range) != 2:
            raise ValueError("radius_range must have two values")
        low, high = self.radius_range
        if not 0 < low <= high:
            raise ValueError("radius_range must satisfy 0 < low <= high")
        if not 0.0 <= self.spawn_min_fraction <= 1.0:
            raise ValueError("spawn_min_fraction must be in [0, 1]")

    @property
    def center(self) -> np.ndarray:
        return np.array(self.central_center, dtype=float)

    def mass_for_radius(self, radius: float) -> float:
        return float(radius) ** 3 * self.mass_density

    def replace(self, **changes: Any) -> "SimulationConfig":
        return dataclasses.replace(self, **changes)
