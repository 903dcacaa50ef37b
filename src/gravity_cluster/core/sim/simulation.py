from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from ..config import SimulationConfig
from ..model import Body, BodyHandle, BodyRole, BodyStore, Vector
from ..physics import ForceModel, kinetic_energy_proxy
from .integrator import Integrator, VerletIntegrator

_LOG = logging.getLogger(__name__)


@dataclass
class Simulation:
    """Host-facing facade: body creation, fixed ticks and read-back.

    A tick runs clear, pairwise, central and integrate in that order and is
    atomic with respect to the store; hosts read positions between ticks.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    store: BodyStore = field(default_factory=BodyStore)
    force_model: ForceModel | None = None
    integrator: Integrator | None = None
    time: float = 0.0
    tick_count: int = 0

    def __post_init__(self) -> None:
        if self.force_model is None:
            self.force_model = ForceModel(self.config)
        if self.integrator is None:
            self.integrator = VerletIntegrator(damping=self.config.damping)

    @property
    def dt(self) -> float:
        return self.config.dt

    def create_body(
        self,
        mass: float,
        radius: float,
        position: Iterable[float],
        velocity: Iterable[float] | None = None,
        role: BodyRole = BodyRole.ORDINARY,
    ) -> BodyHandle:
        position_arr = np.asarray(list(position), dtype=float)
        previous = None
        if velocity is not None:
            velocity_arr = np.asarray(list(velocity), dtype=float)
            if velocity_arr.shape != (3,) or not np.all(np.isfinite(velocity_arr)):
                raise ValueError("velocity must be a finite vector of length 3")
            previous = position_arr - velocity_arr * self.config.dt
        body = Body(mass=mass, radius=radius, position=position_arr, previous_position=previous, role=role)
        handle = self.store.add(body)
        _LOG.debug("Created %s body %d (mass=%.4g, radius=%.4g)", body.role.value, handle.index, mass, radius)
        return handle

    def create_body_from_radius(
        self,
        radius: float,
        position: Iterable[float],
        velocity: Iterable[float] | None = None,
        role: BodyRole = BodyRole.ORDINARY,
    ) -> BodyHandle:
        if not (radius > 0 and math.isfinite(radius)):
            raise ValueError("Radius must be positive and finite")
        return self.create_body(self.config.mass_for_radius(radius), radius, position, velocity, role)

    def tick(self, dt: float | None = None) -> None:
        step_dt = self.config.dt if dt is None else float(dt)
        if not step_dt > 0:
            raise ValueError("dt must be positive")
        # previous_position encodes velocity over config.dt, so every tick must use it.
        if not math.isclose(step_dt, self.config.dt, rel_tol=1e-12, abs_tol=0.0):
            raise ValueError(f"dt {step_dt:g} differs from the fixed timestep {self.config.dt:g}")
        self.force_model.accumulate(self.store)
        if not np.all(np.isfinite(self.store.accelerations())):
            raise FloatingPointError(f"Non-finite acceleration accumulated at tick {self.tick_count}")
        self.integrator.step(self.store, step_dt)
        self.time += step_dt
        self.tick_count += 1

    def position(self, handle: BodyHandle) -> Vector:
        return self.store.get(handle).position.copy()

    def radius(self, handle: BodyHandle) -> float:
        return self.store.get(handle).radius

    def mass(self, handle: BodyHandle) -> float:
        return self.store.get(handle).mass

    def handles(self) -> List[BodyHandle]:
        return self.store.handles()

    def kinetic_energy_proxy(self) -> float:
        return kinetic_energy_proxy(self.store)
