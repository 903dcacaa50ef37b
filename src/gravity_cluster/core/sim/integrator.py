from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from ..model import BodyStore


class Integrator(Protocol):
    def step(self, store: BodyStore, dt: float) -> None:
        ...


@dataclass
class VerletIntegrator:
    """Damped position Verlet using the current and previous positions.

    ``damping`` removes that fraction of the implicit velocity every tick;
    zero gives plain Stoermer-Verlet. Accelerations are consumed and zeroed.
    """

    damping: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.damping < 1.0:
            raise ValueError("damping must be in [0, 1)")

    def step(self, store: BodyStore, dt: float) -> None:
        if dt <= 0:
            raise ValueError("dt must be positive")
        dt_sq = dt * dt
        keep = 2.0 - self.damping
        carry = 1.0 - self.damping
        for body in store:
            if body.is_anchor:
                body.previous_position = body.position.copy()
                body.acceleration = np.zeros(3, dtype=float)
                continue
            new_position = keep * body.position - carry * body.previous_position + body.acceleration * dt_sq
            body.previous_position = body.position
            body.position = new_position
            body.acceleration = np.zeros(3, dtype=float)
