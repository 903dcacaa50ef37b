from __future__ import annotations

import logging
import math

from .simulation import Simulation

_LOG = logging.getLogger(__name__)


class FixedStepClock:
    """Runs simulation ticks at a constant timestep regardless of frame timing.

    Every tick uses the simulation's own fixed timestep. ``advance``
    accumulates host frame time and runs whole ticks out of it; the remainder
    carries over to the next call.
    """

    def __init__(self, simulation: Simulation, timestep: float | None = None, max_ticks_per_advance: int = 8) -> None:
        if timestep is not None and not math.isclose(float(timestep), simulation.dt, rel_tol=1e-12, abs_tol=0.0):
            raise ValueError(f"timestep {timestep:g} differs from the simulation timestep {simulation.dt:g}")
        timestep = simulation.dt
        if not timestep > 0:
            raise ValueError("timestep must be positive")
        if max_ticks_per_advance < 1:
            raise ValueError("max_ticks_per_advance must be at least 1")
        self._simulation = simulation
        self._timestep = timestep
        self._max_ticks = int(max_ticks_per_advance)
        self._accumulated = 0.0

    @property
    def timestep(self) -> float:
        return self._timestep

    @property
    def accumulated(self) -> float:
        return self._accumulated

    @property
    def alpha(self) -> float:
        return self._accumulated / self._timestep

    def run(self, ticks: int) -> None:
        if ticks < 0:
            raise ValueError("ticks must be non-negative")
        for _ in range(ticks):
            self._simulation.tick(self._timestep)

    def advance(self, elapsed: float) -> int:
        if elapsed < 0:
            raise ValueError("elapsed must be non-negative")
        self._accumulated += float(elapsed)
        ticks = int(self._accumulated // self._timestep)
        if ticks > self._max_ticks:
            dropped = ticks - self._max_ticks
            _LOG.warning("Clock fell behind by %d ticks; dropping backlog", dropped)
            self._accumulated -= dropped * self._timestep
            ticks = self._max_ticks
        self.run(ticks)
        self._accumulated -= ticks * self._timestep
        return ticks
