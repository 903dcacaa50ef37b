from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..model import BodyHandle, Vector
from ..sim import Simulation

_LOG = logging.getLogger(__name__)


def random_direction(rng: np.random.Generator) -> Vector:
    """Normalised sample of the unit cube, resampled if it lands on the origin."""
    while True:
        sample = rng.uniform(-1.0, 1.0, size=3)
        norm = float(np.linalg.norm(sample))
        if norm > 1e-9:
            return sample / norm


def spawn_cluster(sim: Simulation, rng: np.random.Generator, count: int | None = None) -> List[BodyHandle]:
    """Create ``count`` bodies around the origin, denser toward the middle.

    Radius is uniform in ``radius_range`` and mass follows from it. Distance is
    ``cbrt(uniform(spawn_min_fraction, 1)) * spawn_radius`` and each velocity
    component is uniform in ``+-spawn_speed``.
    """
    config = sim.config
    count = config.body_count if count is None else int(count)
    if count < 0:
        raise ValueError("count must be non-negative")
    low, high = config.radius_range
    handles: List[BodyHandle] = []
    for _ in range(count):
        radius = float(rng.uniform(low, high))
        direction = random_direction(rng)
        distance = float(np.cbrt(rng.uniform(config.spawn_min_fraction, 1.0))) * config.spawn_radius
        velocity = rng.uniform(-config.spawn_speed, config.spawn_speed, size=3)
        handles.append(sim.create_body_from_radius(radius, config.center + direction * distance, velocity))
    _LOG.info("Spawned %d bodies within radius %.3g", count, config.spawn_radius)
    return handles
