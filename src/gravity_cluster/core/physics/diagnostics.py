from __future__ import annotations

import numpy as np

from ..model import BodyStore, Vector


def total_mass(store: BodyStore) -> float:
    return float(np.sum(store.masses()))


def center_of_mass(store: BodyStore) -> Vector:
    if len(store) == 0:
        raise ValueError("No bodies provided")
    masses = store.masses()
    positions = store.positions()
    return np.sum(positions * masses[:, None], axis=0) / np.sum(masses)


def implicit_velocities(store: BodyStore, dt: float) -> np.ndarray:
    """Backward-difference velocities ``(position - previous_position) / dt``."""
    if dt <= 0:
        raise ValueError("dt must be positive")
    return (store.positions() - store.previous_positions()) / dt


def kinetic_energy_proxy(store: BodyStore) -> float:
    displacement = store.positions() - store.previous_positions()
    return float(np.sum(displacement * displacement))


def bounding_radius(store: BodyStore, center: Vector | None = None) -> float:
    if len(store) == 0:
        return 0.0
    origin = np.zeros(3, dtype=float) if center is None else np.asarray(center, dtype=float)
    return float(np.max(np.linalg.norm(store.positions() - origin, axis=1)))
