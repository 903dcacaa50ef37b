from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..config import PairwisePolicy, SimulationConfig
from ..model import BodyStore


def pairwise_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    radii: np.ndarray,
    first: np.ndarray,
    second: np.ndarray,
    config: SimulationConfig,
) -> np.ndarray:
    """Per-body acceleration from the pairwise term.

    ``first`` and ``second`` index each unordered pair once. Repulsion pushes
    A away from B by ``repulsion_constant / scaled**2 * m_B`` where ``scaled``
    is the distance in units of the combined radii; attraction pulls A toward
    B by ``gravity_constant / distance**2 * m_B``. B receives the mirrored
    contribution scaled by ``m_A``. Pairs closer than ``min_distance`` are
    skipped.
    """
    accelerations = np.zeros_like(positions, dtype=float)
    policy = config.pairwise_policy
    if policy is PairwisePolicy.NONE or first.size == 0:
        return accelerations

    delta = positions[second] - positions[first]
    distance = np.linalg.norm(delta, axis=1)
    keep = distance >= config.min_distance

    if policy is PairwisePolicy.REPULSION:
        scaled = distance / (radii[first] + radii[second])
        keep &= scaled <= config.repulsion_cutoff
        sign = -1.0
    else:
        scaled = distance
        sign = 1.0

    first, second = first[keep], second[keep]
    if first.size == 0:
        return accelerations
    scaled = scaled[keep]
    direction = delta[keep] / distance[keep][:, None]
    constant = config.repulsion_constant if policy is PairwisePolicy.REPULSION else config.gravity_constant
    magnitude = constant / scaled**2

    # add.at is unbuffered, so a body appearing in several pairs sums correctly.
    np.add.at(accelerations, first, sign * (magnitude * masses[second])[:, None] * direction)
    np.add.at(accelerations, second, -sign * (magnitude * masses[first])[:, None] * direction)
    return accelerations


def central_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    anchors: np.ndarray,
    center: np.ndarray,
    config: SimulationConfig,
) -> np.ndarray:
    """Pull toward ``center`` with magnitude ``G * m + (d / scale)**2``.

    The magnitude is a visual stylisation that keeps the cluster bounded, not
    inverse-square gravity. Anchors, bodies within ``min_distance`` of the
    center and negligible magnitudes are skipped.
    """
    accelerations = np.zeros_like(positions, dtype=float)
    if positions.shape[0] == 0:
        return accelerations
    offset = positions - center
    distance = np.linalg.norm(offset, axis=1)
    keep = ~anchors & (distance >= config.min_distance)
    magnitude = config.gravity_constant * masses + (distance / config.central_scale) ** 2
    keep &= magnitude >= config.central_negligible
    accelerations[keep] = -magnitude[keep][:, None] * offset[keep] / distance[keep][:, None]
    return accelerations


@dataclass
class ForceModel:
    config: SimulationConfig

    def accumulate(self, store: BodyStore) -> None:
        store.clear_accelerations()
        if len(store) == 0:
            return
        self.accumulate_pairwise(store)
        if self.config.central_enabled:
            self.accumulate_central(store)

    def accumulate_pairwise(self, store: BodyStore) -> None:
        first, second = store.pair_indices()
        contribution = pairwise_accelerations(
            store.positions(), store.masses(), store.radii(), first, second, self.config
        )
        store.add_accelerations(contribution)
        for body in store.anchors():
            body.acceleration = np.zeros(3, dtype=float)

    def accumulate_central(self, store: BodyStore) -> None:
        contribution = central_accelerations(
            store.positions(), store.masses(), store.anchor_mask(), self.central_target(store), self.config
        )
        store.add_accelerations(contribution)

    def central_target(self, store: BodyStore) -> np.ndarray:
        if self.config.central_target_anchor:
            anchors = store.anchors()
            if anchors:
                return anchors[0].position.copy()
        return self.config.center
