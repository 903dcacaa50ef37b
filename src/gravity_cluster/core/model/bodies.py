from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

import numpy as np

Vector = np.ndarray


def _to_vector(values: Iterable[float], *, length: int | None = 3) -> Vector:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if length is not None and arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Vector must be finite")
    return arr


class BodyRole(str, Enum):
    ORDINARY = "ordinary"
    ANCHOR = "anchor"


@dataclass(frozen=True)
class BodyHandle:
    index: int


@dataclass
class Body:
    mass: float
    radius: float
    position: Vector = field(default_factory=lambda: np.zeros(3, dtype=float))
    previous_position: Vector | None = None
    acceleration: Vector = field(default_factory=lambda: np.zeros(3, dtype=float))
    role: BodyRole = BodyRole.ORDINARY

    def __post_init__(self) -> None:
        if not (self.mass > 0 and math.isfinite(self.mass)):
            raise ValueError("Mass must be positive and finite")
        if not (self.radius > 0 and math.isfinite(self.radius)):
            raise ValueError("Radius must be positive and finite")
        self.mass = float(self.mass)
        self.radius = float(self.radius)
        self.position = _to_vector(self.position)
        if self.previous_position is None:
            self.previous_position = self.position.copy()
        else:
            self.previous_position = _to_vector(self.previous_position)
        self.acceleration = _to_vector(self.acceleration)
        self.role = BodyRole(self.role)
        if self.is_anchor:
            # An anchor carries no implicit velocity.
            self.previous_position = self.position.copy()

    @property
    def is_anchor(self) -> bool:
        return self.role is BodyRole.ANCHOR

    @property
    def displacement(self) -> Vector:
        return self.position - self.previous_position


class BodyStore:
    """Arena of bodies addressed by ``BodyHandle``.

    Bodies are only ever appended, so a handle stays valid for the lifetime of
    the store. Pair iteration visits each unordered pair of distinct bodies
    exactly once.
    """

    def __init__(self, bodies: Iterable[Body] = ()) -> None:
        self._bodies: List[Body] = []
        for body in bodies:
            self.add(body)

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def add(self, body: Body) -> BodyHandle:
        self._bodies.append(body)
        return BodyHandle(len(self._bodies) - 1)

    def get(self, handle: BodyHandle) -> Body:
        index = handle.index
        if index < 0 or index >= len(self._bodies):
            raise KeyError(f"Unknown body handle: {handle}")
        return self._bodies[index]

    def handles(self) -> List[BodyHandle]:
        return [BodyHandle(index) for index in range(len(self._bodies))]

    def pairs(self) -> Iterator[Tuple[Body, Body]]:
        return itertools.combinations(self._bodies, 2)

    def pair_indices(self) -> Tuple[np.ndarray, np.ndarray]:
        first, second = np.triu_indices(len(self._bodies), k=1)
        return first, second

    def positions(self) -> np.ndarray:
        return self._stack([body.position for body in self._bodies])

    def previous_positions(self) -> np.ndarray:
        return self._stack([body.previous_position for body in self._bodies])

    def accelerations(self) -> np.ndarray:
        return self._stack([body.acceleration for body in self._bodies])

    def masses(self) -> np.ndarray:
        return np.array([body.mass for body in self._bodies], dtype=float)

    def radii(self) -> np.ndarray:
        return np.array([body.radius for body in self._bodies], dtype=float)

    def anchor_mask(self) -> np.ndarray:
        return np.array([body.is_anchor for body in self._bodies], dtype=bool)

    def anchors(self) -> List[Body]:
        return [body for body in self._bodies if body.is_anchor]

    def clear_accelerations(self) -> None:
        for body in self._bodies:
            body.acceleration = np.zeros(3, dtype=float)

    def add_accelerations(self, values: np.ndarray) -> None:
        values = np.asarray(values, dtype=float)
        if values.shape != (len(self._bodies), 3):
            raise ValueError(f"Expected accelerations of shape ({len(self._bodies)}, 3), got {values.shape}")
        for body, value in zip(self._bodies, values):
            body.acceleration = body.acceleration + value

    @staticmethod
    def _stack(vectors: List[Vector]) -> np.ndarray:
        if not vectors:
            return np.zeros((0, 3), dtype=float)
        return np.stack(vectors)
