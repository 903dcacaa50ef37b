from __future__ import annotations

import numpy as np

from ..config import SimulationConfig
from ..model import BodyRole
from ..sim import Simulation
from .registry import scenario_registry
from .spawn import spawn_cluster

STAR_RADIUS = 4.0


class AnchoredStarScenario:
    """A fixed star at the centre with the cluster pulled toward it."""

    scenario_id = "anchored_star"
    name = "Anchored Star"

    def config(self) -> SimulationConfig:
        return SimulationConfig(central_target_anchor=True)

    def create_simulation(self, seed: int | None = None, config: SimulationConfig | None = None) -> Simulation:
        sim = Simulation(config=config or self.config())
        sim.create_body_from_radius(STAR_RADIUS, sim.config.center, role=BodyRole.ANCHOR)
        spawn_cluster(sim, np.random.default_rng(seed))
        return sim


scenario_registry.register(AnchoredStarScenario())
