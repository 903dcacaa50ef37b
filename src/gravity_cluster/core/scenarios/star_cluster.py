from __future__ import annotations

import numpy as np

from ..config import SimulationConfig
from ..sim import Simulation
from .registry import scenario_registry
from .spawn import spawn_cluster


class StarClusterScenario:
    """Softly repelling spheres held together by a pull toward the origin."""

    scenario_id = "star_cluster"
    name = "Star Cluster"

    def config(self) -> SimulationConfig:
        return SimulationConfig()

    def create_simulation(self, seed: int | None = None, config: SimulationConfig | None = None) -> Simulation:
        sim = Simulation(config=config or self.config())
        spawn_cluster(sim, np.random.default_rng(seed))
        return sim


scenario_registry.register(StarClusterScenario())
