from __future__ import annotations

import numpy as np

from ..config import PairwisePolicy, SimulationConfig
from ..sim import Simulation
from .registry import scenario_registry
from .spawn import spawn_cluster


class GravitationalCollapseScenario:
    scenario_id = "gravitational_collapse"
    name = "Gravitational Collapse"

    def config(self) -> SimulationConfig:
        return SimulationConfig(
            pairwise_policy=PairwisePolicy.ATTRACTION,
            central_enabled=False,
            damping=0.01,
            body_count=60,
            spawn_speed=0.2,
        )

    def create_simulation(self, seed: int | None = None, config: SimulationConfig | None = None) -> Simulation:
        sim = Simulation(config=config or self.config())
        spawn_cluster(sim, np.random.default_rng(seed))
        return sim


scenario_registry.register(GravitationalCollapseScenario())
