from __future__ import annotations

from typing import Protocol

from ..config import SimulationConfig
from ..sim import Simulation


class Scenario(Protocol):
    scenario_id: str
    name: str

    def config(self) -> SimulationConfig:
        ...

    def create_simulation(self, seed: int | None = None, config: SimulationConfig | None = None) -> Simulation:
        ...
