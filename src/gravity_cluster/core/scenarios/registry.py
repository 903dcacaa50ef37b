from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from ..config import SimulationConfig
from ..sim import Simulation
from .base import Scenario

_LOG = logging.getLogger(__name__)


class ScenarioRegistry:
    """Built-in cluster setups keyed by id, in registration order."""

    def __init__(self) -> None:
        self._scenarios: Dict[str, Scenario] = {}

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._scenarios

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios.values()))

    def __len__(self) -> int:
        return len(self._scenarios)

    def register(self, scenario: Scenario) -> Scenario:
        scenario_id = scenario.scenario_id
        if not scenario_id:
            raise ValueError("Scenario id must be non-empty")
        if scenario_id in self._scenarios:
            raise ValueError(f"Scenario {scenario_id!r} is already registered")
        self._scenarios[scenario_id] = scenario
        _LOG.debug("Registered scenario %s (%s)", scenario_id, scenario.name)
        return scenario

    def get(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            known = ", ".join(self._scenarios) or "none registered"
            raise KeyError(f"Unknown scenario {scenario_id!r} (known: {known})")
        return scenario

    def create(
        self,
        scenario_id: str,
        seed: int | None = None,
        config: SimulationConfig | None = None,
    ) -> Simulation:
        """Build a populated simulation from the scenario registered as ``scenario_id``.

        ``config`` replaces the scenario's own defaults when given.
        """
        scenario = self.get(scenario_id)
        sim = scenario.create_simulation(seed=seed, config=config)
        _LOG.info("Built %s with %d bodies (seed=%s)", scenario.name, len(sim.store), seed)
        return sim

    def ids(self) -> List[str]:
        return list(self._scenarios)

    def catalog(self) -> List[Tuple[str, str]]:
        return [(scenario_id, scenario.name) for scenario_id, scenario in self._scenarios.items()]


scenario_registry = ScenarioRegistry()
