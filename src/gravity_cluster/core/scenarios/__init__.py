from .base import Scenario
from .registry import ScenarioRegistry, scenario_registry
from .spawn import random_direction, spawn_cluster


def load_builtin_scenarios() -> None:
    # Import side effects to register built-in scenarios.
    from . import anchored_star  # noqa: F401
    from . import gravitational_collapse  # noqa: F401
    from . import star_cluster  # noqa: F401


__all__ = [
    "Scenario",
    "ScenarioRegistry",
    "scenario_registry",
    "load_builtin_scenarios",
    "random_direction",
    "spawn_cluster",
]
