from .core import (
    Body,
    BodyHandle,
    BodyRole,
    BodyStore,
    FixedStepClock,
    PairwisePolicy,
    Simulation,
    SimulationConfig,
)

__version__ = "0.1.0"

__all__ = [
    "Body",
    "BodyHandle",
    "BodyRole",
    "BodyStore",
    "FixedStepClock",
    "PairwisePolicy",
    "Simulation",
    "SimulationConfig",
    "__version__",
]
