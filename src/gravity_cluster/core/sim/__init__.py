from .clock import FixedStepClock
from .integrator import Integrator, VerletIntegrator
from .simulation import Simulation

__all__ = [
    "FixedStepClock",
    "Integrator",
    "Simulation",
    "VerletIntegrator",
]
