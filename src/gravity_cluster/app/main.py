from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ..core.io import load_config
from ..core.physics import bounding_radius, center_of_mass, kinetic_energy_proxy
from ..core.scenarios import load_builtin_scenarios, scenario_registry
from ..core.sim import FixedStepClock, Simulation

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gravity-cluster", description="Run a gravity cluster headlessly.")
    parser.add_argument("--scenario", default="star_cluster", help="built-in scenario id")
    parser.add_argument("--ticks", type=int, default=600, help="number of fixed ticks to run")
    parser.add_argument("--seed", type=int, default=None, help="seed for the spawn generator")
    parser.add_argument("--config", type=Path, default=None, help="JSON config overriding the scenario's")
    parser.add_argument("--report-every", type=int, default=0, help="log a summary every N ticks")
    parser.add_argument("--list-scenarios", action="store_true", help="print the built-in scenarios and exit")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def summarize(sim: Simulation) -> str:
    com = center_of_mass(sim.store) if len(sim.store) else None
    return (
        f"tick={sim.tick_count} time={sim.time:.3f}s bodies={len(sim.store)} "
        f"kinetic={kinetic_energy_proxy(sim.store):.6g} extent={bounding_radius(sim.store):.3f} "
        f"com={None if com is None else [round(float(v), 3) for v in com]}"
    )


def run(sim: Simulation, ticks: int, report_every: int = 0) -> Simulation:
    clock = FixedStepClock(sim)
    remaining = ticks
    chunk = report_every if report_every > 0 else ticks
    while remaining > 0:
        batch = min(chunk, remaining)
        clock.run(batch)
        remaining -= batch
        if report_every > 0:
            _LOG.info("%s", summarize(sim))
    return sim


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if args.ticks < 0:
        parser.error("--ticks must be non-negative")
    load_builtin_scenarios()
    if args.list_scenarios:
        for scenario_id, name in scenario_registry.catalog():
            print(f"{scenario_id}\t{name}")
        return 0
    if args.scenario not in scenario_registry:
        parser.error(f"unknown scenario {args.scenario!r}; choose from {', '.join(scenario_registry.ids())}")
    config = load_config(args.config) if args.config is not None else None
    sim = scenario_registry.create(args.scenario, seed=args.seed, config=config)
    run(sim, args.ticks, args.report_every)
    _LOG.info("%s", summarize(sim))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
