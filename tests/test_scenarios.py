import numpy as np
import pytest

from gravity_cluster.core.config import SimulationConfig
from gravity_cluster.core.scenarios import (
    ScenarioRegistry,
    load_builtin_scenarios,
    random_direction,
    scenario_registry,
    spawn_cluster,
)
from gravity_cluster.core.scenarios.star_cluster import StarClusterScenario
from gravity_cluster.core.sim import Simulation


def test_builtin_scenarios_registered() -> None:
    load_builtin_scenarios()
    ids = scenario_registry.ids()
    assert {"star_cluster", "anchored_star", "gravitational_collapse"} <= set(ids)
    with pytest.raises(KeyError):
        scenario_registry.get("missing")


def test_duplicate_registration_rejected() -> None:
    registry = ScenarioRegistry()
    registry.register(StarClusterScenario())
    with pytest.raises(ValueError):
        registry.register(StarClusterScenario())


def test_registry_lookup_and_create() -> None:
    registry = ScenarioRegistry()
    assert "star_cluster" not in registry
    with pytest.raises(KeyError, match="none registered"):
        registry.get("star_cluster")
    registry.register(StarClusterScenario())
    assert "star_cluster" in registry
    assert len(registry) == 1
    assert [scenario.scenario_id for scenario in registry] == ["star_cluster"]
    assert registry.catalog() == [("star_cluster", "Star Cluster")]
    with pytest.raises(KeyError, match="star_cluster"):
        registry.get("missing")

    sim = registry.create("star_cluster", seed=5, config=SimulationConfig(body_count=7))
    assert len(sim.store) == 7
    again = registry.create("star_cluster", seed=5, config=SimulationConfig(body_count=7))
    np.testing.assert_array_equal(sim.store.positions(), again.store.positions())


def test_spawn_respects_config() -> None:
    config = SimulationConfig(dt=0.02, radius_range=(1.0, 2.0), spawn_radius=50.0, spawn_min_fraction=0.2)
    sim = Simulation(config=config)
    handles = spawn_cluster(sim, np.random.default_rng(0), count=40)
    assert len(handles) == 40
    inner = np.cbrt(0.2) * 50.0
    for body in sim.store:
        assert 1.0 <= body.radius <= 2.0
        assert body.mass == pytest.approx(body.radius**3 * 0.1)
        distance = np.linalg.norm(body.position)
        assert inner - 1e-9 <= distance <= 50.0 + 1e-9
        assert np.all(np.abs(body.displacement) <= 0.5 * 0.02 + 1e-12)


def test_spawn_is_reproducible_with_seed() -> None:
    first = Simulation()
    second = Simulation()
    spawn_cluster(first, np.random.default_rng(42), count=12)
    spawn_cluster(second, np.random.default_rng(42), count=12)
    np.testing.assert_array_equal(first.store.positions(), second.store.positions())
    np.testing.assert_array_equal(first.store.previous_positions(), second.store.previous_positions())
    np.testing.assert_array_equal(first.store.radii(), second.store.radii())


def test_spawn_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        spawn_cluster(Simulation(), np.random.default_rng(0), count=-1)


def test_random_direction_is_unit() -> None:
    rng = np.random.default_rng(9)
    for _ in range(20):
        assert np.linalg.norm(random_direction(rng)) == pytest.approx(1.0)


def test_star_cluster_population() -> None:
    load_builtin_scenarios()
    sim = scenario_registry.get("star_cluster").create_simulation(seed=1)
    assert len(sim.store) == 165
    assert not sim.store.anchor_mask().any()


def test_anchored_star_has_fixed_anchor() -> None:
    load_builtin_scenarios()
    scenario = scenario_registry.get("anchored_star")
    sim = scenario.create_simulation(seed=1, config=scenario.config().replace(body_count=10))
    assert len(sim.store) == 11
    assert sim.store.anchor_mask().sum() == 1
    anchor = sim.store.anchors()[0]
    start = anchor.position.copy()
    for _ in range(20):
        sim.tick()
    np.testing.assert_array_equal(anchor.position, start)


def test_gravitational_collapse_runs() -> None:
    load_builtin_scenarios()
    scenario = scenario_registry.get("gravitational_collapse")
    sim = scenario.create_simulation(seed=4, config=scenario.config().replace(body_count=8))
    for _ in range(20):
        sim.tick()
    assert np.all(np.isfinite(sim.store.positions()))
