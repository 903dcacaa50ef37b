import pytest

from gravity_cluster.app.main import main
from gravity_cluster.core.config import SimulationConfig
from gravity_cluster.core.io import save_config


def test_cli_runs_scenario() -> None:
    assert main(["--scenario", "gravitational_collapse", "--ticks", "5", "--seed", "3", "--report-every", "2"]) == 0


def test_cli_uses_config_file(tmp_path) -> None:
    path = tmp_path / "small.json"
    save_config(SimulationConfig(body_count=6), path)
    assert main(["--config", str(path), "--ticks", "3", "--seed", "1"]) == 0


def test_cli_rejects_unknown_scenario() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--scenario", "nope"])
    assert excinfo.value.code == 2


def test_cli_lists_scenarios(capsys) -> None:
    assert main(["--list-scenarios"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "star_cluster\tStar Cluster" in lines
    assert any(line.startswith("gravitational_collapse\t") for line in lines)
