from pathlib import Path

import pytest

import solve_instance

INSTANCE_TEXT = """NAME : cli-n5-k2
NODE_COORD_SECTION
1 0 0
2 1 0
3 1 1
4 0 1
5 3 3
DEMAND_SECTION
1 0
2 0
3 0
4 0
5 0
DEPOT_SECTION
1
-1
EOF
"""


@pytest.fixture
def instance_file(tmp_path: Path) -> Path:
    path = tmp_path / "cli.vrp"
    path.write_text(INSTANCE_TEXT, encoding="utf-8")
    return path


def test_cli_prints_four_scenario_reports(instance_file: Path, monkeypatch, capsys):
    from vrp_annealing.config import settings

    monkeypatch.setattr(settings, "initial_temperature", 1.0)
    monkeypatch.setattr(settings, "cooling_rate", 0.01)

    exit_code = solve_instance.main([str(instance_file), "2", "2", "--seed", "4"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.count("best Cost = ") == 4
    assert "With service = false, with rounding = false;" in out
    assert "With service = true, with rounding = true;" in out
    assert out.count("Truck 2:") == 4


def test_cli_rejects_unreadable_file(tmp_path: Path, capsys):
    exit_code = solve_instance.main([str(tmp_path / "missing.vrp"), "2"])

    assert exit_code == 2
    assert "could not read file" in capsys.readouterr().err


@pytest.mark.parametrize("vehicles", ["0", "-3", "abc", "1000001"])
def test_cli_rejects_bad_vehicle_count(instance_file: Path, vehicles: str, capsys):
    with pytest.raises(SystemExit) as excinfo:
        solve_instance.main([str(instance_file), vehicles])

    assert excinfo.value.code == 2
    assert "positive integer not greater than one million" in capsys.readouterr().err


def test_cli_reports_too_many_vehicles(instance_file: Path, capsys):
    exit_code = solve_instance.main([str(instance_file), "4"])

    assert exit_code == 2
    assert "more customer than vehicles" in capsys.readouterr().err
