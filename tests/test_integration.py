from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.vrp_annealing.main import create_app
from src.vrp_annealing.schemas.routing import AnnealingRequest, ScheduleOverrides

INSTANCE_TEXT = """NAME : api-n6-k2
NODE_COORD_SECTION
1 0 0
2 1 0
3 1 1
4 0 1
5 5 5
6 6 5
DEMAND_SECTION
1 0
2 0
3 0
4 0
5 0
6 0
DEPOT_SECTION
1
-1
EOF
"""


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    app = create_app()
    client = TestClient(app)

    from src.vrp_annealing.services.routing import service as routing_service
    from src.vrp_annealing.persistence.filesystem import FileStorage

    monkeypatch.setattr(routing_service, "FileStorage", lambda: FileStorage(root=tmp_path))

    return client


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}
    assert api_client.get("/api/health/config").json()["depot_index"] == 1


def test_solve_endpoint(api_client: TestClient, tmp_path: Path):
    request = AnnealingRequest(
        instance_text=INSTANCE_TEXT,
        vehicles=2,
        runs=2,
        seed=10,
        persist=True,
        schedule=ScheduleOverrides(initial_temperature=2.0, final_temperature=0.0, cooling_rate=0.02),
    )

    response = api_client.post("/api/anneal/solve", json=request.model_dump())

    assert response.status_code == 200
    payload = response.json()
    assert payload["instance"] == "api-n6-k2"
    assert len(payload["results"]) == 4
    for result in payload["results"]:
        assert sorted(index for route in result["routes"] for index in route) == [2, 3, 4, 5, 6]
    assert list((tmp_path / "outputs").iterdir())


def test_solve_endpoint_rejects_malformed_instance(api_client: TestClient):
    broken = INSTANCE_TEXT.replace("3 1 1", "3 1 one")

    response = api_client.post("/api/anneal/solve", json={"instance_text": broken, "vehicles": 2})

    assert response.status_code == 400
    assert "expected integers" in response.json()["detail"]


def test_solve_endpoint_validates_vehicle_count(api_client: TestClient):
    response = api_client.post("/api/anneal/solve", json={"instance_text": INSTANCE_TEXT, "vehicles": 0})

    assert response.status_code == 422


def test_solve_endpoint_reports_internal_failures(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from src.vrp_annealing.api.routes import anneal as anneal_routes
    from src.vrp_annealing.exceptions import RouteInvariantError

    def broken_solver(payload):
        raise RouteInvariantError("Route can never be empty")

    monkeypatch.setattr(anneal_routes, "solve_instance", broken_solver)

    response = api_client.post("/api/anneal/solve", json={"instance_text": INSTANCE_TEXT, "vehicles": 2})

    assert response.status_code == 500
    assert "Route can never be empty" in response.json()["detail"]


def test_solve_endpoint_rejects_unbounded_schedules(api_client: TestClient):
    response = api_client.post(
        "/api/anneal/solve",
        json={"instance_text": INSTANCE_TEXT, "vehicles": 2, "schedule": {"cooling_rate": 1e-12}},
    )

    assert response.status_code == 422
    assert "iterations per anneal" in response.text
