"""Tests for the HTTP service."""

from __future__ import annotations

from fastapi.testclient import TestClient

from truck_planner.api import app

client = TestClient(app)

BIG_BOX = {"id": "1", "name": "Big", "length": 1900, "width": 1900, "quantity": 1, "color": "#F59E0B"}
TEST_TRUCK = {"id": "t", "name": "Test Truck", "length": 2000, "width": 2000}


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_trucks_lists_builtin_catalog() -> None:
    response = client.get("/trucks")

    assert response.status_code == 200
    names = [t["name"] for t in response.json()]
    assert names == ["Compact Truck", "Standard Truck", "Large Truck", "Extra Large Truck", "Small Truck"]


def test_layout_with_explicit_truck() -> None:
    response = client.post("/layout", json={"truck": TEST_TRUCK, "boxes": [BIG_BOX]})

    assert response.status_code == 200
    data = response.json()
    assert len(data["arrangement"]) == 1
    placement = data["arrangement"][0]
    assert (placement["x"], placement["y"], placement["rotated"]) == (0, 0, False)
    assert placement["name"] == "Big"
    assert data["stats"]["placed_boxes"] == 1
    assert abs(data["stats"]["utilization"] - 90.25) < 1e-9


def test_layout_with_preset_truck() -> None:
    response = client.post("/layout", json={"truck_id": "2", "boxes": [BIG_BOX]})

    assert response.status_code == 200
    data = response.json()
    assert data["truck"]["name"] == "Standard Truck"
    assert data["stats"]["total_boxes"] == 1


def test_layout_without_truck_is_empty() -> None:
    for body in ({"boxes": [BIG_BOX]}, {"truck_id": "nope", "boxes": [BIG_BOX]}, {"truck": TEST_TRUCK, "boxes": []}):
        response = client.post("/layout", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["arrangement"] == []
        assert data["stats"]["total_boxes"] == 0
        assert data["stats"]["placed_boxes"] == 0


def test_layout_rejects_invalid_box() -> None:
    bad_box = dict(BIG_BOX, length=-5)

    response = client.post("/layout", json={"truck": TEST_TRUCK, "boxes": [bad_box]})

    assert response.status_code == 422


def test_optimize_ranks_solutions() -> None:
    response = client.post("/optimize", json={"trucks": [TEST_TRUCK], "boxes": [dict(BIG_BOX, quantity=2)]})

    assert response.status_code == 200
    data = response.json()
    assert [s["strategy"] for s in data["solutions"]] == ["Optimal Balance", "Space Efficient", "Minimum Trucks"]
    assert data["recommended"]["strategy"] == "Optimal Balance"
    assert data["stats"]["total_trucks"] == 2
    assert data["stats"]["placed_boxes"] == 2
    assert data["stats"]["unplaced_boxes"] == 0


def test_optimize_defaults_to_builtin_catalog() -> None:
    response = client.post("/optimize", json={"boxes": [dict(BIG_BOX, length=1000, width=800)]})

    assert response.status_code == 200
    data = response.json()
    assert data["recommended"] is not None
    assert data["stats"]["placed_boxes"] == 1


def test_optimize_with_no_usable_truck() -> None:
    tiny = {"id": "tiny", "name": "Tiny", "length": 200, "width": 200}

    response = client.post("/optimize", json={"trucks": [tiny], "boxes": [BIG_BOX]})

    assert response.status_code == 200
    data = response.json()
    assert data["solutions"] == []
    assert data["recommended"] is None
    assert data["stats"]["total_boxes"] == 0


def test_optimize_timeout_returns_504() -> None:
    response = client.post(
        "/optimize",
        json={"trucks": [TEST_TRUCK], "boxes": [dict(BIG_BOX, quantity=2)], "timeout": 1e-9},
    )

    assert response.status_code == 504
