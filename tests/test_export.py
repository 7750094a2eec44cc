from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from truck_planner.export import build_export, export_filename
from truck_planner.metrics import solution_stats
from truck_planner.models import BoxDefinition, TruckType
from truck_planner.packing.ranker import calculate_optimal_arrangements
from truck_planner.packing.single_truck import plan_single_truck

WHEN = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


def test_export_filename() -> None:
    assert export_filename("single", WHEN) == "truck-loading-single-2026-03-14.json"
    assert export_filename("multi", WHEN) == "truck-loading-multi-2026-03-14.json"


def test_single_export_document() -> None:
    truck = TruckType(id="t", name="Test Truck", length=2000, width=2000)
    boxes = [BoxDefinition(id="1", name="Big", length=1900, width=1900, quantity=1, color="#F59E0B")]
    layout = plan_single_truck(truck, boxes)

    doc = build_export("single", boxes, layout.stats, truck=truck, arrangement=layout.placements, when=WHEN)

    assert set(doc) == {"mode", "truck", "boxes", "arrangement", "stats", "exportDate"}
    assert doc["mode"] == "single"
    assert doc["truck"]["name"] == "Test Truck"
    assert doc["arrangement"][0]["color"] == "#F59E0B"
    assert doc["stats"]["placed_boxes"] == 1
    assert doc["exportDate"] == "2026-03-14T09:30:00+00:00"
    json.dumps(doc)


def test_multi_export_document() -> None:
    trucks = [TruckType(id="t", name="Test Truck", length=2000, width=2000)]
    boxes = [BoxDefinition(id="1", name="Big", length=1900, width=1900, quantity=2)]
    solutions = calculate_optimal_arrangements(trucks, boxes)

    doc = build_export(
        "multi", boxes, solution_stats(solutions[0]), solution=solutions[0], all_solutions=solutions, when=WHEN
    )

    assert set(doc) == {"mode", "solution", "allSolutions", "boxes", "stats", "exportDate"}
    assert doc["solution"]["strategy"] == "Optimal Balance"
    assert len(doc["allSolutions"]) == 3
    assert doc["stats"]["total_trucks"] == 2
    assert doc["stats"]["efficiency"] == pytest.approx(100.0)
    json.dumps(doc)


def test_unknown_mode_rejected() -> None:
    with pytest.raises(ValueError):
        build_export("both", [], solution_stats(None))
