from __future__ import annotations

import pytest

from truck_planner.models import BoxDefinition, TruckType
from truck_planner.packing.cancellation import Cancellation, OptimizationCancelled
from truck_planner.packing.ranker import calculate_optimal_arrangements
from truck_planner.packing.strategies import STRATEGIES


def test_solutions_sorted_by_score() -> None:
    trucks = [TruckType(id="t", name="Test Truck", length=2000, width=2000)]
    boxes = [BoxDefinition(id="1", name="Big", length=1900, width=1900, quantity=2)]

    solutions = calculate_optimal_arrangements(trucks, boxes)

    # balanced 88.15, space efficient 80.25, minimum trucks 76.1
    assert [s.strategy for s in solutions] == ["Optimal Balance", "Space Efficient", "Minimum Trucks"]
    scores = [s.overall_score for s in solutions]
    assert scores == sorted(scores, reverse=True)


def test_one_solution_per_strategy() -> None:
    trucks = [
        TruckType(id="1", name="Compact Truck", length=3000, width=1800),
        TruckType(id="2", name="Standard Truck", length=6000, width=2400),
    ]
    boxes = [
        BoxDefinition(id="1", name="Electronics Box A", length=600, width=400, quantity=3),
        BoxDefinition(id="4", name="Large Equipment D", length=1500, width=1000, quantity=1),
    ]

    solutions = calculate_optimal_arrangements(trucks, boxes)

    assert sorted(s.strategy for s in solutions) == sorted(s.name for s in STRATEGIES)
    for s in solutions:
        assert s.total_trucks >= 1
        assert s.total_boxes_placed + len(s.unplaced_boxes) == 4


def test_truck_too_small_for_every_box_gives_no_solutions() -> None:
    trucks = [TruckType(id="t", name="Tiny", length=200, width=200)]
    boxes = [
        BoxDefinition(id="1", name="Electronics Box A", length=600, width=400, quantity=3),
        BoxDefinition(id="3", name="Small Parts C", length=500, width=450, quantity=5),
    ]

    assert calculate_optimal_arrangements(trucks, boxes) == []


def test_empty_box_list_gives_no_solutions() -> None:
    trucks = [TruckType(id="t", name="Test Truck", length=2000, width=2000)]

    assert calculate_optimal_arrangements(trucks, []) == []


def test_timeout_cancels_solve() -> None:
    trucks = [TruckType(id="t", name="Test Truck", length=2000, width=2000)]
    boxes = [BoxDefinition(id="1", name="Big", length=1900, width=1900, quantity=2)]

    with pytest.raises(OptimizationCancelled):
        calculate_optimal_arrangements(trucks, boxes, cancellation=Cancellation(timeout=0))
