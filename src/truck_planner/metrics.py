from __future__ import annotations

from truck_planner.models import LayoutStats, MultiTruckSolution, Placement, TruckType

MM2_PER_M2 = 1_000_000.0


def used_area(placements: list[Placement]) -> float:
    """Total footprint of the placements in mm²."""
    return sum(p.area for p in placements)


def percent(part: float, whole: float) -> float:
    return 0.0 if whole <= 0 else part / whole * 100.0


def compute_metrics(truck: TruckType, placements: list[Placement], requested: int) -> tuple[float, float, float, float]:
    """
    Returns (used_area, truck_area, utilization, efficiency).

    Areas are in mm². Utilization is capped at 100 because overhanging boxes
    can cover more than the nominal floor.
    """
    used = used_area(placements)
    truck_area = truck.area
    utilization = min(100.0, percent(used, truck_area))
    efficiency = percent(len(placements), requested)
    return used, truck_area, utilization, efficiency


def layout_stats(truck: TruckType | None, placements: list[Placement], total_boxes: int) -> LayoutStats:
    """Stats for a single-truck layout; zeroed when there is nothing to report."""
    if truck is None or total_boxes <= 0:
        return LayoutStats()

    used, truck_area, utilization, efficiency = compute_metrics(truck, placements, total_boxes)
    placed = len(placements)
    return LayoutStats(
        total_boxes=total_boxes,
        placed_boxes=placed,
        utilization=utilization,
        efficiency=efficiency,
        unplaced_boxes=total_boxes - placed,
        truck_area=truck_area / MM2_PER_M2,
        used_area=used / MM2_PER_M2,
    )


def solution_stats(solution: MultiTruckSolution | None) -> LayoutStats:
    """Stats keyed off the selected multi-truck solution."""
    if solution is None or solution.total_boxes <= 0:
        return LayoutStats()

    used = sum(used_area(t.placements) for t in solution.trucks)
    truck_area = sum(t.truck_type.area for t in solution.trucks)
    return LayoutStats(
        total_boxes=solution.total_boxes,
        placed_boxes=solution.total_boxes_placed,
        utilization=solution.overall_utilization,
        efficiency=percent(solution.total_boxes_placed, solution.total_boxes),
        unplaced_boxes=len(solution.unplaced_boxes),
        truck_area=truck_area / MM2_PER_M2,
        used_area=used / MM2_PER_M2,
        total_trucks=solution.total_trucks,
    )
