"""FastAPI endpoint for the truck planner."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from truck_planner.config import load_config
from truck_planner.io.schemas import LayoutRequestSchema, OptimizeRequestSchema
from truck_planner.metrics import solution_stats
from truck_planner.models import TruckType
from truck_planner.packing.cancellation import Cancellation, OptimizationCancelled
from truck_planner.packing.ranker import calculate_optimal_arrangements
from truck_planner.packing.single_truck import plan_single_truck
from truck_planner.trucks import default_trucks, get_truck

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Truck Planner API",
    description="Truck floor-plan loading optimization service",
)


def resolve_truck(request: LayoutRequestSchema) -> TruckType | None:
    """Explicit truck first, then preset id. An unknown preset means no truck selected."""
    if request.truck is not None:
        return request.truck
    if request.truck_id:
        try:
            return get_truck(request.truck_id)
        except ValueError as e:
            logger.warning(f"Layout requested for unknown truck: {e}")
    return None


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}


@app.get("/trucks")
async def trucks() -> list[dict[str, Any]]:
    """Built-in truck catalog."""
    return [t.model_dump(mode="json") for t in default_trucks()]


@app.post("/layout")
def layout(request: LayoutRequestSchema) -> dict[str, Any]:
    """
    Single-truck layout.

    Returns:
        {"truck": ..., "arrangement": [...placements], "stats": {...}}
        An empty arrangement with zeroed stats when no truck or no boxes are given.
    """
    try:
        truck = resolve_truck(request)
        result = plan_single_truck(truck, request.boxes, load_config())

        logger.info(
            f"layout truck={truck.id if truck else None}, "
            f"placed={result.stats.placed_boxes}/{result.stats.total_boxes}"
        )
        return {
            "truck": result.truck.model_dump(mode="json") if result.truck else None,
            "arrangement": [p.model_dump(mode="json") for p in result.placements],
            "stats": result.stats.model_dump(mode="json"),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /layout endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/optimize")
def optimize(request: OptimizeRequestSchema) -> dict[str, Any]:
    """
    Multi-truck optimization.

    Returns:
        {"solutions": [...ranked], "recommended": solution | None, "stats": {...}}
    """
    catalog = request.trucks if request.trucks else default_trucks()
    cancellation = Cancellation(timeout=request.timeout) if request.timeout else None

    try:
        solutions = calculate_optimal_arrangements(catalog, request.boxes, load_config(), cancellation)
    except OptimizationCancelled as e:
        logger.warning(f"/optimize gave up: {e}")
        raise HTTPException(status_code=504, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /optimize endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    recommended = solutions[0] if solutions else None
    stats = solution_stats(recommended)

    logger.info(
        f"solutions={len(solutions)}, "
        f"recommended={recommended.strategy if recommended else None}, "
        f"placed={stats.placed_boxes}/{stats.total_boxes}"
    )
    return {
        "solutions": [s.model_dump(mode="json") for s in solutions],
        "recommended": recommended.model_dump(mode="json") if recommended else None,
        "stats": stats.model_dump(mode="json"),
    }
