"""Geometry utilities for floor-plan packing."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Placement, TruckType

Rect = tuple[float, float, float, float]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """
    Axis-aligned rectangle overlap test.

    a, b are bounds: (x1, y1, x2, y2)

    Touching edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1)


def spacing(a: Rect, b: Rect) -> float:
    """
    Clearance between two rectangles: 0 when they overlap, otherwise the
    Euclidean distance between their nearest edges or corners.
    """
    if rects_overlap(a, b):
        return 0.0

    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b
    dx = max(0.0, max(ax1 - bx2, bx1 - ax2))
    dy = max(0.0, max(ay1 - by2, by1 - ay2))
    return math.sqrt(dx * dx + dy * dy)


def fits_inside(x: float, y: float, width: float, height: float, truck: "TruckType") -> bool:
    """True when the rectangle lies within the truck floor without using overhang."""
    return x >= 0 and y >= 0 and x + width <= float(truck.length) and y + height <= float(truck.width)


def position_score(x: float, y: float, width: float, height: float, truck: "TruckType") -> float:
    """Prefer positions near the origin corner; fully contained positions score 1000 higher."""
    distance = math.sqrt(x * x + y * y)
    bonus = 1000.0 if fits_inside(x, y, width, height, truck) else 0.0
    return bonus - distance


def within_overhang(placement: "Placement", truck: "TruckType", max_overhang: float) -> bool:
    x1, y1, x2, y2 = placement.bounds()
    return (
        x1 >= -max_overhang
        and y1 >= -max_overhang
        and x2 <= float(truck.length) + max_overhang
        and y2 <= float(truck.width) + max_overhang
    )
