from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class TruckType(BaseModel):
    """Truck floor plan (mm). Length runs along the long axis of the cargo space."""

    id: str = Field(description="Catalog identifier of the truck type")
    name: str = Field(default="", description="Display name")
    length: float = Field(gt=0, description="Floor length in mm")
    width: float = Field(gt=0, description="Floor width in mm")

    @property
    def area(self) -> float:
        return float(self.length) * float(self.width)


class BoxDefinition(BaseModel):
    """A box type as entered by the planner, with the number of units to load."""

    id: str = Field(description="Catalog identifier of the box type")
    name: str = Field(default="", description="Display name, preserved verbatim")
    length: float = Field(gt=0, description="Length in mm")
    width: float = Field(gt=0, description="Width in mm")
    quantity: int = Field(default=1, ge=1, description="Number of units")
    color: Optional[str] = Field(default=None, description="Display color, passed through")


class BoxInstance(BaseModel):
    """One physical unit expanded from a BoxDefinition."""

    definition_id: str = Field(description="Identifier of the source definition")
    instance_id: str = Field(description="'<definitionId>-<n>'")
    instance_name: str = Field(description="'<name>-<n>' or the plain definition name")
    name: str = Field(description="Definition name, preserved verbatim")
    length: float = Field(gt=0)
    width: float = Field(gt=0)
    color: Optional[str] = None

    @property
    def area(self) -> float:
        return float(self.length) * float(self.width)


class Placement(BaseModel):
    """Position and oriented footprint of one placed box.

    x/y is the top-left corner in mm and may be negative or run past the truck
    edge by up to the configured overhang.
    """

    box_id: str = Field(description="Identifier of the source definition")
    instance_id: str = Field(description="Identifier of the placed instance")
    x: float
    y: float
    width: float = Field(gt=0, description="Extent along the truck length after rotation")
    height: float = Field(gt=0, description="Extent along the truck width after rotation")
    rotated: bool = False
    name: str = ""
    instance_name: str = ""
    color: Optional[str] = None

    @property
    def area(self) -> float:
        return float(self.width) * float(self.height)

    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class PackingResult(BaseModel):
    """Layout of one truck produced by the single-truck packer."""

    placements: list[Placement] = Field(default_factory=list)
    unplaced: list[BoxInstance] = Field(default_factory=list)
    used_area: float = 0.0
    truck_area: float = 0.0
    utilization: float = 0.0
    efficiency: float = 0.0


class LayoutStats(BaseModel):
    """Aggregate figures shown next to a layout. Areas are in m²."""

    total_boxes: int = 0
    placed_boxes: int = 0
    utilization: float = 0.0
    efficiency: float = 0.0
    unplaced_boxes: int = 0
    truck_area: float = 0.0
    used_area: float = 0.0
    total_trucks: Optional[int] = None


class SingleTruckLayout(BaseModel):
    truck: Optional[TruckType] = None
    placements: list[Placement] = Field(default_factory=list)
    stats: LayoutStats = Field(default_factory=LayoutStats)


class TruckSolution(BaseModel):
    """One loaded truck inside a multi-truck solution."""

    truck_id: str = Field(description="'<truckTypeId>-<ordinal>'")
    truck_type: TruckType
    truck_name: str = Field(description="'<truck name> #<ordinal>'")
    placements: list[Placement] = Field(default_factory=list)
    utilization: float = 0.0
    box_count: int = 0
    efficiency: float = 0.0
    wasted_space: float = Field(default=0.0, description="Unused floor area in m²")


class MultiTruckSolution(BaseModel):
    trucks: list[TruckSolution] = Field(default_factory=list)
    strategy: str = ""
    priority: str = ""
    total_trucks: int = 0
    total_boxes_placed: int = 0
    total_boxes: int = 0
    overall_utilization: float = 0.0
    overall_score: float = 0.0
    unplaced_boxes: list[BoxInstance] = Field(default_factory=list)
    total_cost: float = 0.0
    space_wastage: float = Field(default=0.0, description="Total unused floor area in m²")
