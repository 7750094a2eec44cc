"""Request schemas for the HTTP service."""

from typing import List, Optional
from pydantic import BaseModel, Field

from truck_planner.models import BoxDefinition, TruckType


class LayoutRequestSchema(BaseModel):
    """Single-truck layout request. `truck` wins over `truck_id` when both are given."""
    truck: Optional[TruckType] = Field(None, description="Explicit truck floor plan")
    truck_id: Optional[str] = Field(None, description="Built-in truck preset id")
    boxes: List[BoxDefinition] = Field(default_factory=list, description="Box catalog with quantities")


class OptimizeRequestSchema(BaseModel):
    """Multi-truck optimization request. Without `trucks` the built-in catalog is used."""
    trucks: Optional[List[TruckType]] = Field(None, description="Truck catalog")
    boxes: List[BoxDefinition] = Field(default_factory=list, description="Box catalog with quantities")
    timeout: Optional[float] = Field(None, gt=0, description="Give up after this many seconds")
