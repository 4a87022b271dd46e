"""INBOUND WMS - Putaway task schemas."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PutawayAssignRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=50)


class PutawayProgressRequest(BaseModel):
    quantity_putaway: int = Field(..., gt=0, description="Units shelved since the last report")
    user_id: str = Field(..., min_length=1, max_length=50)


class PutawayTaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    putaway_task_id: str
    receipt_line_id: str
    sku: str
    quantity_to_putaway: int
    quantity_putaway: int
    target_bin_location: str
    status: str
    assigned_to: str | None
    assigned_at: datetime | None
    completed_at: datetime | None
    completed_by: str | None
    priority: str
    created_at: datetime | None
    updated_at: datetime | None
