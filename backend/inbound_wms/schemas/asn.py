"""INBOUND WMS - Advance Shipment Notice schemas."""
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from inbound_wms.models.asn import ASNStatus


class ASNLineCreate(BaseModel):
    sku: str = Field(..., min_length=1, max_length=50)
    expected_quantity: int = Field(..., gt=0)
    unit_cost: Decimal = Field(..., ge=0)
    lot_number: str | None = None
    expiration_date: date | None = None
    line_notes: str | None = None


class ASNCreate(BaseModel):
    supplier_id: str = Field(..., min_length=1, max_length=50)
    purchase_order_number: str = Field(..., min_length=1, max_length=100)
    expected_arrival_date: date
    carrier: str | None = None
    tracking_number: str | None = None
    shipment_notes: str | None = None
    created_by: str = Field(..., min_length=1, max_length=50)
    line_items: list[ASNLineCreate] = Field(..., min_length=1)


class ASNStatusUpdate(BaseModel):
    status: ASNStatus


class ASNLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    line_item_id: str
    sku: str
    expected_quantity: int
    received_quantity: int
    unit_cost: Decimal
    lot_number: str | None
    expiration_date: date | None
    receiving_status: str
    line_notes: str | None


class ASNResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    asn_id: str
    supplier_id: str
    purchase_order_number: str
    status: str
    expected_arrival_date: date
    actual_arrival_date: date | None
    carrier: str | None
    tracking_number: str | None
    shipment_notes: str | None
    created_by: str
    created_at: datetime | None
    updated_at: datetime | None
    received_at: datetime | None
    line_items: list[ASNLineResponse]
