"""INBOUND WMS - Receipt schemas."""
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from inbound_wms.models.receipt import ReceiptType


class ReceiptLineCreate(BaseModel):
    asn_line_item_id: str | None = None
    sku: str = Field(..., min_length=1, max_length=50)
    quantity_ordered: int = Field(..., ge=0)
    quantity_received: int = Field(..., gt=0)
    quantity_damaged: int = Field(0, ge=0)
    unit_cost: Decimal | None = Field(None, ge=0)
    lot_number: str | None = None
    expiration_date: date | None = None
    notes: str | None = None


class ReceiptCreate(BaseModel):
    asn_id: str | None = None
    receipt_type: ReceiptType = ReceiptType.PO
    received_by: str = Field(..., min_length=1, max_length=50)
    line_items: list[ReceiptLineCreate] = Field(..., min_length=1)


class ReceiptLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    receipt_line_id: str
    asn_line_item_id: str | None
    sku: str
    quantity_ordered: int
    quantity_received: int
    quantity_damaged: int
    unit_cost: Decimal
    total_cost: Decimal
    quality_status: str
    putaway_status: str
    lot_number: str | None
    expiration_date: date | None
    notes: str | None


class ReceiptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    receipt_id: str
    asn_id: str | None
    receipt_date: date
    receipt_type: str
    status: str
    received_by: str
    created_at: datetime | None
    completed_at: datetime | None
    line_items: list[ReceiptLineResponse]
