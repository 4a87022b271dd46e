"""INBOUND WMS - Receipt and ReceiptLineItem models."""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inbound_wms.db.base import Base, utcnow


class ReceiptType(str, Enum):
    PO = "PO"
    RETURN = "RETURN"
    TRANSFER = "TRANSFER"
    ADJUSTMENT = "ADJUSTMENT"


class ReceiptStatus(str, Enum):
    RECEIVING = "RECEIVING"
    COMPLETED = "COMPLETED"


class QualityStatus(str, Enum):
    PENDING = "PENDING"
    PASSED = "PASSED"
    FAILED = "FAILED"


class PutawayStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Receipt(Base):
    """Record of goods physically received, optionally against an ASN."""

    __tablename__ = "receipts"

    receipt_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    asn_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("asns.asn_id", ondelete="SET NULL"), nullable=True, index=True
    )
    receipt_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    receipt_type: Mapped[str] = mapped_column(String(20), nullable=False, default=ReceiptType.PO.value, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ReceiptStatus.RECEIVING.value, index=True)
    received_by: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    line_items: Mapped[list["ReceiptLineItem"]] = relationship(
        "ReceiptLineItem",
        back_populates="receipt",
        cascade="all, delete-orphan",
        order_by="ReceiptLineItem.receipt_line_id",
        lazy="selectin",
    )


class ReceiptLineItem(Base):
    """A received SKU on a receipt. putaway_status is driven by its putaway task."""

    __tablename__ = "receipt_line_items"

    receipt_line_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    receipt_id: Mapped[str] = mapped_column(String(50), ForeignKey("receipts.receipt_id", ondelete="CASCADE"), index=True)
    asn_line_item_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("asn_line_items.line_item_id", ondelete="SET NULL"), nullable=True
    )
    sku: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    quantity_ordered: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity_received: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity_damaged: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    total_cost: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    quality_status: Mapped[str] = mapped_column(String(20), nullable=False, default=QualityStatus.PENDING.value)
    putaway_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PutawayStatus.PENDING.value, index=True
    )
    lot_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    expiration_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    receipt: Mapped["Receipt"] = relationship("Receipt", back_populates="line_items")
