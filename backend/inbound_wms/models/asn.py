"""INBOUND WMS - Advance Shipment Notice and ASN line item models."""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inbound_wms.db.base import Base, utcnow


class ASNStatus(str, Enum):
    PENDING = "PENDING"
    IN_TRANSIT = "IN_TRANSIT"
    PARTIALLY_RECEIVED = "PARTIALLY_RECEIVED"
    RECEIVED = "RECEIVED"
    CANCELLED = "CANCELLED"


class ASNLineStatus(str, Enum):
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    COMPLETE = "COMPLETE"


class AdvanceShippingNotice(Base):
    """Supplier notification of an inbound shipment, ahead of physical arrival."""

    __tablename__ = "asns"
    __table_args__ = (
        UniqueConstraint("supplier_id", "purchase_order_number", name="asn_unique_po"),
    )

    asn_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    supplier_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    purchase_order_number: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ASNStatus.PENDING.value, index=True)
    expected_arrival_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_arrival_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    carrier: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tracking_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    shipment_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    received_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    line_items: Mapped[list["ASNLineItem"]] = relationship(
        "ASNLineItem",
        back_populates="asn",
        cascade="all, delete-orphan",
        order_by="ASNLineItem.line_item_id",
        lazy="selectin",
    )


class ASNLineItem(Base):
    """Expected SKU and quantity on an ASN; received_quantity grows as receipts post."""

    __tablename__ = "asn_line_items"
    __table_args__ = (UniqueConstraint("asn_id", "sku", name="asn_line_unique"),)

    line_item_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    asn_id: Mapped[str] = mapped_column(String(50), ForeignKey("asns.asn_id", ondelete="CASCADE"), index=True)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    expected_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    received_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    lot_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    expiration_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    receiving_status: Mapped[str] = mapped_column(String(20), nullable=False, default=ASNLineStatus.PENDING.value)
    line_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    asn: Mapped["AdvanceShippingNotice"] = relationship("AdvanceShippingNotice", back_populates="line_items")
