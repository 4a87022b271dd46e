"""INBOUND WMS - PutawayTask model."""
from datetime import datetime
from enum import Enum

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from inbound_wms.db.base import Base, utcnow
from inbound_wms.models.receipt import PutawayStatus


class PutawayPriority(str, Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


class PutawayTask(Base):
    """Directive to move one receipt line's goods from receiving into a storage bin."""

    __tablename__ = "putaway_tasks"
    __table_args__ = (
        CheckConstraint("quantity_to_putaway > 0", name="ck_putaway_quantity_positive"),
        CheckConstraint(
            "quantity_putaway >= 0 AND quantity_putaway <= quantity_to_putaway",
            name="ck_putaway_quantity_bounds",
        ),
    )

    putaway_task_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    receipt_line_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("receipt_line_items.receipt_line_id", ondelete="CASCADE"), index=True
    )
    sku: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    quantity_to_putaway: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity_putaway: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    target_bin_location: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=PutawayStatus.PENDING.value, index=True)
    assigned_to: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    assigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by: Mapped[str | None] = mapped_column(String(50), nullable=True)
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default=PutawayPriority.NORMAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
