"""INBOUND WMS - SKU master row as seen by the inbound pipeline (bin assignments only)."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from inbound_wms.db.base import Base, utcnow


class SKU(Base):
    """SKU with its ordered list of bin location codes; the first entry is the putaway target."""

    __tablename__ = "skus"

    sku: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bin_locations: Mapped[list] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
