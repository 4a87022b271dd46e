"""INBOUND WMS - SKU bin lookup: where may a SKU be stocked."""
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.models.sku import SKU


class BinLocationLookup(Protocol):
    async def bin_locations_for(self, db: AsyncSession, sku: str) -> list[str]:
        """Ordered bin codes for ``sku``; empty when the SKU is unknown or has no bins."""
        ...


class SkuBinLookup:
    """Reads bin assignments from the skus table inside the caller's transaction."""

    async def bin_locations_for(self, db: AsyncSession, sku: str) -> list[str]:
        result = await db.execute(select(SKU.bin_locations).where(SKU.sku == sku))
        bins = result.scalar_one_or_none()
        if not bins:
            return []
        return [str(b) for b in bins]
