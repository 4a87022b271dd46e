"""INBOUND WMS - Seed SKUs with bin assignments for local testing (run after migrations)."""
import asyncio
import logging
import os
import sys

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from inbound_wms.db.session import async_session_maker, engine
from inbound_wms.models.sku import SKU

logger = logging.getLogger("seed_dev")

DEV_SKUS = [
    ("SKU001", "Widget, small", ["A-01-01", "A-01-02"]),
    ("SKU002", "Widget, large", ["A-02-01"]),
    ("SKU003", "Gasket set", ["B-01-01", "B-01-02", "B-01-03"]),
    ("SKU004", "Bearing 6204", ["C-04-02"]),
]


async def seed():
    async with async_session_maker() as session:
        existing = set((await session.execute(select(SKU.sku))).scalars().all())
        created = 0
        for sku, name, bins in DEV_SKUS:
            if sku in existing:
                continue
            session.add(SKU(sku=sku, name=name, bin_locations=bins))
            created += 1
        await session.commit()
    await engine.dispose()
    logger.info("Seeded %s SKUs (%s already present)", created, len(DEV_SKUS) - created)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    asyncio.run(seed())
