"""
Shared fixtures for the inbound pipeline tests.

Each test gets its own SQLite database file (aiosqlite) with the full schema
created from the ORM metadata, a handful of SKUs with bin assignments, and a
service container wired the same way the application wires it.
"""
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import inbound_wms.models  # noqa: F401  registers every table on Base.metadata
from inbound_wms.config import Settings
from inbound_wms.db.base import Base
from inbound_wms.models.sku import SKU
from inbound_wms.services.inbound import build_inbound_services

# SKU -> ordered bin codes; the first bin is the putaway target
SKU_BINS = {
    "SKU001": ["A-01-01", "A-01-02"],
    "SKU002": ["B-02-01"],
    "SKU003": ["C-03-01", "C-03-02", "C-03-03"],
}
SKU_WITHOUT_BINS = "SKU-NOBIN"
ARRIVAL = date(2026, 10, 20)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'inbound.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def skus(session_maker):
    async with session_maker() as session:
        for sku, bins in SKU_BINS.items():
            session.add(SKU(sku=sku, name=f"Test item {sku}", bin_locations=bins))
        session.add(SKU(sku=SKU_WITHOUT_BINS, name="Unslotted item", bin_locations=[]))
        await session.commit()
    return SKU_BINS


@pytest.fixture
async def db(session_maker, skus):
    async with session_maker() as session:
        yield session


@pytest.fixture
def settings():
    return Settings(DEFAULT_PAGE_SIZE=50, ID_SUFFIX_LENGTH=10, PUTAWAY_DEFAULT_PRIORITY="NORMAL")


@pytest.fixture
def services(settings):
    return build_inbound_services(settings)


@pytest.fixture
def asn_lines():
    return [
        {"sku": "SKU001", "expected_quantity": 100, "unit_cost": Decimal("12.50")},
        {"sku": "SKU002", "expected_quantity": 50, "unit_cost": Decimal("3.00"), "lot_number": "LOT-7"},
    ]


@pytest.fixture
def create_asn(db, services, asn_lines):
    async def _create(lines=None, supplier_id="SUP-001", **kwargs):
        return await services.asns.create_asn(
            db,
            supplier_id=supplier_id,
            purchase_order_number=kwargs.pop("purchase_order_number", "PO-1001"),
            expected_arrival_date=kwargs.pop("expected_arrival_date", ARRIVAL),
            lines=lines or asn_lines,
            created_by=kwargs.pop("created_by", "user-1"),
            **kwargs,
        )

    return _create


@pytest.fixture
def create_receipt(db, services):
    async def _create(lines, asn_id=None, receipt_type="PO", received_by="receiver-1"):
        return await services.receipts.create_receipt(
            db,
            receipt_type=receipt_type,
            received_by=received_by,
            lines=lines,
            asn_id=asn_id,
        )

    return _create
