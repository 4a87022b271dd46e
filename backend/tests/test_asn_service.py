"""
Tests for AsnService.

Validates:
- ASN creation with lines, initial statuses and generated ids
- Lookup, listing with filters and pagination
- Status updates, including unknown ASNs and unknown statuses
- A failed insert rolls back the header and every line
"""
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.core.exceptions import NotFoundError, ValidationError
from inbound_wms.models.asn import AdvanceShippingNotice, ASNLineItem, ASNLineStatus, ASNStatus


class TestCreateAsn:

    async def test_creates_pending_asn_with_lines(self, create_asn):
        asn = await create_asn(carrier="UPS", tracking_number="1Z999")

        assert asn.asn_id.startswith("ASN-")
        assert asn.status == ASNStatus.PENDING.value
        assert asn.supplier_id == "SUP-001"
        assert asn.expected_arrival_date == date(2026, 10, 20)
        assert asn.actual_arrival_date is None
        assert asn.carrier == "UPS"
        assert len(asn.line_items) == 2
        for line in asn.line_items:
            assert line.line_item_id.startswith("ASNL-")
            assert line.received_quantity == 0
            assert line.receiving_status == ASNLineStatus.PENDING.value
        by_sku = {line.sku: line for line in asn.line_items}
        assert by_sku["SKU001"].unit_cost == Decimal("12.50")
        assert by_sku["SKU002"].lot_number == "LOT-7"

    async def test_requires_lines(self, db, services):
        with pytest.raises(ValidationError):
            await services.asns.create_asn(
                db,
                supplier_id="SUP-001",
                purchase_order_number="PO-1",
                expected_arrival_date=date(2026, 10, 20),
                lines=[],
                created_by="user-1",
            )

    async def test_requires_supplier(self, db, services, asn_lines):
        with pytest.raises(ValidationError):
            await services.asns.create_asn(
                db,
                supplier_id="",
                purchase_order_number="PO-1",
                expected_arrival_date=date(2026, 10, 20),
                lines=asn_lines,
                created_by="user-1",
            )


class TestCreateAsnRollback:

    async def test_duplicate_sku_rolls_back_whole_asn(self, db, create_asn, monkeypatch):
        rollbacks = []
        original_rollback = AsyncSession.rollback

        async def spy_rollback(self):
            rollbacks.append(self)
            await original_rollback(self)

        monkeypatch.setattr(AsyncSession, "rollback", spy_rollback)

        with pytest.raises(IntegrityError):
            await create_asn(lines=[
                {"sku": "SKU001", "expected_quantity": 10, "unit_cost": Decimal("1.00")},
                {"sku": "SKU001", "expected_quantity": 5, "unit_cost": Decimal("1.00")},
            ])

        assert rollbacks == [db]
        assert (await db.execute(select(func.count(AdvanceShippingNotice.asn_id)))).scalar_one() == 0
        assert (await db.execute(select(func.count(ASNLineItem.line_item_id)))).scalar_one() == 0

    async def test_duplicate_purchase_order_for_supplier(self, db, create_asn):
        await create_asn(supplier_id="SUP-001", purchase_order_number="PO-7")

        with pytest.raises(IntegrityError):
            await create_asn(supplier_id="SUP-001", purchase_order_number="PO-7")

        assert (await db.execute(select(func.count(AdvanceShippingNotice.asn_id)))).scalar_one() == 1
        other_supplier = await create_asn(supplier_id="SUP-002", purchase_order_number="PO-7")
        assert other_supplier.status == ASNStatus.PENDING.value


class TestGetAndListAsns:

    async def test_get_returns_created_asn(self, db, services, create_asn):
        created = await create_asn()
        fetched = await services.asns.get_asn(db, created.asn_id)
        assert fetched.asn_id == created.asn_id
        assert {line.sku for line in fetched.line_items} == {"SKU001", "SKU002"}

    async def test_get_unknown_asn(self, db, services):
        with pytest.raises(NotFoundError) as exc_info:
            await services.asns.get_asn(db, "NONEXISTENT")
        assert str(exc_info.value) == "ASN NONEXISTENT not found"

    async def test_list_filters_and_counts(self, db, services, create_asn):
        first = await create_asn(supplier_id="SUP-001")
        second = await create_asn(supplier_id="SUP-002", purchase_order_number="PO-2002")
        await services.asns.update_asn_status(db, second.asn_id, ASNStatus.IN_TRANSIT)

        asns, total = await services.asns.list_asns(db)
        assert total == 2
        assert {a.asn_id for a in asns} == {first.asn_id, second.asn_id}

        asns, total = await services.asns.list_asns(db, status=ASNStatus.IN_TRANSIT.value)
        assert total == 1
        assert asns[0].asn_id == second.asn_id

        asns, total = await services.asns.list_asns(db, supplier_id="SUP-001")
        assert [a.asn_id for a in asns] == [first.asn_id]

    async def test_list_paginates(self, db, services, create_asn):
        for n in range(3):
            await create_asn(purchase_order_number=f"PO-{n}")
        page, total = await services.asns.list_asns(db, limit=2, offset=0)
        rest, _ = await services.asns.list_asns(db, limit=2, offset=2)
        assert total == 3
        assert len(page) == 2
        assert len(rest) == 1
        assert not {a.asn_id for a in page} & {a.asn_id for a in rest}


class TestUpdateAsnStatus:

    async def test_any_transition_is_accepted(self, db, services, create_asn):
        asn = await create_asn()
        updated = await services.asns.update_asn_status(db, asn.asn_id, "CANCELLED")
        assert updated.status == ASNStatus.CANCELLED.value
        reopened = await services.asns.update_asn_status(db, asn.asn_id, ASNStatus.PENDING)
        assert reopened.status == ASNStatus.PENDING.value

    async def test_unknown_asn(self, db, services):
        with pytest.raises(NotFoundError, match="ASN NONEXISTENT not found"):
            await services.asns.update_asn_status(db, "NONEXISTENT", ASNStatus.RECEIVED)

    async def test_unknown_status(self, db, services, create_asn):
        asn = await create_asn()
        with pytest.raises(ValidationError):
            await services.asns.update_asn_status(db, asn.asn_id, "LOST_AT_SEA")
