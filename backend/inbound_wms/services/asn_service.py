"""INBOUND WMS - AsnService: create, get, list and status updates for Advance Shipment Notices."""
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.core.exceptions import NotFoundError, ValidationError
from inbound_wms.core.ids import IdGenerator
from inbound_wms.db.base import utcnow
from inbound_wms.db.session import lock_row, transaction
from inbound_wms.models.asn import AdvanceShippingNotice, ASNLineItem, ASNLineStatus, ASNStatus

logger = logging.getLogger(__name__)


class AsnService:
    """CRUD over ASNs and their line items."""

    def __init__(self, id_generator: IdGenerator, default_page_size: int = 50):
        self.ids = id_generator
        self.default_page_size = default_page_size

    async def create_asn(
        self,
        db: AsyncSession,
        supplier_id: str,
        purchase_order_number: str,
        expected_arrival_date: date,
        lines: list[dict],
        created_by: str,
        carrier: str | None = None,
        tracking_number: str | None = None,
        shipment_notes: str | None = None,
    ) -> AdvanceShippingNotice:
        """Create an ASN in PENDING status with all of its lines, atomically."""
        if not supplier_id or not purchase_order_number or not created_by:
            raise ValidationError("supplier_id, purchase_order_number and created_by are required")
        if not lines:
            raise ValidationError("An ASN needs at least one line item")

        asn_id = self.ids.new_asn_id()
        async with transaction(db, "create_asn", asn_id=asn_id, supplier_id=supplier_id):
            # Header row is inserted ahead of its lines by the unit of work.
            asn = AdvanceShippingNotice(
                asn_id=asn_id,
                supplier_id=supplier_id,
                purchase_order_number=purchase_order_number,
                status=ASNStatus.PENDING.value,
                expected_arrival_date=expected_arrival_date,
                carrier=carrier,
                tracking_number=tracking_number,
                shipment_notes=shipment_notes,
                created_by=created_by,
                line_items=[
                    ASNLineItem(
                        line_item_id=self.ids.new_asn_line_item_id(),
                        sku=line_data["sku"],
                        expected_quantity=int(line_data["expected_quantity"]),
                        received_quantity=0,
                        unit_cost=Decimal(str(line_data["unit_cost"])),
                        lot_number=line_data.get("lot_number"),
                        expiration_date=line_data.get("expiration_date"),
                        receiving_status=ASNLineStatus.PENDING.value,
                        line_notes=line_data.get("line_notes"),
                    )
                    for line_data in lines
                ],
            )
            db.add(asn)
            await db.flush()

        logger.info("ASN created: %s", asn_id, extra={"asn_id": asn_id, "supplier_id": supplier_id})
        return await self.get_asn(db, asn_id)

    async def get_asn(self, db: AsyncSession, asn_id: str) -> AdvanceShippingNotice:
        """Get a single ASN with its lines (selectin loaded)."""
        result = await db.execute(
            select(AdvanceShippingNotice)
            .where(AdvanceShippingNotice.asn_id == asn_id)
            .execution_options(populate_existing=True)
        )
        asn = result.scalar_one_or_none()
        if asn is None:
            raise NotFoundError("ASN", asn_id)
        return asn

    async def list_asns(
        self,
        db: AsyncSession,
        *,
        status: str | None = None,
        supplier_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[AdvanceShippingNotice], int]:
        """Paginated ASNs, newest first, each hydrated with its lines."""
        q = select(AdvanceShippingNotice)
        count_q = select(func.count(AdvanceShippingNotice.asn_id))
        if status:
            q = q.where(AdvanceShippingNotice.status == status)
            count_q = count_q.where(AdvanceShippingNotice.status == status)
        if supplier_id:
            q = q.where(AdvanceShippingNotice.supplier_id == supplier_id)
            count_q = count_q.where(AdvanceShippingNotice.supplier_id == supplier_id)

        total = (await db.execute(count_q)).scalar_one()
        q = (
            q.order_by(AdvanceShippingNotice.created_at.desc(), AdvanceShippingNotice.asn_id)
            .offset(offset)
            .limit(limit or self.default_page_size)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(q)
        return list(result.scalars().all()), total

    async def update_asn_status(
        self,
        db: AsyncSession,
        asn_id: str,
        status: ASNStatus | str,
    ) -> AdvanceShippingNotice:
        """Set the ASN status. Any status may follow any other."""
        try:
            new_status = ASNStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown ASN status: {status}") from None

        async with transaction(db, "update_asn_status", asn_id=asn_id, status=new_status.value):
            asn = await lock_row(db, select(AdvanceShippingNotice).where(AdvanceShippingNotice.asn_id == asn_id))
            if asn is None:
                raise NotFoundError("ASN", asn_id)
            asn.status = new_status.value
            asn.updated_at = utcnow()
            await db.flush()

        logger.info("ASN status updated: %s -> %s", asn_id, new_status.value,
                    extra={"asn_id": asn_id, "status": new_status.value})
        return await self.get_asn(db, asn_id)
