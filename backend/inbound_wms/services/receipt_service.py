"""INBOUND WMS - ReceiptService: atomic receipt recording with putaway task generation."""
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.core.exceptions import NotFoundError, ValidationError
from inbound_wms.core.ids import IdGenerator
from inbound_wms.db.base import utcnow
from inbound_wms.db.session import lock_row, transaction
from inbound_wms.models.asn import AdvanceShippingNotice, ASNLineItem, ASNLineStatus, ASNStatus
from inbound_wms.models.receipt import (
    PutawayStatus,
    QualityStatus,
    Receipt,
    ReceiptLineItem,
    ReceiptStatus,
    ReceiptType,
)
from inbound_wms.services.putaway_service import PutawayTaskGenerator

logger = logging.getLogger(__name__)


class ReceiptService:
    """Records physical receipts, against an ASN or standalone."""

    def __init__(
        self,
        id_generator: IdGenerator,
        task_generator: PutawayTaskGenerator,
        default_page_size: int = 50,
    ):
        self.ids = id_generator
        self.task_generator = task_generator
        self.default_page_size = default_page_size

    async def create_receipt(
        self,
        db: AsyncSession,
        receipt_type: ReceiptType | str,
        received_by: str,
        lines: list[dict],
        asn_id: str | None = None,
    ) -> Receipt:
        """
        Receive goods as one atomic business event.

        - Inserts the receipt (RECEIVING) and every line with its total cost.
        - Creates one putaway task per line in the same transaction.
        - Posts received quantities to referenced ASN lines and rolls up ASN status.
        Any failure, including an unknown SKU, rolls all of it back.
        """
        try:
            receipt_type = ReceiptType(receipt_type)
        except ValueError:
            raise ValidationError(f"Unknown receipt type: {receipt_type}") from None
        if not received_by:
            raise ValidationError("received_by is required")
        if not lines:
            raise ValidationError("A receipt needs at least one line item")

        receipt_id = self.ids.new_receipt_id()
        async with transaction(db, "create_receipt", receipt_id=receipt_id, asn_id=asn_id):
            if asn_id is not None:
                asn = (await db.execute(
                    select(AdvanceShippingNotice.asn_id).where(AdvanceShippingNotice.asn_id == asn_id)
                )).scalar_one_or_none()
                if asn is None:
                    raise NotFoundError("ASN", asn_id)

            receipt = Receipt(
                receipt_id=receipt_id,
                asn_id=asn_id,
                receipt_type=receipt_type.value,
                status=ReceiptStatus.RECEIVING.value,
                received_by=received_by,
                line_items=[],
            )
            db.add(receipt)
            await db.flush()

            inserted: list[ReceiptLineItem] = []
            for line_data in lines:
                quantity_received = int(line_data["quantity_received"])
                if quantity_received <= 0:
                    raise ValidationError(f"quantity_received must be positive for SKU {line_data['sku']}")
                unit_cost = Decimal(str(line_data.get("unit_cost") or 0))
                line = ReceiptLineItem(
                    receipt_line_id=self.ids.new_receipt_line_id(),
                    asn_line_item_id=line_data.get("asn_line_item_id"),
                    sku=line_data["sku"],
                    quantity_ordered=int(line_data.get("quantity_ordered", quantity_received)),
                    quantity_received=quantity_received,
                    quantity_damaged=int(line_data.get("quantity_damaged", 0)),
                    unit_cost=unit_cost,
                    total_cost=unit_cost * quantity_received,
                    quality_status=QualityStatus.PENDING.value,
                    putaway_status=PutawayStatus.PENDING.value,
                    lot_number=line_data.get("lot_number"),
                    expiration_date=line_data.get("expiration_date"),
                    notes=line_data.get("notes"),
                )
                receipt.line_items.append(line)
                await db.flush()
                inserted.append(line)

            for line in inserted:
                await self.task_generator.create_for_receipt_line(db, line)

            touched_asns: set[str] = set()
            for line in inserted:
                if line.asn_line_item_id:
                    touched_asns.add(await self._post_to_asn_line(db, line, asn_id))
            for touched in sorted(touched_asns):
                await self._roll_up_asn_status(db, touched)

        logger.info("Receipt created: %s", receipt_id,
                    extra={"receipt_id": receipt_id, "asn_id": asn_id, "line_count": len(lines)})
        return await self.get_receipt(db, receipt_id)

    async def get_receipt(self, db: AsyncSession, receipt_id: str) -> Receipt:
        """Get a single receipt with its lines (selectin loaded)."""
        result = await db.execute(
            select(Receipt)
            .where(Receipt.receipt_id == receipt_id)
            .execution_options(populate_existing=True)
        )
        receipt = result.scalar_one_or_none()
        if receipt is None:
            raise NotFoundError("Receipt", receipt_id)
        return receipt

    async def list_receipts(
        self,
        db: AsyncSession,
        *,
        status: str | None = None,
        asn_id: str | None = None,
        receipt_type: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Receipt], int]:
        """Paginated receipts, newest first, each hydrated with its lines."""
        q = select(Receipt)
        count_q = select(func.count(Receipt.receipt_id))
        if status:
            q = q.where(Receipt.status == status)
            count_q = count_q.where(Receipt.status == status)
        if asn_id:
            q = q.where(Receipt.asn_id == asn_id)
            count_q = count_q.where(Receipt.asn_id == asn_id)
        if receipt_type:
            q = q.where(Receipt.receipt_type == receipt_type)
            count_q = count_q.where(Receipt.receipt_type == receipt_type)

        total = (await db.execute(count_q)).scalar_one()
        q = (
            q.order_by(Receipt.created_at.desc(), Receipt.receipt_id)
            .offset(offset)
            .limit(limit or self.default_page_size)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(q)
        return list(result.scalars().all()), total

    async def _post_to_asn_line(self, db: AsyncSession, line: ReceiptLineItem, asn_id: str | None) -> str:
        """Add a receipt line's quantity to its ASN line. Returns the ASN id touched."""
        asn_line = await lock_row(
            db, select(ASNLineItem).where(ASNLineItem.line_item_id == line.asn_line_item_id)
        )
        if asn_line is None or (asn_id is not None and asn_line.asn_id != asn_id):
            raise NotFoundError("ASN line item", line.asn_line_item_id)

        asn_line.received_quantity += line.quantity_received
        if asn_line.received_quantity >= asn_line.expected_quantity:
            asn_line.receiving_status = ASNLineStatus.COMPLETE.value
        else:
            asn_line.receiving_status = ASNLineStatus.PARTIAL.value
        await db.flush()
        return asn_line.asn_id

    async def _roll_up_asn_status(self, db: AsyncSession, asn_id: str) -> None:
        """RECEIVED once every ASN line is complete, PARTIALLY_RECEIVED before that."""
        open_lines = (await db.execute(
            select(func.count(ASNLineItem.line_item_id)).where(
                ASNLineItem.asn_id == asn_id,
                ASNLineItem.receiving_status != ASNLineStatus.COMPLETE.value,
            )
        )).scalar_one()

        asn = await lock_row(db, select(AdvanceShippingNotice).where(AdvanceShippingNotice.asn_id == asn_id))
        now = utcnow()
        asn.status = ASNStatus.PARTIALLY_RECEIVED.value if open_lines else ASNStatus.RECEIVED.value
        if asn.actual_arrival_date is None:
            asn.actual_arrival_date = now.date()
        if asn.received_at is None:
            asn.received_at = now
        asn.updated_at = now
        await db.flush()
        logger.info("ASN %s now %s", asn_id, asn.status, extra={"asn_id": asn_id, "status": asn.status})
