"""INBOUND WMS - DashboardService: read-only inbound counts."""
from datetime import datetime, time, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.models.asn import AdvanceShippingNotice, ASNStatus
from inbound_wms.models.putaway import PutawayTask
from inbound_wms.models.receipt import PutawayStatus, Receipt, ReceiptStatus


class DashboardService:
    """Inwards-goods KPI counts."""

    async def get_metrics(self, db: AsyncSession, now: datetime | None = None) -> dict:
        """Counts of open ASNs, receipts and putaway work, plus today's throughput (UTC day)."""
        now = now or datetime.now(timezone.utc)
        start_of_day = datetime.combine(now.date(), time.min, tzinfo=timezone.utc)

        async def count(stmt) -> int:
            return int((await db.execute(stmt)).scalar_one())

        return {
            "pending_asns": await count(
                select(func.count(AdvanceShippingNotice.asn_id))
                .where(AdvanceShippingNotice.status == ASNStatus.PENDING.value)
            ),
            "in_transit_asns": await count(
                select(func.count(AdvanceShippingNotice.asn_id))
                .where(AdvanceShippingNotice.status == ASNStatus.IN_TRANSIT.value)
            ),
            "active_receipts": await count(
                select(func.count(Receipt.receipt_id))
                .where(Receipt.status == ReceiptStatus.RECEIVING.value)
            ),
            "pending_putaway": await count(
                select(func.count(PutawayTask.putaway_task_id))
                .where(PutawayTask.status == PutawayStatus.PENDING.value)
            ),
            "in_progress_putaway": await count(
                select(func.count(PutawayTask.putaway_task_id))
                .where(PutawayTask.status == PutawayStatus.IN_PROGRESS.value)
            ),
            "today_received": await count(
                select(func.count(Receipt.receipt_id)).where(Receipt.created_at >= start_of_day)
            ),
            "today_putaway": await count(
                select(func.count(PutawayTask.putaway_task_id)).where(PutawayTask.completed_at >= start_of_day)
            ),
        }
