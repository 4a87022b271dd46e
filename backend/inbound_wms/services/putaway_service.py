"""INBOUND WMS - Putaway task generation and execution (assign, progress, completion)."""
import logging
from datetime import datetime

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.core.exceptions import InvalidStateError, NotFoundError, ValidationError
from inbound_wms.core.ids import IdGenerator
from inbound_wms.db.base import utcnow
from inbound_wms.db.session import lock_row, transaction
from inbound_wms.models.putaway import PutawayPriority, PutawayTask
from inbound_wms.models.receipt import PutawayStatus, Receipt, ReceiptLineItem, ReceiptStatus
from inbound_wms.services.sku_bin_lookup import BinLocationLookup

logger = logging.getLogger(__name__)

# URGENT first, LOW last
_PRIORITY_RANK = case(
    {
        PutawayPriority.URGENT.value: 0,
        PutawayPriority.HIGH.value: 1,
        PutawayPriority.NORMAL.value: 2,
        PutawayPriority.LOW.value: 3,
    },
    value=PutawayTask.priority,
    else_=4,
)


class PutawayTaskGenerator:
    """One putaway task per receipt line, targeting the first bin registered for the SKU."""

    def __init__(
        self,
        bin_lookup: BinLocationLookup,
        id_generator: IdGenerator,
        default_priority: str = PutawayPriority.NORMAL.value,
    ):
        self.bin_lookup = bin_lookup
        self.ids = id_generator
        self.default_priority = PutawayPriority(default_priority).value

    async def create_for_receipt_line(self, db: AsyncSession, line: ReceiptLineItem) -> PutawayTask:
        """
        Create the task for a freshly inserted receipt line.

        Runs inside the caller's transaction. Raises NotFoundError("SKU ...") when
        no bins are registered, which aborts the whole receipt.
        """
        bins = await self.bin_lookup.bin_locations_for(db, line.sku)
        if not bins:
            raise NotFoundError("SKU", line.sku)

        # Damaged units are not subtracted: the task covers everything received.
        task = PutawayTask(
            putaway_task_id=self.ids.new_putaway_task_id(),
            receipt_line_id=line.receipt_line_id,
            sku=line.sku,
            quantity_to_putaway=line.quantity_received,
            quantity_putaway=0,
            target_bin_location=bins[0],
            status=PutawayStatus.PENDING.value,
            priority=self.default_priority,
        )
        db.add(task)
        await db.flush()
        return task


class PutawayService:
    """Putaway execution: PENDING -> IN_PROGRESS -> COMPLETED, with row-level locking."""

    def __init__(self, default_page_size: int = 50):
        self.default_page_size = default_page_size

    async def list_tasks(
        self,
        db: AsyncSession,
        *,
        status: str | None = None,
        assigned_to: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[PutawayTask], int]:
        """Paginated tasks, most urgent first, then oldest first."""
        q = select(PutawayTask)
        count_q = select(func.count(PutawayTask.putaway_task_id))
        if status:
            q = q.where(PutawayTask.status == status)
            count_q = count_q.where(PutawayTask.status == status)
        if assigned_to:
            q = q.where(PutawayTask.assigned_to == assigned_to)
            count_q = count_q.where(PutawayTask.assigned_to == assigned_to)

        total = (await db.execute(count_q)).scalar_one()
        q = (
            q.order_by(_PRIORITY_RANK, PutawayTask.created_at.asc(), PutawayTask.putaway_task_id)
            .offset(offset)
            .limit(limit or self.default_page_size)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(q)
        return list(result.scalars().all()), total

    async def get_task(self, db: AsyncSession, putaway_task_id: str) -> PutawayTask:
        result = await db.execute(
            select(PutawayTask)
            .where(PutawayTask.putaway_task_id == putaway_task_id)
            .execution_options(populate_existing=True)
        )
        task = result.scalar_one_or_none()
        if task is None:
            raise NotFoundError("Putaway task", putaway_task_id)
        return task

    async def assign_task(self, db: AsyncSession, putaway_task_id: str, user_id: str) -> PutawayTask:
        """Claim a task for a worker. Claiming alone moves it to IN_PROGRESS."""
        async with transaction(db, "assign_putaway_task", putaway_task_id=putaway_task_id, user_id=user_id):
            task = await self._lock_task(db, putaway_task_id)
            if task.status == PutawayStatus.COMPLETED.value:
                raise InvalidStateError(
                    f"Putaway task {putaway_task_id} is already completed", task.status
                )
            now = utcnow()
            task.assigned_to = user_id
            task.assigned_at = now
            task.status = PutawayStatus.IN_PROGRESS.value
            task.updated_at = now
            await self._mark_line(db, task.receipt_line_id, PutawayStatus.IN_PROGRESS)
            await db.flush()

        logger.info("Putaway task assigned: %s -> %s", putaway_task_id, user_id,
                    extra={"putaway_task_id": putaway_task_id, "user_id": user_id})
        return task

    async def update_task(
        self,
        db: AsyncSession,
        putaway_task_id: str,
        quantity_putaway: int,
        user_id: str,
    ) -> PutawayTask:
        """
        Record ``quantity_putaway`` more units shelved for a task.

        The task row is locked for the whole unit of work, so concurrent reporters
        are serialized and each sees the previous writer's committed total. Reaching
        quantity_to_putaway clamps the total, completes the task and its receipt
        line, and completes the receipt once every line is put away.
        """
        if quantity_putaway <= 0:
            raise ValidationError("quantity_putaway must be greater than zero")

        async with transaction(db, "update_putaway_task", putaway_task_id=putaway_task_id, user_id=user_id):
            task = await self._lock_task(db, putaway_task_id)
            if task.status == PutawayStatus.COMPLETED.value:
                raise InvalidStateError(
                    f"Putaway task {putaway_task_id} is already completed", task.status
                )

            now = utcnow()
            new_total = task.quantity_putaway + quantity_putaway
            if new_total >= task.quantity_to_putaway:
                task.quantity_putaway = task.quantity_to_putaway
                task.status = PutawayStatus.COMPLETED.value
                task.completed_at = now
                task.completed_by = user_id
                line = await self._mark_line(db, task.receipt_line_id, PutawayStatus.COMPLETED)
                await self._complete_receipt_if_done(db, line.receipt_id, now)
            else:
                task.quantity_putaway = new_total
                task.status = PutawayStatus.IN_PROGRESS.value
                await self._mark_line(db, task.receipt_line_id, PutawayStatus.IN_PROGRESS)
            task.updated_at = now
            await db.flush()

        logger.info(
            "Putaway task updated: %s +%s (%s/%s, %s)",
            putaway_task_id, quantity_putaway, task.quantity_putaway, task.quantity_to_putaway, task.status,
            extra={"putaway_task_id": putaway_task_id, "quantity_putaway": quantity_putaway, "user_id": user_id},
        )
        return task

    async def _lock_task(self, db: AsyncSession, putaway_task_id: str) -> PutawayTask:
        task = await lock_row(db, select(PutawayTask).where(PutawayTask.putaway_task_id == putaway_task_id))
        if task is None:
            raise NotFoundError("Putaway task", putaway_task_id)
        return task

    async def _mark_line(
        self,
        db: AsyncSession,
        receipt_line_id: str,
        status: PutawayStatus,
    ) -> ReceiptLineItem:
        """Propagate task progress to the owning receipt line. Never moves a line backwards."""
        line = await lock_row(db, select(ReceiptLineItem).where(ReceiptLineItem.receipt_line_id == receipt_line_id))
        if line is None:
            raise NotFoundError("Receipt line", receipt_line_id)
        if status == PutawayStatus.COMPLETED or line.putaway_status == PutawayStatus.PENDING.value:
            line.putaway_status = status.value
        await db.flush()
        return line

    async def _complete_receipt_if_done(self, db: AsyncSession, receipt_id: str, now: datetime) -> None:
        remaining = (await db.execute(
            select(func.count(ReceiptLineItem.receipt_line_id)).where(
                ReceiptLineItem.receipt_id == receipt_id,
                ReceiptLineItem.putaway_status != PutawayStatus.COMPLETED.value,
            )
        )).scalar_one()
        if remaining:
            return

        receipt = await lock_row(db, select(Receipt).where(Receipt.receipt_id == receipt_id))
        if receipt is None:
            raise NotFoundError("Receipt", receipt_id)
        receipt.status = ReceiptStatus.COMPLETED.value
        receipt.completed_at = now
        await db.flush()
        logger.info("Receipt completed: %s", receipt_id, extra={"receipt_id": receipt_id})
