"""
Tests for putaway task execution.

Validates:
- Progress reports accumulate and complete a task exactly at its target quantity
- Over-reporting clamps to the target
- A stale in-memory copy of a task never overwrites a newer committed total
- Completing every task completes the receipt
- Assignment, error cases and the work-queue ordering
"""
import pytest
from sqlalchemy import update

from inbound_wms.core.exceptions import InvalidStateError, NotFoundError, ValidationError
from inbound_wms.models.putaway import PutawayPriority, PutawayTask
from inbound_wms.models.receipt import PutawayStatus, ReceiptStatus


@pytest.fixture
def receive(db, services, create_receipt):
    """Receive the given {sku: quantity} and return (receipt, tasks ordered like the lines)."""

    async def _receive(quantities):
        receipt = await create_receipt([
            {"sku": sku, "quantity_ordered": qty, "quantity_received": qty}
            for sku, qty in quantities.items()
        ])
        tasks, _ = await services.putaway.list_tasks(db)
        by_line = {task.receipt_line_id: task for task in tasks}
        return receipt, [by_line[line.receipt_line_id] for line in receipt.line_items]

    return _receive


class TestProgress:

    async def test_partial_progress_accumulates(self, db, services, receive):
        _, [task] = await receive({"SKU001": 100})

        after_first = await services.putaway.update_task(db, task.putaway_task_id, 50, "worker-1")
        assert after_first.quantity_putaway == 50
        assert after_first.status == PutawayStatus.IN_PROGRESS.value

        after_second = await services.putaway.update_task(db, task.putaway_task_id, 25, "worker-1")
        assert after_second.quantity_putaway == 75
        assert after_second.status == PutawayStatus.IN_PROGRESS.value
        assert after_second.completed_at is None
        assert after_second.completed_by is None

    async def test_reaching_target_completes_task(self, db, services, receive):
        _, [task] = await receive({"SKU001": 100})

        await services.putaway.update_task(db, task.putaway_task_id, 95, "worker-1")
        done = await services.putaway.update_task(db, task.putaway_task_id, 5, "worker-2")

        assert done.quantity_putaway == 100
        assert done.status == PutawayStatus.COMPLETED.value
        assert done.completed_at is not None
        assert done.completed_by == "worker-2"

    async def test_over_report_is_clamped(self, db, services, receive):
        _, [task] = await receive({"SKU002": 100})

        await services.putaway.update_task(db, task.putaway_task_id, 90, "worker-1")
        done = await services.putaway.update_task(db, task.putaway_task_id, 20, "worker-1")

        assert done.quantity_putaway == 100
        assert done.status == PutawayStatus.COMPLETED.value

    async def test_stale_copy_does_not_lose_updates(self, session_maker, db, services, receive):
        _, [task] = await receive({"SKU001": 100})
        task_id = task.putaway_task_id

        async with session_maker() as stale_session:
            stale = await services.putaway.get_task(stale_session, task_id)
            assert stale.quantity_putaway == 0

            await services.putaway.update_task(db, task_id, 75, "worker-1")

            # stale_session still holds quantity_putaway == 0 in its identity map
            result = await services.putaway.update_task(stale_session, task_id, 5, "worker-2")
            assert result.quantity_putaway == 80

        final = await services.putaway.get_task(db, task_id)
        assert final.quantity_putaway == 80
        assert final.status == PutawayStatus.IN_PROGRESS.value

    async def test_line_and_receipt_follow_tasks(self, db, services, receive):
        receipt, [first, second] = await receive({"SKU001": 10, "SKU002": 4})

        await services.putaway.update_task(db, first.putaway_task_id, 10, "worker-1")
        midway = await services.receipts.get_receipt(db, receipt.receipt_id)
        statuses = {line.receipt_line_id: line.putaway_status for line in midway.line_items}
        assert statuses[first.receipt_line_id] == PutawayStatus.COMPLETED.value
        assert statuses[second.receipt_line_id] == PutawayStatus.PENDING.value
        assert midway.status == ReceiptStatus.RECEIVING.value

        await services.putaway.update_task(db, second.putaway_task_id, 1, "worker-1")
        midway = await services.receipts.get_receipt(db, receipt.receipt_id)
        statuses = {line.receipt_line_id: line.putaway_status for line in midway.line_items}
        assert statuses[second.receipt_line_id] == PutawayStatus.IN_PROGRESS.value

        await services.putaway.update_task(db, second.putaway_task_id, 3, "worker-1")
        completed = await services.receipts.get_receipt(db, receipt.receipt_id)
        assert completed.status == ReceiptStatus.COMPLETED.value
        assert completed.completed_at is not None
        assert all(line.putaway_status == PutawayStatus.COMPLETED.value for line in completed.line_items)


class TestProgressErrors:

    @pytest.mark.parametrize("delta", [0, -5])
    async def test_rejects_non_positive_delta(self, db, services, receive, delta):
        _, [task] = await receive({"SKU001": 10})
        with pytest.raises(ValidationError):
            await services.putaway.update_task(db, task.putaway_task_id, delta, "worker-1")
        unchanged = await services.putaway.get_task(db, task.putaway_task_id)
        assert unchanged.quantity_putaway == 0

    async def test_unknown_task(self, db, services):
        with pytest.raises(NotFoundError, match="Putaway task PTA-NOPE not found"):
            await services.putaway.update_task(db, "PTA-NOPE", 1, "worker-1")

    async def test_completed_task_rejects_more_progress(self, db, services, receive):
        _, [task] = await receive({"SKU001": 5})
        task_id = task.putaway_task_id
        await services.putaway.update_task(db, task_id, 5, "worker-1")

        # the failed call rolls back, which expires every instance held by the session
        with pytest.raises(InvalidStateError) as exc_info:
            await services.putaway.update_task(db, task_id, 1, "worker-1")
        assert exc_info.value.current_status == PutawayStatus.COMPLETED.value

        final = await services.putaway.get_task(db, task_id)
        assert final.quantity_putaway == 5


class TestAssign:

    async def test_assign_moves_task_in_progress(self, db, services, receive):
        receipt, [task] = await receive({"SKU003": 12})

        assigned = await services.putaway.assign_task(db, task.putaway_task_id, "worker-9")

        assert assigned.assigned_to == "worker-9"
        assert assigned.assigned_at is not None
        assert assigned.status == PutawayStatus.IN_PROGRESS.value
        assert assigned.quantity_putaway == 0
        reloaded = await services.receipts.get_receipt(db, receipt.receipt_id)
        assert reloaded.line_items[0].putaway_status == PutawayStatus.IN_PROGRESS.value

    async def test_reassign_keeps_progress(self, db, services, receive):
        _, [task] = await receive({"SKU001": 10})
        await services.putaway.update_task(db, task.putaway_task_id, 4, "worker-1")

        reassigned = await services.putaway.assign_task(db, task.putaway_task_id, "worker-2")
        assert reassigned.assigned_to == "worker-2"
        assert reassigned.quantity_putaway == 4

    async def test_assign_completed_task(self, db, services, receive):
        _, [task] = await receive({"SKU001": 1})
        await services.putaway.update_task(db, task.putaway_task_id, 1, "worker-1")
        with pytest.raises(InvalidStateError):
            await services.putaway.assign_task(db, task.putaway_task_id, "worker-2")

    async def test_assign_unknown_task(self, db, services):
        with pytest.raises(NotFoundError):
            await services.putaway.assign_task(db, "PTA-NOPE", "worker-1")


class TestListTasks:

    async def test_urgent_first_then_oldest(self, db, services, receive):
        _, [normal, urgent, low] = await receive({"SKU001": 1, "SKU002": 1, "SKU003": 1})
        await db.execute(
            update(PutawayTask)
            .where(PutawayTask.putaway_task_id == urgent.putaway_task_id)
            .values(priority=PutawayPriority.URGENT.value)
        )
        await db.execute(
            update(PutawayTask)
            .where(PutawayTask.putaway_task_id == low.putaway_task_id)
            .values(priority=PutawayPriority.LOW.value)
        )
        await db.commit()

        tasks, total = await services.putaway.list_tasks(db)
        assert total == 3
        assert [t.putaway_task_id for t in tasks] == [
            urgent.putaway_task_id, normal.putaway_task_id, low.putaway_task_id,
        ]

    async def test_filters(self, db, services, receive):
        _, [first, second] = await receive({"SKU001": 3, "SKU002": 3})
        await services.putaway.assign_task(db, first.putaway_task_id, "worker-1")

        tasks, total = await services.putaway.list_tasks(db, assigned_to="worker-1")
        assert total == 1
        assert tasks[0].putaway_task_id == first.putaway_task_id

        tasks, total = await services.putaway.list_tasks(db, status=PutawayStatus.PENDING.value)
        assert [t.putaway_task_id for t in tasks] == [second.putaway_task_id]
