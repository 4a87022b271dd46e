"""INBOUND WMS - Putaway task endpoints."""
from fastapi import APIRouter, Query

from inbound_wms.api.deps import DbSession, Page, Services
from inbound_wms.models.receipt import PutawayStatus
from inbound_wms.schemas.common import ApiResponse, Meta
from inbound_wms.schemas.putaway import PutawayAssignRequest, PutawayProgressRequest, PutawayTaskResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[list[PutawayTaskResponse]])
async def list_putaway_tasks(
    db: DbSession,
    services: Services,
    page: Page,
    status_filter: PutawayStatus | None = Query(None, alias="status"),
    assigned_to: str | None = Query(None),
):
    """Work queue: most urgent first, then oldest first."""
    tasks, total = await services.putaway.list_tasks(
        db,
        status=status_filter.value if status_filter else None,
        assigned_to=assigned_to,
        limit=page.limit,
        offset=page.offset,
    )
    return ApiResponse(
        data=[PutawayTaskResponse.model_validate(t) for t in tasks],
        meta=Meta(limit=page.limit, offset=page.offset, total_count=total),
    )


@router.get("/{putaway_task_id}", response_model=ApiResponse[PutawayTaskResponse])
async def get_putaway_task(putaway_task_id: str, db: DbSession, services: Services):
    task = await services.putaway.get_task(db, putaway_task_id)
    return ApiResponse(data=PutawayTaskResponse.model_validate(task))


@router.post("/{putaway_task_id}/assign", response_model=ApiResponse[PutawayTaskResponse])
async def assign_putaway_task(
    putaway_task_id: str,
    body: PutawayAssignRequest,
    db: DbSession,
    services: Services,
):
    task = await services.putaway.assign_task(db, putaway_task_id, body.user_id)
    return ApiResponse(data=PutawayTaskResponse.model_validate(task))


@router.post("/{putaway_task_id}/progress", response_model=ApiResponse[PutawayTaskResponse])
async def report_putaway_progress(
    putaway_task_id: str,
    body: PutawayProgressRequest,
    db: DbSession,
    services: Services,
):
    """Report units shelved since the last report; completes the task when the total is reached."""
    task = await services.putaway.update_task(
        db, putaway_task_id, body.quantity_putaway, body.user_id
    )
    return ApiResponse(data=PutawayTaskResponse.model_validate(task))
