"""INBOUND WMS - Inbound dashboard endpoint."""
from fastapi import APIRouter

from inbound_wms.api.deps import DbSession, Services
from inbound_wms.schemas.common import ApiResponse
from inbound_wms.schemas.dashboard import InboundDashboard

router = APIRouter()


@router.get("", response_model=ApiResponse[InboundDashboard])
async def get_dashboard(db: DbSession, services: Services):
    metrics = await services.dashboard.get_metrics(db)
    return ApiResponse(data=InboundDashboard(**metrics))
