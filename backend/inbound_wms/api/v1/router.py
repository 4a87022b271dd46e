"""INBOUND WMS - API v1 router aggregation."""
from fastapi import APIRouter

from inbound_wms.api.v1.endpoints import asns, dashboard, putaway_tasks, receipts

api_router = APIRouter()

api_router.include_router(asns.router, prefix="/inbound/asns", tags=["asns"])
api_router.include_router(receipts.router, prefix="/inbound/receipts", tags=["receipts"])
api_router.include_router(putaway_tasks.router, prefix="/inbound/putaway-tasks", tags=["putaway"])
api_router.include_router(dashboard.router, prefix="/inbound/dashboard", tags=["dashboard"])
