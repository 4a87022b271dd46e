"""INBOUND WMS - Dashboard schemas."""
from pydantic import BaseModel


class InboundDashboard(BaseModel):
    pending_asns: int
    in_transit_asns: int
    active_receipts: int
    pending_putaway: int
    in_progress_putaway: int
    today_received: int
    today_putaway: int
