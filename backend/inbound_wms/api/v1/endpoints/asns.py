"""INBOUND WMS - Advance Shipment Notice endpoints."""
from fastapi import APIRouter, Query, status

from inbound_wms.api.deps import DbSession, Page, Services
from inbound_wms.models.asn import ASNStatus
from inbound_wms.schemas.asn import ASNCreate, ASNResponse, ASNStatusUpdate
from inbound_wms.schemas.common import ApiResponse, Meta

router = APIRouter()


@router.get("", response_model=ApiResponse[list[ASNResponse]])
async def list_asns(
    db: DbSession,
    services: Services,
    page: Page,
    status_filter: ASNStatus | None = Query(None, alias="status"),
    supplier_id: str | None = Query(None),
):
    """List ASNs, newest first, with their line items."""
    asns, total = await services.asns.list_asns(
        db,
        status=status_filter.value if status_filter else None,
        supplier_id=supplier_id,
        limit=page.limit,
        offset=page.offset,
    )
    return ApiResponse(
        data=[ASNResponse.model_validate(asn) for asn in asns],
        meta=Meta(limit=page.limit, offset=page.offset, total_count=total),
    )


@router.post("", response_model=ApiResponse[ASNResponse], status_code=status.HTTP_201_CREATED)
async def create_asn(body: ASNCreate, db: DbSession, services: Services):
    """Register an inbound shipment notice in PENDING status."""
    asn = await services.asns.create_asn(
        db,
        supplier_id=body.supplier_id,
        purchase_order_number=body.purchase_order_number,
        expected_arrival_date=body.expected_arrival_date,
        lines=[line.model_dump() for line in body.line_items],
        created_by=body.created_by,
        carrier=body.carrier,
        tracking_number=body.tracking_number,
        shipment_notes=body.shipment_notes,
    )
    return ApiResponse(data=ASNResponse.model_validate(asn))


@router.get("/{asn_id}", response_model=ApiResponse[ASNResponse])
async def get_asn(asn_id: str, db: DbSession, services: Services):
    asn = await services.asns.get_asn(db, asn_id)
    return ApiResponse(data=ASNResponse.model_validate(asn))


@router.patch("/{asn_id}/status", response_model=ApiResponse[ASNResponse])
async def update_asn_status(asn_id: str, body: ASNStatusUpdate, db: DbSession, services: Services):
    """Set the ASN status (no transition rules are enforced)."""
    asn = await services.asns.update_asn_status(db, asn_id, body.status)
    return ApiResponse(data=ASNResponse.model_validate(asn))
