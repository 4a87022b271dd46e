"""INBOUND WMS - Receipt endpoints."""
from fastapi import APIRouter, Query, status

from inbound_wms.api.deps import DbSession, Page, Services
from inbound_wms.models.receipt import ReceiptStatus, ReceiptType
from inbound_wms.schemas.common import ApiResponse, Meta
from inbound_wms.schemas.receipt import ReceiptCreate, ReceiptResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[list[ReceiptResponse]])
async def list_receipts(
    db: DbSession,
    services: Services,
    page: Page,
    status_filter: ReceiptStatus | None = Query(None, alias="status"),
    asn_id: str | None = Query(None),
    receipt_type: ReceiptType | None = Query(None),
):
    receipts, total = await services.receipts.list_receipts(
        db,
        status=status_filter.value if status_filter else None,
        asn_id=asn_id,
        receipt_type=receipt_type.value if receipt_type else None,
        limit=page.limit,
        offset=page.offset,
    )
    return ApiResponse(
        data=[ReceiptResponse.model_validate(r) for r in receipts],
        meta=Meta(limit=page.limit, offset=page.offset, total_count=total),
    )


@router.post("", response_model=ApiResponse[ReceiptResponse], status_code=status.HTTP_201_CREATED)
async def create_receipt(body: ReceiptCreate, db: DbSession, services: Services):
    """
    Record received goods, optionally against an ASN.
    Creates one putaway task per line; an unknown SKU rejects the whole receipt.
    """
    receipt = await services.receipts.create_receipt(
        db,
        receipt_type=body.receipt_type,
        received_by=body.received_by,
        lines=[line.model_dump() for line in body.line_items],
        asn_id=body.asn_id,
    )
    return ApiResponse(data=ReceiptResponse.model_validate(receipt))


@router.get("/{receipt_id}", response_model=ApiResponse[ReceiptResponse])
async def get_receipt(receipt_id: str, db: DbSession, services: Services):
    receipt = await services.receipts.get_receipt(db, receipt_id)
    return ApiResponse(data=ReceiptResponse.model_validate(receipt))
