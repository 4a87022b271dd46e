"""INBOUND WMS - SQLAlchemy models."""
from inbound_wms.models.asn import AdvanceShippingNotice, ASNLineItem, ASNLineStatus, ASNStatus
from inbound_wms.models.putaway import PutawayPriority, PutawayTask
from inbound_wms.models.receipt import (
    PutawayStatus,
    QualityStatus,
    Receipt,
    ReceiptLineItem,
    ReceiptStatus,
    ReceiptType,
)
from inbound_wms.models.sku import SKU

__all__ = [
    "AdvanceShippingNotice", "ASNLineItem", "ASNStatus", "ASNLineStatus",
    "Receipt", "ReceiptLineItem", "ReceiptType", "ReceiptStatus", "QualityStatus", "PutawayStatus",
    "PutawayTask", "PutawayPriority",
    "SKU",
]
