"""INBOUND WMS - Prefixed, human-readable identifiers for inbound entities."""
import secrets
import string
from enum import Enum
from typing import NewType

AsnId = NewType("AsnId", str)
AsnLineItemId = NewType("AsnLineItemId", str)
ReceiptId = NewType("ReceiptId", str)
ReceiptLineId = NewType("ReceiptLineId", str)
PutawayTaskId = NewType("PutawayTaskId", str)

_ALPHABET = string.ascii_uppercase + string.digits


class EntityKind(str, Enum):
    """Entity kind -> display prefix."""

    ASN = "ASN"
    ASN_LINE_ITEM = "ASNL"
    RECEIPT = "RCP"
    RECEIPT_LINE = "RCPL"
    PUTAWAY_TASK = "PTA"

    @property
    def prefix(self) -> str:
        return self.value


class IdGenerator:
    """Produces ids such as ``ASN-7QK2M9XD0A``: kind prefix, dash, random suffix."""

    def __init__(self, suffix_length: int = 10):
        if suffix_length < 4:
            raise ValueError("suffix_length must be at least 4")
        self.suffix_length = suffix_length

    def new(self, kind: EntityKind) -> str:
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(self.suffix_length))
        return f"{kind.prefix}-{suffix}"

    def new_asn_id(self) -> AsnId:
        return AsnId(self.new(EntityKind.ASN))

    def new_asn_line_item_id(self) -> AsnLineItemId:
        return AsnLineItemId(self.new(EntityKind.ASN_LINE_ITEM))

    def new_receipt_id(self) -> ReceiptId:
        return ReceiptId(self.new(EntityKind.RECEIPT))

    def new_receipt_line_id(self) -> ReceiptLineId:
        return ReceiptLineId(self.new(EntityKind.RECEIPT_LINE))

    def new_putaway_task_id(self) -> PutawayTaskId:
        return PutawayTaskId(self.new(EntityKind.PUTAWAY_TASK))
